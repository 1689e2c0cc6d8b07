#!/usr/bin/env python3

"""
Module for reading, validating and writing TSX files (Tiled tileset format)
Supports tilesets written by Tiled 1.11 and earlier versions

=============================================================================
WHAT IS TSX?
=============================================================================

TSX (Tiled Set XML) is the external tileset format of the Tiled Map Editor.
A TSX file describes one spritesheet and the metadata attached to its tiles:

- Tile size and grid layout (columns, tile count, spacing, margin)
- The spritesheet image the tiles are cut from
- Sparse per-tile metadata: a type tag and typed custom properties

Maps (.tmx) reference TSX files by path, and game engines read them at
asset-load time to know which tiles are enemies, doors, pickups, etc.

This module provides strict read/write support for TSX files:
- Loading a tileset into immutable, typed Python objects
- Rejecting malformed or inconsistent files instead of guessing
- Writing a tileset back to TSX

=============================================================================
TSX FILE STRUCTURE
=============================================================================

    <tileset version="1.10" tiledversion="1.11.2" name="GeneralSpritesheet"
             tilewidth="16" tileheight="16" tilecount="100" columns="10">
        <image source="spritesheet.png" width="160" height="160"/>
        <tile id="17" type="enemy">
            <properties>
                <property name="renderLayer" value="CHARACTERS"/>
                <property name="speed" type="float" value="0.8"/>
            </properties>
        </tile>
    </tileset>

Only tiles with metadata are listed. Every other index in [0, tilecount)
is a plain tile: no type, no properties, drawn from grid geometry alone.

=============================================================================
ERRORS
=============================================================================

All errors derive from TilesetError and are raised at load time:

- MalformedXMLError:    the bytes are not well-formed XML
- SchemaViolationError: missing/invalid attribute, duplicate tile id or
                        property name, geometry that doesn't add up
- TypeCoercionError:    a property value doesn't match its declared type

=============================================================================
"""

import logging
import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r'[+-]?[0-9]+')
_FLOAT_RE = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?(?:inf|nan)')
_COLOR_RE = re.compile(r'#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})')

__all__ = [
    "TilesetError",
    "MalformedXMLError",
    "SchemaViolationError",
    "TypeCoercionError",
    "Property",
    "Image",
    "Tile",
    "Tileset",
    "load",
    "loads",
]


# =============================================================================
# ERRORS
# =============================================================================

class TilesetError(Exception):
    """Base class for every error raised while loading a tileset."""


class MalformedXMLError(TilesetError):
    """The input is not well-formed XML."""


class SchemaViolationError(TilesetError):
    """The XML is well-formed but doesn't describe a valid tileset."""


class TypeCoercionError(TilesetError):
    """A property value doesn't parse as its declared type."""


# =============================================================================
# ATTRIBUTE HELPERS
# =============================================================================

def _require_attr(elem: ET.Element, name: str) -> str:
    """Return a required attribute or raise SchemaViolationError."""
    value = elem.get(name)
    if value is None:
        raise SchemaViolationError(f"<{elem.tag}> is missing required attribute '{name}'")
    return value


def _int_attr(elem: ET.Element, name: str, default: Optional[int] = None,
              minimum: int = 1) -> int:
    """
    Read an integer structural attribute (sizes, counts, ids).

    These are not typed properties: a bad value here means the tileset
    itself is broken, so it's a schema violation rather than a coercion error.
    """
    raw = elem.get(name)
    if raw is None:
        if default is None:
            raise SchemaViolationError(f"<{elem.tag}> is missing required attribute '{name}'")
        return default

    if not _INT_RE.fullmatch(raw):
        raise SchemaViolationError(f"<{elem.tag}> attribute '{name}' must be an integer, got {raw!r}")

    value = int(raw)
    if value < minimum:
        raise SchemaViolationError(f"<{elem.tag}> attribute '{name}' must be >= {minimum}, got {value}")
    return value


def _freeze(mapping: Mapping) -> Mapping:
    """Copy a mapping into a read-only view."""
    return MappingProxyType(dict(mapping))


# =============================================================================
# PROPERTY CLASS
# =============================================================================

def _coerce_value(name: str, prop_type: str, raw: str) -> Any:
    """
    Convert a raw attribute string to the Python value for its declared type.

    Coercion is strict: Tiled only ever writes canonical forms, so anything
    else means the file was edited by hand or corrupted.
    """
    if prop_type in ('string', 'file'):
        return raw

    if prop_type in ('int', 'object'):
        if not _INT_RE.fullmatch(raw):
            raise TypeCoercionError(f"property '{name}': expected {prop_type}, got {raw!r}")
        return int(raw)

    if prop_type == 'float':
        if not _FLOAT_RE.fullmatch(raw):
            raise TypeCoercionError(f"property '{name}': expected float, got {raw!r}")
        return float(raw)

    if prop_type == 'bool':
        # Exactly what Tiled writes; "True", "1", "yes" are rejected
        if raw == 'true':
            return True
        if raw == 'false':
            return False
        raise TypeCoercionError(f"property '{name}': expected bool ('true'/'false'), got {raw!r}")

    if prop_type == 'color':
        if raw and not _COLOR_RE.fullmatch(raw):
            raise TypeCoercionError(f"property '{name}': expected color #RRGGBB or #AARRGGBB, got {raw!r}")
        return raw

    raise SchemaViolationError(f"property '{name}': unknown type {prop_type!r}")


def _format_value(prop_type: str, value: Any) -> str:
    """Inverse of _coerce_value: Python value back to its TSX string."""
    if prop_type == 'bool':
        return 'true' if value else 'false'
    return str(value)


@dataclass(frozen=True)
class Property:
    """
    Custom property attached to a tile or to the tileset itself.

    ==========================================================================
    SUPPORTED TYPES
    ==========================================================================

    - string: Text value (default when the type attribute is absent)
    - int:    Integer number
    - float:  Decimal number
    - bool:   "true" / "false"
    - color:  Color in #RRGGBB or #AARRGGBB format (kept as string)
    - file:   File path reference (kept as string)
    - object: Reference to a map object by ID (int)

    ==========================================================================
    ENTITIES
    ==========================================================================

    Attribute values may carry XML entities. They are decoded by the XML
    parser, so the value seen here is the literal text:

        <property name="sprite_walk_right_1" value="player_walk_right_1&quot;"/>

        Property.value == 'player_walk_right_1"'

    The trailing quote is data and is never stripped.

    ==========================================================================
    """
    name: str                    # Property name (key)
    type: str = "string"         # Declared value type
    value: Any = ""              # Coerced Python value

    @classmethod
    def from_xml(cls, elem: ET.Element) -> 'Property':
        """
        Parse property from XML element.

        XML format:
            <property name="useAStar" type="bool" value="false"/>
            <property name="visionRadius" type="int" value="40"/>
            <property name="renderLayer" value="CHARACTERS"/>  (type defaults to string)
        """
        name = _require_attr(elem, 'name')
        prop_type = elem.get('type', 'string')
        raw = _require_attr(elem, 'value')
        return cls(name=name, type=prop_type, value=_coerce_value(name, prop_type, raw))

    def to_xml(self) -> ET.Element:
        """Convert property back to XML element."""
        elem = ET.Element('property')
        elem.set('name', self.name)

        # Only include type attribute if not string (string is default)
        if self.type != 'string':
            elem.set('type', self.type)

        # ElementTree re-escapes quotes, so literal '"' survives a round trip
        elem.set('value', _format_value(self.type, self.value))
        return elem


def _parse_properties(parent: ET.Element) -> Dict[str, Property]:
    """Parse the optional <properties> child of a tile or tileset."""
    properties: Dict[str, Property] = {}

    props_elem = parent.find('properties')
    if props_elem is None:
        return properties

    for prop_elem in props_elem.findall('property'):
        prop = Property.from_xml(prop_elem)
        if prop.name in properties:
            raise SchemaViolationError(f"duplicate property name '{prop.name}'")
        properties[prop.name] = prop

    return properties


def _properties_to_xml(parent: ET.Element, properties: Mapping[str, Property]):
    if properties:
        props_elem = ET.SubElement(parent, 'properties')
        for prop in properties.values():
            props_elem.append(prop.to_xml())


# =============================================================================
# IMAGE CLASS
# =============================================================================

@dataclass(frozen=True)
class Image:
    """
    Spritesheet reference of a tileset.

    source: Path to image file (relative to the TSX file)
    width:  Declared image width in pixels
    height: Declared image height in pixels
    trans:  Transparent color in hex (e.g. "ff00ff"), optional
    """
    source: str
    width: int
    height: int
    trans: Optional[str] = None

    @classmethod
    def from_xml(cls, elem: ET.Element) -> 'Image':
        """Parse image from XML element."""
        return cls(
            source=_require_attr(elem, 'source'),
            width=_int_attr(elem, 'width'),
            height=_int_attr(elem, 'height'),
            trans=elem.get('trans'),
        )

    def to_xml(self) -> ET.Element:
        """Convert image back to XML element."""
        elem = ET.Element('image')
        elem.set('source', self.source)
        elem.set('width', str(self.width))
        elem.set('height', str(self.height))
        if self.trans:
            elem.set('trans', self.trans)
        return elem


# =============================================================================
# TILE CLASS
# =============================================================================

@dataclass(frozen=True)
class Tile:
    """
    One slot of the tileset grid, with its optional metadata.

    ==========================================================================
    TILE IDs
    ==========================================================================

    The 'id' is the zero-based index into the grid, row-major:

        id = row * columns + col

    ==========================================================================
    TYPE TAG
    ==========================================================================

    'type' is a free-form discriminator (e.g. "enemy", "door", "lifepack")
    that engine code switches on. It is not interpreted here.
    Tiled 1.9+ writes it as class="..." instead of type="..."; both are read.

    ==========================================================================
    TYPED ACCESSORS
    ==========================================================================

    Engine code usually wants "the value, or a default":

        speed = tile.get_float('speed', 1.0)
        use_astar = tile.get_bool('useAStar', False)

    A property that exists with an incompatible type raises
    TypeCoercionError instead of silently returning the default.

    ==========================================================================
    """
    id: int                                              # Index within the tileset
    type: str = ""                                       # Type/class tag
    properties: Mapping[str, Property] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'properties', _freeze(self.properties))

    def __hash__(self):
        return hash((self.id, self.type, tuple(sorted(self.properties.items()))))

    @classmethod
    def from_xml(cls, elem: ET.Element) -> 'Tile':
        """Parse tile from XML element."""
        tile_id = _int_attr(elem, 'id', minimum=0)
        tile_type = elem.get('type')
        if tile_type is None:
            tile_type = elem.get('class', '')

        try:
            properties = _parse_properties(elem)
        except TilesetError as e:
            # Same error kind, with the tile id for context
            raise type(e)(f"tile {tile_id}: {e}") from e

        for child in elem:
            if child.tag != 'properties':
                logger.debug(f"tile {tile_id}: skipping <{child.tag}>")

        return cls(id=tile_id, type=tile_type, properties=properties)

    def to_xml(self) -> ET.Element:
        """Convert tile back to XML element."""
        elem = ET.Element('tile')
        elem.set('id', str(self.id))

        if self.type:
            elem.set('type', self.type)

        _properties_to_xml(elem, self.properties)
        return elem

    @property
    def is_plain(self) -> bool:
        """True for tiles with neither a type nor properties."""
        return not self.type and not self.properties

    # -------------------------------------------------------------------------
    # Typed property access
    # -------------------------------------------------------------------------

    def get(self, name: str, default: Any = None) -> Any:
        """Raw coerced value of a property, whatever its type."""
        prop = self.properties.get(name)
        return default if prop is None else prop.value

    def _get_typed(self, name: str, default: Any, accepted: Tuple[str, ...]) -> Any:
        prop = self.properties.get(name)
        if prop is None:
            return default
        if prop.type not in accepted:
            raise TypeCoercionError(
                f"tile {self.id}: property '{name}' is {prop.type}, expected {' or '.join(accepted)}"
            )
        return prop.value

    def get_string(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._get_typed(name, default, ('string', 'file', 'color'))

    def get_int(self, name: str, default: Optional[int] = None) -> Optional[int]:
        return self._get_typed(name, default, ('int', 'object'))

    def get_float(self, name: str, default: Optional[float] = None) -> Optional[float]:
        value = self._get_typed(name, default, ('float', 'int'))
        return value if value is None else float(value)

    def get_bool(self, name: str, default: Optional[bool] = None) -> Optional[bool]:
        return self._get_typed(name, default, ('bool',))


# =============================================================================
# TILESET CLASS
# =============================================================================

@dataclass(frozen=True)
class Tileset:
    """
    A spritesheet tileset: grid geometry plus sparse tile metadata.

    ==========================================================================
    GRID LAYOUT
    ==========================================================================

    One image divided into a grid of equally sized tiles:

       +---+---+---+---+
       | 0 | 1 | 2 | 3 |
       +---+---+---+---+
       | 4 | 5 | 6 | 7 |
       +---+---+---+---+

    columns = tiles per row, rows = tilecount / columns.

    ==========================================================================
    SPACING AND MARGIN
    ==========================================================================

    margin = pixels around the EDGE of the entire image
    spacing = pixels BETWEEN tiles

    The declared image size must match the grid exactly:

        width  = 2*margin + columns*tilewidth  + (columns-1)*spacing
        height = 2*margin + rows*tileheight    + (rows-1)*spacing

    With no spacing/margin this is simply columns*tilewidth by
    rows*tileheight (160x160 for a 10x10 grid of 16x16 tiles).

    ==========================================================================
    IMMUTABILITY
    ==========================================================================

    Tilesets are load-once asset data. Instances are frozen and their
    mappings are read-only views. Invariants are checked on construction,
    so a Tileset object that exists is always consistent.

    ==========================================================================
    USAGE
    ==========================================================================

        tileset = Tileset.load("GeneralSpritesheet.tsx")
        enemy = tileset.get_tile(17)
        print(enemy.type, enemy.get_float('speed'))

        for tile in tileset.tiles_of_type('door'):
            x, y, w, h = tileset.tile_rect(tile.id)

    ==========================================================================
    """
    name: str                                        # Tileset name
    tilewidth: int                                   # Tile width in pixels
    tileheight: int                                  # Tile height in pixels
    tilecount: int                                   # Total number of tiles
    columns: int                                     # Tiles per row
    image: Image                                     # Spritesheet image
    spacing: int = 0                                 # Pixels between tiles
    margin: int = 0                                  # Pixels around edge
    version: str = "1.10"                            # TSX format version
    tiledversion: str = ""                           # Tiled editor version
    tiles: Mapping[int, Tile] = field(default_factory=dict)            # Declared tiles only
    properties: Mapping[str, Property] = field(default_factory=dict)   # Tileset properties
    source: Optional[str] = field(default=None, compare=False)         # File it was loaded from

    def __post_init__(self):
        object.__setattr__(self, 'tiles', _freeze(self.tiles))
        object.__setattr__(self, 'properties', _freeze(self.properties))
        self.validate()

    def __hash__(self):
        # Same fields as __eq__; source is excluded from both
        return hash((
            self.name, self.tilewidth, self.tileheight, self.tilecount, self.columns,
            self.image, self.spacing, self.margin, self.version, self.tiledversion,
            tuple(sorted(self.tiles.items())),
            tuple(sorted(self.properties.items())),
        ))

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def validate(self):
        """
        Check grid geometry and tile ids.

        Raises:
        -------
        SchemaViolationError : If any invariant doesn't hold
        """
        for attr in ('tilewidth', 'tileheight', 'tilecount', 'columns'):
            if getattr(self, attr) < 1:
                raise SchemaViolationError(f"tileset '{self.name}': {attr} must be positive")
        if self.spacing < 0 or self.margin < 0:
            raise SchemaViolationError(f"tileset '{self.name}': spacing and margin must be >= 0")

        # -----------------------------------------------------------------
        # GRID SHAPE
        # -----------------------------------------------------------------
        if self.tilecount % self.columns:
            raise SchemaViolationError(
                f"tileset '{self.name}': tilecount {self.tilecount} does not fill "
                f"{self.columns} columns evenly"
            )

        expected_width = self._span(self.columns, self.tilewidth)
        expected_height = self._span(self.rows, self.tileheight)

        if self.image.width != expected_width:
            raise SchemaViolationError(
                f"tileset '{self.name}': image width {self.image.width} != "
                f"{expected_width} ({self.columns} columns of {self.tilewidth}px)"
            )
        if self.image.height != expected_height:
            # Usually means tilecount disagrees with the rows in the image
            implied = (self.image.height - 2 * self.margin + self.spacing) // (self.tileheight + self.spacing)
            raise SchemaViolationError(
                f"tileset '{self.name}': image height {self.image.height} implies "
                f"{implied} rows ({implied * self.columns} tiles), but tilecount is {self.tilecount}"
            )

        # -----------------------------------------------------------------
        # TILE IDS
        # -----------------------------------------------------------------
        for key, tile in self.tiles.items():
            if key != tile.id:
                raise SchemaViolationError(f"tile stored under id {key} has id {tile.id}")
            if not 0 <= tile.id < self.tilecount:
                raise SchemaViolationError(
                    f"tile id {tile.id} is outside [0, {self.tilecount})"
                )

    def _span(self, count: int, size: int) -> int:
        """Pixel length of `count` tiles of `size` along one axis."""
        return 2 * self.margin + count * size + (count - 1) * self.spacing

    # =========================================================================
    # PARSING
    # =========================================================================

    @classmethod
    def from_xml(cls, elem: ET.Element, source: Optional[str] = None) -> 'Tileset':
        """
        Parse tileset from a <tileset> XML element.

        Parameters:
        -----------
        elem : ET.Element
            The <tileset> root element
        source : str, optional
            Path the element was read from, kept for resolving the image
        """
        if elem.tag != 'tileset':
            raise SchemaViolationError(f"root element must be <tileset>, got <{elem.tag}>")

        name = _require_attr(elem, 'name')

        img_elem = elem.find('image')
        if img_elem is None:
            raise SchemaViolationError(f"tileset '{name}' has no <image>")

        # Parse individual tile definitions
        # Only tiles with metadata are listed
        tiles: Dict[int, Tile] = {}
        for tile_elem in elem.findall('tile'):
            tile = Tile.from_xml(tile_elem)
            if tile.id in tiles:
                raise SchemaViolationError(f"duplicate tile id {tile.id}")
            tiles[tile.id] = tile

        for child in elem:
            if child.tag not in ('image', 'tile', 'properties'):
                logger.debug(f"tileset '{name}': skipping <{child.tag}>")

        tileset = cls(
            name=name,
            tilewidth=_int_attr(elem, 'tilewidth'),
            tileheight=_int_attr(elem, 'tileheight'),
            tilecount=_int_attr(elem, 'tilecount'),
            columns=_int_attr(elem, 'columns'),
            image=Image.from_xml(img_elem),
            spacing=_int_attr(elem, 'spacing', default=0, minimum=0),
            margin=_int_attr(elem, 'margin', default=0, minimum=0),
            version=elem.get('version', '1.10'),
            tiledversion=elem.get('tiledversion', ''),
            tiles=tiles,
            properties=_parse_properties(elem),
            source=source,
        )

        logger.debug(
            f"Loaded tileset '{tileset.name}': {tileset.columns}x{tileset.rows} "
            f"tiles of {tileset.tilewidth}x{tileset.tileheight}, {len(tiles)} with metadata"
        )
        return tileset

    @classmethod
    def from_bytes(cls, data: Union[bytes, str], source: Optional[str] = None) -> 'Tileset':
        """
        Parse a tileset from the raw contents of a TSX file.

        Raises:
        -------
        MalformedXMLError : If the data is not well-formed XML
        SchemaViolationError : If the XML is not a valid tileset
        TypeCoercionError : If a property value doesn't match its type

        A str is parsed as already-decoded text; any encoding named in its
        XML declaration is ignored. Bytes are decoded per the declaration.
        """
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise MalformedXMLError(f"malformed XML: {e}") from e

        return cls.from_xml(root, source=source)

    @classmethod
    def load(cls, filepath: Union[str, Path]) -> 'Tileset':
        """
        Load a TSX file from disk.

        Parameters:
        -----------
        filepath : str or Path
            Path to the .tsx file

        Returns:
        --------
        Tileset : Parsed, validated tileset

        Raises:
        -------
        FileNotFoundError : If the file doesn't exist
        TilesetError : If the contents are not a valid tileset
        """
        filepath = Path(filepath)
        return cls.from_bytes(filepath.read_bytes(), source=str(filepath))

    # =========================================================================
    # WRITING
    # =========================================================================

    def to_xml(self) -> ET.Element:
        """Convert tileset back to a <tileset> XML element."""
        elem = ET.Element('tileset')
        elem.set('version', self.version)
        if self.tiledversion:
            elem.set('tiledversion', self.tiledversion)
        elem.set('name', self.name)
        elem.set('tilewidth', str(self.tilewidth))
        elem.set('tileheight', str(self.tileheight))

        # Only include spacing/margin if non-zero
        if self.spacing:
            elem.set('spacing', str(self.spacing))
        if self.margin:
            elem.set('margin', str(self.margin))

        elem.set('tilecount', str(self.tilecount))
        elem.set('columns', str(self.columns))

        _properties_to_xml(elem, self.properties)
        elem.append(self.image.to_xml())

        for tile_id in sorted(self.tiles):
            elem.append(self.tiles[tile_id].to_xml())

        return elem

    def tostring(self) -> str:
        """Serialize to TSX text, with XML declaration and indentation."""
        root = self.to_xml()
        self._indent(root)
        body = ET.tostring(root, encoding='unicode')
        return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + '\n'

    def save(self, filepath: Union[str, Path]):
        """Write the tileset to a TSX file."""
        Path(filepath).write_text(self.tostring(), encoding='utf-8')

    @staticmethod
    def _indent(elem, level=0):
        """
        Add indentation to XML for readable output.

        Tiled indents with one space per level; we do the same so saved
        files diff cleanly against ones written by the editor.
        """
        indent = "\n" + " " * level

        if len(elem):  # Has children
            if not elem.text or not elem.text.strip():
                elem.text = indent + " "
            if not elem.tail or not elem.tail.strip():
                elem.tail = indent

            for child in elem:
                Tileset._indent(child, level + 1)

            # Last child's tail
            if not child.tail or not child.tail.strip():
                child.tail = indent
        else:
            if level and (not elem.tail or not elem.tail.strip()):
                elem.tail = indent

        if level == 0:
            elem.tail = None

    # =========================================================================
    # TILE LOOKUP
    # =========================================================================

    @property
    def rows(self) -> int:
        return math.ceil(self.tilecount / self.columns)

    def get_tile(self, tile_id: int) -> Tile:
        """
        Get the tile at an index.

        Declared tiles come back as loaded. Any other index inside the grid
        yields a plain Tile (no type, no properties).

        Raises:
        -------
        IndexError : If tile_id is outside [0, tilecount)
        """
        if not 0 <= tile_id < self.tilecount:
            raise IndexError(f"tile id {tile_id} out of range [0, {self.tilecount})")
        tile = self.tiles.get(tile_id)
        return tile if tile is not None else Tile(id=tile_id)

    def iter_tiles(self) -> Iterator[Tile]:
        """All tiles of the grid in id order, plain ones included."""
        for tile_id in range(self.tilecount):
            yield self.get_tile(tile_id)

    def tiles_of_type(self, tile_type: str) -> List[Tile]:
        """Declared tiles carrying the given type tag, by id."""
        return [self.tiles[i] for i in sorted(self.tiles) if self.tiles[i].type == tile_type]

    def tile_rect(self, tile_id: int) -> Tuple[int, int, int, int]:
        """
        Pixel rectangle (x, y, width, height) of a tile inside the image.

        tile_x = margin + col * (tilewidth + spacing)
        tile_y = margin + row * (tileheight + spacing)

        Example: col=2, tw=16, margin=2, spacing=1
        tile_x = 2 + 2*17 = 36
        """
        if not 0 <= tile_id < self.tilecount:
            raise IndexError(f"tile id {tile_id} out of range [0, {self.tilecount})")

        col = tile_id % self.columns
        row = tile_id // self.columns
        x = self.margin + col * (self.tilewidth + self.spacing)
        y = self.margin + row * (self.tileheight + self.spacing)
        return (x, y, self.tilewidth, self.tileheight)


# =============================================================================
# MODULE-LEVEL SHORTCUTS
# =============================================================================

def load(filepath: Union[str, Path]) -> Tileset:
    """Load and validate a TSX file. See Tileset.load."""
    return Tileset.load(filepath)


def loads(data: Union[bytes, str]) -> Tileset:
    """Parse and validate TSX contents. See Tileset.from_bytes."""
    return Tileset.from_bytes(data)


# =============================================================================
# EXAMPLE USAGE (when run directly)
# =============================================================================

if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: tsx_manager.py <tileset.tsx>")
        sys.exit(1)

    tileset = load(sys.argv[1])
    print(f"Tileset: {tileset.name} ({tileset.columns}x{tileset.rows})")
    for tile in tileset.tiles.values():
        props = ", ".join(f"{p.name}={p.value!r}" for p in tile.properties.values())
        print(f"  {tile.id:4d} {tile.type or '-':10s} {props}")
