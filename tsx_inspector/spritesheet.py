"""
Spritesheet slicing - tile pixels from a loaded tileset (uses PIL)

=============================================================================
WHY CHECK THE BITMAP?
=============================================================================

A TSX file declares the size of its image:

    <image source="spritesheet.png" width="160" height="160"/>

The declared size is what tile geometry is computed from. If the artist
resizes the PNG but the TSX is not re-saved, every tile index past the
change points at the wrong pixels. Opening the image and comparing its
real size catches this at load time instead of on screen.

=============================================================================
TILE EXTRACTION
=============================================================================

Tiles are cut with the tileset's grid geometry (see Tileset.tile_rect):

    +---+---+---+
    | 0 | 1 | 2 |     tile 4 -> col 1, row 1
    +---+---+---+            -> crop (16, 16, 32, 32) for 16x16 tiles
    | 3 | 4 | 5 |
    +---+---+---+

Crops are cached per instance, so asking twice for the same tile is
a dictionary lookup.

=============================================================================
"""

from pathlib import Path
from typing import Dict, Optional, Union

import numpy as np
from PIL import Image

from tsx_manager import SchemaViolationError, Tileset


class SpriteSheet:
    """
    Pixel access to the tiles of a Tileset.

    Parameters:
    -----------
    tileset : Tileset
        Loaded tileset whose image is opened
    base_dir : str or Path, optional
        Directory the image source is relative to. Defaults to the
        directory of the TSX file, or the current directory for tilesets
        parsed from bytes.

    Raises:
    -------
    FileNotFoundError : If the image file doesn't exist
    SchemaViolationError : If the image size differs from the declared one
    """

    def __init__(self, tileset: Tileset, base_dir: Optional[Union[str, Path]] = None):
        self.tileset = tileset

        if base_dir is None:
            base_dir = Path(tileset.source).parent if tileset.source else Path('.')
        self.image_path = Path(base_dir) / tileset.image.source

        # Ensure RGBA format for transparency
        with Image.open(self.image_path) as img:
            self.image = img.convert('RGBA')

        declared = (tileset.image.width, tileset.image.height)
        if self.image.size != declared:
            raise SchemaViolationError(
                f"image {self.image_path} is {self.image.width}x{self.image.height}, "
                f"tileset '{tileset.name}' declares {declared[0]}x{declared[1]}"
            )

        # tile_id -> cropped tile image
        self._tile_cache: Dict[int, Image.Image] = {}

    def get_tile_image(self, tile_id: int) -> Image.Image:
        """
        Get the pixels of one tile as an RGBA PIL image.

        Raises:
        -------
        IndexError : If tile_id is outside the tileset
        """
        tile_img = self._tile_cache.get(tile_id)
        if tile_img is None:
            x, y, w, h = self.tileset.tile_rect(tile_id)
            # PIL crop() takes (left, top, right, bottom)
            tile_img = self.image.crop((x, y, x + w, y + h))
            self._tile_cache[tile_id] = tile_img
        return tile_img

    def get_tile_array(self, tile_id: int) -> np.ndarray:
        """Tile pixels as a uint8 array of shape (tileheight, tilewidth, 4)."""
        return np.asarray(self.get_tile_image(tile_id), dtype=np.uint8)

    def is_blank(self, tile_id: int) -> bool:
        """True if every pixel of the tile is fully transparent."""
        return not self.get_tile_array(tile_id)[:, :, 3].any()
