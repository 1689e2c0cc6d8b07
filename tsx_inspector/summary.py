"""Plain-text report of a loaded tileset"""

from typing import List

from tsx_manager import Tileset
from .layers import resolve_render_layer


def summarize(tileset: Tileset) -> str:
    """
    Describe a tileset: grid, image and every declared tile.

    Example output:

        Tileset: GeneralSpritesheet (Tiled 1.11.2, format 1.10)
        Grid:    10x10 tiles of 16x16 px (100 tiles)
        Image:   spritesheet.png (160x160)
        Declared tiles: 4 (96 plain)
          17  enemy     layer=CHARACTERS
                speed: float = 0.8
    """
    lines: List[str] = []

    editor = f"Tiled {tileset.tiledversion}, " if tileset.tiledversion else ""
    lines.append(f"Tileset: {tileset.name} ({editor}format {tileset.version})")
    lines.append(
        f"Grid:    {tileset.columns}x{tileset.rows} tiles of "
        f"{tileset.tilewidth}x{tileset.tileheight} px ({tileset.tilecount} tiles)"
    )
    if tileset.spacing or tileset.margin:
        lines.append(f"Spacing: {tileset.spacing} px, margin: {tileset.margin} px")
    lines.append(f"Image:   {tileset.image.source} ({tileset.image.width}x{tileset.image.height})")

    for prop in tileset.properties.values():
        lines.append(f"  {prop.name}: {prop.type} = {prop.value!r}")

    declared = len(tileset.tiles)
    lines.append(f"Declared tiles: {declared} ({tileset.tilecount - declared} plain)")

    for tile_id in sorted(tileset.tiles):
        tile = tileset.tiles[tile_id]
        layer = resolve_render_layer(tile)
        lines.append(f"  {tile.id:4d}  {tile.type or '-':<9s} layer={layer.name}")
        for prop in tile.properties.values():
            # repr() keeps embedded quotes visible
            lines.append(f"          {prop.name}: {prop.type} = {prop.value!r}")

    return "\n".join(lines)
