"""
Render layers - draw order for tiles tagged with a renderLayer property

=============================================================================
WHAT IS A RENDER LAYER?
=============================================================================

Tiles that spawn game objects carry a string property naming the layer
they are drawn on:

    <property name="renderLayer" value="CHARACTERS"/>

Each layer name maps to a depth. Lower depths are drawn first:

    PARALLAX_BACKGROUND   0   furthest background
    WORLD_BACKGROUND     10   background tiles
    GAMEPLAY_BELOW       20   objects behind the player (default)
    CHARACTERS           30   player and enemies
    GAMEPLAY_ABOVE       40   objects in front of the player
    PROJECTILES          50   bullets, drawn over characters
    PARTICLES            60   explosions and effects
    WORLD_FOREGROUND     70   tree tops, roofs
    LIGHTING             80   lighting mask
    POPUPS               90   popups
    UI                  100   user interface

=============================================================================
"""

import logging
from enum import IntEnum
from typing import Dict, List

from tsx_manager import Tile, Tileset

logger = logging.getLogger(__name__)

RENDER_LAYER_PROPERTY = "renderLayer"


class RenderLayer(IntEnum):
    """
    Standard render layers. The value is the draw depth.

    Using IntEnum allows:
    - Sorting: sorted(layers) gives draw order
    - Lookup by name: RenderLayer["CHARACTERS"]
    """
    PARALLAX_BACKGROUND = 0
    WORLD_BACKGROUND = 10
    GAMEPLAY_BELOW = 20
    CHARACTERS = 30
    GAMEPLAY_ABOVE = 40
    PROJECTILES = 50
    PARTICLES = 60
    WORLD_FOREGROUND = 70
    LIGHTING = 80
    POPUPS = 90
    UI = 100


def resolve_render_layer(tile: Tile,
                         default: RenderLayer = RenderLayer.GAMEPLAY_BELOW) -> RenderLayer:
    """
    Get the layer a tile is drawn on.

    Parameters:
    -----------
    tile : Tile
        Tile whose renderLayer property is read
    default : RenderLayer
        Layer used when the property is absent or names no known layer

    An unknown layer name, or a renderLayer property that isn't a string,
    is logged and falls back to the default, the same way the engine
    treats unregistered layers.
    """
    prop = tile.properties.get(RENDER_LAYER_PROPERTY)
    if prop is None:
        return default

    if prop.type != 'string':
        logger.warning(
            f"RenderLayer on tile {tile.id} is {prop.type}, not a layer name. "
            f"Using {default.name}."
        )
        return default

    name = prop.value
    try:
        return RenderLayer[name]
    except KeyError:
        logger.warning(
            f"RenderLayer '{name}' on tile {tile.id} is not a known layer. "
            f"Using {default.name}."
        )
        return default


def group_by_layer(tileset: Tileset,
                   default: RenderLayer = RenderLayer.GAMEPLAY_BELOW) -> Dict[RenderLayer, List[Tile]]:
    """
    Bucket the declared tiles of a tileset by render layer.

    Only tiles listed in the TSX are considered; plain tiles have no
    layer of their own. Keys come out in draw order.
    """
    groups: Dict[RenderLayer, List[Tile]] = {}
    for tile_id in sorted(tileset.tiles):
        tile = tileset.tiles[tile_id]
        groups.setdefault(resolve_render_layer(tile, default), []).append(tile)

    return {layer: groups[layer] for layer in sorted(groups)}
