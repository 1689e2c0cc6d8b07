"""
TSX Inspector - companions to tsx_manager for engine-side use

Requirements:
    pip install pillow numpy
"""

from .layers import RenderLayer, resolve_render_layer, group_by_layer
from .spritesheet import SpriteSheet
from .summary import summarize

__version__ = "1.0.0"
__all__ = [
    "RenderLayer",
    "resolve_render_layer",
    "group_by_layer",
    "SpriteSheet",
    "summarize",
]
