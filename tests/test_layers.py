"""Tests for render layer resolution."""

import logging

from tsx_inspector.layers import RenderLayer, group_by_layer, resolve_render_layer
from tsx_manager import Property, Tile, loads


def test_draw_order():
    assert sorted(RenderLayer)[0] is RenderLayer.PARALLAX_BACKGROUND
    assert sorted(RenderLayer)[-1] is RenderLayer.UI
    assert RenderLayer.CHARACTERS > RenderLayer.GAMEPLAY_BELOW
    assert RenderLayer.CHARACTERS == 30


def test_resolve_from_sample(sample_bytes):
    tileset = loads(sample_bytes)

    assert resolve_render_layer(tileset.get_tile(2)) is RenderLayer.CHARACTERS
    assert resolve_render_layer(tileset.get_tile(17)) is RenderLayer.CHARACTERS
    assert resolve_render_layer(tileset.get_tile(22)) is RenderLayer.GAMEPLAY_BELOW
    assert resolve_render_layer(tileset.get_tile(0), default=RenderLayer.UI) is RenderLayer.UI


def test_unknown_layer_falls_back_with_warning(caplog):
    tile = Tile(id=9, properties={
        "renderLayer": Property(name="renderLayer", value="SKYBOX"),
    })

    with caplog.at_level(logging.WARNING, logger="tsx_inspector.layers"):
        layer = resolve_render_layer(tile, default=RenderLayer.WORLD_BACKGROUND)

    assert layer is RenderLayer.WORLD_BACKGROUND
    assert "SKYBOX" in caplog.text


def test_group_by_layer(sample_bytes):
    groups = group_by_layer(loads(sample_bytes))

    assert list(groups) == [RenderLayer.GAMEPLAY_BELOW, RenderLayer.CHARACTERS]
    assert [t.id for t in groups[RenderLayer.GAMEPLAY_BELOW]] == [6, 22]
    assert [t.id for t in groups[RenderLayer.CHARACTERS]] == [2, 17]


def test_non_string_layer_falls_back_with_warning(build_tsx, caplog):
    body = (
        ' <tile id="3" type="enemy">\n'
        '  <properties>\n'
        '   <property name="renderLayer" type="int" value="30"/>\n'
        '  </properties>\n'
        ' </tile>\n'
    )
    tileset = loads(build_tsx(body))

    with caplog.at_level(logging.WARNING, logger="tsx_inspector.layers"):
        groups = group_by_layer(tileset)

    assert list(groups) == [RenderLayer.GAMEPLAY_BELOW]
    assert [t.id for t in groups[RenderLayer.GAMEPLAY_BELOW]] == [3]
    assert "tile 3 is int" in caplog.text
