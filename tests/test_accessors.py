"""Tests for typed property access and grid geometry."""

import pytest

from tsx_manager import TypeCoercionError, loads


@pytest.fixture
def tileset(sample_bytes):
    return loads(sample_bytes)


def test_typed_getters(tileset):
    enemy = tileset.get_tile(17)

    assert enemy.get_float("speed") == 0.8
    assert enemy.get_bool("useAStar") is False
    assert enemy.get_int("visionRadius") == 40
    assert enemy.get_string("renderLayer") == "CHARACTERS"


def test_defaults_for_absent_properties(tileset):
    enemy = tileset.get_tile(17)

    assert enemy.get_float("attackSpeed", 60.0) == 60.0
    assert enemy.get_int("health") is None
    assert enemy.get("missing", "fallback") == "fallback"
    assert tileset.get_tile(50).get_bool("useAStar", True) is True


def test_int_property_read_as_float(tileset):
    value = tileset.get_tile(17).get_float("visionRadius")
    assert isinstance(value, float)
    assert value == 40.0


@pytest.mark.parametrize("getter,name", [
    ("get_int", "speed"),
    ("get_bool", "visionRadius"),
    ("get_string", "useAStar"),
    ("get_float", "renderLayer"),
])
def test_incompatible_type_raises(tileset, getter, name):
    with pytest.raises(TypeCoercionError, match=name):
        getattr(tileset.get_tile(17), getter)(name)


def test_tile_rect_plain_grid(tileset):
    assert tileset.tile_rect(0) == (0, 0, 16, 16)
    assert tileset.tile_rect(17) == (112, 16, 16, 16)
    assert tileset.tile_rect(99) == (144, 144, 16, 16)


def test_tile_rect_with_spacing_and_margin(build_tsx):
    # 4 columns: 2*2 + 4*16 + 3*1 = 71
    spaced = loads(build_tsx(
        tilecount=8, columns=4, width=71, height=37,
        extra_attrs=' spacing="1" margin="2"',
    ))

    assert spaced.rows == 2
    assert spaced.tile_rect(0) == (2, 2, 16, 16)
    assert spaced.tile_rect(2) == (36, 2, 16, 16)
    assert spaced.tile_rect(5) == (19, 19, 16, 16)


def test_tile_rect_out_of_range(tileset):
    with pytest.raises(IndexError):
        tileset.tile_rect(100)


def test_class_attribute_read_as_type(build_tsx):
    tileset = loads(build_tsx(' <tile id="3" class="door"/>\n'))
    assert tileset.get_tile(3).type == "door"


def test_tileset_level_properties(build_tsx):
    text = build_tsx().replace(
        ' <image',
        ' <properties>\n  <property name="biome" value="cave"/>\n </properties>\n <image',
    )
    tileset = loads(text)
    assert tileset.properties["biome"].value == "cave"


def test_unknown_children_are_skipped(build_tsx):
    body = (
        ' <tile id="4" type="torch">\n'
        '  <animation>\n'
        '   <frame tileid="4" duration="100"/>\n'
        '   <frame tileid="5" duration="100"/>\n'
        '  </animation>\n'
        ' </tile>\n'
        ' <wangsets/>\n'
    )
    tileset = loads(build_tsx(body))
    torch = tileset.get_tile(4)
    assert torch.type == "torch"
    assert len(torch.properties) == 0
