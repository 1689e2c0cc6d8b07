"""Tests for the summary report and the command line entry point."""

from PIL import Image

from tsx_inspector.__main__ import main
from tsx_inspector.summary import summarize
from tsx_manager import loads


def test_summary_lists_declared_tiles(sample_bytes):
    text = summarize(loads(sample_bytes))

    assert "Tileset: GeneralSpritesheet (Tiled 1.11.2, format 1.10)" in text
    assert "Grid:    10x10 tiles of 16x16 px (100 tiles)" in text
    assert "Declared tiles: 4 (96 plain)" in text
    assert "enemy" in text and "layer=CHARACTERS" in text
    assert "speed: float = 0.8" in text
    assert "useAStar: bool = False" in text
    assert "visionRadius: int = 40" in text
    assert "sprite_walk_right_1: string = 'player_walk_right_1\"'" in text


def test_cli_prints_summary(sample_path, capsys):
    assert main([str(sample_path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Tileset: GeneralSpritesheet")


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.tsx")]) == 1
    assert "not found" in capsys.readouterr().out


def test_cli_reports_invalid_tileset(tmp_path, build_tsx, capsys):
    path = tmp_path / "bad.tsx"
    path.write_text(build_tsx(' <tile id="1"/>\n <tile id="1"/>\n'))

    assert main([str(path)]) == 1
    assert "Error: duplicate tile id 1" in capsys.readouterr().out


def test_cli_image_check(tmp_path, sample_bytes, capsys):
    path = tmp_path / "GeneralSpritesheet.tsx"
    path.write_bytes(sample_bytes)

    # No spritesheet yet
    assert main([str(path), "--image"]) == 1
    capsys.readouterr()

    Image.new("RGBA", (160, 160)).save(tmp_path / "spritesheet.png")
    assert main([str(path), "--image"]) == 0


def test_cli_typed_render_layer(tmp_path, build_tsx, capsys):
    path = tmp_path / "typed.tsx"
    path.write_text(build_tsx(
        ' <tile id="3" type="enemy">\n'
        '  <properties>\n'
        '   <property name="renderLayer" type="int" value="30"/>\n'
        '  </properties>\n'
        ' </tile>\n'
    ))

    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "layer=GAMEPLAY_BELOW" in out
    assert "renderLayer: int = 30" in out


def test_cli_reports_image_size_mismatch(tmp_path, sample_bytes, capsys):
    path = tmp_path / "GeneralSpritesheet.tsx"
    path.write_bytes(sample_bytes)
    Image.new("RGBA", (160, 144)).save(tmp_path / "spritesheet.png")

    assert main([str(path), "--image"]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Error: ")
    assert "160x144" in out
    assert "Tileset:" not in out
