"""Shared fixtures: the sample tileset and a builder for variants of it."""

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent / "data"
SAMPLE_TSX = DATA_DIR / "GeneralSpritesheet.tsx"


def make_tsx(body: str = "", *, tilecount: int = 100, columns: int = 10,
             width: int = 160, height: int = 160, extra_attrs: str = "") -> str:
    """Build a small TSX document around a block of <tile> elements."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<tileset version="1.10" tiledversion="1.11.2" name="Test" tilewidth="16" '
        f'tileheight="16" tilecount="{tilecount}" columns="{columns}"{extra_attrs}>\n'
        f' <image source="sheet.png" width="{width}" height="{height}"/>\n'
        f'{body}'
        '</tileset>\n'
    )


@pytest.fixture
def sample_path() -> Path:
    return SAMPLE_TSX


@pytest.fixture
def sample_bytes() -> bytes:
    return SAMPLE_TSX.read_bytes()


@pytest.fixture
def build_tsx():
    return make_tsx
