#!/usr/bin/env python3

"""
TSX Inspector - validate and describe Tiled tilesets

Usage:
    python -m tsx_inspector <tileset.tsx> [--image] [-v]

Options:
    --image       Also open the spritesheet and check its real size
    -v/--verbose  Debug logging
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tsx_manager import Tileset, TilesetError
from .spritesheet import SpriteSheet
from .summary import summarize

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tsx_inspector",
        description="Validate a Tiled tileset (.tsx) and print a summary",
    )
    parser.add_argument("tileset", help="Path to the .tsx file")
    parser.add_argument("--image", action="store_true",
                        help="Also load the spritesheet and check its size")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    source_path = Path(args.tileset)
    if not source_path.exists():
        print(f"Error: File '{source_path}' not found")
        return 1

    try:
        tileset = Tileset.load(source_path)
        if args.image:
            sheet = SpriteSheet(tileset)
            logger.debug(f"Image {sheet.image_path} matches declared size")
        print(summarize(tileset))
    except (TilesetError, OSError) as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
