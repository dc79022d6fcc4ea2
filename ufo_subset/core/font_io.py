"""
UFO I/O utilities for checking paths, loading, saving and stamping sources.
"""

import sys
from pathlib import Path

from fontTools.misc import plistlib
from fontTools.ufoLib.errors import UFOLibError
from ufoLib2 import Font

from ufo_subset.config.glyphs import CREATOR
from ufo_subset.config.paths import METAINFO_FILENAME, UFO_SUFFIX
from ufo_subset.utils.logging import logger


def check_input_path(path: Path) -> None:
    """
    Exit unless path is an existing .ufo source.

    Raises:
        SystemExit: If the path is missing or not a .ufo directory
    """
    if not path.exists() or path.suffix != UFO_SUFFIX:
        logger.error(f"Path {path} is not an existing {UFO_SUFFIX} source")
        sys.exit(1)
    if not path.is_dir():
        logger.error(f"Path {path} is not a {UFO_SUFFIX} package directory")
        sys.exit(1)


def check_output_path(path: Path) -> None:
    """
    Exit if path already exists; outputs are never overwritten.

    Raises:
        SystemExit: If something already exists at path
    """
    if path.exists():
        logger.error(f"Output path {path} already exists")
        sys.exit(1)


def load_ufo(path: Path) -> Font:
    """
    Load a UFO source, exiting on failure.

    Args:
        path: Path to the .ufo directory

    Returns:
        Loaded ufoLib2 Font
    """
    try:
        return Font.open(path, lazy=False)
    except (UFOLibError, OSError) as e:
        logger.error(f"Failed to load {path}: {e}")
        sys.exit(1)


def stamp_creator(path: Path, creator: str = CREATOR) -> None:
    """
    Set the creator field in a saved UFO's metainfo.plist.

    ufoLib2 always writes its own creator, so the field is patched on disk
    after saving.
    """
    metainfo_path = path / METAINFO_FILENAME
    with open(metainfo_path, "rb") as f:
        metainfo = plistlib.load(f)
    metainfo["creator"] = creator
    with open(metainfo_path, "wb") as f:
        plistlib.dump(metainfo, f)


def save_ufo(font: Font, path: Path, creator: str = CREATOR) -> None:
    """
    Save a UFO source to a new path and stamp its creator, exiting on failure.

    Args:
        font: Font to save
        path: Destination .ufo path (must not exist)
        creator: Creator identifier for metainfo.plist
    """
    try:
        font.save(path)
        stamp_creator(path, creator)
    except (UFOLibError, OSError) as e:
        logger.error(f"Saving UFO failed: {e}")
        sys.exit(1)


def read_creator(path: Path) -> str | None:
    """Read the creator field from a UFO's metainfo.plist."""
    with open(path / METAINFO_FILENAME, "rb") as f:
        return plistlib.load(f).get("creator")
