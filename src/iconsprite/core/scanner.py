# src/iconsprite/core/scanner.py
from pathlib import Path
from typing import List, Optional

import pathspec

from iconsprite.config import SVG_PATTERNS
from iconsprite.models import DiscoveryError


def load_icon_spec(patterns: Optional[List[str]] = None) -> pathspec.PathSpec:
    """Creates the PathSpec deciding which file names are icons."""
    return pathspec.PathSpec.from_lines("gitwildmatch", patterns or SVG_PATTERNS)


def _collect_icons(folder: Path, spec: pathspec.PathSpec) -> List[Path]:
    # Files of a folder come before the files of its subfolders
    entries = sorted(folder.iterdir(), key=lambda p: p.name)
    files = [p for p in entries if p.is_file() and spec.match_file(p.name)]

    for sub in entries:
        if sub.is_dir() and not sub.is_symlink():
            files.extend(_collect_icons(sub, spec))

    return files


def discover_icons(input_dir: Path) -> List[Path]:
    """
    Walks the input tree and returns the absolute paths of all icon files.
    Raises DiscoveryError if the directory is missing or holds no icon.
    """
    root = Path(input_dir).resolve()
    if not root.is_dir():
        raise DiscoveryError(f"Input folder '{root}' does not exist.")

    files = _collect_icons(root, load_icon_spec())
    if not files:
        raise DiscoveryError(f'No input files found, please add your icons in "{root}".')

    return files
