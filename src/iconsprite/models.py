# src/iconsprite/models.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from iconsprite.config import SPRITE_FOOTER, SPRITE_HEADER


class IconspriteError(Exception):
    """Base class for errors reported to the user before any output is written."""


class ConfigurationError(IconspriteError):
    pass


class DiscoveryError(IconspriteError):
    pass


@dataclass(frozen=True)
class ConverterOptions:
    """Immutable run configuration, built once from the command line."""
    input: Path
    output: Path
    debug: bool = False
    optimize: bool = False
    sprite: bool = False
    icons: bool = False
    add_id: bool = False
    remove_size: bool = False
    colors: bool = False
    remove_style: bool = False
    stroke: Optional[str] = None
    fill: Optional[str] = None
    stroke_width: Optional[str] = None
    force_stroke: bool = False
    force_fill: bool = False


@dataclass(frozen=True)
class RenameRecord:
    """An icon that had to take a different name to avoid a collision."""
    input: Path
    output: str


@dataclass(frozen=True)
class ResolvedIcon:
    path: Path
    name: str


@dataclass(frozen=True)
class IconDocument:
    name: str
    standalone: str
    fragment: str


@dataclass
class SpriteDocument:
    fragments: List[str] = field(default_factory=list)

    def add(self, fragment: str) -> None:
        self.fragments.append(fragment)

    def render(self) -> str:
        return SPRITE_HEADER + "".join(self.fragments) + SPRITE_FOOTER


@dataclass(frozen=True)
class ConversionResult:
    output_dir: Path
    icon_files: List[Path]
    renamed: List[RenameRecord]
    example_name: str = ""
    sprite_file: Optional[Path] = None
    use_example_file: Optional[Path] = None
