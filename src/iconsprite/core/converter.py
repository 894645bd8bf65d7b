# src/iconsprite/core/converter.py
import shutil
from pathlib import Path
from typing import List

from tqdm import tqdm

from iconsprite.config import ICON_DIR_NAME, SPRITE_FILE_NAME, USE_EXAMPLE_FILE_NAME
from iconsprite.core.naming import resolve_names
from iconsprite.core.report import log
from iconsprite.core.transforms import transform_icon
from iconsprite.models import ConversionResult, ConverterOptions, SpriteDocument


def clean_output(output_dir: Path, icon_dir: Path, icons: bool) -> None:
    """Deletes and recreates the output folders so every run starts empty."""
    if output_dir.exists():
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    if icons:
        if icon_dir.exists():
            shutil.rmtree(icon_dir)
        icon_dir.mkdir(parents=True, exist_ok=True)


def make_use_example(name: str) -> str:
    return "\n".join([
        '<svg class="w-6 h-auto aspect-square">',
        f'    <use xlink:href="{SPRITE_FILE_NAME}#{name}"></use>',
        "</svg>",
    ])


def _read(path: Path) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def convert_icons(files: List[Path], options: ConverterOptions, progress: bool = True) -> ConversionResult:
    """
    Converts the discovered icons and writes the enabled outputs.

    Icons are processed in reverse discovery order; the first processed icon
    is the one referenced by the use example.
    """
    output_dir = Path(options.output).resolve()
    icon_dir = output_dir / ICON_DIR_NAME

    resolved, renamed = resolve_names(list(reversed(files)))

    clean_output(output_dir, icon_dir, options.icons)

    sprite = SpriteDocument()
    icon_files: List[Path] = []
    example_name = ""

    with tqdm(total=len(resolved), desc="Processing icons", unit="icon", disable=not progress) as bar:
        for icon in resolved:
            document = transform_icon(_read(icon.path), icon.name, options)

            if options.sprite:
                sprite.add(document.fragment)

            if options.icons:
                target = icon_dir / f"{icon.name}.svg"
                _write(target, document.standalone)
                icon_files.append(target)

            if not example_name:
                example_name = icon.name

            log(options, f"  {icon.path} -> {icon.name}")
            bar.update(1)

    if not options.sprite:
        return ConversionResult(
            output_dir=output_dir,
            icon_files=icon_files,
            renamed=renamed,
            example_name=example_name,
        )

    sprite_file = output_dir / SPRITE_FILE_NAME
    use_example_file = output_dir / USE_EXAMPLE_FILE_NAME

    log(options, f"Writing {SPRITE_FILE_NAME}")
    _write(sprite_file, sprite.render())
    _write(use_example_file, make_use_example(example_name))

    return ConversionResult(
        output_dir=output_dir,
        icon_files=icon_files,
        renamed=renamed,
        example_name=example_name,
        sprite_file=sprite_file,
        use_example_file=use_example_file,
    )
