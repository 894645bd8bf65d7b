# src/iconsprite/core/report.py
import sys
from dataclasses import fields
from typing import List, Sequence

from tqdm import tqdm

from iconsprite.models import ConversionResult, ConverterOptions, RenameRecord


def log(options: ConverterOptions, message: str) -> None:
    """Prints a debug message without breaking an active progress bar."""
    if options.debug:
        tqdm.write(message)


def format_table(headers: Sequence[str], rows: List[Sequence[object]]) -> str:
    """Renders rows as fixed-width columns separated by ' | '."""
    cells = [[str(c) for c in row] for row in rows]
    widths = [len(h) for h in headers]
    for row in cells:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def _line(values: Sequence[str]) -> str:
        padded = [v.ljust(w) for v, w in zip(values, widths)]
        padded[-1] = values[-1]
        return " | ".join(padded)

    rule = "-" * max(60, len(_line(headers)))
    lines = [_line(headers), rule]
    lines.extend(_line(row) for row in cells)
    lines.append(rule)
    return "\n".join(lines) + "\n"


def print_options(options: ConverterOptions) -> None:
    rows = [(f.name, getattr(options, f.name)) for f in fields(options)]
    print(format_table(["Option", "Value"], rows))


def print_summary(result: ConversionResult) -> None:
    print()
    print(f"Output: {result.output_dir}")
    print()

    if result.sprite_file:
        print(f"Sprite: {result.sprite_file}")
        print(f"Sprite use example: {result.use_example_file}")
    if result.icon_files:
        print(f"Icons:  {len(result.icon_files)} files in {result.icon_files[0].parent}")
    print()


def print_renamed(renamed: List[RenameRecord]) -> None:
    if not renamed:
        return

    print("Duplicate names found, the following icons were renamed to avoid conflicts:", file=sys.stderr)
    rows = [(i, r.input, r.output) for i, r in enumerate(renamed)]
    print(format_table(["#", "Input", "Output"], rows))
