# src/iconsprite/core/transforms.py
"""
Textual rewrites applied to each icon.

The markup is never parsed: every step is a regular expression substitution
over the raw document, so only attributes written in the expected form are
touched.
"""
import re
from typing import Optional

from iconsprite.models import ConverterOptions, IconDocument

_SVG_OPEN = re.compile(r"<svg")
_SVG_OPEN_TAG = re.compile(r"<svg ")
_SVG_CLOSE_TAG = re.compile(r"</svg>")

# Lookbehind keeps stroke-width="2" from matching as width="2"
_HEIGHT = re.compile(r'(?<![\w-])height="\d+"\s', re.ASCII)
_WIDTH = re.compile(r'(?<![\w-])width="\d+"\s', re.ASCII)
_STROKE_WIDTH = re.compile(r'stroke-width="([\d.]+)"', re.ASCII)

_HEX_STROKE = re.compile(r'stroke="#\w+"', re.ASCII)
_HEX_FILL = re.compile(r'fill="#\w+"', re.ASCII)
_NO_STROKE = re.compile(r'stroke="none"')
_NO_FILL = re.compile(r'fill="none"')

_STYLE = re.compile(r'style="[\w\s.#;:()_-]+"\s', re.ASCII)


def add_id(svg: str, name: str) -> str:
    return _SVG_OPEN.sub(lambda _: f'<svg id="{name}"', svg, count=1)


def remove_size(svg: str, stroke_width: Optional[str] = None) -> str:
    """
    Drops numeric width/height attributes. Only the first stroke-width is
    rewritten, and only when an override is given.
    """
    svg = _HEIGHT.sub("", svg)
    svg = _WIDTH.sub("", svg)
    return _STROKE_WIDTH.sub(
        lambda m: f'stroke-width="{stroke_width or m.group(1)}"', svg, count=1
    )


def add_color(
    svg: str,
    stroke: Optional[str] = None,
    fill: Optional[str] = None,
    force_stroke: bool = False,
    force_fill: bool = False,
) -> str:
    """
    Replaces hex stroke and fill colors.

    Hex fills take the *stroke* color, not the fill color; --fill only applies
    to fill="none" through force_fill.
    """
    if stroke:
        svg = _HEX_STROKE.sub(lambda _: f'stroke="{stroke}"', svg)
        svg = _HEX_FILL.sub(lambda _: f'fill="{stroke}"', svg)

    if force_stroke and stroke:
        svg = _NO_STROKE.sub(lambda _: f'stroke="{stroke}"', svg)

    if force_fill and fill:
        svg = _NO_FILL.sub(lambda _: f'fill="{fill}"', svg)

    return svg


def remove_styles(svg: str) -> str:
    return _STYLE.sub("", svg)


def spritize(svg: str, stroke_width: Optional[str] = None) -> str:
    """Turns a standalone document into a <symbol> with a themeable stroke width."""
    svg = _STROKE_WIDTH.sub(
        lambda m: f'stroke-width="var(--stroke-width, {stroke_width or m.group(1)})"',
        svg,
        count=1,
    )
    svg = _SVG_OPEN_TAG.sub("<symbol ", svg, count=1)
    return _SVG_CLOSE_TAG.sub("</symbol>", svg, count=1)


def transform_icon(content: str, name: str, options: ConverterOptions) -> IconDocument:
    """Runs the enabled rewrites in order and derives the sprite fragment."""
    if options.add_id:
        content = add_id(content, name)

    if options.remove_size:
        content = remove_size(content, options.stroke_width)

    if options.colors:
        content = add_color(
            content,
            stroke=options.stroke,
            fill=options.fill,
            force_stroke=options.force_stroke,
            force_fill=options.force_fill,
        )

    if options.remove_style:
        content = remove_styles(content)

    return IconDocument(
        name=name,
        standalone=content,
        fragment=spritize(content, options.stroke_width),
    )
