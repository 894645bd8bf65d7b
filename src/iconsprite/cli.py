# src/iconsprite/cli.py
import sys
import argparse
from pathlib import Path

# Module imports
from iconsprite.config import DEFAULT_INPUT_DIR, DEFAULT_OUTPUT_DIR, VERSION
from iconsprite.core.converter import convert_icons
from iconsprite.core.options import apply_optimize, validate_options
from iconsprite.core.report import print_options, print_renamed, print_summary
from iconsprite.core.scanner import discover_icons
from iconsprite.models import ConverterOptions, IconspriteError

def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="iconsprite",
        description="Converts SVG icons to a sprite and individual icon files."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("--input", type=str, default=str(DEFAULT_INPUT_DIR), help="Path to the input folder")
    parser.add_argument("--output", type=str, default=str(DEFAULT_OUTPUT_DIR), help="Path to the output folder")
    parser.add_argument("--debug", action="store_true", help="Show all log messages")
    parser.add_argument("--optimize", action="store_true", help="Loads optimal options")
    parser.add_argument("--sprite", action="store_true", help="Generates a sprite.svg file with all icons.")
    parser.add_argument("--icons", action="store_true", help="Generates individual icon files.")

    parser.add_argument("--fill", type=str, default=None, help="default fill color")
    parser.add_argument("--id", dest="add_id", action="store_true", help="Adds an id to each icon.")
    parser.add_argument("--remove-size", action="store_true", help="Removes width and height.")
    parser.add_argument("--remove-style", action="store_true", help="Removes the style attribute.")

    parser.add_argument("--colors", action="store_true", help="Changes the fill and stroke colors.")
    parser.add_argument("--stroke", type=str, default=None, help="default stroke color")
    parser.add_argument("--stroke-width", type=str, default=None, help="Changes the stroke width")
    parser.add_argument("--force-stroke", action="store_true", help="Sets the stroke color if it's none.")
    parser.add_argument("--force-fill", action="store_true", help="Sets the fill color if it's none.")
    return parser

def options_from_args(args: argparse.Namespace) -> ConverterOptions:
    return ConverterOptions(
        input=Path(args.input).resolve(),
        output=Path(args.output).resolve(),
        debug=args.debug,
        optimize=args.optimize,
        sprite=args.sprite,
        icons=args.icons,
        add_id=args.add_id,
        remove_size=args.remove_size,
        colors=args.colors,
        remove_style=args.remove_style,
        stroke=args.stroke,
        fill=args.fill,
        stroke_width=args.stroke_width,
        force_stroke=args.force_stroke,
        force_fill=args.force_fill,
    )

def main(argv=None):
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args(argv)

        options = apply_optimize(options_from_args(args))
        if options.debug:
            print_options(options)

        # 2. Checks (nothing is written before these pass)
        validate_options(options)
        files = discover_icons(options.input)

        print(f"--- iconsprite ---")
        print(f"Input:  {options.input} ({len(files)} icons)")

        # 3. Conversion
        result = convert_icons(files, options)

        # 4. Report
        print_summary(result)
        print_renamed(result.renamed)

    except IconspriteError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
