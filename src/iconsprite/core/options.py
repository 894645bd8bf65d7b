# src/iconsprite/core/options.py
from dataclasses import replace

from iconsprite.config import OPTIMAL_OPTIONS
from iconsprite.models import ConfigurationError, ConverterOptions


def apply_optimize(options: ConverterOptions) -> ConverterOptions:
    """
    Swaps the transform flags for the recommended bundle when --optimize is set.
    The caller's sprite, icons, debug and folder choices are kept.
    """
    if not options.optimize:
        return options

    bundle = dict(OPTIMAL_OPTIONS)
    bundle["sprite"] = options.sprite
    bundle["icons"] = options.icons
    return replace(options, **bundle)


def validate_options(options: ConverterOptions) -> None:
    if not options.sprite and not options.icons:
        raise ConfigurationError("Please select at least one option: --sprite or --icons")

    if options.stroke and not options.colors:
        raise ConfigurationError("Please enable --colors to use --stroke")

    if options.fill and not options.colors:
        raise ConfigurationError("Please enable --colors to use --fill")

    # The output folder is wiped before the icons are read
    if options.output == options.input or options.output in options.input.parents:
        raise ConfigurationError(
            f"Output folder '{options.output}' must not contain the input folder '{options.input}'"
        )
