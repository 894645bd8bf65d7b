# src/iconsprite/config.py
from pathlib import Path

VERSION = "1.0.0"

DEFAULT_INPUT_DIR = Path("input")
DEFAULT_OUTPUT_DIR = Path("output")

ICON_DIR_NAME = "icons"
SPRITE_FILE_NAME = "sprite.svg"
USE_EXAMPLE_FILE_NAME = "use-example.html"

# gitwildmatch patterns for the files picked up from the input tree
SVG_PATTERNS = [
    "*.svg",
]

# Leading numerals are not valid at the start of an id
NUMBER_WORDS = {
    "1": "one",
    "2": "two",
    "3": "three",
    "4": "four",
    "5": "five",
    "6": "six",
    "7": "seven",
    "8": "eight",
    "9": "nine",
    "10": "one-k",
    "11": "eleven",
    "12": "twelve",
    "13": "thirteen",
    "14": "fourteen",
    "15": "fifteen",
    "16": "sixteen",
    "17": "seventeen",
    "18": "eighteen",
    "19": "nineteen",
    "20": "twenty",
    "21": "twenty-one",
    "22": "twenty-two",
    "23": "twenty-three",
    "24": "twenty-four",
    "30": "thirty",
    "60": "sixty",
    "90": "ninety",
    "100": "one-hundred",
    "200": "two-hundred",
    "300": "three-hundred",
    "360": "three-sixty",
}

# Bundle loaded by --optimize
OPTIMAL_OPTIONS = {
    "sprite": True,
    "icons": True,
    "stroke": "currentColor",
    "fill": "currentColor",
    "add_id": True,
    "remove_size": True,
    "colors": True,
    "remove_style": True,
    "stroke_width": None,
    "force_stroke": False,
    "force_fill": False,
}

SPRITE_HEADER = '<svg width="0" height="0" style="display: none;">\n'
SPRITE_FOOTER = "\n</svg>"
