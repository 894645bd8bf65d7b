# src/iconsprite/core/naming.py
import re
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Set, Tuple, Union

from iconsprite.config import NUMBER_WORDS
from iconsprite.models import RenameRecord, ResolvedIcon

PathLike = Union[str, Path]

_SPECIAL_CHARACTERS = re.compile(r"[^a-zA-Z0-9]")
_LEADING_NUMBER = re.compile(r"^[0-9]+")


def remove_special_characters(text: str) -> str:
    return _SPECIAL_CHARACTERS.sub("", text)


def make_base_name(path: PathLike, level: int = -1) -> str:
    """
    Derives a camelCase identifier from one component of a path.

    level=-1 uses the file itself, level=-2 its parent folder.
    Everything after the first dot is dropped, hyphen-separated words are
    joined in camelCase and any remaining non-alphanumeric character is removed.
    """
    parts = Path(path).parts
    if len(parts) < -level:
        return ""

    stem = parts[level].split(".")[0]
    words = stem.split("-")
    camel = words[0] + "".join(w[:1].upper() + w[1:] for w in words[1:])
    return remove_special_characters(camel)


def find_duplicate_names(paths: Iterable[PathLike]) -> Set[str]:
    """Returns every base name shared by two or more files."""
    counts = Counter(make_base_name(p) for p in paths)
    return {name for name, count in counts.items() if count > 1}


def make_icon_name(path: PathLike, duplicates: Set[str]) -> str:
    """
    Returns the base name of a file, or, when that name collides with another
    file of the batch, the capitalised name followed by its folder name
    (icons/a/plus.svg -> "Plusa").
    """
    name = make_base_name(path)
    if name in duplicates:
        name = name[:1].upper() + name[1:] + make_base_name(path, -2)
    return name


def replace_numbers_with_words(name: str) -> str:
    """Replaces a leading run of digits with its word, if there is one."""
    return _LEADING_NUMBER.sub(lambda m: NUMBER_WORDS.get(m.group(0), m.group(0)), name, count=1)


def resolve_names(paths: List[PathLike]) -> Tuple[List[ResolvedIcon], List[RenameRecord]]:
    """
    Assigns a unique name to every path, in the given order.

    Returns the resolved icons (same order as `paths`) and a record for every
    icon that could not keep its natural name.
    """
    duplicates = find_duplicate_names(paths)
    taken: Set[str] = set()
    resolved: List[ResolvedIcon] = []
    renamed: List[RenameRecord] = []

    for path in paths:
        path = Path(path)
        collided = make_base_name(path) in duplicates
        name = replace_numbers_with_words(make_icon_name(path, duplicates))

        # Folder disambiguation is not always enough (x/a/plus.svg, y/a/plus.svg)
        if name in taken:
            suffix = 2
            while f"{name}{suffix}" in taken:
                suffix += 1
            name = f"{name}{suffix}"
            collided = True

        taken.add(name)
        resolved.append(ResolvedIcon(path=path, name=name))
        if collided:
            renamed.append(RenameRecord(input=path, output=name))

    return resolved, renamed
