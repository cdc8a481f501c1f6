"""Pure list normalizers used to derive the constant tables.

Every built list goes through ``sorted_uniq``. Case transforms are applied
afterwards and never reorder or deduplicate, so a transform that maps two
entries onto the same value leaves both in place.
"""

import re
from collections.abc import Iterable
from typing import Union

NestedStrings = Union[str, Iterable["NestedStrings"], None]

_NON_WORD = re.compile(r"[\W_]+")


def lexical_key(value: str) -> tuple[str, str]:
    """Case-insensitive order, ties broken by code point ("B" before "b")."""
    return value.casefold(), value


def sorted_uniq(values: Iterable[str | None]) -> tuple[str, ...]:
    """Drop empty entries and duplicates, then sort ascending.

    Duplicates are compared exactly (case-sensitive). Sorting ignores case
    so that title-casing a sorted list keeps it sorted.
    """
    unique = dict.fromkeys(value for value in values if value)
    return tuple(sorted(unique, key=lexical_key))


def flatten(items: NestedStrings) -> list[str]:
    """Flatten strings and arbitrarily nested iterables of strings depth-first."""
    if items is None:
        return []
    if isinstance(items, str):
        return [items]

    flat: list[str] = []
    for item in items:
        flat.extend(flatten(item))
    return flat


def flatten_and_dedupe_sorted(*items: NestedStrings) -> tuple[str, ...]:
    """Flatten a mix of lists and scalar values, then dedupe and sort."""
    return sorted_uniq(flatten(items))


def to_upper_all(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(value.upper() for value in values)


def _split_words(chunk: str) -> list[str]:
    """Split on lower->upper, acronym->word and letter<->digit boundaries."""
    words = []
    start = 0
    for i in range(1, len(chunk)):
        prev, char = chunk[i - 1], chunk[i]
        nxt = chunk[i + 1] if i + 1 < len(chunk) else ""
        if (
            (prev.islower() and char.isupper())
            or (prev.isupper() and char.isupper() and nxt.islower())
            or (prev.isdigit() != char.isdigit())
        ):
            words.append(chunk[start:i])
            start = i
    words.append(chunk[start:])
    return words


def start_case(value: str) -> str:
    """
    Convert a string to start case.

    Words are split on separators and case boundaries; the first character
    of each word is upper-cased and the rest is kept as is.

        >>> start_case("neighbourhood")
        'Neighbourhood'
        >>> start_case("stop_area")
        'Stop Area'
        >>> start_case("manMade")
        'Man Made'
    """
    words = []
    for chunk in _NON_WORD.split(value):
        if chunk:
            words.extend(_split_words(chunk))
    return " ".join(word[:1].upper() + word[1:] for word in words)


def title_case_all(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(start_case(value) for value in values)
