from __future__ import annotations

from typing import Callable, Iterable

TagFilter = Callable[[str], bool]

# Penn Treebank tags for punctuation and function words (pronouns,
# determiners, conjunctions, modals, ...). Matching is exact. Brackets are
# listed in every spelling the supported taggers emit.
DEFAULT_UNWANTED_TAGS: tuple[str, ...] = (
    "CC",
    "DT",
    "LRB",
    "RRB",
    "-LRB-",
    "-RRB-",
    "(",
    ")",
    "MD",
    "POS",
    "PRP",
    "UH",
    "WDT",
    "WP",
    "WP$",
    "WRB",
    "$",
    "#",
    ".",
    ",",
    ":",
)

_DEFAULT_UNWANTED = frozenset(DEFAULT_UNWANTED_TAGS)


def is_unwanted_pos(tag: str) -> bool:
    """Return True if words tagged ``tag`` should be left out of the index.

    Tags outside the default set, including ones a custom tagger invents,
    are always kept.
    """
    return tag in _DEFAULT_UNWANTED


def make_tag_filter(tags: Iterable[str]) -> TagFilter:
    unwanted = frozenset(tags)
    if unwanted == _DEFAULT_UNWANTED:
        return is_unwanted_pos

    def _is_unwanted(tag: str) -> bool:
        return tag in unwanted

    return _is_unwanted


__all__ = ["TagFilter", "DEFAULT_UNWANTED_TAGS", "is_unwanted_pos", "make_tag_filter"]
