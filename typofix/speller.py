# Copyright 2026, typofix developers
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Single-word spelling correction against a dictionary oracle"""
from __future__ import annotations

from .distance import levenshtein
from itertools import groupby
from typing import Callable, Container, Iterable, Union

import string

ALPHABET = string.ascii_lowercase

Oracle = Union[Callable[[str], bool], Container[str]]


def as_predicate(oracle: Oracle) -> Callable[[str], bool]:
    """Accept either a `has_word(word)` callable or anything supporting `in`"""
    if callable(oracle):
        return lambda word: bool(oracle(word))  # type: ignore[operator]
    return lambda word: word in oracle


def get_runs(word: str) -> list[tuple[str, int]]:
    """Split `word` into maximal runs of one repeated character, e.g. "coool" -> [("c", 1), ("o", 3), ("l", 1)]"""
    return [(char, len(list(group))) for char, group in groupby(word)]


def get_repeat_variants(word: str) -> list[str]:
    """All spellings where every repeated run is shortened to one or two characters.

    Runs of a single character are kept as they are. Each run longer than one
    character contributes one bit to a mask over the Cartesian product of
    choices, the first repeated run being the most significant bit; a cleared
    bit keeps a single character and a set bit keeps two.
    """
    runs = get_runs(word)
    repeated = [index for index, (_, length) in enumerate(runs) if length > 1]

    variants: dict[str, None] = {}
    for mask in range(1 << len(repeated)):
        lengths = [1] * len(runs)
        for bit, index in enumerate(repeated):
            if mask & (1 << (len(repeated) - 1 - bit)):
                lengths[index] = 2
        variants["".join(char * length for (char, _), length in zip(runs, lengths))] = None

    return list(variants)


def get_edits1(word: str) -> Iterable[str]:
    """Single deletions, then insertions, then substitutions of `word`, in that order"""
    splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]
    yield from (L + R[1:] for L, R in splits if R)
    yield from (L + c + R for L, R in splits for c in ALPHABET)
    yield from (L + c + R[1:] for L, R in splits if R for c in ALPHABET if c != R[0])


def get_candidates(word: str) -> list[str]:
    """Distinct candidate corrections of a lowercase word.

    The order is the enumeration order: repeat-run variants first, then the
    single edits. A duplicate keeps the position where it was first produced,
    which makes the tie-break in `correct` reproducible.
    """
    candidates: dict[str, None] = dict.fromkeys(get_repeat_variants(word))
    for edit in get_edits1(word):
        candidates.setdefault(edit, None)
    return list(candidates)


def preserve_case(original: str, corrected: str) -> str:
    """Reapply the capitalization style of `original` (all caps, capitalized or lowercase) to `corrected`"""
    if not corrected:
        return original
    if original.upper() == original:
        return corrected.upper()
    if original[0].upper() == original[0]:
        return corrected[0].upper() + corrected[1:]
    return corrected


def correct(raw_word: str, oracle: Oracle) -> str:
    """Return the closest dictionary word for `raw_word`, or `raw_word` itself.

    Words known to the oracle, and words for which no candidate is known, come
    back unchanged. Exceptions raised by the oracle are not caught.
    """
    if not raw_word:
        return raw_word

    has_word = as_predicate(oracle)
    lower = raw_word.lower()
    if has_word(lower):
        return raw_word

    hits = [candidate for candidate in get_candidates(lower) if candidate and has_word(candidate)]
    if not hits:
        return raw_word

    best = min(hits, key=lambda hit: levenshtein(lower, hit))  # min() keeps the first of equal scores
    return preserve_case(raw_word, best)
