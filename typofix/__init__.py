# Copyright 2026, typofix developers
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .dictionary import get_default_word_list, LoadState, parse_word_list, WordList, WordListError
from .distance import levenshtein
from .speller import correct, get_candidates, get_repeat_variants, preserve_case
from .trie import Trie

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

__all__ = [
    "correct",
    "get_candidates",
    "get_default_word_list",
    "get_repeat_variants",
    "levenshtein",
    "LoadState",
    "parse_word_list",
    "preserve_case",
    "Trie",
    "WordList",
    "WordListError",
]
