# Copyright 2026, typofix developers
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Word lists usable as dictionary oracles

A `WordList` owns its words and the way to load them. It can be loaded
synchronously with `load()` or from a background thread with
`load_in_background()`. Membership queries never block: until the list has
reached `LoadState.READY` every word is reported as unknown, so spelling
correction simply leaves input unchanged while the list is still loading or
after loading failed.
"""
from __future__ import annotations

from . import envdefault
from enum import Enum
from typing import Callable, Iterable, TYPE_CHECKING

import json
import logging
import re
import threading

if TYPE_CHECKING:
    from .client import WordListClient

LINE_SPLIT_RE = re.compile(r"\r?\n")


class WordListError(Exception):
    """Word list could not be used"""


class LoadState(Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


def parse_word_list(text: str) -> frozenset[str]:
    """Newline-delimited words, trimmed and lowercased, blank lines ignored"""
    return frozenset(line.strip().lower() for line in LINE_SPLIT_RE.split(text) if line.strip())


def read_word_file(path: str) -> str:
    with open(path, encoding="utf-8") as fp:
        return fp.read()


class WordList:
    def __init__(
        self,
        source: Callable[[], str] | None = None,
        *,
        words: Iterable[str] | None = None,
        description: str = "",
    ) -> None:
        self.log = logging.getLogger("WordList")
        self.source = source
        self.description = description
        self.error: BaseException | None = None
        self._lock = threading.Lock()
        self._loaded = threading.Event()
        self._thread: threading.Thread | None = None
        self._words: frozenset[str] = frozenset()
        self._state = LoadState.UNINITIALIZED
        if words is not None:
            self._publish(frozenset(word.strip().lower() for word in words if word.strip()))

    @classmethod
    def from_words(cls, words: Iterable[str]) -> WordList:
        return cls(words=words, description="in-memory")

    @classmethod
    def from_file(cls, path: str) -> WordList:
        return cls(lambda: read_word_file(path), description=path)

    @classmethod
    def from_url(cls, url: str, client: WordListClient | None = None) -> WordList:
        if client is None:
            from .client import WordListClient

            client = WordListClient()
        return cls(lambda: client.fetch(url), description=url)

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def ready(self) -> bool:
        return self._state is LoadState.READY

    def _publish(self, words: frozenset[str]) -> None:
        self._words = words
        self._state = LoadState.READY
        self._loaded.set()

    def _begin(self) -> bool:
        """Move to LOADING, returning False if another load is running or the list is ready"""
        with self._lock:
            if self._state in (LoadState.LOADING, LoadState.READY):
                return False
            if self.source is None:
                raise WordListError("word list has no source to load from")
            self._state = LoadState.LOADING
            self._loaded.clear()
            self.error = None
            return True

    def _run_source(self) -> None:
        assert self.source is not None
        try:
            words = parse_word_list(self.source())
            if not words:
                raise WordListError(f"word list {self.description or '(unnamed)'} is empty")
        except Exception as ex:
            with self._lock:
                self.error = ex
                self._state = LoadState.FAILED
                self._loaded.set()
            raise

        with self._lock:
            self._publish(words)
        self.log.debug("loaded %d words from %s", len(words), self.description)

    def load(self) -> WordList:
        """Load the words in the calling thread; errors are raised to the caller"""
        if self._begin():
            self._run_source()
        elif self._state is LoadState.LOADING and not self.wait():
            raise WordListError(f"loading word list {self.description} failed") from self.error
        return self

    def _load_quietly(self) -> None:
        try:
            self._run_source()
        except Exception as ex:  # pylint: disable=broad-except
            self.log.warning("Loading word list %s failed: %s: %s", self.description, ex.__class__.__name__, ex)

    def load_in_background(self) -> threading.Thread | None:
        """Start loading in a daemon thread unless a load is running or already done"""
        if not self._begin():
            return None
        self._thread = threading.Thread(target=self._load_quietly, name="typofix-wordlist", daemon=True)
        self._thread.start()
        return self._thread

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for a running load to finish; True when the words are available"""
        if self._state is LoadState.UNINITIALIZED:
            return False
        self._loaded.wait(timeout)
        return self.ready

    def has_word(self, word: str) -> bool:
        if self._state is not LoadState.READY:
            return False
        return word in self._words

    __call__ = has_word

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.has_word(word)

    def __len__(self) -> int:
        return len(self._words) if self.ready else 0

    def __repr__(self) -> str:
        return f"<WordList {self.description or '(unnamed)'} state={self._state.value} words={len(self)}>"


_default_word_list: WordList | None = None
_default_lock = threading.Lock()


def read_client_config() -> dict:
    """Settings from the JSON config file, empty if there is none"""
    try:
        with open(envdefault.TYPOFIX_CLIENT_CONFIG, encoding="utf-8") as fp:
            config = json.load(fp)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as ex:
        raise WordListError(f"failed to read config file {envdefault.TYPOFIX_CLIENT_CONFIG!r}: {ex}") from ex
    if not isinstance(config, dict):
        raise WordListError(f"config file {envdefault.TYPOFIX_CLIENT_CONFIG!r} does not contain an object")
    return config


def get_default_word_list() -> WordList:
    """Process-level word list, started loading on first use

    The source is TYPOFIX_WORDS_FILE or TYPOFIX_WORDS_URL, falling back to
    `words_file` and `words_url` in the config file written by `typofix words fetch`.
    """
    global _default_word_list  # pylint: disable=global-statement
    with _default_lock:
        if _default_word_list is None:
            words_file = envdefault.TYPOFIX_WORDS_FILE
            words_url = envdefault.TYPOFIX_WORDS_URL
            if not words_file and not words_url:
                config = read_client_config()
                words_file = config.get("words_file")
                words_url = config.get("words_url")
            if words_file:
                _default_word_list = WordList.from_file(words_file)
            elif words_url:
                _default_word_list = WordList.from_url(words_url)
            else:
                raise WordListError(
                    "no word list configured: set TYPOFIX_WORDS_FILE or TYPOFIX_WORDS_URL, or run 'typofix words fetch'"
                )
            _default_word_list.load_in_background()
        return _default_word_list
