# Copyright 2026, typofix developers
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Prefix tree of words, usable as a dictionary oracle via `Trie.contains` or `in`"""
from __future__ import annotations

from typing import Iterable, Iterator


class TrieNode:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.terminal = False


class Trie:
    def __init__(self, words: Iterable[str] = ()) -> None:
        self.root = TrieNode()
        self.size = 0
        self.update(words)

    def add(self, word: str) -> None:
        node = self.root
        for char in word:
            node = node.children.setdefault(char, TrieNode())
        if not node.terminal:
            node.terminal = True
            self.size += 1

    def update(self, words: Iterable[str]) -> None:
        for word in words:
            self.add(word)

    def _find(self, prefix: str) -> TrieNode | None:
        node = self.root
        for char in prefix:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def contains(self, word: str) -> bool:
        node = self._find(word)
        return node is not None and node.terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def has_prefix(self, prefix: str) -> bool:
        return self._find(prefix) is not None

    def _walk(self, node: TrieNode, prefix: str) -> Iterator[str]:
        stack = [(node, prefix)]
        while stack:
            node, prefix = stack.pop()
            if node.terminal:
                yield prefix
            for char, child in node.children.items():
                stack.append((child, prefix + char))

    def words_with_prefix(self, prefix: str) -> list[str]:
        """All words starting with `prefix`, sorted"""
        node = self._find(prefix)
        if node is None:
            return []
        return sorted(self._walk(node, prefix))

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[str]:
        return iter(self.words_with_prefix(""))
