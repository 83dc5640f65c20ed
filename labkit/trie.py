"""A digital trie of upper-case words."""

from __future__ import annotations

from os import PathLike

MAX_WORD_SIZE = 20


class _Node:
    __slots__ = ("children", "end_of_word")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.end_of_word = False


def _is_valid(word: str) -> bool:
    return all("A" <= letter <= "Z" for letter in word)


class Dictionary:
    """A set of words made of the letters A to Z, stored as a trie."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> bool:
        """Add a word; return False if it holds anything other than A-Z."""
        if not _is_valid(word):
            return False
        node = self._root
        for letter in word:
            node = node.children.setdefault(letter, _Node())
        node.end_of_word = True
        return True

    def find(self, word: str) -> bool:
        """Return True if the word was inserted."""
        if not isinstance(word, str) or not _is_valid(word):
            return False
        node = self._root
        for letter in word:
            child = node.children.get(letter)
            if child is None:
                return False
            node = child
        return node.end_of_word

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.find(word)

    def load_from_file(self, filename: str | PathLike[str]) -> int:
        """Insert every line of a file as a word; return how many were accepted.

        Raises OSError if the file cannot be opened.
        """
        count = 0
        with open(filename, encoding="utf-8") as handle:
            for line in handle:
                word = line.strip("\n")
                if word and self.insert(word):
                    count += 1
        return count