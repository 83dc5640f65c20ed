"""String helpers for the conversation engine: tokenizing and word rewriting."""

from __future__ import annotations

import re
from collections.abc import Mapping

_WORD_PATTERN = re.compile(r"[^ .?\n]+")


def trim_newline(text: str) -> str:
    """Return text without one trailing newline, if it has one."""
    return text[:-1] if text.endswith("\n") else text


def tokenize(text: str) -> list[str]:
    """Split text into words, treating spaces, full stops, question marks and newlines as breaks."""
    return _WORD_PATTERN.findall(text)


def rewrite_string(substitutions: Mapping[str, str], text: str) -> str:
    """Lower-case each word of text, replace it if substitutions has it, and join with spaces."""
    words = []
    for word in tokenize(text):
        lowered = word.lower()
        words.append(substitutions.get(lowered, lowered))
    return " ".join(words)