"""Word ladders: chains of words that each differ from the last by one letter."""

from __future__ import annotations

import argparse
import string
import sys
from collections.abc import Iterator, Sequence

from labkit.trie import Dictionary

MAX_WORDS = 7


def valid_step(dictionary: Dictionary, current_word: str, next_word: str) -> bool:
    """True if next_word is in the dictionary and differs from current_word in one letter."""
    if len(current_word) != len(next_word):
        return False
    changes = sum(a != b for a, b in zip(current_word, next_word))
    return changes == 1 and dictionary.find(next_word)


def valid_chain(dictionary: Dictionary, chain: Sequence[str]) -> bool:
    """True if every step is valid and no word repeats an earlier one."""
    for i, (current, following) in enumerate(zip(chain, chain[1:])):
        if not valid_step(dictionary, current, following):
            return False
        if current in chain[:i]:
            return False
    return True


def format_chain(chain: Sequence[str]) -> str:
    """Render a chain one word per line, the ends in upper case, the rest in lower."""
    if not chain:
        raise ValueError("cannot format an empty chain")
    if len(chain) == 1:
        return chain[0].upper() + "\n"
    lines = [chain[0].upper()]
    lines.extend(word.lower() for word in chain[1:-1])
    lines.append(chain[-1].upper())
    return "\n".join(lines) + "\n"


def _neighbours(dictionary: Dictionary, word: str) -> Iterator[str]:
    for position, original in enumerate(word):
        for letter in string.ascii_uppercase:
            if letter == original:
                continue
            candidate = word[:position] + letter + word[position + 1 :]
            if dictionary.find(candidate):
                yield candidate


def _extend(
    dictionary: Dictionary, chain: list[str], target_word: str, max_words: int
) -> bool:
    if len(chain) == max_words:
        return False
    current = chain[-1]
    if valid_step(dictionary, current, target_word):
        chain.append(target_word)
        return True
    for candidate in _neighbours(dictionary, current):
        if candidate in chain:
            continue
        chain.append(candidate)
        if _extend(dictionary, chain, target_word, max_words):
            return True
        chain.pop()
    return False


def find_chain(
    dictionary: Dictionary, start_word: str, target_word: str, max_words: int
) -> list[str] | None:
    """Search depth first for a chain of at most max_words words; None if there is none."""
    if max_words < 1:
        raise ValueError("max_words must be at least 1")
    chain = [start_word]
    if _extend(dictionary, chain, target_word, max_words):
        return chain
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Look for a word ladder between two words and print it."""
    parser = argparse.ArgumentParser(description="Find a word ladder.")
    parser.add_argument("start", nargs="?", default="HARD")
    parser.add_argument("target", nargs="?", default="EASY")
    parser.add_argument("--words", default="words.txt")
    parser.add_argument("--max-words", type=int, default=MAX_WORDS)
    args = parser.parse_args(argv)

    dictionary = Dictionary()
    try:
        dictionary.load_from_file(args.words)
    except OSError as error:
        print(f"File could not be opened: {error}", file=sys.stderr)

    chain = find_chain(dictionary, args.start, args.target, args.max_words)
    verdict = "Found" if chain else "Couldn't find"
    print(f"{verdict} a Chain of {args.max_words} words!")
    if chain:
        sys.stdout.write(format_chain(chain))
    return 0


if __name__ == "__main__":
    sys.exit(main())