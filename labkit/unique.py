"""Extract the distinct characters of a string in order of first appearance."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def derived_lookup_table(text: str) -> str:
    """Return each distinct character of text once, in the order first seen."""
    return "".join(dict.fromkeys(text))


def copy_unique_letters(text: str, number_letters: int) -> str:
    """Distinct characters among the first number_letters characters of text."""
    return derived_lookup_table(text[: max(number_letters, 0)])


def int_sequence(size: int) -> list[int]:
    """A list whose every element equals its own index."""
    return list(range(max(size, 0)))


def main(argv: Sequence[str] | None = None) -> int:
    """Show the lookup table of a word, then the distinct letters of a phrase."""
    word = "attack"
    print(f"The initial word is: {word}")
    print(f"Derived lookup table: {derived_lookup_table(word)}\n")

    buffer = "good luck"
    size = len(buffer) + 1
    print(f"The contents of buffer is: {buffer}")
    unique = copy_unique_letters(buffer, size)
    numbers = int_sequence(size)
    for position, value in enumerate(numbers):
        print(f"The integer in position {position} is: {value}")
    print(
        f"The unique letters are {unique} and the integer in array position 5 is: "
        f"{numbers[5]}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())