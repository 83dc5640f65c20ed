"""Reading conversation scripts made of ``prefix: value`` lines."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from os import PathLike
from typing import TextIO

from labkit.elizastate import ElizaState, Rule
from labkit.textutils import tokenize, trim_newline

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_lines(
    state: ElizaState, lines: Iterable[str], errors: TextIO | None = None
) -> ElizaState:
    """Apply script lines to state, reporting malformed lines to errors (stderr by default).

    Only the text between the first and second colon is a line's value.
    Rules take the length of their decomposition pattern as precedence.
    """
    errors = sys.stderr if errors is None else errors
    key: str | None = None
    decomp: str | None = None
    priority = 0

    for raw in lines:
        line = trim_newline(raw)
        body = line.lstrip(" \t")
        fields = [part for part in body.split(":") if part]
        if not fields:
            errors.write(f"Expected key-value pair: {line}\n")
            continue

        prefix = fields[0]
        start = len(line) - len(body)
        shown = line[: line.index(prefix, start) + len(prefix)]
        if len(fields) < 2:
            errors.write(f"Couldn't find value of key: {shown}\n")
            continue
        value = fields[1].lstrip(" ")

        match prefix:
            case "initial":
                state.begin = value
            case "final":
                state.end = value
            case "quit":
                state.add_quit_word(value)
            case "synon":
                tokens = tokenize(value)
                for word in tokens[1:]:
                    state.add_synonym(word, tokens[0])
            case "pre" | "post":
                tokens = tokenize(value)
                if not tokens:
                    errors.write(f"Couldn't find value of key: {shown}\n")
                    continue
                add = state.add_prereplace if prefix == "pre" else state.add_postreplace
                add(tokens[0], " ".join(tokens[1:]))
            case "key":
                parts = [part for part in value.split(" ") if part]
                if len(parts) < 2:
                    continue
                decomp = None
                key = parts[0]
                priority = _atoi(parts[1])
            case "decomp":
                if key is None:
                    errors.write(f"Misplaced line: {shown}\n")
                    continue
                decomp = value
                priority = len(decomp)
            case "reasmb":
                if key is None or decomp is None:
                    errors.write(f"Misplaced line: {shown}\n")
                    continue
                state.add_rule(Rule(key, decomp, value, priority))
    return state


def parse_eliza_script(state: ElizaState, path: str | PathLike[str]) -> ElizaState:
    """Load the script file at path into state.

    Raises OSError if the file cannot be opened.
    """
    with open(path, encoding="utf-8") as handle:
        return parse_lines(state, handle)