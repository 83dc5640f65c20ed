"""An interactive conversation driven by a keyword script."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from typing import TextIO

from labkit.elizastate import ElizaState
from labkit.rules import choose_rule, find_rules, rule_apply
from labkit.script import parse_eliza_script
from labkit.textutils import rewrite_string, tokenize, trim_newline

NO_MATCH_KEY = "xnone"
NO_RULE_MESSAGE = "<failed to find *any* usable rule>"


def tokenize_and_rewrite(state: ElizaState, text: str) -> list[str]:
    """Lower-cased tokens of text, each replaced by its synonym target if it has one."""
    tokens = (token.lower() for token in tokenize(text))
    return [state.synonyms.get(token, token) for token in tokens]


def is_exit(state: ElizaState, text: str) -> bool:
    """True if text, ignoring case, is one of the quit words."""
    return text.lower() in state.quit_words


def respond(
    state: ElizaState, text: str, rng: random.Random | None = None
) -> str | None:
    """Produce a reply to one line of input.

    Raises LookupError if neither the input's keywords nor the fallback key
    give any applicable rule.
    """
    line = rewrite_string(state.prereplace, trim_newline(text))
    applicable = []
    for token in tokenize_and_rewrite(state, line):
        applicable = find_rules(state, token, line) + applicable
    if not applicable:
        applicable = find_rules(state, NO_MATCH_KEY, line)
    if not applicable:
        raise LookupError("failed to find any usable rule")
    return rule_apply(state, choose_rule(applicable, rng), line)


def run(
    state: ElizaState,
    infile: TextIO,
    outfile: TextIO,
    rng: random.Random | None = None,
) -> None:
    """Hold a conversation, reading lines from infile until a quit word or end of input."""
    rng = rng if rng is not None else random.Random()

    def say(message: str) -> None:
        outfile.write(f"ELIZA> {message}\n")
        outfile.flush()

    def prompt_user() -> None:
        outfile.write("USER> ")
        outfile.flush()

    say(state.begin)
    prompt_user()
    for raw in infile:
        line = trim_newline(raw)
        if is_exit(state, line):
            say(state.end)
            break
        try:
            reply = respond(state, line, rng)
        except LookupError:
            outfile.write(NO_RULE_MESSAGE)
        else:
            if reply is not None:
                say(reply)
        prompt_user()


def main(argv: Sequence[str] | None = None) -> int:
    """Load a script and talk on standard input and output."""
    parser = argparse.ArgumentParser(description="Talk to a scripted therapist.")
    parser.add_argument("--script", default="./script")
    args = parser.parse_args(argv)

    state = ElizaState()
    try:
        parse_eliza_script(state, args.script)
    except OSError as error:
        print(f"parse_eliza_script: {error}", file=sys.stderr)
        return 1
    run(state, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())