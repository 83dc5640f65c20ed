"""Matching keyword rules against input and filling in their reply templates."""

from __future__ import annotations

import random
import re
from collections.abc import Sequence

from labkit.elizastate import ElizaState, Rule
from labkit.textutils import rewrite_string, tokenize

_GROUP_REF = re.compile(r"\((\d)\)")


class RuleError(Exception):
    """A rule's decomposition pattern is not a usable regular expression."""


def decomp_to_regex(decomp: str) -> str:
    """Turn a decomposition pattern into a regular expression.

    ``*`` captures any text, a space becomes an optional space and ``@``
    markers are dropped; every other character stands for itself.
    """
    parts = []
    for char in decomp:
        if char == "*":
            parts.append("(.*)")
        elif char == " ":
            parts.append(" ?")
        elif char == "@":
            continue
        else:
            parts.append(char)
    return "".join(parts)


def _compile(decomp: str) -> re.Pattern[str]:
    try:
        return re.compile(decomp_to_regex(decomp))
    except re.error as error:
        raise RuleError(f"bad decomposition pattern {decomp!r}: {error}") from error


def goto_target(reasmb: str) -> str | None:
    """Return the rule key named by a ``goto <key>`` template, else None."""
    tokens = tokenize(reasmb)
    if len(tokens) == 2 and tokens[0] == "goto":
        return tokens[1]
    return None


def rule_applies(rule: Rule, text: str) -> bool:
    """True if the rule's decomposition pattern matches somewhere in text."""
    try:
        pattern = _compile(rule.decomp)
    except RuleError:
        return False
    return pattern.search(text) is not None


def rule_apply(state: ElizaState, rule: Rule, text: str) -> str | None:
    """Fill the rule's template from a match against text; None if it does not match.

    Each ``(n)`` in the template is replaced by capture group n, rewritten with
    the state's post-substitutions; a group that took no part gives nothing.
    Raises RuleError if the decomposition pattern cannot be compiled.
    """
    match = _compile(rule.decomp).search(text)
    if match is None:
        return None

    def fill(ref: re.Match[str]) -> str:
        index = int(ref.group(1))
        value = match.group(index) if index <= match.re.groups else None
        return rewrite_string(state.postreplace, value or "")

    return _GROUP_REF.sub(fill, rule.reasmb)


def _collect(state: ElizaState, key: str, text: str, out: list[Rule]) -> None:
    for rule in state.rules:
        if rule.key == key and rule_applies(rule, text):
            target = goto_target(rule.reasmb)
            if target is None:
                out.insert(0, rule)
            else:
                _collect(state, target, text, out)


def find_rules(state: ElizaState, key: str, text: str) -> list[Rule]:
    """All rules for key that match text, following goto templates.

    Each rule found is placed in front of those found before it.
    """
    found: list[Rule] = []
    _collect(state, key, text, found)
    return found


def highest_score(rules: Sequence[Rule]) -> int:
    """The largest precedence among the rules."""
    if not rules:
        raise ValueError("no rules to score")
    return max(rule.precedence for rule in rules)


def choose_rule(rules: Sequence[Rule], rng: random.Random | None = None) -> Rule:
    """Pick a rule at random from the first n rules, n being how many share the top score."""
    best = highest_score(rules)
    count = sum(1 for rule in rules if rule.precedence == best)
    rng = rng if rng is not None else random.Random()
    return rules[rng.randrange(count)]