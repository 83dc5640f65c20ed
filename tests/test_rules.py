import random

import pytest

from labkit.elizastate import ElizaState, Rule
from labkit.rules import (
    RuleError,
    choose_rule,
    decomp_to_regex,
    find_rules,
    goto_target,
    highest_score,
    rule_applies,
    rule_apply,
)


def test_decomp_star_becomes_capture():
    assert decomp_to_regex("*") == "(.*)"


def test_decomp_space_becomes_optional():
    assert decomp_to_regex(" ") == " ?"


def test_decomp_drops_at_marker():
    assert decomp_to_regex("@sad") == "sad"


def test_decomp_plain_text_unchanged():
    assert decomp_to_regex("hello") == "hello"


def test_goto_target_found():
    assert goto_target("goto what") == "what"


@pytest.mark.parametrize("reasmb", ["hello", "goto a b", "goto", "go to"])
def test_goto_target_absent(reasmb):
    assert goto_target(reasmb) is None


def test_rule_applies_matches_anywhere():
    rule = Rule("sorry", "* sorry *", "x")
    assert rule_applies(rule, "i am sorry about it") is True
    assert rule_applies(rule, "hello there") is False


def test_rule_applies_bad_pattern_is_false():
    assert rule_applies(Rule("k", "(", "x"), "(") is False


def test_rule_apply_fills_group():
    state = ElizaState()
    rule = Rule("am", "* am *", "Why are you (2)?")
    assert rule_apply(state, rule, "so i am sad") == "Why are you sad?"


def test_rule_apply_uses_postreplace():
    state = ElizaState()
    state.add_postreplace("my", "your")
    rule = Rule("am", "* am *", "(2)")
    assert rule_apply(state, rule, "i am sad about my cat") == "sad about your cat"


def test_rule_apply_missing_group_is_empty():
    state = ElizaState()
    assert rule_apply(state, Rule("k", "*", "[(5)]"), "hi") == "[]"


def test_rule_apply_group_zero_is_whole_match():
    state = ElizaState()
    assert rule_apply(state, Rule("k", "hello", "(0)"), "say hello") == "hello"


def test_rule_apply_no_match_is_none():
    state = ElizaState()
    assert rule_apply(state, Rule("k", "sorry", "x"), "hello") is None


def test_rule_apply_bad_pattern_raises():
    with pytest.raises(RuleError):
        rule_apply(ElizaState(), Rule("k", "(", "x"), "(")


def test_find_rules_follows_goto():
    state = ElizaState()
    sorry = Rule("sorry", "*", "Please don't apologise.")
    state.add_rule(sorry)
    state.add_rule(Rule("apologise", "*", "goto sorry"))
    assert find_rules(state, "apologise", "anything") == [sorry]


def test_find_rules_order_and_filtering():
    state = ElizaState()
    first = Rule("k", "*", "one")
    second = Rule("k", "*", "two")
    other = Rule("k", "nomatch", "three")
    for rule in (first, second, other):
        state.add_rule(rule)
    assert find_rules(state, "k", "text") == [first, second]


def test_find_rules_unknown_key():
    state = ElizaState()
    state.add_rule(Rule("k", "*", "x"))
    assert find_rules(state, "other", "text") == []


def test_highest_score():
    rules = [Rule("a", "*", "x", 3), Rule("b", "*", "y", 7), Rule("c", "*", "z", 5)]
    assert highest_score(rules) == 7


def test_highest_score_empty_raises():
    with pytest.raises(ValueError):
        highest_score([])


def test_choose_rule_single_top_picks_first():
    rules = [Rule("a", "*", "x", 1), Rule("b", "*", "y", 9), Rule("c", "*", "z", 1)]
    for seed in range(5):
        assert choose_rule(rules, random.Random(seed)) is rules[0]


def test_choose_rule_from_equal_rules():
    rules = [Rule("a", "*", "x", 2), Rule("b", "*", "y", 2)]
    chosen = {id(choose_rule(rules, random.Random(seed))) for seed in range(30)}
    assert chosen <= {id(rule) for rule in rules}
    assert len(chosen) == 2


def test_choose_rule_empty_raises():
    with pytest.raises(ValueError):
        choose_rule([])