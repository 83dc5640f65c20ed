import io
import random

import pytest

from labkit.eliza import (
    NO_RULE_MESSAGE,
    is_exit,
    main,
    respond,
    run,
    tokenize_and_rewrite,
)
from labkit.elizastate import ElizaState, Rule


def _state():
    state = ElizaState(begin="Hello", end="Goodbye")
    state.add_quit_word("bye")
    return state


def test_tokenize_and_rewrite_uses_synonyms():
    state = ElizaState()
    state.add_synonym("unhappy", "sad")
    assert tokenize_and_rewrite(state, "I am Unhappy.") == ["i", "am", "sad"]


def test_is_exit_ignores_case():
    state = _state()
    assert is_exit(state, "BYE") is True
    assert is_exit(state, "hello") is False


def test_respond_with_keyword_rule():
    state = ElizaState()
    state.add_rule(Rule("sorry", "* sorry *", "Please don't apologise.", 9))
    assert respond(state, "I am sorry.", random.Random(0)) == "Please don't apologise."


def test_respond_via_synonym():
    state = ElizaState()
    state.add_synonym("unhappy", "sad")
    state.add_rule(Rule("sad", "*", "Tell me more."))
    assert respond(state, "I am unhappy", random.Random(0)) == "Tell me more."


def test_respond_falls_back_to_no_match_rule():
    state = ElizaState()
    state.add_rule(Rule("xnone", "*", "Go on."))
    assert respond(state, "whatever", random.Random(0)) == "Go on."


def test_respond_applies_prereplace():
    state = ElizaState()
    state.add_prereplace("dont", "don't")
    state.add_rule(Rule("don't", "don't", "(0)"))
    assert respond(state, "I dont know", random.Random(0)) == "don't"


def test_respond_without_rules_raises():
    with pytest.raises(LookupError):
        respond(ElizaState(), "hello")


def test_run_greets_and_departs():
    out = io.StringIO()
    run(_state(), io.StringIO("BYE\nignored\n"), out, random.Random(0))
    assert out.getvalue() == "ELIZA> Hello\nUSER> ELIZA> Goodbye\n"


def test_run_reports_missing_rule():
    out = io.StringIO()
    run(_state(), io.StringIO("hi\n"), out, random.Random(0))
    assert out.getvalue() == f"ELIZA> Hello\nUSER> {NO_RULE_MESSAGE}USER> "


def test_run_prints_reply():
    state = _state()
    state.add_rule(Rule("xnone", "*", "Go on."))
    out = io.StringIO()
    run(state, io.StringIO("something\nbye\n"), out, random.Random(0))
    assert out.getvalue().splitlines() == [
        "ELIZA> Hello",
        "USER> ELIZA> Go on.",
        "USER> ELIZA> Goodbye",
    ]


def test_main_missing_script_fails(tmp_path):
    assert main(["--script", str(tmp_path / "absent")]) == 1