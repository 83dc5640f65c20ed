import io

import pytest

from labkit.elizastate import ElizaState, Rule
from labkit.script import parse_eliza_script, parse_lines


def _parse(lines):
    state = ElizaState()
    errors = io.StringIO()
    parse_lines(state, lines, errors)
    return state, errors.getvalue()


def test_initial_and_final():
    state, errors = _parse(["initial: How do you do.\n", "final: Goodbye."])
    assert state.begin == "How do you do."
    assert state.end == "Goodbye."
    assert errors == ""


def test_value_stops_at_next_colon():
    state, _ = _parse(["initial: first: second"])
    assert state.begin == "first"


def test_quit_words():
    state, _ = _parse(["quit: bye", "quit: goodbye"])
    assert state.quit_words == {"bye", "goodbye"}


def test_synonyms_map_to_first_word():
    state, _ = _parse(["synon: sad unhappy depressed"])
    assert state.synonyms == {"unhappy": "sad", "depressed": "sad"}


def test_pre_and_post_replacements():
    state, _ = _parse(["pre: recollect remember to", "post: me you"])
    assert state.prereplace == {"recollect": "remember to"}
    assert state.postreplace == {"me": "you"}


def test_first_replacement_wins():
    state, _ = _parse(["pre: dont do not", "pre: dont never"])
    assert state.prereplace == {"dont": "do not"}


def test_rules_take_decomp_length_as_precedence():
    decomp = "* sorry *"
    state, errors = _parse(
        ["key: sorry 0", f"  decomp: {decomp}", "\treasmb: A", "reasmb: B"]
    )
    assert errors == ""
    assert state.rules == [
        Rule("sorry", decomp, "B", len(decomp)),
        Rule("sorry", decomp, "A", len(decomp)),
    ]


def test_decomp_without_key_is_misplaced():
    state, errors = _parse(["decomp: *"])
    assert "Misplaced line: decomp" in errors
    assert state.rules == []


def test_reasmb_without_decomp_is_misplaced():
    state, errors = _parse(["key: a 1", "reasmb: hello"])
    assert "Misplaced line: reasmb" in errors
    assert state.rules == []


def test_new_key_resets_decomp():
    state, errors = _parse(["key: a 1", "decomp: *", "key: b 2", "reasmb: x"])
    assert "Misplaced line" in errors
    assert state.rules == []


def test_key_without_priority_is_ignored():
    state, errors = _parse(["key: a", "decomp: *", "reasmb: x"])
    assert "Misplaced line" in errors
    assert state.rules == []


def test_missing_value_reported():
    state, errors = _parse(["initial"])
    assert errors == "Couldn't find value of key: initial\n"
    assert state.begin == ElizaState().begin


def test_empty_line_reported():
    _, errors = _parse([""])
    assert errors.startswith("Expected key-value pair")


def test_unknown_prefix_ignored():
    state, errors = _parse(["colour: blue"])
    assert errors == ""
    assert state == ElizaState()


def test_parse_script_file(tmp_path):
    path = tmp_path / "script"
    path.write_text(
        "initial: Hello.\nquit: bye\nkey: xnone 0\n decomp: *\n  reasmb: Go on.\n",
        encoding="utf-8",
    )
    state = parse_eliza_script(ElizaState(), path)
    assert state.begin == "Hello."
    assert "bye" in state.quit_words
    assert [rule.reasmb for rule in state.rules] == ["Go on."]


def test_parse_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_eliza_script(ElizaState(), tmp_path / "absent")