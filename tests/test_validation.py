# FILE: tests/test_validation.py
from gift_exchange.validation import validate_participants, check_assignment, run_self_test
from gift_exchange.rules import rules_factory
from gift_exchange.models import RuleSpec

def test_validate_participants_ok():
    assert validate_participants(["a", "b", "c"], [("a", "b")]) == []

def test_validate_participants_problems():
    errs = validate_participants(["a", "a", " "], [("a", "z"), ("b", "b")])
    text = " | ".join(errs)
    assert "Duplicate participants" in text
    assert "Blank participant" in text
    assert "unknown participant(s): z" in text
    assert "same person twice" in text

def test_validate_needs_two():
    assert validate_participants(["solo"]) == ["At least 2 participants are required."]
    assert validate_participants([]) == ["No participants."]

def test_check_assignment():
    people = ["a", "b", "c"]
    rules = rules_factory([("a", "b")], [])
    assert check_assignment({"a": "c", "c": "b", "b": "a"}, people, rules) == [
        "Rule #2 rejects: b"
    ]
    assert check_assignment({"a": "c", "b": "a", "c": "b"}, people, rules_factory([], [])) == []
    errs = check_assignment({"a": "a", "b": "a"}, people, rules)
    assert "Givers do not match participants." in errs
    assert "Rule #1 rejects: a" in errs

def test_run_self_test():
    results = run_self_test()
    assert all(ok for _, ok in results["tests"])

def test_validate_rule_specs_name_known_participants():
    people = ["tyler", "emma", "sophie"]
    rules = [
        RuleSpec(type="gives_to_one_of", giver="tyler", receivers=["tylr", "emma"]),
        RuleSpec(type="never_gives_to", giver="emma", receiver="sophie"),
    ]
    assert validate_participants(people, [], rules) == [
        "Rule #1 (gives_to_one_of) names unknown participant(s): tylr"
    ]
