"""
Eligibility resolver tests.
"""

import logging

from teamcarpool.domain.eligibility import EligibilityIndex, resolve_eligibility
from teamcarpool.domain.models import EligibilityRule


def test_no_rule_is_allowed_without_preference():
    e = resolve_eligibility("D1", "P1", [])
    assert e.allowed is True
    assert e.preference == "none"


def test_rule_matches_both_ids_exactly():
    rules = [
        EligibilityRule("D1", "P2", allowed=False),
        EligibilityRule("D2", "P1", allowed=True, preference="always"),
    ]
    assert resolve_eligibility("D1", "P1", rules).allowed is True
    assert resolve_eligibility("D1", "P2", rules).allowed is False
    assert resolve_eligibility("D2", "P1", rules).preference == "always"


def test_duplicate_rules_first_wins():
    rules = [
        EligibilityRule("D1", "P1", allowed=False),
        EligibilityRule("D1", "P1", allowed=True, preference="prefer"),
    ]
    assert resolve_eligibility("D1", "P1", rules).allowed is False
    assert EligibilityIndex(rules).resolve("D1", "P1").allowed is False


def test_resolver_warns_on_duplicates(caplog):
    rules = [
        EligibilityRule("D1", "P1", allowed=False),
        EligibilityRule("D2", "P1", preference="always"),
        EligibilityRule("D1", "P1", allowed=True),
    ]
    with caplog.at_level(logging.WARNING, logger="teamcarpool"):
        e = resolve_eligibility("D1", "P1", rules)
    assert e.allowed is False
    assert "Duplicate eligibility rule" in caplog.text


def test_resolver_silent_without_duplicates(caplog):
    rules = [EligibilityRule("D1", "P1", preference="prefer"), EligibilityRule("D2", "P1")]
    with caplog.at_level(logging.WARNING, logger="teamcarpool"):
        assert resolve_eligibility("D1", "P1", rules).preference == "prefer"
    assert caplog.text == ""


def test_index_warns_on_duplicates(caplog):
    rules = [
        EligibilityRule("D1", "P1", preference="prefer"),
        EligibilityRule("D1", "P1", preference="always"),
    ]
    with caplog.at_level(logging.WARNING, logger="teamcarpool"):
        index = EligibilityIndex(rules)
    assert len(index) == 1
    assert index.resolve("D1", "P1").preference == "prefer"
    assert "Duplicate eligibility rule" in caplog.text


def test_index_default_for_unknown_pair():
    index = EligibilityIndex([EligibilityRule("D1", "P1", allowed=False)])
    e = index.resolve("D9", "P9")
    assert e.allowed is True
    assert e.preference == "none"
