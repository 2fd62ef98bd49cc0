from __future__ import annotations

from core.keywords import DEFAULT_KEYWORDS, build_keyword_rules, normalize_indicators


def test_default_rules_are_the_compiled_in_list() -> None:
    rules = build_keyword_rules()
    assert rules == DEFAULT_KEYWORDS
    assert rules[0] == "free-money"
    assert "secure-now" in rules


def test_configured_keywords_replace_defaults_and_are_normalized() -> None:
    rules = build_keyword_rules(["  Phish ", "", "PHISH", "Bonus"])
    assert rules == ("phish", "bonus")
    assert "crypto" not in rules


def test_empty_configured_list_disables_keywords() -> None:
    assert build_keyword_rules([]) == ()


def test_normalize_indicators_drops_blanks_and_keeps_order() -> None:
    assert normalize_indicators(["B.com ", "   ", "a.com"]) == ("b.com", "a.com")
