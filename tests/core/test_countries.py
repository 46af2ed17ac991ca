"""
Tests for the country reference data: immutability, lookups and patterns.
"""
from __future__ import annotations

import pytest

from home_address.core.countries import (
    COUNTRY_NAMES,
    COUNTRY_RULES,
    DEFAULT_RULE,
    GENERIC_POSTAL_PATTERN,
    US_STATES,
    CountryPostalRule,
    country_choices,
    country_iso,
    state_choices,
)


class TestReferenceData:
    def test_rule_table_is_read_only(self):
        with pytest.raises(TypeError):
            COUNTRY_RULES["XX"] = DEFAULT_RULE  # type: ignore[index]

    def test_states_are_read_only(self):
        with pytest.raises(TypeError):
            US_STATES["ZZ"] = "Nowhere"  # type: ignore[index]

    def test_rules_are_frozen(self):
        with pytest.raises(Exception):
            COUNTRY_RULES["US"].is_state_constrained = False  # type: ignore[misc]

    def test_only_us_is_state_constrained(self):
        constrained = [code for code, rule in COUNTRY_RULES.items() if rule.is_state_constrained]
        assert constrained == ["US"]

    def test_us_state_codes_match_state_list(self):
        assert COUNTRY_RULES["US"].state_codes == frozenset(US_STATES)
        assert "CA" in US_STATES
        assert "ZZ" not in US_STATES

    def test_every_rule_country_has_a_name(self):
        assert set(COUNTRY_RULES) <= set(COUNTRY_NAMES)

    def test_default_rule(self):
        assert DEFAULT_RULE == CountryPostalRule()
        assert DEFAULT_RULE.pattern is None
        assert DEFAULT_RULE.has_postal_system is True
        assert DEFAULT_RULE.is_state_constrained is False

    def test_sample_formats_match_their_own_pattern(self):
        for code, rule in COUNTRY_RULES.items():
            if rule.pattern is None:
                continue
            for sample in rule.sample_formats:
                assert rule.pattern.fullmatch(sample), f"{code}: {sample}"


class TestPostalPatterns:
    @pytest.mark.parametrize("value", ["12345", "12345-1234", "12345 1234"])
    def test_us_accepts(self, value):
        assert COUNTRY_RULES["US"].pattern.fullmatch(value)

    @pytest.mark.parametrize("value", ["1234", "ABCDE", "123456", "12345-12"])
    def test_us_rejects(self, value):
        assert not COUNTRY_RULES["US"].pattern.fullmatch(value)

    def test_gb_is_case_insensitive(self):
        assert COUNTRY_RULES["GB"].pattern.fullmatch("wr4g 6lh")

    @pytest.mark.parametrize("value", ["A1", "12345", "AB-123 45", "1234567890"])
    def test_generic_accepts(self, value):
        assert GENERIC_POSTAL_PATTERN.fullmatch(value)

    @pytest.mark.parametrize("value", ["-1234", " 1234", "1234-", "12345678901", "12#45", "ÉÉ"])
    def test_generic_rejects(self, value):
        assert not GENERIC_POSTAL_PATTERN.fullmatch(value)


class TestCountryIso:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("US", "US"),
            ("us", "US"),
            (" fr ", "FR"),
            ("United States", "US"),
            ("united kingdom", "GB"),
            ("Cote d'Ivoire", "CI"),
            ("Turkiye", "TR"),
        ],
    )
    def test_known(self, value, expected):
        assert country_iso(value) == expected

    @pytest.mark.parametrize("value", ["", "   ", None, "Atlantis", "XX"])
    def test_unknown(self, value):
        assert country_iso(value) == ""


def test_country_choices_sorted_by_name():
    names = [name for _code, name in country_choices()]
    assert len(names) == len(COUNTRY_NAMES)
    assert names[0] == "Antigua and Barbuda"


def test_state_choices_cover_all_states():
    choices = state_choices()
    assert len(choices) == len(US_STATES)
    assert choices[0] == ("AL", "Alabama")
