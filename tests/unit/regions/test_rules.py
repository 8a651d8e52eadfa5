"""Unit tests for code rules — prefix and range matching."""

from __future__ import annotations

import dataclasses

import pytest

from mp_regions.kernel.errors import InvalidRuleError
from mp_regions.regions.rules import (
    CodeRuleDescriptor,
    PrefixRule,
    RangeRule,
    RuleKind,
    matches,
    prefix,
    range_of,
)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_range_of_without_end_is_prefix_rule(self) -> None:
        rule = range_of("01")
        assert isinstance(rule, PrefixRule)
        assert rule.start == "01"
        assert rule.adjusted_end == "999999999"

    def test_range_of_with_blank_end_is_prefix_rule(self) -> None:
        assert isinstance(range_of("01", "  "), PrefixRule)

    def test_range_of_with_end_is_range_rule(self) -> None:
        rule = range_of("01", "02")
        assert isinstance(rule, RangeRule)
        assert rule.start == "01"
        assert rule.end == "02"
        assert rule.adjusted_end == "029999999"

    @pytest.mark.parametrize("start", ["", "  ", None, "0a", "-1"])
    def test_invalid_range_start_raises(self, start: object) -> None:
        with pytest.raises(InvalidRuleError, match="beginning"):
            range_of(start, "99")  # type: ignore[arg-type]

    @pytest.mark.parametrize("start", ["", None, "x"])
    def test_invalid_prefix_raises(self, start: object) -> None:
        with pytest.raises(InvalidRuleError):
            prefix(start)  # type: ignore[arg-type]

    def test_invalid_range_without_end_raises(self) -> None:
        with pytest.raises(InvalidRuleError):
            range_of("")

    def test_non_digit_end_raises(self) -> None:
        with pytest.raises(InvalidRuleError, match="end"):
            RangeRule("01", "ab")

    def test_non_positive_width_raises(self) -> None:
        with pytest.raises(InvalidRuleError):
            RangeRule("01", "02", width=0)

    def test_start_and_end_are_not_reordered(self) -> None:
        rule = range_of("50", "40")
        assert rule.start == "50"
        assert rule.end == "40"  # type: ignore[union-attr]

    def test_error_code_slug(self) -> None:
        with pytest.raises(InvalidRuleError) as info:
            range_of("", "1")
        assert info.value.code == "invalid_rule"

    def test_custom_width_pads_end(self) -> None:
        assert RangeRule("2", "3", width=3).adjusted_end == "399"

    def test_end_longer_than_width_is_not_truncated(self) -> None:
        assert RangeRule("1", "12345", width=3).adjusted_end == "12345"

    def test_rules_are_frozen(self) -> None:
        rule = range_of("01", "02")
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.start = "03"  # type: ignore[misc]

    def test_rules_are_hashable_values(self) -> None:
        assert range_of("35", "36") == range_of("35", "36")
        assert len({prefix("59"), prefix("59"), range_of("59", "60")}) == 2


# ---------------------------------------------------------------------------
# Prefix matching
# ---------------------------------------------------------------------------


class TestPrefixRule:
    @pytest.mark.parametrize("code", ["01", "010", "011", "019999", "0199999999"])
    def test_matches_codes_starting_with_prefix(self, code: str) -> None:
        assert prefix("01").matches(code)

    @pytest.mark.parametrize("code", ["001", "1", "10", "2", "0"])
    def test_rejects_codes_not_starting_with_prefix(self, code: str) -> None:
        assert not prefix("01").matches(code)

    def test_nine_digit_code_inside_two_digit_prefix(self) -> None:
        assert prefix("59").matches("590000000")
        assert prefix("59").matches("599999999")

    @pytest.mark.parametrize("code", ["", None, "01-23", " 01"])
    def test_invalid_code_never_matches(self, code: object) -> None:
        assert prefix("01").matches(code) is False  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Range matching
# ---------------------------------------------------------------------------


class TestRangeRule:
    @pytest.mark.parametrize(
        "code",
        ["010000000", "010", "011", "019", "02", "020", "021", "022", "029999999"],
    )
    def test_in_range(self, code: str) -> None:
        assert range_of("01", "02").matches(code)

    @pytest.mark.parametrize("code", ["00100", "10", "00200", "03", "09", "90"])
    def test_not_in_range(self, code: str) -> None:
        assert not range_of("01", "02").matches(code)

    def test_short_start_compares_lexicographically(self) -> None:
        assert range_of("35", "36").matches("35123")
        assert range_of("35", "36").matches("36999")
        assert not range_of("35", "36").matches("37000")
        assert not range_of("35", "36").matches("34999")

    def test_padded_end_absorbs_extended_codes(self) -> None:
        louisiana = range_of("700", "715")
        assert louisiana.matches("71599999")
        assert louisiana.matches("715999999")
        assert not louisiana.matches("716")
        assert not louisiana.matches("69999")

    def test_upper_edge(self) -> None:
        nebraska = range_of("68", "69")
        assert nebraska.matches("69999999")
        assert not nebraska.matches("70000000")

    def test_start_prefix_matches_even_when_range_is_empty(self) -> None:
        backwards = range_of("50", "40")
        assert isinstance(backwards, RangeRule)
        assert not backwards.in_range("501")
        assert backwards.matches("501")
        assert not backwards.matches("45")

    @pytest.mark.parametrize("code", ["", None, "35-12"])
    def test_invalid_code_never_matches(self, code: object) -> None:
        assert range_of("35", "36").matches(code) is False  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Dispatch & descriptors
# ---------------------------------------------------------------------------


class TestMatchesDispatch:
    def test_dispatches_prefix(self) -> None:
        assert matches(prefix("97"), "97205")
        assert not matches(prefix("97"), "98205")

    def test_dispatches_range(self) -> None:
        assert matches(range_of("980", "984"), "98402")
        assert not matches(range_of("980", "984"), "98502")

    def test_non_rule_is_rejected(self) -> None:
        with pytest.raises(AssertionError):
            matches("97", "97205")  # type: ignore[arg-type]


class TestDescriptor:
    def test_prefix_descriptor(self) -> None:
        descriptor = prefix("59").describe()
        assert descriptor == CodeRuleDescriptor(RuleKind.PREFIX, "59")
        assert str(descriptor) == "59"
        assert descriptor.to_dict() == {"kind": "prefix", "start": "59", "end": None}

    def test_range_descriptor(self) -> None:
        descriptor = range_of("35", "36").describe()
        assert descriptor.kind is RuleKind.RANGE
        assert str(descriptor) == "35-36"
        assert descriptor.to_dict() == {"kind": "range", "start": "35", "end": "36"}
