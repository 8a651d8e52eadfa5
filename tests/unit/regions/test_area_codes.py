"""Unit tests for the shipped telephone area code region index."""

from __future__ import annotations

import pytest

from mp_regions.kernel.errors import RegionNotFoundError, UnknownRegionError
from mp_regions.kernel.types import AreaCode, State
from mp_regions.regions.area_codes import (
    AreaCodeRegionIndex,
    area_code_region_index,
    build_area_code_rules,
)
from mp_regions.regions.rules import PrefixRule, prefix
from mp_regions.regions.tables import AREA_CODE_TABLE


@pytest.fixture(scope="module")
def index() -> AreaCodeRegionIndex:
    return area_code_region_index()


class TestAccessor:
    def test_returns_shared_instance(self) -> None:
        assert area_code_region_index() is area_code_region_index()

    def test_every_state_and_dc_is_tabled(self, index: AreaCodeRegionIndex) -> None:
        assert len(index) == 51
        assert set(index.regions) == set(State)


class TestFindRegion:
    @pytest.mark.parametrize(
        ("code", "state"),
        [
            ("503", State.OREGON),
            ("212", State.NEW_YORK),
            ("302", State.DELAWARE),
            ("202", State.DISTRICT_OF_COLUMBIA),
            ("907", State.ALASKA),
            ("979", State.TEXAS),
        ],
    )
    def test_known_area_codes(self, index: AreaCodeRegionIndex, code: str, state: State) -> None:
        assert index.find_region(AreaCode(code)) is state

    def test_every_tabled_area_code_resolves_back(self, index: AreaCodeRegionIndex) -> None:
        for state, codes in AREA_CODE_TABLE:
            for code in codes:
                assert index.find_region(AreaCode.of(code)) is state

    def test_unknown_area_code(self, index: AreaCodeRegionIndex) -> None:
        with pytest.raises(RegionNotFoundError) as info:
            index.find_region(AreaCode("010"))
        assert str(info.value) == "No State for AreaCode [010] could be found"

    def test_idempotent(self, index: AreaCodeRegionIndex) -> None:
        assert index.find_region("541") is index.find_region("541")


class TestReverseLookup:
    def test_find_area_codes(self, index: AreaCodeRegionIndex) -> None:
        assert index.find_area_codes(State.OREGON) == frozenset({"458", "503", "541", "971"})

    def test_find_rules_are_prefix_rules(self, index: AreaCodeRegionIndex) -> None:
        assert index.find_rules(State.MAINE) == frozenset({PrefixRule("207")})

    def test_unknown_state_in_custom_table(self) -> None:
        idx = AreaCodeRegionIndex({State.MAINE: [prefix("207")]})
        with pytest.raises(UnknownRegionError):
            idx.find_area_codes(State.OREGON)


class TestBuildRules:
    def test_codes_are_zero_padded(self) -> None:
        rules = build_area_code_rules(((State.OREGON, (503, 7)),))
        assert rules == {State.OREGON: (PrefixRule("503"), PrefixRule("007"))}
