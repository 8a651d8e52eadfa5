"""AreaCodeRegionIndex — telephone area codes to the state they serve."""

from __future__ import annotations

import functools

from mp_regions.kernel.types.state import State
from mp_regions.regions.index import RegionCodeIndex, RuleTable
from mp_regions.regions.rules import CodeRule, prefix
from mp_regions.regions.tables import AREA_CODE_TABLE


def build_area_code_rules(
    table: tuple[tuple[State, tuple[int, ...]], ...] = AREA_CODE_TABLE,
) -> dict[State, tuple[CodeRule, ...]]:
    """One three-digit prefix rule per area code."""
    return {state: tuple(prefix(f"{code:03d}") for code in codes) for state, codes in table}


class AreaCodeRegionIndex(RegionCodeIndex[State]):
    """Region index over three-digit telephone area codes."""

    __slots__ = ()

    def __init__(self, table: RuleTable[State] | None = None) -> None:
        super().__init__(
            build_area_code_rules() if table is None else table,
            name="area_code",
            miss_message="No State for AreaCode [{code}] could be found",
        )

    def find_area_codes(self, state: State) -> frozenset[str]:
        """Area codes assigned to *state* as bare digit strings."""
        return frozenset(rule.start for rule in self.rules_for(state))


@functools.cache
def area_code_region_index() -> AreaCodeRegionIndex:
    """Process-wide area code index, built on first use."""
    return AreaCodeRegionIndex()


__all__ = ["AreaCodeRegionIndex", "area_code_region_index", "build_area_code_rules"]
