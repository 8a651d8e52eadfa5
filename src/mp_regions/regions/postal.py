"""PostalRegionIndex — US ZIP codes to the issuing state."""

from __future__ import annotations

import functools
from typing import Final

from mp_regions.kernel.types.state import State
from mp_regions.regions.index import RegionCodeIndex, RuleTable
from mp_regions.regions.rules import CodeRule, range_of
from mp_regions.regions.tables import POSTAL_CODE_TABLE

POSTAL_PAD_WIDTH: Final = 9


def build_postal_rules(
    table: tuple[tuple[State, str, str | None], ...] = POSTAL_CODE_TABLE,
) -> dict[State, tuple[CodeRule, ...]]:
    """Turn ``(state, start, end)`` rows into one rule per state."""
    return {
        state: (range_of(start, end, width=POSTAL_PAD_WIDTH),)
        for state, start, end in table
    }


class PostalRegionIndex(RegionCodeIndex[State]):
    """Region index over ZIP code prefixes and ranges.

    Pass *table* to run against an alternative rule set (tests, other data
    vintages); the shipped table is used otherwise.
    """

    __slots__ = ()

    def __init__(self, table: RuleTable[State] | None = None) -> None:
        super().__init__(
            build_postal_rules() if table is None else table,
            name="postal",
            miss_message="State for ZIP code [{code}] not found",
        )


@functools.cache
def postal_region_index() -> PostalRegionIndex:
    """Process-wide postal index, built on first use."""
    return PostalRegionIndex()


__all__ = ["POSTAL_PAD_WIDTH", "PostalRegionIndex", "build_postal_rules", "postal_region_index"]
