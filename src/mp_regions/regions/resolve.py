"""Public lookup API consumed by address and phone-number layers.

Strings are normalised through the value objects before lookup, so
``"59999-9999"`` and ``"(503)"`` are accepted.  Pass ``index=`` to resolve
against an injected index instead of the shared one.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TypeVar

from mp_regions.kernel.types.area_code import AreaCode
from mp_regions.kernel.types.postal import ZIP, PostalCode
from mp_regions.kernel.types.state import State
from mp_regions.regions.area_codes import AreaCodeRegionIndex, area_code_region_index
from mp_regions.regions.index import RegionCodeIndex
from mp_regions.regions.postal import postal_region_index
from mp_regions.regions.rules import CodeRuleDescriptor

R = TypeVar("R", bound=Hashable)


def resolve_region_for_postal_code(
    code: str | PostalCode | ZIP,
    *,
    index: RegionCodeIndex[State] | None = None,
) -> State:
    """Resolve the state that issued a postal code.

    Raises:
        ValidationError: *code* has no digits.
        RegionNotFoundError: no rule matched.
    """
    if isinstance(code, str):
        code = PostalCode(code)
    return (postal_region_index() if index is None else index).find_region(code)


def resolve_region_for_area_code(
    code: str | int | AreaCode,
    *,
    index: RegionCodeIndex[State] | None = None,
) -> State:
    """Resolve the state served by a telephone area code.

    Raises:
        ValidationError: *code* is not three digits.
        RegionNotFoundError: no state carries the area code.
    """
    if not isinstance(code, AreaCode):
        code = AreaCode.of(code)
    return (area_code_region_index() if index is None else index).find_region(code)


def codes_for_region(region: R, *, index: RegionCodeIndex[R]) -> tuple[CodeRuleDescriptor, ...]:
    """Describe the rules issued to *region* in *index*.

    Raises:
        UnknownRegionError: *region* has no entry in *index*.
    """
    return index.describe(region)


def postal_codes_for_state(state: State) -> tuple[CodeRuleDescriptor, ...]:
    return codes_for_region(state, index=postal_region_index())


def area_codes_for_state(
    state: State,
    *,
    index: AreaCodeRegionIndex | None = None,
) -> tuple[AreaCode, ...]:
    """Area codes of *state*, sorted ascending."""
    index = area_code_region_index() if index is None else index
    return tuple(sorted(AreaCode(code) for code in index.find_area_codes(state)))


__all__ = [
    "area_codes_for_state",
    "codes_for_region",
    "postal_codes_for_state",
    "resolve_region_for_area_code",
    "resolve_region_for_postal_code",
]
