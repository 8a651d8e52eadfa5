"""Region resolution – code rules, the generic index and its two instantiations."""

from mp_regions.regions.area_codes import AreaCodeRegionIndex, area_code_region_index
from mp_regions.regions.index import RegionCodeIndex
from mp_regions.regions.postal import PostalRegionIndex, postal_region_index
from mp_regions.regions.resolve import (
    area_codes_for_state,
    codes_for_region,
    postal_codes_for_state,
    resolve_region_for_area_code,
    resolve_region_for_postal_code,
)
from mp_regions.regions.rules import (
    CodeRule,
    CodeRuleDescriptor,
    PrefixRule,
    RangeRule,
    RuleKind,
    matches,
    prefix,
    range_of,
)

__all__ = [
    "AreaCodeRegionIndex",
    "CodeRule",
    "CodeRuleDescriptor",
    "PostalRegionIndex",
    "PrefixRule",
    "RangeRule",
    "RegionCodeIndex",
    "RuleKind",
    "area_code_region_index",
    "area_codes_for_state",
    "codes_for_region",
    "matches",
    "postal_codes_for_state",
    "postal_region_index",
    "prefix",
    "range_of",
    "resolve_region_for_area_code",
    "resolve_region_for_postal_code",
]
