"""conftest.py for benchmarks.

The shared indexes are built once per session so every benchmark times the
lookup alone, never the table construction.
"""

from __future__ import annotations

import pytest

from mp_regions.regions.area_codes import AreaCodeRegionIndex, area_code_region_index
from mp_regions.regions.postal import PostalRegionIndex, postal_region_index


@pytest.fixture(scope="session")
def postal_index() -> PostalRegionIndex:
    return postal_region_index()


@pytest.fixture(scope="session")
def area_code_index() -> AreaCodeRegionIndex:
    return area_code_region_index()
