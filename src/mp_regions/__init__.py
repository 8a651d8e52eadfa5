"""
mp_regions – resolve US postal codes and telephone area codes to states.

Import path convention::

    from mp_regions.kernel.types import State, ZIP, AreaCode
    from mp_regions.kernel.errors import RegionNotFoundError
    from mp_regions.regions import resolve_region_for_postal_code, range_of
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
