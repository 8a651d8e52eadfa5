"""Process start-up: load settings, configure logging, optionally warm the indexes."""

from __future__ import annotations

from mp_regions.config import EnvSettingsLoader, RegionSettings
from mp_regions.observability.logging import configure_logging, get_logger
from mp_regions.regions.area_codes import area_code_region_index
from mp_regions.regions.postal import postal_region_index


def bootstrap(settings: RegionSettings | None = None) -> RegionSettings:
    """Configure the library for the current process and return the settings used.

    Settings are read from ``MP_REGIONS_*`` environment variables when not
    given.  With ``preload`` set, both shared indexes are built eagerly so the
    first lookup does not pay the construction cost.
    """
    if settings is None:
        settings = EnvSettingsLoader().load(RegionSettings)

    configure_logging(settings.log_level, json=settings.json_logs)

    if settings.preload:
        postal = postal_region_index()
        area_codes = area_code_region_index()
        get_logger(__name__).info(
            "region_indexes.preloaded",
            postal_regions=len(postal),
            area_code_regions=len(area_codes),
        )
    return settings


__all__ = ["bootstrap"]
