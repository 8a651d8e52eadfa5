"""Config settings – RegionSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_regions.config.settings.base import Settings
from mp_regions.config.validation import InvalidSettingValueError

_LEVELS = frozenset(logging.getLevelNamesMapping())


@dataclasses.dataclass
class RegionSettings(Settings):
    """Runtime settings, read from ``MP_REGIONS_*`` environment variables.

    * ``log_level`` — logging level name (``MP_REGIONS_LOG_LEVEL``)
    * ``json_logs`` — JSON renderer when true, console renderer otherwise
    * ``preload`` — build both region indexes during :func:`bootstrap`
    """

    _prefix: ClassVar[str] = "MP_REGIONS"

    log_level: str = "INFO"
    json_logs: bool = True
    preload: bool = False

    def _validate(self) -> None:
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in _LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")


__all__ = ["RegionSettings"]
