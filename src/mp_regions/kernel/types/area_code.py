"""Telephone area code value object (North American Numbering Plan)."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Final

from mp_regions.kernel.errors.domain import ValidationError
from mp_regions.kernel.types.postal import digits_of

if TYPE_CHECKING:
    from mp_regions.kernel.types.state import State

REQUIRED_AREA_CODE_LENGTH: Final = 3


@dataclasses.dataclass(frozen=True, slots=True, order=True)
class AreaCode:
    """Three-digit area code; formatting such as ``"(503)"`` is stripped."""

    number: str

    def __post_init__(self) -> None:
        digits = digits_of(self.number) if isinstance(self.number, str) else ""
        if len(digits) != REQUIRED_AREA_CODE_LENGTH:
            raise ValidationError(
                f"AreaCode [{self.number}] must be a {REQUIRED_AREA_CODE_LENGTH}-digit number"
            )
        object.__setattr__(self, "number", digits)

    @classmethod
    def of(cls, number: str | int) -> "AreaCode":
        if isinstance(number, int):
            number = f"{number:03d}"
        return cls(number)

    def __str__(self) -> str:
        return self.number

    @property
    def digits(self) -> str:
        return self.number

    @property
    def state(self) -> State:
        """Resolve the state that was assigned this area code."""
        from mp_regions.regions.area_codes import area_code_region_index

        return area_code_region_index().find_region(self.digits)


__all__ = ["AreaCode", "REQUIRED_AREA_CODE_LENGTH"]
