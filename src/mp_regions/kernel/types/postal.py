"""Postal code value objects — generic ``PostalCode`` and US ``ZIP``."""

from __future__ import annotations

import dataclasses
import re
from typing import TYPE_CHECKING, Final

from mp_regions.kernel.errors.domain import ValidationError

if TYPE_CHECKING:
    from mp_regions.kernel.types.state import State

_NON_DIGITS: Final = re.compile(r"\D")
_ZIP_PATTERN: Final = re.compile(r"^\s*(\d{5})(?:[-\s]?(\d{4}))?\s*$")


def digits_of(text: str) -> str:
    """Strip every non-digit character from *text*."""
    return _NON_DIGITS.sub("", text)


@dataclasses.dataclass(frozen=True, slots=True, order=True)
class PostalCode:
    """Postal code normalised to its digits (``"97205-5515"`` -> ``"972055515"``)."""

    number: str

    def __post_init__(self) -> None:
        if not isinstance(self.number, str):
            raise ValidationError(f"Postal code must be text: {self.number!r}")
        digits = digits_of(self.number)
        if not digits:
            raise ValidationError(f"Postal code number [{self.number}] is required")
        object.__setattr__(self, "number", digits)

    def __str__(self) -> str:
        return self.number

    @property
    def digits(self) -> str:
        return self.number

    @property
    def state(self) -> State:
        """Resolve the issuing state through the shared postal index."""
        from mp_regions.regions.postal import postal_region_index

        return postal_region_index().find_region(self.digits)


@dataclasses.dataclass(frozen=True, slots=True)
class ZIP:
    """Five-digit US ZIP code with an optional ZIP+4 extension."""

    code: str
    plus_four: str | None = None

    def __post_init__(self) -> None:
        code = digits_of(self.code) if isinstance(self.code, str) else ""
        if len(code) != 5:
            raise ValidationError(f"5 or 9 digit postal code number [{self.code}] is required")
        object.__setattr__(self, "code", code)
        if self.plus_four is not None:
            extension = digits_of(self.plus_four)
            if len(extension) != 4:
                raise ValidationError(f"ZIP+4 extension [{self.plus_four}] must be 4 digits")
            object.__setattr__(self, "plus_four", extension)

    @classmethod
    def parse(cls, text: str) -> "ZIP":
        """Parse ``"12345"``, ``"12345-6789"`` or ``"123456789"``."""
        match = _ZIP_PATTERN.match(text or "")
        if match is None:
            raise ValidationError(f"5 or 9 digit postal code number [{text}] is required")
        return cls(match.group(1), match.group(2))

    def __str__(self) -> str:
        if self.plus_four:
            return f"{self.code}-{self.plus_four}"
        return self.code

    @property
    def digits(self) -> str:
        return self.code + (self.plus_four or "")

    def with_plus_four(self, extension: str) -> "ZIP":
        return dataclasses.replace(self, plus_four=extension)

    def to_postal_code(self) -> PostalCode:
        return PostalCode(self.digits)

    @property
    def state(self) -> State:
        from mp_regions.regions.postal import postal_region_index

        return postal_region_index().find_region(self.digits)


__all__ = ["PostalCode", "ZIP", "digits_of"]
