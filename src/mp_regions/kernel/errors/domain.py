"""Domain errors — invalid codes, malformed rule tables and failed lookups."""

from __future__ import annotations

from typing import Any

from mp_regions.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A structural invariant was violated."""

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """Input text does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        if message is None:
            message = f"{resource} not found"
            if identifier is not None:
                message = f"{resource} '{identifier}' not found"
        super().__init__(message, **kwargs)
        self.resource = resource
        self.identifier = identifier


class InvalidRuleError(InvariantViolationError):
    """A code rule was declared with empty or non-digit bounds.

    Raised while a rule table is being built; a malformed table is a
    programming error and aborts index construction.
    """

    default_code = "invalid_rule"


class RegionNotFoundError(NotFoundError):
    """No rule in the index matched ``code``."""

    default_code = "region_not_found"

    def __init__(self, code: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            "Region",
            code,
            message or f"No region for code [{code}] could be found",
            detail={"code": code},
            **kwargs,
        )
        self.lookup_code = code


class UnknownRegionError(NotFoundError):
    """Reverse lookup for a region that has no entry in the index."""

    default_code = "unknown_region"

    def __init__(self, region: Any, **kwargs: Any) -> None:
        super().__init__(
            "Region",
            region,
            f"Region [{region}] is not present in the index",
            detail={"region": str(region)},
            **kwargs,
        )
        self.region = region


__all__ = [
    "DomainError",
    "InvalidRuleError",
    "InvariantViolationError",
    "NotFoundError",
    "RegionNotFoundError",
    "UnknownRegionError",
    "ValidationError",
]
