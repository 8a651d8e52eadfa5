"""Kernel – errors and value objects shared by every region index."""

from mp_regions.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidRuleError,
    InvariantViolationError,
    NotFoundError,
    RegionNotFoundError,
    UnknownRegionError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidRuleError",
    "InvariantViolationError",
    "NotFoundError",
    "RegionNotFoundError",
    "UnknownRegionError",
    "ValidationError",
]
