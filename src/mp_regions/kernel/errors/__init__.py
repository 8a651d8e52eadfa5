"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── InvariantViolationError
    │   │   └── InvalidRuleError
    │   ├── ValidationError
    │   └── NotFoundError
    │       ├── RegionNotFoundError
    │       └── UnknownRegionError
    └── ApplicationError         (application.py)
"""

from mp_regions.kernel.errors.application import ApplicationError
from mp_regions.kernel.errors.base import BaseError
from mp_regions.kernel.errors.domain import (
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
