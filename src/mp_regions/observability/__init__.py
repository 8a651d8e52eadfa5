"""Observability – structured logging."""
from mp_regions.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
