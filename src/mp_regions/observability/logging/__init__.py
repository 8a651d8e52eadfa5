"""Observability – structlog configuration and logger helper."""
from mp_regions.observability.logging.factory import configure_logging
from mp_regions.observability.logging.processors import get_logger

__all__ = ["configure_logging", "get_logger"]
