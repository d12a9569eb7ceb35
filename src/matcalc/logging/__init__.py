"""Logging helpers for matcalc."""

from .logging import get_configured_level, get_logger, reset_logger

__all__ = ["get_configured_level", "get_logger", "reset_logger"]
