"""Utility modules for the connectivity check."""

from .logger import ContextAwareLogger, configure_logging, get_logger, reset_logging

__all__ = [
    "ContextAwareLogger",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
