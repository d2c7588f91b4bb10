"""Utility modules for shared functionality."""

from .logging import configure_logging

__all__ = [
    "configure_logging",
]
