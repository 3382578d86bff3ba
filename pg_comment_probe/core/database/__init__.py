"""
Database helpers for pg-comment-probe.

Structure:
- utils.py: engine creation with URL normalization and connection helpers
"""

from .utils import (
    DRIVER_PREFIX,
    connect,
    create_engine,
    normalize_url,
)

__all__ = [
    "DRIVER_PREFIX",
    "connect",
    "create_engine",
    "normalize_url",
]
