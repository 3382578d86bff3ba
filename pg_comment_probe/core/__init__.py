"""
Core utilities and configuration for pg-comment-probe.

This package provides core functionality including logging configuration,
settings and database engine setup.
"""

from pg_comment_probe.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
