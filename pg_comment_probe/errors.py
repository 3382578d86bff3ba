"""Error types for pg-comment-probe.

Database failures are never wrapped here: they surface as the SQLAlchemy
exceptions raised by the driver. This hierarchy only covers problems detected
by the probe itself before any statement is sent.
"""

from __future__ import annotations


class ProbeError(Exception):
    """Base error for all pg-comment-probe exceptions."""


class ConfigurationError(ProbeError):
    """Raised when the probe configuration is missing or invalid."""


class MissingDatabaseUrlError(ConfigurationError):
    """Raised when neither database URL environment variable is set."""

    def __init__(self, *env_names: str) -> None:
        self.env_names = env_names
        super().__init__("DATABASE_URL must be set in order to run tests")
