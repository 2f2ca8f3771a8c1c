"""Runtime environment types.

Used by Settings to pick environment-specific behavior, mainly the log
renderer (colored console in development, JSON in testing/CI/production).
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
