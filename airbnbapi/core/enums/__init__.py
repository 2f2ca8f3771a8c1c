"""Core enums package.

Usage:
    from airbnbapi.core.enums import ErrorCode, Environment
"""

from airbnbapi.core.enums.environment import Environment
from airbnbapi.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
