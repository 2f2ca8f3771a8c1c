"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error class and error codes
- Settings and constants

The core module has NO dependencies on other layers.
"""

from airbnbapi.core.enums import ErrorCode
from airbnbapi.core.errors import DomainError
from airbnbapi.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
