"""Core errors package.

Usage:
    from airbnbapi.core.errors import DomainError
"""

from airbnbapi.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
