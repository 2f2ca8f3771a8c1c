"""Domain protocols."""

from airbnbapi.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
