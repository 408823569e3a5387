"""Observability – structured logging ports and helpers."""
from logmask.observability.logging.factory import JsonLoggerFactory, configure_logging
from logmask.observability.logging.processors import get_logger
from logmask.observability.logging.protocol import LogEvent, Logger

__all__ = [
    "JsonLoggerFactory",
    "LogEvent",
    "Logger",
    "configure_logging",
    "get_logger",
]
