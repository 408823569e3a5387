"""Adapters – structlog processors."""
from logmask.adapters.structlog.processors import CopyOnWriteMaskingProcessor, MaskingProcessor

__all__ = ["CopyOnWriteMaskingProcessor", "MaskingProcessor"]
