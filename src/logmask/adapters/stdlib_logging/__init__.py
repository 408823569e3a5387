"""Adapters – stdlib :mod:`logging` integration."""
from logmask.adapters.stdlib_logging.filter import LogRecordText, MaskingLogFilter
from logmask.adapters.stdlib_logging.rewrite import MaskingRewriteHandler

__all__ = ["LogRecordText", "MaskingLogFilter", "MaskingRewriteHandler"]
