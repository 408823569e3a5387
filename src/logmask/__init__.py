"""
logmask – Sensitive-data masking for log pipelines.

Import path convention::

    from logmask.application.masking import MaskingEngine, compile_rules
    from logmask.adapters.stdlib_logging import MaskingLogFilter, MaskingRewriteHandler
    from logmask.adapters.structlog import MaskingProcessor
    from logmask.config import MaskingSettings, ConfigurationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
