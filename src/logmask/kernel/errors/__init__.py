"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    LogmaskError
    ├── ConfigError                  (config/validation)
    │   ├── MissingRequiredSettingError
    │   ├── InvalidSettingValueError
    │   └── ConfigurationError       (also a RuleError)
    └── RuleError                    (rule.py)
        └── RuleApplicationError     (application/masking)
"""

from logmask.kernel.errors.base import LogmaskError
from logmask.kernel.errors.rule import RuleError

__all__ = [
    "LogmaskError",
    "RuleError",
]
