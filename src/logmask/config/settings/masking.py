"""Config settings – MaskingSettings."""
from __future__ import annotations

import dataclasses
import logging

from logmask.config.settings.base import Settings
from logmask.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class MaskingSettings(Settings):
    """Process-level settings for the masking engine.

    Read from ``LOGMASK_*`` environment variables by
    :class:`~logmask.config.settings.loaders.EnvSettingsLoader`, e.g.
    ``LOGMASK_RULES_FILE`` or ``LOGMASK_SCAN_TIMEOUT``.
    """

    _prefix = "LOGMASK"

    rules_file: str = "masking.env"
    mask_char: str = "*"
    # Seconds allowed for one rule's scan of one line; 0 disables the limit.
    scan_timeout: float = 0.0
    log_level: str = "INFO"
    json_logs: bool = True

    def _validate(self) -> None:
        if len(self.mask_char) != 1:
            raise InvalidSettingValueError(
                "mask_char", self.mask_char, "must be exactly one character"
            )
        if self.scan_timeout < 0:
            raise InvalidSettingValueError(
                "scan_timeout", self.scan_timeout, "must be >= 0"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError(
                "log_level", self.log_level, "unknown logging level"
            )

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @property
    def timeout(self) -> float | None:
        """``scan_timeout`` as the engine expects it (``None`` when disabled)."""
        return self.scan_timeout or None


__all__ = ["MaskingSettings"]
