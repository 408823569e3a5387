"""Config settings – SettingsFactory."""
from __future__ import annotations

from typing import Any, Sequence, TypeVar

from logmask.config.settings.base import Settings
from logmask.config.settings.loaders import SettingsLoader, build_settings
from logmask.config.validation.errors import ConfigError
from logmask.observability.logging.processors import get_logger

T = TypeVar("T", bound=Settings)

logger = get_logger(__name__)


class SettingsFactory:
    """Layer several setting sources into one settings instance.

    Each loader contributes only the values it defines; later loaders win on
    overlap and *overrides* win over every loader. A loader that raises
    :class:`ConfigError` is logged and skipped so the others still apply.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~logmask.config.settings.base.Settings` subclass to
            construct.
        loaders:
            Ordered setting sources.
        overrides:
            Explicit values applied last, useful for tests and local runs.

        Raises
        ------
        MissingRequiredSettingError
            A field without a default is set by no source.
        InvalidSettingValueError
            The merged values fail the settings' own validation.
        ConfigError
            Any other construction failure.
        """
        merged: dict[str, Any] = {}
        for loader in loaders or ():
            try:
                merged.update(loader.values(settings_cls))
            except ConfigError as exc:
                logger.warning(
                    "settings_loader_skipped",
                    loader=type(loader).__name__,
                    error=exc.message,
                )
        merged.update(overrides or {})
        return build_settings(settings_cls, merged)


__all__ = ["SettingsFactory"]
