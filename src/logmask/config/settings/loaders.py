"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from typing import Any, TypeVar

from dotenv import load_dotenv

from logmask.config.settings.base import Settings
from logmask.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _coerce(value: str, type_hint: Any) -> Any:
    if type_hint is bool:
        return value.strip().lower() in _TRUTHY
    if type_hint is int:
        return int(value)
    if type_hint is float:
        return float(value)
    if typing.get_origin(type_hint) is list:
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


def build_settings(settings_class: type[T], values: dict[str, Any]) -> T:
    """Construct *settings_class* from *values*, mapping failures to ConfigError."""
    for name in settings_class.required_fields():
        if name not in values:
            raise MissingRequiredSettingError(settings_class.env_key(name))
    try:
        return settings_class(**values)
    except ConfigError:
        raise
    except Exception as exc:
        raise ConfigError(f"Failed to construct {settings_class.__name__}: {exc}") from exc


class SettingsLoader(abc.ABC):
    """Port: read setting values from an external source.

    :meth:`values` returns only the fields the source actually defines, so
    several loaders can be layered without one's defaults hiding another's
    explicit values.
    """

    @abc.abstractmethod
    def values(self, settings_class: type[Settings]) -> dict[str, Any]: ...

    def load(self, settings_class: type[T]) -> T:
        return build_settings(settings_class, self.values(settings_class))


class EnvSettingsLoader(SettingsLoader):
    """Read ``<PREFIX>_<FIELD>`` environment variables.

    Values are coerced to the field's annotated type: ``bool`` (``1``,
    ``true``, ``yes``, ``on``), ``int``, ``float`` and comma-separated
    ``list[str]``; anything else stays a string.
    """

    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        hints = typing.get_type_hints(settings_class)
        found: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            env_key = settings_class.env_key(field.name)
            raw = os.environ.get(env_key)
            if raw is None:
                continue
            try:
                found[field.name] = _coerce(raw, hints.get(field.name, str))
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc
        return found


class DotenvSettingsLoader(EnvSettingsLoader):
    """Load a ``.env`` file into the environment, then read it like :class:`EnvSettingsLoader`.

    Variables already set in the environment win unless *override* is true.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        load_dotenv(self._env_file, override=self._override)
        return super().values(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "build_settings"]
