"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Mapping, TypeVar

from dotenv import dotenv_values

from search_export.config.settings.base import Settings
from search_export.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class SettingsLoader(abc.ABC):
    """Port: build a settings instance from one configuration source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read ``<PREFIX>_<FIELD>`` variables from *environ* (default: ``os.environ``).

    Values are coerced from the field annotation: ``bool``, ``int``,
    ``float`` and comma-separated ``list[str]``.
    """

    def __init__(self, environ: Mapping[str, str | None] | None = None) -> None:
        self._environ = environ

    def _read_environ(self) -> Mapping[str, str | None]:
        return os.environ if self._environ is None else self._environ

    def load(self, settings_class: type[T]) -> T:
        environ = self._read_environ()
        required = set(settings_class.required_fields())
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = settings_class.env_key(field.name)
            raw = environ.get(env_key)
            if raw is None:
                if field.name in required:
                    raise MissingRequiredSettingError(field.name, env_key=env_key)
                continue
            try:
                kwargs[field.name] = _coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(field.name, raw, str(exc), env_key=env_key) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc


class DotenvSettingsLoader(EnvSettingsLoader):
    """Read the same variables from a ``.env`` file layered under the process environment.

    Real environment variables win unless *override* is set. ``os.environ``
    is never modified.
    """

    def __init__(self, env_file: str | os.PathLike[str] = ".env", override: bool = False) -> None:
        super().__init__()
        self._env_file = env_file
        self._override = override

    def _read_environ(self) -> Mapping[str, str | None]:
        if not os.path.isfile(self._env_file):
            raise ConfigError(f"env file not found: {os.fspath(self._env_file)}")
        file_values = dotenv_values(self._env_file)
        if self._override:
            return {**os.environ, **file_values}
        return {**file_values, **os.environ}


def _coerce(value: str, type_hint: Any) -> Any:
    # annotations are strings under ``from __future__ import annotations``
    hint = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")
    if type_hint is bool or hint == "bool":
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"not a boolean: {value!r}")
    if type_hint is int or hint == "int":
        return int(value)
    if type_hint is float or hint == "float":
        return float(value)
    if getattr(type_hint, "__origin__", None) is list or hint.startswith("list"):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
