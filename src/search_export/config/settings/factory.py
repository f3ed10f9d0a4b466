"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from search_export.config.settings.base import Settings
from search_export.config.settings.loaders import SettingsLoader
from search_export.config.validation.errors import ConfigError, MissingRequiredSettingError
from search_export.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

logger = get_logger(__name__)


class SettingsFactory:
    """Merge loader outputs and explicit overrides into one settings instance."""

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
        *,
        strict: bool = False,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~search_export.config.settings.base.Settings` subclass
            to construct.
        loaders:
            Ordered sequence of loaders.  Only values a loader actually read
            (i.e. that differ from the class defaults) are merged, and later
            loaders win on conflicts.
        overrides:
            Highest-priority values, e.g. command-line flags.  ``None`` values
            are ignored so unset flags fall through to the loaders.
        strict:
            When false, a loader failing with :class:`ConfigError` is logged and
            skipped; when true the error propagates.

        Raises
        ------
        MissingRequiredSettingError
            A field without a default is absent after merging.
        ConfigError
            A strict loader failed, or the merged values fail validation.
        """
        defaults = _defaults(settings_cls)
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except ConfigError as exc:
                if strict:
                    raise
                logger.warning("settings.loader_skipped", loader=type(loader).__name__, **exc.log_fields())
                continue
            for name, value in vars(instance).items():
                if name not in defaults or defaults[name] != value:
                    merged[name] = value

        merged.update({k: v for k, v in (overrides or {}).items() if v is not None})

        for name in settings_cls.required_fields():
            if name not in merged:
                raise MissingRequiredSettingError(name, env_key=settings_cls.env_key(name))

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc) from exc


def _defaults(settings_cls: type[Settings]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
        if field.default is not dataclasses.MISSING:
            values[field.name] = field.default
        elif field.default_factory is not dataclasses.MISSING:  # type: ignore[misc]
            values[field.name] = field.default_factory()  # type: ignore[misc]
    return values


__all__ = ["SettingsFactory"]
