# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the form builder.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from threading import RLock
from typing import Any, Callable, Iterable, Mapping

from .exceptions import ConfigurationError

INLINE_ERROR_MODES = ("sentence", "list", "first", "none")
LABEL_STR_METHODS = ("humanize", "titleize", "capitalize")
INLINE_PARTS = ("input", "hints", "errors")


@dataclass
class FreeFormsSettings:
    """Container for form builder configuration derived from environment variables."""

    all_fields_required_by_default: bool = True
    required_string: str = '<abbr title="required">*</abbr>'
    optional_string: str = ""
    inline_errors: str = "sentence"
    inline_order: tuple[str, ...] = INLINE_PARTS
    label_str_method: str = "humanize"
    collection_label_methods: tuple[str, ...] = (
        "to_label",
        "display_name",
        "full_name",
        "name",
        "title",
        "username",
        "login",
        "value",
    )
    collection_value_method: str = "id"
    file_methods: tuple[str, ...] = ("filename", "read")
    priority_countries: tuple[str, ...] = (
        "Australia",
        "Canada",
        "United Kingdom",
        "United States",
    )
    priority_zones: tuple[str, ...] = ()
    time_zones: tuple[str, ...] | None = None
    country_provider: Callable[[], Iterable[str]] | None = None
    i18n_lookups_by_default: bool = False
    include_blank_for_select_by_default: bool = True
    default_text_field_size: int = 50

    def __post_init__(self) -> None:
        """Normalize sequences and reject unsupported rendering modes."""
        self.inline_errors = str(self.inline_errors).strip().lower()
        if self.inline_errors not in INLINE_ERROR_MODES:
            raise ConfigurationError(
                f"inline_errors must be one of {', '.join(INLINE_ERROR_MODES)}"
            )
        self.label_str_method = str(self.label_str_method).strip().lower()
        if self.label_str_method not in LABEL_STR_METHODS:
            raise ConfigurationError(
                f"label_str_method must be one of {', '.join(LABEL_STR_METHODS)}"
            )
        self.inline_order = tuple(self.inline_order)
        unknown = [part for part in self.inline_order if part not in INLINE_PARTS]
        if unknown:
            raise ConfigurationError(f"Unknown inline parts: {', '.join(unknown)}")
        self.collection_label_methods = tuple(self.collection_label_methods)
        self.file_methods = tuple(self.file_methods)
        self.priority_countries = tuple(self.priority_countries)
        self.priority_zones = tuple(self.priority_zones)
        if self.time_zones is not None:
            self.time_zones = tuple(self.time_zones)

    def derive(self, **changes: Any) -> "FreeFormsSettings":
        """Return a copy of the settings with ``changes`` applied."""
        return replace(self, **changes)

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "FREEFORMS_",
    ) -> "FreeFormsSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        defaults = cls()
        return cls(
            all_fields_required_by_default=cls._to_bool(
                data.get("REQUIRED_BY_DEFAULT"),
                default=defaults.all_fields_required_by_default,
            ),
            required_string=data.get("REQUIRED_STRING", defaults.required_string),
            optional_string=data.get("OPTIONAL_STRING", defaults.optional_string),
            inline_errors=data.get("INLINE_ERRORS") or defaults.inline_errors,
            inline_order=cls._to_tuple(data.get("INLINE_ORDER"), default=defaults.inline_order),
            label_str_method=data.get("LABEL_STR_METHOD") or defaults.label_str_method,
            collection_value_method=(
                data.get("COLLECTION_VALUE_METHOD") or defaults.collection_value_method
            ),
            priority_countries=cls._to_tuple(
                data.get("PRIORITY_COUNTRIES"), default=defaults.priority_countries
            ),
            priority_zones=cls._to_tuple(
                data.get("PRIORITY_ZONES"), default=defaults.priority_zones
            ),
            i18n_lookups_by_default=cls._to_bool(
                data.get("I18N_LOOKUPS"), default=defaults.i18n_lookups_by_default
            ),
            include_blank_for_select_by_default=cls._to_bool(
                data.get("INCLUDE_BLANK"),
                default=defaults.include_blank_for_select_by_default,
            ),
            default_text_field_size=cls._to_int(
                data.get("TEXT_FIELD_SIZE"), default=defaults.default_text_field_size
            ),
        )

    @staticmethod
    def _to_int(value: str | None, *, default: int) -> int:
        """Return an integer from ``value`` or ``default`` when conversion fails."""
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _to_bool(value: str | None, *, default: bool = False) -> bool:
        """Return a boolean parsed from ``value`` with a ``default`` fallback."""

        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return default

    @staticmethod
    def _to_tuple(value: str | None, *, default: tuple[str, ...]) -> tuple[str, ...]:
        """Split a comma separated ``value`` into a tuple of stripped items."""
        if value is None:
            return default
        return tuple(item.strip() for item in value.split(",") if item.strip())


class SettingsManager:
    """Central storage for the active ``FreeFormsSettings`` instance."""

    def __init__(self, initial: FreeFormsSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._callbacks: list[Callable[[FreeFormsSettings], None]] = []

    def configure(self, settings: FreeFormsSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            for callback in list(self._callbacks):
                callback(settings)

    def current(self) -> FreeFormsSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = FreeFormsSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Forget the active settings so the next access rereads the environment."""
        with self._lock:
            self._settings = None

    def register(self, callback: Callable[[FreeFormsSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[FreeFormsSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)


_settings_manager = SettingsManager()


def configure(settings: FreeFormsSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> FreeFormsSettings:
    """Return the active settings instance used by form builders."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Drop the installed settings instance."""
    _settings_manager.reset()


def register_settings_observer(callback: Callable[[FreeFormsSettings], None]) -> None:
    """Subscribe to configuration changes."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[FreeFormsSettings], None]) -> None:
    """Unsubscribe from configuration changes previously registered."""
    _settings_manager.unregister(callback)


__all__ = [
    "FreeFormsSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "reset_settings",
    "register_settings_observer",
    "unregister_settings_observer",
]


# The End
