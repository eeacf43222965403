# -*- coding: utf-8 -*-
"""
i18n

Translation lookup contract used by labels, hints and date prompts.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Sequence

logger = logging.getLogger(__name__)

Scope = str | Sequence[str] | None


class Translator(ABC):
    """Resolve dotted translation keys with a fallback chain."""

    @abstractmethod
    def lookup(self, path: Sequence[str]) -> Any | None:
        """Return the raw value stored at ``path`` or ``None``."""
        raise NotImplementedError

    def translate(
        self,
        key: str,
        *,
        scope: Scope = None,
        fallbacks: Iterable[str] = (),
        default: Any | None = None,
    ) -> Any | None:
        """Return the first value found for ``key`` or one of ``fallbacks``.

        Every key is looked up under ``scope``. ``default`` is returned as is
        when no key resolves.
        """
        prefix = self._split_scope(scope)
        for candidate in (key, *fallbacks):
            value = self.lookup([*prefix, *candidate.split(".")])
            if value is not None:
                return value
        logger.debug("No translation for %s under %s", key, ".".join(prefix) or "<root>")
        return default

    @staticmethod
    def _split_scope(scope: Scope) -> list[str]:
        if scope is None:
            return []
        if isinstance(scope, str):
            return [part for part in scope.split(".") if part]
        parts: list[str] = []
        for item in scope:
            parts.extend(part for part in str(item).split(".") if part)
        return parts


class MappingTranslator(Translator):
    """Translator backed by a nested mapping for a single locale."""

    def __init__(self, catalog: Mapping[str, Any] | None = None, *, locale: str = "en") -> None:
        self.catalog: Mapping[str, Any] = catalog or {}
        self.locale = locale

    def lookup(self, path: Sequence[str]) -> Any | None:
        node: Any = self.catalog
        for part in path:
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node


class NullTranslator(Translator):
    """Translator that knows no keys and always yields the default."""

    def lookup(self, path: Sequence[str]) -> Any | None:
        return None


__all__ = ["MappingTranslator", "NullTranslator", "Translator"]


# The End
