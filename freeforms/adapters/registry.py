# -*- coding: utf-8 -*-
"""
registry

Registry for ORM adapters.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .base import BaseAdapter


class AdapterRegistry:
    """Registry for ORM adapters."""

    def __init__(self) -> None:
        self._adapters: dict[str, BaseAdapter] = {}

    def register(self, adapter: BaseAdapter) -> None:
        """Register an adapter instance under its ``name``."""
        self._adapters[adapter.name] = adapter

    def get(self, name: str) -> BaseAdapter:
        try:
            return self._adapters[name]
        except KeyError as exc:
            raise ModuleNotFoundError(f"Adapter '{name}' not registered") from exc

    def names(self) -> list[str]:
        return sorted(self._adapters)


registry = AdapterRegistry()

__all__ = ["AdapterRegistry", "registry"]

# The End
