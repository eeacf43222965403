# -*- coding: utf-8 -*-
"""
registry

Input strategy registry.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict, Type

from ..exceptions import UnknownInputKindError
from ..resolver import InputKind
from .base import BaseInput


class InputRegistry:
    def __init__(self) -> None:
        self._by_kind: Dict[InputKind, Type[BaseInput]] = {}

    def register(self, kind: InputKind | str):
        """Decorator to register an input strategy for ``kind``."""
        key = InputKind.coerce(kind)

        def _decorator(cls: Type[BaseInput]) -> Type[BaseInput]:
            cls.kind = key
            self._by_kind[key] = cls
            return cls
        return _decorator

    def get(self, kind: Any) -> Type[BaseInput]:
        key = InputKind.coerce(kind)
        try:
            return self._by_kind[key]
        except KeyError:
            raise UnknownInputKindError(kind) from None

    def missing(self) -> list[InputKind]:
        """Return the kinds that have no registered strategy."""
        return [kind for kind in InputKind if kind not in self._by_kind]

    def __contains__(self, kind: object) -> bool:
        try:
            return InputKind.coerce(kind) in self._by_kind
        except UnknownInputKindError:
            return False

registry = InputRegistry()

# The End
