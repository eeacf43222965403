# -*- coding: utf-8 -*-
"""
base

Base input strategy.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from markupsafe import Markup

from ..resolver import InputKind
from .context import InputContext

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from ..builder import FormBuilder
    from ..controls import FormControls


class BaseInput(ABC):
    """
    Base Input Class

    An input renders the label and control markup of one attribute. The
    surrounding list item, hints and errors are added by the builder.
    """
    kind: InputKind | None = None

    def __init__(self, ctx: InputContext) -> None:
        self.ctx = ctx

    @property
    def builder(self) -> FormBuilder:
        return self.ctx.builder

    @property
    def controls(self) -> FormControls:
        return self.ctx.builder.controls

    @property
    def method(self) -> str:
        return self.ctx.method

    def pop_input_html(self, options: dict[str, Any]) -> dict[str, Any]:
        """Remove ``input_html`` from ``options`` and return a private copy."""
        return dict(options.pop("input_html", None) or {})

    def label(self, options: dict[str, Any], **extra: Any) -> Markup:
        return self.builder.label(self.method, {**self.builder.options_for_label(options), **extra})

    # === Rendering ===
    @abstractmethod
    def render(self, options: dict[str, Any]) -> Markup:
        """Return the markup placed inside the wrapper; may consume ``options``."""
        raise NotImplementedError

# The End
