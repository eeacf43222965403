# -*- coding: utf-8 -*-
"""
boolean

Single check box wrapped by its label.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any

from markupsafe import Markup

from ..resolver import InputKind
from .base import BaseInput
from .registry import registry


@registry.register(InputKind.BOOLEAN)
class BooleanInput(BaseInput):
    def render(self, options: dict[str, Any]) -> Markup:
        html_options = self.pop_input_html(options)
        checked_value = options.pop("checked_value", "1")
        unchecked_value = options.pop("unchecked_value", "0")
        box = self.controls.check_box(
            self.method,
            {**self.builder.strip_builder_options(options), **html_options},
            checked_value,
            unchecked_value,
            options=options,
        )
        return self.label(options, label_prefix_for_nested_input=box)

# The End
