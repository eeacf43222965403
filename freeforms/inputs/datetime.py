# -*- coding: utf-8 -*-
"""
datetime

Composite date, datetime and time inputs.

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


class TemporalInput(BaseInput):
    """
    Fieldset with one labelled select per unit.

    Hidden fields for discarded date units are emitted before the fieldset.
    """

    forced_options: dict[str, Any] = {}

    def render(self, options: dict[str, Any]) -> Markup:
        self.builder.set_include_blank(options)
        options.update(self.forced_options)
        html_options = self.pop_input_html(options)
        value = self.controls.value_of(self.method)
        parts = self.builder.temporal.decompose(self.method, value, options, html_options)
        fieldset = self.builder.field_set_and_list_wrapping_for_method(
            self.method, options, parts.list_items
        )
        return parts.hidden_markup + fieldset


@registry.register(InputKind.DATE)
class DateInput(TemporalInput):
    forced_options = {"discard_hour": True}


@registry.register(InputKind.DATETIME)
class DatetimeInput(TemporalInput):
    pass


@registry.register(InputKind.TIME)
class TimeInput(TemporalInput):
    forced_options = {"discard_year": True, "discard_month": True, "discard_day": True}

# The End
