# -*- coding: utf-8 -*-
"""
basic

Single control inputs: string, password, numeric, text, file and hidden.

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


class BasicInput(BaseInput):
    """Label followed by one control."""

    sized = False

    def control(self, html_options: dict[str, Any], options: dict[str, Any]) -> Markup:
        raise NotImplementedError

    def render(self, options: dict[str, Any]) -> Markup:
        html_options = self.pop_input_html(options)
        if self.sized:
            html_options = {
                **self.builder.default_string_options(self.method, self.ctx.kind),
                **html_options,
            }
        return self.label(options) + self.control(html_options, options)


@registry.register(InputKind.STRING)
class StringInput(BasicInput):
    sized = True

    def control(self, html_options, options):
        return self.controls.text_field(self.method, html_options, options=options)


@registry.register(InputKind.NUMERIC)
class NumericInput(StringInput):
    """Text box sized with the default size regardless of the column limit."""


@registry.register(InputKind.PASSWORD)
class PasswordInput(BasicInput):
    sized = True

    def control(self, html_options, options):
        return self.controls.password_field(self.method, html_options, options=options)


@registry.register(InputKind.TEXT)
class TextInput(BasicInput):
    def control(self, html_options, options):
        return self.controls.text_area(self.method, html_options, options=options)


@registry.register(InputKind.FILE)
class FileInput(BasicInput):
    def control(self, html_options, options):
        return self.controls.file_field(self.method, html_options, options=options)


@registry.register(InputKind.HIDDEN)
class HiddenInput(BaseInput):
    """Hidden field without a label; remaining options become attributes."""

    def render(self, options: dict[str, Any]) -> Markup:
        html_options = {
            **self.builder.strip_builder_options(options),
            **self.pop_input_html(options),
        }
        return self.controls.hidden_field(self.method, html_options, options=options)

# The End
