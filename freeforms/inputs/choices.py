# -*- coding: utf-8 -*-
"""
choices

Collection inputs: select, radio buttons and check boxes.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any

from markupsafe import Markup, escape

from ..html import content_tag
from ..naming import format_value, sanitize_value
from ..resolver import InputKind
from .base import BaseInput
from .registry import registry


class CollectionInput(BaseInput):
    """Shared helpers for inputs driven by an option list."""

    def collection(self, options: dict[str, Any]) -> list[tuple[Any, Any]]:
        return self.builder.find_collection_for_column(self.method, options)

    @property
    def input_name(self) -> str:
        return self.builder.association_input_name(self.method)

    def choice_item(self, value: Any, content: Markup, value_as_class: bool) -> Markup:
        attrs = {"class": format_value(value).lower()} if value_as_class else {}
        return content_tag("li", content, attrs)


@registry.register(InputKind.SELECT)
class SelectInput(CollectionInput):
    """
    Drop-down of the collection.

    ``has_many`` and many-to-many associations render a multiple select of
    size 5 without a blank entry.
    """

    def render(self, options: dict[str, Any]) -> Markup:
        choices = self.collection(options)
        html_options = self.pop_input_html(options)
        self.builder.set_include_blank(options)
        relation = self.ctx.relation
        if relation is not None and relation.is_many:
            options["include_blank"] = False
            html_options.setdefault("multiple", True)
            html_options.setdefault("size", 5)
        input_name = self.input_name
        label = self.label(options, input_name=input_name)
        select = self.controls.select(
            input_name,
            choices,
            self.builder.strip_builder_options(options),
            html_options,
        )
        return label + select


@registry.register(InputKind.RADIO)
class RadioInput(CollectionInput):
    """One radio button per option inside a fieldset."""

    def render(self, options: dict[str, Any]) -> Markup:
        choices = self.collection(options)
        html_options = {
            **self.builder.strip_builder_options(options),
            **self.pop_input_html(options),
        }
        value_as_class = bool(options.pop("value_as_class", False))
        input_name = self.input_name
        items = []
        for label, value in choices:
            item_id = self.builder.names.generate_html_id(input_name, sanitize_value(value), options)
            radio = self.controls.radio_button(
                input_name, value, {**html_options, "id": item_id}, options=options
            )
            content = content_tag(
                "label", Markup("{0} {1}").format(radio, escape(format_value(label))), {"for": item_id}
            )
            items.append(self.choice_item(value, content, value_as_class))
        return self.builder.field_set_and_list_wrapping_for_method(self.method, options, items)


@registry.register(InputKind.CHECK_BOXES)
class CheckBoxesInput(CollectionInput):
    """
    One check box per option inside a fieldset.

    Every box submits under ``<object>[<input_name>][]``; each is preceded by
    a hidden field carrying ``unchecked_value`` (default ``""``).
    """

    def render(self, options: dict[str, Any]) -> Markup:
        choices = self.collection(options)
        html_options = self.pop_input_html(options)
        value_as_class = bool(options.pop("value_as_class", False))
        unchecked_value = options.pop("unchecked_value", "")
        input_name = self.input_name
        field_name = f"{self.builder.names.control_name(input_name, options)}[]"
        html_options = {"name": field_name, **html_options}
        items = []
        for label, value in choices:
            item_id = self.builder.names.generate_html_id(input_name, sanitize_value(value), options)
            box = self.controls.check_box(
                input_name,
                {**html_options, "id": item_id},
                value,
                unchecked_value,
                options=options,
            )
            content = content_tag(
                "label", Markup("{0} {1}").format(box, escape(format_value(label))), {"for": item_id}
            )
            items.append(self.choice_item(value, content, value_as_class))
        return self.builder.field_set_and_list_wrapping_for_method(self.method, options, items)

# The End
