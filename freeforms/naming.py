# -*- coding: utf-8 -*-
"""
naming

HTML ids, association field names and label text.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import re
from typing import Any, Mapping

import inflection

from .i18n import Translator
from .schema.descriptors import ModelDescriptor, Relation

_OBJECT_NAME_RE = re.compile(r"\]\[|[^-a-zA-Z0-9:.]")
_TRAILING_PUNCT_RE = re.compile(r"[?/\-]$")
_VALUE_SPACE_RE = re.compile(r"\s")
_VALUE_NONWORD_RE = re.compile(r"\W")

LABEL_SCOPE = "freeforms.labels"
HINT_SCOPE = "freeforms.hints"

_NO_INDEX = object()


def sanitize_object_name(object_name: str) -> str:
    """Return ``object_name`` with brackets and punctuation replaced by ``_``."""
    sanitized = _OBJECT_NAME_RE.sub("_", str(object_name))
    return sanitized[:-1] if sanitized.endswith("_") else sanitized


def sanitize_value(value: Any) -> str:
    """Return the id suffix used for a choice value (``"Foo Bar!"`` -> ``foo_bar``)."""
    text = _VALUE_SPACE_RE.sub("_", format_value(value))
    return _VALUE_NONWORD_RE.sub("", text).lower()


def format_value(value: Any) -> str:
    """Render a Python value as it appears in a form control."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return ""
    return str(value)


def association_input_name(method: str, relation: Relation | None) -> str:
    """Return the field name an association input submits under.

    ``has_many :tags`` gives ``tag_ids``; ``belongs_to :author`` gives the
    configured foreign key or ``author_id``; plain attributes are unchanged.
    """
    if relation is None:
        return method
    if relation.is_many:
        return f"{inflection.singularize(method)}_ids"
    return relation.foreign_key or f"{method}_id"


def humanize(name: str, method: str = "humanize") -> str:
    """Turn an attribute name into label text using ``inflection``."""
    if method == "titleize":
        return inflection.titleize(name)
    if method == "capitalize":
        return str(name).replace("_", " ").capitalize()
    return inflection.humanize(name)


class NameGenerator:
    """Generate ids, names and label text for one bound object."""

    def __init__(
        self,
        object_name: str,
        *,
        index: Any = None,
        descriptor: ModelDescriptor | None = None,
    ) -> None:
        self.object_name = object_name
        self.index = index
        self.descriptor = descriptor
        self.sanitized_object_name = sanitize_object_name(object_name)

    def generate_html_id(
        self,
        method: str,
        value: str = "input",
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Return ``<object>[_index]_<method>_<value>``.

        The ``index`` option wins over the ambient index of the builder.
        """
        return f"{self.control_id(method, options)}_{value}"

    def control_id(self, method: str, options: Mapping[str, Any] | None = None) -> str:
        """Return the id a form control receives (``book_title``)."""
        index = self.resolve_index(options)
        index_part = f"_{index}" if index is not None else ""
        method_part = _TRAILING_PUNCT_RE.sub("", str(method))
        return f"{self.sanitized_object_name}{index_part}_{method_part}"

    def control_name(self, method: str, options: Mapping[str, Any] | None = None) -> str:
        """Return the submitted field name (``book[title]`` or ``book[1][title]``)."""
        index = self.resolve_index(options)
        if index is not None:
            return f"{self.object_name}[{index}][{method}]"
        return f"{self.object_name}[{method}]"

    def resolve_index(self, options: Mapping[str, Any] | None = None) -> Any:
        index = (options or {}).get("index", _NO_INDEX)
        return self.index if index is _NO_INDEX else index

    @property
    def model_key(self) -> str:
        """Return the translation key of the bound model."""
        if self.descriptor is not None:
            return inflection.underscore(self.descriptor.model_name)
        return self.sanitized_object_name

    def label_text(
        self,
        method: str,
        *,
        translator: Translator,
        lookups: bool,
        label_str_method: str = "humanize",
        action: str | None = None,
    ) -> str:
        """Return the label text for ``method``.

        Lookup order: ``freeforms.labels.<model>.<action>.<method>``,
        ``freeforms.labels.<model>.<method>``, ``freeforms.labels.<method>``,
        the descriptor label, then the humanized method name.
        """
        if lookups:
            found = self.localized_string(method, LABEL_SCOPE, translator=translator, action=action)
            if found is not None:
                return found
        return self.humanized_attribute_name(method, label_str_method)

    def localized_string(
        self,
        method: str,
        scope: str,
        *,
        translator: Translator,
        action: str | None = None,
    ) -> str | None:
        """Look ``method`` up under ``scope`` from the most to the least specific key."""
        keys = [f"{self.model_key}.{method}", method]
        if action:
            keys.insert(0, f"{self.model_key}.{action}.{method}")
        found = translator.translate(keys[0], scope=scope, fallbacks=keys[1:])
        return str(found) if found is not None else None

    def humanized_attribute_name(self, method: str, label_str_method: str = "humanize") -> str:
        if self.descriptor is not None:
            declared = self.descriptor.human_attribute_name(method)
            if declared:
                return declared
        return humanize(method, label_str_method)


__all__ = [
    "NameGenerator",
    "association_input_name",
    "format_value",
    "humanize",
    "sanitize_object_name",
    "sanitize_value",
]


# The End
