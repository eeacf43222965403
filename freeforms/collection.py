# -*- coding: utf-8 -*-
"""
collection

Normalize explicit collections, association records and boolean domains
into ordered ``(label, value)`` option lists.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, MutableMapping, Sequence

from .i18n import NullTranslator, Translator
from .schema.descriptors import Relation

Option = tuple[Any, Any]
Extractor = str | Callable[[Any], Any]

PRIMITIVES = (str, bytes, int, float, Decimal, Enum)


class CollectionNormalizer:
    """Build option lists for select, radio and check box inputs.

    Sources, in order: the ``collection`` option, the related records of the
    association, then a Yes/No list for boolean attributes.
    """

    def __init__(
        self,
        *,
        label_methods: Sequence[str] = ("to_label", "display_name", "full_name", "name", "title"),
        value_method: str = "id",
        translator: Translator | None = None,
    ) -> None:
        self.label_methods = tuple(label_methods)
        self.value_method = value_method
        self.translator = translator or NullTranslator()

    def normalize(
        self,
        options: MutableMapping[str, Any],
        *,
        relation: Relation | None = None,
        records: Iterable[Any] | None = None,
    ) -> list[Option]:
        """Consume the collection options and return the option list."""
        if options.get("collection") is not None:
            collection = options.pop("collection")
        elif relation is not None:
            collection = list(records or [])
        else:
            collection = self.boolean_collection(options)

        if isinstance(collection, Mapping):
            collection = list(collection.items())
        else:
            collection = list(collection)

        label_method = options.pop("label_method", None)
        value_method = options.pop("value_method", None)

        if not collection:
            return []
        if self._is_plain(collection[0]):
            return [self._plain_option(item) for item in collection]

        label = label_method or self.detect_label_method(collection)
        value = value_method or self.value_method
        return [(self.send_or_call(label, item), self.send_or_call(value, item)) for item in collection]

    def boolean_collection(self, options: MutableMapping[str, Any]) -> list[Option]:
        """Return ``[(Yes, True), (No, False)]`` with translated labels."""
        true_label = options.pop("true", None) or self.translator.translate(
            "yes", scope="freeforms", default="Yes"
        )
        false_label = options.pop("false", None) or self.translator.translate(
            "no", scope="freeforms", default="No"
        )
        options.setdefault("value_as_class", True)
        return [(true_label, True), (false_label, False)]

    def detect_label_method(self, collection: Sequence[Any]) -> Extractor:
        first = collection[0]
        for name in self.label_methods:
            if hasattr(first, name):
                return name
        return str

    @staticmethod
    def send_or_call(extractor: Extractor, item: Any) -> Any:
        """Apply ``extractor``: call it, or read the named attribute or method."""
        if callable(extractor):
            return extractor(item)
        attr = getattr(item, extractor, None)
        return attr() if callable(attr) else attr

    @staticmethod
    def _is_plain(item: Any) -> bool:
        return isinstance(item, PRIMITIVES) or isinstance(item, (list, tuple))

    @staticmethod
    def _plain_option(item: Any) -> Option:
        if isinstance(item, (list, tuple)) and item:
            return (item[0], item[-1])
        if isinstance(item, Enum):
            return (getattr(item, "label", None) or item.name, item.value)
        return (item, item)


__all__ = ["CollectionNormalizer", "Option"]


# The End
