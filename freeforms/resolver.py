# -*- coding: utf-8 -*-
"""
resolver

Infer the input kind of an attribute from column metadata, naming
conventions and association reflection.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Any, Iterable

from .exceptions import UnknownInputKindError
from .schema.descriptors import FieldDescriptor, Relation

logger = logging.getLogger(__name__)


class InputKind(str, Enum):
    """Every input the builder knows how to render."""

    STRING = "string"
    NUMERIC = "numeric"
    PASSWORD = "password"
    TEXT = "text"
    FILE = "file"
    SELECT = "select"
    RADIO = "radio"
    CHECK_BOXES = "check_boxes"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    TIME_ZONE = "time_zone"
    COUNTRY = "country"
    HIDDEN = "hidden"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: Any) -> "InputKind":
        """Return the member named by ``value`` or raise ``UnknownInputKindError``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            raise UnknownInputKindError(value) from None


NUMERIC_COLUMNS = frozenset({"integer", "bigint", "smallint", "float", "decimal"})
INTEGER_COLUMNS = frozenset({"integer", "bigint", "smallint"})

COLUMN_KINDS: dict[str, InputKind] = {
    "string": InputKind.STRING,
    "text": InputKind.TEXT,
    "date": InputKind.DATE,
    "datetime": InputKind.DATETIME,
    "timestamp": InputKind.DATETIME,
    "time": InputKind.TIME,
    "boolean": InputKind.BOOLEAN,
}

_TIME_ZONE_RE = re.compile(r"time_zone")
_FOREIGN_KEY_RE = re.compile(r"_id$")
_PASSWORD_RE = re.compile(r"password")
_COUNTRY_RE = re.compile(r"country")


class AttributeTypeResolver:
    """Choose one ``InputKind`` per attribute."""

    def __init__(self, file_methods: Iterable[str] = ("filename", "read")) -> None:
        self.file_methods = tuple(file_methods)

    def resolve(
        self,
        method: str,
        *,
        column: FieldDescriptor | None = None,
        relation: Relation | None = None,
        value: Any = None,
        override: Any = None,
    ) -> InputKind:
        if override is not None:
            return InputKind.coerce(override)
        if column is not None:
            kind = self.for_column(method, column)
        else:
            kind = self.without_column(method, relation=relation, value=value)
        logger.debug("Resolved %s as %s", method, kind.value)
        return kind

    def for_column(self, method: str, column: FieldDescriptor) -> InputKind:
        """Map a declared column to an input, applying name conventions first."""
        ctype = column.kind
        if ctype == "string" and _TIME_ZONE_RE.search(method):
            return InputKind.TIME_ZONE
        if ctype in INTEGER_COLUMNS and _FOREIGN_KEY_RE.search(method):
            return InputKind.SELECT
        if ctype in NUMERIC_COLUMNS:
            return InputKind.NUMERIC
        if ctype == "string" and _PASSWORD_RE.search(method):
            return InputKind.PASSWORD
        if ctype == "string" and _COUNTRY_RE.search(method):
            return InputKind.COUNTRY
        return COLUMN_KINDS.get(ctype, InputKind.STRING)

    def without_column(
        self,
        method: str,
        *,
        relation: Relation | None = None,
        value: Any = None,
    ) -> InputKind:
        """Guess an input for virtual attributes and associations."""
        if relation is not None:
            return InputKind.SELECT
        if value is not None and self.is_file_like(value):
            return InputKind.FILE
        if _PASSWORD_RE.search(method):
            return InputKind.PASSWORD
        return InputKind.STRING

    def is_file_like(self, value: Any) -> bool:
        return any(hasattr(value, name) for name in self.file_methods)


__all__ = ["AttributeTypeResolver", "InputKind"]


# The End
