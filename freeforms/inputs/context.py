# -*- coding: utf-8 -*-
"""
context

Input context helper.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..resolver import InputKind
from ..schema.descriptors import FieldDescriptor, Relation

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from ..builder import FormBuilder


@dataclass(frozen=True)
class InputContext:
    """Everything an input strategy needs to know about the attribute it renders."""
    builder: FormBuilder
    method: str                           # attribute name
    kind: InputKind                       # resolved input kind
    column: Optional[FieldDescriptor] = None
    relation: Optional[Relation] = None

# The End
