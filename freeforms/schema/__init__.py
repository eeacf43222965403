# -*- coding: utf-8 -*-
"""
schema

Unified model metadata consumed by the form builder.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .descriptors import (
    ColumnKind,
    FieldDescriptor,
    ModelDescriptor,
    Relation,
    RelationKind,
    Validation,
)

__all__ = [
    "ColumnKind",
    "FieldDescriptor",
    "ModelDescriptor",
    "Relation",
    "RelationKind",
    "Validation",
]


# The End
