# -*- coding: utf-8 -*-
"""
descriptors

Column, association and validation descriptors.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field as PField

# Unified column types forming the basis for input inference
ColumnKind = Literal[
    "string", "text", "integer", "bigint", "smallint", "float", "decimal",
    "boolean", "date", "datetime", "timestamp", "time", "uuid", "json",
    "binary",
]

RelationKind = Literal["belongs_to", "has_many", "has_and_belongs_to_many"]

MANY_RELATIONS: frozenset[str] = frozenset({"has_many", "has_and_belongs_to_many"})


class Relation(BaseModel):
    """Information about an association to another model."""
    name: str
    kind: RelationKind
    target: str  # dotted path "app.Model"
    foreign_key: Optional[str] = None
    to_field: Optional[str] = None  # usually the target model's PK

    @property
    def is_many(self) -> bool:
        return self.kind in MANY_RELATIONS


class FieldDescriptor(BaseModel):
    """Column metadata for a single attribute."""
    name: str
    kind: ColumnKind
    nullable: bool = False
    primary_key: bool = False
    default: Any | None = None
    limit: int | None = None
    label: str | None = None


class Validation(BaseModel):
    """A presence validation declared for an attribute.

    ``if_`` and ``unless`` accept a callable taking the record, the name of a
    record attribute or method, or a literal value.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    attribute: str
    kind: Literal["presence"] = "presence"
    if_: Any | None = None
    unless: Any | None = None

    @property
    def conditional(self) -> bool:
        return self.if_ is not None or self.unless is not None


class ModelDescriptor(BaseModel):
    """Metadata describing a model for the form builder."""
    model_name: str
    pk_attr: str = "id"

    fields: list[FieldDescriptor] = PField(default_factory=list)
    relations: list[Relation] = PField(default_factory=list)
    validations: list[Validation] | None = None

    def column_for(self, name: str) -> FieldDescriptor | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def reflection_for(self, name: str) -> Relation | None:
        for rel in self.relations:
            if rel.name == name:
                return rel
        return None

    def validations_for(self, name: str) -> list[Validation]:
        return [v for v in self.validations or [] if v.attribute == name]

    def human_attribute_name(self, name: str) -> str | None:
        """Return the declared label of ``name`` when one exists."""
        column = self.column_for(name)
        return column.label if column is not None else None

    @property
    def fields_map(self) -> dict[str, FieldDescriptor]:
        """Return a mapping of field names to descriptors."""
        return {f.name: f for f in self.fields}

# The End
