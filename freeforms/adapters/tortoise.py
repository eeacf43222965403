# -*- coding: utf-8 -*-
"""
tortoise

Tortoise ORM adapter: introspects models into descriptors and loads the
records association inputs offer as choices.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any

from tortoise import Tortoise, fields
from tortoise.models import Model

from ..schema.descriptors import (
    FieldDescriptor,
    ModelDescriptor,
    Relation,
    Validation,
)
from .base import BaseAdapter
from .registry import registry

logger = logging.getLogger(__name__)


class Adapter(BaseAdapter):
    """Facade over Tortoise ORM metadata and queries."""

    name = "tortoise"

    def get_model(self, target: str) -> type[Model] | None:
        """Return a Tortoise model by dotted path.

        Args:
            target: Model path in ``app.Model`` notation.

        Returns:
            The model class, or ``None`` when it is not registered.
        """
        app_label, model_name = target.rsplit(".", 1)
        return Tortoise.apps.get(app_label, {}).get(model_name)

    def get_pk_attr(self, model: type[Any]) -> str:
        """Return the primary-key attribute name for ``model``, ``id`` by default."""
        meta = getattr(model, "_meta", None)
        return getattr(meta, "pk_attr", "id") if meta else "id"

    async def fetch_all(self, model: type[Model]) -> list[Model]:
        """Load every record of ``model`` ordered by primary key.

        This coroutine must be awaited.
        """
        return await model.all().order_by(self.get_pk_attr(model))

    async def related_ids(self, obj: Model, relation: str) -> list[Any]:
        """Return the primary keys linked through a reverse FK or M2M ``relation``.

        This coroutine must be awaited.
        """
        manager = getattr(obj, relation)
        pk_attr = self.get_pk_attr(manager.remote_model)
        return list(await manager.all().order_by(pk_attr).values_list(pk_attr, flat=True))

    def _app_label(self, model: type[Any]) -> str:
        """Return the app label for a model, with safe fallback."""
        meta = getattr(model, "_meta", None)
        label = getattr(meta, "app", None)
        if label in {None, "models"}:
            parts = model.__module__.split(".")
            if len(parts) > 1:
                return parts[1] if parts[0] == "apps" else parts[0]
        return label or model.__module__.split(".")[0]

    def _target_of(self, f: fields.Field) -> tuple[str, str] | None:
        """Return ``(dotted, pk_attr)`` of the model a relational field points to."""
        target = getattr(f, "related_model", None) or getattr(f, "model_name", None)
        if target is None:
            return None
        if isinstance(target, str):
            return target, "id"
        meta = getattr(target, "_meta", None)
        app_label = (getattr(meta, "app", None) if meta else None) or self._app_label(target)
        return f"{app_label}.{target.__name__}", self.get_pk_attr(target)

    def _kind_for_field(self, f: fields.Field) -> str:
        """Map a Tortoise field instance to a column kind."""
        if isinstance(f, fields.BooleanField):
            return "boolean"
        if isinstance(f, fields.BigIntField):
            return "bigint"
        if isinstance(f, fields.SmallIntField):
            return "smallint"
        if isinstance(f, fields.IntField):
            return "integer"
        if isinstance(f, fields.FloatField):
            return "float"
        if isinstance(f, fields.DecimalField):
            return "decimal"
        if isinstance(f, fields.DatetimeField):
            return "datetime"
        if isinstance(f, fields.DateField):
            return "date"
        time_field = getattr(fields, "TimeField", None)
        if time_field and isinstance(f, time_field):
            return "time"
        if isinstance(f, fields.UUIDField):
            return "uuid"
        if isinstance(f, fields.JSONField):
            return "json"
        if isinstance(f, fields.BinaryField):
            return "binary"
        if isinstance(f, fields.TextField):
            return "text"
        return "string"

    def _relation_for_field(self, name: str, f: fields.Field) -> Relation | None:
        """Return association metadata for FK, one-to-one, reverse FK and M2M fields."""
        if isinstance(f, fields.relational.BackwardOneToOneRelation):
            return None
        if isinstance(f, fields.relational.ForeignKeyFieldInstance):
            kind, foreign_key = "belongs_to", getattr(f, "source_field", None) or f"{name}_id"
        elif isinstance(f, fields.relational.ManyToManyFieldInstance):
            kind, foreign_key = "has_and_belongs_to_many", None
        elif isinstance(f, fields.relational.BackwardFKRelation):
            kind, foreign_key = "has_many", getattr(f, "relation_field", None)
        else:
            return None
        target = self._target_of(f)
        if target is None:
            logger.debug("Skipping association %s without a target model", name)
            return None
        dotted, to_field = target
        return Relation(
            name=name,
            kind=kind,
            target=dotted,
            foreign_key=foreign_key,
            to_field=to_field,
        )

    def _field_descriptor(self, name: str, f: fields.Field) -> FieldDescriptor:
        """Build a :class:`FieldDescriptor` from a Tortoise field."""
        raw_default = getattr(f, "default", None)
        return FieldDescriptor(
            name=name,
            kind=self._kind_for_field(f),
            nullable=bool(getattr(f, "null", False)),
            primary_key=bool(getattr(f, "pk", False)),
            default=None if callable(raw_default) else raw_default,
            limit=getattr(f, "max_length", None),
            label=getattr(f, "description", None),
        )

    def _presence_validation(self, name: str, f: fields.Field) -> Validation | None:
        """Non-null fields without a default must be filled in."""
        if getattr(f, "null", False) or getattr(f, "pk", False):
            return None
        if getattr(f, "default", None) is not None or getattr(f, "generated", False):
            return None
        if getattr(f, "auto_now", False) or getattr(f, "auto_now_add", False):
            return None
        return Validation(attribute=name)

    def get_model_descriptor(self, model: type[Any]) -> ModelDescriptor:
        """Build a descriptor with metadata for ``model``.

        Args:
            model: Model class to introspect.

        Returns:
            ModelDescriptor: columns, associations and presence validations.

        Classes lacking Tortoise metadata give a descriptor without columns
        and without validations.
        """
        meta = getattr(model, "_meta", None)
        model_name = getattr(model, "__name__", "Model")
        if meta is None:
            return ModelDescriptor(model_name=model_name)

        columns: list[FieldDescriptor] = []
        relations: list[Relation] = []
        validations: list[Validation] = []
        fields_map = getattr(meta, "fields_map", {})
        source_fields = {
            getattr(f, "source_field", None) or f"{name}_id"
            for name, f in fields_map.items()
            if isinstance(f, fields.relational.ForeignKeyFieldInstance)
        }

        for name, f in fields_map.items():
            if isinstance(f, fields.relational.RelationalField):
                rel = self._relation_for_field(name, f)
                if rel is None:
                    continue
                relations.append(rel)
                if rel.kind == "belongs_to":
                    validation = self._presence_validation(name, f)
                    if validation is not None:
                        validations.append(validation)
                continue
            if name in source_fields:
                continue
            columns.append(self._field_descriptor(name, f))
            validation = self._presence_validation(name, f)
            if validation is not None:
                validations.append(validation)

        return ModelDescriptor(
            model_name=model_name,
            pk_attr=self.get_pk_attr(model),
            fields=columns,
            relations=relations,
            validations=validations,
        )


tortoise_adapter = adapter = Adapter()
registry.register(adapter)

__all__ = ["Adapter", "adapter", "tortoise_adapter"]

# The End
