# -*- coding: utf-8 -*-
"""
base

Interface every ORM adapter implements.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

from ..schema.descriptors import ModelDescriptor


class BaseAdapter(ABC):
    """Expose model metadata and related records to the form builder."""

    name: str = "base"

    @abstractmethod
    def get_model_descriptor(self, model: type[Any]) -> ModelDescriptor:
        """Describe the columns, associations and validations of ``model``."""

    @abstractmethod
    def get_model(self, target: str) -> type[Any] | None:
        """Return the model class for a dotted ``app.Model`` target."""

    @abstractmethod
    async def fetch_all(self, model: type[Any]) -> list[Any]:
        """Return every record of ``model`` ordered by primary key."""

    async def related_ids(self, obj: Any, relation: str) -> list[Any]:
        """Return the primary keys of the records linked to ``obj`` through ``relation``."""
        return []

# The End
