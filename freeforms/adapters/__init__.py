# -*- coding: utf-8 -*-
"""
__init__

ORM adapters supplying model metadata and association records.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .base import BaseAdapter
from .registry import AdapterRegistry, registry

__all__ = ["BaseAdapter", "AdapterRegistry", "registry"]

# The End
