# -*- coding: utf-8 -*-
"""
inputs

Input strategies keyed by input kind.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .base import BaseInput
from .context import InputContext
from .registry import InputRegistry, registry

register_input = registry.register

# Import builtin strategies to populate the registry.
from . import basic as _basic  # noqa: E402,F401
from . import boolean as _boolean  # noqa: E402,F401
from . import choices as _choices  # noqa: E402,F401
from . import datetime as _datetime  # noqa: E402,F401
from . import zones as _zones  # noqa: E402,F401

__all__ = [
    "BaseInput",
    "InputContext",
    "InputRegistry",
    "register_input",
    "registry",
]

# The End
