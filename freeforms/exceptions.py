# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for the form builder.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class FreeFormsError(Exception):
    """Base class for form builder exceptions."""


class ConfigurationError(FreeFormsError):
    """Raised when an input needs a capability that is not configured."""


class UnknownInputKindError(FreeFormsError, ValueError):
    """Raised when the ``as`` option names an input kind that does not exist."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"Unknown input kind: {kind!r}")
        self.kind = kind


# The End
