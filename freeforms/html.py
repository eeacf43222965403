# -*- coding: utf-8 -*-
"""
html

Tag generation helpers built on ``markupsafe``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from markupsafe import Markup, escape
from wtforms.widgets import html_params

VOID_ELEMENTS = frozenset({"input", "br", "hr", "img", "meta", "link"})


def html_attrs(attrs: Mapping[str, Any] | None) -> Markup:
    """Generate HTML attribute syntax from ``attrs``.

    Rendering is delegated to ``wtforms.widgets.html_params``: keys come
    out sorted, ``True`` renders a bare boolean attribute and ``False`` is
    skipped. ``None`` values are dropped and lists are joined with spaces.

    >>> html_attrs({"name": "text1", "id": "f", "class": "text"})
    Markup('class="text" id="f" name="text1"')
    >>> html_attrs({"checked": True, "readonly": False})
    Markup('checked')
    """
    cleaned: dict[str, Any] = {}
    for key, value in (attrs or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = " ".join(str(v) for v in value if v not in (None, ""))
        cleaned[key] = value
    return Markup(html_params(**cleaned))


def tag(name: str, attrs: Mapping[str, Any] | None = None) -> Markup:
    """Return a void element such as ``<input>``."""
    params = html_attrs(attrs)
    if params:
        return Markup(f"<{name} {params}>")
    return Markup(f"<{name}>")


def content_tag(name: str, content: Any = "", attrs: Mapping[str, Any] | None = None) -> Markup:
    """Return ``<name attrs>content</name>``, escaping plain string content."""
    if name in VOID_ELEMENTS:
        return tag(name, attrs)
    body = join_markup(content) if _is_sequence(content) else escape(content if content is not None else "")
    params = html_attrs(attrs)
    opening = f"<{name} {params}>" if params else f"<{name}>"
    return Markup(f"{opening}{body}</{name}>")


def join_markup(parts: Iterable[Any], separator: str = "") -> Markup:
    """Escape and join ``parts``, dropping empty ones."""
    return Markup(separator).join(escape(p) for p in parts if p not in (None, ""))


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


__all__ = ["content_tag", "html_attrs", "join_markup", "tag"]


# The End
