# -*- coding: utf-8 -*-
"""
controls

Primitive form controls: text boxes, selects, radios, check boxes and the
date-part selects used by composite temporal inputs.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import calendar
import re
import zoneinfo
from datetime import date
from typing import Any, Iterable, Mapping, Sequence

from markupsafe import Markup

from .html import content_tag, join_markup, tag
from .i18n import Translator
from .naming import NameGenerator, format_value

# Options understood by the select and date-part generators rather than
# rendered as attributes.
GENERATOR_OPTION_KEYS = frozenset({
    "selected", "include_blank", "prompt", "index",
    "start_year", "end_year", "use_month_numbers", "minute_step",
    "field_name",
})

DATE_PARTS = ("year", "month", "day", "hour", "minute", "second")

SEPARATOR_LABEL = "-------------"


def attributes_from(options: Mapping[str, Any]) -> dict[str, Any]:
    """Drop generator-only keys, keeping what should become HTML attributes."""
    return {k: v for k, v in options.items() if k not in GENERATOR_OPTION_KEYS}


class FormControls:
    """Render form controls bound to one object and object name."""

    text_area_cols = 40
    text_area_rows = 20

    def __init__(
        self,
        names: NameGenerator,
        obj: Any = None,
        *,
        translator: Translator,
    ) -> None:
        self.names = names
        self.obj = obj
        self.translator = translator

    # === Values ===
    def value_of(self, method: str) -> Any:
        if self.obj is None:
            return None
        return getattr(self.obj, method, None)

    def _base_attrs(
        self,
        method: str,
        html_options: Mapping[str, Any] | None,
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        attrs = {
            "id": self.names.control_id(method, options),
            "name": self.names.control_name(method, options),
        }
        attrs.update(attributes_from(html_options or {}))
        return attrs

    # === Single value inputs ===
    def text_field(self, method: str, html_options: Mapping[str, Any] | None = None, *, options=None) -> Markup:
        return self._input("text", method, html_options, options)

    def password_field(self, method: str, html_options: Mapping[str, Any] | None = None, *, options=None) -> Markup:
        attrs = self._base_attrs(method, html_options, options)
        attrs["type"] = "password"
        return tag("input", attrs)

    def file_field(self, method: str, html_options: Mapping[str, Any] | None = None, *, options=None) -> Markup:
        attrs = self._base_attrs(method, html_options, options)
        attrs["type"] = "file"
        return tag("input", attrs)

    def hidden_field(self, method: str, html_options: Mapping[str, Any] | None = None, *, options=None) -> Markup:
        return self._input("hidden", method, html_options, options)

    def _input(self, input_type: str, method: str, html_options, options) -> Markup:
        attrs = self._base_attrs(method, html_options, options)
        attrs["type"] = input_type
        if "value" not in attrs:
            value = self.value_of(method)
            if value is not None:
                attrs["value"] = format_value(value)
        return tag("input", attrs)

    def text_area(self, method: str, html_options: Mapping[str, Any] | None = None, *, options=None) -> Markup:
        attrs = {"cols": self.text_area_cols, "rows": self.text_area_rows}
        attrs.update(self._base_attrs(method, html_options, options))
        return content_tag("textarea", format_value(self.value_of(method)), attrs)

    @staticmethod
    def hidden_field_tag(name: str, value: Any, attrs: Mapping[str, Any] | None = None) -> Markup:
        merged = {"id": name, "name": name, "type": "hidden", "value": format_value(value)}
        merged.update(attrs or {})
        return tag("input", merged)

    # === Check boxes and radios ===
    def is_checked(self, method: str, value: Any) -> bool:
        current = self.value_of(method)
        if isinstance(current, (list, tuple, set, frozenset)):
            wanted = format_value(value)
            return any(format_value(item) == wanted for item in current)
        if isinstance(current, bool):
            return current is (format_value(value) not in ("", "0", "false"))
        if current is None:
            return False
        return format_value(current) == format_value(value)

    def check_box(
        self,
        method: str,
        html_options: Mapping[str, Any] | None = None,
        checked_value: Any = "1",
        unchecked_value: Any = "0",
        *,
        options=None,
    ) -> Markup:
        attrs = self._base_attrs(method, html_options, options)
        attrs.update({"type": "checkbox", "value": format_value(checked_value)})
        if "checked" not in attrs:
            attrs["checked"] = self.is_checked(method, checked_value)
        box = tag("input", attrs)
        if unchecked_value is None:
            return box
        hidden = tag(
            "input",
            {"name": attrs["name"], "type": "hidden", "value": format_value(unchecked_value)},
        )
        return hidden + box

    def radio_button(
        self,
        method: str,
        value: Any,
        html_options: Mapping[str, Any] | None = None,
        *,
        options=None,
    ) -> Markup:
        attrs = self._base_attrs(method, html_options, options)
        attrs.update({"type": "radio", "value": format_value(value)})
        if "checked" not in attrs:
            attrs["checked"] = self.is_checked(method, value)
        return tag("input", attrs)

    # === Selects ===
    @staticmethod
    def options_for_select(
        choices: Iterable[tuple[Any, Any]],
        selected: Any = None,
        disabled: Iterable[Any] = (),
    ) -> Markup:
        """Render ``<option>`` tags for ``(label, value)`` pairs."""
        if isinstance(selected, (list, tuple, set, frozenset)):
            wanted = {format_value(v) for v in selected}
        elif selected is None:
            wanted = set()
        else:
            wanted = {format_value(selected)}
        blocked = {format_value(v) for v in disabled}
        items = []
        for label, value in choices:
            formatted = format_value(value)
            items.append(content_tag("option", format_value(label), {
                "value": formatted,
                "selected": formatted in wanted,
                "disabled": formatted in blocked,
            }))
        return join_markup(items, "\n")

    def select_tag(
        self,
        name: str,
        option_tags: Markup,
        options: Mapping[str, Any] | None = None,
        html_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        """Wrap prepared ``option_tags`` into a ``<select>`` honouring blanks and prompts."""
        options = options or {}
        attrs = {"name": name}
        attrs.update(attributes_from(html_options or {}))
        if attrs.get("multiple") and not str(attrs["name"]).endswith("[]"):
            attrs["name"] = f"{attrs['name']}[]"
        leading: list[Markup] = []
        prompt = options.get("prompt")
        if prompt:
            label = "Please select" if prompt is True else str(prompt)
            leading.append(content_tag("option", label, {"value": ""}))
        elif options.get("include_blank"):
            blank = options["include_blank"]
            leading.append(content_tag("option", "" if blank is True else str(blank), {"value": ""}))
        body = join_markup([*leading, option_tags], "\n")
        return content_tag("select", Markup(f"\n{body}\n") if body else body, attrs)

    def select(
        self,
        method: str,
        choices: Sequence[tuple[Any, Any]],
        options: Mapping[str, Any] | None = None,
        html_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        options = options or {}
        selected = options["selected"] if "selected" in options else self.value_of(method)
        attrs = {"id": self.names.control_id(method, options)}
        attrs.update(html_options or {})
        return self.select_tag(
            self.names.control_name(method, options),
            self.options_for_select(choices, selected),
            options,
            attrs,
        )

    def _priority_select(
        self,
        method: str,
        entries: Sequence[tuple[Any, Any]],
        priority: Sequence[tuple[Any, Any]],
        options: Mapping[str, Any],
        html_options: Mapping[str, Any] | None,
    ) -> Markup:
        selected = options["selected"] if "selected" in options else self.value_of(method)
        parts: list[Markup] = []
        if priority:
            parts.append(self.options_for_select(priority, selected))
            parts.append(self.options_for_select([(SEPARATOR_LABEL, "")], disabled=[""]))
            chosen = {format_value(v) for _, v in priority}
            entries = [e for e in entries if format_value(e[1]) not in chosen]
        parts.append(self.options_for_select(entries, selected))
        attrs = {"id": self.names.control_id(method, options)}
        attrs.update(html_options or {})
        return self.select_tag(
            self.names.control_name(method, options),
            join_markup(parts, "\n"),
            options,
            attrs,
        )

    def time_zone_select(
        self,
        method: str,
        priority_zones: Any = None,
        options: Mapping[str, Any] | None = None,
        html_options: Mapping[str, Any] | None = None,
        *,
        zones: Iterable[str] | None = None,
    ) -> Markup:
        """Render a select of IANA zone names with ``priority_zones`` first.

        ``priority_zones`` is a sequence of names or a compiled regular
        expression matched against every zone.
        """
        names = sorted(zones if zones is not None else zoneinfo.available_timezones())
        if isinstance(priority_zones, re.Pattern):
            priority = [z for z in names if priority_zones.search(z)]
        else:
            priority = [z for z in (priority_zones or ()) if z in names]
        return self._priority_select(
            method,
            [(z, z) for z in names],
            [(z, z) for z in priority],
            options or {},
            html_options,
        )

    def country_select(
        self,
        method: str,
        countries: Iterable[str],
        priority_countries: Any = None,
        options: Mapping[str, Any] | None = None,
        html_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        names = list(countries)
        if isinstance(priority_countries, re.Pattern):
            priority = [c for c in names if priority_countries.search(c)]
        else:
            priority = [c for c in (priority_countries or ()) if c in names]
        return self._priority_select(
            method,
            [(c, c) for c in names],
            [(c, c) for c in priority],
            options or {},
            html_options,
        )

    # === Date parts ===
    def select_date_part(
        self,
        unit: str,
        value: Any,
        options: Mapping[str, Any],
        html_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        """Render the select for one date or time unit of ``value``.

        ``options`` carries ``field_name``, the full submitted name of the
        select (``book[published_on(1i)]``).
        """
        if unit not in DATE_PARTS:
            raise ValueError(f"Unknown date part: {unit!r}")
        current = getattr(value, unit, None) if value is not None else None
        choices = getattr(self, f"_{unit}_choices")(current, options)
        name = options["field_name"]
        return self.select_tag(
            name,
            self.options_for_select(choices, current),
            {"include_blank": options.get("include_blank"), "prompt": options.get("prompt")},
            html_options,
        )

    @staticmethod
    def _year_choices(current: int | None, options: Mapping[str, Any]) -> list[tuple[Any, Any]]:
        middle = current if current is not None else date.today().year
        start = options.get("start_year", middle - 5)
        end = options.get("end_year", middle + 5)
        step = 1 if end >= start else -1
        return [(y, y) for y in range(start, end + step, step)]

    def _month_choices(self, current: int | None, options: Mapping[str, Any]) -> list[tuple[Any, Any]]:
        if options.get("use_month_numbers"):
            return [(m, m) for m in range(1, 13)]
        names = self.translator.translate("date.month_names")
        if not isinstance(names, (list, tuple)) or len(names) < 13:
            names = list(calendar.month_name)
        return [(names[m], m) for m in range(1, 13)]

    @staticmethod
    def _day_choices(current: int | None, options: Mapping[str, Any]) -> list[tuple[Any, Any]]:
        return [(d, d) for d in range(1, 32)]

    @staticmethod
    def _hour_choices(current: int | None, options: Mapping[str, Any]) -> list[tuple[Any, Any]]:
        return [(f"{h:02d}", h) for h in range(24)]

    @staticmethod
    def _minute_choices(current: int | None, options: Mapping[str, Any]) -> list[tuple[Any, Any]]:
        step = int(options.get("minute_step") or 1)
        return [(f"{m:02d}", m) for m in range(0, 60, step)]

    @staticmethod
    def _second_choices(current: int | None, options: Mapping[str, Any]) -> list[tuple[Any, Any]]:
        return [(f"{s:02d}", s) for s in range(60)]


__all__ = ["DATE_PARTS", "FormControls", "GENERATOR_OPTION_KEYS", "attributes_from"]


# The End
