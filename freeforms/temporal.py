# -*- coding: utf-8 -*-
"""
temporal

Split a date/time attribute into one select per unit.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, MutableMapping

from markupsafe import Markup

from .controls import FormControls
from .html import content_tag
from .i18n import Translator
from .naming import NameGenerator, humanize

logger = logging.getLogger(__name__)

POSITIONS: dict[str, int] = {
    "year": 1,
    "month": 2,
    "day": 3,
    "hour": 4,
    "minute": 5,
    "second": 6,
}

DEFAULT_DATE_ORDER: tuple[str, ...] = ("year", "month", "day")
TIME_UNITS: tuple[str, ...] = ("hour", "minute")


@dataclass
class DecomposedValue:
    """Hidden fields and visible list items produced for one attribute."""

    hidden_fields: list[Markup] = field(default_factory=list)
    list_items: list[Markup] = field(default_factory=list)

    @property
    def hidden_markup(self) -> Markup:
        return Markup("").join(self.hidden_fields)


class TemporalDecomposer:
    """Render ``year``/``month``/``day``/``hour``/``minute``/``second`` parts.

    A discarded date unit becomes a hidden field and the walk goes on. A
    discarded time unit ends the walk: later time units are neither rendered
    nor emitted as hidden fields.
    """

    def __init__(
        self,
        names: NameGenerator,
        controls: FormControls,
        translator: Translator,
    ) -> None:
        self.names = names
        self.controls = controls
        self.translator = translator

    def date_order(self, options: MutableMapping[str, Any]) -> list[str]:
        order = options.pop("order", None)
        if order:
            return [str(unit) for unit in order]
        localized = self.translator.translate("date.order")
        if isinstance(localized, (list, tuple)):
            return [str(unit) for unit in localized]
        return list(DEFAULT_DATE_ORDER)

    def time_units(self, options: Mapping[str, Any]) -> list[str]:
        units = list(TIME_UNITS)
        if options.get("include_seconds"):
            units.append("second")
        return units

    def decompose(
        self,
        method: str,
        value: Any,
        options: MutableMapping[str, Any],
        html_options: Mapping[str, Any] | None = None,
    ) -> DecomposedValue:
        """Walk the units of ``value`` and build hidden fields and list items."""
        inputs = self.date_order(options)
        time_inputs = self.time_units(options)
        result = DecomposedValue()
        html_options = dict(html_options or {})
        select_options = date_part_options(options)

        for unit in [*inputs, *time_inputs]:
            position = POSITIONS.get(unit)
            if position is None:
                logger.warning("Ignoring unknown date part %r for %s", unit, method)
                continue
            html_id = self.names.generate_html_id(method, f"{position}i", options)
            field_name = self.names.control_name(f"{method}({position}i)", options)
            if options.get(f"discard_{unit}"):
                if unit in time_inputs:
                    logger.debug("Discarding %s stops the time units of %s", unit, method)
                    break
                result.hidden_fields.append(
                    self.hidden_part(unit, value, html_id, field_name)
                )
                continue
            label_text = self.translator.translate(
                unit, scope="datetime.prompts", default=humanize(unit)
            )
            select = self.controls.select_date_part(
                unit,
                value,
                {**select_options, "field_name": field_name},
                {**html_options, "id": html_id},
            )
            result.list_items.append(
                content_tag("li", [content_tag("label", label_text, {"for": html_id}), select])
            )
        return result

    def hidden_part(self, unit: str, value: Any, html_id: str, field_name: str) -> Markup:
        hidden_value = getattr(value, unit) if hasattr(value, unit) else value
        return self.controls.hidden_field_tag(
            field_name,
            hidden_value or 1,
            {"id": html_id},
        )


def date_part_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Return the options the date-part selects understand."""
    keys = ("include_blank", "prompt", "start_year", "end_year", "use_month_numbers", "minute_step")
    return {k: options[k] for k in keys if k in options}


__all__ = ["DecomposedValue", "POSITIONS", "TemporalDecomposer"]


# The End
