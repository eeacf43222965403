# -*- coding: utf-8 -*-
"""
zones

Time zone and country selects.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any

from markupsafe import Markup

from ..exceptions import ConfigurationError
from ..resolver import InputKind
from .base import BaseInput
from .registry import registry


@registry.register(InputKind.TIME_ZONE)
class TimeZoneInput(BaseInput):
    def render(self, options: dict[str, Any]) -> Markup:
        settings = self.builder.settings
        html_options = self.pop_input_html(options)
        priority = options.pop("priority_zones", None) or settings.priority_zones or None
        select = self.controls.time_zone_select(
            self.method,
            priority,
            self.builder.strip_builder_options(options),
            html_options,
            zones=settings.time_zones,
        )
        return self.label(options) + select


@registry.register(InputKind.COUNTRY)
class CountryInput(BaseInput):
    """Country select; the list of countries comes from ``settings.country_provider``."""

    def render(self, options: dict[str, Any]) -> Markup:
        settings = self.builder.settings
        provider = settings.country_provider
        if provider is None:
            raise ConfigurationError(
                "The country input needs a country list: "
                "configure FreeFormsSettings.country_provider with a callable "
                "returning country names, or use another input kind."
            )
        html_options = self.pop_input_html(options)
        priority = options.pop("priority_countries", None) or settings.priority_countries
        select = self.controls.country_select(
            self.method,
            provider(),
            priority,
            self.builder.strip_builder_options(options),
            html_options,
        )
        return self.label(options) + select

# The End
