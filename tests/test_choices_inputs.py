# -*- coding: utf-8 -*-
"""
tests.test_choices_inputs

Verify collection, boolean, temporal, time zone and country inputs.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import re
from types import SimpleNamespace

import pytest

from freeforms import ConfigurationError, FreeFormsSettings, UnknownInputKindError
from freeforms.inputs import registry

from .sample import make_book, make_builder

REQUIRED = '<abbr title="required">*</abbr>'


class TestSelectInput:
    def test_belongs_to_select(self) -> None:
        html = make_builder().input("author")
        assert html == (
            '<li class="select required author" id="book_author_input">'
            f'<label for="book_author_id">Author{REQUIRED}</label>'
            '<select id="book_author_id" name="book[author_id]">\n'
            '<option value=""></option>\n'
            '<option value="1">Frank Herbert</option>\n'
            '<option selected value="2">Ursula Le Guin</option>\n'
            "</select></li>"
        )

    def test_has_many_select_is_multiple_without_blank(self) -> None:
        html = make_builder().input("tags")
        assert f'<label for="book_tag_ids">Tags{REQUIRED}</label>' in html
        assert '<select id="book_tag_ids" multiple name="book[tag_ids][]" size="5">\n' in html
        assert '<option value=""></option>' not in html
        assert '<option selected value="1">Classic</option>' in html
        assert '<option value="2">Fantasy</option>' in html
        assert '<option selected value="3">Sci-Fi</option>' in html

    def test_has_many_select_respects_caller_size(self) -> None:
        html = make_builder().input("tags", input_html={"size": 10})
        assert 'size="10"' in html

    def test_explicit_collection_with_prompt(self) -> None:
        html = make_builder().input("title", as_="select", collection=["A", "B"], prompt="Pick")
        assert '<select id="book_title" name="book[title]">\n<option value="">Pick</option>\n' in html
        assert '<option value="A">A</option>\n<option value="B">B</option>' in html
        assert "collection" not in html

    def test_selected_option(self) -> None:
        html = make_builder().input("author", selected=1)
        assert '<option selected value="1">Frank Herbert</option>' in html
        assert '<option value="2">Ursula Le Guin</option>' in html

    def test_include_blank_setting(self) -> None:
        settings = FreeFormsSettings(include_blank_for_select_by_default=False)
        html = make_builder(settings=settings).input("author")
        assert '<option value=""></option>' not in html
        explicit = make_builder(settings=settings).input("author", include_blank="None")
        assert '<option value="">None</option>' in explicit

    def test_boolean_select(self) -> None:
        html = make_builder().input("published", as_="select")
        assert '<option selected value="true">Yes</option>\n<option value="false">No</option>' in html
        assert "value_as_class" not in html

    def test_integer_foreign_key_column(self) -> None:
        html = make_builder().input("publisher_id", collection=[("Ace", 1), ("Gollancz", 2)])
        assert html.startswith('<li class="select required publisher_id"')
        assert '<label for="book_publisher_id">Publisher' in html

    def test_missing_records_log_a_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="freeforms.builder"):
            html = make_builder(prefetched=False).input("author")
        assert "were not prefetched" in caplog.text
        assert '<select id="book_author_id" name="book[author_id]">\n<option value=""></option>\n</select>' in html


class TestRadioInput:
    def test_boolean_radio(self) -> None:
        html = make_builder().input("published", as_="radio")
        assert html == (
            '<li class="radio required published" id="book_published_input">'
            f"<fieldset><legend><span>Published{REQUIRED}</span></legend><ol>"
            '<li class="true"><label for="book_published_true">'
            '<input checked id="book_published_true" name="book[published]" type="radio" value="true"> Yes'
            "</label></li>"
            '<li class="false"><label for="book_published_false">'
            '<input id="book_published_false" name="book[published]" type="radio" value="false"> No'
            "</label></li>"
            "</ol></fieldset></li>"
        )

    def test_association_radio(self) -> None:
        html = make_builder().input("author", as_="radio")
        assert (
            '<li><label for="book_author_id_1">'
            '<input id="book_author_id_1" name="book[author_id]" type="radio" value="1"> Frank Herbert'
            "</label></li>"
        ) in html
        assert '<input checked id="book_author_id_2"' in html

    def test_index_option(self) -> None:
        html = make_builder().input("author", as_="radio", index=1)
        assert (
            '<li><label for="book_1_author_id_1">'
            '<input id="book_1_author_id_1" name="book[1][author_id]" type="radio" value="1"> Frank Herbert'
            "</label></li>"
        ) in html
        assert '<label for="book_1_author_id_2"><input checked id="book_1_author_id_2"' in html

    def test_label_false_drops_legend(self) -> None:
        html = make_builder().input("published", as_="radio", label=False)
        assert "<legend>" not in html
        assert "<fieldset><ol>" in html


class TestCheckBoxesInput:
    def test_association_check_boxes(self) -> None:
        html = make_builder().input("tags", as_="check_boxes")
        assert html.startswith('<li class="check_boxes required tags" id="book_tags_input"><fieldset>')
        assert (
            '<li><label for="book_tag_ids_1">'
            '<input name="book[tag_ids][]" type="hidden" value="">'
            '<input checked id="book_tag_ids_1" name="book[tag_ids][]" type="checkbox" value="1"> Classic'
            "</label></li>"
        ) in html
        assert '<input id="book_tag_ids_2" name="book[tag_ids][]" type="checkbox" value="2">' in html

    def test_unchecked_value_and_classes(self) -> None:
        html = make_builder().input(
            "tags", as_="check_boxes", unchecked_value="none", value_as_class=True
        )
        assert '<input name="book[tag_ids][]" type="hidden" value="none">' in html
        assert '<li class="2">' in html

    def test_falsy_unchecked_value_is_kept(self) -> None:
        html = make_builder().input("tags", as_="check_boxes", unchecked_value=0)
        assert '<input name="book[tag_ids][]" type="hidden" value="0">' in html

    def test_index_option(self) -> None:
        html = make_builder().input("tags", as_="check_boxes", index=3)
        assert '<input name="book[3][tag_ids][]" type="hidden" value="">' in html
        assert '<input checked id="book_3_tag_ids_1" name="book[3][tag_ids][]" type="checkbox" value="1">' in html
        assert 'name="book[tag_ids][]"' not in html

    def test_check_boxes_inside_fields_for(self) -> None:
        child = make_builder().fields_for("chapters", SimpleNamespace(tags=[2]), index=0)
        html = child.input("tags", as_="check_boxes", collection=[("Classic", 1), ("Fantasy", 2)])
        assert '<input checked id="book_chapters_attributes_0_tags_2" name="book[chapters_attributes][0][tags][]"' in html

    def test_explicit_collection(self) -> None:
        book = make_book(colors=["Red"])
        html = make_builder(book).input("colors", as_="check_boxes", collection=["Red", "Blue"])
        assert '<input id="book_colors_blue" name="book[colors][]" type="checkbox" value="Blue">' in html
        assert '<input checked id="book_colors_red" name="book[colors][]" type="checkbox" value="Red">' in html


class TestBooleanInput:
    def test_checked(self) -> None:
        html = make_builder().input("published")
        assert html == (
            '<li class="boolean required published" id="book_published_input">'
            '<label for="book_published">'
            '<input name="book[published]" type="hidden" value="0">'
            '<input checked id="book_published" name="book[published]" type="checkbox" value="1">'
            f" Published{REQUIRED}</label></li>"
        )

    def test_unchecked_with_custom_values(self) -> None:
        book = make_book(published=False)
        html = make_builder(book).input("published", checked_value="yes", unchecked_value="no")
        assert '<input name="book[published]" type="hidden" value="no">' in html
        assert '<input id="book_published" name="book[published]" type="checkbox" value="yes">' in html

    def test_falsy_checked_values_are_kept(self) -> None:
        book = make_book(published=False)
        html = make_builder(book).input("published", checked_value=1, unchecked_value=0)
        assert '<input name="book[published]" type="hidden" value="0">' in html
        html = make_builder(book).input("published", checked_value=0, unchecked_value="")
        assert '<input name="book[published]" type="hidden" value="">' in html
        assert 'type="checkbox" value="0">' in html


class TestTemporalInputs:
    def test_date_with_discarded_day(self) -> None:
        html = make_builder().input("published_on", discard_day=True)
        assert html.startswith(
            '<li class="date required published_on" id="book_published_on_input">'
            '<input id="book_published_on_3i" name="book[published_on(3i)]" type="hidden" value="14">'
            f"<fieldset><legend><span>Published on{REQUIRED}</span></legend><ol>"
            '<li><label for="book_published_on_1i">Year</label>'
        )
        assert html.count("<select") == 2
        assert '<option selected value="1965">1965</option>' in html
        assert html.endswith("</ol></fieldset></li>")

    def test_date_includes_blank_by_default(self) -> None:
        html = make_builder().input("published_on")
        assert html.count("<select") == 3
        assert html.count('<option value=""></option>') == 3

    def test_datetime(self) -> None:
        html = make_builder().input("created_at")
        assert html.count("<select") == 5
        assert '<option selected value="14">14</option>' in html
        assert '<option selected value="30">30</option>' in html

    def test_time(self) -> None:
        html = make_builder().input("starts_at", include_blank=False)
        assert html.count("<select") == 2
        assert html.count('type="hidden"') == 3
        assert 'name="book[starts_at(4i)]"' in html
        assert '<option selected value="9">09</option>' in html
        assert '<option value=""></option>' not in html


class TestZoneInputs:
    settings = FreeFormsSettings(time_zones=("America/New_York", "Asia/Tokyo", "Europe/London"))

    def test_time_zone_with_priority(self) -> None:
        html = make_builder(settings=self.settings).input("time_zone", priority_zones=["Europe/London"])
        assert html.startswith('<li class="time_zone required time_zone"')
        assert (
            '<select id="book_time_zone" name="book[time_zone]">\n'
            '<option selected value="Europe/London">Europe/London</option>\n'
            '<option disabled value="">-------------</option>\n'
            '<option value="America/New_York">America/New_York</option>\n'
            '<option value="Asia/Tokyo">Asia/Tokyo</option>\n'
            "</select>"
        ) in html

    def test_time_zone_priority_pattern(self) -> None:
        html = make_builder(settings=self.settings).input("time_zone", priority_zones=re.compile(r"^Asia/"))
        assert '<select id="book_time_zone" name="book[time_zone]">\n<option value="Asia/Tokyo">' in html

    def test_time_zone_defaults_to_zoneinfo(self) -> None:
        html = make_builder().input("time_zone")
        assert '<option selected value="Europe/London">Europe/London</option>' in html
        assert "-------------" not in html

    def test_country_without_provider_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            make_builder().input("country")

    def test_country_with_provider(self) -> None:
        settings = FreeFormsSettings(country_provider=lambda: ["Canada", "France", "United States"])
        html = make_builder(settings=settings).input("country")
        assert (
            '<option selected value="Canada">Canada</option>\n'
            '<option value="United States">United States</option>\n'
            '<option disabled value="">-------------</option>\n'
            '<option value="France">France</option>'
        ) in html


class TestInputRegistry:
    def test_lookup(self) -> None:
        assert registry.get("select").__name__ == "SelectInput"
        assert "radio" in registry
        assert "wysiwyg" not in registry
        with pytest.raises(UnknownInputKindError):
            registry.get("wysiwyg")


# The End
