# -*- coding: utf-8 -*-
"""
tests.test_builder

Verify list item wrapping, labels, hints, errors and the single control
inputs of the form builder.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import copy
import io
from datetime import date
from types import SimpleNamespace

import pytest

from freeforms import (
    FormBuilder,
    FreeFormsSettings,
    MappingTranslator,
    ModelDescriptor,
    UnknownInputKindError,
    Validation,
)
from freeforms.builder import to_sentence
from freeforms.inputs import registry

from .sample import BOOK, make_book, make_builder

REQUIRED = '<abbr title="required">*</abbr>'


class TestInputWrapper:
    def test_string_input_markup(self) -> None:
        html = make_builder().input("title")
        assert html == (
            '<li class="string required title" id="book_title_input">'
            f'<label for="book_title">Title{REQUIRED}</label>'
            '<input id="book_title" maxlength="100" name="book[title]" size="50" type="text" value="Dune">'
            "</li>"
        )

    def test_required_with_errors_has_both_classes(self) -> None:
        book = make_book(errors={"title": ["is required"]})
        html = make_builder(book).input("title")
        assert html.startswith('<li class="string required error title" id="book_title_input">')

    def test_optional_without_errors_has_neither_class(self) -> None:
        html = make_builder().input("title", required=False)
        assert html.startswith('<li class="string optional title"')
        assert "error" not in html
        assert REQUIRED not in html

    def test_wrapper_html_is_merged(self) -> None:
        html = make_builder().input("title", wrapper_html={"class": ["wide", "first"], "id": "main", "data-x": "1"})
        assert html.startswith('<li class="string required title wide first" data-x="1" id="main">')

    def test_rendering_is_idempotent_and_leaves_options_untouched(self) -> None:
        builder = make_builder()
        options = {
            "input_html": {"class": "wide"},
            "wrapper_html": {"class": "extra"},
            "label_html": {"class": "lbl"},
            "hint": "Shown on the cover",
        }
        snapshot = copy.deepcopy(options)
        first = builder.input("title", options)
        second = builder.input("title", options)
        assert first == second
        assert options == snapshot

    def test_input_html_id_targets_label(self) -> None:
        html = make_builder().input("title", input_html={"id": "custom"})
        assert '<label for="custom">' in html
        assert 'id="custom"' in html

    def test_as_alias_and_unknown_kind(self) -> None:
        builder = make_builder()
        assert builder.input("title", as_="text").startswith('<li class="text required title"')
        assert builder.input("title", {"as": "text"}) == builder.input("title", as_="text")
        with pytest.raises(UnknownInputKindError):
            builder.input("title", as_="wysiwyg")

    def test_index_option(self) -> None:
        html = make_builder().input("title", index=2)
        assert 'id="book_2_title_input"' in html
        assert '<label for="book_2_title">' in html
        assert 'name="book[2][title]"' in html
        assert "index" not in html

    def test_index_option_on_date_parts(self) -> None:
        html = make_builder().input("published_on", index=2, discard_day=True)
        assert '<input id="book_2_published_on_3i" name="book[2][published_on(3i)]" type="hidden" value="14">' in html
        assert '<select id="book_2_published_on_1i" name="book[2][published_on(1i)]">' in html
        assert '<select id="book_2_published_on_2i" name="book[2][published_on(2i)]">' in html
        assert "book[published_on(" not in html

    def test_every_kind_has_a_strategy(self) -> None:
        assert registry.missing() == []


class TestLabels:
    def test_label_false_suppresses_label(self) -> None:
        assert "<label" not in make_builder().input("title", label=False)

    def test_explicit_label_is_escaped(self) -> None:
        html = make_builder().input("title", label="Title & Name")
        assert f'<label for="book_title">Title &amp; Name{REQUIRED}</label>' in html

    def test_optional_string(self) -> None:
        settings = FreeFormsSettings(optional_string="<em>(optional)</em>")
        html = make_builder(settings=settings).input("title", required=False)
        assert "Title<em>(optional)</em></label>" in html

    def test_translated_labels_depend_on_action(self) -> None:
        translator = MappingTranslator(
            {"freeforms": {"labels": {"book": {"new": {"title": "Name your book"}, "title": "Book name"}}}}
        )
        settings = FreeFormsSettings(i18n_lookups_by_default=True)
        new = make_builder(SimpleNamespace(title=None), settings=settings, translator=translator)
        edit = make_builder(
            SimpleNamespace(title="Dune", _saved_in_db=True), settings=settings, translator=translator
        )
        assert "Name your book" in new.input("title")
        assert "Book name" in edit.input("title")

    def test_empty_label_is_kept(self) -> None:
        html = make_builder().input("title", label="")
        assert f'<label for="book_title">{REQUIRED}</label>' in html
        assert "Title" not in html.split("<input")[0]

    def test_label_html(self) -> None:
        html = make_builder().input("title", label_html={"class": "big"})
        assert f'<label class="big" for="book_title">Title{REQUIRED}</label>' in html


class TestHintsAndErrors:
    def test_hint_option(self) -> None:
        html = make_builder().input("title", hint="Shown on the cover")
        assert html.endswith('>\n<p class="inline-hints">Shown on the cover</p></li>')

    def test_translated_hint(self) -> None:
        translator = MappingTranslator({"freeforms": {"hints": {"book": {"title": "Keep it short"}}}})
        settings = FreeFormsSettings(i18n_lookups_by_default=True)
        html = make_builder(settings=settings, translator=translator).input("title")
        assert '<p class="inline-hints">Keep it short</p>' in html

    @pytest.mark.parametrize(
        "mode, expected",
        [
            ("sentence", '<p class="inline-errors">is required and is too short</p>'),
            ("list", '<ul class="errors"><li>is required</li><li>is too short</li></ul>'),
            ("first", '<p class="inline-errors">is required</p>'),
        ],
    )
    def test_error_modes(self, mode: str, expected: str) -> None:
        book = make_book(errors={"title": ["is required", "is too short"]})
        html = make_builder(book, settings=FreeFormsSettings(inline_errors=mode)).input("title")
        assert html.endswith(f"\n{expected}</li>")

    def test_error_mode_none(self) -> None:
        book = make_book(errors={"title": ["is required"]})
        html = make_builder(book, settings=FreeFormsSettings(inline_errors="none")).input("title")
        assert "is required" not in html
        assert "error title" in html

    def test_inline_order(self) -> None:
        book = make_book(errors={"title": ["is required"]})
        settings = FreeFormsSettings(inline_order=("errors", "hints", "input"))
        html = make_builder(book, settings=settings).input("title", hint="Hint")
        body = html.split(">", 1)[1]
        assert body.startswith('<p class="inline-errors">is required</p>\n<p class="inline-hints">Hint</p>\n<label')

    def test_to_sentence(self) -> None:
        assert to_sentence(["a"]) == "a"
        assert to_sentence(["a", "b"]) == "a and b"
        assert to_sentence(["a", "b", "c"]) == "a, b and c"


class TestRequired:
    def _builder(self, obj) -> FormBuilder:
        descriptor = BOOK.model_copy(
            update={
                "validations": [
                    Validation(attribute="title"),
                    Validation(attribute="author"),
                    Validation(attribute="body", if_="is_long"),
                    Validation(attribute="pages", unless=lambda record: record.draft),
                    Validation(attribute="price", if_=False),
                ]
            }
        )
        return make_builder(obj, descriptor=descriptor)

    def test_presence_validations(self) -> None:
        builder = self._builder(make_book(is_long=lambda: False, draft=True))
        assert builder.method_required("title") is True
        assert builder.method_required("author_id") is True
        assert builder.method_required("body") is False
        assert builder.method_required("pages") is False
        assert builder.method_required("price") is False
        assert builder.method_required("country") is False

    def test_conditions_that_hold(self) -> None:
        builder = self._builder(make_book(is_long=lambda: True, draft=False))
        assert builder.method_required("body") is True
        assert builder.method_required("pages") is True

    def test_without_validations_uses_default(self) -> None:
        assert make_builder().method_required("anything") is True
        settings = FreeFormsSettings(all_fields_required_by_default=False)
        assert make_builder(settings=settings).method_required("anything") is False


class TestBasicInputs:
    def test_text(self) -> None:
        html = make_builder().input("body")
        assert '<textarea cols="40" id="book_body" name="book[body]" rows="20">Spice</textarea>' in html

    def test_numeric_uses_default_size(self) -> None:
        html = make_builder().input("pages")
        assert html.startswith('<li class="numeric required pages"')
        assert '<input id="book_pages" name="book[pages]" size="50" type="text" value="412">' in html

    def test_password_has_no_value(self) -> None:
        html = make_builder().input("secret_password")
        assert '<input id="book_secret_password" name="book[secret_password]" size="50" type="password">' in html
        assert "hunter2" not in html

    def test_size_override(self) -> None:
        html = make_builder().input("title", input_html={"size": 10})
        assert 'maxlength="100" name="book[title]" size="10"' in html

    def test_file(self) -> None:
        book = make_book(cover=io.BytesIO(b"png"))
        html = make_builder(book).input("cover")
        assert html.startswith('<li class="file required cover"')
        assert '<input id="book_cover" name="book[cover]" type="file">' in html

    def test_hidden_has_no_label_and_no_errors(self) -> None:
        book = make_book(errors={"id": ["is invalid"]})
        html = make_builder(book).input("id", as_="hidden", input_html={"data-role": "pk"})
        assert html == (
            '<li class="hidden required error id" id="book_id_input">'
            '<input data-role="pk" id="book_id" name="book[id]" type="hidden" value="1">'
            "</li>"
        )

    def test_virtual_attribute_without_descriptor(self) -> None:
        builder = FormBuilder("user", SimpleNamespace(nickname="bob"), settings=FreeFormsSettings())
        html = builder.input("nickname")
        assert '<input id="user_nickname" name="user[nickname]" size="50" type="text" value="bob">' in html


class TestGrouping:
    def test_inputs_fieldset(self) -> None:
        html = make_builder().inputs("title", "body", name="Details")
        assert html.startswith('<fieldset class="inputs"><legend><span>Details</span></legend><ol><li class="string')
        assert '</li>\n<li class="text required body"' in html
        assert html.endswith("</li></ol></fieldset>")

    def test_inputs_without_name(self) -> None:
        html = make_builder().inputs("title")
        assert html.startswith('<fieldset class="inputs"><ol>')

    def test_fields_for(self) -> None:
        child = make_builder().fields_for("chapters", SimpleNamespace(title="One"), index=0)
        html = child.input("title")
        assert 'id="book_chapters_attributes_0_title_input"' in html
        assert 'name="book[chapters_attributes][0][title]"' in html
        assert 'value="One"' in html

    def test_fields_for_numbers_children(self) -> None:
        builder = make_builder()
        first = builder.fields_for("chapters", SimpleNamespace(title="One")).input("title")
        second = builder.fields_for("chapters", SimpleNamespace(title="Two")).input("title")
        assert 'id="book_chapters_attributes_0_title"' in first
        assert 'id="book_chapters_attributes_1_title"' in second
        assert 'name="book[chapters_attributes][1][title]"' in second

    def test_fields_for_counts_each_association(self) -> None:
        builder = make_builder()
        builder.fields_for("chapters")
        assert builder.fields_for("reviews").index == 0
        assert builder.fields_for("chapters", index=5).index == 5
        assert builder.fields_for("chapters").index == 1

    def test_fields_for_singular_association_has_no_index(self) -> None:
        child = make_builder().fields_for("author", SimpleNamespace(name="Frank"))
        assert child.index is None
        assert 'name="book[author_attributes][name]"' in child.input("name")

    def test_fields_for_date_parts_carry_index(self) -> None:
        child = make_builder().fields_for("chapters", SimpleNamespace(due_on=date(2024, 5, 1)), index=0)
        html = child.input("due_on", as_="date")
        for position in ("1i", "2i", "3i"):
            assert f'id="book_chapters_attributes_0_due_on_{position}"' in html
            assert f'name="book[chapters_attributes][0][due_on({position})]"' in html
        assert "book[chapters_attributes][due_on(" not in html

    def test_fields_for_with_descriptor(self) -> None:
        chapter = ModelDescriptor(model_name="Chapter")
        child = make_builder().fields_for("chapters", SimpleNamespace(title="One"), descriptor=chapter)
        assert child.descriptor is chapter
        assert child.object_name == "book[chapters_attributes]"


# The End
