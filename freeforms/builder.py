# -*- coding: utf-8 -*-
"""
builder

Form builder rendering one labelled list item per attribute.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Mapping

from markupsafe import Markup, escape

from .adapters.base import BaseAdapter
from .collection import CollectionNormalizer, Option
from .conf import FreeFormsSettings, current_settings
from .controls import FormControls
from .html import content_tag, join_markup
from .i18n import NullTranslator, Translator
from .inputs import InputContext, registry
from .naming import HINT_SCOPE, NameGenerator, association_input_name
from .resolver import AttributeTypeResolver, InputKind
from .schema.descriptors import FieldDescriptor, ModelDescriptor, Relation, Validation
from .temporal import TemporalDecomposer

logger = logging.getLogger(__name__)

# Options consumed by the builder and never rendered as attributes.
BUILDER_OPTIONS = frozenset({
    "value_method", "label_method", "collection", "required", "label", "as",
    "hint", "input_html", "label_html", "wrapper_html", "value_as_class",
})

LABEL_OPTIONS = ("label", "required", "index")

_FOREIGN_KEY_SUFFIX_RE = re.compile(r"_id$")


class FormBuilder:
    """
    Render semantic form inputs for one bound object.

    Column metadata comes from ``descriptor`` or, when an ``adapter`` is
    given, from the adapter's introspection of ``type(obj)``. Association
    choices must be loaded with :meth:`prefetch` (or passed as ``records``)
    before rendering.
    """

    def __init__(
        self,
        object_name: str,
        obj: Any = None,
        *,
        descriptor: ModelDescriptor | None = None,
        adapter: BaseAdapter | None = None,
        settings: FreeFormsSettings | None = None,
        translator: Translator | None = None,
        index: Any = None,
        action: str | None = None,
        records: Mapping[str, Iterable[Any]] | None = None,
    ) -> None:
        self.object_name = object_name
        self.object = obj
        self.adapter = adapter
        if descriptor is None and adapter is not None and obj is not None:
            descriptor = adapter.get_model_descriptor(type(obj))
        self.descriptor = descriptor
        self.settings = settings or current_settings()
        self.translator = translator or NullTranslator()
        self.index = index
        self.action = action
        self.records: dict[str, list[Any]] = {k: list(v) for k, v in (records or {}).items()}
        self.child_indexes: dict[str, int] = {}

        self.names = NameGenerator(object_name, index=index, descriptor=descriptor)
        self.controls = FormControls(self.names, obj, translator=self.translator)
        self.resolver = AttributeTypeResolver(self.settings.file_methods)
        self.collections = CollectionNormalizer(
            label_methods=self.settings.collection_label_methods,
            value_method=self.settings.collection_value_method,
            translator=self.translator,
        )
        self.temporal = TemporalDecomposer(self.names, self.controls, self.translator)

    # === Metadata ===
    def column_for(self, method: str) -> FieldDescriptor | None:
        return self.descriptor.column_for(method) if self.descriptor is not None else None

    def reflection_for(self, method: str) -> Relation | None:
        return self.descriptor.reflection_for(method) if self.descriptor is not None else None

    def association_input_name(self, method: str) -> str:
        return association_input_name(method, self.reflection_for(method))

    @property
    def persisted(self) -> bool:
        return bool(getattr(self.object, "_saved_in_db", False))

    @property
    def current_action(self) -> str:
        if self.action:
            return self.action
        return "edit" if self.persisted else "new"

    # === Public API ===
    def input(self, method: str, options: Mapping[str, Any] | None = None, **kwargs: Any) -> Markup:
        """Render ``method`` as ``<li>`` with label, control, hints and errors.

        ``as_`` is accepted as a keyword alias of the ``as`` option.
        """
        options = self._normalize_options(options, kwargs)
        if "required" not in options:
            options["required"] = self.method_required(method)
        kind = self.resolve_kind(method, options.get("as"))
        options["as"] = kind

        wrapper_html = self._wrapper_html(method, kind, options)

        label_html = options.get("label_html")
        input_id = (options.get("input_html") or {}).get("id")
        if input_id:
            label_html = dict(label_html or {})
            label_html.setdefault("for", input_id)
            options["label_html"] = label_html

        parts = list(self.settings.inline_order)
        if kind is InputKind.HIDDEN and "errors" in parts:
            parts.remove("errors")
        rendered = [self._inline_part(part, method, kind, options) for part in parts]
        return content_tag("li", join_markup(rendered, "\n"), wrapper_html)

    def inputs(self, *methods: str, name: str | None = None, **options: Any) -> Markup:
        """Render ``methods`` inside ``<fieldset class="inputs">``."""
        items = [self.input(method, dict(options)) for method in methods]
        legend = content_tag("legend", content_tag("span", name)) if name else None
        return content_tag(
            "fieldset",
            [legend, content_tag("ol", join_markup(items, "\n"))],
            {"class": "inputs"},
        )

    def fields_for(
        self,
        association: str,
        obj: Any = None,
        *,
        index: Any = None,
        descriptor: ModelDescriptor | None = None,
    ) -> "FormBuilder":
        """Return a builder for a nested record submitted as ``<association>_attributes``.

        Without ``index`` the children of a multi-valued (or undeclared)
        association are numbered from 0 in the order they are requested;
        singular associations get no index.
        """
        if index is None:
            index = self.next_child_index(association)
        return FormBuilder(
            f"{self.object_name}[{association}_attributes]",
            obj,
            descriptor=descriptor,
            adapter=self.adapter,
            settings=self.settings,
            translator=self.translator,
            index=index,
            action=self.action,
        )

    def next_child_index(self, association: str) -> int | None:
        relation = self.reflection_for(association)
        if relation is not None and not relation.is_many:
            return None
        index = self.child_indexes.get(association, 0)
        self.child_indexes[association] = index + 1
        return index

    async def prefetch(self, *methods: str) -> None:
        """Load the choices of every association (or of ``methods``).

        For persisted objects the ids currently linked through multi-valued
        associations are stored as ``<singular>_ids`` on the object.

        This coroutine must be awaited.
        """
        if self.adapter is None or self.descriptor is None:
            logger.debug("Nothing to prefetch for %s", self.object_name)
            return
        for relation in self.descriptor.relations:
            if methods and relation.name not in methods:
                continue
            model = self.adapter.get_model(relation.target)
            if model is None:
                logger.warning("Model %s for association %s is not registered", relation.target, relation.name)
                continue
            self.records[relation.name] = await self.adapter.fetch_all(model)
            if relation.is_many and self.persisted:
                ids = await self.adapter.related_ids(self.object, relation.name)
                setattr(self.object, association_input_name(relation.name, relation), ids)

    # === Kind resolution ===
    def resolve_kind(self, method: str, override: Any = None) -> InputKind:
        column = self.column_for(method)
        relation = self.reflection_for(method)
        value = self.controls.value_of(method) if column is None and relation is None else None
        return self.resolver.resolve(
            method,
            column=column,
            relation=relation,
            value=value,
            override=override,
        )

    def method_required(self, method: str) -> bool:
        """Return whether ``method`` must be filled in.

        Presence validations decide when the descriptor declares any;
        otherwise ``all_fields_required_by_default`` applies.
        """
        if self.descriptor is None or self.descriptor.validations is None:
            return self.settings.all_fields_required_by_default
        attribute = _FOREIGN_KEY_SUFFIX_RE.sub("", method)
        return any(
            self._validation_applies(validation)
            for validation in self.descriptor.validations_for(attribute)
            if validation.kind == "presence"
        )

    def _validation_applies(self, validation: Validation) -> bool:
        if not validation.conditional:
            return True
        if validation.if_ is not None:
            return bool(self._evaluate_condition(validation.if_))
        return not self._evaluate_condition(validation.unless)

    def _evaluate_condition(self, condition: Any) -> Any:
        if callable(condition):
            return condition(self.object)
        if isinstance(condition, str) and hasattr(self.object, condition):
            attr = getattr(self.object, condition)
            return attr() if callable(attr) else attr
        return condition

    # === Inline parts ===
    def _inline_part(self, part: str, method: str, kind: InputKind, options: dict[str, Any]) -> Markup:
        if part == "input":
            return self.inline_input_for(method, kind, options)
        if part == "hints":
            return self.inline_hints_for(method, options)
        return self.inline_errors_for(method, options)

    def inline_input_for(self, method: str, kind: InputKind, options: dict[str, Any]) -> Markup:
        ctx = InputContext(
            builder=self,
            method=method,
            kind=kind,
            column=self.column_for(method),
            relation=self.reflection_for(method),
        )
        strategy = registry.get(kind)(ctx)
        return strategy.render(options)

    def inline_hints_for(self, method: str, options: Mapping[str, Any]) -> Markup:
        hint = options.get("hint")
        if hint is None and self.settings.i18n_lookups_by_default:
            hint = self.names.localized_string(method, HINT_SCOPE, translator=self.translator)
        if not hint:
            return Markup("")
        return content_tag("p", hint, {"class": "inline-hints"})

    def errors_on(self, method: str) -> list[str]:
        errors = getattr(self.object, "errors", None)
        if errors is None:
            return []
        messages = errors.get(method) if hasattr(errors, "get") else None
        if not messages:
            return []
        if isinstance(messages, str):
            return [messages]
        return [str(message) for message in messages]

    def inline_errors_for(self, method: str, options: Mapping[str, Any] | None = None) -> Markup:
        errors = self.errors_on(method)
        mode = self.settings.inline_errors
        if not errors or mode == "none":
            return Markup("")
        if mode == "list":
            return content_tag("ul", [content_tag("li", e) for e in errors], {"class": "errors"})
        text = errors[0] if mode == "first" else to_sentence(errors)
        return content_tag("p", text, {"class": "inline-errors"})

    # === Labels ===
    def label(self, method: str, options: Mapping[str, Any] | None = None) -> Markup:
        """Render the ``<label>`` of ``method``; ``label=False`` renders nothing.

        ``as_span`` renders a ``<span>`` for legends, ``input_name`` targets
        another control and ``label_prefix_for_nested_input`` places markup
        before the text.
        """
        options = dict(options or {})
        text = options.pop("label", None)
        if text is False:
            return Markup("")
        if text is None:
            text = self.names.label_text(
                method,
                translator=self.translator,
                lookups=self.settings.i18n_lookups_by_default,
                label_str_method=self.settings.label_str_method,
                action=self.current_action,
            )
        text = escape(text) + self.required_or_optional_string(options.pop("required", False))
        nested = options.pop("label_prefix_for_nested_input", None)
        if nested is not None:
            text = Markup("{0} {1}").format(nested, text)
        input_name = options.pop("input_name", None) or method
        index_options = {"index": options.pop("index")} if "index" in options else None
        if options.pop("as_span", False):
            return content_tag("span", text)
        attrs = {"for": self.names.control_id(input_name, index_options)}
        attrs.update(options)
        return content_tag("label", text, attrs)

    def required_or_optional_string(self, required: bool) -> Markup:
        marker = self.settings.required_string if required else self.settings.optional_string
        return Markup(marker)

    def options_for_label(self, options: Mapping[str, Any]) -> dict[str, Any]:
        """Pick the label options and merge ``label_html`` into them."""
        picked = {key: options[key] for key in LABEL_OPTIONS if key in options}
        picked.update(options.get("label_html") or {})
        return picked

    # === Strategy helpers ===
    def strip_builder_options(self, options: Mapping[str, Any]) -> dict[str, Any]:
        return {k: v for k, v in options.items() if k not in BUILDER_OPTIONS}

    def default_string_options(self, method: str, kind: InputKind) -> dict[str, Any]:
        """Return ``size`` and, for limited columns, ``maxlength``."""
        size = self.settings.default_text_field_size
        column = self.column_for(method)
        if kind is InputKind.NUMERIC or column is None or column.limit is None:
            return {"size": size}
        return {"maxlength": column.limit, "size": min(column.limit, size)}

    def set_include_blank(self, options: dict[str, Any]) -> dict[str, Any]:
        if "include_blank" not in options and "prompt" not in options:
            options["include_blank"] = self.settings.include_blank_for_select_by_default
        return options

    def find_collection_for_column(self, method: str, options: dict[str, Any]) -> list[Option]:
        relation = self.reflection_for(method)
        records = None
        if relation is not None and options.get("collection") is None:
            records = self.records.get(method)
            if records is None:
                logger.warning(
                    "Records for association %s of %s were not prefetched; rendering no choices",
                    method,
                    self.object_name,
                )
                records = []
        return self.collections.normalize(options, relation=relation, records=records)

    def field_set_and_list_wrapping_for_method(
        self,
        method: str,
        options: Mapping[str, Any],
        contents: Iterable[Markup],
    ) -> Markup:
        """Wrap ``contents`` in ``<fieldset>`` with a legend and an ``<ol>``."""
        legend_label = self.label(method, {**self.options_for_label(options), "as_span": True})
        legend = content_tag("legend", legend_label) if legend_label else None
        return content_tag("fieldset", [legend, content_tag("ol", join_markup(contents))])

    # === Internals ===
    @staticmethod
    def _normalize_options(options: Mapping[str, Any] | None, kwargs: Mapping[str, Any]) -> dict[str, Any]:
        merged = dict(options or {})
        merged.update(kwargs)
        if "as_" in merged:
            merged["as"] = merged.pop("as_")
        return merged

    def _wrapper_html(self, method: str, kind: InputKind, options: dict[str, Any]) -> dict[str, Any]:
        wrapper_html = dict(options.pop("wrapper_html", None) or {})
        classes = [kind.value, "required" if options["required"] else "optional"]
        if self.errors_on(method):
            classes.append("error")
        classes.append(method)
        extra = wrapper_html.get("class")
        if isinstance(extra, (list, tuple)):
            classes.extend(str(c) for c in extra)
        elif extra:
            classes.append(str(extra))
        wrapper_html["class"] = " ".join(classes)
        wrapper_html.setdefault("id", self.names.generate_html_id(method, options=options))
        return wrapper_html


def to_sentence(words: list[str]) -> str:
    """Join ``["a", "b", "c"]`` as ``"a, b and c"``."""
    if len(words) < 2:
        return "".join(words)
    return f"{', '.join(words[:-1])} and {words[-1]}"


__all__ = ["FormBuilder", "to_sentence"]


# The End
