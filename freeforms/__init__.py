# -*- coding: utf-8 -*-
"""
freeforms

Semantic form builder: infers input kinds from model metadata and renders
labelled, accessible form markup.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .builder import FormBuilder
from .collection import CollectionNormalizer
from .conf import FreeFormsSettings, configure, current_settings
from .exceptions import ConfigurationError, FreeFormsError, UnknownInputKindError
from .i18n import MappingTranslator, NullTranslator, Translator
from .naming import NameGenerator, association_input_name
from .resolver import AttributeTypeResolver, InputKind
from .schema import FieldDescriptor, ModelDescriptor, Relation, Validation
from .temporal import TemporalDecomposer

__version__ = "0.1.0"

__all__ = [
    "AttributeTypeResolver",
    "CollectionNormalizer",
    "ConfigurationError",
    "FieldDescriptor",
    "FormBuilder",
    "FreeFormsError",
    "FreeFormsSettings",
    "InputKind",
    "MappingTranslator",
    "ModelDescriptor",
    "NameGenerator",
    "NullTranslator",
    "Relation",
    "TemporalDecomposer",
    "Translator",
    "UnknownInputKindError",
    "Validation",
    "association_input_name",
    "configure",
    "current_settings",
]

# The End
