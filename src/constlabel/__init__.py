"""
constlabel: human-readable labels for groups of class constants.

Exports:
    - ConstantLabels: Base class adding convention-based label accessors.
    - resolve: Resolve an accessor name on any class.
    - LabelSettings, OverrideMode, load_settings: Configuration.
    - format_labels, make_label: Name -> label formatting.
    - get_constants, get_methods: Class reflection helpers.
    - Error classes from constlabel.core.errors.
"""

from constlabel.core.logging import logger
from constlabel.core.version import __version__
from constlabel.core.enums import MethodKind, OverrideMode
from constlabel.core.errors import (
    ConstLabelError,
    ConventionMiss,
    InvalidLookupValue,
    LabelConfigError,
    NoConstantsFound,
    UndefinedOperation,
    UnrecognizedAccessor,
)
from constlabel.core.settings import DEFAULT_SETTINGS, LabelSettings, load_settings
from constlabel.core.reflection import get_constants, get_methods, list_constants
from constlabel.core.formatter import format_labels, make_label
from constlabel.core.cache import GROUP_CACHE, GroupCache
from constlabel.core.dispatcher import resolve
from constlabel.core.mixin import ConstantLabels

# Library default: silent until the application opts in
logger.disable("constlabel")

__all__ = [
    "__version__",
    "ConstantLabels",
    "resolve",
    "LabelSettings",
    "DEFAULT_SETTINGS",
    "OverrideMode",
    "MethodKind",
    "load_settings",
    "format_labels",
    "make_label",
    "get_constants",
    "get_methods",
    "list_constants",
    "GroupCache",
    "GROUP_CACHE",
    "ConstLabelError",
    "ConventionMiss",
    "UnrecognizedAccessor",
    "NoConstantsFound",
    "InvalidLookupValue",
    "UndefinedOperation",
    "LabelConfigError",
]
