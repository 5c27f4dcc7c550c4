"""
Reflection helpers for classes: declared constants, methods and value types.

Exports:
    - list_constants: All constant symbols of a class (inherited ones included).
    - get_constants: Constant symbols whose name starts with a prefix.
    - get_methods: Method names of a class, filtered by prefix and kind.
    - detect_var_type: Type name of a value, optionally mapped to an alias.
    - coerce_value: Convert a string into the type of a reference value.
"""

import inspect
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from constlabel.core.enums import MethodKind
from constlabel.core.settings import DEFAULT_SETTINGS, LabelSettings

__all__ = [
    "list_constants",
    "get_constants",
    "get_methods",
    "detect_var_type",
    "coerce_value",
]

# Label configuration read from owning classes, never constants themselves
CONFIG_ATTRIBUTES = frozenset({"const_label_settings", "const_label_fallback"})

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


def _as_class(owner) -> type:
    return owner if inspect.isclass(owner) else type(owner)


def _own_classes(owner) -> list:
    """MRO of ``owner`` from the most basic class down, without ``object``."""
    return [klass for klass in reversed(_as_class(owner).__mro__) if klass is not object]


def _config_names(owner) -> frozenset:
    settings = getattr(_as_class(owner), "const_label_settings", None)
    if not isinstance(settings, LabelSettings):
        settings = DEFAULT_SETTINGS
    return CONFIG_ATTRIBUTES | {settings.labels_source}


def _is_constant(value) -> bool:
    if isinstance(value, (property, classmethod, staticmethod)):
        return False
    return not (
        inspect.isroutine(value)
        or inspect.isclass(value)
        or inspect.ismodule(value)
        or inspect.isdatadescriptor(value)
    )


def list_constants(owner) -> Dict[str, Any]:
    """
    Return every public constant declared on ``owner`` or its bases.

    A constant is a class attribute whose name does not start with ``_`` and
    whose value is plain data (not a routine, descriptor, class or module).
    Label configuration (settings, fallback and the override source named by
    the class settings) is skipped. Declaration order is kept; a subclass
    redefinition replaces the base value.
    """
    skipped = _config_names(owner)
    constants: Dict[str, Any] = {}
    for klass in _own_classes(owner):
        for name, value in vars(klass).items():
            if name.startswith("_") or name in skipped:
                continue
            if _is_constant(value):
                constants[name] = value
            else:
                constants.pop(name, None)
    return constants


def get_constants(owner, prefix: Optional[str] = "") -> Dict[str, Any]:
    """
    Return constants of ``owner`` whose name starts with ``prefix`` (case-sensitive).

    Example:
        >>> class Model:
        ...     STATUS_DELETED = 0
        ...     STATUS_ACTIVE = 100
        >>> get_constants(Model, "STATUS_")
        {'STATUS_DELETED': 0, 'STATUS_ACTIVE': 100}

    Returns an empty dict when nothing matches.
    """
    constants = list_constants(owner)
    if not prefix:
        return constants
    return {name: value for name, value in constants.items() if name.startswith(prefix)}


def _method_kind(value) -> Optional[MethodKind]:
    if isinstance(value, staticmethod):
        return MethodKind.STATIC
    if isinstance(value, classmethod):
        return MethodKind.CLASS
    if inspect.isfunction(value):
        return MethodKind.INSTANCE
    return None


def get_methods(
    owner,
    prefix: Optional[str] = None,
    kind: Optional[Union[MethodKind, str]] = None,
) -> List[str]:
    """
    Return method names of ``owner`` (inherited ones included).

    Args:
        owner: Class (or instance) to inspect.
        prefix: Keep only names starting with this string.
        kind: Keep only static, class or instance methods.
    """
    wanted = MethodKind(kind) if kind is not None else None
    methods: Dict[str, MethodKind] = {}
    for klass in _own_classes(owner):
        for name, value in vars(klass).items():
            method_kind = _method_kind(value)
            if method_kind is None:
                methods.pop(name, None)
            else:
                methods[name] = method_kind

    return [
        name for name, method_kind in methods.items()
        if (prefix is None or name.startswith(prefix))
        and (wanted is None or method_kind is wanted)
    ]


def detect_var_type(var, allowed=None, default=None):
    """
    Return the type name of ``var``, optionally mapped through ``allowed``.

    ``allowed`` maps aliases to capitalized type names (a sequence is treated
    as index -> name). When given, the alias whose name matches is returned;
    failing that ``default`` is returned if set, else the plain type name.
    """
    type_name = type(var).__name__
    if allowed:
        wanted = type_name[:1].upper() + type_name[1:]
        items = allowed.items() if isinstance(allowed, Mapping) else enumerate(allowed)
        for alias, name in items:
            if name == wanted:
                return alias
        if default is not None:
            return default
    return type_name


def coerce_value(raw: str, like) -> Any:
    """
    Convert ``raw`` to the type of ``like`` (bool, int, float; anything else stays str).

    Raises:
        ValueError: If ``raw`` cannot be converted.
    """
    kind = detect_var_type(like, {"bool": "Bool", "int": "Int", "float": "Float"}, default="str")
    if kind == "bool":
        lowered = raw.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        raise ValueError(f"Cannot interpret {raw!r} as bool")
    if kind == "int":
        return int(raw)
    if kind == "float":
        return float(raw)
    return raw
