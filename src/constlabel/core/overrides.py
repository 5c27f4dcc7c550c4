"""
Per-class label overrides.

A class may declare its overrides as static data::

    constMagicLabels = {"GroupTest": {3: "COMP-lex-LaBEL", 0: "Extra label"}}

or as a zero-argument provider returning the same shape. Providers must be a
staticmethod or classmethod; a plain instance method is rejected when the
class is set up. Which one is expected is set by ``LabelSettings.override_mode``.
"""

import inspect
from collections.abc import Mapping
from typing import Any, Dict, Optional

from constlabel.core.enums import OverrideMode
from constlabel.core.errors import LabelConfigError
from constlabel.core.logging import logger
from constlabel.core.settings import DEFAULT_SETTINGS, LabelSettings

__all__ = [
    "load_override_table",
    "resolve_overrides",
    "validate_override_source",
]

_MISSING = object()


def _raw_source(owner, settings: LabelSettings):
    return inspect.getattr_static(owner, settings.labels_source, _MISSING)


def _takes_no_arguments(source) -> bool:
    try:
        inspect.signature(source).bind()
    except TypeError:
        return False
    except ValueError:
        # No signature available (some builtins); let the call decide
        return True
    return True


def validate_override_source(owner, settings: LabelSettings = DEFAULT_SETTINGS) -> None:
    """
    Check that the override attribute on ``owner`` fits ``settings.override_mode``.

    A missing attribute is fine (no overrides). NONE never fails.

    Raises:
        LabelConfigError: STATIC names a callable, PROVIDER names plain data, or
            a provider (AUTO or PROVIDER) cannot be called without arguments,
            e.g. a plain instance method.
    """
    raw = _raw_source(owner, settings)
    if raw is _MISSING or settings.override_mode is OverrideMode.NONE:
        return

    source = getattr(owner, settings.labels_source)
    name = f"{owner.__qualname__}.{settings.labels_source}"
    if settings.override_mode is OverrideMode.STATIC and callable(source):
        raise LabelConfigError(f"{name} must be static label data, got a callable")
    if settings.override_mode is OverrideMode.PROVIDER and not callable(source):
        raise LabelConfigError(f"{name} must be a zero-argument callable, got {type(source).__name__}")
    if callable(source) and settings.override_mode is not OverrideMode.STATIC and not _takes_no_arguments(source):
        raise LabelConfigError(f"{name} must be callable without arguments (use a staticmethod or classmethod)")


def load_override_table(owner, settings: LabelSettings = DEFAULT_SETTINGS) -> Optional[Any]:
    """Return the raw override table declared on ``owner``, or None."""
    if settings.override_mode is OverrideMode.NONE:
        return None
    if _raw_source(owner, settings) is _MISSING:
        return None

    source = getattr(owner, settings.labels_source)
    if callable(source):
        if settings.override_mode is OverrideMode.STATIC:
            return None
        return source()
    if settings.override_mode is OverrideMode.PROVIDER:
        return None
    return source


def resolve_overrides(
    owner,
    suffix: str,
    derived: Mapping[Any, str],
    settings: LabelSettings = DEFAULT_SETTINGS,
) -> Dict[Any, str]:
    """
    Merge ``owner``'s overrides for group ``suffix`` over ``derived``.

    Override labels replace derived ones and may add new values. When the
    table is not a two-level mapping or has no ``suffix`` entry, ``derived``
    is returned unchanged (as a dict).
    """
    table = load_override_table(owner, settings)
    if not isinstance(table, Mapping):
        return dict(derived)
    group = table.get(suffix)
    if not isinstance(group, Mapping):
        return dict(derived)

    logger.debug("Applying {} label override(s) for {}.{}", len(group), owner.__qualname__, suffix)
    return {**derived, **group}
