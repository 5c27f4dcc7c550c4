"""
Convention-based accessor dispatch.

An accessor is the getter prefix followed by a group name in CamelCase::

    resolve(Order, "constStatus")        -> {0: "Deleted", 100: "Active"}
    resolve(Order, "constStatus", [100]) -> "Active"

The group prefix is derived from the suffix (``Status`` -> ``STATUS_``), the
matching constants are scanned and formatted, and class overrides are merged
in. Full mappings are cached per class, group prefix, accessor suffix and settings.

Accessors that do not match the convention, or whose group is empty, are
handed to an optional ``fallback(accessor, args)``. If it is absent or also
misses, UndefinedOperation is raised. Other errors from the fallback
propagate untouched.
"""

import inspect
import re
from typing import Any, Callable, Dict, Optional, Sequence, Union

from constlabel.core.cache import GROUP_CACHE, GroupCache
from constlabel.core.errors import (
    ConventionMiss,
    InvalidLookupValue,
    NoConstantsFound,
    UndefinedOperation,
    UnrecognizedAccessor,
)
from constlabel.core.formatter import format_labels
from constlabel.core.logging import logger
from constlabel.core.overrides import resolve_overrides
from constlabel.core.reflection import get_constants
from constlabel.core.settings import DEFAULT_SETTINGS, LabelSettings

__all__ = [
    "Fallback",
    "group_prefix",
    "split_accessor",
    "resolve",
]

Fallback = Callable[[str, Sequence[Any]], Any]

_WORD_START = re.compile(r"(?<![A-Z])[A-Z]")


def group_prefix(suffix: str) -> str:
    """``GroupTest`` -> ``GROUP_TEST_``."""
    return _WORD_START.sub(r"_\g<0>", suffix).upper().strip("_") + "_"


def split_accessor(owner, accessor: str, settings: LabelSettings = DEFAULT_SETTINGS):
    """
    Return ``(suffix, group prefix)`` for ``accessor``.

    Raises:
        UnrecognizedAccessor: If ``accessor`` lacks the getter prefix.
    """
    if not accessor.startswith(settings.getter_prefix):
        raise UnrecognizedAccessor(owner, accessor, settings.getter_prefix)
    suffix = accessor[len(settings.getter_prefix):]
    return suffix, group_prefix(suffix)


def _build_labels(owner, accessor: str, suffix: str, prefix: str, settings: LabelSettings) -> Dict[Any, str]:
    symbols = get_constants(owner, prefix)
    if not symbols:
        raise NoConstantsFound(owner, accessor, prefix)
    logger.debug("Scanned {} constant(s) with prefix {} on {}", len(symbols), prefix, owner.__qualname__)
    return resolve_overrides(owner, suffix, format_labels(prefix, symbols), settings)


def _resolve_convention(owner, accessor: str, args: Sequence[Any], settings: LabelSettings, cache: GroupCache):
    suffix, prefix = split_accessor(owner, accessor, settings)

    if not args:
        # Overrides are looked up by suffix under these settings; both shape the mapping
        variant = (suffix, settings)
        labels = cache.get(owner, prefix, variant)
        if labels is not None:
            logger.debug("Cache hit for {}/{}", owner.__qualname__, prefix)
        else:
            labels = cache.put(owner, prefix, _build_labels(owner, accessor, suffix, prefix, settings), variant)
        return dict(labels)

    labels = _build_labels(owner, accessor, suffix, prefix, settings)
    value = args[0]
    try:
        return labels[value]
    except (KeyError, TypeError):
        raise InvalidLookupValue(owner, accessor, value) from None


def resolve(
    owner,
    accessor: str,
    args: Sequence[Any] = (),
    *,
    settings: Optional[LabelSettings] = None,
    fallback: Optional[Fallback] = None,
    cache: GroupCache = GROUP_CACHE,
) -> Union[Dict[Any, str], str, Any]:
    """
    Resolve ``accessor`` on ``owner`` to a label mapping or a single label.

    Args:
        owner: Class (or instance) declaring the constants.
        accessor: Accessor name, e.g. ``"constGroupTest"``.
        args: Empty for the full mapping, or one constant value for its label.
        settings: Naming/override settings; defaults to DEFAULT_SETTINGS.
        fallback: Called as ``fallback(accessor, args)`` when the convention misses.
        cache: Cache for full mappings.

    Returns:
        dict: value -> label, when ``args`` is empty.
        str: the label of ``args[0]``.
        Anything the fallback returns.

    Raises:
        InvalidLookupValue: ``args[0]`` is not a value of the group.
        UndefinedOperation: The convention and the fallback both missed.
        TypeError: More than one argument was given.
    """
    owner = owner if inspect.isclass(owner) else type(owner)
    settings = settings or DEFAULT_SETTINGS
    args = tuple(args)
    if len(args) > 1:
        raise TypeError(f"{accessor}() takes at most 1 argument ({len(args)} given)")

    try:
        return _resolve_convention(owner, accessor, args, settings, cache)
    except ConventionMiss as miss:
        logger.debug("{}; trying fallback", miss)
        if fallback is None:
            raise UndefinedOperation(owner, accessor) from miss

    try:
        return fallback(accessor, args)
    except (ConventionMiss, UndefinedOperation) as miss:
        raise UndefinedOperation(owner, accessor) from miss
