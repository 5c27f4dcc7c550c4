"""
Turn constant names into human-readable labels.

    GROUP_TEST_ONEWORD      -> "Oneword"
    GROUP_TEST_TWO_WORDS    -> "Two Words"
    GROUP_TEST_COM_plex_LAbeL -> "COM plex LAbe L"   (mixed case is kept)
"""

import re
from typing import Any, Dict, Mapping

__all__ = [
    "make_label",
    "format_labels",
]

_SEPARATORS = re.compile(r"[-_.]")
_CAMEL_BOUNDARY = re.compile(r"(?<![A-Z\s])[A-Z]")
_ALL_UPPER = re.compile(r"[A-Z\s]*")


def make_label(prefix: str, name: str) -> str:
    """Label for constant ``name`` in the group ``prefix``."""
    stem = name[len(prefix):] if name.startswith(prefix) else name
    label = _SEPARATORS.sub(" ", stem)
    label = _CAMEL_BOUNDARY.sub(r" \g<0>", label)
    # Only fully upper-cased stems are re-cased
    if _ALL_UPPER.fullmatch(label):
        label = label.lower().title()
    return label.strip()


def format_labels(prefix: str, symbols: Mapping[str, Any]) -> Dict[Any, str]:
    """
    Map each symbol's value to the label derived from its name.

    Values become keys; if two symbols share a value the later one wins.
    """
    return {value: make_label(prefix, name) for name, value in symbols.items()}
