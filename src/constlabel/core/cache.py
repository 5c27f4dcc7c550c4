"""
Process-wide memo of finalized label mappings.

Entries are keyed by ``(owner class, group prefix)`` so two classes that use
the same prefix never see each other's labels. Within that slot a mapping is
stored per *variant*: the accessor suffix and the LabelSettings that produced
it, since both decide which overrides were merged in. Constants do not change
at runtime, so entries are never expired.
"""

import threading
from typing import Any, Dict, Hashable, Optional, Tuple

__all__ = [
    "GroupCache",
    "GROUP_CACHE",
]


class GroupCache:
    def __init__(self):
        self._entries: Dict[Tuple[type, str], Dict[Hashable, Dict[Any, str]]] = {}
        self._lock = threading.Lock()

    def get(self, owner: type, prefix: str, variant: Hashable = None) -> Optional[Dict[Any, str]]:
        return self._entries.get((owner, prefix), {}).get(variant)

    def put(self, owner: type, prefix: str, mapping: Dict[Any, str], variant: Hashable = None) -> Dict[Any, str]:
        """Store ``mapping`` unless an entry exists; return the stored mapping."""
        with self._lock:
            return self._entries.setdefault((owner, prefix), {}).setdefault(variant, mapping)

    def discard(self, owner: type) -> int:
        """Drop every entry of ``owner`` and its subclasses. Returns the number of mappings removed."""
        with self._lock:
            keys = [key for key in self._entries if issubclass(key[0], owner)]
            removed = sum(len(self._entries.pop(key)) for key in keys)
        return removed

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: Tuple[type, str]) -> bool:
        """True if any variant of ``(owner, prefix)`` is cached."""
        return bool(self._entries.get(key))

    def __len__(self) -> int:
        return sum(len(variants) for variants in self._entries.values())


GROUP_CACHE = GroupCache()
