# constlabel/core/enums.py

from enum import Enum

class OverrideMode(str, Enum):
    """Where a class's label overrides come from."""
    AUTO = "auto"          # Probe the attribute: static data first, else call it
    STATIC = "static"      # Plain mapping declared on the class
    PROVIDER = "provider"  # Zero-argument callable returning the mapping
    NONE = "none"          # Overrides disabled

class MethodKind(str, Enum):
    STATIC = "static"
    CLASS = "class"
    INSTANCE = "instance"

__all__ = [
    "OverrideMode",
    "MethodKind",
]
