"""
Error kinds raised by the label resolution pipeline.

Exports:
    - ConstLabelError: Base class for every error raised here.
    - ConventionMiss: Recoverable "no such convention" signal; triggers the fallback chain.
    - UnrecognizedAccessor: Accessor name does not start with the getter prefix.
    - NoConstantsFound: Accessor matched but its group holds no constants.
    - InvalidLookupValue: Single-value lookup for a value outside the group.
    - UndefinedOperation: Nothing (not even the fallback chain) resolved the accessor.
    - LabelConfigError: Invalid settings or override source on a class.
"""

__all__ = [
    "ConstLabelError",
    "ConventionMiss",
    "UnrecognizedAccessor",
    "NoConstantsFound",
    "InvalidLookupValue",
    "UndefinedOperation",
    "LabelConfigError",
]


def _owner_name(owner) -> str:
    return getattr(owner, "__qualname__", None) or getattr(owner, "__name__", None) or repr(owner)


class ConstLabelError(Exception):
    """Base class for constlabel errors."""


class ConventionMiss(ConstLabelError):
    """The accessor could not be resolved by the naming convention."""

    def __init__(self, owner, accessor: str, message: str):
        super().__init__(message)
        self.owner = owner
        self.accessor = accessor


class UnrecognizedAccessor(ConventionMiss):
    def __init__(self, owner, accessor: str, prefix: str):
        super().__init__(
            owner,
            accessor,
            f"Invalid prefix (needed '{prefix}') while calling {_owner_name(owner)}.{accessor}()",
        )
        self.prefix = prefix


class NoConstantsFound(ConventionMiss):
    def __init__(self, owner, accessor: str, group_prefix: str):
        super().__init__(
            owner,
            accessor,
            f"No constants found by prefix '{group_prefix}' while calling {_owner_name(owner)}.{accessor}()",
        )
        self.group_prefix = group_prefix


class InvalidLookupValue(ConstLabelError, LookupError):
    """Raised for a single-value lookup whose value is not in the group. Never forwarded."""

    def __init__(self, owner, accessor: str, value):
        super().__init__(
            f"Invalid argument {value!r} while calling {_owner_name(owner)}.{accessor}({value!r})"
        )
        self.owner = owner
        self.accessor = accessor
        self.value = value


class UndefinedOperation(ConstLabelError, AttributeError):
    """Terminal: neither the convention nor any fallback handled the accessor."""

    def __init__(self, owner, accessor: str):
        super().__init__(f"Call to undefined operation {_owner_name(owner)}.{accessor}()")
        self.owner = owner
        self.accessor = accessor


class LabelConfigError(ConstLabelError, ValueError):
    """Settings or override source on a class are invalid."""
