"""
Base class giving a type convention-based label accessors.

    class Order(ConstantLabels):
        STATUS_DELETED = 0
        STATUS_ACTIVE = 100

        constMagicLabels = {"Status": {100: "Live"}}

    Order.const_labels("constStatus")        # {0: "Deleted", 100: "Live"}
    Order().const_labels("constStatus", 0)   # "Deleted"

Accessors the convention cannot resolve are passed on to
``const_label_fallback`` (if set) and then to the next ``const_labels``
provider in the MRO.
"""

from typing import Any, Callable, ClassVar, Optional, Sequence

from constlabel.core.cache import GROUP_CACHE
from constlabel.core.dispatcher import resolve
from constlabel.core.errors import ConventionMiss, UndefinedOperation
from constlabel.core.logging import logger
from constlabel.core.overrides import validate_override_source
from constlabel.core.settings import DEFAULT_SETTINGS, LabelSettings

__all__ = [
    "ConstantLabels",
]


class ConstantLabels:
    const_label_settings: ClassVar[LabelSettings] = DEFAULT_SETTINGS
    const_label_fallback: ClassVar[Optional[Callable[[str, Sequence[Any]], Any]]] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        validate_override_source(cls, cls.const_label_settings)

    @classmethod
    def const_labels(cls, accessor: str, *args):
        """Return the label mapping for ``accessor``, or the label of ``args[0]``."""
        return resolve(
            cls,
            accessor,
            args,
            settings=cls.const_label_settings,
            fallback=cls._const_label_fallback_chain(),
        )

    @classmethod
    def configure_labels(cls, **changes) -> LabelSettings:
        """
        Install a validated copy of this class's settings with ``changes`` applied.

        Cached labels of this class and of its subclasses are dropped.
        """
        settings = cls.const_label_settings.evolve(**changes)
        validate_override_source(cls, settings)
        cls.const_label_settings = settings
        dropped = GROUP_CACHE.discard(cls)
        logger.debug("Reconfigured {} labels ({} cached group(s) dropped)", cls.__qualname__, dropped)
        return settings

    @classmethod
    def _const_label_fallback_chain(cls):
        handlers = []
        if cls.const_label_fallback is not None:
            # Class-level access: plain functions and staticmethods come back unbound
            handlers.append(cls.const_label_fallback)
        parent = getattr(super(ConstantLabels, cls), "const_labels", None)
        if parent is not None:
            handlers.append(lambda accessor, args: parent(accessor, *args))
        if not handlers:
            return None

        def chain(accessor, args):
            for handler in handlers:
                try:
                    return handler(accessor, args)
                except (ConventionMiss, UndefinedOperation):
                    continue
            raise UndefinedOperation(cls, accessor)

        return chain
