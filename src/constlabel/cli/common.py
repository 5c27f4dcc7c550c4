"""
Common CLI helpers shared across constlabel commands.
"""
import importlib
from pathlib import Path
from typing import Any, Mapping, Optional

import typer

from constlabel.core.errors import LabelConfigError
from constlabel.core.mixin import ConstantLabels
from constlabel.core.reflection import coerce_value
from constlabel.core.settings import LabelSettings, load_settings


def load_target(target: str) -> type:
    """
    Import a class from a ``package.module:ClassName`` reference.

    Nested classes may be given with dots after the colon (``mod:Outer.Inner``).

    Raises:
        typer.BadParameter: If the reference is malformed or cannot be imported.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise typer.BadParameter(f"Target must look like 'package.module:ClassName', got: {target}")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(f"Cannot import module '{module_name}': {e}")
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise typer.BadParameter(f"'{attr_path}' not found in module '{module_name}'")
    if not isinstance(obj, type):
        raise typer.BadParameter(f"Target '{target}' is not a class")
    return obj


def resolve_settings(owner: type, config: Optional[Path], prefix: Optional[str]) -> Optional[LabelSettings]:
    """
    Settings to use for ``owner``, or None to keep the class's own.

    A config file replaces the class settings; ``--prefix`` changes only the getter prefix.
    """
    if config is None and prefix is None:
        return None
    try:
        if config is not None:
            return load_settings(config, {"getter_prefix": prefix})
        base = owner.const_label_settings if issubclass(owner, ConstantLabels) else LabelSettings()
        return base.evolve(getter_prefix=prefix)
    except (FileNotFoundError, LabelConfigError) as e:
        raise typer.BadParameter(str(e))


def parse_lookup_value(raw: str, labels: Mapping[Any, str]) -> Any:
    """Convert a CLI string to the key of ``labels`` it names, if any; else return it unchanged."""
    for key in labels:
        try:
            value = coerce_value(raw, key)
        except ValueError:
            continue
        if value in labels:
            return value
    return raw
