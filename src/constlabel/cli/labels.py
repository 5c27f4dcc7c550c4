# constlabel/cli/labels.py
import json
from pathlib import Path
from typing import Any, Dict, Optional

import typer
import yaml
from rich.console import Console
from rich.table import Table

from constlabel.cli.common import load_target, parse_lookup_value, resolve_settings
from constlabel.core.dispatcher import resolve
from constlabel.core.enums import MethodKind
from constlabel.core.errors import ConstLabelError
from constlabel.core.mixin import ConstantLabels
from constlabel.core.reflection import get_constants, get_methods

console = Console()

FORMATS = ("plain", "json", "yaml")


def _lookup(owner: type, accessor: str, args, settings):
    if settings is None and issubclass(owner, ConstantLabels):
        return owner.const_labels(accessor, *args)
    return resolve(owner, accessor, args, settings=settings)


def _emit_mapping(title: str, data: Dict[Any, Any], fmt: str, key_header: str, value_header: str):
    if fmt == "json":
        typer.echo(json.dumps({str(k): v for k, v in data.items()}, indent=2, default=str))
    elif fmt == "yaml":
        typer.echo(yaml.safe_dump({str(k): v for k, v in data.items()}, sort_keys=False, allow_unicode=True))
    else:
        table = Table(title=title)
        table.add_column(key_header, style="cyan")
        table.add_column(value_header, style="green")
        for key, value in data.items():
            table.add_row(repr(key), str(value))
        console.print(table)


def _check_format(fmt: str) -> str:
    if fmt not in FORMATS:
        raise typer.BadParameter(f"Format must be one of {', '.join(FORMATS)}, got: {fmt}")
    return fmt


def show_labels(
    target: str = typer.Argument(..., help="Class reference, e.g. 'package.module:ClassName'"),
    accessor: str = typer.Argument(..., help="Accessor name, e.g. 'constStatus'"),
    value: Optional[str] = typer.Argument(None, help="Constant value to look up a single label"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file"),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Override the accessor getter prefix"),
    fmt: str = typer.Option("plain", "--format", "-f", help="Output format: plain|json|yaml", callback=_check_format),
):
    """Show the label mapping of a constant group (or one label)."""
    owner = load_target(target)
    settings = resolve_settings(owner, config, prefix)
    try:
        labels = _lookup(owner, accessor, (), settings)
        if value is None:
            _emit_mapping(f"{owner.__qualname__}.{accessor}", labels, fmt, "Value", "Label")
            return
        label = _lookup(owner, accessor, (parse_lookup_value(value, labels),), settings)
    except ConstLabelError as e:
        console.print(f"[bold red]Error:[/bold red] {e}", markup=True, highlight=False)
        raise typer.Exit(1)

    if fmt == "json":
        typer.echo(json.dumps(label))
    else:
        typer.echo(label)


def scan_constants(
    target: str = typer.Argument(..., help="Class reference, e.g. 'package.module:ClassName'"),
    prefix: str = typer.Argument("", help="Constant name prefix, e.g. 'STATUS_'"),
    fmt: str = typer.Option("plain", "--format", "-f", help="Output format: plain|json|yaml", callback=_check_format),
):
    """List the raw constants of a class (optionally by name prefix)."""
    owner = load_target(target)
    constants = get_constants(owner, prefix)
    if not constants:
        console.print(f"[yellow]No constants matching '{prefix}' on {owner.__qualname__}[/yellow]")
        raise typer.Exit(1)
    _emit_mapping(f"{owner.__qualname__} constants", constants, fmt, "Name", "Value")


def list_methods(
    target: str = typer.Argument(..., help="Class reference, e.g. 'package.module:ClassName'"),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Method name prefix"),
    kind: Optional[MethodKind] = typer.Option(None, "--kind", help="static|class|instance"),
):
    """List method names of a class."""
    owner = load_target(target)
    for name in get_methods(owner, prefix=prefix, kind=kind):
        typer.echo(name)
