# src/constlabel/cli/main.py
from pathlib import Path
from typing import Optional

import typer

from constlabel.cli.labels import list_methods, scan_constants, show_labels
from constlabel.core.logging import setup_console, setup_logfile
from constlabel.core.version import __version__

app = typer.Typer(
    help="constlabel: human-readable labels for class constant groups",
    context_settings={"help_option_names": ["-h", "--help"]}
)

app.command("show")(show_labels)
app.command("scan")(scan_constants)
app.command("methods")(list_methods)


def _version_callback(value: bool):
    if value:
        typer.echo(f"constlabel version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit", is_eager=True, callback=_version_callback
    ),
):
    """
    constlabel: inspect constant groups and their labels.

    Use 'constlabel COMMAND --help' to see options for specific commands.
    """
    setup_console("DEBUG" if verbose else "WARNING")
    if log_file is not None:
        setup_logfile(str(log_file), level="DEBUG" if verbose else "INFO")

    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

if __name__ == "__main__":
    app()
