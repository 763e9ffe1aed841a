"""
Typer-based developer CLI for buildopts.

``buildopts describe`` parses command-line options against one or more
option group classes and prints the resulting registry:

    buildopts describe --group mypkg.options:CoreOptions -- --some_flag=value
"""

import importlib
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from buildopts.core.details import BuildOptionDetails, Label
from buildopts.core.exceptions import BuildOptsError, InvalidLabelError
from buildopts.core.options import OptionGroup, parse_option_groups
from buildopts.core.utils.config import get_config, load_config
from buildopts.core.utils.logger import is_valid_level, log_error, log_info, setup_logging

from .exit_codes import CliExit

console = Console()

app = typer.Typer(
    name="buildopts",
    help="Inspect build option details",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def callback() -> None:
    """Inspect build option details."""


def load_group_class(path: str) -> Type[OptionGroup]:
    """Import ``package.module:ClassName`` and check it is an option group."""
    module_name, _, class_name = path.partition(":")
    if not module_name or not class_name:
        raise CliExit.config_error(f"Expected module:Class, got '{path}'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise CliExit.config_error(f"Cannot import '{module_name}': {e}") from e
    group_class = getattr(module, class_name, None)
    if not isinstance(group_class, type) or not issubclass(group_class, OptionGroup):
        raise CliExit.config_error(f"'{path}' is not an option group class")
    return group_class


def parse_settings(settings: List[str]) -> Dict[Label, Any]:
    parsed: Dict[Label, Any] = {}
    for setting in settings:
        label_text, sep, value = setting.partition("=")
        if not sep:
            raise CliExit.config_error(f"Expected label=value, got '{setting}'")
        try:
            parsed[Label.parse_canonical(label_text)] = value
        except InvalidLabelError as e:
            raise CliExit.config_error(e.message) from e
    return parsed


def _format_value(value: Any) -> str:
    if isinstance(value, tuple):
        return escape("[" + ", ".join(repr(item) for item in value) + "]")
    return escape(repr(value))


def render_details(details: BuildOptionDetails) -> None:
    table = Table(title="Options")
    table.add_column("Option", style="cyan")
    table.add_column("Group")
    table.add_column("Multiple")
    table.add_column("Value", style="green")
    for row in details.describe():
        table.add_row(
            row.name,
            row.group_name,
            "yes" if row.allows_multiple else "no",
            _format_value(row.value),
        )
    console.print(table)

    labels = details.external_labels()
    if labels:
        settings_table = Table(title="External settings")
        settings_table.add_column("Label", style="cyan")
        settings_table.add_column("Value", style="green")
        for label in labels:
            settings_table.add_row(str(label), _format_value(details.get_option_value(label)))
        console.print(settings_table)


@app.command(
    "describe",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def describe(
    ctx: typer.Context,
    groups: List[str] = typer.Option(
        ..., "--group", "-g", help="Option group class as module:Class (repeatable)"
    ),
    settings: Optional[List[str]] = typer.Option(
        None, "--setting", "-s", help="External setting as //pkg:name=value (repeatable)"
    ),
    allow_residue: bool = typer.Option(
        False, "--allow-residue", help="Tolerate positional arguments"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to configuration file"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
) -> None:
    """Parse the remaining arguments against GROUPS and print the registry."""
    if config_file is not None:
        try:
            load_config(str(config_file))
        except ValueError as e:
            raise CliExit.config_error(str(e)) from e
    if log_level is not None and not is_valid_level(log_level):
        raise CliExit.config_error(f"Unknown log level '{log_level}'")
    logging_config = get_config().logging
    setup_logging(log_level or logging_config.level, logging_config.file)

    group_classes = [load_group_class(path) for path in groups]
    external_settings = parse_settings(settings or [])
    try:
        parsed = parse_option_groups(group_classes, ctx.args, allow_residue=allow_residue)
        details = BuildOptionDetails.for_options(parsed, external_settings)
    except BuildOptsError as e:
        log_error("CLI", e.message, context=str(e.context) if e.context else "")
        raise CliExit.error(f"[red]{escape(e.message)}[/red]") from e
    render_details(details)
    log_info("CLI", f"Described {len(details.option_names())} option(s)")


if __name__ == "__main__":
    app()
