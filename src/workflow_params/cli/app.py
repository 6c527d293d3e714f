"""
Workflow parameters CLI: validate parameter files and list parameter types.

The check command drives the same store the editor uses: parameters are
loaded, then every parameter is re-submitted through update_parameter so the
store derives its findings exactly as it would for an interactive edit.
"""

from __future__ import annotations

import typer
from rich.console import Console

from workflow_params.cli.formatters import build_findings_table, build_types_table
from workflow_params.cli.load_helpers import load_or_exit
from workflow_params.cli.paths import parameters_path
from workflow_params.core.messages import MessageCatalog
from workflow_params.core.models import ParameterPatch, ParameterUpdateEvent
from workflow_params.core.store import ParameterStore
from workflow_params.io.loaders import load_message_catalog, load_parameters
from workflow_params.utils.logging import configure_logging

app = typer.Typer(help="Workflow parameters CLI: validate parameter files and list parameter types.")
console = Console()


@app.command()
def check(
    path: str | None = typer.Argument(None, help="Path to the workflow parameters YAML file"),
    legacy: bool = typer.Option(False, "--legacy", help="Validate default values as well (legacy editing mode)"),
    messages: str | None = typer.Option(None, "--messages", help="YAML file overriding validation messages"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Validate every parameter in a workflow parameters file."""
    configure_logging(log_level)

    catalog = MessageCatalog()
    if messages:
        catalog = load_or_exit(load_message_catalog, messages, console=console, verbose_errors=verbose)
    definitions = load_or_exit(load_parameters, parameters_path(path), console=console, verbose_errors=verbose)

    store = ParameterStore(messages=catalog)
    store.initialize_parameters(definitions)
    for parameter_id, definition in definitions.items():
        store.update_parameter(
            ParameterUpdateEvent(
                id=parameter_id,
                new_definition=ParameterPatch(
                    name=definition.name,
                    type=definition.type,
                    value=definition.value,
                    default_value=definition.default_value,
                ),
                use_legacy=legacy,
            )
        )

    console.print(f"[green]OK[/green] Loaded {len(definitions)} parameter(s)")

    if store.has_errors:
        findings = sum(len(errors.fields()) for errors in store.validation_errors.values())
        console.print(build_findings_table(store.state))
        console.print(f"[red]Found {findings} finding(s)[/red]")
        raise typer.Exit(code=1)

    console.print("[green]All parameters are valid[/green]")


@app.command("types")
def list_types() -> None:
    """List the declared parameter types."""
    console.print(build_types_table())


__all__ = ["app"]
