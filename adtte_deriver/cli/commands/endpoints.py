"""Endpoints command - list the parameters and their sources."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ...infrastructure.io.exceptions import DeriverInfrastructureError
from ...infrastructure.repositories.endpoint_config_repository import (
    EndpointConfigRepository,
)

console = Console()


@click.command()
@click.option(
    "--endpoints",
    "endpoints_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="TOML file with endpoint definitions (default: standard OS and PFS)",
)
def list_endpoints_command(endpoints_file: Path | None) -> None:
    """List the time-to-event parameters and their event/censor sources."""
    try:
        endpoints = EndpointConfigRepository().load(endpoints_file)
    except DeriverInfrastructureError as exc:
        raise click.ClickException(str(exc)) from exc
    for endpoint in endpoints:
        table = Table(
            title=f"{endpoint.paramcd} - {endpoint.parameter.param} (origin {endpoint.start_date})"
        )
        table.add_column("Order", justify="right")
        table.add_column("Kind", style="cyan")
        table.add_column("Description")
        table.add_column("Source", style="green")
        table.add_column("Filter")
        for order, source in enumerate(
            (*endpoint.event_sources, *endpoint.censor_sources), start=1
        ):
            table.add_row(
                str(order),
                source.kind.value,
                source.attributes.evntdesc,
                f"{source.table_key}.{source.date}",
                source.describe_filter(),
            )
        console.print(table)
