"""Build command - derive an ADTTE dataset from ADSL and event-source tables.

This module is a thin adapter between Click and the ADTTEBuildUseCase:
1. Parse CLI arguments and the optional config file
2. Create the BuildADTTERequest
3. Call the use case
4. Print a per-parameter summary
"""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ...application.models import BuildADTTERequest, BuildADTTEResponse
from ...config import ConfigLoader
from ...domain.exceptions import TTEDerivationError
from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.exceptions import DeriverInfrastructureError

console = Console()


def _parse_sources(values: tuple[str, ...]) -> dict[str, Path]:
    sources: dict[str, Path] = {}
    for value in values:
        name, sep, raw_path = value.partition("=")
        if not sep or not name.strip() or not raw_path.strip():
            raise click.BadParameter(
                f"expected NAME=PATH, got {value!r}", param_hint="--source"
            )
        path = Path(raw_path.strip())
        if not path.exists():
            raise click.BadParameter(f"file not found: {path}", param_hint="--source")
        sources[name.strip().upper()] = path
    return sources


@click.command()
@click.argument("adsl_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--source",
    "sources",
    multiple=True,
    metavar="NAME=PATH",
    help="Event-source table, e.g. ADRS=adrs_onco.csv (repeatable)",
)
@click.option(
    "--endpoints",
    "endpoints_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="TOML file with endpoint definitions (default: standard OS and PFS)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to an adtte_deriver.toml config file (default: ./adtte_deriver.toml)",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the dataset as SAS transport (e.g. adtte.xpt)",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Number of threads used to evaluate subjects",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v, -vv)")
def build_command(
    adsl_file: Path,
    sources: tuple[str, ...],
    endpoints_file: Path | None,
    config_file: Path | None,
    output_path: Path | None,
    workers: int | None,
    verbose: int,
) -> None:
    """Derive time-to-event records for every configured parameter.

    Examples:

    \b
        adtte-deriver build adsl.csv --source ADRS=adrs_onco.csv --output adtte.xpt
    """
    config = ConfigLoader.load(config_file)
    request = BuildADTTERequest(
        adsl_path=adsl_file,
        source_paths=_parse_sources(sources),
        endpoints_path=endpoints_file,
        start_date_field=config.start_date_field,
        output_path=output_path,
        date_columns=config.date_columns,
        max_workers=workers or config.max_workers,
        dataset_name=config.dataset_name,
        dataset_label=config.dataset_label,
    )
    container = DependencyContainer(verbose=verbose, console=console)
    use_case = container.create_adtte_use_case()
    try:
        response = use_case.execute(request)
    except (TTEDerivationError, DeriverInfrastructureError) as exc:
        raise click.ClickException(str(exc)) from exc
    _print_summary(response)


def _print_summary(response: BuildADTTEResponse) -> None:
    table = Table(title="ADTTE Summary")
    table.add_column("PARAMCD", style="cyan")
    table.add_column("Records", justify="right")
    for paramcd, count in response.parameter_counts.items():
        table.add_row(paramcd, f"{count:,}")
    table.add_row("[bold]Total[/bold]", f"[bold]{response.record_count:,}[/bold]")
    console.print(table)
    if response.output_path is not None:
        console.print(f"[bold]Output:[/bold] {response.output_path}")
