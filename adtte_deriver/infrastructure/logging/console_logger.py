"""Rich console logger for derivation runs.

Messages are filtered by verbosity: ``NORMAL`` shows progress and
problems, ``VERBOSE`` (``-v``) adds table loads and per-parameter counts,
``DEBUG`` (``-vv``) adds column counts and a parameter prefix.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import IntEnum
from typing_extensions import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    paramcd: str = ""
    table_name: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


@dataclass(slots=True)
class DerivationStats:
    tables_loaded: int = 0
    parameters_derived: int = 0
    records_derived: int = 0
    subjects_dropped: int = 0
    warnings: int = 0
    errors: int = 0


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats = DerivationStats()

    def set_context(self, **kwargs: str) -> None:
        context = self._context or LogContext()
        for key, value in kwargs.items():
            if key in LogContext.__dataclass_fields__:
                setattr(context, key, value)
        self._context = context

    def clear_context(self) -> None:
        self._context = None

    def _emit(self, message: str, *, style: str = "", level: int = LogLevel.NORMAL) -> None:
        if self.verbosity < level:
            return
        text = f"{self._prefix()}{message}"
        self.console.print(f"[{style}]{text}[/{style}]" if style else text)

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        self._emit(message, level=level)

    @override
    def verbose(self, message: str) -> None:
        self._emit(message, style="dim", level=LogLevel.VERBOSE)

    @override
    def debug(self, message: str) -> None:
        self._emit(message, style="dim cyan", level=LogLevel.DEBUG)

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats.warnings += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats.errors += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_table_loaded(
        self, table_name: str, row_count: int, column_count: int | None = None
    ) -> None:
        self._stats.tables_loaded += 1
        detail = ""
        if column_count is not None and self.verbosity >= LogLevel.DEBUG:
            detail = f" ({column_count} columns)"
        self.verbose(f"  Loaded {row_count:,} rows from {table_name}{detail}")

    @override
    def log_parameter_start(self, paramcd: str, param: str, source_count: int) -> None:
        self.set_context(paramcd=paramcd)
        suffix = ""
        if self.verbosity >= LogLevel.VERBOSE:
            suffix = f" [dim]({source_count} sources)[/dim]"
        self.console.print(f"[bold]Deriving {paramcd}[/bold]: {param}{suffix}")

    @override
    def log_parameter_complete(
        self, paramcd: str, record_count: int, dropped_subjects: int
    ) -> None:
        self._stats.parameters_derived += 1
        self._stats.records_derived += record_count
        self._stats.subjects_dropped += dropped_subjects
        self.verbose(f"  {paramcd}: {record_count:,} records")
        if dropped_subjects:
            self.verbose(
                f"  {paramcd}: {dropped_subjects:,} subject(s) without any event or censoring date"
            )

    @override
    def log_final_stats(self) -> None:
        if self.verbosity < LogLevel.VERBOSE:
            return
        stats = self._stats
        lines = [
            f"[dim]  Tables loaded: {stats.tables_loaded}[/dim]",
            f"[dim]  Parameters derived: {stats.parameters_derived}[/dim]",
            f"[dim]  Total records: {stats.records_derived:,}[/dim]",
        ]
        if stats.subjects_dropped:
            lines.append(f"[dim]  Subjects without records: {stats.subjects_dropped:,}[/dim]")
        if stats.warnings:
            lines.append(f"[dim yellow]  Warnings: {stats.warnings}[/dim yellow]")
        if stats.errors:
            lines.append(f"[dim red]  Errors: {stats.errors}[/dim red]")
        self.console.print()
        self.console.print("[dim]Derivation Statistics:[/dim]")
        for line in lines:
            self.console.print(line)

    def get_stats(self) -> dict[str, int]:
        return asdict(self._stats)

    def reset_stats(self) -> None:
        self._stats = DerivationStats()

    def _prefix(self) -> str:
        if self._context is None or not self._context.paramcd:
            return ""
        if self.verbosity < LogLevel.DEBUG:
            return ""
        return escape(f"[{self._context.paramcd}] ")
