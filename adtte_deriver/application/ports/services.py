from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    import pandas as pd

    from ...domain.entities.endpoint import EndpointDefinition


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_table_loaded(
        self, table_name: str, row_count: int, column_count: int | None = None
    ) -> None: ...

    def log_parameter_start(
        self, paramcd: str, param: str, source_count: int
    ) -> None: ...

    def log_parameter_complete(
        self, paramcd: str, record_count: int, dropped_subjects: int
    ) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class TableReaderPort(Protocol):
    pass

    def read_table(
        self, path: Path, *, date_columns: Sequence[str] = ()
    ) -> pd.DataFrame: ...


@runtime_checkable
class DatasetWriterPort(Protocol):
    pass

    def write(
        self,
        dataframe: pd.DataFrame,
        output_path: Path,
        *,
        dataset_name: str,
        file_label: str | None = None,
    ) -> None: ...


@runtime_checkable
class EndpointRepositoryPort(Protocol):
    pass

    def load(
        self, path: Path | None = None, *, default_start_date: str = "RANDDT"
    ) -> tuple[EndpointDefinition, ...]: ...
