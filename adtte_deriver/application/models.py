from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import Defaults

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd


def _empty_sources() -> dict[str, Path]:
    return {}


def _empty_counts() -> dict[str, int]:
    return {}


def _empty_str_list() -> list[str]:
    return []


@dataclass(slots=True)
class BuildADTTERequest:
    adsl_path: Path
    source_paths: dict[str, Path] = field(default_factory=_empty_sources)
    endpoints_path: Path | None = None
    start_date_field: str = Defaults.START_DATE_FIELD
    output_path: Path | None = None
    date_columns: tuple[str, ...] = Defaults.DATE_COLUMNS
    max_workers: int = Defaults.MAX_WORKERS
    dataset_name: str = Defaults.DATASET_NAME
    dataset_label: str = Defaults.DATASET_LABEL


@dataclass(slots=True)
class BuildADTTEResponse:
    data: pd.DataFrame
    parameter_counts: dict[str, int] = field(default_factory=_empty_counts)
    output_path: Path | None = None
    warnings: list[str] = field(default_factory=_empty_str_list)

    @property
    def record_count(self) -> int:
        return len(self.data)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0
