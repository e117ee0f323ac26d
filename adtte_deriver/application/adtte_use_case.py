"""ADTTE build use case.

Loads the subject-level table and the event-source tables, derives every
configured endpoint and optionally writes the finished dataset. Derivation
errors are logged and re-raised unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..constants import Columns, Defaults
from ..domain.exceptions import TTEDerivationError
from ..domain.services.adtte_builder import build_adtte
from ..domain.services.duration import negative_duration_count
from .models import BuildADTTEResponse

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    import pandas as pd

    from ..domain.entities.endpoint import EndpointDefinition
    from .models import BuildADTTERequest
    from .ports.services import (
        DatasetWriterPort,
        EndpointRepositoryPort,
        LoggerPort,
        TableReaderPort,
    )


@dataclass(frozen=True, slots=True)
class ADTTEBuildDependencies:
    logger: LoggerPort
    table_reader: TableReaderPort
    endpoint_repository: EndpointRepositoryPort
    dataset_writer: DatasetWriterPort | None = None


class ADTTEBuildUseCase:
    pass

    def __init__(self, dependencies: ADTTEBuildDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._table_reader = dependencies.table_reader
        self._endpoint_repository = dependencies.endpoint_repository
        self._dataset_writer = dependencies.dataset_writer

    def execute(self, request: BuildADTTERequest) -> BuildADTTEResponse:
        endpoints = self._endpoint_repository.load(
            request.endpoints_path, default_start_date=request.start_date_field
        )
        adsl, sources = self._load_tables(
            request, endpoint_date_columns(request.date_columns, endpoints)
        )
        for endpoint in endpoints:
            self.logger.log_parameter_start(
                endpoint.paramcd,
                endpoint.parameter.param,
                len(endpoint.event_sources) + len(endpoint.censor_sources),
            )
        try:
            result = build_adtte(
                adsl, endpoints, sources, max_workers=request.max_workers
            )
        except TTEDerivationError as exc:
            self.logger.error(f"ADTTE derivation failed: {exc}")
            raise
        for endpoint in endpoints:
            self.logger.log_parameter_complete(
                endpoint.paramcd,
                result.parameter_counts.get(endpoint.paramcd, 0),
                result.dropped_subjects(endpoint.paramcd),
            )
        response = BuildADTTEResponse(
            data=result.data, parameter_counts=dict(result.parameter_counts)
        )
        negatives = negative_duration_count(result.data, Columns.AVAL)
        if negatives:
            message = f"{negatives} record(s) end before their start date (negative AVAL)"
            self.logger.warning(message)
            response.warnings.append(message)
        if request.output_path is not None:
            response.output_path = self._write(result.data, request)
        self.logger.log_final_stats()
        return response

    def _load_tables(
        self, request: BuildADTTERequest, date_columns: tuple[str, ...]
    ) -> tuple[pd.DataFrame, dict[str, pd.DataFrame]]:
        adsl = self._read(Defaults.SUBJECT_TABLE, request.adsl_path, date_columns)
        sources: dict[str, pd.DataFrame] = {Defaults.SUBJECT_TABLE: adsl}
        for name, path in request.source_paths.items():
            key = name.upper()
            if key == Defaults.SUBJECT_TABLE:
                continue
            sources[key] = self._read(key, path, date_columns)
        return adsl, sources

    def _read(
        self, name: str, path: Path, date_columns: tuple[str, ...]
    ) -> pd.DataFrame:
        frame = self._table_reader.read_table(path, date_columns=date_columns)
        self.logger.log_table_loaded(name, len(frame), len(frame.columns))
        return frame

    def _write(self, data: pd.DataFrame, request: BuildADTTERequest) -> Path | None:
        if self._dataset_writer is None or request.output_path is None:
            self.logger.warning("No dataset writer configured; output not written")
            return None
        self._dataset_writer.write(
            data,
            request.output_path,
            dataset_name=request.dataset_name,
            file_label=request.dataset_label,
        )
        self.logger.success(f"Wrote {len(data):,} records to {request.output_path}")
        return request.output_path


def endpoint_date_columns(
    configured: Sequence[str], endpoints: Sequence[EndpointDefinition]
) -> tuple[str, ...]:
    """Configured date columns plus every date and origin column the endpoints use.

    Order is preserved and duplicates are dropped.
    """
    columns = list(configured)
    for endpoint in endpoints:
        columns.append(endpoint.start_date)
        columns.extend(
            source.date
            for source in (*endpoint.event_sources, *endpoint.censor_sources)
        )
    return tuple(dict.fromkeys(columns))
