"""Per-parameter time-to-event derivation.

For every subject of the subject-level table all event candidates are
collected, followed by all censoring candidates, and the earliest date
becomes the subject's record for the parameter. The chosen date is not
checked against the start date; records ending before their origin are
kept as they are.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

import pandas as pd

from ...constants import Columns
from ...pandas_utils import missing_columns
from ..entities.records import DerivedRecord
from ..exceptions import MalformedInputError
from .candidate_collector import collect_candidates, validate_sources
from .earliest_selector import select_earliest
from .grouping import build_subject_indexes

if TYPE_CHECKING:
    from ..entities.endpoint import EndpointDefinition, ParameterAttributes
    from ..entities.source_definition import SourceDefinition
    from .grouping import SubjectIndex


def empty_tte_frame() -> pd.DataFrame:
    return pd.DataFrame({col: pd.Series(dtype="object") for col in Columns.DERIVED})


def derive_param_tte(
    dataset_adsl: pd.DataFrame,
    *,
    start_date: str,
    event_conditions: Sequence[SourceDefinition],
    censor_conditions: Sequence[SourceDefinition],
    source_datasets: Mapping[str, pd.DataFrame],
    set_values_to: ParameterAttributes,
    max_workers: int = 1,
) -> pd.DataFrame:
    """Derive one time-to-event parameter for every subject.

    Args:
        dataset_adsl: Subject-level table (one row per subject)
        start_date: Column of ``dataset_adsl`` holding the time origin
        event_conditions: Event sources, evaluated first
        censor_conditions: Censoring sources, evaluated after the events
        source_datasets: Source tables by name (matched case-insensitively)
        set_values_to: Parameter code and label for the output rows
        max_workers: Evaluate subjects on this many threads when above 1

    Returns:
        One row per subject with at least one dated candidate, in subject
        order of ``dataset_adsl``. Subjects without candidates are dropped.
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be positive, got {max_workers}")
    absent = missing_columns(dataset_adsl, (Columns.STUDYID, Columns.USUBJID, start_date))
    if absent:
        raise MalformedInputError(
            f"Subject-level table is missing required columns: {', '.join(absent)}"
        )
    sources = (*event_conditions, *censor_conditions)
    indexes = build_subject_indexes(
        dict(source_datasets), (s.table_key for s in sources)
    )
    validate_sources(sources, indexes)

    subjects = list(
        zip(
            dataset_adsl[Columns.STUDYID].tolist(),
            dataset_adsl[Columns.USUBJID].tolist(),
            dataset_adsl[start_date].tolist(),
            strict=True,
        )
    )

    def evaluate(subject: tuple[Any, Any, Any]) -> DerivedRecord | None:
        studyid, usubjid, startdt = subject
        return _derive_subject(
            studyid, usubjid, startdt, sources, indexes, set_values_to
        )

    slots: list[DerivedRecord | None] = [None] * len(subjects)
    if max_workers == 1 or len(subjects) < 2:
        for position, subject in enumerate(subjects):
            slots[position] = evaluate(subject)
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {
                position: executor.submit(evaluate, subject)
                for position, subject in enumerate(subjects)
            }
            for position, future in futures.items():
                slots[position] = future.result()

    rows = [record.to_row() for record in slots if record is not None]
    if not rows:
        return empty_tte_frame()
    return pd.DataFrame(rows, columns=list(Columns.DERIVED))


def _derive_subject(
    studyid: Any,
    usubjid: Any,
    startdt: Any,
    sources: Sequence[SourceDefinition],
    indexes: Mapping[str, SubjectIndex],
    parameter: ParameterAttributes,
) -> DerivedRecord | None:
    chosen = select_earliest(collect_candidates(usubjid, sources, indexes))
    if chosen is None:
        return None
    return DerivedRecord.from_candidate(
        chosen,
        studyid=studyid,
        usubjid=usubjid,
        startdt=startdt,
        parameter=parameter,
    )


def derive_endpoint(
    dataset_adsl: pd.DataFrame,
    endpoint: EndpointDefinition,
    source_datasets: Mapping[str, pd.DataFrame],
    *,
    max_workers: int = 1,
) -> pd.DataFrame:
    return derive_param_tte(
        dataset_adsl,
        start_date=endpoint.start_date,
        event_conditions=endpoint.event_sources,
        censor_conditions=endpoint.censor_sources,
        source_datasets=source_datasets,
        set_values_to=endpoint.parameter,
        max_workers=max_workers,
    )


def stack_parameters(frames: Sequence[pd.DataFrame]) -> pd.DataFrame:
    non_empty = [frame for frame in frames if not frame.empty]
    if not non_empty:
        return empty_tte_frame()
    return pd.concat(non_empty, ignore_index=True)
