from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ...pandas_utils import is_missing_scalar
from ..entities.records import Candidate
from ..exceptions import FilterEvaluationError, MalformedInputError

if TYPE_CHECKING:
    import pandas as pd

    from ..entities.source_definition import SourceDefinition
    from .grouping import SubjectIndex


def validate_sources(
    sources: Iterable[SourceDefinition], indexes: Mapping[str, SubjectIndex]
) -> None:
    for source in sources:
        index = indexes.get(source.table_key)
        if index is None:
            raise MalformedInputError(
                f"{source.label()}: source table {source.table_key!r} was not supplied"
            )
        if not index.has_column(source.date):
            raise MalformedInputError(
                f"{source.label()}: date column {source.date!r} not found in {source.table_key}"
            )


def collect_candidates(
    subject_id: Any,
    sources: Iterable[SourceDefinition],
    indexes: Mapping[str, SubjectIndex],
) -> list[Candidate]:
    """Collect every dated candidate a subject has across ``sources``.

    Candidates follow source order, then row order within a source. A
    subject missing from a source table and rows without a date contribute
    nothing.

    Raises:
        MalformedInputError: A source table or its date column is absent
        FilterEvaluationError: A source predicate failed on one of the rows
    """
    candidates: list[Candidate] = []
    for source in sources:
        index = indexes.get(source.table_key)
        if index is None:
            raise MalformedInputError(
                f"{source.label()}: source table {source.table_key!r} was not supplied"
            )
        rows = index.rows_for(subject_id)
        if rows is None:
            continue
        if source.date not in rows.columns:
            raise MalformedInputError(
                f"{source.label()}: date column {source.date!r} not found in {source.table_key}"
            )
        for _, row in rows.iterrows():
            if not _passes(source, row, subject_id):
                continue
            value = row[source.date]
            if is_missing_scalar(value):
                continue
            candidates.append(Candidate(date=value, source=source))
    return candidates


def _passes(source: SourceDefinition, row: pd.Series[Any], subject_id: Any) -> bool:
    if source.predicate is None:
        return True
    try:
        return bool(source.predicate(row))
    except Exception as exc:
        raise FilterEvaluationError(
            f"Filter of {source.label()} failed for subject {subject_id!r}: {exc}",
            source=source.label(),
            subject_id=subject_id,
        ) from exc
