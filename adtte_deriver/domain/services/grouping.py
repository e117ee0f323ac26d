"""Group-by primitives shared by subject indexing, sequencing and merging."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from ...constants import Columns
from ...pandas_utils import missing_columns, normalize_key_value, row_keys
from ..exceptions import MalformedInputError

if TYPE_CHECKING:
    import pandas as pd

K = TypeVar("K", bound=Hashable)


def group_positions(keys: Iterable[K]) -> dict[K, list[int]]:
    """Partition positions by key.

    Groups appear in order of first occurrence and positions within a group
    keep their input order. Nothing is deduplicated.
    """
    groups: dict[K, list[int]] = {}
    for position, key in enumerate(keys):
        groups.setdefault(key, []).append(position)
    return groups


def duplicate_keys(frame: pd.DataFrame, columns: tuple[str, ...]) -> list[tuple[object, ...]]:
    return [
        key
        for key, positions in group_positions(row_keys(frame, columns)).items()
        if len(positions) > 1
    ]


class SubjectIndex:
    """Rows of one source table grouped by subject identifier."""

    __slots__ = ("_groups", "columns", "name")

    def __init__(
        self, name: str, groups: dict[object, pd.DataFrame], columns: tuple[str, ...]
    ) -> None:
        self.name = name
        self._groups = groups
        self.columns = columns

    @classmethod
    def build(
        cls,
        table: pd.DataFrame,
        subject_column: str = Columns.USUBJID,
        *,
        name: str = "",
    ) -> SubjectIndex:
        if missing_columns(table, [subject_column]):
            raise MalformedInputError(
                f"{name or 'Source table'} has no subject identifier column {subject_column!r}"
            )
        keys = (normalize_key_value(v) for v in table[subject_column].tolist())
        groups: dict[object, pd.DataFrame] = {
            key: table.iloc[positions]
            for key, positions in group_positions(keys).items()
            if key is not None
        }
        return cls(name, groups, tuple(str(c) for c in table.columns))

    def rows_for(self, subject_id: Any) -> pd.DataFrame | None:
        return self._groups.get(normalize_key_value(subject_id))

    def has_column(self, column: str) -> bool:
        return column in self.columns

    def subjects(self) -> list[object]:
        return list(self._groups)

    def __contains__(self, subject_id: object) -> bool:
        return normalize_key_value(subject_id) in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"SubjectIndex({self.name!r}, subjects={len(self)})"


def build_subject_indexes(
    source_datasets: dict[str, pd.DataFrame],
    table_keys: Iterable[str],
    subject_column: str = Columns.USUBJID,
) -> dict[str, SubjectIndex]:
    by_upper = {name.upper(): frame for name, frame in source_datasets.items()}
    indexes: dict[str, SubjectIndex] = {}
    for key in sorted(set(table_keys)):
        if key not in by_upper:
            raise MalformedInputError(
                f"Source table {key!r} is referenced but was not supplied "
                f"(available: {', '.join(sorted(by_upper)) or 'none'})"
            )
        indexes[key] = SubjectIndex.build(by_upper[key], subject_column, name=key)
    return indexes
