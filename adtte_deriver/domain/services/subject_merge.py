from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from ...constants import Columns
from ...pandas_utils import missing_columns
from ..exceptions import AmbiguousJoinError, MalformedInputError
from .grouping import duplicate_keys


def merge_subject_attributes(
    derived: pd.DataFrame,
    dataset_adsl: pd.DataFrame,
    *,
    by_vars: Sequence[str] = Columns.SUBJECT_KEYS,
) -> pd.DataFrame:
    """Left-join subject-level columns onto the derived records.

    Every derived row is kept exactly once and in its original order; rows
    without a matching subject get missing subject-level values. Subject
    columns that already exist in ``derived`` are not brought over.

    Raises:
        MalformedInputError: A join key is absent from either table
        AmbiguousJoinError: The subject table repeats a join key
    """
    keys = tuple(by_vars)
    for label, frame in (("Derived table", derived), ("Subject-level table", dataset_adsl)):
        absent = missing_columns(frame, keys)
        if absent:
            raise MalformedInputError(
                f"{label} is missing join keys: {', '.join(absent)}"
            )
    duplicates = duplicate_keys(dataset_adsl, keys)
    if duplicates:
        shown = ", ".join("/".join(str(v) for v in key) for key in duplicates[:5])
        raise AmbiguousJoinError(
            f"Subject-level table has {len(duplicates)} duplicated key(s) on "
            f"{', '.join(keys)}: {shown}",
            duplicate_keys=duplicates,
        )
    overlap = [c for c in dataset_adsl.columns if c in derived.columns and c not in keys]
    subject_columns = dataset_adsl.drop(columns=overlap)
    merged = derived.merge(subject_columns, on=list(keys), how="left", sort=False)
    merged.index = derived.index
    return merged
