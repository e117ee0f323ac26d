from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from ...constants import Columns
from ...pandas_utils import missing_columns, row_keys
from ..exceptions import MalformedInputError
from .grouping import group_positions

_POSITION = "__input_position__"


def derive_var_obs_number(
    df: pd.DataFrame,
    *,
    by_vars: Sequence[str] = Columns.SUBJECT_KEYS,
    order: Sequence[str] = (Columns.PARAMCD,),
    new_var: str = Columns.ASEQ,
) -> pd.DataFrame:
    """Sort by ``by_vars`` then ``order`` and number rows within each group.

    Rows that tie on every sort key keep their relative input order. The
    returned frame is in sorted order with a fresh index.
    """
    absent = missing_columns(df, (*by_vars, *order))
    if absent:
        raise MalformedInputError(
            f"Cannot derive {new_var}: missing columns {', '.join(absent)}"
        )
    ordered = df.copy()
    ordered[_POSITION] = range(len(ordered))
    ordered = ordered.sort_values(
        by=[*by_vars, *order, _POSITION], kind="stable", na_position="last"
    )
    ordered = ordered.drop(columns=_POSITION).reset_index(drop=True)

    numbers = [0] * len(ordered)
    for positions in group_positions(row_keys(ordered, by_vars)).values():
        for number, position in enumerate(positions, start=1):
            numbers[position] = number
    ordered[new_var] = pd.Series(numbers, index=ordered.index, dtype="Int64")
    return ordered
