from __future__ import annotations

import pandas as pd

from ...constants import Columns
from ...pandas_utils import missing_columns
from ..exceptions import MalformedInputError


def derive_vars_duration(
    df: pd.DataFrame,
    *,
    new_var: str = Columns.AVAL,
    start_date: str = Columns.STARTDT,
    end_date: str = Columns.ADT,
) -> pd.DataFrame:
    """Add the whole-day count ``end_date - start_date`` as ``new_var``.

    Negative durations are kept. A missing date on either side yields a
    missing value rather than an error.
    """
    absent = missing_columns(df, (start_date, end_date))
    if absent:
        raise MalformedInputError(
            f"Cannot derive {new_var}: missing columns {', '.join(absent)}"
        )
    result = df.copy()
    start = pd.to_datetime(result[start_date], errors="coerce")
    end = pd.to_datetime(result[end_date], errors="coerce")
    result[new_var] = (end - start).dt.days.astype("Int64")
    return result


def negative_duration_count(df: pd.DataFrame, column: str = Columns.AVAL) -> int:
    if column not in df.columns:
        return 0
    return int((df[column].fillna(0) < 0).sum())
