from collections.abc import Iterable, Sequence
from typing import Any, cast

import pandas as pd


def is_missing_scalar(value: object) -> bool:
    try:
        return cast("bool", pd.isna(cast("Any", value)))
    except (TypeError, ValueError):
        return False


def normalize_key_value(value: object) -> object:
    return None if is_missing_scalar(value) else value


def row_keys(frame: pd.DataFrame, columns: Sequence[str]) -> list[tuple[object, ...]]:
    if not columns:
        return [() for _ in range(len(frame))]
    values: Iterable[tuple[object, ...]] = zip(
        *(frame[col].tolist() for col in columns), strict=True
    )
    return [tuple(normalize_key_value(v) for v in key) for key in values]


def missing_columns(frame: pd.DataFrame, columns: Iterable[str]) -> list[str]:
    present = set(frame.columns)
    return [col for col in columns if col not in present]
