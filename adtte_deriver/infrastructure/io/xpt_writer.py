"""SAS transport (v5) export of the ADTTE dataset.

Datetime columns are exported as SAS dates, numeric columns (including
the nullable AVAL/ASEQ integers) as doubles and everything else as
character with missing values written as blanks.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import numpy as np
import pandas as pd
import pyreadstat

from ...constants import Constraints, Defaults, VariableLabels
from .exceptions import XportGenerationError


def _export_values(series: pd.Series) -> np.ndarray:
    if pd.api.types.is_datetime64_any_dtype(series.dtype):
        return np.array(
            [None if pd.isna(v) else v.date() for v in series], dtype=object
        )
    if pd.api.types.is_bool_dtype(series.dtype) or pd.api.types.is_numeric_dtype(
        series.dtype
    ):
        return pd.to_numeric(series, errors="coerce").to_numpy(
            dtype="float64", na_value=np.nan
        )
    text = [("" if pd.isna(v) else str(v)) for v in series.astype(object)]
    if not any(text):
        # an all-blank character column still needs a width of one
        text = [" "] * len(text)
    return np.array(text, dtype=object)


def _transport_path(path: str | Path) -> Path:
    target = Path(path)
    target = target.with_name(target.name.lower())
    if len(target.stem) > Constraints.XPT_MAX_NAME_LENGTH:
        raise XportGenerationError(
            f"XPT filename stem must be <=8 characters for SAS v5 transport: {target.name}"
        )
    return target


def _transport_frame(dataset: pd.DataFrame) -> pd.DataFrame:
    names = [str(col).upper() for col in dataset.columns]
    too_long = [name for name in names if len(name) > Constraints.XPT_MAX_NAME_LENGTH]
    if too_long:
        raise XportGenerationError(
            f"Variable names longer than 8 characters: {', '.join(too_long)}"
        )
    return pd.DataFrame(
        {
            name: _export_values(dataset.iloc[:, position])
            for position, name in enumerate(names)
        },
        index=dataset.index,
    )


def write_xpt_file(
    dataset: pd.DataFrame,
    path: str | Path,
    *,
    dataset_name: str = Defaults.DATASET_NAME,
    file_label: str | None = None,
    column_labels: Mapping[str, str] | None = None,
) -> Path:
    """Write ``dataset`` to ``path`` and return the path actually written.

    The filename is lowercased and an existing file is replaced. Variable
    labels default to the standard ADTTE labels; ``column_labels``
    overrides or extends them.
    """
    output_path = _transport_path(path)
    if len(dataset_name) > Constraints.XPT_MAX_NAME_LENGTH:
        raise XportGenerationError(
            f"Dataset name must be <=8 characters: {dataset_name!r}"
        )
    export_df = _transport_frame(dataset)
    lookup = {**VariableLabels.LABELS, **dict(column_labels or {})}
    labels = [
        lookup.get(name, name)[: Constraints.XPT_MAX_LABEL_LENGTH]
        for name in export_df.columns
    ]
    label = (file_label or "").strip()[: Constraints.XPT_MAX_LABEL_LENGTH] or None

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.unlink(missing_ok=True)
    try:
        pyreadstat.write_xport(
            export_df,
            str(output_path),
            file_label=label,
            column_labels=labels,
            table_name=dataset_name.upper(),
            file_format_version=5,
        )
    except Exception as exc:
        raise XportGenerationError(f"Failed to write XPT file: {exc}") from exc
    return output_path


class XPTWriter:
    pass

    def __init__(self, column_labels: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self.column_labels = dict(column_labels or {})

    def write(
        self,
        dataframe: pd.DataFrame,
        output_path: Path,
        *,
        dataset_name: str,
        file_label: str | None = None,
    ) -> None:
        write_xpt_file(
            dataframe,
            output_path,
            dataset_name=dataset_name,
            file_label=file_label,
            column_labels=self.column_labels,
        )
