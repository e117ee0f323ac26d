"""CSV loading for ADSL and event-source tables.

Every cell is read as text so subject identifiers such as ``001`` keep
their leading zeros; only the configured date columns are converted.
Exports that carry a row of variable labels above the variable names are
recognised and the label row is skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import TYPE_CHECKING

import pandas as pd

from .exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

VARIABLE_NAME = re.compile(r"^[A-Z][A-Z0-9_]{0,7}$")
LABEL_ROW_RATIO = 0.5


@dataclass(slots=True)
class CSVReadOptions:
    encoding: str = "utf-8"
    skip_label_row: bool = True
    date_format: str | None = None


class CSVReader:
    pass

    def __init__(self, options: CSVReadOptions | None = None) -> None:
        super().__init__()
        self.options = options or CSVReadOptions()

    def read_table(
        self, path: Path, *, date_columns: Sequence[str] = ()
    ) -> pd.DataFrame:
        """Read ``path`` and parse the given date columns when present."""
        frame = self.read(path)
        return parse_date_columns(
            frame, date_columns, date_format=self.options.date_format
        )

    def read(self, path: Path) -> pd.DataFrame:
        _check_file(path)
        skip = 0
        if self.options.skip_label_row and _has_label_row(path, self.options):
            skip = 1
        try:
            frame = pd.read_csv(
                path,
                skiprows=skip,
                dtype=str,
                keep_default_na=False,
                na_values=[""],
                encoding=self.options.encoding,
            )
        except pd.errors.EmptyDataError as e:
            raise DataParseError(f"CSV file is empty: {path}") from e
        except pd.errors.ParserError as e:
            raise DataParseError(f"Failed to parse CSV {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Cannot decode {path} as {self.options.encoding}: {e}"
            ) from e
        frame.columns = [str(col).strip() for col in frame.columns]
        return frame


def _check_file(path: Path) -> None:
    if not path.exists():
        raise DataSourceNotFoundError(f"File not found: {path}")
    if not path.is_file():
        raise DataSourceNotFoundError(f"Not a file: {path}")


def _has_label_row(path: Path, options: CSVReadOptions) -> bool:
    # Label rows hold free text; the row below them holds variable names.
    with path.open(encoding=options.encoding, errors="replace") as handle:
        lines = [handle.readline() for _ in range(2)]
    if not lines[1].strip():
        return False
    labels = [cell.strip() for cell in lines[0].split(",")]
    names = [cell.strip() for cell in lines[1].split(",")]
    with_spaces = sum(" " in c for c in labels) / len(labels)
    name_like = sum(bool(VARIABLE_NAME.match(c)) for c in names) / len(names)
    return with_spaces > LABEL_ROW_RATIO and name_like > LABEL_ROW_RATIO


def parse_date_columns(
    df: pd.DataFrame, date_columns: Sequence[str], *, date_format: str | None = None
) -> pd.DataFrame:
    """Convert the listed columns to datetimes; unparseable values become NaT."""
    present = [col for col in date_columns if col in df.columns]
    if not present:
        return df
    parsed = df.copy()
    for col in present:
        parsed[col] = pd.to_datetime(parsed[col], errors="coerce", format=date_format)
    return parsed
