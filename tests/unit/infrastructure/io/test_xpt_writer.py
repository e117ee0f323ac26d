"""Tests for SAS transport export of the derived dataset."""

from pathlib import Path

import pandas as pd
import pyreadstat
import pytest

from adtte_deriver.infrastructure.io.exceptions import XportGenerationError
from adtte_deriver.infrastructure.io.xpt_writer import XPTWriter, write_xpt_file


@pytest.fixture
def adtte() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "STUDYID": ["CDISC01", "CDISC01"],
            "USUBJID": ["S1", "S2"],
            "PARAMCD": ["OS", "OS"],
            "ADT": [pd.Timestamp("2021-10-01"), pd.Timestamp("2021-08-01")],
            "STARTDT": [pd.Timestamp("2021-01-01"), pd.Timestamp("2021-02-01")],
            "CNSR": [0, 1],
            "CNSDTDSC": [None, "Last Known Alive Date"],
            "AVAL": pd.array([273, 181], dtype="Int64"),
        }
    )


class TestWriteXptFile:
    """Tests for write_xpt_file."""

    def test_round_trip_keeps_values(self, adtte, tmp_path: Path):
        """Values and column labels survive export."""
        output = tmp_path / "adtte.xpt"

        write_xpt_file(adtte, output, dataset_name="ADTTE", file_label="Time to Event")

        df, meta = pyreadstat.read_xport(str(output))
        assert list(df.columns) == list(adtte.columns)
        assert df["AVAL"].tolist() == [273.0, 181.0]
        assert df["CNSR"].tolist() == [0.0, 1.0]
        assert df["CNSDTDSC"].tolist() == ["", "Last Known Alive Date"]
        assert meta.table_name == "ADTTE"
        labels = dict(zip(meta.column_names, meta.column_labels, strict=True))
        assert labels["AVAL"] == "Analysis Value"

    def test_filename_is_lowercased(self, adtte, tmp_path: Path):
        """Transport files are written with lowercase names."""
        write_xpt_file(adtte, tmp_path / "ADTTE.xpt")

        assert (tmp_path / "adtte.xpt").exists()

    def test_long_filename_is_rejected(self, adtte, tmp_path: Path):
        """SAS v5 transport limits the filename stem to eight characters."""
        with pytest.raises(XportGenerationError, match="<=8 characters"):
            write_xpt_file(adtte, tmp_path / "adtte_final.xpt")

    def test_long_variable_names_are_rejected(self, adtte, tmp_path: Path):
        """Transport v5 variable names are limited to eight characters."""
        wide = adtte.assign(LONGVARIABLE=1)

        with pytest.raises(XportGenerationError, match="LONGVARIABLE"):
            write_xpt_file(wide, tmp_path / "adtte.xpt")

    def test_returns_written_path(self, adtte, tmp_path: Path):
        written = write_xpt_file(adtte, tmp_path / "ADTTE.XPT")

        assert written == tmp_path / "adtte.xpt"

    def test_existing_file_is_replaced(self, adtte, tmp_path: Path):
        """An existing output file is overwritten."""
        output = tmp_path / "adtte.xpt"
        output.write_bytes(b"stale")

        write_xpt_file(adtte, output)

        df, _ = pyreadstat.read_xport(str(output))
        assert len(df) == 2


class TestXPTWriter:
    """Tests for the XPTWriter adapter."""

    def test_write_creates_parent_directories(self, adtte, tmp_path: Path):
        """The writer creates missing output directories."""
        output = tmp_path / "out" / "adtte.xpt"

        XPTWriter().write(adtte, output, dataset_name="ADTTE")

        assert output.exists()
