"""Tests for the ADTTE build use case.

The use case is exercised with mocked readers and writers so no files are
touched.
"""

from pathlib import Path
from unittest.mock import Mock

import pandas as pd
import pytest

from adtte_deriver.application.adtte_use_case import (
    ADTTEBuildDependencies,
    ADTTEBuildUseCase,
    endpoint_date_columns,
)
from adtte_deriver.application.models import BuildADTTERequest
from adtte_deriver.domain.exceptions import MalformedInputError
from adtte_deriver.domain.services.standard_endpoints import standard_endpoints
from adtte_deriver.infrastructure.io import CSVReader
from adtte_deriver.infrastructure.logging import NullLogger
from adtte_deriver.infrastructure.repositories import EndpointConfigRepository


class TestADTTEBuildUseCase:
    """Tests for ADTTEBuildUseCase."""

    def _create_use_case(self, tables, *, logger=None, writer=None):
        reader = Mock()
        reader.read_table.side_effect = lambda path, date_columns=(): tables[path.name]
        repository = Mock()
        repository.load.return_value = standard_endpoints()
        use_case = ADTTEBuildUseCase(
            ADTTEBuildDependencies(
                logger=logger or NullLogger(),
                table_reader=reader,
                endpoint_repository=repository,
                dataset_writer=writer,
            )
        )
        return use_case, reader, repository

    def test_execute_builds_dataset(self, adsl, adrs):
        """Tables are loaded, endpoints derived and counts reported."""
        use_case, reader, repository = self._create_use_case(
            {"adsl.csv": adsl, "adrs.csv": adrs}
        )
        request = BuildADTTERequest(
            adsl_path=Path("adsl.csv"), source_paths={"adrs": Path("adrs.csv")}
        )

        response = use_case.execute(request)

        assert response.record_count == 6
        assert response.parameter_counts == {"OS": 3, "PFS": 3}
        assert response.output_path is None
        assert reader.read_table.call_count == 2
        repository.load.assert_called_once_with(None, default_start_date="RANDDT")

    def test_writes_output_when_requested(self, adsl, adrs, tmp_path):
        """The dataset writer receives the final frame and dataset name."""
        writer = Mock()
        use_case, _, _ = self._create_use_case(
            {"adsl.csv": adsl, "adrs.csv": adrs}, writer=writer
        )
        output = tmp_path / "adtte.xpt"
        request = BuildADTTERequest(
            adsl_path=Path("adsl.csv"),
            source_paths={"ADRS": Path("adrs.csv")},
            output_path=output,
        )

        response = use_case.execute(request)

        assert response.output_path == output
        writer.write.assert_called_once()
        args, kwargs = writer.write.call_args
        assert isinstance(args[0], pd.DataFrame)
        assert args[1] == output
        assert kwargs["dataset_name"] == "ADTTE"

    def test_negative_durations_are_warned(self, adsl):
        """A chosen date before randomization is reported, not rejected."""
        early = pd.DataFrame(
            {
                "USUBJID": ["S1"],
                "PARAMCD": ["DEATH"],
                "AVALC": ["Y"],
                "ANL01FL": ["Y"],
                "ADT": [pd.Timestamp("2020-12-01")],
            }
        )
        logger = Mock()
        use_case, _, _ = self._create_use_case(
            {"adsl.csv": adsl, "adrs.csv": early}, logger=logger
        )
        request = BuildADTTERequest(
            adsl_path=Path("adsl.csv"), source_paths={"ADRS": Path("adrs.csv")}
        )

        response = use_case.execute(request)

        assert response.has_warnings
        assert "negative AVAL" in response.warnings[0]
        logger.warning.assert_called_once()
        assert logger.log_parameter_complete.call_count == 2

    def test_derivation_errors_propagate(self, adsl):
        """Fatal derivation errors are logged and re-raised unchanged."""
        logger = Mock()
        use_case, _, _ = self._create_use_case({"adsl.csv": adsl}, logger=logger)
        request = BuildADTTERequest(adsl_path=Path("adsl.csv"))

        with pytest.raises(MalformedInputError, match="ADRS"):
            use_case.execute(request)

        logger.error.assert_called_once()


TREATMENT_ENDPOINT_TOML = """
[[endpoints]]
paramcd = "OSTRT"
param = "Overall Survival from Treatment Start"
start_date = "TRTSDT"

[[endpoints.events]]
dataset = "ADSL"
date = "DTHDT"
evntdesc = "Death"
srcdom = "ADSL"
srcvar = "DTHDT"

[[endpoints.censors]]
dataset = "ADRS"
date = "ADT"
evntdesc = "Last Tumor Assessment"
cnsdtdsc = "Last Tumor Assessment"
srcdom = "ADRS"
srcvar = "ADT"
filter = { PARAMCD = "LSTA" }
"""


class TestEndpointDateColumns:
    """Date columns named by endpoints are parsed along with the configured ones."""

    def test_endpoint_columns_are_added(self, tmp_path):
        path = tmp_path / "endpoints.toml"
        path.write_text(TREATMENT_ENDPOINT_TOML)
        endpoints = EndpointConfigRepository().load(path)

        columns = endpoint_date_columns(("RANDDT", "ADT"), endpoints)

        assert columns == ("RANDDT", "ADT", "TRTSDT", "DTHDT")


class TestCustomDateColumns:
    """End-to-end build from CSV files with non-default date columns."""

    def test_endpoint_dates_are_parsed(self, tmp_path):
        adsl_path = tmp_path / "adsl.csv"
        adsl_path.write_text(
            "STUDYID,USUBJID,TRTSDT,DTHDT\n"
            "CDISC01,S1,2021-01-10,2021-03-01\n"
            "CDISC01,S2,2021-02-01,\n"
        )
        adrs_path = tmp_path / "adrs.csv"
        adrs_path.write_text(
            "STUDYID,USUBJID,PARAMCD,ADT\n"
            "CDISC01,S1,LSTA,2021-05-01\n"
            "CDISC01,S2,LSTA,2021-04-01\n"
        )
        endpoints_path = tmp_path / "endpoints.toml"
        endpoints_path.write_text(TREATMENT_ENDPOINT_TOML)
        use_case = ADTTEBuildUseCase(
            ADTTEBuildDependencies(
                logger=NullLogger(),
                table_reader=CSVReader(),
                endpoint_repository=EndpointConfigRepository(),
            )
        )
        request = BuildADTTERequest(
            adsl_path=adsl_path,
            source_paths={"ADRS": adrs_path},
            endpoints_path=endpoints_path,
        )

        response = use_case.execute(request)

        data = response.data
        assert data["USUBJID"].tolist() == ["S1", "S2"]
        assert all(isinstance(value, pd.Timestamp) for value in data["ADT"])
        assert data["ADT"].tolist() == [
            pd.Timestamp("2021-03-01"),
            pd.Timestamp("2021-04-01"),
        ]
        assert data["CNSR"].tolist() == [0, 1]
        assert data["AVAL"].tolist() == [50, 59]
        assert data["EVNTDESC"].tolist() == ["Death", "Last Tumor Assessment"]
