"""Tests for loading endpoint definitions from TOML."""

from pathlib import Path

import pytest

from adtte_deriver.domain.services.standard_endpoints import standard_endpoints
from adtte_deriver.infrastructure.io.exceptions import DataSourceNotFoundError
from adtte_deriver.infrastructure.repositories.endpoint_config_repository import (
    EndpointConfigLoadError,
    EndpointConfigRepository,
    load_endpoint_config,
)

ENDPOINTS_TOML = """
[[endpoints]]
paramcd = "os"
param = "Overall Survival"

[[endpoints.events]]
dataset = "ADRS"
date = "ADT"
evntdesc = "Death"
srcdom = "ADRS"
srcvar = "ADT"
filter = { PARAMCD = "DEATH", ANL01FL = "Y" }

[[endpoints.censors]]
dataset = "ADSL"
date = "LSTALVDT"
evntdesc = "Last Known Alive"
cnsdtdsc = "Last Known Alive Date"
srcdom = "ADSL"
srcvar = "LSTALVDT"
"""


@pytest.fixture
def endpoints_file(tmp_path: Path) -> Path:
    path = tmp_path / "endpoints.toml"
    path.write_text(ENDPOINTS_TOML)
    return path


class TestLoadEndpointConfig:
    def test_valid_file(self, endpoints_file: Path):
        config = load_endpoint_config(endpoints_file)

        assert [endpoint.paramcd for endpoint in config.endpoints] == ["OS"]
        assert config.endpoints[0].events[0].filter == {
            "PARAMCD": "DEATH",
            "ANL01FL": "Y",
        }

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(DataSourceNotFoundError):
            load_endpoint_config(tmp_path / "absent.toml")

    def test_invalid_toml(self, tmp_path: Path):
        path = tmp_path / "broken.toml"
        path.write_text("[[endpoints]\nparamcd = ")

        with pytest.raises(EndpointConfigLoadError, match="Invalid TOML"):
            load_endpoint_config(path)

    def test_schema_errors(self, tmp_path: Path):
        """A censor without CNSDTDSC fails validation."""
        path = tmp_path / "endpoints.toml"
        path.write_text(ENDPOINTS_TOML.replace('cnsdtdsc = "Last Known Alive Date"\n', ""))

        with pytest.raises(EndpointConfigLoadError, match="requires cnsdtdsc"):
            load_endpoint_config(path)


class TestEndpointConfigRepository:
    def test_defaults_to_standard_endpoints(self):
        assert EndpointConfigRepository().load() == standard_endpoints()

    def test_loads_definitions(self, endpoints_file: Path):
        (endpoint,) = EndpointConfigRepository().load(endpoints_file)

        assert endpoint.paramcd == "OS"
        assert endpoint.parameter.param == "Overall Survival"
        assert endpoint.table_keys() == {"ADRS", "ADSL"}

    def test_default_start_date_applies_when_unset(self, endpoints_file: Path):
        """Endpoints without start_date use the configured origin column."""
        (endpoint,) = EndpointConfigRepository().load(
            endpoints_file, default_start_date="TRTSDT"
        )

        assert endpoint.start_date == "TRTSDT"
