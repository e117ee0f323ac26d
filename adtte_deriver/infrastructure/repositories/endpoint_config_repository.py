from __future__ import annotations

from pathlib import Path
import tomllib

from pydantic import ValidationError

from ...constants import Defaults
from ...domain.entities.endpoint import EndpointDefinition
from ...domain.entities.endpoint_config import EndpointConfig
from ...domain.services.standard_endpoints import standard_endpoints
from ..io.exceptions import DataParseError, DataSourceNotFoundError


class EndpointConfigLoadError(DataParseError):
    pass


def load_endpoint_config(path: str | Path) -> EndpointConfig:
    file_path = Path(path)
    if not file_path.exists():
        raise DataSourceNotFoundError(f"Endpoint config not found: {file_path}")
    try:
        with file_path.open("rb") as handle:
            data = tomllib.load(handle)
        return EndpointConfig.model_validate(data)
    except tomllib.TOMLDecodeError as exc:
        raise EndpointConfigLoadError(f"Invalid TOML in {file_path}: {exc}") from exc
    except ValidationError as exc:
        raise EndpointConfigLoadError(
            f"Invalid endpoint definitions in {file_path}: {exc}"
        ) from exc


class EndpointConfigRepository:
    pass

    def load(
        self,
        path: Path | None = None,
        *,
        default_start_date: str = Defaults.START_DATE_FIELD,
    ) -> tuple[EndpointDefinition, ...]:
        if path is None:
            return standard_endpoints()
        config = load_endpoint_config(path)
        try:
            return config.to_definitions(default_start_date)
        except ValueError as exc:
            raise EndpointConfigLoadError(
                f"Invalid endpoint definitions in {path}: {exc}"
            ) from exc
