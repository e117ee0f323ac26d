from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults


def _default_date_columns() -> tuple[str, ...]:
    return Defaults.DATE_COLUMNS


@dataclass(frozen=True, slots=True)
class DeriverConfig:
    start_date_field: str = Defaults.START_DATE_FIELD
    date_columns: tuple[str, ...] = field(default_factory=_default_date_columns)
    max_workers: int = Defaults.MAX_WORKERS
    dataset_name: str = Defaults.DATASET_NAME
    dataset_label: str = Defaults.DATASET_LABEL

    def __post_init__(self) -> None:
        if not self.start_date_field.strip():
            raise ValueError("start_date_field must not be empty")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")
        if not self.dataset_name.strip():
            raise ValueError("dataset_name must not be empty")
        if len(self.dataset_name) > 8:
            raise ValueError(
                f"dataset_name must be at most 8 characters, got {self.dataset_name!r}"
            )

    @classmethod
    def from_env(cls) -> DeriverConfig:
        raw_columns = os.getenv("ADTTE_DATE_COLUMNS")
        date_columns = (
            _split_columns(raw_columns) if raw_columns else Defaults.DATE_COLUMNS
        )
        return cls(
            start_date_field=os.getenv("ADTTE_START_DATE", Defaults.START_DATE_FIELD),
            date_columns=date_columns,
            max_workers=_coerce_int(
                os.getenv("ADTTE_MAX_WORKERS", str(Defaults.MAX_WORKERS)),
                key="ADTTE_MAX_WORKERS",
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> DeriverConfig:
        config = DeriverConfig.from_env()
        if config_file is None:
            config_file = Path("adtte_deriver.toml")
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: DeriverConfig) -> DeriverConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        derivation = _get_table(data, "derivation")
        output = _get_table(data, "output")
        start_date_field = base_config.start_date_field
        if value := derivation.get("start_date_field"):
            start_date_field = str(value)
        date_columns = base_config.date_columns
        if (value := derivation.get("date_columns")) is not None:
            date_columns = _coerce_columns(value, key="derivation.date_columns")
        max_workers = base_config.max_workers
        if (value := derivation.get("max_workers")) is not None:
            max_workers = _coerce_int(value, key="derivation.max_workers")
        dataset_name = base_config.dataset_name
        if value := output.get("dataset_name"):
            dataset_name = str(value).upper()
        dataset_label = base_config.dataset_label
        if (value := output.get("dataset_label")) is not None:
            dataset_label = str(value)
        return DeriverConfig(
            start_date_field=start_date_field,
            date_columns=date_columns,
            max_workers=max_workers,
            dataset_name=dataset_name,
            dataset_label=dataset_label,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _split_columns(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _coerce_columns(value: object, *, key: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return _split_columns(value)
    if isinstance(value, list):
        return tuple(str(item).strip() for item in cast("list[object]", value))
    raise ValueError(f"{key} must be a list or string, got {type(value).__name__}")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer, got {value!r}") from exc
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
