"""File-based endpoint configuration.

Endpoints read from TOML describe filters as ``{COLUMN = value}`` tables,
which are turned into :class:`ColumnEquals` predicates.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from .endpoint import EndpointDefinition, ParameterAttributes
from .predicates import ColumnEquals
from .source_definition import SourceDefinition, censor_source, event_source

FilterValue = str | int | float | bool


class SourceSpec(BaseModel):
    dataset: str = Field(min_length=1)
    date: str = Field(min_length=1)
    evntdesc: str = Field(min_length=1)
    srcdom: str = Field(min_length=1)
    srcvar: str = Field(min_length=1)
    cnsdtdsc: str | None = None
    filter: dict[str, FilterValue] = Field(default_factory=dict)

    def to_event(self) -> SourceDefinition:
        return event_source(
            dataset_name=self.dataset,
            date=self.date,
            evntdesc=self.evntdesc,
            srcdom=self.srcdom,
            srcvar=self.srcvar,
            filter=self._predicate(),
        )

    def to_censor(self) -> SourceDefinition:
        return censor_source(
            dataset_name=self.dataset,
            date=self.date,
            evntdesc=self.evntdesc,
            srcdom=self.srcdom,
            srcvar=self.srcvar,
            cnsdtdsc=self.cnsdtdsc,
            filter=self._predicate(),
        )

    def _predicate(self) -> ColumnEquals | None:
        return ColumnEquals(dict(self.filter)) if self.filter else None


class EndpointSpec(BaseModel):
    paramcd: str = Field(min_length=1, max_length=8)
    param: str = Field(min_length=1)
    start_date: str | None = None
    events: list[SourceSpec] = Field(default_factory=list)
    censors: list[SourceSpec] = Field(default_factory=list)

    @field_validator("paramcd")
    @classmethod
    def _upper_paramcd(cls, value: str) -> str:
        return value.strip().upper()

    @model_validator(mode="after")
    def _check_sources(self) -> EndpointSpec:
        if not self.events and not self.censors:
            raise ValueError(f"{self.paramcd}: at least one event or censor is required")
        for spec in self.events:
            if spec.cnsdtdsc is not None:
                raise ValueError(
                    f"{self.paramcd}: event {spec.evntdesc!r} must not set cnsdtdsc"
                )
        for spec in self.censors:
            if not spec.cnsdtdsc:
                raise ValueError(
                    f"{self.paramcd}: censor {spec.evntdesc!r} requires cnsdtdsc"
                )
        return self

    def to_definition(self, default_start_date: str = "RANDDT") -> EndpointDefinition:
        return EndpointDefinition(
            parameter=ParameterAttributes(paramcd=self.paramcd, param=self.param),
            event_sources=tuple(spec.to_event() for spec in self.events),
            censor_sources=tuple(spec.to_censor() for spec in self.censors),
            start_date=self.start_date or default_start_date,
        )


class EndpointConfig(BaseModel):
    endpoints: list[EndpointSpec] = Field(min_length=1)

    @model_validator(mode="after")
    def _unique_paramcd(self) -> EndpointConfig:
        seen: set[str] = set()
        for endpoint in self.endpoints:
            if endpoint.paramcd in seen:
                raise ValueError(f"Duplicate endpoint PARAMCD: {endpoint.paramcd}")
            seen.add(endpoint.paramcd)
        return self

    def to_definitions(
        self, default_start_date: str = "RANDDT"
    ) -> tuple[EndpointDefinition, ...]:
        return tuple(
            endpoint.to_definition(default_start_date) for endpoint in self.endpoints
        )
