from __future__ import annotations

from dataclasses import dataclass

from .source_definition import SourceDefinition, SourceKind


@dataclass(frozen=True, slots=True)
class ParameterAttributes:
    paramcd: str
    param: str

    def __post_init__(self) -> None:
        if not self.paramcd.strip():
            raise ValueError("paramcd must not be empty")
        if not self.param.strip():
            raise ValueError("param must not be empty")


@dataclass(frozen=True, slots=True)
class EndpointDefinition:
    """Everything needed to derive one analysis parameter.

    Event sources are always evaluated before censor sources. Because the
    earliest-date selection keeps the first candidate among equal dates,
    this order is what makes an event win over a censoring on the same day.
    """

    parameter: ParameterAttributes
    event_sources: tuple[SourceDefinition, ...]
    censor_sources: tuple[SourceDefinition, ...]
    start_date: str = "RANDDT"

    def __post_init__(self) -> None:
        if not self.event_sources and not self.censor_sources:
            raise ValueError(f"{self.parameter.paramcd}: at least one source is required")
        for source in self.event_sources:
            if source.kind is not SourceKind.EVENT:
                raise ValueError(
                    f"{self.parameter.paramcd}: {source.label()} listed as an event source"
                )
        for source in self.censor_sources:
            if source.kind is not SourceKind.CENSOR:
                raise ValueError(
                    f"{self.parameter.paramcd}: {source.label()} listed as a censor source"
                )

    @property
    def paramcd(self) -> str:
        return self.parameter.paramcd

    def table_keys(self) -> set[str]:
        return {s.table_key for s in (*self.event_sources, *self.censor_sources)}
