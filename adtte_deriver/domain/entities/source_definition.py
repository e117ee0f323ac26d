"""Declarative event and censoring sources.

A source names the table a candidate date comes from, which rows qualify,
which column carries the date, and the descriptive values stamped onto the
output record when that source supplies the earliest date.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .predicates import RowPredicate, describe_predicate


class SourceKind(StrEnum):
    EVENT = "event"
    CENSOR = "censor"


@dataclass(frozen=True, slots=True)
class EventAttributes:
    evntdesc: str
    srcdom: str
    srcvar: str

    def __post_init__(self) -> None:
        for name in ("evntdesc", "srcdom", "srcvar"):
            if not str(getattr(self, name) or "").strip():
                raise ValueError(f"{name} must not be empty")


@dataclass(frozen=True, slots=True)
class CensorAttributes(EventAttributes):
    cnsdtdsc: str | None = None


@dataclass(frozen=True, slots=True)
class SourceDefinition:
    """One candidate source for a time-to-event parameter.

    Attributes:
        kind: Whether rows from this source are events or censorings
        dataset_name: Key of the source table (e.g. 'ADSL', 'ADRS')
        date: Column holding the candidate date
        predicate: Optional row filter; ``None`` means every row qualifies
        attributes: Values copied onto the record this source produces
    """

    kind: SourceKind
    dataset_name: str
    date: str
    attributes: EventAttributes
    predicate: RowPredicate | None = None

    def __post_init__(self) -> None:
        if not self.dataset_name.strip():
            raise ValueError("dataset_name must not be empty")
        if not self.date.strip():
            raise ValueError("date must not be empty")
        is_censor_attrs = isinstance(self.attributes, CensorAttributes)
        if self.kind is SourceKind.EVENT and is_censor_attrs:
            raise ValueError(
                f"Event source on {self.dataset_name}.{self.date} cannot carry censoring attributes"
            )
        if self.kind is SourceKind.CENSOR and not is_censor_attrs:
            raise ValueError(
                f"Censor source on {self.dataset_name}.{self.date} requires CensorAttributes"
            )

    @property
    def is_event(self) -> bool:
        return self.kind is SourceKind.EVENT

    @property
    def table_key(self) -> str:
        return self.dataset_name.upper()

    @property
    def censor_description(self) -> str | None:
        if isinstance(self.attributes, CensorAttributes):
            return self.attributes.cnsdtdsc
        return None

    def label(self) -> str:
        return f"{self.kind.value}:{self.attributes.evntdesc} ({self.table_key}.{self.date})"

    def describe_filter(self) -> str:
        return describe_predicate(self.predicate)


def event_source(
    *,
    dataset_name: str,
    date: str,
    evntdesc: str,
    srcdom: str,
    srcvar: str,
    filter: RowPredicate | None = None,
) -> SourceDefinition:
    return SourceDefinition(
        kind=SourceKind.EVENT,
        dataset_name=dataset_name,
        date=date,
        attributes=EventAttributes(evntdesc=evntdesc, srcdom=srcdom, srcvar=srcvar),
        predicate=filter,
    )


def censor_source(
    *,
    dataset_name: str,
    date: str,
    evntdesc: str,
    srcdom: str,
    srcvar: str,
    cnsdtdsc: str | None = None,
    filter: RowPredicate | None = None,
) -> SourceDefinition:
    return SourceDefinition(
        kind=SourceKind.CENSOR,
        dataset_name=dataset_name,
        date=date,
        attributes=CensorAttributes(
            evntdesc=evntdesc, srcdom=srcdom, srcvar=srcvar, cnsdtdsc=cnsdtdsc
        ),
        predicate=filter,
    )
