from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ...constants import CensorFlag, Columns

if TYPE_CHECKING:
    from .endpoint import ParameterAttributes
    from .source_definition import SourceDefinition


@dataclass(frozen=True, slots=True)
class Candidate:
    date: Any
    source: SourceDefinition

    @property
    def is_event(self) -> bool:
        return self.source.is_event

    @property
    def cnsr(self) -> int:
        return CensorFlag.EVENT if self.is_event else CensorFlag.CENSORED


@dataclass(slots=True)
class DerivedRecord:
    studyid: Any
    usubjid: Any
    adt: Any
    evntdesc: str
    srcdom: str
    srcvar: str
    cnsr: int
    cnsdtdsc: str | None
    startdt: Any
    paramcd: str
    param: str

    @classmethod
    def from_candidate(
        cls,
        candidate: Candidate,
        *,
        studyid: Any,
        usubjid: Any,
        startdt: Any,
        parameter: ParameterAttributes,
    ) -> DerivedRecord:
        attributes = candidate.source.attributes
        return cls(
            studyid=studyid,
            usubjid=usubjid,
            adt=candidate.date,
            evntdesc=attributes.evntdesc,
            srcdom=attributes.srcdom,
            srcvar=attributes.srcvar,
            cnsr=candidate.cnsr,
            cnsdtdsc=None if candidate.is_event else candidate.source.censor_description,
            startdt=startdt,
            paramcd=parameter.paramcd,
            param=parameter.param,
        )

    def to_row(self) -> dict[str, Any]:
        return {
            Columns.STUDYID: self.studyid,
            Columns.USUBJID: self.usubjid,
            Columns.ADT: self.adt,
            Columns.EVNTDESC: self.evntdesc,
            Columns.SRCDOM: self.srcdom,
            Columns.SRCVAR: self.srcvar,
            Columns.CNSR: self.cnsr,
            Columns.CNSDTDSC: self.cnsdtdsc,
            Columns.STARTDT: self.startdt,
            Columns.PARAMCD: self.paramcd,
            Columns.PARAM: self.param,
        }
