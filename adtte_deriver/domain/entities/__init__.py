"""Domain entities for time-to-event derivation."""

from .endpoint import EndpointDefinition, ParameterAttributes
from .predicates import RowPredicate, all_of, column_equals
from .records import Candidate, DerivedRecord
from .source_definition import (
    CensorAttributes,
    EventAttributes,
    SourceDefinition,
    SourceKind,
    censor_source,
    event_source,
)

__all__ = [
    "Candidate",
    "CensorAttributes",
    "DerivedRecord",
    "EndpointDefinition",
    "EventAttributes",
    "ParameterAttributes",
    "RowPredicate",
    "SourceDefinition",
    "SourceKind",
    "all_of",
    "censor_source",
    "column_equals",
    "event_source",
]
