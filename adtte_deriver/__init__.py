"""ADTTE deriver package.

Derives ADaM time-to-event (ADTTE) records for clinical-trial subjects:
for every subject and analysis parameter the earliest qualifying event or
censoring date is selected, then analysis durations, sequence numbers and
subject-level attributes are added.

Features:
- Declarative event and censoring sources with row filters
- Earliest-date selection with first-listed-wins tie-breaking
- AVAL (days) and ASEQ derivation, ADSL merge
- CSV loading and SAS transport (XPT) export
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("adtte-deriver")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from adtte_deriver.domain.entities import (
    EndpointDefinition,
    ParameterAttributes,
    SourceDefinition,
    censor_source,
    column_equals,
    event_source,
)
from adtte_deriver.domain.exceptions import (
    AmbiguousJoinError,
    FilterEvaluationError,
    MalformedInputError,
    TTEDerivationError,
)
from adtte_deriver.domain.services import (
    build_adtte,
    derive_param_tte,
    derive_var_obs_number,
    derive_vars_duration,
    merge_subject_attributes,
    standard_endpoints,
)

__all__ = [
    "__version__",
    # Sources
    "EndpointDefinition",
    "ParameterAttributes",
    "SourceDefinition",
    "censor_source",
    "column_equals",
    "event_source",
    "standard_endpoints",
    # Derivation
    "build_adtte",
    "derive_param_tte",
    "derive_var_obs_number",
    "derive_vars_duration",
    "merge_subject_attributes",
    # Errors
    "AmbiguousJoinError",
    "FilterEvaluationError",
    "MalformedInputError",
    "TTEDerivationError",
]
