"""Domain services.

Derivation steps that operate on pandas tables and domain entities.
"""

from .adtte_builder import ADTTEBuildResult, build_adtte
from .candidate_collector import collect_candidates
from .duration import derive_vars_duration
from .earliest_selector import select_earliest
from .grouping import SubjectIndex, build_subject_indexes, group_positions
from .sequence import derive_var_obs_number
from .standard_endpoints import standard_endpoints
from .subject_merge import merge_subject_attributes
from .tte_derivation import derive_endpoint, derive_param_tte, stack_parameters

__all__ = [
    "ADTTEBuildResult",
    "SubjectIndex",
    "build_adtte",
    "build_subject_indexes",
    "collect_candidates",
    "derive_endpoint",
    "derive_param_tte",
    "derive_var_obs_number",
    "derive_vars_duration",
    "group_positions",
    "merge_subject_attributes",
    "select_earliest",
    "stack_parameters",
    "standard_endpoints",
]
