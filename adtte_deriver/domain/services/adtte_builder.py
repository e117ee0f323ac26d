"""Assemble a complete ADTTE dataset from endpoint definitions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ...constants import Columns
from .duration import derive_vars_duration
from .sequence import derive_var_obs_number
from .subject_merge import merge_subject_attributes
from .tte_derivation import derive_endpoint, stack_parameters

if TYPE_CHECKING:
    import pandas as pd

    from ..entities.endpoint import EndpointDefinition


def _empty_counts() -> dict[str, int]:
    return {}


@dataclass(slots=True)
class ADTTEBuildResult:
    data: pd.DataFrame
    parameter_counts: dict[str, int] = field(default_factory=_empty_counts)
    subject_count: int = 0

    def dropped_subjects(self, paramcd: str) -> int:
        return self.subject_count - self.parameter_counts.get(paramcd, 0)


def build_adtte(
    dataset_adsl: pd.DataFrame,
    endpoints: Sequence[EndpointDefinition],
    source_datasets: Mapping[str, pd.DataFrame],
    *,
    max_workers: int = 1,
) -> ADTTEBuildResult:
    """Derive every endpoint, stack them and finish the dataset.

    Parameters are stacked in the order given, then AVAL, ASEQ (within
    STUDYID/USUBJID ordered by PARAMCD) and the subject-level merge are
    applied. Any derivation error propagates unchanged.
    """
    if not endpoints:
        raise ValueError("At least one endpoint is required")
    counts: dict[str, int] = {}
    frames: list[pd.DataFrame] = []
    for endpoint in endpoints:
        frame = derive_endpoint(
            dataset_adsl, endpoint, source_datasets, max_workers=max_workers
        )
        counts[endpoint.paramcd] = len(frame)
        frames.append(frame)
    adtte = stack_parameters(frames)
    adtte = derive_vars_duration(
        adtte, new_var=Columns.AVAL, start_date=Columns.STARTDT, end_date=Columns.ADT
    )
    adtte = derive_var_obs_number(
        adtte, by_vars=Columns.SUBJECT_KEYS, order=(Columns.PARAMCD,)
    )
    adtte = merge_subject_attributes(adtte, dataset_adsl, by_vars=Columns.SUBJECT_KEYS)
    return ADTTEBuildResult(
        data=adtte, parameter_counts=counts, subject_count=len(dataset_adsl)
    )
