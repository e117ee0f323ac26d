"""Standard oncology event and censoring sources.

These follow the usual ADaM ADTTE conventions for Overall Survival and
Progression-Free Survival derived from ADSL and an oncology response
dataset (ADRS).
"""

from __future__ import annotations

from ..entities.endpoint import EndpointDefinition, ParameterAttributes
from ..entities.predicates import column_equals
from ..entities.source_definition import censor_source, event_source

death_event = event_source(
    dataset_name="ADRS",
    filter=column_equals(PARAMCD="DEATH", AVALC="Y", ANL01FL="Y"),
    date="ADT",
    evntdesc="Death",
    srcdom="ADRS",
    srcvar="ADT",
)

pd_event = event_source(
    dataset_name="ADRS",
    filter=column_equals(PARAMCD="PD", ANL01FL="Y"),
    date="ADT",
    evntdesc="Progressive Disease",
    srcdom="ADRS",
    srcvar="ADT",
)

lastalive_censor = censor_source(
    dataset_name="ADSL",
    date="LSTALVDT",
    evntdesc="Last Known Alive",
    cnsdtdsc="Last Known Alive Date",
    srcdom="ADSL",
    srcvar="LSTALVDT",
)

lasta_censor = censor_source(
    dataset_name="ADRS",
    filter=column_equals(PARAMCD="LSTA", ANL01FL="Y"),
    date="ADT",
    evntdesc="Progression Free Alive",
    cnsdtdsc="Last Tumor Assessment",
    srcdom="ADRS",
    srcvar="ADT",
)

rand_censor = censor_source(
    dataset_name="ADSL",
    date="RANDDT",
    evntdesc="Randomization Date",
    cnsdtdsc="Randomization Date",
    srcdom="ADSL",
    srcvar="RANDDT",
)

OVERALL_SURVIVAL = EndpointDefinition(
    parameter=ParameterAttributes(paramcd="OS", param="Overall Survival"),
    event_sources=(death_event,),
    censor_sources=(lastalive_censor, rand_censor),
    start_date="RANDDT",
)

PROGRESSION_FREE_SURVIVAL = EndpointDefinition(
    parameter=ParameterAttributes(paramcd="PFS", param="Progression-Free Survival"),
    event_sources=(pd_event, death_event),
    censor_sources=(lasta_censor, rand_censor),
    start_date="RANDDT",
)


def standard_endpoints() -> tuple[EndpointDefinition, ...]:
    return (OVERALL_SURVIVAL, PROGRESSION_FREE_SURVIVAL)
