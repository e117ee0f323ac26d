"""Unit tests for event/censor source definitions."""

import pytest

from adtte_deriver.domain.entities import (
    CensorAttributes,
    EndpointDefinition,
    EventAttributes,
    ParameterAttributes,
    SourceDefinition,
    SourceKind,
    censor_source,
    column_equals,
    event_source,
)


class TestSourceDefinition:
    """Tests for SourceDefinition construction and validation."""

    def test_event_source_factory(self):
        """event_source builds an event with plain event attributes."""
        source = event_source(
            dataset_name="adrs",
            filter=column_equals(PARAMCD="DEATH"),
            date="ADT",
            evntdesc="Death",
            srcdom="ADRS",
            srcvar="ADT",
        )

        assert source.kind is SourceKind.EVENT
        assert source.is_event
        assert source.table_key == "ADRS"
        assert source.censor_description is None
        assert not isinstance(source.attributes, CensorAttributes)

    def test_censor_source_factory(self):
        """censor_source carries the censoring description."""
        source = censor_source(
            dataset_name="ADSL",
            date="LSTALVDT",
            evntdesc="Last Known Alive",
            cnsdtdsc="Last Known Alive Date",
            srcdom="ADSL",
            srcvar="LSTALVDT",
        )

        assert source.kind is SourceKind.CENSOR
        assert not source.is_event
        assert source.predicate is None
        assert source.censor_description == "Last Known Alive Date"
        assert source.attributes.evntdesc == "Last Known Alive"

    def test_event_rejects_censor_attributes(self):
        """An event source cannot carry a censoring description."""
        with pytest.raises(ValueError, match="cannot carry censoring attributes"):
            SourceDefinition(
                kind=SourceKind.EVENT,
                dataset_name="ADRS",
                date="ADT",
                attributes=CensorAttributes("Death", "ADRS", "ADT", "Oops"),
            )

    def test_censor_requires_censor_attributes(self):
        """A censor source needs CensorAttributes."""
        with pytest.raises(ValueError, match="requires CensorAttributes"):
            SourceDefinition(
                kind=SourceKind.CENSOR,
                dataset_name="ADSL",
                date="RANDDT",
                attributes=EventAttributes("Randomization", "ADSL", "RANDDT"),
            )

    def test_missing_attribute_is_rejected_at_construction(self):
        """Empty descriptive values fail when the source is defined."""
        with pytest.raises(ValueError, match="srcdom must not be empty"):
            event_source(
                dataset_name="ADRS", date="ADT", evntdesc="Death", srcdom="", srcvar="ADT"
            )

    def test_source_is_immutable(self):
        """Sources are frozen."""
        source = event_source(
            dataset_name="ADRS", date="ADT", evntdesc="Death", srcdom="ADRS", srcvar="ADT"
        )

        with pytest.raises(Exception):  # FrozenInstanceError
            source.date = "ASTDT"

    def test_describe_filter(self):
        """Filters render readably; no filter means all rows."""
        filtered = event_source(
            dataset_name="ADRS",
            filter=column_equals(PARAMCD="PD", ANL01FL="Y"),
            date="ADT",
            evntdesc="Progressive Disease",
            srcdom="ADRS",
            srcvar="ADT",
        )
        unfiltered = censor_source(
            dataset_name="ADSL",
            date="RANDDT",
            evntdesc="Randomization Date",
            cnsdtdsc="Randomization Date",
            srcdom="ADSL",
            srcvar="RANDDT",
        )

        assert filtered.describe_filter() == "PARAMCD == 'PD' & ANL01FL == 'Y'"
        assert unfiltered.describe_filter() == "(all rows)"


class TestEndpointDefinition:
    """Tests for EndpointDefinition validation."""

    def _event(self):
        return event_source(
            dataset_name="ADRS", date="ADT", evntdesc="Death", srcdom="ADRS", srcvar="ADT"
        )

    def _censor(self):
        return censor_source(
            dataset_name="ADSL",
            date="RANDDT",
            evntdesc="Randomization Date",
            cnsdtdsc="Randomization Date",
            srcdom="ADSL",
            srcvar="RANDDT",
        )

    def test_valid_endpoint(self):
        """Endpoints expose their parameter code and source tables."""
        endpoint = EndpointDefinition(
            parameter=ParameterAttributes("OS", "Overall Survival"),
            event_sources=(self._event(),),
            censor_sources=(self._censor(),),
        )

        assert endpoint.paramcd == "OS"
        assert endpoint.start_date == "RANDDT"
        assert endpoint.table_keys() == {"ADRS", "ADSL"}

    def test_censor_in_event_list_rejected(self):
        """Sources must sit in the list matching their kind."""
        with pytest.raises(ValueError, match="listed as an event source"):
            EndpointDefinition(
                parameter=ParameterAttributes("OS", "Overall Survival"),
                event_sources=(self._censor(),),
                censor_sources=(),
            )

    def test_endpoint_without_sources_rejected(self):
        """At least one source is required."""
        with pytest.raises(ValueError, match="at least one source"):
            EndpointDefinition(
                parameter=ParameterAttributes("OS", "Overall Survival"),
                event_sources=(),
                censor_sources=(),
            )

    def test_parameter_attributes_require_code_and_label(self):
        """Parameter code and label are both mandatory."""
        with pytest.raises(ValueError, match="paramcd"):
            ParameterAttributes("", "Overall Survival")
        with pytest.raises(ValueError, match="param must not be empty"):
            ParameterAttributes("OS", " ")
