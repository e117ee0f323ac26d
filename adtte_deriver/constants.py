from typing import ClassVar


class Columns:
    STUDYID = "STUDYID"
    USUBJID = "USUBJID"
    ADT = "ADT"
    EVNTDESC = "EVNTDESC"
    SRCDOM = "SRCDOM"
    SRCVAR = "SRCVAR"
    CNSR = "CNSR"
    CNSDTDSC = "CNSDTDSC"
    STARTDT = "STARTDT"
    PARAMCD = "PARAMCD"
    PARAM = "PARAM"
    AVAL = "AVAL"
    ASEQ = "ASEQ"
    DERIVED: ClassVar[tuple[str, ...]] = (
        "STUDYID",
        "USUBJID",
        "ADT",
        "EVNTDESC",
        "SRCDOM",
        "SRCVAR",
        "CNSR",
        "CNSDTDSC",
        "STARTDT",
        "PARAMCD",
        "PARAM",
    )
    SUBJECT_KEYS: ClassVar[tuple[str, ...]] = ("STUDYID", "USUBJID")


class Defaults:
    START_DATE_FIELD = "RANDDT"
    DATE_COLUMNS: ClassVar[tuple[str, ...]] = ("RANDDT", "LSTALVDT", "ADT")
    MAX_WORKERS = 1
    DATASET_NAME = "ADTTE"
    DATASET_LABEL = "Time-to-Event Analysis Dataset"
    SUBJECT_TABLE = "ADSL"


class Constraints:
    XPT_MAX_LABEL_LENGTH = 40
    XPT_MAX_NAME_LENGTH = 8


class CensorFlag:
    EVENT = 0
    CENSORED = 1


class VariableLabels:
    LABELS: ClassVar[dict[str, str]] = {
        "STUDYID": "Study Identifier",
        "USUBJID": "Unique Subject Identifier",
        "ADT": "Analysis Date",
        "EVNTDESC": "Event or Censoring Description",
        "SRCDOM": "Source Data",
        "SRCVAR": "Source Variable",
        "CNSR": "Censor",
        "CNSDTDSC": "Censor Date Description",
        "STARTDT": "Time-to-Event Origin Date for Subject",
        "PARAMCD": "Parameter Code",
        "PARAM": "Parameter",
        "AVAL": "Analysis Value",
        "ASEQ": "Analysis Sequence Number",
    }
