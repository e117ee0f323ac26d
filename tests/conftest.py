import pandas as pd
import pytest


@pytest.fixture(autouse=True)
def _clear_deriver_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep configuration tests independent of the developer's shell."""
    for name in ("ADTTE_START_DATE", "ADTTE_DATE_COLUMNS", "ADTTE_MAX_WORKERS"):
        monkeypatch.delenv(name, raising=False)


def ts(value: str | None) -> pd.Timestamp:
    return pd.NaT if value is None else pd.Timestamp(value)


@pytest.fixture
def adsl() -> pd.DataFrame:
    """Three randomized subjects; S3 has no last-known-alive date."""
    return pd.DataFrame(
        {
            "STUDYID": ["CDISC01", "CDISC01", "CDISC01"],
            "USUBJID": ["S1", "S2", "S3"],
            "RANDDT": [ts("2021-01-01"), ts("2021-02-01"), ts("2021-03-01")],
            "LSTALVDT": [ts("2021-12-01"), ts("2021-08-01"), ts(None)],
            "ARM": ["Drug A", "Placebo", "Drug A"],
            "AGE": [64, 58, 71],
        }
    )


@pytest.fixture
def adrs() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "STUDYID": ["CDISC01"] * 5,
            "USUBJID": ["S1", "S1", "S1", "S2", "S2"],
            "PARAMCD": ["PD", "LSTA", "DEATH", "LSTA", "PD"],
            "AVALC": ["Y", "Y", "Y", "Y", "Y"],
            "ANL01FL": ["Y", "Y", "Y", "Y", None],
            "ADT": [
                ts("2021-05-01"),
                ts("2021-04-15"),
                ts("2021-10-01"),
                ts("2021-07-01"),
                ts("2021-03-01"),
            ],
        }
    )
