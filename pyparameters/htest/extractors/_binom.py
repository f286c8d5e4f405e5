"""Exact binomial tests, as produced by R's binom.test()."""

from __future__ import annotations

import pandas as pd

from pyparameters.htest._common import HTest


def extract_binom(htest: HTest) -> pd.DataFrame:
    """One row: estimated probability, CI, successes, trials and H0 value."""
    return pd.DataFrame([{
        "Probability": htest.estimate_at(0),
        "CI_low": htest.ci_low,
        "CI_high": htest.ci_high,
        "Success": htest.statistic_value,
        "Trials": htest.parameter_at(0),
        "Null_value": htest.null_value_at(0),
        "p": htest.p_value,
        "Method": htest.method,
    }])
