"""Chi-squared tests, as produced by R's chisq.test() and mcnemar.test()."""

from __future__ import annotations

import pandas as pd

from pyparameters.htest._common import HTest


def extract_chi2(htest: HTest) -> pd.DataFrame:
    """One row: Chi2, df, p, Method. Effect sizes are added by the caller."""
    return pd.DataFrame([{
        "Chi2": htest.statistic_value,
        "df": htest.parameter_at(0),
        "p": htest.p_value,
        "Method": htest.method,
    }])
