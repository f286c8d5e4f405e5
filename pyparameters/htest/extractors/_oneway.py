"""One-way analysis of means, as produced by R's oneway.test()."""

from __future__ import annotations

import pandas as pd

from pyparameters.htest._common import HTest


def extract_oneway(htest: HTest) -> pd.DataFrame:
    return pd.DataFrame([{
        "F": htest.statistic_value,
        "df_num": htest.parameter_at(0),
        "df_denom": htest.parameter_at(1),
        "p": htest.p_value,
        "Method": htest.method,
    }])
