"""
Correlation tests, as produced by R's cor.test().

Supports:
- Pearson's product-moment correlation (r, t, df, CI)
- Spearman's rank correlation (rho, S)
- Kendall's rank correlation (tau, z)
"""

from __future__ import annotations

import pandas as pd

from pyparameters.htest._common import HTest
from pyparameters.htest._parsing import AND_SEPARATOR, split_label, correlation_variant


def extract_correlation(htest: HTest) -> pd.DataFrame:
    """One row: the two correlated variables and the test statistics."""
    parameter1, parameter2 = split_label(htest.data_name, AND_SEPARATOR)
    row = {"Parameter1": parameter1, "Parameter2": parameter2}

    variant = correlation_variant(htest.method)
    if variant == "chi2":
        row["Chi2"] = htest.statistic_value
        row["df"] = htest.parameter_at(0)
        row["p"] = htest.p_value
        row["Method"] = "Pearson"
    elif variant == "pearson":
        row["r"] = htest.estimate_at(0)
        row["t"] = htest.statistic_value
        row["df"] = htest.parameter_at(0)
        row["p"] = htest.p_value
        row["CI_low"] = htest.ci_low
        row["CI_high"] = htest.ci_high
        row["Method"] = "Pearson"
    elif variant == "spearman":
        row["rho"] = htest.estimate_at(0)
        row["S"] = htest.statistic_value
        row["df"] = htest.parameter_at(0)
        row["p"] = htest.p_value
        row["Method"] = "Spearman"
    else:
        row["tau"] = htest.estimate_at(0)
        row["z"] = htest.statistic_value
        row["df"] = htest.parameter_at(0)
        row["p"] = htest.p_value
        row["Method"] = "Kendall"

    return pd.DataFrame([row])
