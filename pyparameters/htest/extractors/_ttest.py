"""
t-tests, as produced by R's t.test().

The label decides the layout:
- "x and y": two samples with their own names
- "y by g": grouped samples (formula interface), one or two estimates
- anything else: one-sample test against mu
"""

from __future__ import annotations

import pandas as pd

from pyparameters.htest._common import HTest
from pyparameters.htest._parsing import (
    AND_SEPARATOR,
    BY_SEPARATOR,
    split_label,
    ttest_variant,
)


def extract_ttest(htest: HTest) -> pd.DataFrame:
    """One row of means, their difference and the test statistics."""
    variant = ttest_variant(htest.data_name)

    if variant == "named":
        parameter1, parameter2 = split_label(htest.data_name, AND_SEPARATOR)
        mean1 = htest.estimate_at(0)
        mean2 = htest.estimate_at(1)
        row = {
            "Parameter1": parameter1,
            "Parameter2": parameter2,
            "Mean_Parameter1": mean1,
            "Mean_Parameter2": mean2,
            "Difference": mean1 - mean2,
        }
    elif variant == "grouped":
        parameter, group = split_label(htest.data_name, BY_SEPARATOR)
        row = {"Parameter": parameter, "Group": group}
        if len(htest.estimate) == 1:
            row["Mean_Difference"] = htest.estimate_at(0)
        else:
            mean1 = htest.estimate_at(0)
            mean2 = htest.estimate_at(1)
            row["Mean_Group1"] = mean1
            row["Mean_Group2"] = mean2
            # group2 - group1, the reverse of the "x and y" layout
            row["Difference"] = mean2 - mean1
    else:
        mean = htest.estimate_at(0)
        mu = htest.null_value_at(0)
        row = {
            "Parameter": htest.data_name,
            "Mean": mean,
            "mu": mu,
            "Difference": mean - mu,
        }

    row.update({
        "t": htest.statistic_value,
        "df": htest.parameter_at(0),
        "p": htest.p_value,
        "CI_low": htest.ci_low,
        "CI_high": htest.ci_high,
        "Method": htest.method,
    })
    return pd.DataFrame([row])
