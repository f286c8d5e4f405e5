"""
Tests of proportions, as produced by R's prop.test().

Proportions are reported as percent strings, one per group, joined by
" / ". Two-group tests also report the absolute difference.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from pyparameters.htest._common import HTest

PERCENT_DIGITS = 2


def format_percent(x: float, digits: int = PERCENT_DIGITS) -> str:
    """Format a proportion as a percentage, e.g. 0.4 -> '40.00%'."""
    if np.isnan(x):
        return "NA"
    return f"{x * 100:.{digits}f}%"


def extract_prop(htest: HTest) -> pd.DataFrame:
    row = {
        "Proportion": " / ".join(format_percent(e) for e in htest.estimate),
    }
    if len(htest.estimate) == 2:
        row["Difference"] = format_percent(
            abs(htest.estimate[0] - htest.estimate[1])
        )
    if htest.conf_int is not None:
        row["CI_low"] = htest.ci_low
        row["CI_high"] = htest.ci_high

    row["Chi2"] = htest.statistic_value
    row["df"] = htest.parameter_at(0)
    row["Null_value"] = _null_value(htest)
    row["p"] = htest.p_value
    row["Method"] = htest.method
    return pd.DataFrame([row])


def _null_value(htest: HTest) -> float | str:
    """Single null proportion as a number; several joined like Proportion."""
    if len(htest.null_value) > 1:
        return " / ".join(f"{v:g}" for v in htest.null_value)
    return htest.null_value_at(0)
