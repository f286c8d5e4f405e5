"""
Multiple testing correction for parameter p-values, matching R's p.adjust().

Implements holm, hochberg, bonferroni, BH (alias fdr), BY and none.
NaN p-values (parameters without standard errors) are left untouched
and do not count towards the number of comparisons.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyparameters.core.validation import check_array, check_choice

VALID_METHODS = ("holm", "hochberg", "bonferroni", "BH", "fdr", "BY", "none")


def p_adjust(p: ArrayLike, method: str = "holm") -> NDArray[np.floating]:
    """
    Adjust p-values for multiple comparisons.

    Parameters
    ----------
    p : array-like
        Vector of p-values.
    method : str
        One of VALID_METHODS. Default "holm".

    Returns
    -------
    ndarray
        Adjusted p-values, same length as input, clipped to [0, 1].
    """
    check_choice(method, VALID_METHODS, "p_adjust")
    result = check_array(p, "p").copy()

    valid = ~np.isnan(result)
    if method == "none" or not valid.any():
        return result

    pv = result[valid]
    n = len(pv)

    if method == "bonferroni":
        adjusted = pv * n
    elif method == "holm":
        adjusted = _step(pv, np.arange(n, 0, -1), ascending=True)
    elif method == "hochberg":
        adjusted = _step(pv, np.arange(n, 0, -1), ascending=False)
    elif method in ("BH", "fdr"):
        adjusted = _step(pv, n / np.arange(1, n + 1), ascending=False)
    else:
        cm = np.sum(1.0 / np.arange(1, n + 1))
        adjusted = _step(pv, cm * n / np.arange(1, n + 1), ascending=False)

    result[valid] = np.clip(adjusted, 0.0, 1.0)
    return result


def _step(pv: NDArray, multipliers: NDArray, ascending: bool) -> NDArray:
    """
    Scale sorted p-values and enforce monotonicity.

    multipliers[i] applies to the i-th smallest p-value. Step-down
    methods (holm) take a cumulative max from the smallest p-value up;
    step-up methods (hochberg, BH, BY) a cumulative min from the largest
    down.
    """
    order = np.argsort(pv, kind="stable")
    scaled = pv[order] * multipliers
    if ascending:
        scaled = np.maximum.accumulate(scaled)
    else:
        scaled = np.minimum.accumulate(scaled[::-1])[::-1]
    out = np.empty_like(scaled)
    out[order] = scaled
    return out
