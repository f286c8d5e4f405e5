"""
Association-strength effect sizes for contingency tables.

Provides Cramer's V and phi with optional bias correction (Bergsma 2013)
and confidence intervals obtained by inverting the noncentral
chi-squared distribution.

Supports:
- r x c contingency tables (test of independence)
- 1D count vectors (goodness of fit against a uniform expectation)
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike, NDArray
from scipy import optimize
from scipy import stats as sp_stats

from pyparameters.core.exceptions import ValidationError
from pyparameters.core.validation import check_conf_level

# Noncentrality search stops doubling past this value.
_MAX_NCP = 1e8


def cramers_v(
    observed: ArrayLike,
    ci: float | None = 0.95,
    adjust: bool = False,
) -> pd.DataFrame:
    """
    Cramer's V for a contingency table.

    Parameters
    ----------
    observed : array-like
        2D contingency table or 1D vector of counts.
    ci : float or None
        Confidence level of the interval. None skips the interval.
    adjust : bool
        If True, apply Bergsma's bias correction; the column is then
        named "V_adjusted".

    Returns
    -------
    DataFrame
        One row with columns [V | V_adjusted, CI, CI_low, CI_high]
        (only the estimate column when ci is None).
    """
    table = _check_table(observed)
    chisq, df = _chisq(table)
    n = float(table.sum())
    shape = _shape(table)

    def transform(x: float) -> float:
        if adjust:
            return _v_adjusted(x, n, shape)
        return _v(x, n, shape)

    name = "V_adjusted" if adjust else "V"
    return _effect_frame(name, chisq, df, transform, ci, upper=1.0)


def phi(
    observed: ArrayLike,
    ci: float | None = 0.95,
    adjust: bool = False,
) -> pd.DataFrame:
    """
    Phi coefficient for a contingency table.

    Parameters
    ----------
    observed : array-like
        2D contingency table or 1D vector of counts.
    ci : float or None
        Confidence level of the interval. None skips the interval.
    adjust : bool
        If True, apply the bias correction; the column is then named
        "phi_adjusted".

    Returns
    -------
    DataFrame
        One row with columns [phi | phi_adjusted, CI, CI_low, CI_high]
        (only the estimate column when ci is None).
    """
    table = _check_table(observed)
    chisq, df = _chisq(table)
    n = float(table.sum())
    shape = _shape(table)

    def transform(x: float) -> float:
        phi2 = x / n
        if adjust:
            phi2 = max(0.0, phi2 - _n_cells_df(shape) / (n - 1.0))
        return float(np.sqrt(phi2))

    name = "phi_adjusted" if adjust else "phi"
    return _effect_frame(name, chisq, df, transform, ci, upper=None)


def _check_table(observed: ArrayLike) -> NDArray[np.floating[Any]]:
    try:
        table = np.asarray(observed, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"observed: cannot convert to numeric array: {e}") from e
    if table.ndim not in (1, 2):
        raise ValidationError(
            f"observed: expected 1D or 2D counts, got {table.ndim}D with shape {table.shape}"
        )
    if np.any(table < 0) or not np.all(np.isfinite(table)):
        raise ValidationError("observed: counts must be finite and non-negative")
    if table.sum() <= 1:
        raise ValidationError(f"observed: need more than 1 observation, got {table.sum():g}")
    return table


def _chisq(table: NDArray[np.floating[Any]]) -> tuple[float, int]:
    """
    Uncorrected Pearson chi-squared statistic and its df.

    The statistic is NaN for degenerate tables: a single cell or row
    (df 0), or an empty row or column (zero expected counts).
    """
    if table.ndim == 1:
        df = table.size - 1
        if df == 0:
            return np.nan, df
        result = sp_stats.chisquare(table)
        return float(result[0]), df
    nrow, ncol = table.shape
    df = (nrow - 1) * (ncol - 1)
    if df == 0 or np.any(table.sum(axis=0) == 0) or np.any(table.sum(axis=1) == 0):
        return np.nan, df
    chisq, _, dof, _ = sp_stats.chi2_contingency(table, correction=False)
    return float(chisq), int(dof)


def _shape(table: NDArray[np.floating[Any]]) -> tuple[int, int]:
    """(rows, cols); a count vector behaves like a 1 x k table."""
    if table.ndim == 1:
        return 1, table.size
    return table.shape[0], table.shape[1]


def _n_cells_df(shape: tuple[int, int]) -> float:
    nrow, ncol = shape
    if nrow == 1:
        return float(ncol - 1)
    return float((nrow - 1) * (ncol - 1))


def _v(chisq: float, n: float, shape: tuple[int, int]) -> float:
    nrow, ncol = shape
    k = ncol if nrow == 1 else min(nrow, ncol)
    return float(np.sqrt(chisq / (n * (k - 1))))


def _v_adjusted(chisq: float, n: float, shape: tuple[int, int]) -> float:
    nrow, ncol = shape
    phi2 = max(0.0, chisq / n - _n_cells_df(shape) / (n - 1.0))
    c_adj = ncol - (ncol - 1.0) ** 2 / (n - 1.0)
    if nrow == 1:
        k_adj = c_adj
    else:
        r_adj = nrow - (nrow - 1.0) ** 2 / (n - 1.0)
        k_adj = min(r_adj, c_adj)
    return float(np.sqrt(phi2 / (k_adj - 1.0)))


def _effect_frame(name, chisq, df, transform, ci, upper) -> pd.DataFrame:
    defined = not np.isnan(chisq)
    row = {name: transform(chisq) if defined else np.nan}
    if ci is not None:
        ci = check_conf_level(ci, "ci")
        if defined:
            ncp_low, ncp_high = ncp_interval(chisq, df, ci)
            low, high = transform(ncp_low), transform(ncp_high)
            if upper is not None:
                low, high = min(low, upper), min(high, upper)
        else:
            low = high = np.nan
        row.update({"CI": ci, "CI_low": low, "CI_high": high})
    return pd.DataFrame([row])


def ncp_interval(chisq: float, df: int, conf_level: float) -> tuple[float, float]:
    """
    Confidence interval for the chi-squared noncentrality parameter.

    Finds the noncentralities at which the observed statistic sits at the
    upper and lower alpha/2 tail of the noncentral chi-squared
    distribution.
    """
    alpha = 1.0 - conf_level
    return (
        _ncp_bound(chisq, df, 1.0 - alpha / 2.0),
        _ncp_bound(chisq, df, alpha / 2.0),
    )


def _ncp_bound(chisq: float, df: int, prob: float) -> float:
    # The cdf at the observed statistic decreases as ncp grows.
    def excess(ncp: float) -> float:
        return _ncx2_cdf(chisq, df, ncp) - prob

    if excess(0.0) <= 0.0:
        return 0.0
    hi = max(1.0, chisq)
    while excess(hi) > 0.0:
        hi *= 2.0
        if hi > _MAX_NCP:
            return float("inf")
    return float(optimize.brentq(excess, 0.0, hi))


def _ncx2_cdf(x: float, df: int, ncp: float) -> float:
    if ncp == 0.0:
        return float(sp_stats.chi2.cdf(x, df))
    return float(sp_stats.ncx2.cdf(x, df, ncp))
