"""
Parameter extraction for multi-component models.

Provides model_parameters_generic() and the single-slice helpers
get_parameters(), standard_error(), ci() and p_value(). Models are read
through the adapter registry (see adapters.py); inference is Wald-type,
using Student's t when the model reports residual degrees of freedom.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
import pandas as pd
from scipy import stats as sp_stats

from pyparameters.core.exceptions import ExtractionNotImplementedError, ValidationError
from pyparameters.core.options import FormatOptions, attach_attributes
from pyparameters.core.table import ParameterTable
from pyparameters.core.validation import check_conf_level
from pyparameters.generic._common import DISPERSION, resolve_component
from pyparameters.generic._merge import (
    detect_response_levels,
    finalize_columns,
    merge_key,
    merge_slices,
)
from pyparameters.generic._p_adjust import p_adjust as _p_adjust
from pyparameters.generic.adapters import get_adapter

COLUMN_ORDER = (
    "Parameter", "Coefficient", "SE", "CI_low", "CI_high",
    "z", "t", "df_error", "p", "Component", "Response",
)


def _coefficients(model: Any, component: str) -> tuple[pd.DataFrame, float | None, Any]:
    """Coefficient table filtered to one component, plus residual df."""
    adapter = get_adapter(model)
    component = resolve_component(component)
    table = adapter.coefficient_table(model)
    if component != "all":
        table = table[table["Component"] == component]
    table = table.reset_index(drop=True)
    table["Response"] = [("" if r is None else r) for r in table["Response"]]
    return table, adapter.residual_df(model), adapter


def _wald(table: pd.DataFrame, df_error: float | None, ci: float) -> pd.DataFrame:
    """Test statistic, CI bounds and p-value for each coefficient."""
    est = table["Estimate"].to_numpy(dtype=np.float64)
    se = table["SE"].to_numpy(dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        statistic = est / se

    if df_error is None:
        dist = sp_stats.norm()
    else:
        dist = sp_stats.t(df_error)
    q = dist.ppf((1.0 + ci) / 2.0)

    if "p" in table.columns:
        p = table["p"].to_numpy(dtype=np.float64)
    else:
        p = 2.0 * dist.sf(np.abs(statistic))

    return pd.DataFrame({
        "statistic": statistic,
        "CI_low": est - q * se,
        "CI_high": est + q * se,
        "p": p,
    })


def _slice_columns(table: pd.DataFrame) -> list[str]:
    cols = ["Parameter", "Component"]
    if (table["Response"] != "").any():
        cols.append("Response")
    return cols


def get_parameters(model: Any, component: str = "all") -> pd.DataFrame | None:
    """
    Point estimates of a model.

    Returns:
        DataFrame with Parameter, Estimate, Component (and Response for
        multi-level responses), or None if the model has no coefficients
        in the requested component.
    """
    table, _, _ = _coefficients(model, component)
    if table.empty:
        return None
    cols = _slice_columns(table)
    return table[cols[:1] + ["Estimate"] + cols[1:]]


def standard_error(model: Any, component: str = "all") -> pd.DataFrame | None:
    """Standard errors; None if the requested component is absent."""
    table, _, _ = _coefficients(model, component)
    if table.empty:
        return None
    cols = _slice_columns(table)
    return table[cols[:1] + ["SE"] + cols[1:]]


def ci(model: Any, ci: float = 0.95, component: str = "all") -> pd.DataFrame | None:
    """
    Wald confidence intervals.

    Returns:
        DataFrame with Parameter, CI, CI_low, CI_high, Component (and
        Response), or None if the requested component is absent.
    """
    level = check_conf_level(ci, "ci")
    table, df_error, _ = _coefficients(model, component)
    if table.empty:
        return None
    wald = _wald(table, df_error, level)
    out = table[["Parameter"]].copy()
    out["CI"] = level
    out["CI_low"] = wald["CI_low"]
    out["CI_high"] = wald["CI_high"]
    for col in _slice_columns(table)[1:]:
        out[col] = table[col]
    return out


def p_value(model: Any, component: str = "all") -> pd.DataFrame | None:
    """p-values; None if the requested component is absent."""
    table, df_error, _ = _coefficients(model, component)
    if table.empty:
        return None
    out = table[["Parameter"]].copy()
    out["p"] = _wald(table, df_error, 0.95)["p"]
    for col in _slice_columns(table)[1:]:
        out[col] = table[col]
    return out


def model_parameters_generic(
    model: Any,
    *,
    ci: float = 0.95,
    component: str = "all",
    bootstrap: bool = False,
    exponentiate: bool = False,
    p_adjust: str | None = None,
    digits: int = 2,
    ci_digits: int = 2,
    p_digits: int = 3,
    verbose: bool = True,
) -> ParameterTable:
    """
    Parameters of a model whose coefficients come split by component
    and/or response level (multinomial, ordinal, zero-inflated, ...).

    Parameters
    ----------
    model : ComponentFit or statsmodels results
        Fitted model with a registered adapter.
    ci : float
        Confidence level for the Wald intervals. Default 0.95.
    component : str
        "all" (default) or a single component: "conditional",
        "zero_inflated", "dispersion", "precision", "scale" (aliases
        "cond", "zi", "disp").
    bootstrap : bool
        Bootstrapped parameters are not implemented; True raises.
    exponentiate : bool
        Exponentiate coefficients and CI bounds (odds / rate ratios).
    p_adjust : str or None
        Multiple-comparison correction applied to the p column
        ("holm", "hochberg", "bonferroni", "BH", "fdr", "BY", "none").
    digits, ci_digits, p_digits : int
        Rounding precision stamped onto the table for printing.
    verbose : bool
        Warn when exponentiating dispersion parameters.

    Returns
    -------
    ParameterTable
        Columns Parameter, Coefficient, SE, CI_low, CI_high, z or t
        (with df_error), p, plus Component when several components are
        present and Response for responses with more than two levels.
    """
    if bootstrap:
        raise ExtractionNotImplementedError(
            "Bootstrapped parameters are not yet implemented for this model.",
            model_kind=type(model).__name__,
        )

    options = FormatOptions(digits=digits, ci_digits=ci_digits, p_digits=p_digits)
    level = check_conf_level(ci, "ci")
    component = resolve_component(component)

    table, df_error, adapter = _coefficients(model, component)
    if table.empty:
        raise ValidationError(
            f"component: model has no {component!r} parameters"
        )

    key = merge_key(detect_response_levels(adapter, model), component)
    wald = _wald(table, df_error, level)
    stat_name = "z" if df_error is None else "t"

    base = table[["Parameter", "Component", "Response"]].copy()
    keys = base[key]

    coefficients = base.assign(Coefficient=table["Estimate"])
    se = keys.assign(SE=table["SE"])
    intervals = keys.assign(CI_low=wald["CI_low"], CI_high=wald["CI_high"])
    statistic = keys.assign(**{stat_name: wald["statistic"]})
    if df_error is not None:
        statistic = statistic.assign(df_error=float(df_error))
    p = keys.assign(p=wald["p"])

    out = merge_slices([coefficients, se, intervals, statistic, p], key)

    if exponentiate:
        if verbose and (out["Component"] == DISPERSION).any():
            warnings.warn(
                "Dispersion parameters were exponentiated along with the "
                "other coefficients.",
                UserWarning,
                stacklevel=2,
            )
        for col in ("Coefficient", "CI_low", "CI_high"):
            out[col] = np.exp(out[col])

    if p_adjust is not None:
        out["p"] = _p_adjust(out["p"], method=p_adjust)

    out = out[[c for c in COLUMN_ORDER if c in out.columns]]
    out = finalize_columns(out, key)
    return attach_attributes(out, options, ci=level)
