"""
Effect-size augmentation for chi-squared tests.

Appends Cramer's V and/or phi (with their confidence intervals) to the
single chi-squared row, then projects the columns into one fixed order.
"""

from __future__ import annotations

import warnings

import pandas as pd

from pyparameters import effectsize
from pyparameters.core.validation import check_choice
from pyparameters.htest._common import HTest

ADJUST_CHOICES = ("raw", "adjusted")

# Present columns are projected into this order; absent ones are skipped.
CANONICAL_ORDER = (
    "Chi2", "df",
    "V", "V_adjusted", "V_CI_low", "V_CI_high",
    "phi", "phi_adjusted", "phi_CI_low", "phi_CI_high",
    "p", "Method",
)

# request option -> (collaborator, column prefix for its CI bounds)
_MEASURES = (
    ("cramers_v", effectsize.cramers_v, "V"),
    ("phi", effectsize.phi, "phi"),
)


def check_effectsize_options(cramers_v: str | None, phi: str | None) -> None:
    """Validate effect-size requests; None means not requested."""
    for option, value in (("cramers_v", cramers_v), ("phi", phi)):
        if value is not None:
            check_choice(value, ADJUST_CHOICES, option)


def add_effectsize_chi2(
    htest: HTest,
    out: pd.DataFrame,
    cramers_v: str | None = None,
    phi: str | None = None,
    ci: float = 0.95,
    verbose: bool = True,
) -> pd.DataFrame:
    """
    Add the requested association measures to a chi-squared row.

    Args:
        htest: The chi-squared test, used for its observed table
        out: Row produced by extract_chi2()
        cramers_v: "raw", "adjusted", or None to skip Cramer's V
        phi: "raw", "adjusted", or None to skip phi
        ci: Confidence level for the effect-size intervals
        verbose: Warn when a measure was requested but cannot be computed

    Returns:
        The row with effect-size columns, in CANONICAL_ORDER
    """
    check_effectsize_options(cramers_v, phi)
    requests = {"cramers_v": cramers_v, "phi": phi}

    if cramers_v is None and phi is None:
        return out

    if htest.observed is None:
        if verbose:
            warnings.warn(
                "Effect sizes need the observed contingency table, "
                "which this test does not provide; none were added.",
                UserWarning,
                stacklevel=3,
            )
        return out

    row = out.iloc[0].to_dict()
    for option, compute, prefix in _MEASURES:
        adjust = requests[option]
        if adjust is None:
            continue
        es = compute(htest.observed, ci=ci, adjust=adjust == "adjusted")
        es = es.drop(columns="CI", errors="ignore")
        es = es.rename(
            columns={c: f"{prefix}_{c}" for c in es.columns if c.startswith("CI")}
        )
        row.update(es.iloc[0].to_dict())

    return pd.DataFrame([{c: row[c] for c in CANONICAL_ORDER if c in row}])
