"""
Common types for hypothesis-test extraction.

Defines HTest (the normalized view of an R-style htest result) and the
HTestKind enum used by the dispatcher.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


class HTestKind(enum.Enum):
    """Model kinds, in dispatch priority order."""
    CORRELATION = "correlation"
    TTEST = "ttest"
    ONEWAY = "onewaytest"
    CHI2 = "chi2test"
    PROPORTION = "proptest"
    BINOMIAL = "binomtest"

    @property
    def flag(self) -> str:
        """Name of the model_info flag that selects this kind."""
        return f"is_{self.value}"


# Evaluated first to last; the first true flag wins.
DISPATCH_ORDER = (
    HTestKind.CORRELATION,
    HTestKind.TTEST,
    HTestKind.ONEWAY,
    HTestKind.CHI2,
    HTestKind.PROPORTION,
    HTestKind.BINOMIAL,
)

FLAG_NAMES = tuple(kind.flag for kind in DISPATCH_ORDER)


@dataclass(frozen=True)
class HTest:
    """
    Normalized hypothesis-test result.

    Built once from the external model by read_htest() (see
    design.py); extractors read only this.

    Attributes
    ----------
    flags : dict
        Model-kind flags {"is_correlation": bool, ...}.
    statistic : float or None
        Test statistic value.
    parameter : tuple of float
        Distribution parameters in order, e.g. (df,) or (df_num, df_denom).
        Empty when the test reports none.
    p_value : float
        p-value of the test.
    conf_int : tuple of float or None
        Confidence interval (low, high).
    conf_level : float or None
        Confidence level of conf_int.
    estimate : tuple of float
        Point estimate(s) in order. Empty when the test reports none.
    null_value : tuple of float
        Hypothesized value(s) under H0. Empty when the test reports none.
    method : str
        Human-readable method name.
    data_name : str
        Description of the data, e.g. "x and y".
    observed : ndarray or None
        Observed counts (chi-squared tests only).
    """
    flags: dict[str, bool]
    statistic: float | None
    parameter: tuple[float, ...]
    p_value: float
    conf_int: tuple[float, float] | None
    conf_level: float | None
    estimate: tuple[float, ...]
    null_value: tuple[float, ...]
    method: str
    data_name: str
    observed: NDArray[np.floating[Any]] | None = None

    @property
    def kind(self) -> HTestKind | None:
        """First kind whose flag is set, or None."""
        for kind in DISPATCH_ORDER:
            if self.flags.get(kind.flag, False):
                return kind
        return None

    def estimate_at(self, i: int) -> float:
        """i-th estimate, NaN if the test reported fewer."""
        return _at(self.estimate, i)

    def parameter_at(self, i: int) -> float:
        """i-th distribution parameter, NaN if absent."""
        return _at(self.parameter, i)

    def null_value_at(self, i: int) -> float:
        return _at(self.null_value, i)

    @property
    def ci_low(self) -> float:
        return np.nan if self.conf_int is None else self.conf_int[0]

    @property
    def ci_high(self) -> float:
        return np.nan if self.conf_int is None else self.conf_int[1]

    @property
    def statistic_value(self) -> float:
        return np.nan if self.statistic is None else self.statistic


def _at(values: tuple[float, ...], i: int) -> float:
    return values[i] if i < len(values) else np.nan
