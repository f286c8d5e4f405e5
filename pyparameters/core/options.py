"""
Presentation options and the attribute attacher.

FormatOptions holds the rounding precision stamped onto every table.
attach_attributes() is the last step of each extraction path: it wraps
the row data in a ParameterTable together with the options and the
confidence levels, without touching the rows.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from pyparameters.core.table import ParameterTable
from pyparameters.core.validation import check_conf_level, check_digits


@dataclass(frozen=True)
class FormatOptions:
    """
    Rounding precision for later rendering.

    Attributes:
        digits: Decimal places for estimates and statistics
        ci_digits: Decimal places for confidence-interval bounds
        p_digits: Decimal places for p-values
    """
    digits: int = 2
    ci_digits: int = 2
    p_digits: int = 3

    def __post_init__(self) -> None:
        check_digits(self.digits, "digits")
        check_digits(self.ci_digits, "ci_digits")
        check_digits(self.p_digits, "p_digits")


def attach_attributes(
    frame: pd.DataFrame,
    options: FormatOptions,
    ci: float | None,
    ci_test: float | None = None,
) -> ParameterTable:
    """
    Stamp presentation metadata onto extracted rows.

    Args:
        frame: Extracted rows
        options: Rounding precision
        ci: Confidence level used for the extraction
        ci_test: Confidence level the source model used for its own
            interval, if it carries one

    Returns:
        ParameterTable with attributes digits, ci_digits, p_digits, ci
        and ci_test
    """
    if ci is not None:
        ci = check_conf_level(ci, "ci")
    attributes = {
        "digits": options.digits,
        "ci_digits": options.ci_digits,
        "p_digits": options.p_digits,
        "ci": ci,
        "ci_test": None if ci_test is None else float(ci_test),
    }
    return ParameterTable(frame, attributes)
