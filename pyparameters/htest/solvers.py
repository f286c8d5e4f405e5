"""
Parameter extraction for hypothesis tests.

Provides model_parameters_htest(): reads an htest-like result, selects
the extractor for its kind, adds effect sizes for chi-squared tests and
stamps the presentation metadata.
"""

from __future__ import annotations

import warnings
from typing import Any

import pandas as pd

from pyparameters.core.exceptions import (
    ExtractionNotImplementedError,
    UnsupportedModelError,
)
from pyparameters.core.options import FormatOptions, attach_attributes
from pyparameters.core.table import ParameterTable
from pyparameters.core.validation import check_conf_level
from pyparameters.htest._common import HTest, HTestKind
from pyparameters.htest._effectsize import add_effectsize_chi2, check_effectsize_options
from pyparameters.htest._parsing import clean_method, is_mcnemar
from pyparameters.htest.design import read_htest
from pyparameters.htest.extractors import EXTRACTORS


def classify(htest: HTest) -> HTestKind:
    """
    Select the model kind of a test.

    Raises:
        UnsupportedModelError: If none of the kind flags is set
    """
    kind = htest.kind
    if kind is None:
        raise UnsupportedModelError(
            f"model_parameters() is not implemented for this kind of "
            f"hypothesis test: {htest.method!r}",
            model_kind=htest.method,
        )
    return kind


def extract_parameters_htest(
    htest: HTest,
    cramers_v: str | None = None,
    phi: str | None = None,
    ci: float = 0.95,
    verbose: bool = True,
) -> pd.DataFrame:
    """Rows for one test, before metadata is attached."""
    kind = classify(htest)
    out = EXTRACTORS[kind](htest)

    if kind is HTestKind.CHI2:
        if not is_mcnemar(htest.method):
            out = add_effectsize_chi2(
                htest, out, cramers_v=cramers_v, phi=phi, ci=ci, verbose=verbose
            )
        elif verbose and (cramers_v is not None or phi is not None):
            warnings.warn(
                "Effect sizes are not computed for McNemar's test.",
                UserWarning,
                stacklevel=3,
            )

    return out.reset_index(drop=True)


def model_parameters_htest(
    model: Any,
    *,
    cramers_v: str | None = None,
    phi: str | None = None,
    ci: float = 0.95,
    bootstrap: bool = False,
    digits: int = 2,
    ci_digits: int = 2,
    p_digits: int = 3,
    verbose: bool = True,
) -> ParameterTable:
    """
    Parameters of a hypothesis test (correlation, t-test, chi-squared, ...).

    Parameters
    ----------
    model : htest-like
        Test result exposing method, data_name, p_value, statistic,
        parameter, estimate, conf_int, null_value (and observed for
        chi-squared tests).
    cramers_v, phi : {"raw", "adjusted"} or None
        Add Cramer's V / phi as effect size (chi-squared tests only).
        "adjusted" applies the bias correction.
    ci : float
        Confidence level for the effect-size intervals. Default 0.95.
    bootstrap : bool
        Bootstrapped htests are not implemented; True raises.
    digits, ci_digits, p_digits : int
        Rounding precision stamped onto the table for printing.
    verbose : bool
        Emit warnings about skipped effect sizes.

    Returns
    -------
    ParameterTable
        One row describing the test.

    Raises
    ------
    ExtractionNotImplementedError
        If bootstrap is True.
    UnsupportedModelError
        If the kind of test is not recognized.
    ValidationError
        If an option is out of range, including cramers_v or phi values
        other than "raw" and "adjusted", whatever the kind of test.
    """
    if bootstrap:
        raise ExtractionNotImplementedError(
            "Bootstrapped h-tests are not yet implemented.",
            model_kind="htest",
        )

    options = FormatOptions(digits=digits, ci_digits=ci_digits, p_digits=p_digits)
    ci = check_conf_level(ci, "ci")
    check_effectsize_options(cramers_v, phi)
    htest = read_htest(model)

    parameters = extract_parameters_htest(
        htest, cramers_v=cramers_v, phi=phi, ci=ci, verbose=verbose
    )
    if "Method" in parameters.columns:
        parameters["Method"] = parameters["Method"].map(clean_method)

    ci_test = htest.conf_level if htest.conf_int is not None else None
    return attach_attributes(parameters, options, ci=ci, ci_test=ci_test)
