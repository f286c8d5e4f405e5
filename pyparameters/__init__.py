"""
pyparameters: uniform parameter tables for fitted statistical models.

Reads coefficients, standard errors, confidence intervals, test
statistics and p-values off already-fitted models and returns them with
consistent column names, whatever shape the source model uses.

Submodules:
    htest: Hypothesis tests (correlation, t, one-way, chi-squared, ...)
    generic: Multi-component and multi-response models
    effectsize: Cramer's V and phi for contingency tables
"""

__version__ = "0.1.0"

from pyparameters import htest
from pyparameters import generic
from pyparameters import effectsize
from pyparameters._dispatch import model_parameters
from pyparameters.core.table import ParameterTable
from pyparameters.core.options import FormatOptions
from pyparameters.core.exceptions import (
    PyParametersError,
    ValidationError,
    ExtractionNotImplementedError,
    UnsupportedModelError,
    DetectionFailure,
)

__all__ = [
    "__version__",
    "model_parameters",
    "ParameterTable",
    "FormatOptions",
    "PyParametersError",
    "ValidationError",
    "ExtractionNotImplementedError",
    "UnsupportedModelError",
    "DetectionFailure",
    "htest",
    "generic",
    "effectsize",
]
