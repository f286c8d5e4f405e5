"""
Hypothesis-test parameter extraction.

Reads results shaped like R's htest class and returns one normalized
row per test.

Public API:
    model_parameters_htest(model)  - parameter table for one test
    read_htest(model)              - normalized HTest view of a result
    model_info(model)              - model-kind flags of a result
    classify_method(method)        - flags derived from a method label
"""

from pyparameters.htest.solvers import (
    model_parameters_htest,
    extract_parameters_htest,
    classify,
)
from pyparameters.htest.design import read_htest, model_info, classify_method, is_htest
from pyparameters.htest._common import HTest, HTestKind
from pyparameters.htest._effectsize import CANONICAL_ORDER

__all__ = [
    "model_parameters_htest",
    "extract_parameters_htest",
    "classify",
    "read_htest",
    "model_info",
    "classify_method",
    "is_htest",
    "HTest",
    "HTestKind",
    "CANONICAL_ORDER",
]
