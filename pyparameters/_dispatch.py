"""
Top-level dispatch for model_parameters().

Handlers are tried in order; the first whose predicate accepts the model
extracts its parameters. Hypothesis tests are checked before component
models because a results object may carry both shapes.
"""

from __future__ import annotations

from typing import Any, Callable

from pyparameters.core.exceptions import UnsupportedModelError
from pyparameters.core.table import ParameterTable
from pyparameters.generic.adapters import find_adapter
from pyparameters.generic.solvers import model_parameters_generic
from pyparameters.htest.design import is_htest
from pyparameters.htest.solvers import model_parameters_htest

_HANDLERS: tuple[tuple[str, Callable[[Any], bool], Callable[..., ParameterTable]], ...] = (
    ("htest", is_htest, model_parameters_htest),
    ("generic", lambda model: find_adapter(model) is not None, model_parameters_generic),
)


def model_parameters(model: Any, **options: Any) -> ParameterTable:
    """
    Extract the parameters of a fitted model into a ParameterTable.

    Parameters
    ----------
    model : object
        A hypothesis-test result (htest-like) or a model with a
        registered component adapter (ComponentFit, statsmodels results).
    **options
        Passed to model_parameters_htest() or model_parameters_generic();
        options the selected extractor does not know raise TypeError.

    Returns
    -------
    ParameterTable

    Raises
    ------
    UnsupportedModelError
        If no handler recognizes the model.
    """
    for _, accepts, handler in _HANDLERS:
        if accepts(model):
            return handler(model, **options)
    raise UnsupportedModelError(
        f"model_parameters() does not support objects of type {type(model).__name__}",
        model_kind=type(model).__name__,
    )
