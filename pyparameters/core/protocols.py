"""
Core protocols for pyparameters.

These define the structural interfaces of the external collaborators:
the fitted models we read parameters from. We use Protocol (structural
typing) rather than ABC (nominal typing) because the models come from
other libraries and cannot be made to inherit from our classes.

Design Principles:
    - Minimal contracts: prescribe only what extraction reads
    - Read-only: nothing here mutates the model
"""

from typing import Any, Protocol, runtime_checkable

import pandas as pd


@runtime_checkable
class HTestLike(Protocol):
    """
    Minimal protocol for a hypothesis-test result.

    Mirrors R's htest structure. Optional fields (conf_int, null_value,
    observed) may be None; estimate and parameter may be scalars,
    sequences or name -> value dicts.
    """

    @property
    def method(self) -> str:
        """Human-readable test name, e.g. 'Welch Two Sample t-test'."""
        ...

    @property
    def data_name(self) -> str:
        """Description of the data, e.g. 'x and y' or 'extra by group'."""
        ...

    @property
    def p_value(self) -> float:
        ...


@runtime_checkable
class ComponentModel(Protocol):
    """
    Protocol for model adapters that expose coefficients by component.

    An adapter knows how to read one family of fitted models. Adapters
    are stateless; the fitted model is passed to every call.
    """

    @property
    def name(self) -> str:
        """Adapter identifier, e.g. 'statsmodels' or 'component_fit'."""
        ...

    def can_handle(self, model: Any) -> bool:
        """Check whether this adapter understands the model."""
        ...

    def coefficient_table(self, model: Any) -> pd.DataFrame:
        """
        Coefficients with columns Parameter, Estimate, SE, Component,
        Response (None where a row has no response level), and optionally
        p when the model reports its own p-values.
        """
        ...

    def residual_df(self, model: Any) -> float | None:
        """Residual degrees of freedom for t-based inference, or None."""
        ...

    def response_levels(self, model: Any) -> int:
        """
        Number of response categories.

        Raises:
            DetectionFailure: If the response cannot be introspected
        """
        ...
