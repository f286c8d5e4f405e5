"""
Common types for multi-component models.

Defines component names and ComponentFit, a plain container for the
coefficients of a fitted model that reports them split by component
(conditional / zero-inflated / dispersion / ...) and/or by response
level.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike, NDArray

from pyparameters.core.exceptions import ValidationError
from pyparameters.core.validation import check_array, check_consistent_length

CONDITIONAL = "conditional"
ZERO_INFLATED = "zero_inflated"
DISPERSION = "dispersion"
PRECISION = "precision"
SCALE = "scale"

COMPONENTS = (CONDITIONAL, ZERO_INFLATED, DISPERSION, PRECISION, SCALE)

COMPONENT_ALIASES = {
    "cond": CONDITIONAL,
    "zi": ZERO_INFLATED,
    "zero_inflated": ZERO_INFLATED,
    "disp": DISPERSION,
}

VALID_COMPONENTS = ("all",) + COMPONENTS + ("cond", "zi", "disp")

COEFFICIENT_COLUMNS = ("Parameter", "Estimate", "SE", "Component", "Response")


def resolve_component(component: str) -> str:
    """Map aliases to canonical component names; 'all' passes through."""
    if component not in VALID_COMPONENTS:
        raise ValidationError(
            f"component must be one of {VALID_COMPONENTS}, got {component!r}"
        )
    return COMPONENT_ALIASES.get(component, component)


@dataclass(frozen=True)
class ComponentFit:
    """
    Coefficients of a fitted multi-component model.

    Use this to hand pyparameters the estimates of a model for which no
    adapter exists. One entry per coefficient.

    Attributes
    ----------
    parameters : tuple of str
        Coefficient names.
    estimates : ndarray
        Point estimates.
    se : ndarray
        Standard errors (NaN where unavailable).
    components : tuple of str
        Component of each coefficient. Defaults to all "conditional".
    responses : tuple of str or None
        Response level of each coefficient, None for coefficients that
        belong to no level (e.g. precision parameters).
    response_levels : int or None
        Number of categories of the response. If None, it is taken as
        the number of distinct response labels plus the reference level.
    df_error : float or None
        Residual degrees of freedom; when given, inference uses
        Student's t instead of the normal distribution.
    p_values : ndarray or None
        p-values reported by the model; computed from Wald z/t if None.
    """
    parameters: tuple[str, ...]
    estimates: NDArray[np.floating[Any]]
    se: NDArray[np.floating[Any]]
    components: tuple[str, ...]
    responses: tuple[str | None, ...]
    response_levels: int | None = None
    df_error: float | None = None
    p_values: NDArray[np.floating[Any]] | None = None

    @classmethod
    def build(
        cls,
        parameters: Sequence[str],
        estimates: ArrayLike,
        se: ArrayLike,
        *,
        components: Sequence[str] | None = None,
        responses: Sequence[str | None] | None = None,
        response_levels: int | None = None,
        df_error: float | None = None,
        p_values: ArrayLike | None = None,
    ) -> ComponentFit:
        """Validate inputs and build a ComponentFit."""
        parameters = tuple(str(p) for p in parameters)
        estimates = check_array(estimates, "estimates")
        se = check_array(se, "se")

        if components is None:
            components = (CONDITIONAL,) * len(parameters)
        components = tuple(resolve_component(c) for c in components)
        if "all" in components:
            raise ValidationError("components: 'all' is not a component name")

        if responses is None:
            responses = (None,) * len(parameters)
        responses = tuple(None if r is None else str(r) for r in responses)

        arrays = [parameters, estimates, se, components, responses]
        names = ["parameters", "estimates", "se", "components", "responses"]
        if p_values is not None:
            p_values = check_array(p_values, "p_values")
            arrays.append(p_values)
            names.append("p_values")
        check_consistent_length(*arrays, names=tuple(names))

        return cls(
            parameters=parameters,
            estimates=estimates,
            se=se,
            components=components,
            responses=responses,
            response_levels=response_levels,
            df_error=df_error,
            p_values=p_values,
        )

    @classmethod
    def from_frame(
        cls,
        frame: pd.DataFrame,
        *,
        response_levels: int | None = None,
        df_error: float | None = None,
    ) -> ComponentFit:
        """
        Build from a DataFrame with columns Parameter, Estimate, SE and
        optionally Component, Response, p.
        """
        missing = [c for c in ("Parameter", "Estimate", "SE") if c not in frame.columns]
        if missing:
            raise ValidationError(
                f"frame: missing required columns {missing}; "
                f"got {list(frame.columns)}"
            )
        responses = None
        if "Response" in frame.columns:
            responses = [None if pd.isna(r) else r for r in frame["Response"]]
        return cls.build(
            frame["Parameter"],
            frame["Estimate"],
            frame["SE"],
            components=frame["Component"] if "Component" in frame.columns else None,
            responses=responses,
            response_levels=response_levels,
            df_error=df_error,
            p_values=frame["p"] if "p" in frame.columns else None,
        )
