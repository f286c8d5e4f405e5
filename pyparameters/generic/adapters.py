"""
Model adapters for multi-component extraction.

Each adapter reads one family of fitted models and exposes the
ComponentModel protocol (coefficient table, residual df, number of
response levels). Adapters are tried in registration order; the first
one whose can_handle() accepts the model is used.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd
from statsmodels.base.model import Results
from statsmodels.base.wrapper import ResultsWrapper

from pyparameters.core.exceptions import DetectionFailure, UnsupportedModelError
from pyparameters.core.protocols import ComponentModel
from pyparameters.generic._common import (
    CONDITIONAL,
    DISPERSION,
    ZERO_INFLATED,
    ComponentFit,
)

_INFLATE_PREFIX = "inflate_"
_DISPERSION_NAMES = ("alpha",)


class ComponentFitAdapter:
    """Adapter for ComponentFit containers built by the caller."""

    @property
    def name(self) -> str:
        return "component_fit"

    def can_handle(self, model: Any) -> bool:
        return isinstance(model, ComponentFit)

    def coefficient_table(self, model: ComponentFit) -> pd.DataFrame:
        table = pd.DataFrame({
            "Parameter": list(model.parameters),
            "Estimate": model.estimates,
            "SE": model.se,
            "Component": list(model.components),
            "Response": list(model.responses),
        })
        if model.p_values is not None:
            table["p"] = model.p_values
        return table

    def residual_df(self, model: ComponentFit) -> float | None:
        return model.df_error

    def response_levels(self, model: ComponentFit) -> int:
        if model.response_levels is not None:
            return model.response_levels
        labels = {r for r in model.responses if r is not None}
        if not labels:
            raise DetectionFailure(
                "ComponentFit records neither response levels nor labels",
                what="response_levels",
            )
        # Labelled levels plus the reference category.
        return len(labels) + 1


class StatsmodelsAdapter:
    """
    Adapter for statsmodels results.

    Multinomial results (2D params, one column per non-reference
    response level) are split by response. Parameters named
    ``inflate_*`` belong to the zero-inflation component and the extra
    ``alpha`` parameter of count models to the dispersion component.
    """

    @property
    def name(self) -> str:
        return "statsmodels"

    def can_handle(self, model: Any) -> bool:
        return isinstance(model, (Results, ResultsWrapper)) and hasattr(model, "bse")

    def coefficient_table(self, model: Any) -> pd.DataFrame:
        params = model.params
        bse = np.asarray(model.bse, dtype=np.float64)
        pvalues = getattr(model, "pvalues", None)
        if pvalues is not None:
            pvalues = np.asarray(pvalues, dtype=np.float64)

        if np.ndim(params) == 2:
            return self._multinomial_table(model, params, bse, pvalues)

        names = _param_names(model, params)
        table = pd.DataFrame({
            "Parameter": names,
            "Estimate": np.asarray(params, dtype=np.float64),
            "SE": bse,
            "Component": [_component_of(model, n) for n in names],
            "Response": [None] * len(names),
        })
        if pvalues is not None:
            table["p"] = pvalues
        return table

    def _multinomial_table(self, model, params, bse, pvalues) -> pd.DataFrame:
        values = np.asarray(params, dtype=np.float64)
        n_params, n_levels = values.shape
        names = _param_names(model, params)
        levels = _response_names(model, params, n_levels)

        # Grouped by response level, parameters in model order within each.
        table = pd.DataFrame({
            "Parameter": names * n_levels,
            "Estimate": values.T.ravel(),
            "SE": bse.T.ravel(),
            "Component": [CONDITIONAL] * (n_params * n_levels),
            "Response": [lvl for lvl in levels for _ in range(n_params)],
        })
        if pvalues is not None:
            table["p"] = pvalues.T.ravel()
        return table

    def residual_df(self, model: Any) -> float | None:
        if getattr(model, "use_t", False):
            return float(model.df_resid)
        return None

    def response_levels(self, model: Any) -> int:
        fitted = model.model
        for attr in ("J", "k_levels"):
            levels = getattr(fitted, attr, None)
            if levels is not None:
                return int(levels)
        raise DetectionFailure(
            f"{type(fitted).__name__} has no categorical response",
            what="response_levels",
        )


def _param_names(model: Any, params: Any) -> list[str]:
    if isinstance(params, (pd.Series, pd.DataFrame)):
        return [str(n) for n in params.index]
    n = np.shape(params)[0]
    data = getattr(model.model, "data", None)
    for names in (
        getattr(data, "param_names", None),
        getattr(model.model, "exog_names", None),
    ):
        if names is not None and len(names) == n:
            return [str(x) for x in names]
    return [f"x{i}" for i in range(n)]


def _response_names(model: Any, params: Any, n_levels: int) -> list[str]:
    ynames = getattr(model.model, "_ynames_map", None)
    if ynames is not None and len(ynames) == n_levels + 1:
        # The first level is the reference category.
        return [str(ynames[k]) for k in sorted(ynames)][1:]
    if isinstance(params, pd.DataFrame):
        return [str(c) for c in params.columns]
    return [str(j + 1) for j in range(n_levels)]


def _component_of(model: Any, name: str) -> str:
    if name.startswith(_INFLATE_PREFIX):
        return ZERO_INFLATED
    if name in _DISPERSION_NAMES and getattr(model.model, "k_extra", 0) > 0:
        return DISPERSION
    return CONDITIONAL


_ADAPTERS: list[ComponentModel] = [ComponentFitAdapter(), StatsmodelsAdapter()]


def register_adapter(adapter: ComponentModel) -> None:
    """
    Register a model adapter ahead of the built-in ones.

    Args:
        adapter: Object implementing the ComponentModel protocol
    """
    _ADAPTERS.insert(0, adapter)


def unregister_adapter(adapter: ComponentModel) -> None:
    """Remove a previously registered adapter."""
    _ADAPTERS.remove(adapter)


def find_adapter(model: Any) -> ComponentModel | None:
    """First registered adapter that can handle the model, or None."""
    for adapter in _ADAPTERS:
        if adapter.can_handle(model):
            return adapter
    return None


def get_adapter(model: Any) -> ComponentModel:
    """
    Adapter for a model.

    Raises:
        UnsupportedModelError: If no registered adapter handles the model
    """
    adapter = find_adapter(model)
    if adapter is None:
        raise UnsupportedModelError(
            f"No parameter adapter available for model type: {type(model).__name__}",
            model_kind=type(model).__name__,
        )
    return adapter
