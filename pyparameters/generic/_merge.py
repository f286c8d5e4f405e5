"""
Merging of per-slice parameter tables.

Coefficients, standard errors, confidence intervals and p-values are
computed as separate slices and joined on a composite key. The key
always holds Parameter; Component joins it when all components are
requested, Response when the response has more than two levels.
"""

from __future__ import annotations

from typing import Any, Sequence

import pandas as pd

from pyparameters.core.exceptions import DetectionFailure, ValidationError
from pyparameters.core.protocols import ComponentModel


def detect_response_levels(adapter: ComponentModel, model: Any) -> int:
    """
    Number of response levels, 0 when it cannot be determined.

    Introspection errors are not propagated: a model whose response
    cannot be read is merged like a model without categorical response.
    """
    try:
        return int(adapter.response_levels(model))
    except (DetectionFailure, AttributeError, TypeError, ValueError):
        return 0


def merge_key(n_levels: int, component: str) -> list[str]:
    """Composite join key for the slices of one model."""
    key = ["Parameter"]
    if component == "all":
        key.append("Component")
    if n_levels > 2:
        key.append("Response")
    return key


def merge_slices(slices: Sequence[pd.DataFrame], key: list[str]) -> pd.DataFrame:
    """
    Left-join slices on key, keeping the row order of the first slice.

    Raises:
        ValidationError: If key does not identify rows uniquely
    """
    out = slices[0]
    for piece in slices[1:]:
        try:
            out = out.merge(piece, on=key, how="left", sort=False, validate="one_to_one")
        except pd.errors.MergeError as e:
            raise ValidationError(
                f"Parameters are not unique on merge key {key}; "
                f"if the model has a multi-level response, record its "
                f"number of levels: {e}"
            ) from e
    return out


def finalize_columns(out: pd.DataFrame, key: list[str]) -> pd.DataFrame:
    """
    Tidy Component and Response after merging.

    Response is kept only when it is part of the key and some row has a
    level, with "" for rows that belong to no response level. Component
    is dropped when the table holds a single component.
    """
    out = out.copy()
    if "Response" in out.columns:
        responses = out["Response"].fillna("").astype(str)
        if "Response" in key and (responses != "").any():
            out["Response"] = responses
        else:
            out = out.drop(columns="Response")
    if "Component" in out.columns and out["Component"].nunique() <= 1:
        out = out.drop(columns="Component")
    return out
