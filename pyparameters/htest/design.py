"""
Boundary adapter for hypothesis-test results.

read_htest() reads an external htest-like object exactly once and
returns the immutable HTest view the extractors work on. Accepts
solution objects with snake_case attributes (p_value, conf_int,
data_name, ...) and mappings using either snake_case or R's dotted
names (p.value, conf.int, data.name, ...).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np

from pyparameters.core.exceptions import ValidationError
from pyparameters.core.protocols import HTestLike
from pyparameters.htest._common import HTest, HTestKind, FLAG_NAMES

_MISSING = object()

# snake_case name -> alternative names used by other producers
_FIELD_ALIASES = {
    "p_value": ("p.value", "pvalue"),
    "conf_int": ("conf.int",),
    "conf_level": ("conf.level",),
    "null_value": ("null.value",),
    "data_name": ("data.name",),
}


def _get(model: Any, name: str, default: Any = None) -> Any:
    """Read a field by its snake_case name or any alias."""
    for key in (name,) + _FIELD_ALIASES.get(name, ()):
        if isinstance(model, Mapping):
            value = model.get(key, _MISSING)
        else:
            value = getattr(model, key, _MISSING)
        if value is not _MISSING:
            return value
    return default


def is_htest(model: Any) -> bool:
    """Check whether an object looks like a hypothesis-test result."""
    return all(
        _get(model, name) is not None
        for name in ("method", "data_name", "p_value")
    )


def _as_tuple(value: Any, name: str) -> tuple[float, ...]:
    """Flatten scalar / sequence / dict values to a tuple of floats."""
    if value is None:
        return ()
    if isinstance(value, Mapping):
        value = list(value.values())
    try:
        arr = np.asarray(value, dtype=np.float64).ravel()
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected numeric values, got {value!r}") from e
    return tuple(float(v) for v in arr)


def _as_float(value: Any, name: str) -> float | None:
    values = _as_tuple(value, name)
    if not values:
        return None
    return values[0]


def _as_interval(value: Any) -> tuple[float, float] | None:
    values = _as_tuple(value, "conf_int")
    if not values:
        return None
    if len(values) != 2:
        raise ValidationError(
            f"conf_int: expected 2 bounds, got {len(values)}"
        )
    return values[0], values[1]


def classify_method(method: str) -> dict[str, bool]:
    """
    Derive model-kind flags from a test's method label.

    Used when the model does not carry its own flags. Matches the labels
    the modeling ecosystem gives its tests, e.g. "Pearson's product-moment
    correlation", "Welch Two Sample t-test", "One-way analysis of means",
    "Pearson's Chi-squared test", "McNemar's Chi-squared test",
    "2-sample test for equality of proportions", "Exact binomial test".
    """
    text = method.lower()
    flags = dict.fromkeys(FLAG_NAMES, False)
    if "correlation" in text:
        flags[HTestKind.CORRELATION.flag] = True
    elif "t-test" in text:
        flags[HTestKind.TTEST.flag] = True
    elif text.startswith("one-way analysis of means"):
        flags[HTestKind.ONEWAY.flag] = True
    elif "chi-squared" in text or text.startswith("mcnemar"):
        flags[HTestKind.CHI2.flag] = True
    elif "proportions" in text:
        flags[HTestKind.PROPORTION.flag] = True
    elif "binomial test" in text:
        flags[HTestKind.BINOMIAL.flag] = True
    return flags


def model_info(model: Any) -> dict[str, bool]:
    """
    Model-kind flags for an htest-like object.

    Flags the model exposes itself (a ``model_info`` mapping or object)
    take precedence; missing flags are derived from the method label.
    """
    info = _get(model, "model_info")
    if info is None:
        return classify_method(str(_get(model, "method", "")))
    flags = {}
    for flag in FLAG_NAMES:
        if isinstance(info, Mapping):
            flags[flag] = bool(info.get(flag, False))
        else:
            flags[flag] = bool(getattr(info, flag, False))
    return flags


def read_htest(model: HTestLike | Mapping[str, Any]) -> HTest:
    """
    Build the normalized HTest view of an external test result.

    Raises:
        ValidationError: If required fields are missing or non-numeric
    """
    if not is_htest(model):
        raise ValidationError(
            f"{type(model).__name__} is not a hypothesis-test result: "
            f"method, data_name and p_value are required"
        )

    observed = _get(model, "observed")
    if observed is not None:
        observed = np.asarray(observed, dtype=np.float64)

    return HTest(
        flags=model_info(model),
        statistic=_as_float(_get(model, "statistic"), "statistic"),
        parameter=_as_tuple(_get(model, "parameter"), "parameter"),
        p_value=float(_get(model, "p_value")),
        conf_int=_as_interval(_get(model, "conf_int")),
        conf_level=_as_float(_get(model, "conf_level"), "conf_level"),
        estimate=_as_tuple(_get(model, "estimate"), "estimate"),
        null_value=_as_tuple(_get(model, "null_value"), "null_value"),
        method=str(_get(model, "method")),
        data_name=str(_get(model, "data_name")),
        observed=observed,
    )
