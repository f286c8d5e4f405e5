"""
pytest configuration and shared fixtures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pytest


@dataclass(frozen=True)
class FakeHTest:
    """
    Stand-in for a fitted hypothesis test.

    Mirrors the attribute layout of hypothesis-test solution objects:
    estimate, parameter and null_value are name -> value dicts.
    """
    method: str
    data_name: str
    p_value: float
    statistic: float | None = None
    parameter: dict[str, float] | None = None
    conf_int: Any = None
    conf_level: float | None = None
    estimate: dict[str, float] | None = None
    null_value: dict[str, float] | None = None
    observed: Any = None
    model_info: dict[str, bool] | None = field(default=None)


@pytest.fixture
def make_htest():
    """Factory for hypothesis-test results."""
    def _make(**fields):
        if fields.get("conf_int") is not None:
            fields["conf_int"] = np.asarray(fields["conf_int"], dtype=np.float64)
            fields.setdefault("conf_level", 0.95)
        return FakeHTest(**fields)
    return _make


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)
