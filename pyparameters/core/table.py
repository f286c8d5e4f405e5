"""
Parameter table returned by every extraction.

ParameterTable is the single output type of pyparameters: a pandas
DataFrame with fixed column names plus out-of-band presentation metadata
(rounding digits and confidence levels).

Design decisions:
    - Frozen wrapper, accessors hand out copies so a produced table is
      never mutated by its consumer
    - Metadata lives beside the data and never changes row content
    - Metadata keys are fixed: digits, ci_digits, p_digits, ci, ci_test
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping

import numpy as np
import pandas as pd

ATTRIBUTE_KEYS = ("digits", "ci_digits", "p_digits", "ci", "ci_test")

# Columns rounded with ci_digits / p_digits instead of digits.
_CI_COLUMN_SUFFIXES = ("CI_low", "CI_high")
_P_COLUMNS = ("p",)
# Counts and degrees of freedom keep their own precision.
_UNROUNDED_COLUMNS = ("Success", "Trials")


@dataclass(frozen=True)
class ParameterTable:
    """
    Immutable table of extracted model parameters.

    Attributes:
        _frame: Row data; one row per coefficient or tested hypothesis
        _attributes: Out-of-band metadata keyed by ATTRIBUTE_KEYS

    Examples:
        >>> table = model_parameters(htest)
        >>> table.columns
        ('Probability', 'CI_low', 'CI_high', 'Success', 'Trials', ...)
        >>> table["p"][0]
        0.3
        >>> table.attributes["p_digits"]
        3
    """
    _frame: pd.DataFrame
    _attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frame = self._frame.reset_index(drop=True).copy()
        object.__setattr__(self, "_frame", frame)
        object.__setattr__(
            self, "_attributes", MappingProxyType(dict(self._attributes))
        )

    # --- Data access ---

    @property
    def frame(self) -> pd.DataFrame:
        """Copy of the row data."""
        return self._frame.copy()

    @property
    def columns(self) -> tuple[str, ...]:
        return tuple(self._frame.columns)

    def rows(self) -> list[dict[str, Any]]:
        """Rows as a list of column -> value dicts."""
        return self._frame.to_dict(orient="records")

    def to_frame(self) -> pd.DataFrame:
        """Copy of the row data with the metadata in ``DataFrame.attrs``."""
        out = self._frame.copy()
        out.attrs.update(self._attributes)
        return out

    def __getitem__(self, column: str) -> pd.Series:
        if column not in self._frame.columns:
            raise KeyError(
                f"{column!r} is not a column of this table; "
                f"available: {list(self._frame.columns)}"
            )
        return self._frame[column].copy()

    def __contains__(self, column: object) -> bool:
        return column in self._frame.columns

    def __len__(self) -> int:
        return len(self._frame)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self.rows())

    # --- Metadata ---

    @property
    def attributes(self) -> Mapping[str, Any]:
        """Read-only view of the out-of-band metadata."""
        return self._attributes

    @property
    def digits(self) -> int:
        return self._attributes.get("digits", 2)

    @property
    def ci_digits(self) -> int:
        return self._attributes.get("ci_digits", 2)

    @property
    def p_digits(self) -> int:
        return self._attributes.get("p_digits", 3)

    @property
    def ci(self) -> float | None:
        """Confidence level used for extraction."""
        return self._attributes.get("ci")

    @property
    def ci_test(self) -> float | None:
        """Confidence level embedded in the source model's interval."""
        return self._attributes.get("ci_test")

    # --- Formatting ---

    def formatted(self) -> pd.DataFrame:
        """Row data as strings, rounded with the stamped digits."""
        out = {}
        for column in self._frame.columns:
            values = self._frame[column]
            if column in _P_COLUMNS:
                out[column] = [_format_pvalue(v, self.p_digits) for v in values]
            elif column.endswith(_CI_COLUMN_SUFFIXES):
                out[column] = [_format_number(v, self.ci_digits) for v in values]
            elif column in _UNROUNDED_COLUMNS or column.startswith("df"):
                out[column] = [_format_number(v, None) for v in values]
            else:
                out[column] = [_format_number(v, self.digits) for v in values]
        return pd.DataFrame(out, columns=list(self._frame.columns))

    def summary(self) -> str:
        """
        Format as an aligned plain-text table.

        Produces output like:
            Parameter1 | Parameter2 |     r |     t | df |      p
            -----------------------------------------------------
            mpg        |        cyl | -0.85 | -8.92 | 30 | < .001
        """
        text = self.formatted()
        header = list(text.columns)
        widths = [
            max([len(str(h))] + [len(v) for v in text[h]]) for h in header
        ]
        lines = [" | ".join(h.rjust(w) for h, w in zip(header, widths))]
        lines.append("-" * len(lines[0]))
        for _, row in text.iterrows():
            lines.append(
                " | ".join(str(v).rjust(w) for v, w in zip(row, widths))
            )
        return "\n".join(lines)

    def to_markdown(self) -> str:
        """Format as a markdown pipe table."""
        text = self.formatted()
        header = list(text.columns)
        lines = ["| " + " | ".join(header) + " |"]
        lines.append("|" + "|".join(":---:" for _ in header) + "|")
        for _, row in text.iterrows():
            lines.append("| " + " | ".join(str(v) for v in row) + " |")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"ParameterTable(rows={len(self)}, "
            f"columns={list(self.columns)!r})"
        )

    def __str__(self) -> str:
        return self.summary()


def _format_pvalue(p: Any, digits: int) -> str:
    """Format a p-value, collapsing values below the display precision."""
    if p is None or (isinstance(p, float) and np.isnan(p)):
        return ""
    threshold = 10.0 ** -digits
    if p < threshold:
        return f"< {threshold:.{digits}f}".replace("0.", ".", 1)
    return f"{p:.{digits}f}"


def _format_number(x: Any, digits: int | None) -> str:
    """Format a cell, leaving labels untouched and handling infinity."""
    if x is None:
        return ""
    if isinstance(x, str):
        return x
    if isinstance(x, (bool, np.bool_)):
        return str(x)
    if isinstance(x, (int, np.integer)):
        return str(int(x))
    try:
        value = float(x)
    except (TypeError, ValueError):
        return str(x)
    if np.isnan(value):
        return ""
    if np.isinf(value):
        return "-Inf" if value < 0 else "Inf"
    if digits is None:
        return f"{value:g}"
    return f"{value:.{digits}f}"
