"""
Tests for ParameterTable, FormatOptions and attach_attributes().

Validates:
    - Metadata is stamped with defaults or overrides
    - Accessors hand out copies (tables are immutable)
    - Rounding follows the stamped digits
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pandas as pd
import pytest

from pyparameters.core.exceptions import ValidationError
from pyparameters.core.options import FormatOptions, attach_attributes
from pyparameters.core.table import ATTRIBUTE_KEYS, ParameterTable


@pytest.fixture
def frame():
    return pd.DataFrame({
        "Parameter": ["(Intercept)", "x"],
        "Coefficient": [1.23456, -0.5],
        "CI_low": [0.5, -1.0],
        "CI_high": [1.96789, np.nan],
        "df": [30.0, 30.0],
        "p": [0.0004, 0.0123],
    })


class TestAttachAttributes:

    def test_defaults(self, frame):
        table = attach_attributes(frame, FormatOptions(), ci=0.95)
        assert table.attributes["digits"] == 2
        assert table.attributes["ci_digits"] == 2
        assert table.attributes["p_digits"] == 3
        assert table.ci == 0.95
        assert table.ci_test is None

    def test_overrides(self, frame):
        options = FormatOptions(digits=4, ci_digits=1, p_digits=2)
        table = attach_attributes(frame, options, ci=0.9, ci_test=0.99)
        assert (table.digits, table.ci_digits, table.p_digits) == (4, 1, 2)
        assert table.ci_test == 0.99

    def test_fixed_keys(self, frame):
        table = attach_attributes(frame, FormatOptions(), ci=0.95)
        assert tuple(table.attributes) == ATTRIBUTE_KEYS

    def test_rows_untouched(self, frame):
        table = attach_attributes(frame, FormatOptions(digits=0), ci=0.95)
        assert table["Coefficient"][0] == 1.23456

    def test_invalid_ci(self, frame):
        with pytest.raises(ValidationError):
            attach_attributes(frame, FormatOptions(), ci=95)

    def test_invalid_digits(self):
        with pytest.raises(ValidationError, match="ci_digits"):
            FormatOptions(ci_digits=-2)


class TestImmutability:

    def test_frozen(self, frame):
        table = ParameterTable(frame, {"digits": 2})
        with pytest.raises(FrozenInstanceError):
            table._frame = frame

    def test_frame_is_copy(self, frame):
        table = ParameterTable(frame)
        table.frame.loc[0, "Coefficient"] = 99.0
        assert table["Coefficient"][0] == 1.23456

    def test_source_frame_not_shared(self, frame):
        table = ParameterTable(frame)
        frame.loc[0, "Coefficient"] = 99.0
        assert table["Coefficient"][0] == 1.23456

    def test_attributes_read_only(self, frame):
        table = ParameterTable(frame, {"digits": 2})
        with pytest.raises(TypeError):
            table.attributes["digits"] = 5

    def test_to_frame_carries_attrs(self, frame):
        table = attach_attributes(frame, FormatOptions(), ci=0.95)
        out = table.to_frame()
        assert out.attrs["p_digits"] == 3
        assert out.attrs["ci"] == 0.95


class TestAccess:

    def test_columns_and_len(self, frame):
        table = ParameterTable(frame)
        assert table.columns == ("Parameter", "Coefficient", "CI_low", "CI_high", "df", "p")
        assert len(table) == 2
        assert "p" in table
        assert "SE" not in table

    def test_unknown_column(self, frame):
        with pytest.raises(KeyError, match="available"):
            ParameterTable(frame)["SE"]

    def test_rows(self, frame):
        rows = ParameterTable(frame).rows()
        assert rows[1]["Parameter"] == "x"
        assert [r["Parameter"] for r in ParameterTable(frame)] == ["(Intercept)", "x"]


class TestFormatting:

    def test_rounding(self, frame):
        table = attach_attributes(frame, FormatOptions(), ci=0.95)
        text = table.formatted()
        assert text["Coefficient"].tolist() == ["1.23", "-0.50"]
        assert text["CI_low"].tolist() == ["0.50", "-1.00"]
        assert text["CI_high"].tolist() == ["1.97", ""]
        assert text["df"].tolist() == ["30", "30"]
        assert text["p"].tolist() == ["< .001", "0.012"]

    def test_ci_digits_used_for_bounds(self, frame):
        table = attach_attributes(frame, FormatOptions(ci_digits=3), ci=0.95)
        assert table.formatted()["CI_high"][0] == "1.968"

    def test_summary_has_header_and_rows(self, frame):
        table = attach_attributes(frame, FormatOptions(), ci=0.95)
        lines = table.summary().splitlines()
        assert len(lines) == 4
        assert "Coefficient" in lines[0]
        assert set(lines[1]) == {"-"}
        assert "(Intercept)" in lines[2]

    def test_markdown(self, frame):
        table = attach_attributes(frame, FormatOptions(), ci=0.95)
        lines = table.to_markdown().splitlines()
        assert lines[0].startswith("| Parameter | Coefficient |")
        assert lines[1].startswith("|:---:|")
        assert lines[2] == "| (Intercept) | 1.23 | 0.50 | 1.97 | 30 | < .001 |"
