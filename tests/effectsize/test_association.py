"""
Tests for Cramer's V, phi and the noncentrality interval.

Point estimates are checked against the closed forms computed from
scipy's chi-squared statistics; interval bounds against the noncentral
chi-squared quantile conditions they are defined by.
"""

import numpy as np
import pytest
from scipy import stats

from pyparameters.core.exceptions import ValidationError
from pyparameters.effectsize import cramers_v, ncp_interval, phi


TABLE_2X3 = np.array([[10.0, 20.0, 30.0], [20.0, 20.0, 10.0]])


# ═══════════════════════════════════════════════════════════════════════
# Point estimates
# ═══════════════════════════════════════════════════════════════════════


class TestEstimates:

    def test_cramers_v_2x3(self):
        chisq = stats.chi2_contingency(TABLE_2X3, correction=False)[0]
        result = cramers_v(TABLE_2X3)
        assert result["V"][0] == pytest.approx(np.sqrt(chisq / (110 * 1)))

    def test_phi_2x3(self):
        chisq = stats.chi2_contingency(TABLE_2X3, correction=False)[0]
        assert phi(TABLE_2X3)["phi"][0] == pytest.approx(np.sqrt(chisq / 110))

    def test_goodness_of_fit(self):
        """chisq.test(c(10, 20, 30)): X-squared = 10, df = 2"""
        counts = [10, 20, 30]
        assert cramers_v(counts)["V"][0] == pytest.approx(np.sqrt(10 / 120))
        assert phi(counts)["phi"][0] == pytest.approx(np.sqrt(10 / 60))

    def test_uses_uncorrected_statistic(self):
        table = [[10, 5], [8, 12]]
        assert phi(table)["phi"][0] == pytest.approx(0.264043, abs=1e-6)

    def test_independent_table(self):
        table = [[10, 10], [20, 20]]
        result = cramers_v(table)
        assert result["V"][0] == pytest.approx(0.0, abs=1e-12)
        assert result["CI_low"][0] == 0.0

    def test_adjusted_phi_floored(self):
        table = [[10, 10], [20, 21]]
        assert phi(table, adjust=True)["phi_adjusted"][0] == 0.0

    def test_adjusted_smaller_than_raw(self):
        raw = cramers_v(TABLE_2X3)["V"][0]
        adjusted = cramers_v(TABLE_2X3, adjust=True)["V_adjusted"][0]
        assert 0.0 < adjusted < raw


class TestDegenerateTables:
    """
    R: chisq.test() returns NaN for these tables and effectsize reports
    NA, so estimates and bounds are NaN rather than an error.
    """

    @pytest.mark.parametrize("table", [
        [[10, 5], [0, 0], [3, 4]],
        [[10, 0, 5], [3, 0, 4]],
        [[10, 5, 3]],
        [[10], [5]],
    ])
    def test_nan_row(self, table):
        for result in (cramers_v(table), phi(table), cramers_v(table, adjust=True)):
            assert list(result.columns)[1:] == ["CI", "CI_low", "CI_high"]
            values = result.iloc[0]
            assert np.isnan(values.iloc[0])
            assert np.isnan(values["CI_low"])
            assert np.isnan(values["CI_high"])
            assert values["CI"] == 0.95

    def test_single_count(self):
        assert np.isnan(phi([7])["phi"][0])

    def test_empty_cell_is_not_degenerate(self):
        result = cramers_v([[10, 0], [3, 4]])
        assert 0.0 < result["V"][0] < 1.0


# ═══════════════════════════════════════════════════════════════════════
# Output shape
# ═══════════════════════════════════════════════════════════════════════


class TestFrame:

    def test_columns(self):
        assert list(cramers_v(TABLE_2X3).columns) == ["V", "CI", "CI_low", "CI_high"]
        assert list(phi(TABLE_2X3, adjust=True).columns) == [
            "phi_adjusted", "CI", "CI_low", "CI_high",
        ]

    def test_no_interval(self):
        assert list(cramers_v(TABLE_2X3, ci=None).columns) == ["V"]

    def test_ci_recorded(self):
        assert cramers_v(TABLE_2X3, ci=0.9)["CI"][0] == 0.9

    def test_interval_brackets_estimate(self):
        result = cramers_v(TABLE_2X3)
        assert result["CI_low"][0] < result["V"][0] < result["CI_high"][0] <= 1.0


# ═══════════════════════════════════════════════════════════════════════
# Noncentrality interval
# ═══════════════════════════════════════════════════════════════════════


class TestNcpInterval:

    def test_quantile_conditions(self):
        low, high = ncp_interval(20.0, 2, 0.95)
        assert 0.0 < low < 20.0 < high
        assert stats.ncx2.cdf(20.0, 2, low) == pytest.approx(0.975, abs=1e-6)
        assert stats.ncx2.cdf(20.0, 2, high) == pytest.approx(0.025, abs=1e-6)

    def test_lower_bound_zero_for_small_statistic(self):
        low, high = ncp_interval(0.5, 1, 0.95)
        assert low == 0.0
        assert high > 0.0

    def test_wider_at_higher_level(self):
        low90, high90 = ncp_interval(20.0, 2, 0.90)
        low99, high99 = ncp_interval(20.0, 2, 0.99)
        assert low99 < low90
        assert high90 < high99


# ═══════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:

    def test_negative_counts(self):
        with pytest.raises(ValidationError, match="non-negative"):
            cramers_v([[1, -2], [3, 4]])

    def test_three_dimensional(self):
        with pytest.raises(ValidationError, match="3D"):
            phi(np.ones((2, 2, 2)))

    def test_too_few_observations(self):
        with pytest.raises(ValidationError, match="more than 1"):
            phi([1, 0])

    def test_bad_level(self):
        with pytest.raises(ValidationError, match="ci"):
            cramers_v(TABLE_2X3, ci=1.0)
