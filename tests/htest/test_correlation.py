"""
Tests for correlation-test extraction.

Reference values from R:
    cor.test(mtcars$mpg, mtcars$cyl)
    cor.test(mtcars$mpg, mtcars$cyl, method = "spearman")
    cor.test(mtcars$mpg, mtcars$cyl, method = "kendall")
"""

import numpy as np
import pytest

from pyparameters.htest import model_parameters_htest
from pyparameters.htest._parsing import correlation_variant, split_label


class TestLabels:

    def test_split_and(self):
        assert split_label("mpg and cyl", " and ") == ("mpg", "cyl")

    def test_split_without_separator(self):
        assert split_label("mpg", " and ") == ("mpg", "")

    @pytest.mark.parametrize("method, variant", [
        ("Pearson's Chi-squared test", "chi2"),
        ("Pearson's product-moment correlation", "pearson"),
        ("Spearman's rank correlation rho", "spearman"),
        ("Kendall's rank correlation tau", "kendall"),
        ("Somers' delta correlation", "kendall"),
    ])
    def test_variant(self, method, variant):
        assert correlation_variant(method) == variant

    def test_chi2_needs_exact_label(self):
        """A Pearson chi-squared label with a suffix is a Pearson correlation."""
        assert correlation_variant("Pearson's Chi-squared test with Yates'") == "pearson"


class TestPearson:
    """
    R:
        t = -8.9197, df = 30, p-value = 6.113e-10
        95 percent confidence interval: -0.9257694 -0.7163171
        cor -0.852162
    """

    @pytest.fixture
    def result(self, make_htest):
        return make_htest(
            method="Pearson's product-moment correlation",
            data_name="mtcars$mpg and mtcars$cyl",
            p_value=6.112688e-10,
            statistic=-8.919699,
            parameter={"df": 30},
            conf_int=[-0.9257694, -0.7163171],
            estimate={"cor": -0.852162},
            null_value={"correlation": 0.0},
        )

    def test_columns(self, result):
        table = model_parameters_htest(result)
        assert table.columns == (
            "Parameter1", "Parameter2", "r", "t", "df", "p",
            "CI_low", "CI_high", "Method",
        )

    def test_values(self, result):
        row = model_parameters_htest(result).rows()[0]
        assert row["Parameter1"] == "mtcars$mpg"
        assert row["Parameter2"] == "mtcars$cyl"
        assert row["r"] == pytest.approx(-0.852162)
        assert row["t"] == pytest.approx(-8.919699)
        assert row["df"] == 30
        assert row["p"] == pytest.approx(6.112688e-10)
        assert row["CI_low"] == pytest.approx(-0.9257694)
        assert row["CI_high"] == pytest.approx(-0.7163171)
        assert row["Method"] == "Pearson"

    def test_ci_test_from_model(self, result):
        table = model_parameters_htest(result, ci=0.9)
        assert table.ci == 0.9
        assert table.ci_test == 0.95

    def test_summary(self, result):
        lines = model_parameters_htest(result).summary().splitlines()
        assert lines[2].split(" | ")[-4].strip() == "< .001"


class TestRankCorrelations:

    def test_spearman(self, make_htest):
        """R: S = 10425, p-value = 4.691e-14, rho -0.9108013"""
        result = make_htest(
            method="Spearman's rank correlation rho",
            data_name="mtcars$mpg and mtcars$cyl",
            p_value=4.690287e-14,
            statistic=10425.33,
            estimate={"rho": -0.9108013},
        )
        table = model_parameters_htest(result)
        assert table.columns == (
            "Parameter1", "Parameter2", "rho", "S", "df", "p", "Method",
        )
        row = table.rows()[0]
        assert row["rho"] == pytest.approx(-0.9108013)
        assert row["S"] == pytest.approx(10425.33)
        assert np.isnan(row["df"])
        assert row["Method"] == "Spearman"
        assert table.ci_test is None

    def test_kendall(self, make_htest):
        """R: z = -6.1083, p-value = 1.007e-09, tau -0.7953134"""
        result = make_htest(
            method="Kendall's rank correlation tau",
            data_name="mtcars$mpg and mtcars$cyl",
            p_value=1.006718e-09,
            statistic=-6.108311,
            estimate={"tau": -0.7953134},
        )
        table = model_parameters_htest(result)
        assert table.columns == (
            "Parameter1", "Parameter2", "tau", "z", "df", "p", "Method",
        )
        assert table["tau"][0] == pytest.approx(-0.7953134)
        assert table["Method"][0] == "Kendall"


class TestChi2Variant:

    def test_correlation_flagged_chi2(self, make_htest):
        result = make_htest(
            method="Pearson's Chi-squared test",
            data_name="x and y",
            p_value=0.118,
            statistic=2.44,
            parameter={"df": 1},
            model_info={"is_correlation": True},
        )
        table = model_parameters_htest(result)
        assert table.columns == ("Parameter1", "Parameter2", "Chi2", "df", "p", "Method")
        assert table["Method"][0] == "Pearson"
        assert table["Chi2"][0] == pytest.approx(2.44)
