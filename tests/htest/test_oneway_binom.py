"""
Tests for one-way ANOVA and exact binomial test extraction.

Reference values from R:
    oneway.test(extra ~ group, data = sleep)
    binom.test(9, 10)
"""

import pytest

from pyparameters.htest import model_parameters_htest


class TestOneway:
    """R: F = 3.4626, num df = 1.000, denom df = 17.776, p-value = 0.07939"""

    @pytest.fixture
    def table(self, make_htest):
        result = make_htest(
            method="One-way analysis of means (not assuming equal variances)",
            data_name="extra and group",
            p_value=0.07939414,
            statistic=3.462627,
            parameter={"num df": 1.0, "denom df": 17.77647},
        )
        return model_parameters_htest(result)

    def test_columns(self, table):
        assert table.columns == ("F", "df_num", "df_denom", "p", "Method")

    def test_values(self, table):
        row = table.rows()[0]
        assert row["F"] == pytest.approx(3.462627)
        assert row["df_num"] == 1.0
        assert row["df_denom"] == pytest.approx(17.77647)
        assert row["Method"] == "One-way analysis of means (not assuming equal variances)"

    def test_df_printed_unrounded(self, table):
        text = table.formatted()
        assert text["df_num"][0] == "1"
        assert text["df_denom"][0] == "17.7765"


class TestBinomial:
    """
    R:
        number of successes = 9, number of trials = 10, p-value = 0.02148
        95 percent confidence interval: 0.5549839 0.9974714
        probability of success 0.9
    """

    @pytest.fixture
    def result(self, make_htest):
        return make_htest(
            method="Exact binomial test",
            data_name="9 and 10",
            p_value=0.02148438,
            statistic=9,
            parameter={"number of trials": 10},
            conf_int=[0.5549839, 0.9974714],
            estimate={"probability of success": 0.9},
            null_value={"probability of success": 0.5},
        )

    def test_columns(self, result):
        table = model_parameters_htest(result)
        assert table.columns == (
            "Probability", "CI_low", "CI_high", "Success", "Trials",
            "Null_value", "p", "Method",
        )

    def test_values(self, result):
        row = model_parameters_htest(result).rows()[0]
        assert row["Probability"] == pytest.approx(0.9)
        assert row["CI_low"] == pytest.approx(0.5549839)
        assert row["CI_high"] == pytest.approx(0.9974714)
        assert row["Success"] == 9
        assert row["Trials"] == 10
        assert row["Null_value"] == 0.5
        assert row["p"] == pytest.approx(0.02148438)
        assert row["Method"] == "Exact binomial test"

    def test_metadata(self, result):
        table = model_parameters_htest(result, digits=3, p_digits=4)
        assert dict(table.attributes) == {
            "digits": 3, "ci_digits": 2, "p_digits": 4, "ci": 0.95, "ci_test": 0.95,
        }

    def test_formatting(self, result):
        text = model_parameters_htest(result).formatted().iloc[0]
        assert text["Success"] == "9"
        assert text["Trials"] == "10"
        assert text["CI_low"] == "0.55"
        assert text["p"] == "0.021"
