"""
Parsing of free-text htest labels.

The modeling ecosystem encodes test variants only in its text labels
("x and y", "extra by group", "Spearman's rank correlation rho"). All
substring matching lives here so the order-sensitive checks can be
tested on their own.
"""

from __future__ import annotations

import re

AND_SEPARATOR = " and "
BY_SEPARATOR = " by "

PEARSON_CHI2_METHOD = "Pearson's Chi-squared test"

_CONTINUITY_CORRECTION = re.compile("with continuity correction")


def split_label(data_name: str, separator: str) -> tuple[str, str]:
    """
    Split a data label into its two variable names.

    Args:
        data_name: Label such as "mpg and cyl"
        separator: AND_SEPARATOR or BY_SEPARATOR

    Returns:
        (first, second); second is "" when the separator is absent
    """
    parts = data_name.split(separator)
    first = parts[0]
    second = parts[1] if len(parts) > 1 else ""
    return first, second


def correlation_variant(method: str) -> str:
    """
    Classify a correlation test by its method label.

    Checks run in a fixed order and the first match wins:
    exact "Pearson's Chi-squared test", then "Pearson", then "Spearman";
    anything else is Kendall.

    Returns:
        One of "chi2", "pearson", "spearman", "kendall"
    """
    if method == PEARSON_CHI2_METHOD:
        return "chi2"
    if "Pearson" in method:
        return "pearson"
    if "Spearman" in method:
        return "spearman"
    return "kendall"


def ttest_variant(data_name: str) -> str:
    """
    Classify a t-test by the structure of its data label.

    Returns:
        "named" for "x and y" labels (two samples with their own names),
        "grouped" for "y by g" labels, "one_sample" otherwise
    """
    if AND_SEPARATOR in data_name:
        return "named"
    if BY_SEPARATOR in data_name:
        return "grouped"
    return "one_sample"


def is_mcnemar(method: str) -> bool:
    return method.startswith("McNemar")


def clean_method(method: str) -> str:
    """Drop the continuity-correction note from a method label."""
    return _CONTINUITY_CORRECTION.sub("", method).strip()
