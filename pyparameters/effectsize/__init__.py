"""
Effect sizes for contingency tables.

Public API:
    cramers_v(observed, ci, adjust) - Cramer's V (raw or bias-corrected)
    phi(observed, ci, adjust)       - phi coefficient (raw or bias-corrected)
    ncp_interval(chisq, df, level)  - CI for the chi-squared noncentrality
"""

from pyparameters.effectsize._association import cramers_v, phi, ncp_interval

__all__ = [
    "cramers_v",
    "phi",
    "ncp_interval",
]
