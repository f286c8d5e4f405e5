"""
Per-kind htest extractors.

EXTRACTORS maps each HTestKind to the function turning an HTest into
its parameter rows.
"""

from pyparameters.htest._common import HTestKind
from pyparameters.htest.extractors._correlation import extract_correlation
from pyparameters.htest.extractors._ttest import extract_ttest
from pyparameters.htest.extractors._oneway import extract_oneway
from pyparameters.htest.extractors._chisq import extract_chi2
from pyparameters.htest.extractors._prop import extract_prop, format_percent
from pyparameters.htest.extractors._binom import extract_binom

EXTRACTORS = {
    HTestKind.CORRELATION: extract_correlation,
    HTestKind.TTEST: extract_ttest,
    HTestKind.ONEWAY: extract_oneway,
    HTestKind.CHI2: extract_chi2,
    HTestKind.PROPORTION: extract_prop,
    HTestKind.BINOMIAL: extract_binom,
}

__all__ = [
    "EXTRACTORS",
    "extract_correlation",
    "extract_ttest",
    "extract_oneway",
    "extract_chi2",
    "extract_prop",
    "extract_binom",
    "format_percent",
]
