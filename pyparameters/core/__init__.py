"""
Core infrastructure for pyparameters.

This module provides shared abstractions used by all extraction
submodules (htest, generic).

Key components:
    protocols: HTestLike, ComponentModel protocols
    table: ParameterTable output type
    options: FormatOptions and the attribute attacher
    exceptions: Exception hierarchy
    validation: Input validators
"""

from pyparameters.core.protocols import HTestLike, ComponentModel
from pyparameters.core.table import ParameterTable
from pyparameters.core.options import FormatOptions, attach_attributes
from pyparameters.core.exceptions import (
    PyParametersError,
    ValidationError,
    ExtractionNotImplementedError,
    UnsupportedModelError,
    DetectionFailure,
)

__all__ = [
    # Protocols
    "HTestLike",
    "ComponentModel",
    # Output
    "ParameterTable",
    "FormatOptions",
    "attach_attributes",
    # Exceptions
    "PyParametersError",
    "ValidationError",
    "ExtractionNotImplementedError",
    "UnsupportedModelError",
    "DetectionFailure",
]
