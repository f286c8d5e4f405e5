"""
Exception hierarchy for pyparameters.

All exceptions inherit from PyParametersError to allow catching any
library-specific error. Extraction-specific exceptions should inherit
from the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyParametersError(Exception):
    """Base exception for all pyparameters errors."""
    pass


class ValidationError(PyParametersError):
    """
    Input validation failed.

    Raised when user-provided options (confidence level, rounding digits,
    component names, effect-size flags) fail validation checks.
    """
    pass


class ExtractionNotImplementedError(PyParametersError, NotImplementedError):
    """
    Parameter extraction is not implemented for the requested model.

    Raised for bootstrapped extraction and for hypothesis-test subtypes
    that no extractor handles. Subclasses NotImplementedError so callers
    can treat it like any other unimplemented operation.

    Attributes:
        model_kind: Description of the model kind that was rejected
    """

    def __init__(self, message: str, model_kind: str | None = None):
        super().__init__(message)
        self.model_kind = model_kind


class UnsupportedModelError(ExtractionNotImplementedError):
    """
    No extractor can classify the model.

    Raised by the dispatchers when none of the model-kind predicates
    matches the input.
    """
    pass


class DetectionFailure(PyParametersError):
    """
    Model introspection failed.

    Raised by model adapters when a property of the fitted model (such as
    the number of response levels) cannot be determined. Handled inside
    the parameter merger and never propagated to callers of
    model_parameters().

    Attributes:
        what: The property that could not be detected
    """

    def __init__(self, message: str, what: str | None = None):
        super().__init__(message)
        self.what = what
