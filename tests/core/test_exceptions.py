"""
Tests for the pyparameters exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyParametersError)
    - NotImplementedError compatibility of extraction errors
    - Diagnostic attributes and their defaults
"""

import pytest

from pyparameters.core.exceptions import (
    DetectionFailure,
    ExtractionNotImplementedError,
    PyParametersError,
    UnsupportedModelError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyParametersError."""

    def test_validation_error_is_pyparameters_error(self):
        with pytest.raises(PyParametersError):
            raise ValidationError("bad option")

    def test_not_implemented_is_builtin_not_implemented(self):
        with pytest.raises(NotImplementedError):
            raise ExtractionNotImplementedError("bootstrap")

    def test_unsupported_model_is_not_implemented(self):
        with pytest.raises(ExtractionNotImplementedError):
            raise UnsupportedModelError("unknown test")

    def test_unsupported_model_is_pyparameters_error(self):
        with pytest.raises(PyParametersError):
            raise UnsupportedModelError("unknown test")

    def test_detection_failure_is_not_validation_error(self):
        err = DetectionFailure("no response")
        assert isinstance(err, PyParametersError)
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_model_kind_stored(self):
        err = UnsupportedModelError("no extractor", model_kind="Fisher's Exact Test")
        assert err.model_kind == "Fisher's Exact Test"
        assert str(err) == "no extractor"

    def test_model_kind_defaults_to_none(self):
        assert ExtractionNotImplementedError("x").model_kind is None

    def test_detection_failure_what(self):
        err = DetectionFailure("cannot read", what="response_levels")
        assert err.what == "response_levels"
        assert DetectionFailure("cannot read").what is None
