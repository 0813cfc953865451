from content_scoring.errors import (
    BaseError,
    ConfigurationError,
    ContentInputError,
    ErrorCategory,
    ErrorSeverity,
    ValidationError,
)


def test_validation_error_defaults():
    error = ValidationError("Content and metadata are required")

    assert isinstance(error, BaseError)
    assert error.category == ErrorCategory.VALIDATION_ERROR
    assert error.severity == ErrorSeverity.LOW
    assert str(error) == "Content and metadata are required"


def test_error_categories_and_severities():
    assert ConfigurationError("bad").category == ErrorCategory.CONFIGURATION_ERROR
    assert ConfigurationError("bad").severity == ErrorSeverity.HIGH
    assert ContentInputError("bad").category == ErrorCategory.INPUT_ERROR
    assert ContentInputError("bad").severity == ErrorSeverity.MEDIUM


def test_to_dict():
    error = ContentInputError("Cannot decode", details={"encoding": "ascii"}, error_id="e-1")
    data = error.to_dict()

    assert data["error"] == "Cannot decode"
    assert data["category"] == "input_error"
    assert data["severity"] == "medium"
    assert data["error_id"] == "e-1"
    assert data["details"] == {"encoding": "ascii"}
    assert data["timestamp"]


def test_details_default_to_empty_dict():
    assert ValidationError("x").details == {}
