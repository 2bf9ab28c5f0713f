"""Tests for the parser errors module."""

import pytest

from shaderio.parser.errors import ParserError


def test_parser_error():
    """Test that ParserError shows the message and the partial record."""
    # Arrange
    variable = {"qualifier": "uniform", "name": None}

    # Act & Assert
    with pytest.raises(ParserError) as excinfo:
        raise ParserError("Unable to read a full GLSL variable", variable)

    error_str = str(excinfo.value)
    assert error_str.startswith("Unable to read a full GLSL variable: ")
    assert '"qualifier": "uniform"' in error_str
    assert excinfo.value.variable == variable


def test_parser_error_problems():
    """Test that validation problems are listed in the message."""
    # Act
    error = ParserError("Invalid block variable", {}, ["missing name", "bad type"])

    # Assert
    assert str(error) == "Invalid block variable: {} (missing name; bad type)"
    assert error.problems == ["missing name", "bad type"]


def test_parser_error_message_only():
    """Test that ParserError without a record is just its message."""
    # Act
    error = ParserError("Shader code must be a string, got int")

    # Assert
    assert str(error) == "Shader code must be a string, got int"
    assert error.variable is None
    assert error.problems == []


def test_parser_error_inheritance():
    """Test that ParserError inherits from Exception."""
    # Act
    error = ParserError("Test")

    # Assert
    assert isinstance(error, Exception)
    assert issubclass(ParserError, Exception)
