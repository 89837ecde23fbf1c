"""Tests for argument guards and the error types."""

import pytest

from switchyard import ArgumentError, EmptySequenceError, require


class TestRequire:
    """Tests for require()."""

    def test_returns_callable(self):
        """A callable passes through unchanged."""
        assert require(len, 'f') is len

    def test_none_is_missing(self):
        """None reports the argument as required."""
        with pytest.raises(ArgumentError, match="Argument 'f' is required") as exc_info:
            require(None, 'f')
        assert exc_info.value.argument == 'f'
        assert exc_info.value.value is None

    def test_non_callable(self):
        """A non-callable value reports its type."""
        with pytest.raises(ArgumentError, match='must be callable, got int'):
            require(3, 'merge')  # type: ignore[arg-type]


class TestErrors:
    """Tests for the error hierarchy."""

    def test_argument_error_is_type_error(self):
        """ArgumentError is a TypeError."""
        assert issubclass(ArgumentError, TypeError)

    def test_empty_sequence_error(self):
        """EmptySequenceError is a ValueError naming the operation."""
        error = EmptySequenceError('aggregate')
        assert isinstance(error, ValueError)
        assert error.operation == 'aggregate'
        assert 'aggregate()' in str(error)
