"""
Sequence Errors Module

Exception hierarchy raised by sequence construction, mutation and the
expression pipeline. Every error derives from SequenceError and from the
builtin exception that best matches the failed precondition, so callers can
catch either.
"""


class SequenceError(Exception):
    """Base class for all sequence errors."""
    pass


class OutOfRangeError(SequenceError, IndexError):
    """Raised when a mutation position is not a valid index."""

    def __init__(self, position: int, length: int):
        self.position = position
        self.length = length
        super().__init__(
            f"Position {position} is out of range for sequence of length {length}"
        )


class InvalidUnitError(SequenceError, ValueError):
    """Raised when a mutation value is not part of the sequence alphabet."""

    def __init__(self, value, kind):
        self.value = value
        self.kind = kind
        super().__init__(f"Invalid {kind.value} unit {value!r}")


class ConstructionError(SequenceError, ValueError):
    """Raised when a sequence is built from an invalid identifier or data."""
    pass


class WrongKindError(SequenceError, TypeError):
    """Raised when an operation is applied to the wrong kind of sequence."""

    def __init__(self, operation: str, expected, actual):
        self.operation = operation
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{operation} requires a {expected.value} sequence, got {actual.value}"
        )
