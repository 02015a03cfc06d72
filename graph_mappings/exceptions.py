"""Custom exceptions for edge mapping parsing and validation."""
from typing import Optional


class MappingError(Exception):
    """Base exception for mapping definitions."""
    pass


class NullInputError(MappingError, ValueError):
    """The object to parse was absent."""
    pass


class InvalidArgumentError(MappingError, ValueError):
    """An argument was not usable as a mapping or mapping field."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class MissingRequiredKeyError(MappingError, KeyError):
    """A required key was absent from a mapping."""

    def __init__(self, key: str, context: str = "mapping"):
        super().__init__(f"Required key '{key}' is missing from {context}")
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class TypeMismatchError(MappingError, TypeError):
    """A key was present but its value had the wrong shape."""

    def __init__(self, key: str, expected: str, actual: object):
        self.key = key
        self.expected = expected
        self.actual = type(actual).__name__
        super().__init__(
            f"Value for key '{key}' must be {expected}, got {self.actual}"
        )


class NotationSyntaxError(MappingError, ValueError):
    """Malformed map notation text."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} at position {position}")
        self.position = position
