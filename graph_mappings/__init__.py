"""Typed graph mapping definitions for property graph generation."""
from .exceptions import (
    InvalidArgumentError,
    MappingError,
    MissingRequiredKeyError,
    NotationSyntaxError,
    NullInputError,
    TypeMismatchError,
)
from .models.edge import EdgeMapping

__all__ = [
    "EdgeMapping",
    "MappingError",
    "NullInputError",
    "InvalidArgumentError",
    "MissingRequiredKeyError",
    "TypeMismatchError",
    "NotationSyntaxError",
]
