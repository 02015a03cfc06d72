"""Extraction of typed values from generic maps and map notation."""
from .notation import parse_map_literal
from .reader import MapValueReader

__all__ = ["MapValueReader", "parse_map_literal"]
