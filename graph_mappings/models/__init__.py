"""Mapping models."""
from .edge import EdgeMapping

__all__ = ["EdgeMapping"]
