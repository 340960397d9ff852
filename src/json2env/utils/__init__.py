"""Utility functions for json2env."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
