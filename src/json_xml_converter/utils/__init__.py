"""Utility functions for the JSON/XML converter."""

from .name_sanitizer import sanitize
from .validation import ValidationUtils

__all__ = ["sanitize", "ValidationUtils"]
