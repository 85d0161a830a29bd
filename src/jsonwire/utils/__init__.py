"""Shared utilities for the JSON Wire client."""

from .error_mapper import classify, error_for_status, ErrorKind
from .element_resolver import get_by_strategy

__all__ = [
    "classify",
    "error_for_status",
    "ErrorKind",
    "get_by_strategy",
]
