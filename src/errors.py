# src/errors.py
from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when a dataset or prediction input has the wrong shape or range."""
