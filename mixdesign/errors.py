# mixdesign/errors.py
"""
Exceptions raised by the mix design core.

All project exceptions derive from MixDesignError. InvalidStrength is also a
ValueError, so callers that only know about bad input can catch that instead.
"""
from __future__ import annotations

from typing import Any

MISSING = "missing"
NON_NUMERIC = "non_numeric"
NOT_FINITE = "not_finite"
NON_POSITIVE = "non_positive"


class MixDesignError(Exception):
    """Base class for every error raised by this package."""


class InvalidStrength(MixDesignError, ValueError):
    """fck is missing, not a number, not finite, or not strictly positive."""

    def __init__(self, reason: str, raw: Any = None):
        self.reason = reason
        self.raw = raw
        self.message = "fck is required" if reason == MISSING else "Invalid fck value"
        super().__init__(self.message)
