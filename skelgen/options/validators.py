"""Reusable validation predicates for options.

Each factory returns a callable that accepts a candidate value and raises
``ValueError`` with a human-readable reason when the value is rejected.
"""

from __future__ import annotations

import re

from .models import OptionValue, Validator


def not_empty() -> Validator:
    """Reject empty or whitespace-only strings."""

    def _validate(value: OptionValue) -> None:
        if isinstance(value, str) and not value.strip():
            raise ValueError("value must not be empty")

    return _validate


def matches(pattern: str, hint: str = "") -> Validator:
    """Require string values to match *pattern* in full."""
    compiled = re.compile(pattern)

    def _validate(value: OptionValue) -> None:
        if not isinstance(value, str):
            return
        if compiled.fullmatch(value) is None:
            reason = hint or f"value must match {pattern}"
            raise ValueError(f"{value!r}: {reason}")

    return _validate


def in_range(minimum: int, maximum: int) -> Validator:
    """Require integer values between *minimum* and *maximum* (inclusive)."""

    def _validate(value: OptionValue) -> None:
        if type(value) is not int:
            return
        if not minimum <= value <= maximum:
            raise ValueError(f"{value} is not between {minimum} and {maximum}")

    return _validate


def all_of(*validators: Validator) -> Validator:
    """Combine validators; the first rejection wins."""

    def _validate(value: OptionValue) -> None:
        for validator in validators:
            validator(value)

    return _validate
