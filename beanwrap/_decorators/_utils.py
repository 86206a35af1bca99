"""
This module provides utility functions shared across the decorator implementations.
"""

from collections.abc import Callable


def _underlying_function(f: Callable) -> Callable:
    """Return the plain function behind a staticmethod/classmethod wrapper."""
    if isinstance(f, (staticmethod, classmethod)):
        return f.__func__
    return f


def _check_marker_target(f: Callable, decorator_name: str) -> Callable:
    """Validate that a marker decorates a function and return that function."""
    func = _underlying_function(f)
    if not callable(func):
        raise TypeError(f"@{decorator_name} can only decorate methods, got {f!r}.")
    return func
