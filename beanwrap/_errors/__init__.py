"""
This module centralizes custom exception types for the beanwrap package,
making them easily importable from a single location.
"""

from ._base import BeanError
from ._bean import BeanDefinitionError, ConflictingDeclarationError, NotABeanError
from ._bundle import BundleNotFoundError
from ._dispatch import (
    AttributeNotFoundError,
    InvocationError,
    OperationNotFoundError,
    _unwrap_invocation_cause,
)

__all__ = [
    "AttributeNotFoundError",
    "BeanDefinitionError",
    "BeanError",
    "BundleNotFoundError",
    "ConflictingDeclarationError",
    "InvocationError",
    "NotABeanError",
    "OperationNotFoundError",
    "_unwrap_invocation_cause",
]
