"""
This module serves as the main entry point for the beanwrap package,
exposing its primary public API.
"""

from beanwrap._decorators import Impact, attribute, bean, operation, param, parameter
from beanwrap._errors import (
    AttributeNotFoundError,
    BeanDefinitionError,
    BeanError,
    BundleNotFoundError,
    ConflictingDeclarationError,
    InvocationError,
    NotABeanError,
    OperationNotFoundError,
)
from beanwrap.core import (
    AttributeDescriptor,
    BeanDescriptor,
    BeanMatrix,
    BeanWrapper,
    OperationDescriptor,
    ParameterDescriptor,
)
from beanwrap.i18n import FileBundleResolver, MappingResolver, TextResolver

# --- Define main API for beanwrap module ---
__all__ = [
    "AttributeDescriptor",
    "AttributeNotFoundError",
    "BeanDefinitionError",
    "BeanDescriptor",
    "BeanError",
    "BeanMatrix",
    "BeanWrapper",
    "BundleNotFoundError",
    "ConflictingDeclarationError",
    "FileBundleResolver",
    "Impact",
    "InvocationError",
    "MappingResolver",
    "NotABeanError",
    "OperationDescriptor",
    "OperationNotFoundError",
    "ParameterDescriptor",
    "TextResolver",
    "attribute",
    "bean",
    "operation",
    "param",
    "parameter",
]
