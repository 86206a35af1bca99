"""
This module exposes the core components of the beanwrap engine,
including the wrapper, the descriptors and the tabular view.
"""

from beanwrap.core._matrix import BeanMatrix
from beanwrap.core.descriptors import (
    AttributeDescriptor,
    BeanDescriptor,
    OperationDescriptor,
    ParameterDescriptor,
)
from beanwrap.core.wrapper import BeanWrapper

__all__ = [
    "AttributeDescriptor",
    "BeanDescriptor",
    "BeanMatrix",
    "BeanWrapper",
    "OperationDescriptor",
    "ParameterDescriptor",
]
