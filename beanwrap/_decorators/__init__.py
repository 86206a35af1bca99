"""
This module aggregates the marker decorators from the sub-modules,
making them accessible under the 'beanwrap._decorators' namespace.
"""

from beanwrap._decorators.attribute import _is_attribute, attribute
from beanwrap._decorators.bean import _is_bean, bean
from beanwrap._decorators.meta import (
    AttributeMeta,
    BeanMeta,
    Impact,
    OperationMeta,
    ParameterMeta,
)
from beanwrap._decorators.operation import _is_operation, operation, param, parameter

__all__ = [
    "AttributeMeta",
    "BeanMeta",
    "Impact",
    "OperationMeta",
    "ParameterMeta",
    "_is_attribute",
    "_is_bean",
    "_is_operation",
    "attribute",
    "bean",
    "operation",
    "param",
    "parameter",
]
