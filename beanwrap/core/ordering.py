"""
This module contains the Orderer, the last stage of building a `BeanWrapper`.

For a bean declared with `@bean(sorted=True)`, attribute and operation
descriptors are ordered by their sort key, or by their name where the sort key
is empty. Python's sort is stable, so descriptors with equal keys keep their
discovery order. Unsorted beans keep the discovery order as is.
"""

from collections.abc import Iterable
from typing import TypeVar

from .descriptors import AttributeDescriptor, OperationDescriptor

_Descriptor = TypeVar("_Descriptor", AttributeDescriptor, OperationDescriptor)


def _sort_value(descriptor: AttributeDescriptor | OperationDescriptor) -> str:
    return descriptor.sort_key or descriptor.name


def order_descriptors(
    descriptors: Iterable[_Descriptor], sort: bool = False
) -> tuple[_Descriptor, ...]:
    """Return the descriptors as a tuple, ordered by sort key when `sort` is set."""
    if sort:
        return tuple(sorted(descriptors, key=_sort_value))
    return tuple(descriptors)
