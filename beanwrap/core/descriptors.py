"""
This module defines the descriptors a `BeanWrapper` publishes: the immutable
records a management console renders and a remote client uses to find out
what a bean offers.

- `BeanDescriptor`: name and description of the bean plus its ordered
  attribute and operation descriptors.
- `AttributeDescriptor`: a named, typed property that is readable, writable or
  both.
- `OperationDescriptor`: a named operation with its return type, impact and
  ordered parameters. Overloads share a name; the pair (name, signature) is
  unique within one bean.
- `ParameterDescriptor`: one parameter of an operation. `positional_name` is
  always `param<N>` (1-based), whatever display name was declared.

All descriptors are frozen dataclasses holding tuples, so they can be shared
freely between threads once the wrapper is built.
"""

from dataclasses import dataclass

from beanwrap._decorators import Impact


@dataclass(frozen=True)
class ParameterDescriptor:
    """Description of one operation parameter."""

    positional_name: str
    name: str
    description: str
    type: str


@dataclass(frozen=True)
class AttributeDescriptor:
    """Description of one bean attribute."""

    name: str
    description: str
    value_type: str
    readable: bool
    writable: bool
    is_boolean_style: bool = False
    sort_key: str = ""

    def __post_init__(self):
        if not (self.readable or self.writable):
            raise ValueError(f"Attribute {self.name!r} is neither readable nor writable.")


@dataclass(frozen=True)
class OperationDescriptor:
    """Description of one bean operation (one overload)."""

    name: str
    description: str
    return_type: str
    parameters: tuple[ParameterDescriptor, ...] = ()
    impact: Impact = Impact.UNKNOWN
    sort_key: str = ""

    @property
    def signature(self) -> tuple[str, ...]:
        """The ordered parameter type identifiers of this operation."""
        return tuple(p.type for p in self.parameters)


@dataclass(frozen=True)
class BeanDescriptor:
    """Description of a bean with its ordered attributes and operations."""

    name: str
    description: str
    attributes: tuple[AttributeDescriptor, ...] = ()
    operations: tuple[OperationDescriptor, ...] = ()

    def get_attribute_descriptor(self, name: str) -> AttributeDescriptor | None:
        """Return the attribute descriptor called `name`, if any."""
        return next((a for a in self.attributes if a.name == name), None)

    def get_operation_descriptors(self, name: str) -> list[OperationDescriptor]:
        """Return all overloads registered under the operation name `name`."""
        return [o for o in self.operations if o.name == name]
