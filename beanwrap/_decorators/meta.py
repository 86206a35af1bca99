"""
This module defines the core metadata structures, `BeanMeta`, `AttributeMeta`,
`OperationMeta` and `ParameterMeta`, which are attached by the `beanwrap`
decorators (`@bean`, `@attribute`, `@operation`, `@parameter`) to decorated
classes and methods.

These dataclasses are designed to be immutable containers for metadata,
ensuring that a bean's declared management interface stays consistent between
the moment the class is defined and the moment a `BeanWrapper` scans it. This
immutability is enforced by using `@dataclass(frozen=True)` and by returning
defensive copies of mutable attributes (dicts) via a custom `__getattribute__`
method.

`BeanMeta`:
    Attached to a class by `@bean`. It carries the bean's display name and
    description, the resource bundle used for localized names, and the
    `sorted` and `strict` flags.

`AttributeMeta`:
    Attached to a getter or setter method by `@attribute`. All fields are
    optional; empty strings mean "derive the default".

`OperationMeta`:
    Attached to a method by `@operation`. Besides names and descriptions it
    holds the `Impact` of the operation and the parameter markers collected
    from `@parameter` decorators (`_params`).

`ParameterMeta`:
    Describes a single operation parameter. Created by `@parameter` or by
    `param(...)` inside a `typing.Annotated` annotation.
"""

from dataclasses import dataclass
from enum import Enum


class Impact(Enum):
    """Impact classification of an operation."""

    INFO = "INFO"
    ACTION = "ACTION"
    ACTION_INFO = "ACTION_INFO"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def coerce(cls, value: "Impact | str | None") -> "Impact":
        """Return an Impact member for a member, its name, or None."""
        if value is None:
            return cls.UNKNOWN
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.upper() in cls.__members__:
            return cls[value.upper()]
        raise ValueError(
            f"Invalid impact {value!r}. Valid values are: {list(cls.__members__)}"
        )


@dataclass(frozen=True)
class BeanMeta:
    """
    Metadata for the Bean decorator.
    """

    _bean: bool
    _class_name: str = ""
    _description: str = ""
    _description_key: str = ""
    _resource_bundle: str = ""
    _sorted: bool = False
    _strict: bool = False


@dataclass(frozen=True)
class AttributeMeta:
    """
    Metadata for the Attribute decorator.
    """

    _attribute: bool
    _name: str = ""
    _description: str = ""
    _name_key: str = ""
    _description_key: str = ""
    _sort_key: str = ""


@dataclass(frozen=True)
class ParameterMeta:
    """
    Metadata for a single operation parameter.
    """

    _name: str = ""
    _description: str = ""
    _name_key: str = ""
    _description_key: str = ""


@dataclass(frozen=True)
class OperationMeta:
    """
    Metadata for the Operation decorator.

    This class is frozen. The `_params` mapping (argument name -> ParameterMeta)
    is returned as a copy when accessed to prevent external mutation.
    """

    _operation: bool
    _name: str = ""
    _description: str = ""
    _name_key: str = ""
    _description_key: str = ""
    _impact: Impact = Impact.UNKNOWN
    _sort_key: str = ""
    _params: dict[str, ParameterMeta] = None

    def __getattribute__(self, name: str):
        # Intercept container access to return defensive copies
        val = super().__getattribute__(name)
        if name == "_params":
            return dict(val) if isinstance(val, dict) else {}
        return val
