"""
This module implements the '@operation' and '@parameter' decorators together
with the `param` helper.

`@operation`:
Marks any public method as an invokable operation of the bean. The operation
name defaults to the method name. Python classes cannot hold two methods of the
same name, so overloads are declared by giving differently named methods the
same explicit `name`; they are told apart by their parameter type signature.

`@parameter`:
Describes one parameter of an operation by argument name. It can be stacked
above or below `@operation`; the collected markers end up in the `_params`
mapping of the method's `OperationMeta`.

`param`:
Builds a `ParameterMeta` for use inside an annotation, which keeps the
description next to the parameter it describes:

    @operation(name="Echo Test")
    def echo(self, text: Annotated[str, param(name="Input")]) -> str: ...

A `@parameter` marker wins over an `Annotated` one for the same argument.
"""

import inspect
from collections.abc import Callable
from dataclasses import replace

from ._utils import _check_marker_target
from .meta import Impact, OperationMeta, ParameterMeta


def _is_operation(f: Callable) -> bool:
    """Check if a function is marked as a bean operation."""
    return callable(f) and isinstance(getattr(f, "_operation_meta", None), OperationMeta)


def operation(
    _func: Callable = None,
    *,
    name: str = "",
    description: str = "",
    name_key: str = "",
    description_key: str = "",
    impact: Impact | str = Impact.UNKNOWN,
    sort_key: str = "",
) -> Callable:
    """Decorator to mark a method as a bean operation.

    Args:
        _func (Callable | None, optional): The method to be decorated. This
            argument is automatically populated when `@operation` is used
            without parentheses. Defaults to None.
        name (str, optional): Explicit operation name. Defaults to the method
            name. Several methods may share one name if their parameter types
            differ.
        description (str, optional): Operation description. Defaults to "".
        name_key (str, optional): Resource bundle key for a localized name.
        description_key (str, optional): Resource bundle key for a localized
            description.
        impact (Impact | str, optional): Impact of the operation, as a member
            of `Impact` or its name. Defaults to `Impact.UNKNOWN`.
        sort_key (str, optional): Value used instead of the name when the bean
            is sorted.

    Returns:
        Callable: The decorated method, unchanged apart from its metadata.

    Raises:
        ValueError: If `impact` is not a valid impact.
    """
    impact = Impact.coerce(impact)

    def decorator(f: Callable) -> Callable:
        func = _check_marker_target(f, "operation")
        # Parameter markers applied below @operation are waiting on the function
        pending = getattr(func, "_parameter_meta", {})
        func._operation_meta = OperationMeta(
            _operation=True,
            _name=name,
            _description=description,
            _name_key=name_key,
            _description_key=description_key,
            _impact=impact,
            _sort_key=sort_key,
            _params=dict(pending),
        )
        return f

    if _func is None:
        return decorator
    else:
        return decorator(_func)


def param(
    name: str = "",
    description: str = "",
    name_key: str = "",
    description_key: str = "",
) -> ParameterMeta:
    """Build a parameter marker for use in `typing.Annotated`."""
    return ParameterMeta(
        _name=name,
        _description=description,
        _name_key=name_key,
        _description_key=description_key,
    )


def parameter(
    arg: str,
    *,
    name: str = "",
    description: str = "",
    name_key: str = "",
    description_key: str = "",
) -> Callable:
    """Decorator to describe one parameter of an operation.

    Args:
        arg (str): Name of the function argument being described.
        name (str, optional): Display name of the parameter. Defaults to the
            positional name (`param1`, `param2`, ...).
        description (str, optional): Parameter description. Defaults to "".
        name_key (str, optional): Resource bundle key for a localized name.
        description_key (str, optional): Resource bundle key for a localized
            description.

    Returns:
        Callable: A decorator recording the marker on the method.

    Raises:
        ValueError: If the decorated function has no argument called `arg`.
    """
    marker = param(name, description, name_key, description_key)

    def decorator(f: Callable) -> Callable:
        func = _check_marker_target(f, "parameter")
        if arg not in inspect.signature(func).parameters:
            raise ValueError(
                f"Function {func.__name__} has no argument {arg!r} to describe."
            )

        pending = dict(getattr(func, "_parameter_meta", {}))
        pending[arg] = marker
        func._parameter_meta = pending

        # @parameter stacked above @operation updates the existing metadata
        operation_meta = getattr(func, "_operation_meta", None)
        if isinstance(operation_meta, OperationMeta):
            params = operation_meta._params
            params[arg] = marker
            func._operation_meta = replace(operation_meta, _params=params)

        return f

    return decorator
