"""
This module implements the '@attribute' decorator, which marks a getter or a
setter method as one side of a bean attribute.

A getter is a method taking no argument besides `self` whose name starts with
`get` or `is`; a setter takes exactly one argument and its name starts with
`set`. A getter and a setter are merged into a single attribute when their
(declared or derived) names are equal, so both sides are usually decorated:

    @attribute(description="The current floor")
    def getLevel(self) -> int: ...

    @attribute
    def setLevel(self, level: int) -> None: ...

Methods of any other shape are accepted by the decorator but ignored when the
bean is wrapped.
"""

from collections.abc import Callable

from ._utils import _check_marker_target
from .meta import AttributeMeta


def _is_attribute(f: Callable) -> bool:
    """Check if a function is marked as a bean attribute."""
    return callable(f) and isinstance(getattr(f, "_attribute_meta", None), AttributeMeta)


def attribute(
    _func: Callable = None,
    *,
    name: str = "",
    description: str = "",
    name_key: str = "",
    description_key: str = "",
    sort_key: str = "",
) -> Callable:
    """Decorator to mark a getter or setter method as a bean attribute.

    Args:
        _func (Callable | None, optional): The method to be decorated. This
            argument is automatically populated when `@attribute` is used
            without parentheses. Defaults to None.
        name (str, optional): Explicit attribute name. Defaults to the method
            name without its `get`/`is`/`set` prefix, first letter lower-cased.
        description (str, optional): Attribute description. Defaults to "".
        name_key (str, optional): Resource bundle key for a localized name.
        description_key (str, optional): Resource bundle key for a localized
            description.
        sort_key (str, optional): Value used instead of the name when the bean
            is sorted.

    Returns:
        Callable: The decorated method, unchanged apart from its metadata.
    """

    def decorator(f: Callable) -> Callable:
        func = _check_marker_target(f, "attribute")
        func._attribute_meta = AttributeMeta(
            _attribute=True,
            _name=name,
            _description=description,
            _name_key=name_key,
            _description_key=description_key,
            _sort_key=sort_key,
        )
        return f

    if _func is None:
        return decorator
    else:
        return decorator(_func)
