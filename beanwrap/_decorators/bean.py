"""
This module implements the '@bean' decorator, the class-level marker that
turns an ordinary class into something a `BeanWrapper` agrees to wrap.

The decorator only records metadata; the class itself is returned unchanged,
so instances behave exactly as before. Subclasses inherit the marker through
normal attribute lookup, which means a subclass of a bean is a bean too.
"""

import inspect
from typing import Any

from .meta import BeanMeta


def _is_bean(obj: Any) -> bool:
    """Check if an object or class carries a bean marker."""
    cls = obj if inspect.isclass(obj) else type(obj)
    return isinstance(getattr(cls, "_bean_meta", None), BeanMeta)


def bean(
    _cls: type = None,
    *,
    class_name: str = "",
    description: str = "",
    description_key: str = "",
    resource_bundle: str = "",
    sorted: bool = False,
    strict: bool = False,
) -> type:
    """Decorator to mark a class as a management bean.

    Args:
        _cls (type | None, optional): The class to be decorated. This argument
            is automatically populated when `@bean` is used without
            parentheses. Defaults to None.
        class_name (str, optional): The name reported for the bean. Defaults to
            the fully qualified name of the wrapped object's concrete class.
        description (str, optional): The bean description. Defaults to "".
        description_key (str, optional): Key looked up in `resource_bundle` for
            a localized description. Defaults to "".
        resource_bundle (str, optional): Identifier of the resource bundle used
            to resolve every `name_key` and `description_key` of the bean and
            its members. Defaults to "" (no localization).
        sorted (bool, optional): Whether attributes and operations are ordered
            by their sort key (falling back to their name). Defaults to False.
        strict (bool, optional): Whether conflicting declarations abort the
            construction of a `BeanWrapper`. Defaults to False.

    Returns:
        type: The decorated class, carrying a `BeanMeta` in `_bean_meta`.

    Raises:
        TypeError: If applied to something other than a class.

    Example:
        ```python
        import beanwrap as bw


        @bw.bean(description="My first bean")
        class Elevator:
            def __init__(self):
                self.level = 0

            @bw.attribute(name="Floor Level", description="The current floor")
            def getLevel(self) -> int:
                return self.level

            @bw.attribute
            def setLevel(self, level: int) -> None:
                self.level = level
        ```
    """

    def decorator(cls: type) -> type:
        if not inspect.isclass(cls):
            raise TypeError(f"@bean can only decorate classes, got {cls!r}.")

        cls._bean_meta = BeanMeta(
            _bean=True,
            _class_name=class_name,
            _description=description,
            _description_key=description_key,
            _resource_bundle=resource_bundle,
            _sorted=bool(sorted),
            _strict=bool(strict),
        )
        return cls

    if _cls is None:
        return decorator
    else:
        return decorator(_cls)
