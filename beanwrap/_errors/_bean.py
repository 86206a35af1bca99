"""
This module defines the construction-time exceptions of a `BeanWrapper`.

`NotABeanError`:
This `TypeError` is raised when an object handed to `BeanWrapper` belongs to a
class that was never decorated with `@bean`. Wrapping such an object makes no
sense, so construction stops immediately and names the offending type together
with a hint on how to fix it.

`ConflictingDeclarationError`:
Only raised for strict beans. A lenient bean tolerates conflicting attribute
names or duplicate operation overloads (the later declaration shadows the
earlier one); a strict bean refuses to be built instead.
"""


from ._base import BeanError


class NotABeanError(BeanError, TypeError):
    """
    Raised when the wrapped object's class carries no @bean marker.
    """

    def __init__(self, passed_object: object):
        obj_type = type(passed_object)
        type_name = f"{obj_type.__module__}.{obj_type.__qualname__}"

        message = (
            f"Cannot wrap an object of type '{type_name}': it is not a bean."
            f"\n  - Expected: An instance of a class decorated with @bean."
            f"\n  - Received: An instance of '{type_name}'."
            f"\n\nSuggestion: Decorate '{obj_type.__qualname__}' with @bean."
        )
        super().__init__(message)
        self.type_name = type_name


class BeanDefinitionError(BeanError, ValueError):
    """Raised when the declarations of a bean class are inconsistent."""

    pass


class ConflictingDeclarationError(BeanDefinitionError):
    """Raised by strict beans for shadowed attribute or operation declarations."""

    def __init__(self, bean_name: str, detail: str):
        super().__init__(f"Conflicting declarations in bean {bean_name!r}: {detail}")
        self.bean_name = bean_name
        self.detail = detail
