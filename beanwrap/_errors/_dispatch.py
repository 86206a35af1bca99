"""
This module defines the per-call exceptions raised by the dispatch methods of
`BeanWrapper`.

All three are recoverable by the caller: the wrapper and the wrapped object are
left untouched when one of them is raised.

- `AttributeNotFoundError`: the attribute name is unknown, or the attribute
  has no getter (on read) or no setter (on write).
- `OperationNotFoundError`: no operation is registered under the requested
  name with exactly the requested parameter type signature.
- `InvocationError`: the getter, setter or operation itself raised. The
  original exception is available as `cause` and as `__cause__`.
"""


from collections.abc import Sequence

from ._base import BeanError


class AttributeNotFoundError(BeanError, LookupError):
    """Raised for an unknown attribute or a missing getter/setter side."""

    def __init__(self, name: str, access: str = "get"):
        if access == "set":
            detail = "no such attribute or attribute is read-only"
        else:
            detail = "no such attribute or attribute is write-only"
        super().__init__(f"Attribute {name!r} not found for {access}: {detail}")
        self.name = name
        self.access = access


class OperationNotFoundError(BeanError, LookupError):
    """Raised when no operation matches a name and parameter type signature."""

    def __init__(self, name: str, signature: Sequence[str] = ()):
        self.name = name
        self.signature = tuple(signature)
        super().__init__(f"Operation not found: {name}({', '.join(self.signature)})")


class InvocationError(BeanError, RuntimeError):
    """Raised when a getter, setter or operation of the wrapped object fails."""

    def __init__(self, member: str, cause: BaseException):
        super().__init__(f"Invocation of {member!r} failed: {cause!r}")
        self.member = member
        self.cause = cause


def _unwrap_invocation_cause(exc: BaseException) -> BaseException:
    """Strip one level of InvocationError wrapping from a raised exception."""
    if isinstance(exc, InvocationError):
        return exc.cause
    return exc
