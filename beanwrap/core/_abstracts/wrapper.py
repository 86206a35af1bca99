"""
This module provides the abstract base class for bean wrappers. It defines the
dispatch surface a host management facility uses on behalf of remote callers:
reading and writing attributes, one at a time or in batches, and invoking
operations by name and parameter type signature.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from typing import Any


class _BaseBeanWrapper(ABC):
    """Abstract base class for all bean wrappers."""

    @property
    @abstractmethod
    def info(self):
        """The descriptor of the wrapped bean."""
        pass

    @abstractmethod
    def get_attribute(self, name: str) -> Any:
        """Return the current value of an attribute."""
        pass

    @abstractmethod
    def set_attribute(self, name: str, value: Any) -> None:
        """Write the value of an attribute."""
        pass

    @abstractmethod
    def get_attributes(self, names: Iterable[str], strict: bool = False) -> dict[str, Any]:
        """Return the values of several attributes."""
        pass

    @abstractmethod
    def set_attributes(
        self, attributes: Mapping[str, Any] | Iterable[tuple[str, Any]], strict: bool = False
    ) -> dict[str, Any]:
        """Write several attributes and return their values read back."""
        pass

    @abstractmethod
    def invoke(
        self,
        name: str,
        params: Sequence[Any] | None = None,
        signature: Sequence[str | type] | None = None,
    ) -> Any:
        """Invoke an operation by name and parameter type signature."""
        pass


__all__ = ["_BaseBeanWrapper"]
