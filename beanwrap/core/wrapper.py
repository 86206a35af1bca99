"""
This module contains the `BeanWrapper`, the central class of `beanwrap`.

A `BeanWrapper` turns an instance of a `@bean` class into a dynamically
introspectable and operable management bean. Its key responsibilities include:

- **Construction**: Runs the `MetadataScanner`, the `AttributeAssembler`, the
  `OperationAssembler` and the Orderer exactly once. Names and descriptions
  declared through keys are resolved with a `TextResolver` for the locale
  passed to the constructor; the result is frozen into a `BeanDescriptor`.
  Changing locales later requires building a new wrapper.

- **Dispatch**: Routes attribute reads and writes to the indexed getter and
  setter, and operation invocations to the method registered under the
  operation name and the exact parameter type signature. Failures of the
  wrapped object are reported as `InvocationError`.

- **Batches**: `get_attributes` and `set_attributes` are best effort by
  default: an attribute that fails is left out of the result, so callers
  compare result size with request size. `strict=True` propagates the first
  error instead. A batch is not atomic.

After construction the wrapper holds no mutable state of its own, so it can be
used from several threads at once; thread safety of the wrapped object's
methods remains the wrapped object's concern.
"""

import inspect
import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

import pandas as pd

from beanwrap._errors import (
    AttributeNotFoundError,
    InvocationError,
    OperationNotFoundError,
    _unwrap_invocation_cause,
)
from beanwrap._utils import _dump_to_tuple, _get_option, _normalize_locale, _type_identifier
from beanwrap.i18n import FileBundleResolver, TextResolver

from ._abstracts import _BaseBeanWrapper
from ._matrix import BeanMatrix
from .assemblers import AttributeAssembler, OperationAssembler, _AttributeAccess, _TextLookup
from .descriptors import BeanDescriptor
from .ordering import order_descriptors
from .scanner import MetadataScanner

logger = logging.getLogger(__name__)


class BeanWrapper(_BaseBeanWrapper):
    """Wraps a `@bean` instance into a dynamic management bean.

    Attributes:
        bean (object): The wrapped object, held by reference.
        info (BeanDescriptor): The immutable descriptor of the bean.
        locale (str | None): The normalized locale names were resolved for.
        strict (bool): Whether conflicting declarations were rejected.

    Example:
        ```python
        import beanwrap as bw


        @bw.bean(description="My first bean")
        class Elevator:
            level = 0

            @bw.attribute(description="The current floor")
            def getLevel(self) -> int:
                return self.level

            @bw.attribute
            def setLevel(self, level: int) -> None:
                self.level = level

            @bw.operation(name="Echo Test", impact="INFO")
            def echo(self, text: str) -> str:
                return f"You said {text}"


        wrapper = bw.BeanWrapper(Elevator(), locale="en")
        wrapper.set_attribute("level", 3)
        wrapper.get_attribute("level")  # -> 3
        wrapper.invoke("Echo Test", ["hi"], ["str"])  # -> "You said hi"
        ```
    """

    def __init__(
        self,
        bean: object,
        *,
        locale: str | None = None,
        resolver: TextResolver | None = None,
        strict: bool | None = None,
    ):
        """Initializes the wrapper and builds the bean descriptor.

        Args:
            bean (object): Instance of a class decorated with `@bean`.
            locale (str | None, optional): Locale tag used to resolve names
                and descriptions declared through keys, e.g. "de_DE". None
                uses the root bundle only. Defaults to None.
            resolver (TextResolver | None, optional): Text lookup for the
                bean's resource bundle. If the bean names a bundle and no
                resolver is given, a `FileBundleResolver` is used, rooted at
                the `bundle_path` option or the directory of the module
                defining the bean class. Defaults to None.
            strict (bool | None, optional): Reject conflicting declarations.
                None defers to the bean marker and the `strict` option.
                Defaults to None.

        Raises:
            NotABeanError: If the class of `bean` is not decorated with `@bean`.
            ConflictingDeclarationError: If the wrapper is strict and the bean
                declares conflicting attributes or duplicate operations.
        """
        scanner = MetadataScanner(bean)
        bean_meta = scanner.bean_meta
        bean_class = scanner.bean_class

        self._bean = bean
        self.locale = _normalize_locale(locale)
        self.strict = (
            bool(strict) if strict is not None else bean_meta._strict or _get_option("strict")
        )

        bundle_id = bean_meta._resource_bundle
        if bundle_id and resolver is None:
            resolver = self._default_resolver(bean_class)
        text = _TextLookup(resolver, bundle_id, self.locale)

        name = bean_meta._class_name or f"{bean_class.__module__}.{bean_class.__qualname__}"
        description = text(bean_meta._description_key, bean_meta._description)

        attribute_facts, operation_facts = scanner.scan()
        attributes, attribute_index = AttributeAssembler(name, text, self.strict).assemble(
            attribute_facts
        )
        operations, operation_index = OperationAssembler(name, text, self.strict).assemble(
            operation_facts
        )

        self._info = BeanDescriptor(
            name=name,
            description=description,
            attributes=order_descriptors(attributes, bean_meta._sorted),
            operations=order_descriptors(operations, bean_meta._sorted),
        )
        self._attributes = MappingProxyType(attribute_index)
        self._operations = MappingProxyType(
            {op: MappingProxyType(overloads) for op, overloads in operation_index.items()}
        )

        logger.debug(
            "Wrapped bean %r (locale=%r): %d attributes, %d operations",
            name,
            self.locale,
            len(self._info.attributes),
            len(self._info.operations),
        )

    @staticmethod
    def _default_resolver(bean_class: type) -> FileBundleResolver:
        """Build the file resolver used when a bean names a bundle but none is given."""
        bundle_path = _get_option("bundle_path")
        if bundle_path is None:
            bundle_path = Path(inspect.getfile(bean_class)).parent
        return FileBundleResolver(bundle_path)

    @property
    def bean(self) -> object:
        return self._bean

    @property
    def info(self) -> BeanDescriptor:
        return self._info

    def _lookup(self, name: Any) -> _AttributeAccess | None:
        # Names that are not strings never match
        if not isinstance(name, str):
            return None
        return self._attributes.get(name)

    @staticmethod
    def _call(member: str, method: Callable, *args: Any) -> Any:
        """Call a method of the wrapped object, wrapping failures."""
        try:
            return method(*args)
        except Exception as exc:
            cause = _unwrap_invocation_cause(exc)
            raise InvocationError(member, cause) from cause

    def get_attribute(self, name: str) -> Any:
        """Return the current value of an attribute.

        Raises:
            AttributeNotFoundError: If there is no such attribute or it has no getter.
            InvocationError: If the getter raised.
        """
        access = self._lookup(name)
        if access is None or access.getter is None:
            raise AttributeNotFoundError(name, "get")
        return self._call(name, access.getter)

    def set_attribute(self, name: str, value: Any) -> None:
        """Write the value of an attribute.

        Raises:
            AttributeNotFoundError: If there is no such attribute or it has no setter.
            InvocationError: If the setter raised.
        """
        access = self._lookup(name)
        if access is None or access.setter is None:
            raise AttributeNotFoundError(name, "set")
        self._call(name, access.setter, value)

    def get_attributes(self, names: Iterable[str], strict: bool = False) -> dict[str, Any]:
        """Return the values of several attributes, in request order.

        Attributes that cannot be read are left out of the result unless
        `strict` is set, in which case the first error propagates.
        """
        result = {}
        for name in _dump_to_tuple(names):
            try:
                result[name] = self.get_attribute(name)
            except (AttributeNotFoundError, InvocationError) as exc:
                if strict:
                    raise
                logger.debug("Omitting attribute %r from batch read: %s", name, exc)
        return result

    def set_attributes(
        self, attributes: Mapping[str, Any] | Iterable[tuple[str, Any]], strict: bool = False
    ) -> dict[str, Any]:
        """Write several attributes and return their values read back.

        Each attribute is written and then read again; an attribute for which
        either step fails is left out of the result unless `strict` is set, in
        which case the first error propagates. Items that are not
        `(name, value)` pairs are skipped the same way.
        """
        pairs = attributes.items() if isinstance(attributes, Mapping) else attributes
        result = {}
        for item in pairs:
            try:
                name, value = item
            except (TypeError, ValueError) as exc:
                if strict:
                    raise
                logger.debug("Omitting malformed item %r from batch write: %s", item, exc)
                continue
            try:
                self.set_attribute(name, value)
                result[name] = self.get_attribute(name)
            except (AttributeNotFoundError, InvocationError) as exc:
                if strict:
                    raise
                logger.debug("Omitting attribute %r from batch write: %s", name, exc)
        return result

    def invoke(
        self,
        name: str,
        params: Sequence[Any] | None = None,
        signature: Sequence[str | type] | None = None,
    ) -> Any:
        """Invoke an operation.

        Args:
            name (str): The operation name.
            params (Sequence[Any] | None, optional): Positional arguments.
                Defaults to None (no arguments).
            signature (Sequence[str | type] | None, optional): Parameter type
                identifiers (or types) selecting the overload. Defaults to
                None (no parameters).

        Returns:
            Any: Whatever the operation returned.

        Raises:
            OperationNotFoundError: If no overload matches name and signature.
            InvocationError: If the operation raised.
        """
        signature = tuple(
            s if isinstance(s, str) else _type_identifier(s) for s in _dump_to_tuple(signature)
        )
        method = self._operations.get(name, {}).get(signature)
        if method is None:
            raise OperationNotFoundError(name, signature)
        return self._call(name, method, *_dump_to_tuple(params))

    def build_matrix(self) -> pd.DataFrame:
        """Return the tabular view of this bean (see `BeanMatrix`)."""
        return BeanMatrix(self._info).build()

    def __repr__(self) -> str:
        return (
            f"<BeanWrapper {self._info.name!r}: {len(self._info.attributes)} attributes, "
            f"{len(self._info.operations)} operations>"
        )
