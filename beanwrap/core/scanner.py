"""
This module contains the Metadata Scanner, the first stage of building a
`BeanWrapper`.

`MetadataScanner` walks the public methods of the wrapped object's class
(inherited ones included) and turns every marked method into a raw fact:

- `_AttributeFact` for an `@attribute` method shaped like a getter (no
  argument, name starting with `get`/`is`) or a setter (one argument, name
  starting with `set`). Marked methods of any other shape are skipped.
- `_OperationFact` for every `@operation` method, whatever its name, with one
  `_ParameterFact` per positional parameter.

Facts carry the bound method, the declared metadata and the type identifiers
read from the signature. Nothing is named, merged or localized here; that is
the job of the assemblers.
"""

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass

from beanwrap._decorators import (
    AttributeMeta,
    BeanMeta,
    OperationMeta,
    ParameterMeta,
    _is_attribute,
    _is_bean,
    _is_operation,
)
from beanwrap._errors import NotABeanError
from beanwrap._utils import (
    _accessor_kind,
    _annotation_markers,
    _get_signature,
    _iter_public_methods,
    _split_accessor_name,
    _type_identifier,
)

logger = logging.getLogger(__name__)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True)
class _AttributeFact:
    """A getter or setter method carrying an attribute marker."""

    method_name: str
    method: Callable
    kind: str  # "getter" or "setter"
    prefix: str
    stem: str
    value_type: str
    meta: AttributeMeta


@dataclass(frozen=True)
class _ParameterFact:
    """A positional parameter of an operation method."""

    arg_name: str
    type: str
    annotated_marker: ParameterMeta | None = None


@dataclass(frozen=True)
class _OperationFact:
    """A method carrying an operation marker."""

    method_name: str
    method: Callable
    return_type: str
    parameters: tuple[_ParameterFact, ...]
    meta: OperationMeta


def _positional_parameters(sig: inspect.Signature) -> list[inspect.Parameter]:
    return [p for p in sig.parameters.values() if p.kind in _POSITIONAL_KINDS]


class MetadataScanner:
    """Collects raw attribute and operation facts from a bean instance.

    Args:
        target (object): The object to scan. Its class must carry `@bean`.

    Raises:
        NotABeanError: If the class of `target` is not decorated with `@bean`.
    """

    def __init__(self, target: object):
        if not _is_bean(target):
            raise NotABeanError(target)
        self.target = target
        self.bean_class = type(target)
        self.bean_meta: BeanMeta = self.bean_class._bean_meta

    def _attribute_fact(self, name: str, method: Callable) -> _AttributeFact | None:
        sig = _get_signature(method)
        params = _positional_parameters(sig)
        accessor = _accessor_kind(name, len(params))
        if accessor is None:
            logger.debug(
                "Skipping attribute method %s.%s: not a getter or setter",
                self.bean_class.__qualname__,
                name,
            )
            return None

        kind, prefix = accessor
        _, stem = _split_accessor_name(name, (prefix,))
        if kind == "getter":
            value_type = _type_identifier(sig.return_annotation)
        else:
            value_type = _type_identifier(params[0].annotation)

        return _AttributeFact(
            method_name=name,
            method=method,
            kind=kind,
            prefix=prefix,
            stem=stem,
            value_type=value_type,
            meta=method._attribute_meta,
        )

    @staticmethod
    def _operation_fact(name: str, method: Callable) -> _OperationFact:
        sig = _get_signature(method)
        parameters = []
        for p in _positional_parameters(sig):
            markers = _annotation_markers(p.annotation, ParameterMeta)
            parameters.append(
                _ParameterFact(
                    arg_name=p.name,
                    type=_type_identifier(p.annotation),
                    annotated_marker=markers[0] if markers else None,
                )
            )

        return _OperationFact(
            method_name=name,
            method=method,
            return_type=_type_identifier(sig.return_annotation),
            parameters=tuple(parameters),
            meta=method._operation_meta,
        )

    def scan(self) -> tuple[list[_AttributeFact], list[_OperationFact]]:
        """Scan the bean and return (attribute facts, operation facts) in discovery order."""
        attribute_facts = []
        operation_facts = []

        for name in _iter_public_methods(self.bean_class):
            method = getattr(self.target, name)

            if _is_attribute(method):
                fact = self._attribute_fact(name, method)
                if fact is not None:
                    attribute_facts.append(fact)

            if _is_operation(method):
                operation_facts.append(self._operation_fact(name, method))

        return attribute_facts, operation_facts
