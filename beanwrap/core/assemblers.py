"""
This module contains the Attribute and Operation Assemblers, which turn the raw
facts of the `MetadataScanner` into descriptors and dispatch indices.

`AttributeAssembler`:
- Names an attribute after its declared (or localized) name, falling back to
  the method name without its `get`/`is`/`set` prefix, first letter
  lower-cased.
- Merges a getter and a setter that end up under the same name into one
  attribute. The first non-empty description and sort key win, in discovery
  order.
- A getter and setter declaring different names stay two separate attributes,
  one read-only and one write-only. A second getter (or setter) for the same
  name replaces the first one. Both situations are logged, and rejected with
  `ConflictingDeclarationError` when the bean is strict.

`OperationAssembler`:
- Names an operation after its declared (or localized) name, falling back to
  the method name.
- Names parameters `param1`, `param2`, ... unless a parameter marker declares
  a name; only marked parameters get a description.
- Indexes methods by operation name and parameter type signature. A duplicate
  (name, signature) pair shadows the earlier registration, or raises
  `ConflictingDeclarationError` when the bean is strict.

`_TextLookup` binds a `TextResolver` to one bundle and one locale and keeps
the literal default whenever a key is not found.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import NamedTuple

from beanwrap._errors import ConflictingDeclarationError
from beanwrap._utils import _default_attribute_name
from beanwrap.i18n import TextResolver

from .descriptors import AttributeDescriptor, OperationDescriptor, ParameterDescriptor
from .scanner import _AttributeFact, _OperationFact

logger = logging.getLogger(__name__)


class _TextLookup:
    """A resolver bound to one bundle and locale, with literal fallback."""

    def __init__(
        self,
        resolver: TextResolver | None = None,
        bundle_id: str = "",
        locale: str | None = None,
    ):
        self._resolver = resolver
        self._bundle_id = bundle_id
        self._locale = locale
        self._resolved: dict[str, str | None] = {}

    def __call__(self, key: str, default: str) -> str:
        """Return the text for `key`, or `default` if there is none."""
        if self._resolver is None or not self._bundle_id or not key:
            return default
        if key not in self._resolved:
            self._resolved[key] = self._resolver.resolve(self._bundle_id, key, self._locale)
        text = self._resolved[key]
        return default if text is None else text


class _AttributeAccess(NamedTuple):
    """Getter and setter of one attribute; either may be None."""

    getter: Callable | None
    setter: Callable | None


@dataclass
class _AttributeEntry:
    """Mutable accumulator for one attribute while assembling."""

    getter: _AttributeFact | None = None
    setter: _AttributeFact | None = None
    description: str = ""
    sort_key: str = ""

    def to_descriptor(self, name: str) -> AttributeDescriptor:
        if self.getter is not None:
            value_type = self.getter.value_type
        else:
            value_type = self.setter.value_type
        return AttributeDescriptor(
            name=name,
            description=self.description,
            value_type=value_type,
            readable=self.getter is not None,
            writable=self.setter is not None,
            is_boolean_style=self.getter is not None and self.getter.prefix == "is",
            sort_key=self.sort_key,
        )

    def to_access(self) -> _AttributeAccess:
        return _AttributeAccess(
            getter=self.getter.method if self.getter is not None else None,
            setter=self.setter.method if self.setter is not None else None,
        )


@dataclass
class _Assembler:
    """Shared state of both assemblers."""

    bean_name: str
    text: _TextLookup = field(default_factory=_TextLookup)
    strict: bool = False

    def _conflict(self, detail: str) -> None:
        if self.strict:
            raise ConflictingDeclarationError(self.bean_name, detail)
        logger.warning("Bean %r: %s", self.bean_name, detail)


class AttributeAssembler(_Assembler):
    """Builds attribute descriptors and the attribute dispatch index."""

    def _check_stem_names(self, stem_names: dict[str, dict[str, str]]) -> None:
        for stem, sides in stem_names.items():
            getter_name, setter_name = sides.get("getter"), sides.get("setter")
            if getter_name is not None and setter_name is not None and getter_name != setter_name:
                self._conflict(
                    f"getter and setter of {stem!r} declare different names "
                    f"{getter_name!r} and {setter_name!r}"
                )

    def assemble(
        self, facts: list[_AttributeFact]
    ) -> tuple[list[AttributeDescriptor], dict[str, _AttributeAccess]]:
        """Return (descriptors in discovery order, name -> getter/setter index)."""
        entries: dict[str, _AttributeEntry] = {}
        stem_names: dict[str, dict[str, str]] = {}

        for fact in facts:
            meta = fact.meta
            name = self.text(meta._name_key, meta._name)
            description = self.text(meta._description_key, meta._description)
            if not name:
                name = _default_attribute_name(fact.stem)

            stem_names.setdefault(_default_attribute_name(fact.stem), {})[fact.kind] = name

            entry = entries.get(name)
            if entry is None:
                entry = entries[name] = _AttributeEntry()
            elif getattr(entry, fact.kind) is not None:
                self._conflict(
                    f"{fact.kind} {fact.method_name!r} replaces "
                    f"{getattr(entry, fact.kind).method_name!r} for attribute {name!r}"
                )

            setattr(entry, fact.kind, fact)
            if not entry.description:
                entry.description = description
            if not entry.sort_key:
                entry.sort_key = meta._sort_key

        self._check_stem_names(stem_names)

        descriptors = [entry.to_descriptor(name) for name, entry in entries.items()]
        index = {name: entry.to_access() for name, entry in entries.items()}
        return descriptors, index


class OperationAssembler(_Assembler):
    """Builds operation descriptors and the operation dispatch index."""

    def _parameters(self, fact: _OperationFact) -> tuple[ParameterDescriptor, ...]:
        markers = fact.meta._params
        parameters = []
        for position, p in enumerate(fact.parameters, start=1):
            positional_name = f"param{position}"
            name = positional_name
            description = ""

            marker = markers.get(p.arg_name) or p.annotated_marker
            if marker is not None:
                description = marker._description
                if marker._name:
                    name = marker._name
                name = self.text(marker._name_key, name)
                description = self.text(marker._description_key, description)

            parameters.append(
                ParameterDescriptor(
                    positional_name=positional_name,
                    name=name,
                    description=description,
                    type=p.type,
                )
            )
        return tuple(parameters)

    def assemble(
        self, facts: list[_OperationFact]
    ) -> tuple[list[OperationDescriptor], dict[str, dict[tuple[str, ...], Callable]]]:
        """Return (descriptors in discovery order, name -> signature -> method index)."""
        registered: dict[tuple[str, tuple[str, ...]], OperationDescriptor] = {}
        index: dict[str, dict[tuple[str, ...], Callable]] = {}

        for fact in facts:
            meta = fact.meta
            name = self.text(meta._name_key, meta._name) or fact.method_name
            description = self.text(meta._description_key, meta._description)

            descriptor = OperationDescriptor(
                name=name,
                description=description,
                return_type=fact.return_type,
                parameters=self._parameters(fact),
                impact=meta._impact,
                sort_key=meta._sort_key,
            )

            key = (name, descriptor.signature)
            overloads = index.setdefault(name, {})
            if key in registered:
                self._conflict(
                    f"operation {name}({', '.join(descriptor.signature)}) is declared "
                    f"twice, {fact.method_name!r} shadows the earlier method"
                )
                # Re-inserting moves the shadowing overload to its discovery position
                del registered[key]

            registered[key] = descriptor
            overloads[descriptor.signature] = fact.method

        return list(registered.values()), index
