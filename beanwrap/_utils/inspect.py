"""
This module provides introspection utilities that are fundamental to how
`beanwrap` discovers the management interface of a bean. By using Python's
`inspect` and `typing` modules, these helpers analyze classes and method
signatures once, when a `BeanWrapper` is constructed.

Key Functions:
- `_iter_public_methods`: Lists the public methods of a class, including
  inherited ones, in a deterministic discovery order: base-most class first,
  each class in definition order. An overridden name keeps the position of its
  first definition.

- `_get_signature`: Returns a callable's signature with string annotations
  evaluated where possible, so `from __future__ import annotations` modules
  report the same types as eager ones.

- `_type_identifier`: Turns an annotation into the language-neutral type
  identifier used in descriptors and in operation signatures.

- `_split_accessor_name` / `_default_attribute_name`: Implement the getter and
  setter naming rules (`getLevel`, `get_level`, `isEnabled`, `setLevel`).
"""

import inspect
from collections.abc import Callable
from typing import Annotated, Any, get_args, get_origin

_GETTER_PREFIXES = ("get", "is")
_SETTER_PREFIX = "set"


def _is_method_entry(entry: Any) -> bool:
    """Check if a raw class-dict entry is a method (plain, static or class)."""
    return inspect.isfunction(entry) or isinstance(entry, (staticmethod, classmethod))


def _iter_public_methods(cls: type) -> list[str]:
    """
    Returns the names of all public methods of a class in discovery order.
    """
    names: dict[str, None] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, entry in vars(klass).items():
            if not name.startswith("_") and _is_method_entry(entry):
                names.setdefault(name, None)

    # A subclass may replace a method by something that is not a method
    return [name for name in names if _is_method_entry(inspect.getattr_static(cls, name))]


def _get_signature(f: Callable) -> inspect.Signature:
    """Get the signature of a callable, evaluating string annotations if possible."""
    try:
        return inspect.signature(f, eval_str=True)
    except (NameError, SyntaxError, TypeError):
        # Unresolvable forward references are reported verbatim
        return inspect.signature(f)


def _type_identifier(annotation: Any) -> str:
    """Convert an annotation (or a type) to a type identifier string."""
    if annotation is inspect.Parameter.empty:
        return "object"
    if annotation is None or annotation is type(None):
        return "None"
    if isinstance(annotation, str):
        return annotation

    origin = get_origin(annotation)
    if origin is Annotated:
        return _type_identifier(get_args(annotation)[0])
    if origin is not None:
        return repr(annotation)

    if isinstance(annotation, type):
        if annotation.__module__ == "builtins":
            return annotation.__qualname__
        return f"{annotation.__module__}.{annotation.__qualname__}"

    return repr(annotation)


def _annotation_markers(annotation: Any, marker_type: type) -> list:
    """Return the metadata entries of an Annotated annotation of a given type."""
    if get_origin(annotation) is not Annotated:
        return []
    return [m for m in annotation.__metadata__ if isinstance(m, marker_type)]


def _split_accessor_name(method_name: str, prefixes: tuple[str, ...]) -> tuple[str, str] | None:
    """
    Split an accessor name into (prefix, stem).
    Returns None if the name has none of the prefixes or nothing after it.
    """
    for prefix in prefixes:
        if method_name.startswith(prefix):
            stem = method_name[len(prefix) :]
            # get_level / set_level style
            if stem.startswith("_"):
                stem = stem[1:]
            if not stem:
                return None
            return prefix, stem
    return None


def _default_attribute_name(stem: str) -> str:
    """Lower-case the first letter of an accessor stem."""
    return stem[0].lower() + stem[1:]


def _accessor_kind(method_name: str, n_params: int) -> tuple[str, str] | None:
    """
    Classify a method as ('getter', prefix) or ('setter', prefix).
    Returns None for any other shape.
    """
    getter = _split_accessor_name(method_name, _GETTER_PREFIXES)
    if getter is not None:
        return ("getter", getter[0]) if n_params == 0 else None

    setter = _split_accessor_name(method_name, (_SETTER_PREFIX,))
    if setter is not None:
        return ("setter", setter[0]) if n_params == 1 else None

    return None
