"""
This module provides small, general-purpose helper functions that are shared
across the `beanwrap` package.

`_dump_to_tuple` standardizes arguments that may be None, a single value or an
iterable into a tuple, which is how operation arguments and signatures are
handled internally. `_normalize_locale` turns the different spellings of a
locale tag (`de-DE`, `de_DE`) into the form used for bundle file names.
"""

from collections.abc import Iterable
from typing import Any


def _dump_to_tuple(value: Any) -> tuple:
    """Convert None, a string or an iterable to a tuple."""
    if value is None:
        return ()
    if isinstance(value, (str, bytes)):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(value)
    raise TypeError("Argument must be None, a string or an iterable.")


def _normalize_locale(locale: str | None) -> str | None:
    """Normalize a locale tag: 'de-de' -> 'de_DE', '' -> None."""
    if locale is None:
        return None
    if not isinstance(locale, str):
        raise TypeError(f"Locale must be a string, got {type(locale).__name__}.")

    parts = [p for p in locale.replace("-", "_").split("_") if p]
    if not parts:
        return None

    language = parts[0].lower()
    rest = [p.upper() if len(p) == 2 else p for p in parts[1:]]
    return "_".join([language, *rest])


def _locale_chain(locale: str | None) -> list[str]:
    """Return the locale fallback chain, most specific first: de_DE_x, de_DE, de."""
    locale = _normalize_locale(locale)
    if locale is None:
        return []
    parts = locale.split("_")
    return ["_".join(parts[:i]) for i in range(len(parts), 0, -1)]
