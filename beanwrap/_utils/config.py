"""
This module manages global configuration settings for the beanwrap package.

It offers a simple, centralized mechanism for setting and retrieving
package-level options that affect how beans are wrapped, without having to pass
them to every `BeanWrapper`.

Available options:
- `bundle_path`: Directory searched by the default `FileBundleResolver` when a
  bean names a resource bundle but no resolver is given to the wrapper.
- `strict`: Turns every wrapper strict, i.e. conflicting attribute names and
  duplicate operation overloads abort construction instead of shadowing.

The active locale is deliberately not an option: it is always passed to the
wrapper explicitly.

The module exposes `set_beanwrap_option` to modify settings and an internal
`_get_option` to retrieve them, providing a controlled interface to a private,
module-level settings dictionary.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

# A private dictionary to hold all package settings.
_settings = {
    "bundle_path": None,
    "strict": False,
}

# Accepted value types per option
_option_types = {
    "bundle_path": (str, Path, type(None)),
    "strict": (bool,),
}


def set_beanwrap_option(options: Iterable[str] | str, values: Iterable[Any] | Any) -> None:
    """
    Set one or more configuration options for the beanwrap package.

    Args:
        options (Iterable[str] | str): The name(s) of the option(s) to set
            (e.g., 'bundle_path').
        values (Iterable[Any] | Any): The value(s) to set, in the same order.

    Raises:
        KeyError: If an option name is unknown.
        TypeError: If a value has the wrong type for its option.
    """

    if isinstance(options, str):
        options = [options]
        values = [values]

    if not isinstance(options, Iterable):
        raise TypeError("Key must be a string or an iterable of strings.")

    if not isinstance(values, Iterable) or isinstance(values, (str, Path)):
        raise TypeError("Values must be an iterable matching the options.")

    for option, value in zip(options, values, strict=True):
        if not isinstance(option, str):
            raise TypeError("Key must be a string.")
        if option not in _settings:
            raise KeyError(
                f"Invalid option key: {option!r}. Valid options are: {list(_settings.keys())}"
            )
        if not isinstance(value, _option_types[option]):
            expected = ", ".join(t.__name__ for t in _option_types[option])
            raise TypeError(f"Value for {option!r} must be one of: {expected}.")

        _settings[option] = value


def _get_option(key: str) -> Any:
    """
    Get a configuration option for the beanwrap package.

    Args:
        key (str): The name of the option to get.
    """
    return _settings.get(key)
