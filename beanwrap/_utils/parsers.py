"""
This module is responsible for parsing resource bundle files, the storage
behind `FileBundleResolver`. It provides a standardized way to read localized
texts from files into flat `key -> text` dictionaries.

It contains individual, private reader functions for the formats supported
natively by `beanwrap`:
- `_read_toml`: For TOML files.
- `_read_yaml`: For YAML files.
- `_read_json`: For JSON files.
- `_read_properties`: For `key=value` properties files.

Nested tables are flattened to dotted keys, so the YAML document
`level: {name: Floor}` provides the key `level.name`.

The central component is the `_BundleReader` class, which acts as a dispatcher.
It inspects a given file's extension and selects the appropriate reader
function. A `custom_engine` dictionary passed during initialization maps
further file extensions to custom reader callables.
"""

import json
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml


def _read_toml(path: str | Path) -> dict:
    """Convert a TOML file to a dictionary."""
    try:
        with Path(path).open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Error decoding TOML file: {e}") from e


def _read_yaml(path: str | Path) -> dict:
    """Convert a YAML file to a dictionary."""
    try:
        with Path(path).open(encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {path}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Error decoding YAML file: {e}") from e


def _read_json(path: str | Path) -> dict:
    """Convert a JSON file to a dictionary."""
    try:
        with Path(path).open(encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Error decoding JSON file: {e}") from e


def _read_properties(path: str | Path) -> dict:
    """Convert a simple properties file (key=value / key: value) to a dictionary."""
    data = {}
    try:
        with Path(path).open(encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line[0] in "#!":
                    continue
                separators = [i for i in (line.find("="), line.find(":")) if i > 0]
                if not separators:
                    raise ValueError(f"Error decoding properties file {path}: {line!r}")
                i = min(separators)
                data[line[:i].strip()] = line[i + 1 :].strip()
    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {path}") from e
    return data


def _flatten_bundle(data: Mapping, prefix: str = "") -> dict[str, str]:
    """Flatten nested mappings to dotted keys and convert values to strings."""
    flat = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten_bundle(value, f"{full_key}."))
        elif value is not None:
            flat[full_key] = str(value)
    return flat


_DEFAULT_ENGINES = {
    ".toml": _read_toml,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": _read_json,
    ".properties": _read_properties,
}


class _BundleReader:
    """Read a bundle file and return a flat key -> text dictionary."""

    @staticmethod
    def _extend_engines(
        default_engine: dict[str, Callable], custom_engine: dict[str, Callable]
    ) -> dict[str, Callable]:
        """Extend the default engine with custom engines."""
        for ext, reader in custom_engine.items():
            if not isinstance(ext, str):
                raise TypeError(f"Extension must be a string, got {ext}.")
            if not callable(reader):
                raise TypeError(f"Reader must be a callable, got {reader}.")

            if not ext.startswith("."):
                ext = f".{ext}"

            default_engine[ext.lower()] = reader

        return default_engine

    @classmethod
    def engines(cls, custom_engine: dict[str, Callable] | None = None) -> dict[str, Callable]:
        """Return the extension -> reader mapping, extended by custom engines."""
        engines = dict(_DEFAULT_ENGINES)
        if custom_engine is not None:
            engines = cls._extend_engines(engines, custom_engine)
        return engines

    def __init__(
        self, path: Path | str, custom_engine: dict[str, Callable] | None = None
    ) -> None:
        if not isinstance(path, (Path, str)):
            raise TypeError("Path must be a string or a pathlib.Path object.")
        self.path = path
        self.extension = Path(path).suffix.lower()
        engines = self.engines(custom_engine)
        if self.extension not in engines:
            raise ValueError(f"Unsupported bundle file extension: {self.extension!r}")

        self._engine = engines[self.extension]

    def read(self) -> dict[str, str]:
        """Read a file and return a flat dictionary of texts."""
        data: Any = self._engine(self.path)
        if not isinstance(data, Mapping):
            raise ValueError(f"Bundle file {self.path} does not contain a mapping.")
        return _flatten_bundle(data)
