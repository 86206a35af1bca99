"""
This module defines the Text Resolver collaborator: the lookup that turns the
`name_key` and `description_key` declarations of a bean into display strings
for a given locale.

`TextResolver`:
Abstract interface with a single method, `resolve(bundle_id, key, locale)`,
returning the text or `None` when the key is not found. A `BeanWrapper` calls
it at most once per declared key, at construction time, and keeps the literal
default when it returns `None`.

`MappingResolver`:
In-memory resolver over nested dictionaries, handy for tests and for texts
that are shipped as Python data.

`FileBundleResolver`:
Reads bundle files (TOML, YAML, JSON, properties or custom formats) from a
directory using the locale fallback chain `de_DE` -> `de` -> root bundle.
"""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from pathlib import Path

from beanwrap._utils import _get_option, _load_bundle_chain, _locale_chain

logger = logging.getLogger(__name__)


class TextResolver(ABC):
    """Abstract base class for localized text lookups."""

    @abstractmethod
    def resolve(self, bundle_id: str, key: str, locale: str | None) -> str | None:
        """Return the text for `key` in `bundle_id` and `locale`, or None if not found."""
        pass


class MappingResolver(TextResolver):
    """Resolve texts from a `{bundle_id: {locale: {key: text}}}` mapping.

    The root bundle of an id is stored under the locale `""` (or `None`).
    Locale fallback follows the same chain as `FileBundleResolver`.

    Example:
        ```python
        resolver = MappingResolver(
            {"messages": {"": {"level": "Level"}, "de": {"level": "Stockwerk"}}}
        )
        resolver.resolve("messages", "level", "de_AT")  # -> "Stockwerk"
        ```
    """

    def __init__(self, bundles: Mapping[str, Mapping[str | None, Mapping[str, str]]]):
        if not isinstance(bundles, Mapping):
            raise TypeError("Bundles must be a mapping of bundle id -> locale -> texts.")
        self._bundles = {
            bundle_id: {(loc or ""): dict(texts) for loc, texts in locales.items()}
            for bundle_id, locales in bundles.items()
        }

    def resolve(self, bundle_id: str, key: str, locale: str | None) -> str | None:
        locales = self._bundles.get(bundle_id, {})
        for tag in [*_locale_chain(locale), ""]:
            texts = locales.get(tag)
            if texts is not None and key in texts:
                return texts[key]
        return None


class FileBundleResolver(TextResolver):
    """Resolve texts from bundle files stored in a directory.

    Attributes:
        path (Path | None): Base directory. If None, the `bundle_path` option
            is read when a bundle is first loaded.
        custom_engine (dict[str, Callable] | None): Additional file extension
            to reader mappings, e.g. `{"ini": my_reader}`.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        custom_engine: dict[str, Callable] | None = None,
    ):
        if path is not None and not isinstance(path, (str, Path)):
            raise TypeError("Path must be a string or a pathlib.Path object.")
        if not (custom_engine is None or isinstance(custom_engine, dict)):
            raise TypeError(
                "Custom engine must be a dict mapping file extensions to read function."
            )
        self.path = Path(path) if path is not None else None
        self.custom_engine = custom_engine
        self._cache: dict[tuple[str, str | None], list[dict[str, str]]] = {}
        self._lock = threading.Lock()

    def _base_dir(self) -> Path:
        if self.path is not None:
            return self.path
        option = _get_option("bundle_path")
        if option is None:
            raise ValueError(
                "FileBundleResolver has no path and the 'bundle_path' option is not set."
            )
        return Path(option)

    def _chain(self, bundle_id: str, locale: str | None) -> list[dict[str, str]]:
        cache_key = (bundle_id, locale)
        with self._lock:
            if cache_key not in self._cache:
                self._cache[cache_key] = _load_bundle_chain(
                    self._base_dir(), bundle_id, locale, self.custom_engine
                )
            return self._cache[cache_key]

    def resolve(self, bundle_id: str, key: str, locale: str | None) -> str | None:
        for texts in self._chain(bundle_id, locale):
            if key in texts:
                return texts[key]
        logger.debug("Key %r not found in bundle %r for locale %r", key, bundle_id, locale)
        return None
