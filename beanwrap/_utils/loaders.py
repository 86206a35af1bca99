"""
This module contains the logic for locating and loading resource bundle files.
It is the engine behind `FileBundleResolver`.

The main entry point is `_load_bundle_chain`, which consolidates all the
functionality. Its key responsibilities include:
- **Path Resolution**: Mapping a dotted bundle identifier such as
  `i18n.messages` to a directory and a file stem (`i18n/messages`) below the
  base directory.
- **File Discovery**: Building the candidate file names for a locale fallback
  chain (`messages_de_DE.*`, `messages_de.*`, `messages.*`) over every
  supported extension.
- **Parsing**: Using the `_BundleReader` (from `parsers.py`) to read the
  content of each file that exists, with support for custom engines.

The result is a list of flat dictionaries ordered from the most specific
locale to the root bundle; a lookup walks the list until the key is found.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from beanwrap._errors import BundleNotFoundError

from .helpers import _locale_chain
from .parsers import _BundleReader

logger = logging.getLogger(__name__)


def _bundle_location(base_dir: Path, bundle_id: str) -> tuple[Path, str]:
    """Split a dotted bundle id into (directory, file stem) below base_dir."""
    if not bundle_id or not isinstance(bundle_id, str):
        raise ValueError("Bundle id must be a non-empty string.")
    *dirs, stem = bundle_id.split(".")
    return Path(base_dir).joinpath(*dirs), stem


def _bundle_candidates(
    base_dir: Path,
    bundle_id: str,
    locale: str | None,
    custom_engine: dict[str, Callable] | None = None,
) -> list[list[Path]]:
    """
    Return candidate files grouped per locale level, most specific first.
    The last group is the root bundle.
    """
    directory, stem = _bundle_location(base_dir, bundle_id)
    extensions = list(_BundleReader.engines(custom_engine))
    suffixes = [f"_{tag}" for tag in _locale_chain(locale)] + [""]
    return [[directory / f"{stem}{suffix}{ext}" for ext in extensions] for suffix in suffixes]


def _load_bundle_chain(
    base_dir: str | Path,
    bundle_id: str,
    locale: str | None,
    custom_engine: dict[str, Callable] | None = None,
) -> list[dict[str, str]]:
    """Helper to find and read the bundle files of a locale fallback chain."""
    if not Path(base_dir).exists():
        raise FileNotFoundError(f"Specified bundle path not found: {base_dir}")

    groups = _bundle_candidates(Path(base_dir), bundle_id, locale, custom_engine)

    chain = []
    for group in groups:
        for candidate in group:
            if candidate.is_file():
                logger.debug("Loading bundle file %s", candidate)
                chain.append(_BundleReader(candidate, custom_engine=custom_engine).read())

    if not chain:
        raise BundleNotFoundError(
            bundle_id, locale, [c for group in groups for c in group]
        )

    return chain
