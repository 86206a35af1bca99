"""
This module exposes utility functions from sub-modules for use
within the beanwrap package.
"""

from beanwrap._utils.config import _get_option, set_beanwrap_option
from beanwrap._utils.helpers import _dump_to_tuple, _locale_chain, _normalize_locale
from beanwrap._utils.inspect import (
    _accessor_kind,
    _annotation_markers,
    _default_attribute_name,
    _get_signature,
    _iter_public_methods,
    _split_accessor_name,
    _type_identifier,
)
from beanwrap._utils.loaders import _load_bundle_chain
from beanwrap._utils.parsers import _BundleReader

# Define main API for internal _utils module
# only contains methods/objects used within the package
__all__ = [
    "_BundleReader",
    "_accessor_kind",
    "_annotation_markers",
    "_default_attribute_name",
    "_dump_to_tuple",
    "_get_option",
    "_get_signature",
    "_iter_public_methods",
    "_load_bundle_chain",
    "_locale_chain",
    "_normalize_locale",
    "_split_accessor_name",
    "_type_identifier",
    "set_beanwrap_option",
]
