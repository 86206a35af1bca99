"""
This module exposes the localized text lookup used for bean names and
descriptions.
"""

from beanwrap.i18n.resolver import FileBundleResolver, MappingResolver, TextResolver

__all__ = ["FileBundleResolver", "MappingResolver", "TextResolver"]
