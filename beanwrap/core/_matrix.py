"""
This module defines the BeanMatrix class, which provides a tabular view of a
bean's management interface. It serves as an introspection tool for
rendering a bean in a console or a report, and for debugging its declarations.

The `BeanMatrix` transforms a `BeanDescriptor` into a pandas DataFrame:

- **Rows**: One per attribute and one per operation overload, indexed by
  (`kind`, `name`, `signature`). Attributes have an empty signature.
- **Columns**: `type` (value type of an attribute, return type of an
  operation), `access` ("read/write", "read-only", "write-only" or "invoke"),
  `impact` (operations only), `description` and `sort_key`.

Rows follow the order of the descriptor, attributes first, so a sorted bean
renders sorted.
"""

import pandas as pd

from .descriptors import AttributeDescriptor, BeanDescriptor

_INDEX = ["kind", "name", "signature"]
_COLUMNS = [*_INDEX, "type", "access", "impact", "description", "sort_key"]


def _access(attribute: AttributeDescriptor) -> str:
    if attribute.readable and attribute.writable:
        return "read/write"
    if attribute.readable:
        return "read-only"
    return "write-only"


class BeanMatrix:
    """Matrix view for a bean descriptor."""

    def __init__(self, descriptor: BeanDescriptor):
        # Validate type early to give a clear error
        if not isinstance(descriptor, BeanDescriptor):
            raise TypeError(
                f"BeanMatrix expects a BeanDescriptor, got {type(descriptor).__name__}."
            )
        self._descriptor = descriptor

    def build(self) -> pd.DataFrame:
        """Construct and return the bean matrix as a pandas DataFrame."""
        rows: list[dict[str, str]] = []

        for attribute in self._descriptor.attributes:
            rows.append(
                {
                    "kind": "attribute",
                    "name": attribute.name,
                    "signature": "",
                    "type": attribute.value_type,
                    "access": _access(attribute),
                    "impact": "",
                    "description": attribute.description,
                    "sort_key": attribute.sort_key,
                }
            )

        for operation in self._descriptor.operations:
            rows.append(
                {
                    "kind": "operation",
                    "name": operation.name,
                    "signature": ", ".join(operation.signature),
                    "type": operation.return_type,
                    "access": "invoke",
                    "impact": operation.impact.value,
                    "description": operation.description,
                    "sort_key": operation.sort_key,
                }
            )

        # If nothing to show, return a truly empty DataFrame
        if not rows:
            return pd.DataFrame()

        return pd.DataFrame(rows, columns=_COLUMNS).set_index(_INDEX)
