"""Case-insensitive field name -> compatibility lookup."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from pywiql._compatibility import CompatibilityEntry, lookup_compatibility
from pywiql._constants import LINK_TYPE_REFERENCE_NAME
from pywiql._operators import OperatorKind
from pywiql.fields import FieldDescriptor, FieldType

logger = logging.getLogger(__name__)

LINK_TYPE_ENTRY = CompatibilityEntry(
    FieldType.STRING,
    literal_ops=(OperatorKind.EQUALS, OperatorKind.NOT_EQUALS),
)
"""The link-type pseudo field compares only by (in)equality against literals."""


class FieldLookup:
    """Read-only field lookup with O(1) case-insensitive access.

    Keys are lowercased display names and reference names.
    """

    def __init__(self, entries: Mapping[str, CompatibilityEntry]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def find_field(self, name: str) -> CompatibilityEntry | None:
        return self._entries.get(name.lower())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def build_field_lookup(fields: Iterable[FieldDescriptor]) -> FieldLookup:
    """Build the field lookup for a snapshot of field metadata.

    Both the display name and the reference name of a field point at the
    same entry. On a name collision the later field wins.

    Raises:
        UnmappedFieldTypeError: If a field's type has no compatibility entry.
    """
    entries: dict[str, CompatibilityEntry] = {}
    for field in fields:
        if field.reference_name == LINK_TYPE_REFERENCE_NAME:
            entry = LINK_TYPE_ENTRY
        else:
            entry = lookup_compatibility(field.declared_type)
        entries[field.name.lower()] = entry
        entries[field.reference_name.lower()] = entry
    logger.debug("built field lookup with %d keys", len(entries))
    return FieldLookup(entries)
