"""Field types and field descriptors for WIQL analysis."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pywiql._errors import ERR_MSG_INVALID_FIELD_METADATA, InvalidFieldMetadataError


class FieldType(enum.StrEnum):
    """Declared type of a work-item field, valued by its REST API name."""

    STRING = "string"
    INTEGER = "integer"
    DATE_TIME = "dateTime"
    PLAIN_TEXT = "plainText"
    HTML = "html"
    TREE_PATH = "treePath"
    HISTORY = "history"
    DOUBLE = "double"
    GUID = "guid"
    BOOLEAN = "boolean"
    IDENTITY = "identity"
    PICKLIST_STRING = "picklistString"
    PICKLIST_INTEGER = "picklistInteger"
    PICKLIST_DOUBLE = "picklistDouble"

    @classmethod
    def _missing_(cls, value: object) -> FieldType | None:
        if isinstance(value, str):
            folded = value.lower()
            for member in cls:
                if member.value.lower() == folded:
                    return member
        return None


@dataclass(frozen=True)
class FieldDescriptor:
    """A known field: display name, reference name and declared type."""

    name: str
    reference_name: str
    declared_type: FieldType

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FieldDescriptor:
        """Build a descriptor from a work item field REST payload.

        Args:
            data: Mapping with ``name``, ``referenceName`` and ``type`` keys.

        Raises:
            InvalidFieldMetadataError: If a key is missing or the type is unknown.
        """
        try:
            return cls(
                name=data["name"],
                reference_name=data["referenceName"],
                declared_type=FieldType(data["type"]),
            )
        except (KeyError, ValueError) as e:
            raise InvalidFieldMetadataError(
                ERR_MSG_INVALID_FIELD_METADATA,
                f"cannot read field payload {dict(data)!r}: {e}",
                wrapped=e,
            ) from e
