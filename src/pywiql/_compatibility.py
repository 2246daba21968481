"""Operator compatibility of each field type.

Field types are grouped by comparison semantics: every type in a group
shares the same legal operators against literal, field and group
right-hand sides.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pywiql._errors import ERR_MSG_UNMAPPED_FIELD_TYPE, UnmappedFieldTypeError
from pywiql._operators import ORDERED_COMPARISON_OPS, OperatorKind, RhsKind, ValueKind
from pywiql.fields import FieldType

_NUMERIC_TYPES = (
    FieldType.DOUBLE,
    FieldType.INTEGER,
    FieldType.DATE_TIME,
    FieldType.GUID,
    FieldType.PICKLIST_INTEGER,
    FieldType.PICKLIST_DOUBLE,
)
_TEXT_TYPES = (FieldType.HTML, FieldType.PLAIN_TEXT, FieldType.HISTORY)
_STRING_TYPES = (FieldType.STRING, FieldType.IDENTITY, FieldType.PICKLIST_STRING)


@dataclass(frozen=True)
class CompatibilityEntry:
    """Legal operators for one field type, by right-hand side kind."""

    field_type: FieldType
    literal_ops: tuple[OperatorKind, ...] = ()
    field_ops: tuple[OperatorKind, ...] = ()
    group_ops: tuple[OperatorKind, ...] = ()

    def ops_for(self, rhs: RhsKind) -> tuple[OperatorKind, ...]:
        if rhs is RhsKind.LITERAL:
            return self.literal_ops
        if rhs is RhsKind.FIELD:
            return self.field_ops
        return self.group_ops


def _entries(
    types: Iterable[FieldType],
    literal: tuple[OperatorKind, ...],
    group: tuple[OperatorKind, ...],
    field: tuple[OperatorKind, ...],
) -> dict[FieldType, CompatibilityEntry]:
    return {
        t: CompatibilityEntry(t, literal_ops=literal, field_ops=field, group_ops=group)
        for t in types
    }


def build_compatibility_table() -> Mapping[FieldType, CompatibilityEntry]:
    """Build the read-only field type -> compatibility entry table."""
    table: dict[FieldType, CompatibilityEntry] = {}
    table.update(_entries(
        _TEXT_TYPES,
        literal=(OperatorKind.CONTAINS, OperatorKind.CONTAINS_WORDS),
        group=(),
        field=(),
    ))
    table.update(_entries(
        _NUMERIC_TYPES,
        literal=(*ORDERED_COMPARISON_OPS, OperatorKind.EVER),
        group=(OperatorKind.IN,),
        field=ORDERED_COMPARISON_OPS,
    ))
    table.update(_entries(
        _STRING_TYPES,
        literal=(
            *ORDERED_COMPARISON_OPS,
            OperatorKind.EVER,
            OperatorKind.CONTAINS,
            OperatorKind.IN_GROUP,
        ),
        group=(OperatorKind.IN,),
        field=ORDERED_COMPARISON_OPS,
    ))
    table.update(_entries(
        (FieldType.BOOLEAN,),
        literal=(OperatorKind.EQUALS, OperatorKind.NOT_EQUALS, OperatorKind.EVER),
        group=(),
        field=(OperatorKind.EQUALS, OperatorKind.NOT_EQUALS),
    ))
    table.update(_entries(
        (FieldType.TREE_PATH,),
        literal=(OperatorKind.EQUALS, OperatorKind.NOT_EQUALS, OperatorKind.UNDER),
        group=(OperatorKind.IN,),
        field=(),
    ))
    return MappingProxyType(table)


COMPATIBILITY_TABLE = build_compatibility_table()

# Field type -> the literal value kind its values must have
EXPECTED_VALUE_KINDS: Mapping[FieldType, ValueKind] = MappingProxyType({
    FieldType.STRING: ValueKind.STRING,
    FieldType.INTEGER: ValueKind.NUMBER,
    FieldType.DATE_TIME: ValueKind.STRING,
    FieldType.PLAIN_TEXT: ValueKind.STRING,
    FieldType.HTML: ValueKind.STRING,
    FieldType.TREE_PATH: ValueKind.STRING,
    FieldType.HISTORY: ValueKind.STRING,
    FieldType.DOUBLE: ValueKind.NUMBER,
    FieldType.GUID: ValueKind.STRING,
    FieldType.BOOLEAN: ValueKind.BOOLEAN,
    FieldType.IDENTITY: ValueKind.STRING,
    FieldType.PICKLIST_STRING: ValueKind.STRING,
    FieldType.PICKLIST_INTEGER: ValueKind.NUMBER,
    FieldType.PICKLIST_DOUBLE: ValueKind.NUMBER,
})


def lookup_compatibility(field_type: FieldType) -> CompatibilityEntry:
    """Return the compatibility entry of a field type.

    Raises:
        UnmappedFieldTypeError: If the type has no entry.
    """
    entry = COMPATIBILITY_TABLE.get(field_type)
    if entry is None:
        raise UnmappedFieldTypeError(
            ERR_MSG_UNMAPPED_FIELD_TYPE,
            f"no compatibility entry for field type {field_type!r}",
        )
    return entry


def expected_value_kind(field_type: FieldType) -> ValueKind:
    """Return the literal value kind that values of a field type must have.

    Raises:
        UnmappedFieldTypeError: If the type has no mapping.
    """
    kind = EXPECTED_VALUE_KINDS.get(field_type)
    if kind is None:
        raise UnmappedFieldTypeError(
            ERR_MSG_UNMAPPED_FIELD_TYPE,
            f"no value kind for field type {field_type!r}",
        )
    return kind
