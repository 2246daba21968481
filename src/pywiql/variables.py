"""Predefined WIQL variables and their declared types."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pywiql._constants import VARIABLE_PREFIX
from pywiql._errors import ERR_MSG_INVALID_VARIABLE_TABLE, InvalidVariableTableError
from pywiql.fields import FieldType

DEFINED_VARIABLES: Mapping[str, FieldType] = MappingProxyType({
    "@me": FieldType.STRING,
    "@project": FieldType.STRING,
    "@currentiteration": FieldType.TREE_PATH,
    "@today": FieldType.DATE_TIME,
    "@startofday": FieldType.DATE_TIME,
    "@startofweek": FieldType.DATE_TIME,
    "@startofmonth": FieldType.DATE_TIME,
    "@startofyear": FieldType.DATE_TIME,
})


def load_variables(table: Mapping[str, FieldType | str]) -> Mapping[str, FieldType]:
    """Validate and normalise a configured variable table.

    Names are lowercased and must carry the variable prefix. Types may be
    given as ``FieldType`` members or their REST API names, in any case.
    Insertion order is kept.

    Args:
        table: Variable name -> declared type, e.g. read from a config file.

    Returns:
        A read-only mapping of lowercase variable name to field type.

    Raises:
        InvalidVariableTableError: If a name or type is invalid.
    """
    variables: dict[str, FieldType] = {}
    for name, declared in table.items():
        if not isinstance(name, str) or not name.startswith(VARIABLE_PREFIX) \
                or len(name) == len(VARIABLE_PREFIX):
            raise InvalidVariableTableError(
                ERR_MSG_INVALID_VARIABLE_TABLE,
                f"variable name {name!r} must start with {VARIABLE_PREFIX!r}",
            )
        try:
            variables[name.lower()] = FieldType(declared)
        except ValueError as e:
            raise InvalidVariableTableError(
                ERR_MSG_INVALID_VARIABLE_TABLE,
                f"variable {name!r} has unknown type {declared!r}",
                wrapped=e,
            ) from e
    return MappingProxyType(variables)
