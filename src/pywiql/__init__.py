"""pywiql - Type checking and variable completion for parsed WIQL queries."""

from __future__ import annotations

try:
    from pywiql._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from collections.abc import Iterable, Mapping

from lark import Tree

from pywiql._checker import check_types
from pywiql._compatibility import COMPATIBILITY_TABLE, CompatibilityEntry, lookup_compatibility
from pywiql._errors import (
    FieldFetchError,
    InvalidFieldMetadataError,
    InvalidVariableTableError,
    UnmappedFieldTypeError,
    WiqlError,
)
from pywiql._operators import OperatorKind, RhsKind, ValueKind
from pywiql.cache import CachedValue
from pywiql.checker import FieldSource, TypeErrorChecker
from pywiql.completion import (
    CompletionContext,
    Position,
    Suggestion,
    SuggestionKind,
    current_variable_suggestions,
    include_variables,
    list_operators,
    list_variables,
)
from pywiql.diagnostics import Diagnostic, Span
from pywiql.fields import FieldDescriptor, FieldType
from pywiql.lookup import FieldLookup, build_field_lookup
from pywiql.variables import DEFINED_VARIABLES, load_variables

__all__ = [
    "check",
    "check_types",
    "build_field_lookup",
    "lookup_compatibility",
    "load_variables",
    "list_variables",
    "include_variables",
    "current_variable_suggestions",
    "list_operators",
    "COMPATIBILITY_TABLE",
    "DEFINED_VARIABLES",
    "CachedValue",
    "CompatibilityEntry",
    "CompletionContext",
    "Diagnostic",
    "FieldDescriptor",
    "FieldLookup",
    "FieldSource",
    "FieldType",
    "OperatorKind",
    "Position",
    "RhsKind",
    "Span",
    "Suggestion",
    "SuggestionKind",
    "TypeErrorChecker",
    "ValueKind",
    "WiqlError",
    "FieldFetchError",
    "InvalidFieldMetadataError",
    "InvalidVariableTableError",
    "UnmappedFieldTypeError",
]


def check(
    tree: Tree,
    fields: Iterable[FieldDescriptor],
    *,
    variables: Mapping[str, FieldType] | None = None,
) -> list[Diagnostic]:
    """Type check a parsed WIQL query against a list of known fields.

    Args:
        tree: Parsed WIQL query (lark.Tree).
        fields: Known fields with their declared types.
        variables: Variable name -> declared type. Defaults to the
            predefined variables.

    Returns:
        Diagnostics in source order; empty if the query type checks.

    Raises:
        UnmappedFieldTypeError: If a field or variable type has no mapping.
    """
    lookup = build_field_lookup(fields)
    return check_types(tree, lookup, variables=variables)
