"""Variable and operator completion for WIQL queries."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field

from lark import Token

from pywiql._compatibility import CompatibilityEntry
from pywiql._constants import GROUP_CLOSING_TOKENS, VARIABLE_PREFIX, VARIABLE_TOKEN
from pywiql.fields import FieldType
from pywiql.variables import DEFINED_VARIABLES


class SuggestionKind(enum.StrEnum):
    VARIABLE = "variable"
    OPERATOR = "operator"


@dataclass(frozen=True)
class Suggestion:
    """A completion item; ``insert_text`` defaults to the label."""

    label: str
    kind: SuggestionKind = SuggestionKind.VARIABLE
    insert_text: str | None = None


@dataclass(frozen=True)
class Position:
    """Cursor position, 1-based like lark token lines and columns."""

    line: int
    column: int


@dataclass(frozen=True)
class CompletionContext:
    """Parse state at the cursor.

    ``expected_tokens`` holds the terminal names the parser accepts next,
    as returned by ``InteractiveParser.accepts()``. ``field_type`` is the
    type of the field being compared when the cursor is in a condition.
    """

    expected_tokens: frozenset[str] = field(default_factory=frozenset)
    prev_token: Token | None = None
    is_in_condition: bool = False
    field_type: FieldType | None = None

    @property
    def type_filter(self) -> FieldType | None:
        return self.field_type if self.is_in_condition else None


def list_variables(
    field_type: FieldType | None,
    *,
    variables: Mapping[str, FieldType] | None = None,
) -> list[Suggestion]:
    """Suggest the variables of a type, or every variable if type is None."""
    if variables is None:
        variables = DEFINED_VARIABLES
    return [
        Suggestion(name)
        for name, var_type in variables.items()
        if field_type is None or var_type == field_type
    ]


def include_variables(
    ctx: CompletionContext,
    suggestions: list[Suggestion],
    *,
    variables: Mapping[str, FieldType] | None = None,
) -> None:
    """Append variable suggestions if the parser expects a variable here."""
    if VARIABLE_TOKEN not in ctx.expected_tokens:
        return
    if ctx.prev_token is not None and ctx.prev_token.type in GROUP_CLOSING_TOKENS:
        return
    suggestions.extend(list_variables(ctx.type_filter, variables=variables))


async def current_variable_suggestions(
    ctx: CompletionContext,
    position: Position,
    *,
    variables: Mapping[str, FieldType] | None = None,
) -> list[Suggestion] | None:
    """Suggest replacements for a variable the cursor is typing.

    Applies only when the cursor sits right at the end of a variable token.

    Returns:
        Suggestions whose insert text drops the variable prefix, or None
        when the cursor is not completing a variable.
    """
    prev = ctx.prev_token
    if prev is None or prev.type != VARIABLE_TOKEN:
        return None
    if position.line != prev.end_line or position.column != prev.end_column:
        return None
    return [
        Suggestion(s.label, insert_text=s.label.removeprefix(VARIABLE_PREFIX))
        for s in list_variables(ctx.type_filter, variables=variables)
    ]


def list_operators(entry: CompatibilityEntry) -> list[Suggestion]:
    """Suggest the operations legal for a field.

    Operations against another field are labelled ``"<op> [Field]"``.
    """
    labels = [str(op) for op in (*entry.literal_ops, *entry.group_ops)]
    labels.extend(f"{op} [Field]" for op in entry.field_ops)
    return [Suggestion(label, kind=SuggestionKind.OPERATOR) for label in labels]
