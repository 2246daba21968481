"""Accessors for the parts of a WIQL parse tree the checker reads.

Condition nodes have the shape::

    condition | link_condition
        field operator value
        field in_operator value_list

A ``field`` holds an IDENTIFIER token, an ``operator`` or ``in_operator``
holds an optional NOT token followed by the operator terminal, and a
``value`` wraps a single literal or VARIABLE token or a nested ``field``.
"""

from __future__ import annotations

from lark import Token, Tree

from pywiql._constants import IDENTIFIER_TOKEN, VARIABLE_TOKEN
from pywiql._operators import LITERAL_TOKENS, OPERATOR_TOKENS, OperatorKind, ValueKind


def child_tree(tree: Tree, data: str) -> Tree | None:
    """Return the first direct subtree with the given rule name."""
    for child in tree.children:
        if isinstance(child, Tree) and child.data == data:
            return child
    return None


def field_identifier(field: Tree) -> Token | None:
    """Return the identifier token naming a field."""
    for token in field.scan_values(lambda v: isinstance(v, Token)):
        if token.type == IDENTIFIER_TOKEN:
            return token
    return None


def operator_token(operator: Tree) -> tuple[Token, OperatorKind] | None:
    """Return the operator terminal of an operator node and its kind.

    A leading NOT is skipped; it negates but does not change the kind.
    """
    for child in operator.children:
        if isinstance(child, Token) and child.type in OPERATOR_TOKENS:
            return child, OPERATOR_TOKENS[child.type]
    return None


def value_operand(value: Tree) -> Tree | Token | None:
    """Unwrap a value node to its literal token, variable token or field."""
    for child in value.children:
        if isinstance(child, Token) or child.data == "field":
            return child
    return None


def is_field(operand: Tree | Token | None) -> bool:
    return isinstance(operand, Tree) and operand.data == "field"


def is_variable(operand: Tree | Token | None) -> bool:
    return isinstance(operand, Token) and operand.type == VARIABLE_TOKEN


def literal_kind(token: Token) -> ValueKind | None:
    return LITERAL_TOKENS.get(token.type)


def list_values(value_list: Tree) -> list[Tree]:
    """Return the value nodes of a list, in source order."""
    return [
        child for child in value_list.children
        if isinstance(child, Tree) and child.data == "value"
    ]
