"""WIQL operator and value kinds, and their parser terminal mappings."""

import enum


class OperatorKind(enum.StrEnum):
    """Comparison operators, valued by their display name."""

    EQUALS = "="
    NOT_EQUALS = "<>"
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_OR_EQ = ">="
    LESS_OR_EQ = "<="
    IN_GROUP = "In Group"
    EVER = "Was Ever"
    CONTAINS = "Contains"
    CONTAINS_WORDS = "Contains Words"
    UNDER = "Under"
    IN = "In"


class RhsKind(enum.StrEnum):
    """Shape of the right-hand side of a condition."""

    LITERAL = "literal"
    FIELD = "field"
    GROUP = "group"


class ValueKind(enum.StrEnum):
    """Shape of a literal value."""

    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"


# Parser terminal name -> operator kind
OPERATOR_TOKENS: dict[str, OperatorKind] = {
    "EQUALS": OperatorKind.EQUALS,
    "NOT_EQUALS": OperatorKind.NOT_EQUALS,
    "GREATER_THAN": OperatorKind.GREATER_THAN,
    "LESS_THAN": OperatorKind.LESS_THAN,
    "GREATER_OR_EQ": OperatorKind.GREATER_OR_EQ,
    "LESS_OR_EQ": OperatorKind.LESS_OR_EQ,
    "IN_GROUP": OperatorKind.IN_GROUP,
    "EVER": OperatorKind.EVER,
    "CONTAINS": OperatorKind.CONTAINS,
    "CONTAINS_WORDS": OperatorKind.CONTAINS_WORDS,
    "UNDER": OperatorKind.UNDER,
    "IN": OperatorKind.IN,
}

# Parser terminal name -> literal value kind
LITERAL_TOKENS: dict[str, ValueKind] = {
    "STRING": ValueKind.STRING,
    "NUMBER": ValueKind.NUMBER,
    "TRUE": ValueKind.BOOLEAN,
    "FALSE": ValueKind.BOOLEAN,
}

# Comparison operators that apply to ordered values
ORDERED_COMPARISON_OPS = (
    OperatorKind.EQUALS,
    OperatorKind.NOT_EQUALS,
    OperatorKind.GREATER_THAN,
    OperatorKind.LESS_THAN,
    OperatorKind.GREATER_OR_EQ,
    OperatorKind.LESS_OR_EQ,
)
