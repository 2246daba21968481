"""Builds WIQL parse trees with real token positions.

Tokens are laid out left to right on one line, separated by a single
space, in the order the builder methods are called.
"""

from lark import Token, Tree

OPERATOR_TEXT = {
    "EQUALS": "=",
    "NOT_EQUALS": "<>",
    "GREATER_THAN": ">",
    "LESS_THAN": "<",
    "GREATER_OR_EQ": ">=",
    "LESS_OR_EQ": "<=",
    "IN_GROUP": "In Group",
    "EVER": "Ever",
    "CONTAINS": "Contains",
    "CONTAINS_WORDS": "Contains Words",
    "UNDER": "Under",
    "IN": "In",
}


class Query:
    def __init__(self):
        self._pos = 0

    def token(self, type_, text):
        start = self._pos
        end = start + len(text)
        self._pos = end + 1
        return Token(
            type_,
            text,
            start_pos=start,
            line=1,
            column=start + 1,
            end_line=1,
            end_column=end + 1,
            end_pos=end,
        )

    def field(self, name):
        return Tree("field", [self.token("IDENTIFIER", name)])

    def op(self, type_, negated=False):
        children = [self.token("NOT", "Not")] if negated else []
        children.append(self.token(type_, OPERATOR_TEXT[type_]))
        return Tree("operator", children)

    def in_op(self, negated=False):
        children = [self.token("NOT", "Not")] if negated else []
        children.append(self.token("IN", "In"))
        return Tree("in_operator", children)

    def string(self, text):
        return Tree("value", [self.token("STRING", f"'{text}'")])

    def number(self, text):
        return Tree("value", [self.token("NUMBER", str(text))])

    def true(self):
        return Tree("value", [self.token("TRUE", "True")])

    def false(self):
        return Tree("value", [self.token("FALSE", "False")])

    def variable(self, name):
        return Tree("value", [self.token("VARIABLE", name)])

    def field_value(self, name):
        return Tree("value", [self.field(name)])

    def values(self, *values):
        return Tree("value_list", list(values))

    def condition(self, *children):
        return Tree("condition", list(children))

    def link_condition(self, *children):
        return Tree("link_condition", list(children))

    def where(self, *children):
        return Tree("where_clause", list(children))

    def keyword(self, type_, text):
        return self.token(type_, text)


def operator_of(condition):
    """The operator terminal of a built condition."""
    return condition.children[1].children[-1]


def operand_of(condition):
    """The value operand of a built scalar condition."""
    return condition.children[2].children[0]


def list_operand(condition, index):
    """The operand of the index-th element of a built group condition."""
    return condition.children[2].children[index].children[0]
