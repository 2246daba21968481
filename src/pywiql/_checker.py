"""Type checking of WIQL conditions.

Walks the parse tree and checks every condition against the field lookup:
the operator must be legal for the field's type and the kind of right-hand
side, and the right-hand side must have the field's type.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from lark import Token, Tree
from lark.visitors import Interpreter

from pywiql._compatibility import CompatibilityEntry, expected_value_kind
from pywiql._errors import (
    MSG_EXPECTED_FIELD_TYPE,
    MSG_EXPECTED_VALUE_TYPE,
    MSG_LIST_VALUES_LITERAL,
    MSG_NO_GROUP_COMPARISONS,
    MSG_NO_VALID_OPERATION,
    MSG_VALID_COMPARISONS,
)
from pywiql._operators import OperatorKind, RhsKind
from pywiql._tree import (
    child_tree,
    field_identifier,
    is_field,
    is_variable,
    list_values,
    literal_kind,
    operator_token,
    value_operand,
)
from pywiql.diagnostics import Diagnostic
from pywiql.fields import FieldType
from pywiql.lookup import FieldLookup
from pywiql.variables import DEFINED_VARIABLES

logger = logging.getLogger(__name__)


def _valid_comparisons(ops: tuple[OperatorKind, ...]) -> str:
    return MSG_VALID_COMPARISONS.format(operators=", ".join(ops))


class TypeChecker(Interpreter):
    """Lark Interpreter that collects type diagnostics for each condition.

    Conditions are checked in source order. Fields missing from the lookup
    are skipped; they are reported by the unknown-field check.
    """

    def __init__(
        self,
        lookup: FieldLookup,
        variables: Mapping[str, FieldType] | None = None,
    ) -> None:
        self._lookup = lookup
        self._variables = DEFINED_VARIABLES if variables is None else variables
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    def visit(self, tree: Tree) -> Any:
        if isinstance(tree, Token):
            return None
        return super().visit(tree)

    def condition(self, tree: Tree) -> None:
        self._diagnostics.extend(self._check_condition(tree))

    def link_condition(self, tree: Tree) -> None:
        self._diagnostics.extend(self._check_condition(tree))

    # --- Conditions ---

    def _check_condition(self, tree: Tree) -> list[Diagnostic]:
        field = child_tree(tree, "field")
        name = field_identifier(field) if field is not None else None
        if name is None:
            return []
        entry = self._lookup.find_field(str(name))
        if entry is None:
            return []

        operator = child_tree(tree, "operator")
        value = child_tree(tree, "value")
        if operator is not None and value is not None:
            return self._check_comparison(entry, name, operator, value)

        in_operator = child_tree(tree, "in_operator")
        value_list = child_tree(tree, "value_list")
        if in_operator is not None and value_list is not None:
            errors = self._check_allows_group(entry, name, in_operator)
            errors.extend(self._check_rhs_group(value_list, entry.field_type))
            return errors
        return []

    def _check_comparison(
        self,
        entry: CompatibilityEntry,
        name: Token,
        operator: Tree,
        value: Tree,
    ) -> list[Diagnostic]:
        op = operator_token(operator)
        operand = value_operand(value)
        if op is None or operand is None:
            logger.debug("skipping incomplete condition on %s", name)
            return []
        op_token, op_kind = op

        rhs = RhsKind.FIELD if is_field(operand) else RhsKind.LITERAL
        errors = self._check_operator(entry, name, op_token, op_kind, rhs)
        if errors:
            return errors
        if rhs is RhsKind.FIELD:
            return self._check_rhs_field(operand, entry.field_type)
        return self._check_rhs_value(operand, entry.field_type)

    # --- Operators ---

    def _check_operator(
        self,
        entry: CompatibilityEntry,
        name: Token,
        op_token: Token,
        op_kind: OperatorKind,
        rhs: RhsKind,
    ) -> list[Diagnostic]:
        valid_ops = entry.ops_for(rhs)
        if not valid_ops:
            message = MSG_NO_VALID_OPERATION.format(field=name, rhs=rhs)
            return [Diagnostic.at(op_token, message)]
        if op_kind not in valid_ops:
            return [Diagnostic.at(op_token, _valid_comparisons(valid_ops))]
        return []

    def _check_allows_group(
        self,
        entry: CompatibilityEntry,
        name: Token,
        in_operator: Tree,
    ) -> list[Diagnostic]:
        op = operator_token(in_operator)
        # A recovered in_operator may have lost its terminal
        anchor = op[0] if op is not None else name
        valid_ops = entry.group_ops
        if not valid_ops:
            message = MSG_NO_GROUP_COMPARISONS.format(field=name)
            return [Diagnostic.at(anchor, message)]
        if op is None or op[1] not in valid_ops:
            return [Diagnostic.at(anchor, _valid_comparisons(valid_ops))]
        return []

    # --- Right-hand sides ---

    def _check_rhs_field(self, target: Tree, expected: FieldType) -> list[Diagnostic]:
        name = field_identifier(target)
        if name is None:
            return []
        entry = self._lookup.find_field(str(name))
        if entry is not None and entry.field_type != expected:
            message = MSG_EXPECTED_FIELD_TYPE.format(field_type=expected)
            return [Diagnostic.at(name, message)]
        return []

    def _check_rhs_value(self, operand: Token, expected: FieldType) -> list[Diagnostic]:
        expected_kind = expected_value_kind(expected)
        if is_variable(operand):
            var_type = self._variables.get(str(operand).lower())
            if var_type is None:
                # Unknown variables are reported by their own check
                return []
            actual_kind = expected_value_kind(var_type)
        else:
            actual_kind = literal_kind(operand)
        if actual_kind is expected_kind:
            return []
        message = MSG_EXPECTED_VALUE_TYPE.format(kind=expected_kind)
        return [Diagnostic.at(operand, message)]

    def _check_rhs_group(self, value_list: Tree, expected: FieldType) -> list[Diagnostic]:
        errors: list[Diagnostic] = []
        for value in list_values(value_list):
            operand = value_operand(value)
            if operand is None:
                continue
            if is_field(operand):
                name = field_identifier(operand)
                if name is not None:
                    errors.append(Diagnostic.at(operand, MSG_LIST_VALUES_LITERAL))
            else:
                errors.extend(self._check_rhs_value(operand, expected))
        return errors


def check_types(
    tree: Tree,
    lookup: FieldLookup,
    *,
    variables: Mapping[str, FieldType] | None = None,
) -> list[Diagnostic]:
    """Type check every condition of a parsed query.

    Args:
        tree: Parsed WIQL query (lark.Tree).
        lookup: Field lookup for the current field metadata snapshot.
        variables: Variable table. Defaults to the predefined variables.

    Returns:
        Diagnostics in source order.

    Raises:
        UnmappedFieldTypeError: If a field or variable type has no mapping.
    """
    checker = TypeChecker(lookup, variables)
    checker.visit(tree)
    return checker.diagnostics
