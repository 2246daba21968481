"""Async type checker bound to a field metadata source."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Protocol

from lark import Tree

from pywiql._checker import check_types
from pywiql.diagnostics import Diagnostic
from pywiql.fields import FieldDescriptor, FieldType
from pywiql.lookup import FieldLookup, build_field_lookup

logger = logging.getLogger(__name__)


class FieldSource(Protocol):
    """Anything that yields the current field metadata snapshot."""

    async def get_value(self) -> Sequence[FieldDescriptor]: ...


class TypeErrorChecker:
    """Type checks parsed queries against the current field metadata.

    The field lookup is rebuilt whenever the source returns a different
    snapshot object and is shared, unchanged, by every check until then.
    """

    def __init__(
        self,
        fields: FieldSource,
        *,
        variables: Mapping[str, FieldType] | None = None,
    ) -> None:
        self._fields = fields
        self._variables = variables
        self._built: tuple[Sequence[FieldDescriptor], FieldLookup] | None = None

    async def field_lookup(self) -> FieldLookup:
        """Return the lookup for the current field snapshot.

        Raises:
            FieldFetchError: If the field source fails.
        """
        fields = await self._fields.get_value()
        built = self._built
        if built is not None and built[0] is fields:
            return built[1]
        logger.debug("rebuilding field lookup for %d fields", len(fields))
        lookup = build_field_lookup(fields)
        self._built = (fields, lookup)
        return lookup

    async def check(self, tree: Tree) -> list[Diagnostic]:
        """Type check every condition of a parsed query.

        Returns:
            Diagnostics in source order.
        """
        lookup = await self.field_lookup()
        return check_types(tree, lookup, variables=self._variables)
