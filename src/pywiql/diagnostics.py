"""Positioned diagnostics produced by the type checker."""

from __future__ import annotations

from dataclasses import dataclass

from lark import Token, Tree


@dataclass(frozen=True, order=True)
class Span:
    """Source range of a node, in lark's position conventions.

    Offsets are 0-based with an exclusive end; lines and columns are
    1-based with ``end_column`` one past the last character.
    """

    start_pos: int
    end_pos: int
    line: int
    column: int
    end_line: int
    end_column: int

    @classmethod
    def of(cls, node: Tree | Token) -> Span:
        """Span covering a token, or every token under a tree."""
        if isinstance(node, Token):
            return cls(
                start_pos=node.start_pos,
                end_pos=node.end_pos,
                line=node.line,
                column=node.column,
                end_line=node.end_line,
                end_column=node.end_column,
            )
        tokens = list(node.scan_values(lambda v: isinstance(v, Token)))
        if tokens:
            first, last = tokens[0], tokens[-1]
            return cls(
                start_pos=first.start_pos,
                end_pos=last.end_pos,
                line=first.line,
                column=first.column,
                end_line=last.end_line,
                end_column=last.end_column,
            )
        # Empty rule, fall back on propagated positions
        meta = node.meta
        if getattr(meta, "empty", True):
            raise ValueError(f"rule {node.data!r} has no tokens and no propagated position")
        return cls(
            start_pos=meta.start_pos,
            end_pos=meta.end_pos,
            line=meta.line,
            column=meta.column,
            end_line=meta.end_line,
            end_column=meta.end_column,
        )


@dataclass(frozen=True)
class Diagnostic:
    """A human-readable message attached to a span of the query."""

    span: Span
    message: str

    @classmethod
    def at(cls, node: Tree | Token, message: str) -> Diagnostic:
        return cls(Span.of(node), message)
