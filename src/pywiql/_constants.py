"""Fixed names shared by the checker and the completion filter."""

LINK_TYPE_REFERENCE_NAME = "System.Links.LinkType"
"""Reference name of the link-type pseudo field used in link queries."""

VARIABLE_PREFIX = "@"
"""Leading marker of every variable name."""

VARIABLE_TOKEN = "VARIABLE"
"""Parser terminal name of a variable reference."""

IDENTIFIER_TOKEN = "IDENTIFIER"

GROUP_CLOSING_TOKENS = frozenset({"GROUP", "RPAR"})
"""Terminals after which a variable can never follow."""
