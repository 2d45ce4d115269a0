"""Error hierarchy for graph construction."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dotgraph.catalog import UsageContext


class DotGraphError(Exception):
    """Base error for all dotgraph errors."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class SubgraphError(DotGraphError):
    """A graph cannot be attached as a subgraph."""


class SubgraphKindError(SubgraphError):
    """Subgraph kind differs from its parent's kind."""

    def __init__(self, message: str, *, expected: str, actual: str):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvalidAttributeError(DotGraphError):
    """Attribute is not valid for the usage context (strict mode only)."""

    def __init__(self, message: str, *, name: str, context: UsageContext):
        super().__init__(message)
        self.name = name
        self.context = context


class CompassPointError(DotGraphError, ValueError):
    """Unknown compass point for an edge port."""
