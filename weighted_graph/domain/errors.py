"""Typed domain errors for the weighted graph store.

Every store and path-finding failure is one of these types, so callers
can tell a bad identifier apart from a duplicate insert without parsing
messages.

All errors inherit from GraphStoreError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GraphStoreError(Exception):
    """Base error for the weighted graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DuplicateVertexError(GraphStoreError):
    """A vertex with the same identifier is already stored.

    Attributes:
        vertex_id: The colliding identifier
    """

    vertex_id: str = ""


@dataclass
class VertexNotFoundError(GraphStoreError):
    """Vertex identifier not found in the store.

    Attributes:
        vertex_id: The identifier that was not found
    """

    vertex_id: str = ""


@dataclass
class DuplicateEdgeError(GraphStoreError):
    """An edge already exists for this ordered pair of vertices."""

    source_id: str = ""
    target_id: str = ""


@dataclass
class EdgeNotFoundError(GraphStoreError):
    """No edge exists for this ordered pair of vertices."""

    source_id: str = ""
    target_id: str = ""


@dataclass
class InvalidWeightError(GraphStoreError):
    """Edge weight is not a non-negative integer.

    Attributes:
        weight: The rejected weight value
    """

    weight: object = None
