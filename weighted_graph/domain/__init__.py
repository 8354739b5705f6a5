"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    DuplicateEdgeError,
    DuplicateVertexError,
    EdgeNotFoundError,
    GraphStoreError,
    InvalidWeightError,
    VertexNotFoundError,
)
from .models import Edge, PathResult

__all__ = [
    # Models
    "Edge",
    "PathResult",
    # Errors
    "GraphStoreError",
    "DuplicateVertexError",
    "VertexNotFoundError",
    "DuplicateEdgeError",
    "EdgeNotFoundError",
    "InvalidWeightError",
]
