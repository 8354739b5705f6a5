"""Services layer - Application orchestration.

Available services:
- GraphService: Lock-guarded store and shortest-path facade
"""

from .graph_service import GraphService

__all__ = ["GraphService"]
