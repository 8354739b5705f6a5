"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
currently the Dijkstra path finder.
"""
