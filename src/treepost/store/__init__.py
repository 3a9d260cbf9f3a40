"""
Store boundary for the content tree.

The abstract classes describe what the materializer needs from a content
repository; the memory module implements them for tests and local use.
"""

from treepost.store.base import Item, Node, Property, Session
from treepost.store.memory import MemoryNode, MemoryProperty, MemorySession

__all__ = [
    "Item",
    "Node",
    "Property",
    "Session",
    "MemoryNode",
    "MemoryProperty",
    "MemorySession",
]
