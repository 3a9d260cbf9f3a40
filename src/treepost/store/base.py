"""
Store boundary consumed by the materializer.

The content repository is an external service. These abstract classes name
the capabilities the core relies on; implementations wrap a real repository
session or, for tests, the in-memory tree in treepost.store.memory.

Handles are looked up by path on every call. Callers must not rely on two
lookups of the same path returning the same object.
"""

from abc import ABC, abstractmethod
from typing import Optional


class Item(ABC):
    """A node or property in the content tree."""

    @abstractmethod
    def get_path(self) -> str:
        """Get the absolute path of this item."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get the last path segment of this item, empty for the root."""
        pass

    @abstractmethod
    def is_node(self) -> bool:
        """Check whether this item is a node rather than a property."""
        pass

    @abstractmethod
    def get_parent(self) -> "Node":
        """
        Get the parent node.

        Raises:
            ItemNotFoundError: If this item is the root node
        """
        pass


class Property(Item):
    """A named property holding one or more string values."""

    def is_node(self) -> bool:
        return False

    @abstractmethod
    def get_values(self) -> list[str]:
        pass


class Node(Item):
    """A node with a primary type, a mixin set, child nodes and properties."""

    def is_node(self) -> bool:
        return True

    @abstractmethod
    def has_node(self, name: str) -> bool:
        pass

    @abstractmethod
    def get_node(self, name: str) -> "Node":
        """
        Get a direct child node.

        Raises:
            ItemNotFoundError: If there is no child node with that name
        """
        pass

    @abstractmethod
    def add_node(self, name: str, primary_type: Optional[str] = None) -> "Node":
        """
        Create a child node.

        Params:
            name: Name of the new child
            primary_type: Primary node type; the store's default type when None

        Returns:
            The new child node

        Raises:
            VersionConflictError: If a checked-in versionable node blocks the change
            ItemExistsError: If a child with that name exists already
        """
        pass

    @abstractmethod
    def get_primary_type(self) -> str:
        pass

    @abstractmethod
    def get_mixin_types(self) -> set[str]:
        """Get the names of the mixin types assigned to this node."""
        pass

    @abstractmethod
    def add_mixin(self, name: str) -> None:
        """
        Assign a mixin type.

        Adding the versionable mixin makes the node versionable and checks it
        out as a side effect.
        """
        pass

    @abstractmethod
    def remove_mixin(self, name: str) -> None:
        pass

    @abstractmethod
    def is_node_type(self, name: str) -> bool:
        """Check the primary type and mixin types for a node type name."""
        pass

    @abstractmethod
    def is_checked_out(self) -> bool:
        """Check whether the node may be modified under the versioning rules."""
        pass

    @abstractmethod
    def checkout(self) -> None:
        """Check out a versionable node so it can be modified."""
        pass


class Session(ABC):
    """Entry point to one client's view of the content tree."""

    @abstractmethod
    def item_exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def get_item(self, path: str) -> Item:
        """
        Get the node or property at an absolute path.

        Raises:
            ItemNotFoundError: If nothing exists at that path
        """
        pass

    @abstractmethod
    def get_root_node(self) -> Node:
        pass
