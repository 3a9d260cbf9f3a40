"""
In-memory implementation of the store boundary.

Holds the whole tree in plain Python objects. It follows the versioning rules
the materializer relies on: a checked-in versionable node blocks structural
changes to itself and its descendants, and adding the versionable mixin checks
a node out.

Example:
    session = MemorySession()
    page = session.get_root_node().add_node("content").add_node("page")
    page.add_mixin("mix:versionable")
    page.checkin()
    session.get_item("/content/page").is_checked_out()  # False
"""

from typing import Optional

from treepost.core import path_utils
from treepost.core.constants import MIX_VERSIONABLE, NT_UNSTRUCTURED
from treepost.exceptions import (
    InvalidPathError,
    ItemExistsError,
    ItemNotFoundError,
    RepositoryError,
    VersionConflictError,
)
from treepost.store.base import Item, Node, Property, Session

ROOT_NODE_TYPE = "rep:root"


class MemoryProperty(Property):
    def __init__(self, name: str, parent: "MemoryNode", values: list[str]):
        self._name = name
        self._parent = parent
        self._values = list(values)

    def get_path(self) -> str:
        return path_utils.join(self._parent.get_path(), self._name)

    def get_name(self) -> str:
        return self._name

    def get_parent(self) -> "MemoryNode":
        return self._parent

    def get_values(self) -> list[str]:
        return list(self._values)


class MemoryNode(Node):
    """A node of the in-memory tree."""

    def __init__(
        self,
        session: "MemorySession",
        name: str,
        parent: Optional["MemoryNode"],
        primary_type: str,
    ):
        self._session = session
        self._name = name
        self._parent = parent
        self._primary_type = primary_type
        self._mixins: set[str] = set()
        self._children: dict[str, MemoryNode] = {}
        self._properties: dict[str, MemoryProperty] = {}
        self._checked_out = True

    def get_path(self) -> str:
        if self._parent is None:
            return path_utils.ROOT
        return path_utils.join(self._parent.get_path(), self._name)

    def get_name(self) -> str:
        return self._name

    def get_parent(self) -> "MemoryNode":
        if self._parent is None:
            raise ItemNotFoundError(f"{self.get_path()}..")
        return self._parent

    def has_node(self, name: str) -> bool:
        return name in self._children

    def get_node(self, name: str) -> "MemoryNode":
        try:
            return self._children[name]
        except KeyError:
            raise ItemNotFoundError(path_utils.join(self.get_path(), name)) from None

    def add_node(self, name: str, primary_type: Optional[str] = None) -> "MemoryNode":
        child_path = path_utils.join(self.get_path(), name)
        if name in self._children or name in self._properties:
            raise ItemExistsError(child_path)
        self._check_mutable()
        child = MemoryNode(
            self._session,
            name,
            self,
            primary_type or self._session.default_primary_type,
        )
        self._children[name] = child
        return child

    def get_primary_type(self) -> str:
        return self._primary_type

    def get_mixin_types(self) -> set[str]:
        return set(self._mixins)

    def add_mixin(self, name: str) -> None:
        self._check_mutable()
        self._mixins.add(name)
        if name == MIX_VERSIONABLE:
            self._checked_out = True

    def remove_mixin(self, name: str) -> None:
        if name not in self._mixins:
            raise RepositoryError(f"Mixin '{name}' is not assigned to '{self.get_path()}'")
        self._check_mutable()
        self._mixins.remove(name)

    def is_node_type(self, name: str) -> bool:
        return name == self._primary_type or name in self._mixins

    def is_checked_out(self) -> bool:
        node = self
        while node is not None:
            if node.is_node_type(MIX_VERSIONABLE):
                return node._checked_out
            node = node._parent
        return True

    def checkout(self) -> None:
        if not self.is_node_type(MIX_VERSIONABLE):
            raise RepositoryError(f"'{self.get_path()}' is not versionable")
        self._checked_out = True

    def checkin(self) -> None:
        """Check in a versionable node, making its subtree read-only."""
        if not self.is_node_type(MIX_VERSIONABLE):
            raise RepositoryError(f"'{self.get_path()}' is not versionable")
        self._checked_out = False

    def set_property(self, name: str, values: str | list[str]) -> MemoryProperty:
        """Seed a property; no versioning checks apply."""
        if name in self._children:
            raise ItemExistsError(path_utils.join(self.get_path(), name))
        if isinstance(values, str):
            values = [values]
        prop = MemoryProperty(name, self, values)
        self._properties[name] = prop
        return prop

    def get_property(self, name: str) -> MemoryProperty:
        try:
            return self._properties[name]
        except KeyError:
            raise ItemNotFoundError(path_utils.join(self.get_path(), name)) from None

    def has_property(self, name: str) -> bool:
        return name in self._properties

    def _check_mutable(self) -> None:
        if not self.is_checked_out():
            raise VersionConflictError(self.get_path())


class MemorySession(Session):
    """Session over a private in-memory tree."""

    def __init__(self, default_primary_type: str = NT_UNSTRUCTURED):
        self.default_primary_type = default_primary_type
        self._root = MemoryNode(self, "", None, ROOT_NODE_TYPE)

    def get_root_node(self) -> MemoryNode:
        return self._root

    def item_exists(self, path: str) -> bool:
        return self._find(path) is not None

    def get_item(self, path: str) -> Item:
        item = self._find(path)
        if item is None:
            raise ItemNotFoundError(path)
        return item

    def _find(self, path: str) -> Item | None:
        if not path_utils.is_absolute(path):
            raise InvalidPathError(path, "path must be absolute")
        segments = path_utils.split_segments(path)
        node = self._root
        for index, name in enumerate(segments):
            if node.has_node(name):
                node = node.get_node(name)
            elif index == len(segments) - 1 and node.has_property(name):
                return node.get_property(name)
            else:
                return None
        return node
