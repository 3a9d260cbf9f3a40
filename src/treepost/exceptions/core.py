"""
Exception classes for request property collection and node materialization.

Invalid paths are caller errors and surface immediately. Everything raised by
the store boundary derives from RepositoryError and is propagated unchanged;
nothing here is retried or rolled back.
"""


class TreePostError(Exception):
    """Base exception for all treepost errors."""

    pass


class InvalidPathError(TreePostError, ValueError):
    """Raised when a path is not absolute or cannot be normalized."""

    def __init__(self, path: str | None, reason: str):
        """
        Initialize the exception.

        Params:
            path: The offending path (may be None)
            reason: Why the path is invalid
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path '{path}': {reason}")


class RepositoryError(TreePostError):
    """Raised by the store boundary when a repository operation fails."""

    pass


class ItemNotFoundError(RepositoryError):
    """Raised when no item exists at the requested path."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No item found at '{path}'")


class ItemExistsError(RepositoryError):
    """Raised when adding a child whose name is already taken."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Item already exists at '{path}'")


class VersionConflictError(RepositoryError):
    """Raised when the checkout state of a versionable node blocks a change."""

    def __init__(self, path: str, reason: str = "node is checked in"):
        """
        Initialize the exception.

        Params:
            path: Path of the node that could not be modified
            reason: Description of the versioning state that blocked the change
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot modify '{path}': {reason}")
