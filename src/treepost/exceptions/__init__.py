"""
treepost exception classes.

This package provides all exception types raised while collecting request
properties and materializing nodes in the content tree.
"""

from treepost.exceptions.core import (
    InvalidPathError,
    ItemExistsError,
    ItemNotFoundError,
    RepositoryError,
    TreePostError,
    VersionConflictError,
)

__all__ = [
    "TreePostError",
    "InvalidPathError",
    "RepositoryError",
    "ItemNotFoundError",
    "ItemExistsError",
    "VersionConflictError",
]
