"""
Tests for the exception taxonomy.
"""

from treepost.exceptions import (
    InvalidPathError,
    ItemExistsError,
    ItemNotFoundError,
    RepositoryError,
    TreePostError,
    VersionConflictError,
)


class TestInvalidPathError:
    def test_attributes_and_message(self):
        error = InvalidPathError("content", "path must be absolute")

        assert error.path == "content"
        assert error.reason == "path must be absolute"
        assert str(error) == "Invalid path 'content': path must be absolute"

    def test_is_value_error(self):
        """Invalid paths are argument errors."""
        assert isinstance(InvalidPathError("x", "bad"), ValueError)
        assert isinstance(InvalidPathError("x", "bad"), TreePostError)


class TestRepositoryErrors:
    def test_hierarchy(self):
        for error in (
            ItemNotFoundError("/a"),
            ItemExistsError("/a"),
            VersionConflictError("/a"),
        ):
            assert isinstance(error, RepositoryError)
            assert isinstance(error, TreePostError)
            assert error.path == "/a"

    def test_version_conflict_message(self):
        error = VersionConflictError("/content/page")

        assert error.reason == "node is checked in"
        assert "/content/page" in str(error)

    def test_not_found_message(self):
        assert str(ItemNotFoundError("/missing")) == "No item found at '/missing'"
