"""
Tests for the RequestProperty descriptor model.

Focus Areas:
1. Path validation and derived names
2. Effective values with blanks, defaults and reserved defaults
3. has_values semantics
"""

import pytest
from pydantic import ValidationError

from treepost.core.request_property import RepositorySource, RequestProperty


class TestRequestPropertyBasics:
    def test_defaults(self):
        """Test a freshly created descriptor carries no values or directives."""
        prop = RequestProperty(path="/content/page/title")

        assert prop.values is None
        assert prop.type_hint is None
        assert prop.default_values == []
        assert prop.delete is False
        assert prop.repository_source is None
        assert prop.ignore_blanks is False
        assert prop.use_default_when_missing is False

    def test_relative_path_rejected(self):
        with pytest.raises(ValidationError):
            RequestProperty(path="content/title")

    def test_empty_path_rejected(self):
        with pytest.raises(ValidationError):
            RequestProperty(path="")

    def test_name_and_parent(self):
        prop = RequestProperty(path="/content/page/title")

        assert prop.name == "title"
        assert prop.parent_path == "/content/page"

    def test_repository_source(self):
        prop = RequestProperty(path="/content/page/title")
        assert prop.has_repository_source is False

        prop.repository_source = RepositorySource(source_path="/tmp/title", is_move=True)

        assert prop.has_repository_source is True
        assert prop.repository_source.source_path == "/tmp/title"
        assert prop.repository_source.is_move is True

    def test_repository_source_is_frozen(self):
        source = RepositorySource(source_path="/tmp/title")

        with pytest.raises(ValidationError):
            source.is_move = True


class TestTypeHint:
    def test_single_value_hint(self):
        prop = RequestProperty(path="/a/age", type_hint="Long")

        assert prop.has_multi_value_type_hint is False
        assert prop.value_type == "Long"

    def test_multi_value_hint(self):
        """Test that a "[]" suffix marks a multi-valued type."""
        prop = RequestProperty(path="/a/tags", type_hint="String[]")

        assert prop.has_multi_value_type_hint is True
        assert prop.value_type == "String"
        assert prop.type_hint == "String[]"

    def test_no_hint(self):
        prop = RequestProperty(path="/a/tags")

        assert prop.has_multi_value_type_hint is False
        assert prop.value_type is None


class TestStringValues:
    """Test the effective values computed from submissions and directives."""

    def test_single_value(self):
        prop = RequestProperty(path="/a/title", values=["Hello"])

        assert prop.string_values() == ["Hello"]

    def test_multiple_values_kept_in_order(self):
        prop = RequestProperty(path="/a/tags", values=["b", "", "a"])

        assert prop.string_values() == ["b", "", "a"]

    def test_multiple_values_ignore_blanks(self):
        prop = RequestProperty(path="/a/tags", values=["b", "", "a"], ignore_blanks=True)

        assert prop.string_values() == ["b", "a"]

    def test_blank_value_kept_without_directives(self):
        prop = RequestProperty(path="/a/title", values=[""])

        assert prop.string_values() == [""]

    def test_blank_value_ignored(self):
        prop = RequestProperty(path="/a/title", values=[""], ignore_blanks=True)

        assert prop.string_values() == []

    def test_blank_value_replaced_by_default(self):
        prop = RequestProperty(path="/a/title", values=[""], default_values=["Untitled"])

        assert prop.string_values() == ["Untitled"]

    def test_non_blank_value_wins_over_default(self):
        prop = RequestProperty(path="/a/title", values=["Hi"], default_values=["Untitled"])

        assert prop.string_values() == ["Hi"]

    def test_several_defaults_not_applied(self):
        """Test that only a single default replaces a blank value."""
        prop = RequestProperty(path="/a/title", values=[""], default_values=["x", "y"])

        assert prop.string_values() == [""]

    def test_reserved_ignore_default(self):
        prop = RequestProperty(path="/a/title", values=[""], default_values=[":ignore"])

        assert prop.string_values() == []

    def test_reserved_null_default(self):
        """Test that ":null" asks for removal by returning None."""
        prop = RequestProperty(path="/a/title", values=[""], default_values=[":null"])

        assert prop.string_values() is None

    def test_empty_value_list_treated_as_blank(self):
        prop = RequestProperty(path="/a/title", values=[], default_values=["Untitled"])

        assert prop.string_values() == ["Untitled"]

    def test_missing_values(self):
        prop = RequestProperty(path="/a/title", default_values=["Untitled"])

        assert prop.string_values() == []

    def test_missing_values_use_default(self):
        prop = RequestProperty(
            path="/a/title", default_values=["Untitled"], use_default_when_missing=True
        )

        assert prop.string_values() == ["Untitled"]


class TestHasValues:
    def test_no_submission(self):
        assert RequestProperty(path="/a/title").has_values is False

    def test_blank_submission_counts(self):
        """Test that a submitted blank value is distinct from no submission."""
        assert RequestProperty(path="/a/title", values=[""]).has_values is True

    def test_blank_submission_with_ignore_blanks(self):
        prop = RequestProperty(path="/a/title", values=[""], ignore_blanks=True)

        assert prop.has_values is False

    def test_non_blank_with_ignore_blanks(self):
        prop = RequestProperty(path="/a/title", values=["", "x"], ignore_blanks=True)

        assert prop.has_values is True

    def test_default_when_missing(self):
        prop = RequestProperty(
            path="/a/title", default_values=["Untitled"], use_default_when_missing=True
        )

        assert prop.has_values is True

    def test_use_default_without_defaults(self):
        prop = RequestProperty(path="/a/title", use_default_when_missing=True)

        assert prop.has_values is False
