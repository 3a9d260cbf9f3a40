"""
Tests for the suffix directive table.
"""

import pytest

from treepost.parsing.directives import DIRECTIVE_HANDLERS, Directive, as_values, match_directive


class TestMatchDirective:
    @pytest.mark.parametrize(
        "suffix, directive",
        [
            ("@TypeHint", Directive.TYPE_HINT),
            ("@DefaultValue", Directive.DEFAULT_VALUE),
            ("@ValueFrom", Directive.VALUE_FROM),
            ("@Delete", Directive.DELETE),
            ("@MoveFrom", Directive.MOVE_FROM),
            ("@CopyFrom", Directive.COPY_FROM),
            ("@IgnoreBlanks", Directive.IGNORE_BLANKS),
            ("@UseDefaultWhenMissing", Directive.USE_DEFAULT_WHEN_MISSING),
        ],
    )
    def test_each_suffix_matches(self, suffix, directive):
        assert match_directive(f"/content/page/Text{suffix}") is directive

    def test_plain_path_has_no_directive(self):
        assert match_directive("/content/page/Text") is None

    def test_matching_is_case_sensitive(self):
        assert match_directive("/content/page/Text@typehint") is None
        assert match_directive("/content/page/Text@DELETE") is None

    def test_suffix_must_be_at_end(self):
        assert match_directive("/content/page/Text@TypeHint/child") is None

    def test_every_directive_has_a_handler(self):
        assert set(DIRECTIVE_HANDLERS) == set(Directive)


class TestDirectiveStrip:
    def test_strip_suffix(self):
        assert Directive.MOVE_FROM.strip("/a/Text@MoveFrom") == "/a/Text"

    def test_strip_leaves_other_paths(self):
        assert Directive.MOVE_FROM.strip("/a/Text@CopyFrom") == "/a/Text@CopyFrom"

    def test_suffix_property(self):
        assert Directive.DELETE.suffix == "@Delete"


class TestAsValues:
    def test_single_string(self):
        assert as_values("x") == ["x"]

    def test_sequence(self):
        assert as_values(["x", "y"]) == ["x", "y"]

    def test_none(self):
        assert as_values(None) == []
