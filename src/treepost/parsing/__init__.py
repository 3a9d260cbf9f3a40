"""
treepost parsing components.

This package turns submitted request parameters and their suffix directives
into property descriptors.
"""

from treepost.parsing.directives import Directive, match_directive
from treepost.parsing.parser import (
    DirectiveParser,
    collect_content,
    has_item_path_prefix,
    is_control_parameter,
    require_item_path_prefix,
    to_property_path,
)

__all__ = [
    "Directive",
    "DirectiveParser",
    "collect_content",
    "has_item_path_prefix",
    "is_control_parameter",
    "match_directive",
    "require_item_path_prefix",
    "to_property_path",
]
