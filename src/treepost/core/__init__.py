"""
Core treepost components.

This package provides the descriptor model, path utilities, reserved names
and shared type aliases used by the parser and the materializer.
"""

from treepost.core.path_utils import (
    get_name,
    get_parent,
    is_absolute,
    join,
    normalize,
    split_segments,
)
from treepost.core.request_property import RepositorySource, RequestProperty
from treepost.core.types import ParameterMap, ParameterValues, PropertyMap

__all__ = [
    "RequestProperty",
    "RepositorySource",
    "ParameterMap",
    "ParameterValues",
    "PropertyMap",
    "get_name",
    "get_parent",
    "is_absolute",
    "join",
    "normalize",
    "split_segments",
]
