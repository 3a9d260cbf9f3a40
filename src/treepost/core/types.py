"""
Core type definitions for treepost.

Type aliases shared by the parser, the materializer and the operation layer.
"""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from treepost.core.request_property import RequestProperty

# One or more submitted string values; a bare string counts as one value
ParameterValues = str | Sequence[str]

ParameterMap = Mapping[str, ParameterValues]

PropertyMap = dict[str, "RequestProperty"]
