"""
treepost - Write flat request parameters into a hierarchical content tree

treepost collects submitted parameters and their suffix directives into
property descriptors and creates the node path they address.
"""

from importlib.metadata import version

from treepost.core.request_property import RepositorySource, RequestProperty
from treepost.materializer import NodeMaterializer
from treepost.models import (
    Modification,
    ModificationType,
    PostResponse,
    VersioningConfiguration,
)
from treepost.operation import CreateOperation
from treepost.parsing import DirectiveParser, collect_content

__version__ = version("treepost")

__all__ = [
    "__version__",
    "CreateOperation",
    "DirectiveParser",
    "Modification",
    "ModificationType",
    "NodeMaterializer",
    "PostResponse",
    "RepositorySource",
    "RequestProperty",
    "VersioningConfiguration",
    "collect_content",
]
