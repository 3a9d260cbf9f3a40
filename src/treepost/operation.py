"""
Create operation combining parameter collection and node materialization.

This is the seam an HTTP handler or other orchestration layer calls with the
decoded request parameters and the target path.
"""

from treepost.core import path_utils
from treepost.core.types import ParameterMap
from treepost.materializer import NodeMaterializer
from treepost.models import Modification, PostResponse, VersioningConfiguration
from treepost.parsing.parser import DirectiveParser, require_item_path_prefix
from treepost.store.base import Session


class CreateOperation:
    """
    Run one create request against a store session.

    Params:
        materializer: Node materializer to use; a default one when omitted
        versioning: Base versioning policy, refined per request by the
            ":autoCheckout" and ":autoCheckin" parameters
    """

    def __init__(
        self,
        materializer: NodeMaterializer | None = None,
        versioning: VersioningConfiguration | None = None,
    ):
        self.materializer = materializer or NodeMaterializer()
        self.versioning = versioning or VersioningConfiguration()

    def run(
        self,
        session: Session,
        parameters: ParameterMap,
        path: str,
        config: VersioningConfiguration | None = None,
    ) -> PostResponse:
        """
        Collect the request's properties and materialize its target node.

        Params:
            session: Store session
            parameters: Ordered mapping of parameter name to one or more values
            path: Absolute path of the target node
            config: Versioning policy overriding the one derived from parameters

        Returns:
            PostResponse with the normalized path, the creation flag, the change
            log and the descriptors

        Raises:
            InvalidPathError: If path is not absolute
        """
        path = path_utils.normalize(path)
        if config is None:
            config = VersioningConfiguration.from_parameters(parameters, self.versioning)

        parser = DirectiveParser(require_item_path_prefix(parameters))
        properties = parser.collect_content(parameters, path)

        changes: list[Modification] = []
        created = self.materializer.create_or_update(
            session, path, properties, changes, config
        )
        return PostResponse(
            path=path,
            create_request=created,
            changes=changes,
            properties=properties,
        )
