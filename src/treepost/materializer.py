"""
Node materialization for create requests.

Given the target path of a request and the collected property descriptors,
the NodeMaterializer makes sure the target node exists, creating missing
ancestors on the way, and aligns the mixin types of an existing target with
the requested "jcr:mixinTypes". Writing plain property values is left to the
value-assignment step that runs afterwards.

Node types for a created node are read from the descriptors keyed at that
node's own path ("<path>/jcr:primaryType", "<path>/jcr:mixinTypes"); they are
never inherited from ancestors or siblings.
"""

import logging
from collections.abc import Callable

from treepost.core import path_utils
from treepost.core.constants import JCR_MIXIN_TYPES, JCR_PRIMARY_TYPE, MIX_VERSIONABLE
from treepost.core.types import PropertyMap
from treepost.exceptions import InvalidPathError, RepositoryError, VersionConflictError
from treepost.models import Modification, VersioningConfiguration
from treepost.store.base import Node, Session
from treepost.versioning import checkout_if_necessary

logger = logging.getLogger(__name__)

CheckoutHandler = Callable[[Node, list[Modification], VersioningConfiguration], None]


def get_primary_type(properties: PropertyMap, path: str) -> str | None:
    """
    Look up the requested primary type of the node at a path.

    Returns:
        The first value of "<path>/jcr:primaryType", or None if not requested
    """
    prop = properties.get(path_utils.join(path, JCR_PRIMARY_TYPE))
    if prop is None:
        return None
    values = prop.string_values()
    return values[0] if values else None


def get_mixin_types(properties: PropertyMap, path: str) -> list[str] | None:
    """
    Look up the requested mixin types of the node at a path.

    Returns:
        The values of "<path>/jcr:mixinTypes", or None if not requested
    """
    prop = properties.get(path_utils.join(path, JCR_MIXIN_TYPES))
    if prop is None or not prop.has_values:
        return None
    values = prop.string_values()
    # ":null" default asks for the property to go away: no mixins at all
    return values if values is not None else []


class NodeMaterializer:
    """
    Creates the node hierarchy for a request and reconciles mixin types.

    Params:
        checkout: Collaborator making a node mutable before it is changed;
            defaults to checkout_if_necessary
    """

    def __init__(self, checkout: CheckoutHandler | None = None):
        self.checkout = checkout or checkout_if_necessary

    def create_or_update(
        self,
        session: Session,
        path: str,
        properties: PropertyMap,
        changes: list[Modification],
        config: VersioningConfiguration,
    ) -> bool:
        """
        Create the node at path, or align the mixins of the existing item.

        Params:
            session: Store session
            path: Absolute path of the request's target node
            properties: Collected property descriptors
            changes: Change log to append to
            config: Versioning policy of the request

        Returns:
            True if the target node was created by this call

        Raises:
            InvalidPathError: If path is not absolute
            VersionConflictError: If node creation is blocked by a checked-in node
        """
        if not path_utils.is_absolute(path):
            raise InvalidPathError(path, "path must be an absolute path")
        path = path_utils.normalize(path)

        if not session.item_exists(path):
            self.deep_get_or_create_node(session, path, properties, changes, config)
            return True

        mixins = get_mixin_types(properties, path)
        if mixins is not None:
            item = session.get_item(path)
            if item.is_node():
                self.reconcile_mixins(item, mixins, changes, config)
        return False

    def deep_get_or_create_node(
        self,
        session: Session,
        path: str,
        properties: PropertyMap,
        changes: list[Modification],
        config: VersioningConfiguration,
    ) -> Node:
        """
        Get the node at path, creating it and any missing ancestors.

        Params:
            session: Store session
            path: Absolute path of the node
            properties: Collected property descriptors providing node types
            changes: Change log; receives one created record per new node
            config: Versioning policy of the request

        Returns:
            The node at path

        Raises:
            InvalidPathError: If path is not absolute
            VersionConflictError: If a checked-in node blocks creation
            RepositoryError: If an existing item on the path is not a node
        """
        logger.debug("Deep-creating node '%s'", path)
        if not path_utils.is_absolute(path):
            raise InvalidPathError(path, "path must be an absolute path")
        path = path_utils.normalize(path)

        # longest existing prefix
        starting_path = path
        starting_node = None
        while starting_node is None:
            if starting_path == path_utils.ROOT:
                starting_node = session.get_root_node()
            elif session.item_exists(starting_path):
                starting_node = session.get_item(starting_path)
                if not starting_node.is_node():
                    raise RepositoryError(f"'{starting_path}' is a property, not a node")
            else:
                starting_path = path_utils.get_parent(starting_path)

        if starting_path == path:
            return starting_node

        segments = path_utils.split_segments(path)
        node = starting_node
        for depth in range(len(path_utils.split_segments(starting_path)), len(segments)):
            name = segments[depth]
            # normally absent after the prefix search; descend if it is there
            if node.has_node(name):
                node = node.get_node(name)
                continue

            sub_path = path_utils.ROOT + path_utils.SEPARATOR.join(segments[: depth + 1])
            node_type = get_primary_type(properties, sub_path)
            self.checkout(node, changes, config)
            try:
                if node_type is not None:
                    node = node.add_node(name, node_type)
                else:
                    node = node.add_node(name)
            except VersionConflictError:
                logger.error("Unable to create node named %s in %s", name, node.get_path())
                raise

            for mixin in get_mixin_types(properties, sub_path) or []:
                node.add_mixin(mixin)
            changes.append(Modification.on_created(node.get_path()))

        return node

    def reconcile_mixins(
        self,
        node: Node,
        mixins: list[str],
        changes: list[Modification],
        config: VersioningConfiguration,
    ) -> None:
        """
        Make the node's mixin set equal to the requested one.

        Mixins present both before and after are left alone; only stale ones
        are removed and missing ones added.

        Params:
            node: Existing node to update
            mixins: Requested mixin names; duplicates and order do not matter
            changes: Change log
            config: Versioning policy of the request
        """
        requested = dict.fromkeys(mixins)
        self.checkout(node, changes, config)

        for mixin in node.get_mixin_types():
            if mixin in requested:
                del requested[mixin]
            else:
                node.remove_mixin(mixin)

        for mixin in requested:
            node.add_mixin(mixin)
            # adding mix:versionable implicitly checks the node out
            if (
                mixin == MIX_VERSIONABLE
                and config.checkin_on_new_versionable_node
                and node.is_checked_out()
            ):
                changes.append(Modification.on_checkout(node.get_path()))
