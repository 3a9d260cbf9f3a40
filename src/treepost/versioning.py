"""
Checkout handling for versionable nodes.

A checked-in versionable node rejects changes to itself and everything below
it. Before the materializer mutates a node it calls checkout_if_necessary,
which checks out the nearest versionable ancestor when the policy allows it.
"""

import logging

from treepost.core.constants import MIX_VERSIONABLE
from treepost.exceptions import ItemNotFoundError
from treepost.models import Modification, VersioningConfiguration
from treepost.store.base import Node

logger = logging.getLogger(__name__)


def find_versionable_ancestor(node: Node) -> Node | None:
    """
    Find the nearest versionable node, starting with the node itself.

    Returns:
        The versionable node, or None if neither the node nor any ancestor is versionable
    """
    current = node
    while not current.is_node_type(MIX_VERSIONABLE):
        try:
            current = current.get_parent()
        except ItemNotFoundError:
            return None
    return current


def checkout_if_necessary(
    node: Node, changes: list[Modification], config: VersioningConfiguration
) -> None:
    """
    Make a node mutable by checking out its versionable ancestor.

    Does nothing unless auto_checkout is enabled or when the ancestor is
    already checked out, so repeated calls are harmless.

    Params:
        node: Node about to be modified
        changes: Change log; receives a checkout record when a checkout happens
        config: Versioning policy of the request
    """
    if not config.auto_checkout:
        return
    versionable = find_versionable_ancestor(node)
    if versionable is None or versionable.is_checked_out():
        return
    versionable.checkout()
    logger.debug("Checked out '%s'", versionable.get_path())
    changes.append(Modification.on_checkout(versionable.get_path()))
