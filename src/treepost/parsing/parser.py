"""
Collection of request parameters into property descriptors.

This module walks the submitted parameters in order, resolves each name to an
absolute property path and folds plain values and directives into one
RequestProperty per path.

Example:
    parameters = {
        "./age": "42",
        "./age@TypeHint": "Long",
        ":redirect": "/done.html",
    }
    collect_content(parameters, "/content/person")
    # {"/content/person/age": RequestProperty(values=["42"], type_hint="Long")}
"""

import logging

from treepost.core import path_utils
from treepost.core.constants import (
    ITEM_PREFIX_ABSOLUTE,
    ITEM_PREFIX_RELATIVE_CURRENT,
    ITEM_PREFIX_RELATIVE_PARENT,
    RP_CHARSET,
    RP_PREFIX,
)
from treepost.core.request_property import RequestProperty
from treepost.core.types import ParameterMap, PropertyMap
from treepost.parsing.directives import DIRECTIVE_HANDLERS, as_values, match_directive

logger = logging.getLogger(__name__)


def is_control_parameter(name: str) -> bool:
    """Check whether a parameter steers the request instead of carrying content."""
    return name.startswith(RP_PREFIX) or name == RP_CHARSET


def has_item_path_prefix(name: str) -> bool:
    """Check whether a parameter name is explicitly marked as an item path."""
    return (
        name.startswith(ITEM_PREFIX_ABSOLUTE)
        or name.startswith(ITEM_PREFIX_RELATIVE_CURRENT)
        or name.startswith(ITEM_PREFIX_RELATIVE_PARENT)
    )


def require_item_path_prefix(parameters: ParameterMap) -> bool:
    """
    Detect whether only prefixed parameter names denote properties.

    As soon as one parameter name starts with "./" the request is taken to
    mark its properties explicitly, and unprefixed names are left alone.
    """
    return any(name.startswith(ITEM_PREFIX_RELATIVE_CURRENT) for name in parameters)


def to_property_path(name: str, base_path: str) -> str:
    """
    Resolve a parameter name to an absolute property path.

    Params:
        name: Submitted parameter name, absolute or relative
        base_path: Path of the node the request addresses

    Returns:
        The name itself when absolute, else the normalized base_path/name

    Raises:
        InvalidPathError: If a relative name climbs above the root
    """
    if name.startswith(ITEM_PREFIX_ABSOLUTE):
        return name
    return path_utils.join(base_path, name)


class DirectiveParser:
    """
    Turn a flat parameter mapping into an ordered descriptor mapping.

    Params:
        require_item_prefix: Only parameters starting with "/", "./" or "../"
            denote properties
    """

    def __init__(self, require_item_prefix: bool = False):
        self.require_item_prefix = require_item_prefix

    def collect_content(self, parameters: ParameterMap, base_path: str) -> PropertyMap:
        """
        Collect the properties to be written back to the content tree.

        Params:
            parameters: Ordered mapping of parameter name to one or more values
            base_path: Absolute path relative parameter names resolve against

        Returns:
            Insertion-ordered mapping of base property path to RequestProperty
        """
        properties: PropertyMap = {}

        for name, raw_values in parameters.items():
            if is_control_parameter(name):
                continue
            if self.require_item_prefix and not has_item_path_prefix(name):
                logger.debug("Skipping parameter '%s' without item path prefix", name)
                continue

            prop_path = to_property_path(name, base_path)
            values = as_values(raw_values)

            directive = match_directive(prop_path)
            if directive is None:
                prop = self._get_or_create(properties, prop_path)
                prop.values = values
                continue

            prop = self._get_or_create(properties, directive.strip(prop_path))
            DIRECTIVE_HANDLERS[directive](prop, values, parameters)

        return properties

    @staticmethod
    def _get_or_create(properties: PropertyMap, path: str) -> RequestProperty:
        prop = properties.get(path)
        if prop is None:
            prop = RequestProperty(path=path)
            properties[path] = prop
        return prop


def collect_content(
    parameters: ParameterMap,
    base_path: str,
    require_item_prefix: bool | None = None,
) -> PropertyMap:
    """
    Collect request properties, detecting the prefix mode when not given.

    Params:
        parameters: Ordered mapping of parameter name to one or more values
        base_path: Absolute path relative parameter names resolve against
        require_item_prefix: Explicit prefix mode; None detects it from the names

    Returns:
        Insertion-ordered mapping of base property path to RequestProperty
    """
    if require_item_prefix is None:
        require_item_prefix = require_item_path_prefix(parameters)
    return DirectiveParser(require_item_prefix).collect_content(parameters, base_path)
