"""
Suffix directives addressed to request properties.

A parameter named "./age@TypeHint" does not carry a value for a property
called "age@TypeHint"; it tells how the "age" property is to be written.
Each directive is keyed by its suffix literal and applied by a handler that
updates the descriptor of the base path.
"""

import logging
from collections.abc import Callable, Sequence
from enum import Enum

from treepost.core.constants import (
    DEFAULT_VALUE_SUFFIX,
    SUFFIX_COPY_FROM,
    SUFFIX_DELETE,
    SUFFIX_IGNORE_BLANKS,
    SUFFIX_MOVE_FROM,
    SUFFIX_USE_DEFAULT_WHEN_MISSING,
    TYPE_HINT_SUFFIX,
    VALUE_FROM_SUFFIX,
)
from treepost.core.request_property import RepositorySource, RequestProperty
from treepost.core.types import ParameterMap, ParameterValues

logger = logging.getLogger(__name__)


class Directive(Enum):
    """Directive suffixes recognized on parameter names."""

    TYPE_HINT = TYPE_HINT_SUFFIX
    DEFAULT_VALUE = DEFAULT_VALUE_SUFFIX
    VALUE_FROM = VALUE_FROM_SUFFIX
    DELETE = SUFFIX_DELETE
    MOVE_FROM = SUFFIX_MOVE_FROM
    COPY_FROM = SUFFIX_COPY_FROM
    IGNORE_BLANKS = SUFFIX_IGNORE_BLANKS
    USE_DEFAULT_WHEN_MISSING = SUFFIX_USE_DEFAULT_WHEN_MISSING

    @property
    def suffix(self) -> str:
        return self.value

    def strip(self, path: str) -> str:
        """Remove this directive's suffix from a property path."""
        if path.endswith(self.suffix):
            return path[: -len(self.suffix)]
        return path


# (property, submitted values, whole parameter map)
DirectiveHandler = Callable[[RequestProperty, list[str], ParameterMap], None]


def as_values(raw: ParameterValues | None) -> list[str]:
    """Normalize a submitted parameter value to a list of strings."""
    if raw is None:
        return []
    if isinstance(raw, str):
        return [raw]
    return list(raw)


def _single(prop: RequestProperty, directive: Directive, values: Sequence[str]) -> str | None:
    if len(values) != 1:
        logger.debug(
            "Ignoring %s for '%s': expected exactly one value, got %d",
            directive.suffix,
            prop.path,
            len(values),
        )
        return None
    return values[0]


def apply_type_hint(prop, values, parameters):
    if values:
        prop.type_hint = values[0]


def apply_default_value(prop, values, parameters):
    prop.default_values = list(values)


def apply_value_from(prop, values, parameters):
    ref_name = _single(prop, Directive.VALUE_FROM, values)
    if ref_name is None:
        return
    if ref_name in parameters:
        prop.values = as_values(parameters[ref_name])
    else:
        logger.debug("No parameter '%s' to take values of '%s' from", ref_name, prop.path)


def apply_delete(prop, values, parameters):
    prop.delete = True


def apply_move_from(prop, values, parameters):
    source = _single(prop, Directive.MOVE_FROM, values)
    if source is not None:
        prop.repository_source = RepositorySource(source_path=source, is_move=True)


def apply_copy_from(prop, values, parameters):
    source = _single(prop, Directive.COPY_FROM, values)
    if source is not None:
        prop.repository_source = RepositorySource(source_path=source, is_move=False)


def apply_ignore_blanks(prop, values, parameters):
    if _single(prop, Directive.IGNORE_BLANKS, values) is not None:
        prop.ignore_blanks = True


def apply_use_default_when_missing(prop, values, parameters):
    if _single(prop, Directive.USE_DEFAULT_WHEN_MISSING, values) is not None:
        prop.use_default_when_missing = True


DIRECTIVE_HANDLERS: dict[Directive, DirectiveHandler] = {
    Directive.TYPE_HINT: apply_type_hint,
    Directive.DEFAULT_VALUE: apply_default_value,
    Directive.VALUE_FROM: apply_value_from,
    Directive.DELETE: apply_delete,
    Directive.MOVE_FROM: apply_move_from,
    Directive.COPY_FROM: apply_copy_from,
    Directive.IGNORE_BLANKS: apply_ignore_blanks,
    Directive.USE_DEFAULT_WHEN_MISSING: apply_use_default_when_missing,
}

# Longest suffix first so matching stays unambiguous if suffixes ever overlap
_MATCH_ORDER = sorted(Directive, key=lambda directive: len(directive.suffix), reverse=True)


def match_directive(path: str) -> Directive | None:
    """
    Find the directive a property path ends with.

    Params:
        path: Absolute property path, possibly ending with a directive suffix

    Returns:
        The matching Directive, or None for a plain property
    """
    for directive in _MATCH_ORDER:
        if path.endswith(directive.suffix):
            return directive
    return None
