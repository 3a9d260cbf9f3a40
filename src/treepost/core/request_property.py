"""
Descriptor model for one submitted property.

A RequestProperty collects everything a request said about a single absolute
property path: the plain values and every directive (type hint, defaults,
copy/move source, deletion, blank handling) addressed to it.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from treepost.core import path_utils
from treepost.core.constants import DEFAULT_IGNORE, DEFAULT_NULL


class RepositorySource(BaseModel):
    """Existing property whose value is copied or moved into the descriptor's path."""

    model_config = ConfigDict(frozen=True)

    source_path: str
    is_move: bool = False


class RequestProperty(BaseModel):
    """
    Values and directives submitted for one absolute property path.

    Created lazily by the parser on the first value or directive seen for the
    path and updated in place by later parameters addressing the same path.
    """

    path: str
    values: list[str] | None = None
    type_hint: str | None = None
    default_values: list[str] = Field(default_factory=list)
    delete: bool = False
    repository_source: RepositorySource | None = None
    ignore_blanks: bool = False
    use_default_when_missing: bool = False

    @field_validator("path")
    @classmethod
    def check_absolute(cls, value: str) -> str:
        if not path_utils.is_absolute(value):
            raise ValueError("property path must be absolute")
        return value

    @property
    def name(self) -> str:
        """Last segment of the property path."""
        return path_utils.get_name(self.path)

    @property
    def parent_path(self) -> str | None:
        """Path of the node owning the property."""
        return path_utils.get_parent(self.path)

    @property
    def has_multi_value_type_hint(self) -> bool:
        """Whether the type hint names a multi-valued type (e.g. "String[]")."""
        return self.type_hint is not None and self.type_hint.endswith("[]")

    @property
    def value_type(self) -> str | None:
        """The type hint without a trailing "[]"."""
        if self.has_multi_value_type_hint:
            return self.type_hint[:-2]
        return self.type_hint

    @property
    def has_repository_source(self) -> bool:
        return self.repository_source is not None

    @property
    def has_values(self) -> bool:
        """
        Whether there is anything to write for this property.

        Defaults count when use_default_when_missing is set. With
        ignore_blanks, only non-blank values count. Otherwise any submission,
        blank or not, counts.
        """
        if self.use_default_when_missing and self.default_values:
            return True
        if self.ignore_blanks:
            return self.values is not None and bool(self.string_values())
        return self.values is not None

    def string_values(self) -> list[str] | None:
        """
        Compute the effective values to write.

        Returns:
            The values after blank and default handling, or None when the
            reserved ":null" default asks for the property to be removed
        """
        values = self.values
        if values is None:
            if self.use_default_when_missing and self.default_values:
                return [self.default_values[0]]
            return []

        if len(values) > 1:
            return [value for value in values if value or not self.ignore_blanks]

        value = values[0] if values else ""
        if value == "":
            if self.ignore_blanks:
                return []
            if len(self.default_values) == 1:
                default = self.default_values[0]
                if default == DEFAULT_IGNORE:
                    return []
                if default == DEFAULT_NULL:
                    return None
                value = default
        return [value]
