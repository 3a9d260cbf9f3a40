from dataclasses import dataclass, field
from enum import Enum

from attrs import evolve, frozen

from treepost.core.constants import RP_AUTO_CHECKIN, RP_AUTO_CHECKOUT
from treepost.core.types import ParameterMap, PropertyMap


class ModificationType(Enum):
    MODIFY = "modified"
    DELETE = "deleted"
    MOVE = "moved"
    COPY = "copied"
    CREATE = "created"
    ORDER = "ordered"
    CHECKOUT = "checkout"
    CHECKIN = "checkin"


@frozen
class Modification:
    """One observable change applied to the content tree.

    Records are appended to a shared change log in the order the changes
    happen and never read back by the code producing them.
    """

    type: ModificationType
    source: str
    destination: str | None = None

    @classmethod
    def on_created(cls, path: str) -> "Modification":
        return cls(ModificationType.CREATE, path)

    @classmethod
    def on_modified(cls, path: str) -> "Modification":
        return cls(ModificationType.MODIFY, path)

    @classmethod
    def on_deleted(cls, path: str) -> "Modification":
        return cls(ModificationType.DELETE, path)

    @classmethod
    def on_moved(cls, source: str, destination: str) -> "Modification":
        return cls(ModificationType.MOVE, source, destination)

    @classmethod
    def on_copied(cls, source: str, destination: str) -> "Modification":
        return cls(ModificationType.COPY, source, destination)

    @classmethod
    def on_order(cls, path: str, before_sibling: str | None = None) -> "Modification":
        return cls(ModificationType.ORDER, path, before_sibling)

    @classmethod
    def on_checkout(cls, path: str) -> "Modification":
        return cls(ModificationType.CHECKOUT, path)

    @classmethod
    def on_checkin(cls, path: str) -> "Modification":
        return cls(ModificationType.CHECKIN, path)


def _parse_flag(raw) -> bool | None:
    if isinstance(raw, (list, tuple)):
        raw = raw[0] if raw else None
    if isinstance(raw, str) and raw.lower() in ("true", "false"):
        return raw.lower() == "true"
    return None


@frozen
class VersioningConfiguration:
    """Versioning policy for one request.

    Attributes:
        auto_checkout: Check out checked-in versionable nodes before changing them.
        checkin_on_new_versionable_node: Check in nodes that become versionable
            once the request is done; the node is reported as checked out meanwhile.
        auto_checkin: Check in nodes that were automatically checked out.
            Read by the check-in step that runs after the request's changes
            are saved, using the checkout records of the change log; nothing
            in this package checks nodes in.
    """

    auto_checkout: bool = False
    checkin_on_new_versionable_node: bool = False
    auto_checkin: bool = True

    @classmethod
    def from_parameters(
        cls,
        parameters: ParameterMap,
        defaults: "VersioningConfiguration | None" = None,
    ) -> "VersioningConfiguration":
        """Apply the ":autoCheckout" and ":autoCheckin" control parameters to a base policy.

        Only "true" and "false" (any case) are honored; other values leave the
        default in place.

        Params:
            parameters: Submitted request parameters.
            defaults: Base policy; a default-constructed one when omitted.

        Returns:
            A new VersioningConfiguration.
        """
        config = defaults or cls()
        auto_checkin = _parse_flag(parameters.get(RP_AUTO_CHECKIN))
        if auto_checkin is not None:
            config = evolve(config, auto_checkin=auto_checkin)
        auto_checkout = _parse_flag(parameters.get(RP_AUTO_CHECKOUT))
        if auto_checkout is not None:
            config = evolve(config, auto_checkout=auto_checkout)
        return config


@dataclass
class PostResponse:
    """Outcome of one create request handed back to the orchestration layer."""

    path: str
    create_request: bool = False
    changes: list[Modification] = field(default_factory=list)
    properties: PropertyMap = field(default_factory=dict)
