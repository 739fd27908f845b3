# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Role name classification.

Role names in a delegation based trust repository are hierarchical paths:
the four top-level roles (``root``, ``targets``, ``snapshot`` and
``timestamp``) and delegations below ``targets`` such as
``targets/releases`` or ``targets/docker/signer``.

``parse_role()`` is the single place where a role name string is classified.
It is total: every string maps to exactly one ``RoleKind``, with ``OTHER`` as
the fallback for names that are neither top-level nor delegation names.
"""

from dataclasses import dataclass
from enum import Enum, unique
from typing import Optional

ROOT = "root"
SNAPSHOT = "snapshot"
TARGETS = "targets"
TIMESTAMP = "timestamp"

BASE_ROLE_NAMES = frozenset({ROOT, TARGETS, SNAPSHOT, TIMESTAMP})

# Delegation whose signatures mark a target as officially published
RELEASES_ROLE = "targets/releases"

# Display name used in place of a signer identity for released roles
RELEASED_ROLE_NAME = "Repo Admin"

_DELEGATION_PREFIX = f"{TARGETS}/"


@unique
class RoleKind(Enum):
    """Classification of a role name.

    Args:
        ROOT, TARGETS, SNAPSHOT, TIMESTAMP: The top-level roles.
        DELEGATION: ``targets/<identity>`` with a non-empty identity.
        OTHER: Anything else.
    """

    ROOT = ROOT
    TARGETS = TARGETS
    SNAPSHOT = SNAPSHOT
    TIMESTAMP = TIMESTAMP
    DELEGATION = "delegation"
    OTHER = "other"


@dataclass(frozen=True)
class ParsedRole:
    """A classified role name.

    *All parameters named below are not just constructor arguments but also
    instance attributes.*

    Args:
        name: The role name as it appears in metadata.
        kind: ``RoleKind`` of the name.
        identity: Delegation path suffix, only set for ``DELEGATION``.
    """

    name: str
    kind: RoleKind
    identity: Optional[str] = None

    @property
    def is_base(self) -> bool:
        return self.kind not in (RoleKind.DELEGATION, RoleKind.OTHER)

    @property
    def is_released(self) -> bool:
        """True for the canonical targets role and for exactly
        ``targets/releases``: sub-delegations of releases do not count.
        """
        return self.kind is RoleKind.TARGETS or self.name == RELEASES_ROLE


def parse_role(name: str) -> ParsedRole:
    """Classify a role name, never fails."""
    if name in BASE_ROLE_NAMES:
        return ParsedRole(name, RoleKind(name))

    if name.startswith(_DELEGATION_PREFIX):
        identity = name[len(_DELEGATION_PREFIX) :]
        if identity:
            return ParsedRole(name, RoleKind.DELEGATION, identity)

    return ParsedRole(name, RoleKind.OTHER)


def is_base_role(name: str) -> bool:
    """Return True if ``name`` is one of the four top-level role names."""
    return parse_role(name).is_base


def is_released(name: str) -> bool:
    """Return True if a signature by role ``name`` releases a target."""
    return parse_role(name).is_released


def signer_identity(name: str) -> str:
    """Return the human facing signer identity of role ``name``.

    Released roles all map to ``RELEASED_ROLE_NAME``, delegations map to
    their path suffix (``targets/docker/signer`` -> ``docker/signer``) and
    any other name is returned unchanged.
    """
    role = parse_role(name)
    if role.is_released:
        return RELEASED_ROLE_NAME
    if role.identity is not None:
        return role.identity
    return role.name
