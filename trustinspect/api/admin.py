# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Signer and administrative key listings built from role definitions."""

from dataclasses import dataclass
from functools import reduce
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from trustinspect.api.roles import RoleKind, parse_role

# Delegation identity -> key IDs of the delegation
DelegationKeyMap = Mapping[str, Tuple[str, ...]]

_ADMIN_LABELS = {
    RoleKind.ROOT: "Root Key",
    RoleKind.TARGETS: "Repository Key",
}


@dataclass(frozen=True)
class RoleDefinition:
    """Name and keys of a role.

    *All parameters named below are not just constructor arguments but also
    instance attributes.*

    Args:
        name: Role name.
        keyids: Key identifiers allowed to sign for the role.
        threshold: Number of keys required, informational only.
    """

    name: str
    keyids: Tuple[str, ...] = ()
    threshold: int = 1


def _add_delegation(
    key_map: Dict[str, Tuple[str, ...]], role: RoleDefinition
) -> Dict[str, Tuple[str, ...]]:
    parsed = parse_role(role.name)
    if (
        parsed.kind is RoleKind.DELEGATION
        and parsed.identity is not None
        and not parsed.is_released
    ):
        key_map[parsed.identity] = tuple(role.keyids)
    return key_map


def build_delegation_key_map(
    roles: Iterable[RoleDefinition],
) -> DelegationKeyMap:
    """Return a read-only mapping of delegation identity to key IDs.

    Top-level roles are administrative and never listed. Neither are the
    ``targets/releases`` role, whose signatures release targets rather than
    co-sign them, and names that are not ``targets/<identity>`` delegations.
    If the same identity appears more than once the last definition in
    ``roles`` wins.
    """
    return MappingProxyType(reduce(_add_delegation, roles, {}))


def format_admin_role(role: RoleDefinition) -> str:
    """Return the administrative key line for ``role``.

    Only the root role ("Root Key") and the canonical targets role
    ("Repository Key") are administrative; an empty string is returned for
    every other role. Key IDs are listed sorted.
    """
    label = _ADMIN_LABELS.get(parse_role(role.name).kind)
    if label is None:
        return ""
    return f"{label}:\t{', '.join(sorted(role.keyids))}\n"
