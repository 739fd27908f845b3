# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Trust inspection of repositories.

``lookup_trust_info()`` loads the trust data of a repository reference from a
``TrustSource`` and reduces it to released target reports and role lists.
The two presentations built on top of it are the human readable
``pretty_print_trust_info()`` and the JSON document of ``inspect_json()``.
"""

import json
import logging
from dataclasses import dataclass
from typing import IO, Any, Dict, Iterable, List, Tuple

from trustinspect.api import exceptions
from trustinspect.api.admin import RoleDefinition, build_delegation_key_map
from trustinspect.api.ordering import natural_sorted
from trustinspect.api.roles import ROOT, TARGETS, is_base_role
from trustinspect.api.signatures import (
    DEFAULT_HASH_ALGORITHM,
    SignedTargetReport,
    match_released_signatures,
)
from trustinspect.formatting import (
    print_signatures,
    print_signer_info,
    print_sorted_admin_keys,
)
from trustinspect.reference import parse_reference
from trustinspect.source.interface import TrustSource

logger = logging.getLogger(__name__)

_ADMIN_KEY_NAMES = {ROOT: "Root", TARGETS: "Repository"}


@dataclass(frozen=True)
class TrustInfo:
    """Trust information of one repository reference.

    Args:
        name: Repository name, without tag.
        reports: Released target reports.
        admin_roles: Definitions of the top-level roles.
        delegation_roles: Definitions of all other roles.
    """

    name: str
    reports: Tuple[SignedTargetReport, ...]
    admin_roles: Tuple[RoleDefinition, ...]
    delegation_roles: Tuple[RoleDefinition, ...]


def lookup_trust_info(
    source: TrustSource,
    remote: str,
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> TrustInfo:
    """Load and reduce the trust data of ``remote``.

    Args:
        source: Trust source to load metadata from.
        remote: Repository reference, ``name`` or ``name:tag``.
        hash_algorithm: Hash algorithm whose digest identifies a target.

    Raises:
        InvalidReferenceError: ``remote`` cannot be parsed.
        NoSignaturesError: The trust data of ``remote`` cannot be loaded.
    """
    reference = parse_reference(remote)
    try:
        data = source.get_trust_data(reference.name, reference.tag)
    except exceptions.RepositoryError as e:
        logger.debug("Failed to load trust data for %s: %s", remote, e)
        raise exceptions.NoSignaturesError(
            f"no signatures or cannot access {remote}"
        ) from e

    reports = match_released_signatures(data.assertions, hash_algorithm)
    return TrustInfo(
        reference.name,
        tuple(reports),
        tuple(role for role in data.roles if is_base_role(role.name)),
        tuple(role for role in data.roles if not is_base_role(role.name)),
    )


def pretty_print_trust_info(
    source: TrustSource,
    remote: str,
    out: IO[str],
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> None:
    """Write the human readable trust report of ``remote`` to ``out``."""
    info = lookup_trust_info(source, remote, hash_algorithm)

    if info.reports:
        out.write(f"\nSignatures for {remote}\n\n")
        print_signatures(out, info.reports)
    else:
        out.write(f"\nNo signatures for {remote}\n\n")

    # Only list signers if there are any besides the administrative roles
    signer_to_keyids = build_delegation_key_map(info.delegation_roles)
    if signer_to_keyids:
        out.write(f"\nList of signers and their keys for {info.name}\n\n")
        print_signer_info(out, signer_to_keyids)

    out.write(f"\nAdministrative keys for {info.name}\n\n")
    print_sorted_admin_keys(out, info.admin_roles)


def get_repo_trust_info(
    source: TrustSource,
    remote: str,
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> Dict[str, Any]:
    """Return the trust report of ``remote`` as a JSON compatible dict."""
    info = lookup_trust_info(source, remote, hash_algorithm)

    signed_tags = [
        {
            "SignedTag": report.tag,
            "Digest": report.digest,
            "Signers": list(report.signers),
        }
        for report in info.reports
    ]

    signer_to_keyids = build_delegation_key_map(info.delegation_roles)
    signers = [
        {
            "Name": signer,
            "Keys": [{"ID": keyid} for keyid in signer_to_keyids[signer]],
        }
        for signer in natural_sorted(signer_to_keyids)
    ]

    admin_keys = []
    for role in sorted(info.admin_roles, key=lambda r: r.name):
        if role.name in _ADMIN_KEY_NAMES:
            admin_keys.append(
                {
                    "Name": _ADMIN_KEY_NAMES[role.name],
                    "Keys": [{"ID": keyid} for keyid in sorted(role.keyids)],
                }
            )

    return {
        "Name": remote,
        "SignedTags": signed_tags,
        "Signers": signers,
        "AdministrativeKeys": admin_keys,
    }


def inspect_json(
    source: TrustSource,
    remotes: Iterable[str],
    out: IO[str],
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> None:
    """Write the JSON trust reports of all ``remotes`` to ``out``."""
    repos: List[Dict[str, Any]] = [
        get_repo_trust_info(source, remote, hash_algorithm)
        for remote in remotes
    ]
    json.dump(repos, out, indent=4)
    out.write("\n")
