# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Released target reports.

A trust source describes a repository as a flat collection of
``SigningAssertion`` objects: "role X signed target Y". A target is
*released* when the canonical ``targets`` role or the ``targets/releases``
delegation signed it. ``match_released_signatures()`` turns the assertions
into one ``SignedTargetReport`` per released target, listing the other
delegations that signed the exact same target.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Set, Tuple

from trustinspect.api.ordering import natural_sorted
from trustinspect.api.roles import is_released, signer_identity

logger = logging.getLogger(__name__)

DEFAULT_HASH_ALGORITHM = "sha256"

# (target name, hex digest)
TargetKey = Tuple[str, str]


@dataclass(frozen=True)
class Target:
    """A signed target.

    *All parameters named below are not just constructor arguments but also
    instance attributes.*

    Args:
        name: Target name, the tag for image repositories.
        hashes: Dictionary of hash algorithm names to raw digests.
    """

    name: str
    hashes: Mapping[str, bytes] = field(default_factory=dict)

    def digest(self, hash_algorithm: str = DEFAULT_HASH_ALGORITHM) -> str:
        """Return the hex digest for ``hash_algorithm``, or an empty string
        if the target has no such hash.
        """
        return self.hashes.get(hash_algorithm, b"").hex()

    def key(self, hash_algorithm: str = DEFAULT_HASH_ALGORITHM) -> TargetKey:
        """Return the identity of the target: two targets are the same
        target iff their keys are equal.
        """
        return self.name, self.digest(hash_algorithm)


@dataclass(frozen=True)
class SigningAssertion:
    """Role ``role`` signed ``target``."""

    role: str
    target: Target


@dataclass(frozen=True)
class SignedTargetReport:
    """A released target and the delegations that also signed it.

    Args:
        tag: Name of the released target.
        digest: Hex digest of the released target.
        signers: Naturally sorted signer identities, excluding the released
            roles themselves.
    """

    tag: str
    digest: str
    signers: Tuple[str, ...] = ()


def match_released_signatures(
    assertions: Iterable[SigningAssertion],
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> List[SignedTargetReport]:
    """Return reports for all released targets in ``assertions``.

    Targets that only delegations signed are not reported. Repeated
    assertions count once. The result is sorted by tag and then by digest,
    so the same tag released with two different digests yields two rows in
    a fixed order.

    Args:
        assertions: Signing assertions of one repository, in any order.
        hash_algorithm: Hash algorithm whose digest identifies a target.
    """
    released: Set[TargetKey] = set()
    delegated: List[Tuple[TargetKey, str]] = []
    for assertion in assertions:
        key = assertion.target.key(hash_algorithm)
        if is_released(assertion.role):
            released.add(key)
        else:
            delegated.append((key, assertion.role))

    signers: Dict[TargetKey, Set[str]] = {key: set() for key in released}
    for key, role in delegated:
        if key in signers:
            signers[key].add(signer_identity(role))

    reports = [
        SignedTargetReport(name, digest, tuple(natural_sorted(identities)))
        for (name, digest), identities in signers.items()
    ]
    reports.sort(key=lambda report: (report.tag, report.digest))

    logger.debug(
        "%d released targets out of %d delegated signatures",
        len(reports),
        len(delegated),
    )
    return reports
