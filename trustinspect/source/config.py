# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Configuration options for trust sources."""

from dataclasses import dataclass

from trustinspect.api.signatures import DEFAULT_HASH_ALGORITHM


@dataclass
class SourceConfig:
    """Used to store trust source configuration.

    Args:
        max_delegations: Maximum number of delegated roles visited when
            walking the delegation tree of a repository.
        hash_algorithm: Hash algorithm whose digest identifies a target.
    """

    max_delegations: int = 32
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
