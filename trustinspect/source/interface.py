# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Provides an interface for trust metadata retrieval."""

import abc
from dataclasses import dataclass
from typing import Optional, Tuple

from trustinspect.api.admin import RoleDefinition
from trustinspect.api.signatures import SigningAssertion


@dataclass(frozen=True)
class TrustData:
    """Snapshot of the trust metadata of one repository.

    Args:
        assertions: Every (role, target) signature found in the repository.
        roles: Definitions of the top-level roles followed by all delegated
            roles, in delegation walk order.
    """

    assertions: Tuple[SigningAssertion, ...] = ()
    roles: Tuple[RoleDefinition, ...] = ()


class TrustSource(metaclass=abc.ABCMeta):
    """Defines an interface for loading the trust metadata of a repository.

    Implementations resolve all metadata before returning: callers only
    ever see a complete (possibly empty) ``TrustData`` or an exception.
    """

    @abc.abstractmethod
    def get_trust_data(
        self, repository: str, tag: Optional[str] = None
    ) -> TrustData:
        """Load the trust metadata of ``repository``.

        Args:
            repository: Repository name, e.g. ``registry.example/app``.
            tag: ``Optional``; only report assertions on this target name.

        Raises:
            RepositoryUninitializedError: The repository has no trust data.
            RepositoryUnavailableError: The metadata store cannot be reached.
            RepositoryError: The trust metadata is invalid.

        Returns:
            ``TrustData`` of the repository.
        """
        raise NotImplementedError  # pragma: no cover
