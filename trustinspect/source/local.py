# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Trust source reading TUF metadata from a local directory.

Each repository has its own directory below the metadata directory, named
after the repository path (``<metadata_dir>/registry.example/app/``). It
holds the repository's TUF metadata, one file per role, named like the files
``tuf.ngclient`` keeps in its metadata cache: the role name is url-encoded,
so the ``targets/releases`` delegation is stored in
``targets%2Freleases.json``.

A target listed by a delegated role is only reported when every delegation
leading to that role covers the target path, and terminating delegations
stop the search for other signers the way they stop a target lookup in
``tuf.ngclient``.

Signatures are not verified here: the files are expected to have been
verified by whatever client placed them in the metadata directory.
"""

import logging
import os
from typing import Dict, List, Mapping, Optional, Set
from urllib import parse

from tuf.api.metadata import Metadata, Root, TargetFile, Targets
from tuf.api.serialization import DeserializationError

from trustinspect.api import exceptions
from trustinspect.api.admin import RoleDefinition
from trustinspect.api.signatures import SigningAssertion, Target
from trustinspect.source.config import SourceConfig
from trustinspect.source.interface import TrustData, TrustSource

logger = logging.getLogger(__name__)


class LocalTrustSource(TrustSource):
    """Loads ``TrustData`` from TUF metadata files.

    Args:
        metadata_dir: Directory containing one subdirectory per repository.
        config: ``Optional``; ``SourceConfig`` with walk limits and the hash
            algorithm that identifies targets.
    """

    def __init__(
        self, metadata_dir: str, config: Optional[SourceConfig] = None
    ):
        self._dir = metadata_dir
        self.config = config or SourceConfig()

    def get_trust_data(
        self, repository: str, tag: Optional[str] = None
    ) -> TrustData:
        if not os.path.isdir(self._dir):
            raise exceptions.RepositoryUnavailableError(
                f"Metadata directory {self._dir} is not accessible"
            )

        repo_dir = self._repository_dir(repository)
        root = self._load_metadata(repo_dir, Root.type)
        if root is None:
            raise exceptions.RepositoryUninitializedError(
                f"{repository} does not have trust data"
            )
        if not isinstance(root.signed, Root):
            raise exceptions.RepositoryError(
                f"Expected root metadata in {repository}, "
                f"got {root.signed.type}"
            )

        roles = [
            RoleDefinition(name, tuple(role.keyids), role.threshold)
            for name, role in root.signed.roles.items()
        ]
        assertions = self._walk_delegations(repo_dir, repository, tag, roles)

        logger.debug(
            "Loaded %d signatures and %d roles for %s",
            len(assertions),
            len(roles),
            repository,
        )
        return TrustData(tuple(assertions), tuple(roles))

    def _repository_dir(self, repository: str) -> str:
        parts = repository.split("/")
        if any(part in ("", ".", "..") for part in parts):
            raise exceptions.RepositoryError(
                f"Invalid repository name {repository}"
            )
        return os.path.join(self._dir, *parts)

    def _load_metadata(
        self, repo_dir: str, rolename: str
    ) -> Optional[Metadata]:
        """Load metadata of ``rolename``, return None if it does not exist."""
        encoded_name = parse.quote(rolename, "")
        path = os.path.join(repo_dir, f"{encoded_name}.json")
        try:
            with open(path, "rb") as f:
                data = f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise exceptions.RepositoryUnavailableError(
                f"Failed to read {rolename} metadata: {e}"
            ) from e

        try:
            return Metadata.from_bytes(data)
        except DeserializationError as e:
            raise exceptions.RepositoryError(
                f"Failed to load {rolename} metadata"
            ) from e

    def _load_targets(self, repo_dir: str, rolename: str) -> Optional[Targets]:
        md = self._load_metadata(repo_dir, rolename)
        if md is None:
            return None
        if not isinstance(md.signed, Targets):
            raise exceptions.RepositoryError(
                f"Expected targets metadata for {rolename}, "
                f"got {md.signed.type}"
            )
        return md.signed

    def _walk_delegations(
        self,
        repo_dir: str,
        repository: str,
        tag: Optional[str],
        roles: List[RoleDefinition],
    ) -> List[SigningAssertion]:
        """Collect signing assertions from every reachable targets role.

        All targets metadata reachable from the top-level targets role is
        loaded first, appending the definitions of delegated roles to
        ``roles``. A target listed by a role then only counts as a signature
        if that role is trusted for the target path: see ``_trusted_roles``.
        """
        loaded = self._load_delegation_graph(repo_dir, repository, roles)

        if tag is not None:
            paths = {tag}
        else:
            paths = {path for md in loaded.values() for path in md.targets}
        trusted = {path: self._trusted_roles(loaded, path) for path in paths}

        assertions: List[SigningAssertion] = []
        for role_name, targets in loaded.items():
            for target_file in self._select_targets(targets, tag):
                if role_name not in trusted[target_file.path]:
                    logger.debug(
                        "Role %s is not trusted for %s",
                        role_name,
                        target_file.path,
                    )
                    continue
                target = _to_target(target_file, role_name)
                assertions.append(SigningAssertion(role_name, target))

        return assertions

    def _load_delegation_graph(
        self, repo_dir: str, repository: str, roles: List[RoleDefinition]
    ) -> Dict[str, Targets]:
        """Load targets metadata of all roles reachable from targets.

        Preorder depth-first traversal of the delegation graph, visiting each
        role once. Returns the loaded metadata in visiting order.
        """
        loaded: Dict[str, Targets] = {}
        delegations_to_visit = [Targets.type]
        visited_role_names: Set[str] = set()

        while (
            len(visited_role_names) <= self.config.max_delegations
            and len(delegations_to_visit) > 0
        ):
            role_name = delegations_to_visit.pop(-1)

            # Skip any visited current role to prevent cycles.
            if role_name in visited_role_names:
                logger.debug("Skipping visited current role %s", role_name)
                continue
            visited_role_names.add(role_name)

            targets = self._load_targets(repo_dir, role_name)
            if targets is None:
                if role_name == Targets.type:
                    raise exceptions.RepositoryUninitializedError(
                        f"{repository} does not have targets metadata"
                    )
                logger.debug("No metadata for delegated role %s", role_name)
                continue
            loaded[role_name] = targets

            child_roles_to_visit = []
            for child in _child_roles(targets):
                logger.debug("Adding child role %s", child.name)
                roles.append(child)
                child_roles_to_visit.append(child.name)
            # Push children in reverse order of appearance: roles are popped
            # from the end of the list.
            child_roles_to_visit.reverse()
            delegations_to_visit.extend(child_roles_to_visit)

        if len(delegations_to_visit) > 0:
            logger.debug(
                "%d roles left to visit, but allowed at most %d delegations",
                len(delegations_to_visit),
                self.config.max_delegations,
            )

        return loaded

    def _trusted_roles(
        self, loaded: Mapping[str, Targets], target_filepath: str
    ) -> Set[str]:
        """Return names of the roles trusted to sign ``target_filepath``.

        Follows only delegations whose paths (or path hash prefixes) include
        ``target_filepath``, so a role is trusted only if every delegation
        leading to it is. A terminating delegation stops backtracking to the
        roles not visited yet.
        """
        trusted: Set[str] = set()
        delegations_to_visit = [Targets.type]

        while (
            len(trusted) <= self.config.max_delegations
            and len(delegations_to_visit) > 0
        ):
            role_name = delegations_to_visit.pop(-1)
            if role_name in trusted:
                continue
            trusted.add(role_name)

            targets = loaded.get(role_name)
            if targets is None or targets.delegations is None:
                continue

            child_roles_to_visit = []
            for (
                child_name,
                terminating,
            ) in targets.delegations.get_roles_for_target(target_filepath):
                child_roles_to_visit.append(child_name)
                if terminating:
                    logger.debug("Not backtracking to other roles")
                    delegations_to_visit = []
                    break
            child_roles_to_visit.reverse()
            delegations_to_visit.extend(child_roles_to_visit)

        return trusted

    @staticmethod
    def _select_targets(
        targets: Targets, tag: Optional[str]
    ) -> List[TargetFile]:
        if tag is None:
            return list(targets.targets.values())
        target_file = targets.targets.get(tag)
        return [] if target_file is None else [target_file]


def _child_roles(targets: Targets) -> List[RoleDefinition]:
    """Return definitions of the roles ``targets`` delegates to."""
    delegations = targets.delegations
    if delegations is None:
        return []

    if delegations.roles is not None:
        return [
            RoleDefinition(role.name, tuple(role.keyids), role.threshold)
            for role in delegations.roles.values()
        ]

    succinct = delegations.succinct_roles
    if succinct is None:
        return []
    return [
        RoleDefinition(name, tuple(succinct.keyids), succinct.threshold)
        for name in succinct.get_roles()
    ]


def _to_target(target_file: TargetFile, role_name: str) -> Target:
    hashes: Dict[str, bytes] = {}
    for algorithm, hexdigest in target_file.hashes.items():
        try:
            hashes[algorithm] = bytes.fromhex(hexdigest)
        except ValueError as e:
            raise exceptions.RepositoryError(
                f"Invalid {algorithm} hash for {target_file.path} "
                f"in {role_name}"
            ) from e
    return Target(target_file.path, hashes)
