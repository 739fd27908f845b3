# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Public API for ``trustinspect.api``."""

from .admin import (
    DelegationKeyMap,
    RoleDefinition,
    build_delegation_key_map,
    format_admin_role,
)
from .exceptions import (
    InvalidReferenceError,
    NoSignaturesError,
    RepositoryError,
    RepositoryUnavailableError,
    RepositoryUninitializedError,
    TrustInspectError,
)
from .ordering import compare_natural, natural_key, natural_sorted
from .roles import (
    BASE_ROLE_NAMES,
    RELEASED_ROLE_NAME,
    RELEASES_ROLE,
    ParsedRole,
    RoleKind,
    is_base_role,
    is_released,
    parse_role,
    signer_identity,
)
from .signatures import (
    DEFAULT_HASH_ALGORITHM,
    SignedTargetReport,
    SigningAssertion,
    Target,
    match_released_signatures,
)

__all__ = [
    "BASE_ROLE_NAMES",
    "DEFAULT_HASH_ALGORITHM",
    "DelegationKeyMap",
    "RELEASED_ROLE_NAME",
    "RELEASES_ROLE",
    InvalidReferenceError.__name__,
    NoSignaturesError.__name__,
    ParsedRole.__name__,
    RepositoryError.__name__,
    RepositoryUnavailableError.__name__,
    RepositoryUninitializedError.__name__,
    RoleDefinition.__name__,
    RoleKind.__name__,
    SignedTargetReport.__name__,
    SigningAssertion.__name__,
    Target.__name__,
    TrustInspectError.__name__,
    build_delegation_key_map.__name__,
    compare_natural.__name__,
    format_admin_role.__name__,
    is_base_role.__name__,
    is_released.__name__,
    match_released_signatures.__name__,
    "natural_key",
    natural_sorted.__name__,
    parse_role.__name__,
    signer_identity.__name__,
]
