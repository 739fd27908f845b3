# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Split ``name[:tag]`` repository references.

Only the subset of the image reference grammar needed to locate trust data
is checked: lowercase path components, an optional registry host and an
optional tag. Digest references are not supported.
"""

import re
from dataclasses import dataclass
from typing import Optional

from trustinspect.api.exceptions import InvalidReferenceError

_PATH_COMPONENT = re.compile(r"[a-z0-9]+(?:(?:[._]|__|-+)[a-z0-9]+)*")
_DOMAIN = re.compile(
    r"(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?)"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?)*"
    r"(?::[0-9]+)?"
)
_TAG = re.compile(r"[\w][\w.-]{0,127}")
_HEX_ID = re.compile(r"[a-f0-9]{64}")


@dataclass(frozen=True)
class Reference:
    """A parsed repository reference.

    Args:
        name: Repository name including the registry host, if any.
        tag: ``Optional``; tag within the repository.
    """

    name: str
    tag: Optional[str] = None

    def __str__(self) -> str:
        return self.name if self.tag is None else f"{self.name}:{self.tag}"


def _is_domain(component: str) -> bool:
    return "." in component or ":" in component or component == "localhost"


def parse_reference(remote: str) -> Reference:
    """Parse ``remote`` into a ``Reference``.

    Raises:
        InvalidReferenceError: ``remote`` is not a valid reference.
    """
    if _HEX_ID.fullmatch(remote):
        raise InvalidReferenceError(
            f"invalid repository name ({remote}), cannot specify 64-byte "
            "hexadecimal strings"
        )
    if not remote or "@" in remote:
        raise InvalidReferenceError("invalid reference format")

    name, tag = remote, None
    separator = remote.rfind(":")
    if separator > remote.rfind("/"):
        name, tag = remote[:separator], remote[separator + 1 :]
        if not _TAG.fullmatch(tag):
            raise InvalidReferenceError("invalid reference format")

    components = name.split("/")
    if len(components) > 1 and _is_domain(components[0]):
        if not _DOMAIN.fullmatch(components[0]):
            raise InvalidReferenceError("invalid reference format")
        components = components[1:]

    for component in components:
        if not _PATH_COMPONENT.fullmatch(component):
            if component.lower() != component:
                raise InvalidReferenceError(
                    "invalid reference format: repository name must be "
                    "lowercase"
                )
            raise InvalidReferenceError("invalid reference format")

    return Reference(name, tag)
