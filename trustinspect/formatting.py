# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Plain text tables for trust reports."""

from typing import IO, Iterable, Mapping, Sequence

from trustinspect.api.admin import RoleDefinition, format_admin_role
from trustinspect.api.ordering import natural_sorted
from trustinspect.api.roles import RELEASED_ROLE_NAME
from trustinspect.api.signatures import SignedTargetReport

# Column layout: every column but the last is padded to the widest cell
# plus PADDING, and is never narrower than MIN_WIDTH.
MIN_WIDTH = 10
PADDING = 3


def write_table(
    out: IO[str], header: Sequence[str], rows: Iterable[Sequence[str]]
) -> None:
    """Write ``header`` and ``rows`` to ``out`` as aligned columns."""
    lines = [list(header), *(list(row) for row in rows)]
    widths = [
        max(max(len(line[i]) for line in lines) + PADDING, MIN_WIDTH)
        for i in range(len(header) - 1)
    ]
    for line in lines:
        cells = [cell.ljust(width) for cell, width in zip(line, widths)]
        out.write("".join(cells) + line[-1] + "\n")


def print_signatures(
    out: IO[str], reports: Iterable[SignedTargetReport]
) -> None:
    """Write the SIGNED TAG / DIGEST / SIGNERS table.

    Targets that only released roles signed show ``(Repo Admin)`` as signer.
    """
    rows = []
    for report in reports:
        signers = ", ".join(report.signers) or f"({RELEASED_ROLE_NAME})"
        rows.append((report.tag, report.digest, signers))
    write_table(out, ("SIGNED TAG", "DIGEST", "SIGNERS"), rows)


def print_signer_info(
    out: IO[str], role_to_keyids: Mapping[str, Sequence[str]]
) -> None:
    """Write the SIGNER / KEYS table, signers in natural order."""
    rows = [
        (signer, ", ".join(role_to_keyids[signer]))
        for signer in natural_sorted(role_to_keyids)
    ]
    write_table(out, ("SIGNER", "KEYS"), rows)


def print_sorted_admin_keys(
    out: IO[str], roles: Iterable[RoleDefinition]
) -> None:
    """Write the administrative key lines: repository key, then root key."""
    for role in sorted(roles, key=lambda r: r.name, reverse=True):
        formatted = format_admin_role(role)
        if formatted:
            out.write(f"  {formatted}")
