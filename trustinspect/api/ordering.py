# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Natural alphanumeric ordering of signer identities.

Plain string ordering puts ``signer10`` before ``signer2``. Natural ordering
splits a string into maximal runs of non-digits and digits and compares
digit runs by their integer value instead, so that::

    >>> natural_sorted(["signer10-foo", "signer2-foo", "signer1-foo"])
    ['signer1-foo', 'signer2-foo', 'signer10-foo']
"""

import functools
import re
from typing import Iterable, List

_RUNS = re.compile(r"\d+|\D+")


def compare_natural(first: str, second: str) -> int:
    """Compare two strings in natural order.

    Runs are compared pair by pair. Two digit runs compare by integer value
    (leading zeros are ignored), any other pair compares by code point. The
    first differing pair decides; if all pairs are equal the string with
    fewer runs sorts first. Strings that still compare equal, like
    ``signer01`` and ``signer1``, fall back to plain string order so that
    only identical strings compare equal.

    Returns:
        A negative number, zero or a positive number, like ``cmp()`` did.
    """
    first_runs = _RUNS.findall(first)
    second_runs = _RUNS.findall(second)
    for run_a, run_b in zip(first_runs, second_runs):
        if run_a.isdecimal() and run_b.isdecimal():
            num_a, num_b = int(run_a), int(run_b)
            if num_a != num_b:
                return -1 if num_a < num_b else 1
        elif run_a != run_b:
            return -1 if run_a < run_b else 1

    if len(first_runs) != len(second_runs):
        return len(first_runs) - len(second_runs)
    if first != second:
        return -1 if first < second else 1
    return 0


natural_key = functools.cmp_to_key(compare_natural)


def natural_sorted(values: Iterable[str]) -> List[str]:
    """Return ``values`` as a new list in natural order."""
    return sorted(values, key=natural_key)
