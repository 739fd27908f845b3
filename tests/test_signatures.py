# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Unit tests for api/signatures.py"""

import sys
import unittest
from typing import List

from tests import utils
from trustinspect.api.roles import RELEASES_ROLE, TARGETS
from trustinspect.api.signatures import (
    SignedTargetReport,
    SigningAssertion,
    Target,
    match_released_signatures,
)


def _target(name: str, digest: bytes) -> Target:
    return Target(name, {"sha256": digest})


class TestTarget(unittest.TestCase):
    def test_digest(self) -> None:
        target = Target("tag", {"sha256": b"\x01\xab", "sha512": b"\xff"})
        self.assertEqual(target.digest(), "01ab")
        self.assertEqual(target.digest("sha512"), "ff")
        self.assertEqual(target.digest("md5"), "")

    def test_key(self) -> None:
        first = _target("tag", b"hash")
        same = Target("tag", {"sha256": b"hash", "sha512": b"other"})
        other_digest = _target("tag", b"other-hash")
        self.assertEqual(first.key(), same.key())
        self.assertNotEqual(first.key(), other_digest.key())
        self.assertEqual(first.key(), ("tag", b"hash".hex()))


class TestMatchReleasedSignatures(unittest.TestCase):
    """Tests for match_released_signatures()."""

    def test_match_empty_signatures(self) -> None:
        self.assertEqual(match_released_signatures([]), [])

    def test_match_unreleased_signatures(self) -> None:
        # an "unreleased" target with 3 signatures: no rows
        target = _target("unreleased", b"hash")
        assertions = [
            SigningAssertion(role, target)
            for role in ["targets/a", "targets/b", "targets/c"]
        ]
        self.assertEqual(match_released_signatures(assertions), [])

    def test_match_one_released_single_signature(self) -> None:
        released = _target("released", b"released-hash")
        unreleased = _target("unreleased", b"hash")
        assertions = [SigningAssertion(RELEASES_ROLE, released)]
        for role in ["targets/a", "targets/b", "targets/c"]:
            assertions.append(SigningAssertion(role, unreleased))

        reports = match_released_signatures(assertions)
        self.assertEqual(len(reports), 1)
        # Empty signers because "targets/releases" does not show up
        self.assertEqual(
            reports[0],
            SignedTargetReport("released", b"released-hash".hex(), ()),
        )

    def test_match_one_released_multi_signature(self) -> None:
        released = _target("released", b"released-hash")
        unreleased = _target("unreleased", b"hash")
        assertions = [SigningAssertion(RELEASES_ROLE, released)]
        for role in ["targets/c", "targets/a", "targets/b"]:
            assertions.append(SigningAssertion(role, unreleased))
            assertions.append(SigningAssertion(role, released))

        reports = match_released_signatures(assertions)
        self.assertEqual(len(reports), 1)
        self.assertEqual(reports[0].signers, ("a", "b", "c"))
        self.assertEqual(reports[0].tag, "released")
        self.assertEqual(reports[0].digest, b"released-hash".hex())

    def test_match_multi_released_multi_signature(self) -> None:
        # target-a is signed by targets/a, target-b by targets/a and
        # targets/b, target-c by targets/a, targets/b and targets/c
        target_a = _target("target-a", b"target-a-hash")
        target_b = _target("target-b", b"target-b-hash")
        target_c = _target("target-c", b"target-c-hash")

        assertions: List[SigningAssertion] = []
        for target in [target_c, target_a, target_b]:
            assertions.append(SigningAssertion(RELEASES_ROLE, target))
        for target in [target_a, target_b, target_c]:
            assertions.append(SigningAssertion("targets/a", target))
        for target in [target_b, target_c]:
            assertions.append(SigningAssertion("targets/b", target))
        assertions.append(SigningAssertion("targets/c", target_c))

        reports = match_released_signatures(assertions)

        # output is sorted by tag name
        self.assertEqual(
            reports,
            [
                SignedTargetReport(
                    "target-a", b"target-a-hash".hex(), ("a",)
                ),
                SignedTargetReport(
                    "target-b", b"target-b-hash".hex(), ("a", "b")
                ),
                SignedTargetReport(
                    "target-c", b"target-c-hash".hex(), ("a", "b", "c")
                ),
            ],
        )

    def test_match_released_signature_from_targets(self) -> None:
        released = _target("released", b"released-hash")
        reports = match_released_signatures(
            [SigningAssertion(TARGETS, released)]
        )
        self.assertEqual(len(reports), 1)
        # Empty signers because "targets" does not show up
        self.assertEqual(reports[0].signers, ())

    def test_released_by_both_roles_collapses(self) -> None:
        released = _target("released", b"released-hash")
        assertions = [
            SigningAssertion(TARGETS, released),
            SigningAssertion(RELEASES_ROLE, released),
            SigningAssertion(RELEASES_ROLE, released),
        ]
        reports = match_released_signatures(assertions)
        self.assertEqual(len(reports), 1)
        self.assertEqual(reports[0].signers, ())

    def test_duplicate_delegated_signatures(self) -> None:
        released = _target("released", b"released-hash")
        assertions = [
            SigningAssertion(RELEASES_ROLE, released),
            SigningAssertion("targets/alice", released),
            SigningAssertion("targets/alice", released),
        ]
        reports = match_released_signatures(assertions)
        self.assertEqual(reports[0].signers, ("alice",))

    def test_digest_must_match(self) -> None:
        released = _target("released", b"released-hash")
        same_name = _target("released", b"another-hash")
        assertions = [
            SigningAssertion(RELEASES_ROLE, released),
            SigningAssertion("targets/alice", same_name),
            SigningAssertion("targets/bob", released),
        ]
        reports = match_released_signatures(assertions)
        self.assertEqual(len(reports), 1)
        self.assertEqual(reports[0].signers, ("bob",))

    def test_same_tag_different_digests(self) -> None:
        first = _target("tag", b"\x02")
        second = _target("tag", b"\x01")
        assertions = [
            SigningAssertion(RELEASES_ROLE, first),
            SigningAssertion(TARGETS, second),
            SigningAssertion("targets/alice", first),
        ]
        reports = match_released_signatures(assertions)
        # one row per digest, ordered by digest within the tag
        self.assertEqual(
            reports,
            [
                SignedTargetReport("tag", "01", ()),
                SignedTargetReport("tag", "02", ("alice",)),
            ],
        )

    def test_signers_natural_order(self) -> None:
        released = _target("released", b"released-hash")
        assertions = [SigningAssertion(RELEASES_ROLE, released)]
        for name in ["signer10", "signer2", "signer1", "docker/signer"]:
            assertions.append(SigningAssertion(f"targets/{name}", released))

        reports = match_released_signatures(assertions)
        self.assertEqual(
            reports[0].signers,
            ("docker/signer", "signer1", "signer2", "signer10"),
        )

    def test_signers_differing_in_leading_zeros(self) -> None:
        released = _target("released", b"released-hash")
        for names in [["signer1", "signer01"], ["signer01", "signer1"]]:
            assertions = [SigningAssertion(RELEASES_ROLE, released)]
            for name in names:
                assertions.append(
                    SigningAssertion(f"targets/{name}", released)
                )

            reports = match_released_signatures(assertions)
            self.assertEqual(reports[0].signers, ("signer01", "signer1"))

    def test_released_subrole_is_a_signer(self) -> None:
        released = _target("released", b"released-hash")
        assertions = [
            SigningAssertion(RELEASES_ROLE, released),
            SigningAssertion("targets/releases/subrole", released),
        ]
        reports = match_released_signatures(assertions)
        self.assertEqual(reports[0].signers, ("releases/subrole",))

    def test_other_hash_algorithm(self) -> None:
        released = Target("tag", {"sha256": b"a", "sha512": b"b"})
        signed = Target("tag", {"sha256": b"x", "sha512": b"b"})
        assertions = [
            SigningAssertion(RELEASES_ROLE, released),
            SigningAssertion("targets/alice", signed),
        ]
        self.assertEqual(
            match_released_signatures(assertions)[0].signers, ()
        )
        reports = match_released_signatures(assertions, "sha512")
        self.assertEqual(reports[0].digest, b"b".hex())
        self.assertEqual(reports[0].signers, ("alice",))

    def test_accepts_iterator(self) -> None:
        released = _target("released", b"released-hash")
        assertions = iter(
            [
                SigningAssertion(RELEASES_ROLE, released),
                SigningAssertion("targets/alice", released),
            ]
        )
        reports = match_released_signatures(assertions)
        self.assertEqual(reports[0].signers, ("alice",))


if __name__ == "__main__":
    utils.configure_test_logging(sys.argv)
    unittest.main()
