# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""
Define exceptions used by trustinspect.
The names chosen for exception classes should end in 'Error' except where
there is a good reason not to, and provide that reason in those cases.

The report building functions in ``trustinspect.api`` never raise: all of
the errors below come from the collaborators around them (trust sources,
reference parsing and the callers deciding what an empty report means).
"""


class TrustInspectError(Exception):
    """Base class for all trustinspect errors."""


#### Repository errors ####


class RepositoryError(TrustInspectError):
    """An error with a trust repository's state, such as a missing or
    undeserializable metadata file.
    """


class RepositoryUninitializedError(RepositoryError):
    """The trust repository exists but has no trusted root metadata."""


class RepositoryUnavailableError(RepositoryError):
    """The trust metadata store cannot be reached."""


#### Caller errors ####


class NoSignaturesError(TrustInspectError):
    """No signatures could be found for a repository or tag."""


class InvalidReferenceError(TrustInspectError, ValueError):
    """A repository reference could not be parsed."""
