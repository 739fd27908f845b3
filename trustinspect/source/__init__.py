# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Trust metadata sources."""

from trustinspect.source.config import SourceConfig
from trustinspect.source.interface import TrustData, TrustSource
from trustinspect.source.local import LocalTrustSource

__all__ = [
    LocalTrustSource.__name__,
    SourceConfig.__name__,
    TrustData.__name__,
    TrustSource.__name__,
]
