# Copyright New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""trustinspect: report released tags and signers of TUF trust repositories
"""

import trustinspect.api
import trustinspect.source

__version__ = "0.1.0"
__all__ = [
    trustinspect.api.__name__,
    trustinspect.source.__name__,
]
