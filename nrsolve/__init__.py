"""
.. This module acts as the top-level API documentation.

.. module: nrsolve

.. autosummary::
    :toctree: generated/

    solve
    finance

"""

__version__ = "0.1.0"

import sys

# Written by the nrsolve developers, October 2026.

# ======================================================================

assert sys.version_info >= (3, 10)
