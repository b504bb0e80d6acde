"""
================================
Finance (:mod:`nrsolve.finance`)
================================

.. currentmodule:: nrsolve.finance

Present value and rate of return calculations built on the brute-force
Newton-Raphson solver.

.. autosummary::
    :toctree:

    irr
    npv
    npv_deriv
    xirr
    xnpv
    xnpv_deriv

"""

from .rates import (IRR_RANGES, irr, npv, npv_deriv, xirr, xnpv,
                    xnpv_deriv)
