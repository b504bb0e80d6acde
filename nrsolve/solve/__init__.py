"""
=============================
Solvers (:mod:`nrsolve.solve`)
=============================

.. currentmodule:: nrsolve.solve

Newton-Raphson root finding for real scalar functions.  By default
failure is signalled by returning `nan`; pass ``disp=True`` to have a
`SolverError` raised instead.

Functions
---------

.. autosummary::
    :toctree:

    central_diff
    find_root
    find_root_brute_force
    find_root_default_deriv
    is_good_root
    scan_seeds

Classes
-------

.. autosummary::
    :toctree:

    RootResults

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError

"""

from .exception import SolverError
from .results import RootResults
from .newton_raphson import (MAX_ERROR, MAX_ITERATIONS, central_diff,
                             find_root, find_root_default_deriv)
from .brute_force import (ACCEPT_ERROR, find_root_brute_force,
                          is_good_root, scan_seeds)
