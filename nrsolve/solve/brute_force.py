"""
Multi-start Newton-Raphson.  If the iteration from the primary starting
point does not give an acceptable root, it is re-run from a series of
seeds stepped across one or more ranges until one does.
"""

# Written by the nrsolve developers, October 2026.

from collections.abc import Callable, Iterator, Sequence

import numpy as np

from nrsolve.solve.exception import SolverError
from nrsolve.solve.newton_raphson import (MAX_ERROR, MAX_ITERATIONS,
                                          find_root)
from nrsolve.solve.results import (FLAG_DETAILS, SEARCH_EXHAUSTED,
                                   RootResults)

ACCEPT_ERROR = 1e-3

SeedRange = tuple[float, float, float]


# ======================================================================

def is_good_root(r: float, f: Callable[[float], float],
                 ftol: float = ACCEPT_ERROR) -> bool:
    """
    Returns `True` if `r` is finite and ``|f(r)| < ftol``.  `f` is not
    called if `r` is not finite.
    """
    if not np.isfinite(r):
        return False

    with np.errstate(all='ignore'):
        return bool(abs(f(np.float64(r))) < ftol)


# ----------------------------------------------------------------------

def scan_seeds(ranges: Sequence[SeedRange]) -> Iterator[float]:
    """
    Generate starting points from each ``(min, max, step)`` range in
    turn, i.e. ``min``, ``min + step``, ... while less than ``max``.
    Seeds are found by repeatedly adding `step`.

    Ranges having ``min >= max`` give no seeds.

    Raises
    ------
    ValueError
        If any range is not a ``(min, max, step)`` triple of numbers or
        has ``step <= 0``.  A range giving seeds must also have finite
        ends and a `step` large enough to change every seed in
        ``[min, max)`` when added, so that the scan always ends.  All
        ranges are checked before any seeds are generated.
    """
    checked = []
    for i, rng in enumerate(ranges):
        try:
            x_min, x_max, step = (float(v) for v in rng)
        except (TypeError, ValueError):
            raise ValueError(f"Range {i} must be a (min, max, step) "
                             f"triple of numbers, got {rng!r}.") from None

        if not step > 0:  # Also catches NaN.
            raise ValueError(f"Range {i} requires step > 0, got "
                             f"{step}.")

        if x_min < x_max:
            if not (np.isfinite(x_min) and np.isfinite(x_max)):
                raise ValueError(f"Range {i} requires finite min and max, "
                                 f"got ({x_min}, {x_max}).")

            # Adding step must move the largest magnitude seed.
            x_last = np.nextafter(x_max, x_min)
            ulp = np.spacing(max(abs(x_min), abs(x_last)))
            if not step > 0.5 * ulp:
                raise ValueError(f"Range {i} step = {step} is too small "
                                 f"to advance seeds between {x_min} and "
                                 f"{x_max}.")

        checked.append((x_min, x_max, step))

    return _generate_seeds(checked)


def _generate_seeds(ranges: list[SeedRange]) -> Iterator[float]:
    for x_min, x_max, step in ranges:
        guess = x_min
        while guess < x_max:
            yield guess
            guess += step


# ----------------------------------------------------------------------

def find_root_brute_force(
        start: float, ranges: Sequence[SeedRange],
        f: Callable[[float], float], d: Callable[[float], float], *,
        ftol: float = ACCEPT_ERROR, tol: float = MAX_ERROR,
        maxiter: int = MAX_ITERATIONS, disp: bool = False,
        full_output: bool = False,
        verbose: bool = False) -> float | tuple[float, RootResults]:
    """
    Find a zero of `f` using `find_root` from `start`, falling back to
    a scan of starting points over `ranges` if required.

    A root `r` is accepted only if it is finite and ``|f(r)| < ftol``
    (see `is_good_root`).  The tolerance `ftol` is normally coarser
    than `tol` used inside each Newton-Raphson run.

    The search order is:

    1. `start`.  If this is accepted no scanning is done.
    2. Each range in the order given, with seeds generated by
       `scan_seeds` in increasing order.

    The first accepted root is returned; no attempt is made to choose
    between different roots.

    Examples
    --------
    Equation :math:`y = (x - 1)(x - 4)` has roots at `x` = 1 and `x` =
    4.  Starting exactly at the turning point `x` = 2.5 fails, so the
    scan takes over:

    >>> def f(x): return (x - 1) * (x - 4)
    >>> def df_dx(x): return 2 * x - 5
    >>> round(find_root_brute_force(2.5, [(3.0, 6.0, 1.0)], f, df_dx), 9)
    4.0

    Parameters
    ----------
    start : float
        Primary starting point.
    ranges : Sequence[(float, float, float)]
        Fallback ``(min, max, step)`` ranges of starting points.
    f : Callable[[float], float]
        Function for which a root is required.
    d : Callable[[float], float]
        Derivative of `f`.
    ftol : float, default = 1e-3
        Acceptance threshold on ``|f(r)|``.
    tol, maxiter :
        Passed to `find_root` for each attempt.
    disp : bool, default = False
        If `True`, raise `SolverError` instead of returning `nan` when
        every attempt fails.
    full_output : bool, default = False
        If `True`, return ``(root, RootResults)``.
    verbose : bool, default = False
        If `True`, print a line for each attempt.

    Returns
    -------
    root : float
        Accepted root, or `nan` if all attempts failed.
    results : RootResults
        Only returned if ``full_output=True``.  `iterations` and
        `fevals` are totals over all attempts, with `fevals` including
        the acceptance checks.

    Raises
    ------
    ValueError
        Illegal `ftol` or `ranges` (see `scan_seeds`).  Ranges are
        checked before the first attempt is made.
    SolverError
        If ``disp=True`` and no root was accepted.
    """
    if not ftol > 0:
        raise ValueError("ftol must be greater than 0")

    seeds = scan_seeds(ranges)

    def verbose_print(info):
        if verbose:
            print(info)

    verbose_print(f"Brute-Force Newton-Raphson Root:")
    attempts, iterations, fevals, zero_der = 0, 0, 0, False

    def attempt(x0):
        nonlocal attempts, iterations, fevals, zero_der
        r, res = find_root(x0, f, d, tol=tol, maxiter=maxiter,
                           full_output=True)
        attempts += 1
        iterations += res.iterations
        fevals += res.fevals
        zero_der |= res.zero_der

        good = is_good_root(r, f, ftol)
        if np.isfinite(r):
            fevals += 1

        verbose_print(f"... Attempt {attempts}: x0 = {x0:.6G} -> root = "
                      f"{r:.12G}" + (" (accepted)" if good else ""))
        return (r, res) if good else None

    found = attempt(start)
    seed = start
    if found is None:
        for seed in seeds:
            found = attempt(seed)
            if found is not None:
                break

    if found is not None:
        root, res = found
        verbose_print(f"... Converged.")
        if not full_output:
            return root

        return root, RootResults(root=root, converged=True,
                                 flag=res.flag, details=res.details,
                                 iterations=iterations, fevals=fevals,
                                 zero_der=zero_der, seed=float(seed),
                                 attempts=attempts)

    verbose_print(f"... Failed to find a root.")
    if disp:
        raise SolverError("find_root_brute_force() failed to find a "
                          "root:", flag=SEARCH_EXHAUSTED,
                          details=FLAG_DETAILS[SEARCH_EXHAUSTED],
                          attempts=attempts, iterations=iterations,
                          fevals=fevals)

    root = float('nan')
    if not full_output:
        return root

    return root, RootResults(root=root, converged=False,
                             flag=SEARCH_EXHAUSTED,
                             details=FLAG_DETAILS[SEARCH_EXHAUSTED],
                             iterations=iterations, fevals=fevals,
                             zero_der=zero_der, seed=float('nan'),
                             attempts=attempts)
