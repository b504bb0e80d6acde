"""
Find a zero of a real scalar function using the Newton-Raphson method,
either with a derivative supplied by the caller or with one estimated by
a centred finite difference.

Unlike SciPy's ``newton()``, failure to converge is by default not an
error: the solver returns `nan` and leaves it to the caller to check
the result.  This suits use as an inner step of a larger search (see
`find_root_brute_force`).
"""

# Written by the nrsolve developers, October 2026.

import operator
from collections.abc import Callable

import numpy as np

from nrsolve.solve.exception import SolverError
from nrsolve.solve.results import (CONVERGED_RESIDUAL, CONVERGED_STEP,
                                   FLAG_DETAILS, MAXITER_REACHED,
                                   RootResults)

MAX_ERROR = 1e-9
MAX_ITERATIONS = 50


# ======================================================================

def find_root(start: float, f: Callable[[float], float],
              d: Callable[[float], float], *, tol: float = MAX_ERROR,
              maxiter: int = MAX_ITERATIONS, disp: bool = False,
              full_output: bool = False,
              verbose: bool = False) -> float | tuple[float, RootResults]:
    r"""
    Find a zero of `f` using the Newton-Raphson iteration
    :math:`x_{n+1} = x_n - f(x_n) / f'(x_n)`.

    Two stopping tests are made at each iteration, in order:

    1. Residual: If :math:`|f(x_n)| < tol` then :math:`x_n` is returned.
    2. Step size: If :math:`|f(x_n) / f'(x_n)| < tol` the step is
       applied and :math:`x_{n+1}` is returned without evaluating `f`
       again.

    Examples
    --------
    >>> find_root(0.0, lambda x: x - 5, lambda x: 1.0)
    5.0
    >>> find_root(1.0, lambda x: x ** 2 + 1, lambda x: 2 * x)  # No root.
    nan

    Parameters
    ----------
    start : float
        Starting point.
    f : Callable[[float], float]
        Function for which a root is required.  Called with `float64`
        arguments.
    d : Callable[[float], float]
        Derivative of `f`.
    tol : float, default = 1e-9
        Tolerance applied to both the residual and the step size.
    maxiter : int, default = 50
        Maximum number of iterations.
    disp : bool, default = False
        If `True`, raise `SolverError` on failure instead of returning
        `nan`.
    full_output : bool, default = False
        If `True`, return ``(root, RootResults)``.
    verbose : bool, default = False
        If `True`, print progress statements.

    Returns
    -------
    root : float
        Root found, or `nan` if `maxiter` was reached.
    results : RootResults
        Only returned if ``full_output=True``.

    Raises
    ------
    ValueError
        Illegal `tol` or `maxiter`.
    SolverError
        If ``disp=True`` and no root was found.

    Notes
    -----
    - There is no guard against :math:`f'(x) = 0`.  All arithmetic is
      done in `float64` with floating point errors ignored, so a zero
      derivative produces an infinite step and non-finite iterates that
      run on until `maxiter` is reached.
    - Exceptions raised by `f` or `d` themselves are not caught.
    """
    if tol <= 0:
        raise ValueError("tol too small (%g <= 0)" % tol)

    maxiter = operator.index(maxiter)
    if maxiter < 1:
        raise ValueError("maxiter must be greater than 0")

    def verbose_print(info):
        if verbose:
            print(info)

    verbose_print(f"Newton-Raphson Root:")
    x = np.float64(start)
    fevals, zero_der = 0, False

    def finish(root, flag, its):
        converged = flag in (CONVERGED_RESIDUAL, CONVERGED_STEP)
        if converged:
            verbose_print(f"... Converged.")
        else:
            verbose_print(f"... Failed to converge.")
            if disp:
                raise SolverError("find_root() failed to converge:",
                                  flag=flag, details=FLAG_DETAILS[flag],
                                  x=float(x), iterations=its,
                                  fevals=fevals)

        if not full_output:
            return root

        return root, RootResults(root=root, converged=converged,
                                 flag=flag, details=FLAG_DETAILS[flag],
                                 iterations=its, fevals=fevals,
                                 zero_der=zero_der, seed=float(start))

    with np.errstate(all='ignore'):
        for itr in range(maxiter):
            res = np.float64(f(x))
            fevals += 1

            verbose_print(f"... Iteration {itr + 1}: x = {x:.12G}, "
                          f"f(x) = {res:.5G}")

            if abs(res) < tol:
                return finish(float(x), CONVERGED_RESIDUAL, itr + 1)

            fder = np.float64(d(x))
            fevals += 1
            if fder == 0:
                zero_der = True

            delta = res / fder

            if abs(delta) < tol:
                return finish(float(x - delta), CONVERGED_STEP, itr + 1)

            x -= delta

    return finish(float('nan'), MAXITER_REACHED, maxiter)


# ----------------------------------------------------------------------

def central_diff(f: Callable[[float], float],
                 h: float = MAX_ERROR) -> Callable[[float], float]:
    r"""
    Return a function estimating the derivative of `f` by the centred
    finite difference :math:`f'(x) \approx (f(x + h) - f(x - h)) / 2h`.

    Parameters
    ----------
    f : Callable[[float], float]
        Function to differentiate.
    h : float, default = 1e-9
        Half-width of the difference interval.

    Returns
    -------
    Callable[[float], float]
        Derivative estimate.

    Raises
    ------
    ValueError
        If ``h <= 0``.
    """
    if h <= 0:
        raise ValueError("h must be greater than 0 (got %g)" % h)

    def d(x):
        return (f(x + h) - f(x - h)) / (2.0 * h)

    return d


# ----------------------------------------------------------------------

def find_root_default_deriv(start: float, f: Callable[[float], float], *,
                            h: float = MAX_ERROR,
                            **kwargs) -> float | tuple[float, RootResults]:
    """
    Find a zero of `f` using `find_root` with the derivative estimated
    by `central_diff`.

    Parameters
    ----------
    start : float
        Starting point.
    f : Callable[[float], float]
        Function for which a root is required.
    h : float, default = 1e-9
        Finite difference half-width, see `central_diff`.
    kwargs :
        Passed to `find_root` (`tol`, `maxiter`, `disp`, `full_output`,
        `verbose`).

    Returns
    -------
    As per `find_root`.

    Notes
    -----
    With the default `h` the difference :math:`f(x + h) - f(x - h)`
    is prone to cancellation where `f` is nearly flat or large in
    magnitude.  Increase `h` in these cases.
    """
    return find_root(start, f, central_diff(f, h), **kwargs)
