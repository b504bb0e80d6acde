from dataclasses import dataclass

# Written by the nrsolve developers, October 2026.


# ======================================================================

# Status codes shared by `RootResults` and `SolverError`.

CONVERGED_RESIDUAL = 0
CONVERGED_STEP = 1
MAXITER_REACHED = 2
SEARCH_EXHAUSTED = 3

FLAG_DETAILS = {
    CONVERGED_RESIDUAL: "Converged on residual.",
    CONVERGED_STEP: "Converged on step size.",
    MAXITER_REACHED: "Reached maxiter.",
    SEARCH_EXHAUSTED: "Exhausted all seed ranges.",
}


# ----------------------------------------------------------------------

@dataclass(frozen=True, kw_only=True)
class RootResults:
    # noinspection PyUnresolvedReferences
    """
    Convergence information returned along with the root when a solver
    is called using ``full_output=True``.

    Parameters
    ----------
    root : float
        Value returned by the solver.  This is `nan` if no root was
        found.

    converged : bool
        `True` if `root` is a converged (or for the brute-force solver,
        an accepted) root.

    flag : int
        Status code:

        - 0: Converged on residual, i.e. ``|f(x)| < tol``.
        - 1: Converged on step size, i.e. ``|Δx| < tol``.
        - 2: Reached `maxiter` without converging.
        - 3: Brute-force search exhausted every seed range.

    details : str
        Description of `flag`.

    iterations : int
        Number of Newton-Raphson iterations performed.  For the
        brute-force solver this is the total over all attempts.

    fevals : int
        Number of evaluations of `f` and `d` combined.

    zero_der : bool
        `True` if the derivative was exactly zero at any iterate.

    seed : float
        Starting point of the attempt that produced `root`.  `nan` if
        the brute-force search was exhausted.

    attempts : int
        Number of Newton-Raphson runs performed.
    """
    root: float
    converged: bool
    flag: int
    details: str
    iterations: int
    fevals: int
    zero_der: bool = False
    seed: float
    attempts: int = 1
