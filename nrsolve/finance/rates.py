from collections.abc import Sequence
from datetime import date

import numpy as np
from numpy.typing import ArrayLike

from nrsolve.solve import RootResults, find_root_brute_force

# Written by the nrsolve developers, October 2026.


# ======================================================================

# Fallback (min, max, step) ranges for the rate of return when the
# iteration from the initial guess fails.
IRR_RANGES = ((-0.99, 1.0, 0.01), (1.0, 10.0, 0.1))

DAYS_PER_YEAR = 365.0


# ----------------------------------------------------------------------

def npv(rate: float, cash_flows: ArrayLike) -> float:
    r"""
    Net present value of cash flows at equally spaced periods
    :math:`t = 0, 1, 2, ...`, i.e. :math:`\sum_t c_t / (1 + r)^t`.
    """
    cf = np.asarray(cash_flows, dtype=float)
    t = np.arange(cf.size)
    return float(np.sum(cf / (1 + rate) ** t))


def npv_deriv(rate: float, cash_flows: ArrayLike) -> float:
    r"""
    Derivative of `npv` with respect to `rate`,
    :math:`\sum_t -t c_t / (1 + r)^{t + 1}`.
    """
    cf = np.asarray(cash_flows, dtype=float)
    t = np.arange(cf.size)
    return float(np.sum(-t * cf / (1 + rate) ** (t + 1)))


def irr(cash_flows: ArrayLike, guess: float = 0.1,
        ranges: Sequence[tuple[float, float, float]] = IRR_RANGES,
        **kwargs) -> float | tuple[float, RootResults]:
    """
    Internal rate of return of cash flows at equally spaced periods,
    being the rate at which `npv` is zero.

    Examples
    --------
    >>> round(irr([-100.0, 60.0, 60.0]), 6)
    0.130662

    Parameters
    ----------
    cash_flows : array_like
        Cash flows, the first being at period zero.  There must be at
        least one positive and one negative value.
    guess : float, default = 0.1
        Initial estimate of the rate.
    ranges : Sequence[(float, float, float)], default = IRR_RANGES
        Fallback ranges of starting rates.
    kwargs :
        Passed to `find_root_brute_force`.

    Returns
    -------
    As per `find_root_brute_force`; `nan` if no rate was found.

    Raises
    ------
    ValueError
        If `cash_flows` does not change sign.
    """
    cf = _check_cash_flows(cash_flows)
    return find_root_brute_force(guess, ranges,
                                 lambda r: npv(r, cf),
                                 lambda r: npv_deriv(r, cf), **kwargs)


# ----------------------------------------------------------------------

def xnpv(rate: float, cash_flows: ArrayLike,
         dates: Sequence[date]) -> float:
    r"""
    Net present value of cash flows occurring on arbitrary `dates`,
    discounted to the first date using a 365 day year, i.e.
    :math:`\sum_i c_i / (1 + r)^{(d_i - d_0) / 365}`.
    """
    cf = np.asarray(cash_flows, dtype=float)
    τ = _year_fractions(dates, cf)
    return float(np.sum(cf / (1 + rate) ** τ))


def xnpv_deriv(rate: float, cash_flows: ArrayLike,
               dates: Sequence[date]) -> float:
    """Derivative of `xnpv` with respect to `rate`."""
    cf = np.asarray(cash_flows, dtype=float)
    τ = _year_fractions(dates, cf)
    return float(np.sum(-τ * cf / (1 + rate) ** (τ + 1)))


def xirr(cash_flows: ArrayLike, dates: Sequence[date], guess: float = 0.1,
         ranges: Sequence[tuple[float, float, float]] = IRR_RANGES,
         **kwargs) -> float | tuple[float, RootResults]:
    """
    Internal rate of return of cash flows occurring on arbitrary
    `dates`, being the rate at which `xnpv` is zero.  This follows the
    usual spreadsheet ``XIRR`` convention of a 365 day year.

    Parameters
    ----------
    cash_flows : array_like
        Cash flows.  There must be at least one positive and one
        negative value.
    dates : Sequence[date]
        Date of each cash flow.  The first date is taken as the
        valuation date.
    guess, ranges, kwargs :
        As per `irr`.

    Returns
    -------
    As per `find_root_brute_force`; `nan` if no rate was found.

    Raises
    ------
    ValueError
        If `cash_flows` does not change sign or `dates` is a different
        length.
    """
    cf = _check_cash_flows(cash_flows)
    _year_fractions(dates, cf)
    return find_root_brute_force(guess, ranges,
                                 lambda r: xnpv(r, cf, dates),
                                 lambda r: xnpv_deriv(r, cf, dates),
                                 **kwargs)


# ----------------------------------------------------------------------

def _check_cash_flows(cash_flows: ArrayLike) -> np.ndarray:
    cf = np.asarray(cash_flows, dtype=float)
    if cf.ndim != 1:
        raise ValueError("cash_flows must be one dimensional.")

    if not (np.any(cf > 0) and np.any(cf < 0)):
        raise ValueError("cash_flows must contain at least one positive "
                         "and one negative value.")
    return cf


def _year_fractions(dates: Sequence[date],
                    cash_flows: ArrayLike) -> np.ndarray:
    if len(dates) != np.size(cash_flows):
        raise ValueError(f"Require one date per cash flow, got "
                         f"{len(dates)} dates and {np.size(cash_flows)} "
                         f"cash flows.")
    return np.array([(d - dates[0]).days for d in dates],
                    dtype=float) / DAYS_PER_YEAR
