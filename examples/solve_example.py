#!/usr/bin/env python3

# Examples of finding roots of scalar functions.
# Written by the nrsolve developers, October 2026.

from math import atan

from nrsolve.solve import (find_root, find_root_brute_force,
                           find_root_default_deriv)


def golden(x):
    """Root at the golden ratio."""
    return x ** 2 - x - 1


def golden_deriv(x):
    return 2 * x - 1


def shifted_atan(x):
    """Newton-Raphson diverges unless started within ~1.39 of x = 10."""
    return atan(x - 10)


def shifted_atan_deriv(x):
    return 1 / (1 + (x - 10) ** 2)


print(f"Golden ratio (analytic derivative) = "
      f"{find_root(1.0, golden, golden_deriv, verbose=True)}\n")
print(f"Golden ratio (numerical derivative) = "
      f"{find_root_default_deriv(1.0, golden)}\n")

# Single start fails, scanning seeds from 0 to 20 succeeds.
print(f"Single start: {find_root(0.0, shifted_atan, shifted_atan_deriv)}\n")
x, res = find_root_brute_force(0.0, [(0.0, 20.0, 1.0)], shifted_atan,
                               shifted_atan_deriv, full_output=True,
                               verbose=True)
print(f"\nBrute force: x = {x} from seed {res.seed} after {res.attempts} "
      f"attempts.")
