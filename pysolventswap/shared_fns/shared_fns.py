#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pySolventSwap - Binary VLE and Solvent Swap Utilities
              Copyright (C) 2026, pySolventSwap contributors

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.
"""

import math
import numpy as np
import numpy.typing as npt
from typing import Tuple

from pysolventswap.constants import BISECT_MAX_ITER, BISECT_FTOL, BISECT_XTOL

def bisect_solve(args, f, xmin, xmax, ftol=BISECT_FTOL, xtol=BISECT_XTOL, maxiter=BISECT_MAX_ITER) -> Tuple[float, float, int, bool]:
    """ Bisection on a bracket known to contain a sign change of f(args, x)
        Stops once |f(mid)| < ftol or the bracket is narrower than xtol.
        If maxiter is reached first, the last midpoint is returned with converged = False

        Returns (mid_val, err_mid, iterations, converged)
    """
    err_hi = f(args, xmax)
    mid_val, err_mid = xmin, f(args, xmin)
    for iternum in range(1, maxiter + 1):
        mid_val = (xmax + xmin) / 2
        err_mid = f(args, mid_val)
        if abs(err_mid) < ftol or (xmax - xmin) < xtol:
            return mid_val, err_mid, iternum, True
        if (err_hi * err_mid < 0):  # Solution point must be higher than current mid_val case
            xmin = mid_val
        else:
            xmax = mid_val  # Otherwise must be lower than current mid_val case
            err_hi = err_mid
    return mid_val, err_mid, maxiter, False

def convert_to_numpy(input_data):
    # Convert input data to a numpy array ensuring it is always sizeable
    if isinstance(input_data, np.ndarray):
        return input_data
    else:
        # Ensuring even scalars become arrays with one element
        return np.atleast_1d(np.asarray(input_data, dtype=float))

def process_output(input_data):
    # Scalars in, scalars out. Arrays in, arrays out
    if isinstance(input_data, np.ndarray):
        if input_data.size == 1:
            return float(input_data.item())
        else:
            return input_data
    elif isinstance(input_data, list):
        if len(input_data) == 1:
            return input_data[0]
        else:
            return np.array(input_data)
    else:
        return input_data

def check_fraction(name: str, v: npt.ArrayLike, open_lo: bool = False, open_hi: bool = False) -> None:
    """ Raises ValueError unless every value of v lies in [0,1] (optionally open at either end)"""
    arr = np.asarray(v, dtype=float)
    lo_ok = arr > 0 if open_lo else arr >= 0
    hi_ok = arr < 1 if open_hi else arr <= 1
    if not np.all(lo_ok & hi_ok):
        lo = '(' if open_lo else '['
        hi = ')' if open_hi else ']'
        raise ValueError(f"{name} must be in {lo}0,1{hi}, got {v}")

def check_positive(name: str, v: npt.ArrayLike) -> None:
    """ Raises ValueError unless every value of v is finite and > 0"""
    arr = np.asarray(v, dtype=float)
    if not np.all(np.isfinite(arr) & (arr > 0)):
        raise ValueError(f"{name} must be finite and > 0, got {v}")

def clamp01(v: float) -> float:
    if math.isnan(v):
        return v
    return max(0.0, min(1.0, v))
