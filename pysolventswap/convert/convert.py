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

import numpy as np
import numpy.typing as npt

from pysolventswap.shared_fns import check_fraction, check_positive, process_output

# Binary mixture fraction conversions. Fractions refer to component 1; component 2 is the complement
# Densities may be absolute (g/mL) or relative (water = 1), only their ratio matters

def x_to_w(x1: npt.ArrayLike, mw1: float, mw2: float) -> np.ndarray:
    """ Mole fraction -> mass fraction"""
    check_fraction("x1", x1)
    check_positive("mw1", mw1)
    check_positive("mw2", mw2)
    x1 = np.asarray(x1, dtype=float)
    w1 = x1 * mw1 / (x1 * mw1 + (1 - x1) * mw2)
    return process_output(w1)

def w_to_x(w1: npt.ArrayLike, mw1: float, mw2: float) -> np.ndarray:
    """ Mass fraction -> mole fraction"""
    check_fraction("w1", w1)
    check_positive("mw1", mw1)
    check_positive("mw2", mw2)
    w1 = np.asarray(w1, dtype=float)
    a = w1 / mw1
    b = (1 - w1) / mw2
    return process_output(a / (a + b))

def x_to_phi(x1: npt.ArrayLike, mw1: float, mw2: float, rho1: float, rho2: float) -> np.ndarray:
    """ Mole fraction -> volume fraction, assuming additive volumes"""
    check_fraction("x1", x1)
    for name, v in (("mw1", mw1), ("mw2", mw2), ("rho1", rho1), ("rho2", rho2)):
        check_positive(name, v)
    x1 = np.asarray(x1, dtype=float)
    v1 = x1 * (mw1 / rho1)
    v2 = (1 - x1) * (mw2 / rho2)
    return process_output(v1 / (v1 + v2))

def phi_to_x(phi1: npt.ArrayLike, mw1: float, mw2: float, rho1: float, rho2: float) -> np.ndarray:
    """ Volume fraction -> mole fraction, assuming additive volumes"""
    check_fraction("phi1", phi1)
    for name, v in (("mw1", mw1), ("mw2", mw2), ("rho1", rho1), ("rho2", rho2)):
        check_positive(name, v)
    phi1 = np.asarray(phi1, dtype=float)
    a = phi1 / (mw1 / rho1)
    b = (1 - phi1) / (mw2 / rho2)
    return process_output(a / (a + b))

def w_to_phi(w1: npt.ArrayLike, mw1: float, mw2: float, rho1: float, rho2: float) -> np.ndarray:
    """ Mass fraction -> volume fraction, assuming additive volumes"""
    return x_to_phi(w_to_x(w1, mw1, mw2), mw1, mw2, rho1, rho2)

def phi_to_w(phi1: npt.ArrayLike, mw1: float, mw2: float, rho1: float, rho2: float) -> np.ndarray:
    """ Volume fraction -> mass fraction, assuming additive volumes"""
    return x_to_w(phi_to_x(phi1, mw1, mw2, rho1, rho2), mw1, mw2)
