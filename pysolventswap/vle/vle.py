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

from dataclasses import dataclass

import numpy as np
import pandas as pd
from loguru import logger
from scipy.optimize import brentq

from pysolventswap.classes import antoine_method, bp_method
from pysolventswap.validate import validate_methods
from pysolventswap.shared_fns import bisect_solve, check_fraction, check_positive
from pysolventswap.antoine import choose_segment
from pysolventswap.component import Component, require_segments
from pysolventswap.constants import DEGC2K, BISECT_MAX_ITER, BISECT_FTOL, BISECT_XTOL


@dataclass(frozen=True)
class VaporLiquidResult:
    """Ideal (Raoult) vapor composition and K-values at one T, P, x"""
    y1: float
    y2: float
    k1: float
    k2: float


@dataclass(frozen=True)
class BubblePointResult:
    """ Bubble point of a binary liquid at fixed pressure and composition

        tk: Bubble temperature (K)
        tc: Bubble temperature (deg C)
        y1, y2: Vapor mole fractions
        k1, k2: Equilibrium ratios Psat/P
        converged: False if the root finder ran out of iterations (best effort answer)
        iterations: Root finder iterations used
        residual: x1.Psat1 + x2.Psat2 - P at tk (bar)
    """
    tk: float
    tc: float
    y1: float
    y2: float
    k1: float
    k2: float
    converged: bool = True
    iterations: int = 0
    residual: float = 0.0

    @property
    def vle(self) -> VaporLiquidResult:
        return VaporLiquidResult(self.y1, self.y2, self.k1, self.k2)


def _psat(component, tk, amethod):
    return choose_segment(component.segments, tk, amethod).psat(tk)


def k_ideal(component: Component, tk: float, p_bar: float, amethod: antoine_method = antoine_method.WIDEST) -> float:
    """ Returns ideal equilibrium ratio K = Psat(T)/P
        tk: Temperature (K)
        p_bar: Pressure (bar)
    """
    check_positive("p_bar", p_bar)
    require_segments(component)
    amethod = validate_methods(["amethod"], [amethod])
    return _psat(component, tk, amethod) / p_bar


def vapor_composition(
    comp1: Component,
    comp2: Component,
    tk: float,
    p_bar: float,
    x1: float,
    amethod: antoine_method = antoine_method.WIDEST,
) -> VaporLiquidResult:
    """ Returns vapor composition and K-values of an ideal binary liquid (Raoult's law, gamma = 1)
        tk: Temperature (K)
        p_bar: Pressure (bar)
        x1: Liquid mole fraction of comp1
    """
    check_fraction("x1", x1)
    check_positive("p_bar", p_bar)
    require_segments(comp1)
    require_segments(comp2)
    amethod = validate_methods(["amethod"], [amethod])
    x2 = 1.0 - x1
    k1 = _psat(comp1, tk, amethod) / p_bar
    k2 = _psat(comp2, tk, amethod) / p_bar
    denom = k1 * x1 + k2 * x2
    y1 = k1 * x1 / denom
    y2 = k2 * x2 / denom
    return VaporLiquidResult(y1, y2, k1, k2)


def _bubble_error(args, tk):
    comp1, comp2, x1, p_bar, amethod = args
    return x1 * _psat(comp1, tk, amethod) + (1.0 - x1) * _psat(comp2, tk, amethod) - p_bar


def solve_bubble_point(
    comp1: Component,
    comp2: Component,
    x1: float,
    p_bar: float,
    bpmethod: bp_method = bp_method.BISECT,
    amethod: antoine_method = antoine_method.WIDEST,
) -> BubblePointResult:
    """ Returns the bubble point temperature and vapor composition of an ideal binary liquid
        Solves x1.Psat1(T) + x2.Psat2(T) = P inside the temperature range common to both
        components' Antoine segments

        comp1, comp2: Components, each with at least one Antoine segment
        x1: Liquid mole fraction of comp1 (0 - 1)
        p_bar: Pressure (bar)
        bpmethod: Root finder
                  'BISECT' Bisection, 80 iterations max, |f| < 1e-9 bar or bracket < 1e-6 K
                  'BRENTQ' scipy brentq with xtol = 1e-6 K
                  Defaults to 'BISECT'
        amethod: Antoine segment selection policy. Defaults to 'WIDEST'

        Raises ValueError if the components share no temperature range, or if the
        bubble pressure equation does not change sign across it.
        Running out of iterations is not an error; see BubblePointResult.converged
    """
    check_fraction("x1", x1)
    check_positive("p_bar", p_bar)
    require_segments(comp1)
    require_segments(comp2)
    bpmethod, amethod = validate_methods(["bpmethod", "amethod"], [bpmethod, amethod])

    tlow = max(comp1.tmin, comp2.tmin)
    thigh = min(comp1.tmax, comp2.tmax)
    if tlow >= thigh:
        raise ValueError(
            f"No common Antoine temperature range for {comp1.name} ({comp1.tmin} - {comp1.tmax} K) "
            f"and {comp2.name} ({comp2.tmin} - {comp2.tmax} K)"
        )

    args = (comp1, comp2, x1, p_bar, amethod)
    err_lo = _bubble_error(args, tlow)
    err_hi = _bubble_error(args, thigh)
    if err_lo * err_hi > 0:
        raise ValueError(
            f"Bubble point not found in [{tlow}, {thigh}] K at {p_bar} bar and x1 = {x1}: "
            f"f(tlow) = {err_lo}, f(thigh) = {err_hi}"
        )

    if err_lo == 0:
        tk, err, iters, converged = tlow, err_lo, 0, True
    elif err_hi == 0:
        tk, err, iters, converged = thigh, err_hi, 0, True
    elif bpmethod == bp_method.BRENTQ:
        tk, res = brentq(lambda t: _bubble_error(args, t), tlow, thigh, xtol=BISECT_XTOL,
                         maxiter=BISECT_MAX_ITER, full_output=True, disp=False)
        err, iters, converged = _bubble_error(args, tk), res.iterations, res.converged
    else:
        tk, err, iters, converged = bisect_solve(args, _bubble_error, tlow, thigh,
                                                 BISECT_FTOL, BISECT_XTOL, BISECT_MAX_ITER)

    if not converged:
        logger.warning("Bubble point for {}/{} at x1 = {}, {} bar not converged after {} iterations (residual {} bar)",
                       comp1.name, comp2.name, x1, p_bar, iters, err)
    else:
        logger.debug("Bubble point {}/{} x1 = {} at {} bar: {} K in {} iterations", comp1.name, comp2.name, x1, p_bar, tk, iters)

    vl = vapor_composition(comp1, comp2, tk, p_bar, x1, amethod)
    return BubblePointResult(
        tk=tk,
        tc=tk - DEGC2K,
        y1=vl.y1,
        y2=vl.y2,
        k1=vl.k1,
        k2=vl.k2,
        converged=converged,
        iterations=iters,
        residual=err,
    )


def bubble_curve(
    comp1: Component,
    comp2: Component,
    p_bar: float,
    npoints: int = 21,
    bpmethod: bp_method = bp_method.BISECT,
    amethod: antoine_method = antoine_method.WIDEST,
) -> pd.DataFrame:
    """ Returns a T-x-y table for the binary at fixed pressure
        npoints: Number of evenly spaced x1 values from 0 to 1 (>= 2)
    """
    if npoints < 2:
        raise ValueError("npoints must be >= 2")
    xs = np.linspace(0, 1, npoints)
    bps = [solve_bubble_point(comp1, comp2, x, p_bar, bpmethod, amethod) for x in xs]
    df = pd.DataFrame()
    df["x1"] = xs
    df["y1"] = [bp.y1 for bp in bps]
    df["T (K)"] = [bp.tk for bp in bps]
    df["T (degC)"] = [bp.tc for bp in bps]
    df["K1"] = [bp.k1 for bp in bps]
    df["K2"] = [bp.k2 for bp in bps]
    return df
