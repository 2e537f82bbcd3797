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

from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd
from loguru import logger
from tabulate import tabulate

from pysolventswap.classes import antoine_method, bp_method, swap_status
from pysolventswap.validate import validate_methods
from pysolventswap.shared_fns import check_fraction, check_positive, clamp01
from pysolventswap.component import Component, require_segments
from pysolventswap.convert import x_to_w, w_to_x
from pysolventswap.vle import solve_bubble_point
from pysolventswap.constants import (
    STEPS_DEFAULT, MOLES_EPS, REMOVAL_RTOL,
    REMOVAL_MASS_DEFAULT, TARGET_MASS_DEFAULT, MAX_CYCLES_DEFAULT,
)


def _check_step(name, step):
    if not 0 < step <= 1:
        raise ValueError(f"{name} must satisfy 0 < {name} <= 1, got {step}")


def batch_solvent_swap(
    comp1: Component,
    comp2: Component,
    x1: float,
    p_bar: float,
    removal_fraction: float,
    step_fraction: Optional[float] = None,
    bpmethod: bp_method = bp_method.BISECT,
    amethod: antoine_method = antoine_method.WIDEST,
) -> float:
    """ Returns liquid mole fraction of comp1 left after evaporating part of a batch (mole basis)
        The batch starts as 1 mole of liquid. Each step removes step_fraction moles of vapor in
        equilibrium with the current liquid (bubble point at p_bar); the vapor is discarded

        x1: Initial liquid mole fraction of comp1 (0 < x1 < 1)
        p_bar: Pressure (bar)
        removal_fraction: Fraction of the initial moles to evaporate (0 - 1, exclusive)
        step_fraction: Moles removed per step, as a fraction of the initial moles.
                       Defaults to removal_fraction / 100
    """
    check_fraction("x1", x1, open_lo=True, open_hi=True)
    check_positive("p_bar", p_bar)
    check_fraction("removal_fraction", removal_fraction, open_lo=True, open_hi=True)
    if step_fraction is None:
        step_fraction = removal_fraction / STEPS_DEFAULT
    _check_step("step_fraction", step_fraction)
    require_segments(comp1)
    require_segments(comp2)
    bpmethod, amethod = validate_methods(["bpmethod", "amethod"], [bpmethod, amethod])

    n1, n2 = x1, 1.0 - x1
    removed = 0.0
    steps = 0
    while removed < removal_fraction * (1 - REMOVAL_RTOL):
        ntot = n1 + n2
        if ntot <= MOLES_EPS:
            logger.debug("Batch dry after {} steps", steps)
            break
        bp = solve_bubble_point(comp1, comp2, clamp01(n1 / ntot), p_bar, bpmethod, amethod)
        dn = min(step_fraction, removal_fraction - removed)
        n1 = max(n1 - dn * bp.y1, 0.0)
        n2 = max(n2 - dn * bp.y2, 0.0)
        removed += dn
        steps += 1
        logger.debug("Step {}: T = {:.3f} K, y1 = {:.6f}, removed {:.6f} mol", steps, bp.tk, bp.y1, removed)

    ntot = n1 + n2
    x1_final = clamp01(n1 / ntot) if ntot > 0 else clamp01(x1)
    logger.info("Evaporated {:.4f} mol of {}/{} in {} steps: x1 {:.6f} -> {:.6f}",
                removed, comp1.name, comp2.name, steps, x1, x1_final)
    return x1_final


def batch_solvent_swap_by_mass(
    comp1: Component,
    comp2: Component,
    x1: float,
    p_bar: float,
    removal_mass_fraction: float,
    step_mass_fraction: Optional[float] = None,
    bpmethod: bp_method = bp_method.BISECT,
    amethod: antoine_method = antoine_method.WIDEST,
) -> float:
    """ Returns liquid mole fraction of comp1 left after evaporating part of a batch (mass basis)
        As batch_solvent_swap, but removal target and step size are fractions of the initial
        liquid mass. Each mass step is converted to moles with the vapor molecular weight
        mwvap = y1.mw1 + y2.mw2 at that step

        x1: Initial liquid mole fraction of comp1 (0 - 1). A pure charge stays pure
        p_bar: Pressure (bar)
        removal_mass_fraction: Fraction of the initial mass to evaporate (0 - 1, exclusive)
        step_mass_fraction: Mass removed per step as a fraction of the initial mass.
                            Defaults to removal_mass_fraction / 100
    """
    check_fraction("x1", x1)
    check_positive("p_bar", p_bar)
    check_fraction("removal_mass_fraction", removal_mass_fraction, open_lo=True, open_hi=True)
    if step_mass_fraction is None:
        step_mass_fraction = removal_mass_fraction / STEPS_DEFAULT
    _check_step("step_mass_fraction", step_mass_fraction)
    check_positive(f"{comp1.name} molecular weight", comp1.mw)
    check_positive(f"{comp2.name} molecular weight", comp2.mw)
    require_segments(comp1)
    require_segments(comp2)
    bpmethod, amethod = validate_methods(["bpmethod", "amethod"], [bpmethod, amethod])

    mw1, mw2 = comp1.mw, comp2.mw
    n1, n2 = x1, 1.0 - x1
    mass0 = n1 * mw1 + n2 * mw2
    target = removal_mass_fraction * mass0
    dm_step = step_mass_fraction * mass0
    removed = 0.0
    steps = 0
    while removed < target * (1 - REMOVAL_RTOL):
        ntot = n1 + n2
        if ntot <= MOLES_EPS:
            logger.debug("Batch dry after {} steps", steps)
            break
        bp = solve_bubble_point(comp1, comp2, clamp01(n1 / ntot), p_bar, bpmethod, amethod)
        dm = min(dm_step, target - removed)
        mwvap = bp.y1 * mw1 + bp.y2 * mw2
        dn = dm / mwvap
        n1 = max(n1 - dn * bp.y1, 0.0)
        n2 = max(n2 - dn * bp.y2, 0.0)
        removed += dm
        steps += 1
        logger.debug("Step {}: T = {:.3f} K, y1 = {:.6f}, removed {:.6f} of {:.6f} g", steps, bp.tk, bp.y1, removed, target)

    ntot = n1 + n2
    x1_final = clamp01(n1 / ntot) if ntot > 0 else clamp01(x1)
    logger.info("Evaporated {:.4f} g of {}/{} in {} steps: x1 {:.6f} -> {:.6f}",
                removed, comp1.name, comp2.name, steps, x1, x1_final)
    return x1_final


@dataclass(frozen=True)
class CycleRecord:
    """ State of one evaporation + refill cycle. Fractions refer to the original solvent

        cycle: Cycle number, starting at 1
        w_start: Mass fraction before evaporation
        x_start: Mole fraction before evaporation
        x_residual: Mole fraction left after evaporation
        w_residual: Mass fraction left after evaporation
        w_refill: Mass fraction after topping up with the new solvent
        t_start: Bubble temperature at the start of evaporation (K)
        t_end: Bubble temperature at the end of evaporation (K)
    """
    cycle: int
    w_start: float
    x_start: float
    x_residual: float
    w_residual: float
    w_refill: float
    t_start: float
    t_end: float


@dataclass
class SwapReport:
    """ Result of a solvent swap simulation"""
    solvent_a: str
    solvent_b: str
    p_bar: float
    removal_mass_fraction: float
    target_mass_fraction: float
    cycles: List[CycleRecord] = field(default_factory=list)
    status: swap_status = swap_status.MAX_CYCLES

    @property
    def converged(self) -> bool:
        return self.status == swap_status.TARGET_REACHED

    @property
    def final_mass_fraction(self) -> float:
        return self.cycles[-1].w_refill

    @property
    def ncycles(self) -> int:
        return len(self.cycles)

    def to_dataframe(self) -> pd.DataFrame:
        df = pd.DataFrame()
        df["Cycle"] = [c.cycle for c in self.cycles]
        df["w start"] = [c.w_start for c in self.cycles]
        df["x start"] = [c.x_start for c in self.cycles]
        df["T start (K)"] = [c.t_start for c in self.cycles]
        df["T end (K)"] = [c.t_end for c in self.cycles]
        df["x residual"] = [c.x_residual for c in self.cycles]
        df["w residual"] = [c.w_residual for c in self.cycles]
        df["w refill"] = [c.w_refill for c in self.cycles]
        return df

    def table(self) -> str:
        headers = ["Cycle", "w start", "x start", "T start (K)", "T end (K)", "x residual", "w residual", "w refill"]
        body = tabulate(self.to_dataframe(), headers, showindex=False, floatfmt=".5f")
        verdict = "Target reached" if self.converged else "Target NOT reached"
        return (f"{self.solvent_a} -> {self.solvent_b} at {self.p_bar} bar, "
                f"{self.removal_mass_fraction:.0%} evaporated per cycle\n"
                f"{body}\n{verdict}: w = {self.final_mass_fraction:.5f} "
                f"(target {self.target_mass_fraction}) after {self.ncycles} cycle(s)")

    def print_report(self) -> None:
        print(self.table())


def run_cycles(
    solvent_a: Component,
    solvent_b: Component,
    p_bar: float,
    removal_mass_fraction: float = REMOVAL_MASS_DEFAULT,
    target_mass_fraction: float = TARGET_MASS_DEFAULT,
    max_cycles: int = MAX_CYCLES_DEFAULT,
    w_initial: float = 1.0,
    step_mass_fraction: Optional[float] = None,
    bpmethod: bp_method = bp_method.BISECT,
    amethod: antoine_method = antoine_method.WIDEST,
) -> SwapReport:
    """ Simulates a put-and-take solvent swap from solvent_a to solvent_b
        Each cycle evaporates removal_mass_fraction of the batch mass (vapor discarded) and
        refills with the same mass of pure solvent_b, so that
        w_refill = w_residual * (1 - removal_mass_fraction)
        Stops once w_refill < target_mass_fraction, or after max_cycles

        p_bar: Evaporation pressure (bar)
        removal_mass_fraction: Mass fraction evaporated per cycle. Defaults to 0.80
        target_mass_fraction: Mass fraction of solvent_a to get below. Defaults to 0.01
        max_cycles: Cycle budget. Defaults to 20
        w_initial: Starting mass fraction of solvent_a. Defaults to 1.0 (pure)
        step_mass_fraction: Evaporation step size, see batch_solvent_swap_by_mass
    """
    check_positive("p_bar", p_bar)
    check_fraction("removal_mass_fraction", removal_mass_fraction, open_lo=True, open_hi=True)
    check_fraction("target_mass_fraction", target_mass_fraction, open_lo=True, open_hi=True)
    check_fraction("w_initial", w_initial)
    if int(max_cycles) != max_cycles or max_cycles < 1:
        raise ValueError(f"max_cycles must be an integer >= 1, got {max_cycles}")
    check_positive(f"{solvent_a.name} molecular weight", solvent_a.mw)
    check_positive(f"{solvent_b.name} molecular weight", solvent_b.mw)
    bpmethod, amethod = validate_methods(["bpmethod", "amethod"], [bpmethod, amethod])

    report = SwapReport(
        solvent_a=solvent_a.name,
        solvent_b=solvent_b.name,
        p_bar=p_bar,
        removal_mass_fraction=removal_mass_fraction,
        target_mass_fraction=target_mass_fraction,
    )
    mw_a, mw_b = solvent_a.mw, solvent_b.mw
    w = w_initial
    for cycle in range(1, int(max_cycles) + 1):
        x = w_to_x(w, mw_a, mw_b)
        t_start = solve_bubble_point(solvent_a, solvent_b, x, p_bar, bpmethod, amethod).tk
        x_res = batch_solvent_swap_by_mass(solvent_a, solvent_b, x, p_bar, removal_mass_fraction,
                                           step_mass_fraction, bpmethod, amethod)
        t_end = solve_bubble_point(solvent_a, solvent_b, x_res, p_bar, bpmethod, amethod).tk
        w_res = x_to_w(x_res, mw_a, mw_b)
        w_next = w_res * (1 - removal_mass_fraction)
        report.cycles.append(CycleRecord(cycle, w, x, x_res, w_res, w_next, t_start, t_end))
        logger.info("Cycle {}: w {:.6f} -> residual {:.6f} -> refill {:.6f}", cycle, w, w_res, w_next)
        w = w_next
        if w < target_mass_fraction:
            report.status = swap_status.TARGET_REACHED
            break

    if not report.converged:
        logger.warning("Solvent swap {} -> {} did not reach w < {} in {} cycles (w = {:.6f})",
                       solvent_a.name, solvent_b.name, target_mass_fraction, max_cycles, w)
    return report
