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
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
import numpy.typing as npt

from pysolventswap.classes import antoine_method
from pysolventswap.validate import validate_methods
from pysolventswap.shared_fns import convert_to_numpy, process_output, check_positive


@dataclass(frozen=True)
class AntoineSegment:
    """ One Antoine vapor pressure correlation, valid over [tmin, tmax]
        log10(Psat/bar) = a - b / (T/K + c)

        a, b, c: Regression coefficients (NIST Webbook convention, bar & K)
        tmin: Lower validity temperature (K)
        tmax: Upper validity temperature (K)
    """
    a: float
    b: float
    c: float
    tmin: float
    tmax: float

    def __post_init__(self):
        for name in ('a', 'b', 'c', 'tmin', 'tmax'):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"Antoine coefficient {name} must be finite")
        if not self.tmin < self.tmax:
            raise ValueError(f"Antoine segment requires tmin < tmax, got [{self.tmin}, {self.tmax}]")

    @property
    def width(self) -> float:
        return self.tmax - self.tmin

    def contains(self, tk: float) -> bool:
        return self.tmin <= tk <= self.tmax

    def psat(self, tk: float) -> float:
        return 10.0 ** (self.a - self.b / (tk + self.c))

    def tsat(self, p_bar: float) -> float:
        if p_bar <= 0:
            raise ValueError(f"p_bar must be > 0, got {p_bar}")
        denom = self.a - math.log10(p_bar)
        if denom <= 0:
            raise ValueError(f"Antoine segment (a = {self.a}) cannot be inverted at {p_bar} bar: requires log10(P) < a")
        return self.b / denom - self.c


def choose_segment(segments: Sequence[AntoineSegment], tk: float, amethod: antoine_method = antoine_method.WIDEST) -> AntoineSegment:
    """ Returns the Antoine segment to use at temperature tk (K)
        amethod: Selection policy among the segments whose range holds tk
                 'WIDEST' Widest validity range, else the first segment (extrapolation)
                 'NARROWEST' Narrowest validity range, else the first segment (extrapolation)
                 'STRICT' Widest validity range, raising ValueError if no segment holds tk
                 Defaults to 'WIDEST'
        Ties resolve to the earliest segment in the sequence
    """
    if len(segments) == 0:
        raise ValueError("At least one Antoine segment is required")
    amethod = validate_methods(["amethod"], [amethod])

    chosen = None
    for seg in segments:
        if not seg.contains(tk):
            continue
        if chosen is None:
            chosen = seg
        elif amethod == antoine_method.NARROWEST and seg.width < chosen.width:
            chosen = seg
        elif amethod != antoine_method.NARROWEST and seg.width > chosen.width:
            chosen = seg

    if chosen is None:
        if amethod == antoine_method.STRICT:
            lo, hi = segment_coverage(segments)
            raise ValueError(f"Temperature {tk} K is outside all Antoine segments (coverage {lo} - {hi} K)")
        chosen = segments[0]
    return chosen


def segment_coverage(segments: Sequence[AntoineSegment]) -> Tuple[float, float]:
    """ Returns (tmin, tmax) spanned by a set of Antoine segments (K)"""
    if len(segments) == 0:
        raise ValueError("At least one Antoine segment is required")
    return min(s.tmin for s in segments), max(s.tmax for s in segments)


def saturation_pressure(tk: npt.ArrayLike, segments: Sequence[AntoineSegment], amethod: antoine_method = antoine_method.WIDEST) -> np.ndarray:
    """ Returns pure component saturation pressure (bar) from Antoine segments
        tk: Temperature (K). Float or array
        segments: Sequence of AntoineSegment for the component
        amethod: Segment selection policy, see choose_segment. Defaults to 'WIDEST'
    """
    if len(segments) == 0:
        raise ValueError("At least one Antoine segment is required")
    amethod = validate_methods(["amethod"], [amethod])
    tks = convert_to_numpy(tk)
    psats = np.array([choose_segment(segments, t, amethod).psat(t) for t in tks])
    return process_output(psats)


def saturation_temperature(p_bar: npt.ArrayLike, segments: Sequence[AntoineSegment]) -> np.ndarray:
    """ Returns pure component boiling temperature (K) at pressure p_bar (bar)
        Inverts each segment, widest first, and returns the first result lying inside
        its own validity range. Falls back to the first segment (extrapolation)
    """
    if len(segments) == 0:
        raise ValueError("At least one Antoine segment is required")
    check_positive("p_bar", p_bar)
    by_width = sorted(segments, key=lambda s: -s.width)
    tsats = []
    for p in convert_to_numpy(p_bar):
        for seg in by_width:
            try:
                t = seg.tsat(p)
            except ValueError:
                continue
            if seg.contains(t):
                break
        else:
            t = segments[0].tsat(p)
        tsats.append(t)
    return process_output(np.array(tsats))
