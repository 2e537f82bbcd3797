#!/usr/bin/env python3
"""
Validation tests for antoine module.
Run with: python3 -m pytest pysolventswap/tests/ -v
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pysolventswap.antoine as antoine
from pysolventswap.antoine import AntoineSegment
from pysolventswap.classes import antoine_method

# Acetone, NIST Webbook
ACETONE = [AntoineSegment(4.42448, 1312.253, -32.445, 259.16, 507.60)]
# Methanol, NIST Webbook (two overlapping ranges)
METHANOL = [
    AntoineSegment(5.20409, 1581.341, -33.50, 288.10, 356.83),
    AntoineSegment(5.15853, 1569.613, -34.846, 353.50, 512.63),
]

def test_psat_formula():
    """Single segment evaluation matches log10(P) = A - B/(T+C)"""
    p = antoine.saturation_pressure(300.0, ACETONE)
    expected = 10 ** (4.42448 - 1312.253 / (300.0 - 32.445))
    assert isinstance(p, float)
    assert abs(p - expected) < 1e-12

def test_acetone_normal_boiling_point():
    """Acetone Psat at its normal boiling point should be ~1 atm"""
    p = antoine.saturation_pressure(329.2, ACETONE)
    assert abs(p - 1.01325) < 0.02, f"Psat={p} bar at 329.2 K"

def test_psat_monotonic_within_segment():
    """Psat increases with temperature inside a segment"""
    for segs, lo, hi in [(ACETONE, 260, 505), (METHANOL[:1], 289, 356)]:
        t = np.linspace(lo, hi, 60)
        p = antoine.saturation_pressure(t, segs)
        assert isinstance(p, np.ndarray)
        assert len(p) == len(t)
        assert np.all(np.diff(p) > 0)

def test_widest_segment_chosen_in_overlap():
    """Inside the overlap, WIDEST picks the broader methanol range"""
    seg = antoine.choose_segment(METHANOL, 355.0)
    assert seg is METHANOL[1]
    seg = antoine.choose_segment(METHANOL, 355.0, 'NARROWEST')
    assert seg is METHANOL[0]

def test_single_covering_segment():
    assert antoine.choose_segment(METHANOL, 300.0) is METHANOL[0]
    assert antoine.choose_segment(METHANOL, 400.0, antoine_method.NARROWEST) is METHANOL[1]

def test_out_of_range_falls_back_to_first():
    """Below every range, WIDEST extrapolates with the first segment"""
    assert antoine.choose_segment(METHANOL, 250.0) is METHANOL[0]
    assert antoine.choose_segment(list(reversed(METHANOL)), 250.0) is METHANOL[1]

def test_strict_out_of_range_raises():
    try:
        antoine.choose_segment(METHANOL, 250.0, 'STRICT')
    except ValueError:
        pass
    else:
        raise AssertionError("STRICT should reject temperatures outside all segments")
    assert antoine.choose_segment(METHANOL, 300.0, 'strict') is METHANOL[0]

def test_empty_segments_raise():
    for fn in (lambda: antoine.saturation_pressure(300.0, []),
               lambda: antoine.choose_segment([], 300.0),
               lambda: antoine.segment_coverage([])):
        try:
            fn()
        except ValueError:
            continue
        raise AssertionError("Empty segment list should raise ValueError")

def test_bad_method_name_raises():
    try:
        antoine.saturation_pressure(300.0, ACETONE, amethod='CLOSEST')
    except ValueError:
        return
    raise AssertionError("Unknown method name should raise ValueError")

def test_segment_requires_ordered_range():
    try:
        AntoineSegment(4.0, 1300.0, -30.0, 400.0, 300.0)
    except ValueError:
        return
    raise AssertionError("tmin >= tmax should raise ValueError")

def test_segment_coverage():
    assert antoine.segment_coverage(METHANOL) == (288.10, 512.63)

def test_saturation_temperature_roundtrip():
    """Inverse Antoine recovers the temperature"""
    for t in [300.0, 320.0, 340.0]:
        p = antoine.saturation_pressure(t, METHANOL)
        t_back = antoine.saturation_temperature(p, METHANOL)
        assert abs(t_back - t) < 1e-8, f"T={t} -> P={p} -> T={t_back}"

def test_saturation_temperature_array():
    ts = antoine.saturation_temperature([0.1, 0.266, 1.0], ACETONE)
    assert isinstance(ts, np.ndarray)
    assert np.all(np.diff(ts) > 0)

def test_tsat_at_antoine_pressure_limit():
    """Inverse is undefined once log10(P) reaches a: ValueError, not a division error"""
    seg = AntoineSegment(2.0, 600.0, -100.0, 300.0, 500.0)
    for p in (100.0, 150.0, 0.0, -1.0):
        try:
            seg.tsat(p)
        except ValueError:
            continue
        raise AssertionError(f"Expected ValueError at {p} bar")
    assert abs(seg.tsat(1.0) - 400.0) < 1e-12
    try:
        antoine.saturation_temperature(100.0, [seg])
    except ValueError:
        pass
    else:
        raise AssertionError("Expected ValueError")

def test_saturation_temperature_skips_non_invertible_segment():
    limited = AntoineSegment(2.0, 600.0, -100.0, 100.0, 700.0)
    other = AntoineSegment(4.0, 1300.0, -40.0, 300.0, 700.0)
    # log10(100) = 2: limited cannot be inverted, other gives 1300/2 + 40 K
    assert abs(antoine.saturation_temperature(100.0, [limited, other]) - 690.0) < 1e-9
