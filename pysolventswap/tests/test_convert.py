#!/usr/bin/env python3
"""
Validation tests for convert module.
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pysolventswap.convert as convert

MW_ACETONE, MW_METHANOL = 58.08, 32.042
RHO_ACETONE, RHO_METHANOL = 0.784, 0.792

def _raises(fn):
    try:
        fn()
    except ValueError:
        return True
    return False

def test_x_to_w_known_value():
    """Equimolar acetone / methanol is ~64.4 wt% acetone"""
    w = convert.x_to_w(0.5, MW_ACETONE, MW_METHANOL)
    assert isinstance(w, float)
    assert abs(w - 58.08 / (58.08 + 32.042)) < 1e-12

def test_endpoints():
    assert convert.x_to_w(0.0, MW_ACETONE, MW_METHANOL) == 0.0
    assert convert.x_to_w(1.0, MW_ACETONE, MW_METHANOL) == 1.0
    assert convert.w_to_x(0.0, MW_ACETONE, MW_METHANOL) == 0.0
    assert convert.w_to_x(1.0, MW_ACETONE, MW_METHANOL) == 1.0
    assert convert.phi_to_x(1.0, MW_ACETONE, MW_METHANOL, RHO_ACETONE, RHO_METHANOL) == 1.0

def test_mass_roundtrip():
    for mw1, mw2 in [(MW_ACETONE, MW_METHANOL), (18.015, 92.138), (50.0, 50.0)]:
        for x in np.linspace(0, 1, 11):
            x_back = convert.w_to_x(convert.x_to_w(x, mw1, mw2), mw1, mw2)
            assert abs(x_back - x) < 1e-12, f"x={x} mw=({mw1},{mw2}) -> {x_back}"

def test_volume_roundtrip():
    for x in np.linspace(0, 1, 11):
        phi = convert.x_to_phi(x, MW_ACETONE, 18.015, RHO_ACETONE, 0.997)
        x_back = convert.phi_to_x(phi, MW_ACETONE, 18.015, RHO_ACETONE, 0.997)
        assert abs(x_back - x) < 1e-12

def test_equal_molar_volumes_volume_equals_mole_fraction():
    phi = convert.x_to_phi(0.3, 40.0, 80.0, 1.0, 2.0)
    assert abs(phi - 0.3) < 1e-12

def test_mass_volume_composition():
    w = 0.4
    phi = convert.w_to_phi(w, MW_ACETONE, MW_METHANOL, RHO_ACETONE, RHO_METHANOL)
    assert abs(convert.phi_to_w(phi, MW_ACETONE, MW_METHANOL, RHO_ACETONE, RHO_METHANOL) - w) < 1e-12
    # Acetone is the less dense liquid, so its volume share exceeds its mass share
    assert phi > w

def test_array_input():
    xs = np.array([0.1, 0.5, 0.9])
    ws = convert.x_to_w(xs, MW_ACETONE, MW_METHANOL)
    assert isinstance(ws, np.ndarray)
    assert len(ws) == 3
    assert np.all(ws > xs)  # Acetone is the heavier molecule

def test_invalid_inputs_rejected():
    assert _raises(lambda: convert.x_to_w(1.2, MW_ACETONE, MW_METHANOL))
    assert _raises(lambda: convert.w_to_x(-0.1, MW_ACETONE, MW_METHANOL))
    assert _raises(lambda: convert.x_to_w(0.5, 0.0, MW_METHANOL))
    assert _raises(lambda: convert.w_to_x(0.5, MW_ACETONE, -1.0))
    assert _raises(lambda: convert.x_to_phi(0.5, MW_ACETONE, MW_METHANOL, 0.0, RHO_METHANOL))
    assert _raises(lambda: convert.phi_to_x(0.5, MW_ACETONE, MW_METHANOL, RHO_ACETONE, float('nan')))
    assert _raises(lambda: convert.x_to_w([0.2, 1.5], MW_ACETONE, MW_METHANOL))
