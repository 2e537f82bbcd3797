#!/usr/bin/env python3
"""
Tests for the bundled solvent library.
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pysolventswap.library import solvents
from pysolventswap.component import is_complete
import pysolventswap.antoine as antoine
import pysolventswap.vle as vle

def test_lookup_by_name_key_and_cas():
    by_name = solvents.component('Acetone')
    assert by_name == solvents.component('ACETONE')
    assert by_name == solvents.component('67-64-1')
    assert by_name.cas == '67-64-1'
    assert abs(by_name.mw - 58.08) < 0.01

def test_multi_segment_component():
    meoh = solvents.component('methanol')
    assert len(meoh.segments) == 2
    assert meoh.tmin == 288.10 and meoh.tmax == 512.63

def test_all_components_complete():
    for comp in solvents.components:
        c = solvents.component(comp)
        assert is_complete(c), f"{comp} incomplete"

def test_normal_boiling_points_consistent():
    """Antoine data reproduce the tabulated normal boiling points"""
    for comp in solvents.components:
        c = solvents.component(comp)
        tb = antoine.saturation_temperature(1.01325, c.segments)
        assert abs(tb - solvents.prop(comp, 'Tb_K')) < 0.5, f"{comp}: Tb={tb}"

def test_normal_boiling_points_inside_data_range():
    """Every component can be boiled at 1 atm without extrapolating its Antoine data"""
    for comp in solvents.components:
        c = solvents.component(comp)
        tb = solvents.prop(comp, 'Tb_K')
        assert c.tmin <= tb <= c.tmax, f"{comp}: Tb={tb} outside [{c.tmin}, {c.tmax}]"
        assert any(seg.contains(tb) for seg in c.segments)

def test_pure_bubble_point_at_atmospheric():
    for comp in solvents.components:
        c = solvents.component(comp)
        bp = vle.solve_bubble_point(c, c, 1.0, 1.01325)
        assert bp.converged, comp
        assert abs(bp.tk - solvents.prop(comp, 'Tb_K')) < 0.5, f"{comp}: T={bp.tk}"

def test_water_covers_steam_range():
    water = solvents.component('Water')
    assert water.tmax > 450
    # ~15.5 bar saturated steam at 200 degC
    assert abs(antoine.saturation_pressure(473.15, water.segments) - 15.55) < 0.1

def test_2_propanol_below_atmospheric():
    ipa = solvents.component('2-Propanol')
    bp = vle.solve_bubble_point(ipa, ipa, 1.0, 0.266)
    assert bp.converged
    assert 320.0 < bp.tk < 330.0

def test_prop():
    assert solvents.prop('water', 'mw') == 18.015
    assert solvents.prop('Water', 'CAS') == '7732-18-5'
    assert len(solvents.prop('Water', 'ALL')) == 5

def test_unknown_lookups_raise():
    for fn in (lambda: solvents.component('Unobtainium'), lambda: solvents.prop('Water', 'Colour')):
        try:
            fn()
        except KeyError:
            continue
        raise AssertionError("Expected KeyError")

def test_repository_holds_library():
    repo = solvents.repository()
    assert len(repo) == len(solvents.components)
    assert repo.find('108-88-3').name == 'Toluene'

def test_table():
    assert 'Acetone' in solvents.table()
