#!/usr/bin/env python3
"""
Validation tests for the boundary curves.
Run with: python3 -m pytest pysteamtoolbox/tests/ -v
Or standalone: python3 pysteamtoolbox/tests/test_boundaries.py
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pysteamtoolbox.boundaries import ps_T, Ts_p, B23_T_p, B23_p_T, R2_Bbc_h_p, B34_ps_h_eq, B34_ps_s_eq
from pysteamtoolbox.classes import DomainError

RTOL = 1e-8  # IF97 verification values are quoted to 9 significant figures

def rel_err(x, ref):
    return abs(x - ref) / abs(ref)

# =============================================================================
# Saturation line (IF97 Tables 35 and 36)
# =============================================================================

def test_ps_T_verification_points():
    for T, p_ref in [(300, 0.353658941e-2), (500, 0.263889776e1), (600, 0.123443146e2)]:
        p = ps_T(T)
        assert rel_err(p, p_ref) < RTOL, f"ps_T({T}) = {p}, expected {p_ref}"

def test_Ts_p_verification_points():
    for p, T_ref in [(0.1, 0.372755919e3), (1.0, 0.453035632e3), (10.0, 0.584149488e3)]:
        T = Ts_p(p)
        assert abs(T - T_ref) < 2e-6, f"Ts_p({p}) = {T}, expected {T_ref}"

def test_saturation_round_trip():
    T = Ts_p(0.1)
    assert abs(ps_T(T) - 0.1) < 1e-6, f"ps_T(Ts_p(0.1)) = {ps_T(T)}"
    for p in [0.001, 0.05, 1.0, 5.0, 15.0, 22.0]:
        assert rel_err(ps_T(Ts_p(p)), p) < 1e-8, f"Saturation round trip failed at p={p}"

def test_saturation_range_limits():
    assert abs(ps_T(273.15) - 611.212677e-6) < 1e-8
    assert abs(ps_T(647.096) - 22.064) < 1e-4

def test_ps_T_above_critical_raises():
    try:
        ps_T(700)
        assert False, "Should have raised DomainError"
    except DomainError as e:
        assert e.func == 'ps_T'
        assert e.value == 700

def test_Ts_p_outside_range_raises():
    for p in [0.0001, 25.0]:
        try:
            Ts_p(p)
            assert False, f"Ts_p({p}) should have raised DomainError"
        except DomainError as e:
            assert e.func == 'Ts_p'

# =============================================================================
# Region 2 / 3 boundary (IF97 eqs. 5 and 6)
# =============================================================================

def test_B23_verification_point():
    assert abs(B23_p_T(623.15) - 0.165291643e2) < 1e-6, f"B23_p_T(623.15) = {B23_p_T(623.15)}"
    assert abs(B23_T_p(0.165291643e2) - 623.15) < 1e-4, f"B23_T_p(16.5291643) = {B23_T_p(0.165291643e2)}"

def test_B23_round_trip():
    for p in [20.0, 40.0, 60.0, 100.0]:
        assert rel_err(B23_p_T(B23_T_p(p)), p) < 1e-10

def test_B23_T_p_below_saturation_raises():
    try:
        B23_T_p(10.0)
        assert False, "Should have raised DomainError"
    except DomainError as e:
        assert e.func == 'B23_T_p'

# =============================================================================
# Backward subregion 2b / 2c boundary (IF97 eqs. 20 and 21)
# =============================================================================

def test_R2_Bbc_verification_point():
    h = R2_Bbc_h_p(100.0)
    assert abs(h - 0.3516004323e4) < 1e-4, f"R2_Bbc_h_p(100) = {h}"

def test_R2_Bbc_increases_with_pressure():
    hs = [R2_Bbc_h_p(p) for p in [6.6, 10.0, 25.0, 50.0, 100.0]]
    assert all(b > a for a, b in zip(hs, hs[1:])), f"2b/2c boundary enthalpy not increasing: {hs}"

# =============================================================================
# Region 3 / 4 boundary (IAPWS supplementary release on backward equations)
# =============================================================================

def test_B34_ps_h_verification_points():
    for h, p_ref in [(1700, 0.1724175718e2), (2000, 0.2193442957e2), (2400, 0.2018090839e2)]:
        p = B34_ps_h_eq(h)
        assert rel_err(p, p_ref) < 1e-6, f"B34_ps_h_eq({h}) = {p}, expected {p_ref}"

def test_B34_ps_s_verification_points():
    for s, p_ref in [(3.8, 0.1687755057e2), (4.2, 0.2164451789e2), (5.2, 0.1668968482e2)]:
        p = B34_ps_s_eq(s)
        assert rel_err(p, p_ref) < 1e-6, f"B34_ps_s_eq({s}) = {p}, expected {p_ref}"

def test_B34_outside_range_raises():
    try:
        B34_ps_h_eq(3000)
        assert False, "Should have raised DomainError"
    except DomainError as e:
        assert e.func == 'B34_ps_h_eq'


if __name__ == '__main__':
    for name, func in sorted(globals().items()):
        if name.startswith('test_') and callable(func):
            func()
            print(f"PASS: {name}")
