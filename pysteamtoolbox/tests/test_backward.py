#!/usr/bin/env python3
"""
Validation tests for the backward T(p, h) and T(p, s) equations.
Run with: python3 -m pytest pysteamtoolbox/tests/ -v
Or standalone: python3 pysteamtoolbox/tests/test_backward.py
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pysteamtoolbox.backward import T_ph, T_ps
from pysteamtoolbox.forward import h_pT, s_pT
from pysteamtoolbox.boundaries import Ts_p, B23_T_p
from pysteamtoolbox.gibbs import REGION1, REGION2
from pysteamtoolbox.classes import DomainError, region_id, backward_region
from pysteamtoolbox.regions import region_pT, region_ph, region_ps

TOL = 1e-6  # Verification temperatures are quoted to 9 significant figures

# IF97 Tables 7, 24 (p MPa, h kJ/kg, T K)
T_PH_POINTS = [
    (3.0,   500,  0.391798509e3),
    (80.0,  500,  0.378108626e3),
    (80.0,  1500, 0.611041229e3),
    (0.001, 3000, 0.534433241e3),
    (3.0,   3000, 0.575373370e3),
    (3.0,   4000, 0.101077577e4),
    (5.0,   3500, 0.801299102e3),
    (5.0,   4000, 0.101531583e4),
    (25.0,  3500, 0.875279054e3),
    (40.0,  2700, 0.743056411e3),
    (60.0,  2700, 0.791137067e3),
    (60.0,  3200, 0.882756860e3),
]

# IF97 Tables 9, 29 (p MPa, s kJ/(kg.K), T K)
T_PS_POINTS = [
    (3.0,  0.5,  0.307842258e3),
    (80.0, 0.5,  0.309979785e3),
    (80.0, 3.0,  0.565899909e3),
    (0.1,  7.5,  0.399517097e3),
    (0.1,  8.0,  0.514127081e3),
    (2.5,  8.0,  0.103984917e4),
    (8.0,  6.0,  0.600484040e3),
    (8.0,  7.5,  0.106495556e4),
    (90.0, 6.0,  0.103801126e4),
    (20.0, 5.75, 0.697992849e3),
    (80.0, 5.25, 0.854011484e3),
    (80.0, 5.75, 0.949017998e3),
]

# =============================================================================
# Reference states
# =============================================================================

def test_T_ph_verification_points():
    for p, h, T_ref in T_PH_POINTS:
        T = T_ph(p, h)
        assert abs(T - T_ref) < TOL * T_ref, f"T_ph({p}, {h}) = {T}, expected {T_ref}"

def test_T_ps_verification_points():
    for p, s, T_ref in T_PS_POINTS:
        T = T_ps(p, s)
        assert abs(T - T_ref) < TOL * T_ref, f"T_ps({p}, {s}) = {T}, expected {T_ref}"

# =============================================================================
# Round trips against the forward equations
# =============================================================================

def _region1_states():
    for p in [0.1, 1.0, 10.0, 30.0, 60.0, 100.0]:
        T_hi = min(Ts_p(p) if p < 16.5 else 623.15, 623.15) - 1.0
        for T in np.linspace(275.0, T_hi, 12):
            yield p, T

def _region2_states():
    for p in [0.001, 0.01, 0.1, 1.0, 3.0, 5.0, 10.0, 15.0, 20.0, 40.0, 70.0, 100.0]:
        T_lo = Ts_p(p) if p < 16.5 else B23_T_p(p)
        for T in np.linspace(T_lo + 2.0, 1070.0, 12):
            yield p, T

def test_region1_round_trip_enthalpy():
    for p, T in _region1_states():
        T2 = T_ph(p, REGION1.enthalpy(p, T))
        assert abs(T2 - T) < 0.025, f"Region 1 T_ph round trip at p={p}, T={T} gave {T2}"

def test_region1_round_trip_entropy():
    for p, T in _region1_states():
        T2 = T_ps(p, REGION1.entropy(p, T))
        assert abs(T2 - T) < 0.025, f"Region 1 T_ps round trip at p={p}, T={T} gave {T2}"

def _region2_tolerance(region):
    # Subregion 2c reaches about 20 mK next to the dew and B23 lines, 2a and 2b stay inside 10 mK
    return 0.025 if region == backward_region.R2C else 0.01

def test_region2_round_trip_enthalpy():
    for p, T in _region2_states():
        h = REGION2.enthalpy(p, T)
        T2 = T_ph(p, h)
        tol = _region2_tolerance(region_ph(p, h))
        assert abs(T2 - T) < tol, f"Region 2 T_ph round trip at p={p}, T={T} gave {T2}"

def test_region2_round_trip_entropy():
    for p, T in _region2_states():
        s = REGION2.entropy(p, T)
        T2 = T_ps(p, s)
        tol = _region2_tolerance(region_ps(p, s))
        assert abs(T2 - T) < tol, f"Region 2 T_ps round trip at p={p}, T={T} gave {T2}"

def test_region2a_round_trip_clear_of_saturation():
    for p in [0.001, 0.1, 1.0, 3.0]:
        for T in np.linspace(Ts_p(p) + 20.0, 1070.0, 10):
            assert abs(T_ph(p, REGION2.enthalpy(p, T)) - T) < 0.01
            assert abs(T_ps(p, REGION2.entropy(p, T)) - T) < 0.01

def test_round_trip_below_triple_pressure():
    # region_pT puts these states in region 2, the backward equations must accept them
    p = 0.0005
    for T in [300.0, 400.0, 600.0, 1000.0]:
        assert region_pT(p, T) == region_id.R2
        T2 = T_ph(p, h_pT(p, T))
        T3 = T_ps(p, s_pT(p, T))
        assert abs(T2 - T) < 0.01, f"T_ph round trip at p={p}, T={T} gave {T2}"
        assert abs(T3 - T) < 0.01, f"T_ps round trip at p={p}, T={T} gave {T3}"

def test_forward_and_backward_agree_through_public_api():
    p, T = 3.0, 300.0
    assert abs(T_ph(p, h_pT(p, T)) - T) < 0.025
    assert abs(T_ps(p, s_pT(p, T)) - T) < 0.025

# =============================================================================
# Two phase and saturation
# =============================================================================

def test_two_phase_returns_saturation_temperature():
    for p in [0.01, 0.1, 1.0, 10.0]:
        Ts = Ts_p(p)
        h_mid = 0.5 * (REGION1.enthalpy(p, Ts) + REGION2.enthalpy(p, Ts))
        s_mid = 0.5 * (REGION1.entropy(p, Ts) + REGION2.entropy(p, Ts))
        assert T_ph(p, h_mid) == Ts, f"T_ph in two phase at p={p}"
        assert T_ps(p, s_mid) == Ts, f"T_ps in two phase at p={p}"

def test_region2_result_not_below_saturation():
    for p in [0.01, 0.1, 1.0, 5.0, 10.0, 16.0]:
        Ts = Ts_p(p)
        h_vap = REGION2.enthalpy(p, Ts)
        s_vap = REGION2.entropy(p, Ts)
        assert T_ph(p, h_vap + 1e-6) >= Ts
        assert T_ps(p, s_vap + 1e-9) >= Ts

def test_monotonic_in_enthalpy():
    p = 1.0
    hs = np.linspace(REGION1.enthalpy(p, 280.0), REGION2.enthalpy(p, 1070.0), 200)
    Ts = [T_ph(p, h) for h in hs]
    assert all(b >= a - 0.05 for a, b in zip(Ts, Ts[1:])), "T_ph not monotonic in h"

# =============================================================================
# Errors
# =============================================================================

def test_region3_inputs_raise():
    for func, x in [(T_ph, 2000.0), (T_ps, 4.5)]:
        try:
            func(50.0, x)
            assert False, f"{func.__name__}(50, {x}) should have raised DomainError"
        except DomainError:
            pass

def test_out_of_envelope_inputs_raise():
    for func, p, x in [(T_ph, 120.0, 1000.0), (T_ph, 1.0, 5000.0), (T_ps, 0.0, 7.0), (T_ps, 1e-4, 7.0), (T_ps, 1.0, -1.0)]:
        try:
            func(p, x)
            assert False, f"{func.__name__}({p}, {x}) should have raised DomainError"
        except DomainError:
            pass


if __name__ == '__main__':
    for name, func in sorted(globals().items()):
        if name.startswith('test_') and callable(func):
            func()
            print(f"PASS: {name}")
