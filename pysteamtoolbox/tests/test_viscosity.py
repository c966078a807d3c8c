#!/usr/bin/env python3
"""
Validation tests for the dynamic viscosity correlation.
Run with: python3 -m pytest pysteamtoolbox/tests/ -v
Or standalone: python3 pysteamtoolbox/tests/test_viscosity.py
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pysteamtoolbox.viscosity import eta_vT, eta_pT, viscosity_ideal, viscosity_second
from pysteamtoolbox.classes import DomainError

RTOL = 1e-6

# Huber et al. (2009) Table 4, mu2 = 1 at these states: (T K, rho kg/m3, mu uPa.s)
REFERENCE = [
    (298.15,  998.0,  889.735100),
    (298.15,  1200.0, 1437.649467),
    (373.15,  1000.0, 307.883622),
    (433.15,  1.0,    14.538324),
    (873.15,  1.0,    32.619287),
    (873.15,  100.0,  35.802262),
    (873.15,  600.0,  77.430195),
    (1173.15, 1.0,    44.217245),
    (1173.15, 100.0,  47.640433),
    (1173.15, 400.0,  64.154608),
]

def test_reference_values():
    for T, rho, mu_ref in REFERENCE:
        mu = eta_vT(1 / rho, T) * 1e6
        assert abs(mu - mu_ref) / mu_ref < RTOL, f"eta_vT at T={T}, rho={rho}: {mu} uPa.s, expected {mu_ref}"

def test_dilute_limit():
    # At vanishing density the residual factor tends to 1
    theta = 873.15 / 647.096
    assert abs(viscosity_second(0.0, theta) - 1.0) < 1e-12
    mu = eta_vT(1e9, 873.15) * 1e6
    assert abs(mu - viscosity_ideal(theta)) < 1e-6

def test_liquid_at_atmospheric_pressure():
    mu = eta_pT(0.1, 298.15)
    assert abs(mu - 890e-6) / 890e-6 < 0.01, f"eta_pT(0.1, 298.15) = {mu} Pa.s"

def test_liquid_viscosity_falls_with_temperature():
    mus = [eta_pT(1.0, T) for T in [280, 300, 350, 400, 450]]
    assert all(b < a for a, b in zip(mus, mus[1:]))

def test_steam_viscosity_rises_with_temperature():
    mus = [eta_pT(0.1, T) for T in [400, 600, 800, 1000, 1500]]
    assert all(b > a for a, b in zip(mus, mus[1:]))

def test_non_positive_inputs_raise():
    for v, T in [(-1.0, 300.0), (0.001, 0.0), (0.0, 300.0)]:
        try:
            eta_vT(v, T)
            assert False, f"eta_vT({v}, {T}) should have raised DomainError"
        except DomainError as e:
            assert e.func == 'eta_vT'

def test_region3_state_raises():
    try:
        eta_pT(25.0, 650.0)
        assert False, "Should have raised DomainError"
    except DomainError:
        pass


if __name__ == '__main__':
    for name, func in sorted(globals().items()):
        if name.startswith('test_') and callable(func):
            func()
            print(f"PASS: {name}")
