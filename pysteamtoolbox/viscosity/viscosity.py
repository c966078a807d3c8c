"""
Dynamic viscosity of water and steam.

IAPWS 2008 formulation for industrial use, mu = mu0 * mu1 * mu*, without
the critical enhancement term (mu2 = 1). mu0 is the dilute gas limit and mu1
the residual contribution from density.

Provides:
    - viscosity_ideal(theta): mu0, theta = T / Tc
    - viscosity_second(delta, theta): mu1, delta = rho / rhoc
    - eta_vT(v, T): viscosity in Pa.s from v in m3/kg and T in K
    - eta_pT(p, T): viscosity in Pa.s from p in MPa and T in K

Reference:
    Huber, M.L. et al. (2009). "New International Formulation for the
    Viscosity of H2O." J. Phys. Chem. Ref. Data, 38(2), 101-125.
"""

import numpy as np

from pysteamtoolbox.classes import DomainError
from pysteamtoolbox.constants import TC, RHOC, MU_STAR
from pysteamtoolbox.forward import v_pT
from pysteamtoolbox.shared_fns import ijn_table, poly_sum

# Table 1, H_i scaled by 1/100 so that mu0 = sqrt(theta) / sum( H_i / theta^i )
_H0 = np.array([0.167752e-1, 0.220462e-1, 0.6366564e-2, -0.241605e-2])
_H0_I = np.arange(len(_H0), dtype=float)

# Table 2, rows (density exponent, temperature exponent, H_ij)
_H1_I, _H1_J, _H1_N = ijn_table([
    (0, 0,  0.520094e+00),
    (0, 1,  0.850895e-01),
    (0, 2, -0.108374e+01),
    (0, 3, -0.289555e+00),
    (1, 0,  0.222531e+00),
    (1, 1,  0.999115e+00),
    (1, 2,  0.188797e+01),
    (1, 3,  0.126613e+01),
    (1, 5,  0.120573e+00),
    (2, 0, -0.281378e+00),
    (2, 1, -0.906851e+00),
    (2, 2, -0.772479e+00),
    (2, 3, -0.489837e+00),
    (2, 4, -0.257040e+00),
    (3, 0,  0.161913e+00),
    (3, 1,  0.257399e+00),
    (4, 0, -0.325372e-01),
    (4, 3,  0.698452e-01),
    (5, 4,  0.872102e-02),
    (6, 3, -0.435673e-02),
    (6, 5, -0.593264e-03),
])


def viscosity_ideal(theta):
    return float(np.sqrt(theta) / np.sum(_H0 * theta ** -_H0_I))


def viscosity_second(delta, theta):
    return float(np.exp(delta * poly_sum(_H1_N, delta - 1, _H1_I, 1 / theta - 1, _H1_J)))


def eta_vT(v: float, T: float) -> float:
    """ Dynamic viscosity (Pa.s)
        v: Specific volume (m3/kg)
        T: Temperature (K)
    """
    if not (v > 0 and T > 0):
        raise DomainError(f'eta_vT: v={v} and T={T} must both be positive', func='eta_vT', value=(v, T))
    delta = 1 / (v * RHOC)
    theta = T / TC
    return viscosity_ideal(theta) * viscosity_second(delta, theta) * MU_STAR


def eta_pT(p: float, T: float) -> float:
    """ Dynamic viscosity (Pa.s) at pressure p (MPa) and temperature T (K), region found from region_pT """
    return eta_vT(v_pT(p, T), T)
