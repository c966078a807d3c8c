"""
Boundary curves of the IAPWS-IF97 regions.

    - ps_T, Ts_p: saturation line (region 4), eqs. 30 and 31
    - B23_T_p, B23_p_T: region 2 / region 3 boundary, eqs. 5 and 6
    - R2_Bbc_h_p: subregion 2b / 2c boundary of the backward equations, eq. 21
    - B34_ps_h_eq, B34_ps_s_eq: saturation pressure along the region 3 / 4
      boundary as a function of h or s (IAPWS supplementary release, 2004)

Units: T in K, p in MPa, h in kJ/kg, s in kJ/(kg.K)
"""

import numpy as np

from pysteamtoolbox.constants import TC, PC, T_TRIPLE, P_SAT_MIN, P_MAX, T_R1_MAX, P_2BC_MIN, H_B34_MIN, H_B34_MAX, S_B34_MIN, S_B34_MAX
from pysteamtoolbox.shared_fns import ijn_table, poly_sum
from pysteamtoolbox.validate import check_range

# Table 1, eqs. 5 and 6
_B23 = np.array([0.34805185628969e3, -0.11671859879975e1, 0.10192970039326e-2, 0.57254459862746e3, 0.13918839778870e2])
_P_B23_LO = _B23[0] + _B23[1] * T_R1_MAX + _B23[2] * T_R1_MAX ** 2  # ~16.5292 MPa at 623.15 K
_T_B23_HI = _B23[3] + np.sqrt((P_MAX - _B23[4]) / _B23[2])  # ~863.15 K at 100 MPa

# Table 19, eqs. 20 and 21
_B2BC = np.array([0.90584278514723e3, -0.67955786399241, 0.12809002730136e-3, 0.26526571908428e4, 0.45257578905948e1])

# Table 34, eqs. 30 and 31
_SAT = np.array([
    0.11670521452767e4, -0.72421316703206e6, -0.17073846940092e2,
    0.12020824702470e5, -0.32325550322333e7, 0.14915108613530e2,
    -0.48232657361591e4, 0.40511340542057e6, -0.23855557567849,
    0.65017534844798e3,
])

# Saturation pressure on the 3/4 boundary from enthalpy, Table 17 of the supplementary release
_B34_H_I, _B34_H_J, _B34_H_N = ijn_table([
    (0, 0, 0.600073641753024),
    (1, 1, -0.936203654849857e1),
    (1, 3, 0.246590798594147e2),
    (1, 4, -0.107014222858224e3),
    (1, 36, -0.915821315805768e14),
    (5, 3, -0.862332011700662e4),
    (7, 0, -0.235837344740032e2),
    (8, 24, 0.252304969384128e18),
    (14, 16, -0.389718771997719e19),
    (20, 16, -0.333775713645296e23),
    (22, 3, 0.356499469636328e11),
    (24, 18, -0.148547544720641e27),
    (28, 8, 0.330611514838798e19),
    (36, 24, 0.813641294467829e38),
])

# Saturation pressure on the 3/4 boundary from entropy, Table 19 of the supplementary release
_B34_S_I, _B34_S_J, _B34_S_N = ijn_table([
    (0, 0, 0.639767553612785),
    (1, 1, -0.129727445396014e2),
    (1, 32, -0.224595125848403e16),
    (4, 7, 0.177466741801846e7),
    (12, 4, 0.717079349571538e10),
    (12, 14, -0.378829107169011e18),
    (16, 36, -0.955586736431328e35),
    (24, 10, 0.187269814676188e24),
    (28, 0, 0.119254746466473e12),
    (32, 18, 0.110649277244882e37),
])


def ps_T(T: float) -> float:
    """ Saturation pressure (MPa) from temperature (K), valid 273.15 - 647.096 K """
    check_range('ps_T', 'T', T, T_TRIPLE, TC)
    theta = T + _SAT[8] / (T - _SAT[9])
    A = theta ** 2 + _SAT[0] * theta + _SAT[1]
    B = _SAT[2] * theta ** 2 + _SAT[3] * theta + _SAT[4]
    C = _SAT[5] * theta ** 2 + _SAT[6] * theta + _SAT[7]
    return float((2 * C / (-B + np.sqrt(B ** 2 - 4 * A * C))) ** 4)


def Ts_p(p: float) -> float:
    """ Saturation temperature (K) from pressure (MPa), valid 611.2127 Pa - 22.064 MPa """
    check_range('Ts_p', 'p', p, P_SAT_MIN, PC)
    beta = p ** 0.25
    E = beta ** 2 + _SAT[2] * beta + _SAT[5]
    F = _SAT[0] * beta ** 2 + _SAT[3] * beta + _SAT[6]
    G = _SAT[1] * beta ** 2 + _SAT[4] * beta + _SAT[7]
    D = 2 * G / (-F - np.sqrt(F ** 2 - 4 * E * G))
    return float((_SAT[9] + D - np.sqrt((_SAT[9] + D) ** 2 - 4 * (_SAT[8] + _SAT[9] * D))) / 2)


def B23_T_p(p: float) -> float:
    """ Temperature (K) on the region 2 / 3 boundary for pressure p (MPa), 16.5292 - 100 MPa """
    check_range('B23_T_p', 'p', p, _P_B23_LO, P_MAX)
    return float(_B23[3] + np.sqrt((p - _B23[4]) / _B23[2]))


def B23_p_T(T: float) -> float:
    """ Pressure (MPa) on the region 2 / 3 boundary for temperature T (K), 623.15 - 863.15 K """
    check_range('B23_p_T', 'T', T, T_R1_MAX, _T_B23_HI)
    return float(_B23[0] + _B23[1] * T + _B23[2] * T ** 2)


def R2_Bbc_h_p(p: float) -> float:
    """ Enthalpy (kJ/kg) on the subregion 2b / 2c boundary for pressure p (MPa) """
    check_range('R2_Bbc_h_p', 'p', p, P_2BC_MIN, P_MAX)
    return float(_B2BC[3] + np.sqrt((p - _B2BC[4]) / _B2BC[2]))


def B34_ps_h_eq(h: float) -> float:
    """ Saturation pressure (MPa) on the region 3 / 4 boundary from enthalpy (kJ/kg) """
    check_range('B34_ps_h_eq', 'h', h, H_B34_MIN, H_B34_MAX)
    eta = h / 2600
    return 22 * poly_sum(_B34_H_N, eta - 1.02, _B34_H_I, eta - 0.608, _B34_H_J)


def B34_ps_s_eq(s: float) -> float:
    """ Saturation pressure (MPa) on the region 3 / 4 boundary from entropy (kJ/(kg.K)) """
    check_range('B34_ps_s_eq', 's', s, S_B34_MIN, S_B34_MAX)
    sigma = s / 5.2
    return 22 * poly_sum(_B34_S_N, sigma - 1.03, _B34_S_I, sigma - 0.699, _B34_S_J)
