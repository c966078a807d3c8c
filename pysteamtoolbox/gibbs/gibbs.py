"""
IAPWS-IF97 dimensionless Gibbs free energy for regions 1, 2 and 5.

Provides:
    - Kernel functions gamma_* (and first derivatives in pi and tau) for each region
    - Region1, Region2, Region5: evaluators returning v, h, s at (p, T)

Region 1 is a single series. Regions 2 and 5 are an ideal-gas part plus a
residual part; the two parts are differentiated separately and only then summed.

Reference:
    Wagner, W. et al. (2000). "The IAPWS Industrial Formulation 1997
    for the Thermodynamic Properties of Water and Steam."
    ASME J. Eng. Gas Turbines Power, 122(1), 150-182.

Units: T in K, p in MPa
"""

from abc import ABC, abstractmethod

import numpy as np

from pysteamtoolbox.classes import region_id
from pysteamtoolbox.constants import R, R1_STAR, R2_STAR, R5_STAR
from pysteamtoolbox.shared_fns import ijn_table

# ============================================================================
# Region 1 coefficients (Table 2 of IAPWS-IF97)
# Each row: (I_i, J_i, n_i)
# ============================================================================

_R1_I, _R1_J, _R1_N = ijn_table([
    (0,  -2,   0.14632971213167e+00),
    (0,  -1,  -0.84548187389013e+00),
    (0,   0,  -0.37563603672040e+01),
    (0,   1,   0.33855169168385e+01),
    (0,   2,  -0.95791963387872e+00),
    (0,   3,   0.15772038513228e+00),
    (0,   4,  -0.16616417199501e-01),
    (0,   5,   0.81214629983568e-03),
    (1,  -9,   0.28319080123804e-03),
    (1,  -7,  -0.60706301565874e-03),
    (1,  -1,  -0.18990068218419e-01),
    (1,   0,  -0.32529748770505e-01),
    (1,   1,  -0.21841717175414e-01),
    (1,   3,  -0.52838357969930e-04),
    (2,  -3,  -0.47184321073267e-03),
    (2,   0,  -0.30001780793026e-03),
    (2,   1,   0.47661393906987e-04),
    (2,   3,  -0.44141845330846e-05),
    (2,  17,  -0.72694996297594e-15),
    (3,  -4,  -0.31679644845054e-04),
    (3,   0,  -0.28270797985312e-05),
    (3,   6,  -0.85205128120103e-09),
    (4,  -5,  -0.22425281908000e-05),
    (4,  -2,  -0.65171222895601e-06),
    (4,  10,  -0.14341729937924e-12),
    (5,  -8,  -0.40516996860117e-06),
    (8, -11,  -0.12734301741682e-08),
    (8,  -6,  -0.17424871230634e-09),
    (21, -29, -0.68762131295531e-18),
    (23, -31,  0.14478307828521e-19),
    (29, -38,  0.26335781662795e-22),
    (30, -39, -0.11947622640071e-22),
    (31, -40,  0.18228094581404e-23),
    (32, -41, -0.93537087292458e-25),
])

# ============================================================================
# Region 2 coefficients
# Ideal-gas part (Table 10): (J0_i, n0_i)
# Residual part (Table 11): (I_i, J_i, n_i)
# ============================================================================

_R2_IDEAL = np.array([
    (0,  -0.96927686500217e+01),
    (1,   0.10086655968018e+02),
    (-5, -0.56087911283020e-02),
    (-4,  0.71452738081455e-01),
    (-3, -0.40710498223928e+00),
    (-2,  0.14240819171444e+01),
    (-1, -0.43839511319450e+01),
    (2,  -0.28408632460772e+00),
    (3,   0.21268463753307e-01),
])
_R2_J0, _R2_N0 = _R2_IDEAL[:, 0], _R2_IDEAL[:, 1]

_R2_I, _R2_J, _R2_N = ijn_table([
    (1,   0, -0.17731742473213e-02),
    (1,   1, -0.17834862292358e-01),
    (1,   2, -0.45996013696365e-01),
    (1,   3, -0.57581259083432e-01),
    (1,   6, -0.50325278727930e-01),
    (2,   1, -0.33032641670203e-04),
    (2,   2, -0.18948987516315e-03),
    (2,   4, -0.39392777243355e-02),
    (2,   7, -0.43797295650573e-01),
    (2,  36, -0.26674547914087e-04),
    (3,   0,  0.20481737692309e-07),
    (3,   1,  0.43870667284435e-06),
    (3,   3, -0.32277677238570e-04),
    (3,   6, -0.15033924542148e-02),
    (3,  35, -0.40668253562649e-01),
    (4,   1, -0.78847309559367e-09),
    (4,   2,  0.12790717852285e-07),
    (4,   3,  0.48225372718507e-06),
    (5,   7,  0.22922076337661e-05),
    (6,   3, -0.16714766451061e-10),
    (6,  16, -0.21171472321355e-02),
    (6,  35, -0.23895741934104e+02),
    (7,   0, -0.59059564324270e-17),
    (7,  11, -0.12621808899101e-05),
    (7,  25, -0.38946842435739e-01),
    (8,   8,  0.11256211360459e-10),
    (8,  36, -0.82311340897998e+01),
    (9,  13,  0.19809712802088e-07),
    (10,  4,  0.10406965210174e-18),
    (10, 10, -0.10234747095929e-12),
    (10, 14, -0.10018179379511e-08),
    (16, 29, -0.80882908646985e-10),
    (16, 50,  0.10693031879409e+00),
    (18, 57, -0.33662250574171e+00),
    (20, 20,  0.89185845355421e-24),
    (20, 35,  0.30629316876232e-12),
    (20, 48, -0.42002467698208e-05),
    (21, 21, -0.59056029685639e-25),
    (22, 53,  0.37826947613457e-05),
    (23, 39, -0.12768608934681e-14),
    (24, 26,  0.73087610595061e-28),
    (24, 40,  0.55414715350778e-16),
    (24, 58, -0.94369707241210e-06),
])

# ============================================================================
# Region 5 coefficients (Tables 37 and 38, 2007 revision)
# ============================================================================

_R5_IDEAL = np.array([
    (0,  -0.13179983674201e+02),
    (1,   0.68540841634434e+01),
    (-3, -0.24805148933466e-01),
    (-2,  0.36901534980333e+00),
    (-1, -0.31161318213925e+01),
    (2,  -0.32961626538917e+00),
])
_R5_J0, _R5_N0 = _R5_IDEAL[:, 0], _R5_IDEAL[:, 1]

_R5_I, _R5_J, _R5_N = ijn_table([
    (1, 1,  0.15736404855259e-02),
    (1, 2,  0.90153761673944e-03),
    (1, 3, -0.50270077677648e-02),
    (2, 3,  0.22440037409485e-05),
    (2, 9, -0.41163275453471e-05),
    (3, 7,  0.37919454822955e-07),
])


# ============================================================================
# Region 1 kernel
# gamma = sum( n_i * (7.1 - pi)^I_i * (tau - 1.222)^J_i )
# ============================================================================

def gamma_R1(pi, tau):
    a = 7.1 - pi
    b = tau - 1.222
    return float(np.sum(_R1_N * a ** _R1_I * b ** _R1_J))


def gamma_pi_R1(pi, tau):
    a = 7.1 - pi
    b = tau - 1.222
    return float(np.sum(-_R1_N * _R1_I * a ** (_R1_I - 1) * b ** _R1_J))


def gamma_tau_R1(pi, tau):
    a = 7.1 - pi
    b = tau - 1.222
    return float(np.sum(_R1_N * a ** _R1_I * _R1_J * b ** (_R1_J - 1)))


# ============================================================================
# Region 2 kernel
# gamma0 = ln(pi) + sum( n0_i * tau^J0_i )
# gammar = sum( n_i * pi^I_i * (tau - 0.5)^J_i )
# ============================================================================

def gamma_ideal_R2(pi, tau):
    return float(np.log(pi) + np.sum(_R2_N0 * tau ** _R2_J0))


def gamma_res_R2(pi, tau):
    return float(np.sum(_R2_N * pi ** _R2_I * (tau - 0.5) ** _R2_J))


def gamma_pi_ideal_R2(pi):
    return 1.0 / pi


def gamma_pi_res_R2(pi, tau):
    return float(np.sum(_R2_N * _R2_I * pi ** (_R2_I - 1) * (tau - 0.5) ** _R2_J))


def gamma_tau_ideal_R2(tau):
    return float(np.sum(_R2_N0 * _R2_J0 * tau ** (_R2_J0 - 1)))


def gamma_tau_res_R2(pi, tau):
    return float(np.sum(_R2_N * pi ** _R2_I * _R2_J * (tau - 0.5) ** (_R2_J - 1)))


# ============================================================================
# Region 5 kernel
# gamma0 = ln(pi) + sum( n0_i * tau^J0_i )
# gammar = sum( n_i * pi^I_i * tau^J_i )
# ============================================================================

def gamma_ideal_R5(pi, tau):
    return float(np.log(pi) + np.sum(_R5_N0 * tau ** _R5_J0))


def gamma_res_R5(pi, tau):
    return float(np.sum(_R5_N * pi ** _R5_I * tau ** _R5_J))


def gamma_pi_ideal_R5(pi):
    return 1.0 / pi


def gamma_pi_res_R5(pi, tau):
    return float(np.sum(_R5_N * _R5_I * pi ** (_R5_I - 1) * tau ** _R5_J))


def gamma_tau_ideal_R5(tau):
    return float(np.sum(_R5_N0 * _R5_J0 * tau ** (_R5_J0 - 1)))


def gamma_tau_res_R5(pi, tau):
    return float(np.sum(_R5_N * pi ** _R5_I * _R5_J * tau ** (_R5_J - 1)))


# ============================================================================
# Region evaluators
# ============================================================================

class GibbsRegion(ABC):
    """
    A region whose properties follow from a dimensionless Gibbs free energy
    gamma(pi, tau), with pi = p / p* and tau = T* / T.

        v = pi * gamma_pi * R * T / p
        h = tau * gamma_tau * R * T
        s = (tau * gamma_tau - gamma) * R
    """
    region = None
    p_star = None
    T_star = None

    def reduce(self, p, T):
        return p / self.p_star, self.T_star / T

    @abstractmethod
    def gamma(self, pi, tau):
        pass

    @abstractmethod
    def gamma_pi(self, pi, tau):
        pass

    @abstractmethod
    def gamma_tau(self, pi, tau):
        pass

    def volume(self, p, T):
        """ Specific volume (m3/kg) """
        pi, tau = self.reduce(p, T)
        return pi * self.gamma_pi(pi, tau) * R * T / p / 1000

    def enthalpy(self, p, T):
        """ Specific enthalpy (kJ/kg) """
        pi, tau = self.reduce(p, T)
        return tau * self.gamma_tau(pi, tau) * R * T

    def entropy(self, p, T):
        """ Specific entropy (kJ/(kg.K)) """
        pi, tau = self.reduce(p, T)
        return (tau * self.gamma_tau(pi, tau) - self.gamma(pi, tau)) * R

    def __repr__(self):
        return f'{type(self).__name__}()'


class Region1(GibbsRegion):
    """ Compressed liquid, 273.15 K <= T <= 623.15 K, ps(T) <= p <= 100 MPa """
    region = region_id.R1
    p_star, T_star = R1_STAR

    def gamma(self, pi, tau):
        return gamma_R1(pi, tau)

    def gamma_pi(self, pi, tau):
        return gamma_pi_R1(pi, tau)

    def gamma_tau(self, pi, tau):
        return gamma_tau_R1(pi, tau)


class Region2(GibbsRegion):
    """ Superheated vapour, up to 1073.15 K, bounded by the saturation and B23 lines """
    region = region_id.R2
    p_star, T_star = R2_STAR

    def gamma(self, pi, tau):
        return gamma_ideal_R2(pi, tau) + gamma_res_R2(pi, tau)

    def gamma_pi(self, pi, tau):
        return gamma_pi_ideal_R2(pi) + gamma_pi_res_R2(pi, tau)

    def gamma_tau(self, pi, tau):
        return gamma_tau_ideal_R2(tau) + gamma_tau_res_R2(pi, tau)


class Region5(GibbsRegion):
    """ High temperature steam, 1073.15 K < T <= 2273.15 K, p <= 50 MPa """
    region = region_id.R5
    p_star, T_star = R5_STAR

    def gamma(self, pi, tau):
        return gamma_ideal_R5(pi, tau) + gamma_res_R5(pi, tau)

    def gamma_pi(self, pi, tau):
        return gamma_pi_ideal_R5(pi) + gamma_pi_res_R5(pi, tau)

    def gamma_tau(self, pi, tau):
        return gamma_tau_ideal_R5(tau) + gamma_tau_res_R5(pi, tau)


REGION1 = Region1()
REGION2 = Region2()
REGION5 = Region5()

REGIONS = {
    region_id.R1: REGION1,
    region_id.R2: REGION2,
    region_id.R5: REGION5,
}
