"""
IAPWS-IF97 region selection.

Provides:
    - region_pT(p, T): region for the forward (Gibbs) equations, 1, 2 or 5
    - region_ph(p, h): backward equation set for T(p, h)
    - region_ps(p, s): backward equation set for T(p, s)

Shared boundaries belong to the lower numbered region: a point on the
saturation line is region 1, a point on the B23 line is region 2, and
T = 1073.15 K is region 2. Region 3 is not supported and raises DomainError.
Below the triple point pressure (611.2 Pa) every state is vapour, region 2.

Units: T in K, p in MPa, h in kJ/kg, s in kJ/(kg.K)
"""

import logging

from pysteamtoolbox.classes import region_id, backward_region, DomainError
from pysteamtoolbox.constants import (P_MAX, P_MAX_R5, T_TRIPLE, T_MAX, T_R1_MAX, T_R2_MAX, P_B23_MIN,
                                      P_SAT_MIN, P_2AB, P_2BC_MIN, P_2BC_S_MIN, S_2BC,
                                      H_B34_MIN, H_B34_MAX, S_B34_MIN, S_B34_MAX)
from pysteamtoolbox.boundaries import ps_T, Ts_p, B23_T_p, R2_Bbc_h_p, B34_ps_h_eq, B34_ps_s_eq
from pysteamtoolbox.gibbs import REGION1, REGION2

logger = logging.getLogger(__name__)


def region_pT(p: float, T: float) -> region_id:
    """ Returns the IF97 region (1, 2 or 5) for pressure p (MPa) and temperature T (K) """
    if not (0 < p <= P_MAX) or not (T_TRIPLE <= T <= T_MAX):
        raise DomainError(f'region_pT: (p={p}, T={T}) outside 0 < p <= {P_MAX} MPa, {T_TRIPLE} <= T <= {T_MAX} K',
                          func='region_pT', value=(p, T))
    if T > T_R2_MAX:
        if p > P_MAX_R5:
            raise DomainError(f'region_pT: p={p} above {P_MAX_R5} MPa at T={T} K (region 5 limit)',
                              func='region_pT', value=(p, T))
        region = region_id.R5
    elif T <= T_R1_MAX:
        region = region_id.R1 if p >= ps_T(T) else region_id.R2
    elif p <= P_B23_MIN or T >= B23_T_p(p):
        region = region_id.R2
    else:
        raise DomainError(f'region_pT: (p={p}, T={T}) lies in region 3, which is not supported',
                          func='region_pT', value=(p, T))
    logger.debug(f'region_pT: p={p}, T={T} => region {region.name}')
    return region


def region_ph(p: float, h: float) -> backward_region:
    """ Returns the backward region (1, 2a, 2b, 2c or 4) for pressure p (MPa) and enthalpy h (kJ/kg) """
    if not (0 < p <= P_MAX):
        raise DomainError(f'region_ph: p={p} outside 0 < p <= {P_MAX} MPa', func='region_ph', value=(p, h))

    if p < P_SAT_MIN:
        # Below the triple point pressure only vapour exists
        h_liq, h_vap = None, None
        h2_lo = REGION2.enthalpy(p, T_TRIPLE)
    elif p < P_B23_MIN:
        Ts = Ts_p(p)
        h_liq, h_vap = REGION1.enthalpy(p, Ts), REGION2.enthalpy(p, Ts)
        h2_lo = h_vap
    else:
        h_liq, h_vap = REGION1.enthalpy(p, T_R1_MAX), None
        h2_lo = REGION2.enthalpy(p, B23_T_p(p))
    h2_hi = REGION2.enthalpy(p, T_R2_MAX)

    if h_liq is not None and REGION1.enthalpy(p, T_TRIPLE) <= h <= h_liq:
        region = backward_region.R1
    elif h_vap is not None and h_liq < h < h_vap:
        region = backward_region.R4
    elif p >= P_B23_MIN and H_B34_MIN < h < H_B34_MAX and p < B34_ps_h_eq(h):
        region = backward_region.R4
    elif p >= P_2BC_MIN and h2_lo <= h < R2_Bbc_h_p(p):
        region = backward_region.R2C
    elif p >= P_2AB and h2_lo <= h <= h2_hi:
        region = backward_region.R2B
    elif p < P_2AB and h2_lo <= h <= h2_hi:
        region = backward_region.R2A
    else:
        raise DomainError(f'region_ph: no supported region for (p={p}, h={h})', func='region_ph', value=(p, h))
    logger.debug(f'region_ph: p={p}, h={h} => region {region.name}')
    return region


def region_ps(p: float, s: float) -> backward_region:
    """ Returns the backward region (1, 2a, 2b, 2c or 4) for pressure p (MPa) and entropy s (kJ/(kg.K)) """
    if not (0 < p <= P_MAX):
        raise DomainError(f'region_ps: p={p} outside 0 < p <= {P_MAX} MPa', func='region_ps', value=(p, s))

    if p < P_SAT_MIN:
        s_liq, s_vap = None, None
        s2_lo = REGION2.entropy(p, T_TRIPLE)
    elif p < P_B23_MIN:
        Ts = Ts_p(p)
        s_liq, s_vap = REGION1.entropy(p, Ts), REGION2.entropy(p, Ts)
        s2_lo = s_vap
    else:
        s_liq, s_vap = REGION1.entropy(p, T_R1_MAX), None
        s2_lo = REGION2.entropy(p, B23_T_p(p))
    s2_hi = REGION2.entropy(p, T_R2_MAX)

    if s_liq is not None and REGION1.entropy(p, T_TRIPLE) <= s <= s_liq:
        region = backward_region.R1
    elif s_vap is not None and s_liq < s < s_vap:
        region = backward_region.R4
    elif p >= P_B23_MIN and S_B34_MIN < s < S_B34_MAX and p < B34_ps_s_eq(s):
        region = backward_region.R4
    elif p >= P_2BC_S_MIN and s2_lo <= s < S_2BC:
        region = backward_region.R2C
    elif p >= P_2AB and s2_lo <= s <= s2_hi:
        region = backward_region.R2B
    elif p < P_2AB and s2_lo <= s <= s2_hi:
        region = backward_region.R2A
    else:
        raise DomainError(f'region_ps: no supported region for (p={p}, s={s})', func='region_ps', value=(p, s))
    logger.debug(f'region_ps: p={p}, s={s} => region {region.name}')
    return region
