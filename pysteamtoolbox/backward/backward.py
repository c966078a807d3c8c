"""
IAPWS-IF97 backward equations T(p, h) and T(p, s) for regions 1 and 2.

The backward equations are direct polynomial fits to the forward equations,
so no iteration is performed. Region 2 is split into subregions 2a, 2b and
2c with separate coefficient sets. Inside the two-phase dome (region 4) the
temperature is the saturation temperature at p.

Provides:
    - T_ph(p, h): temperature in K from p in MPa and h in kJ/kg
    - T_ps(p, s): temperature in K from p in MPa and s in kJ/(kg.K)
"""

import logging

from pysteamtoolbox.classes import backward_region
from pysteamtoolbox.constants import T_R1_MAX, P_SAT_MIN
from pysteamtoolbox.boundaries import ps_T, Ts_p
from pysteamtoolbox.regions import region_ph, region_ps
from pysteamtoolbox.shared_fns import ijn_table, poly_sum

logger = logging.getLogger(__name__)

# ============================================================================
# T(p, h) coefficients, Tables 6, 20, 21 and 22 of IAPWS-IF97
# Each row: (I_i, J_i, n_i)
# ============================================================================

_R1_PH = ijn_table([
    (0,  0, -0.23872489924521e+03),
    (0,  1,  0.40421188637945e+03),
    (0,  2,  0.11349746881718e+03),
    (0,  6, -0.58457616048039e+01),
    (0, 22, -0.15285482413140e-03),
    (0, 32, -0.10866707695377e-05),
    (1,  0, -0.13391744872602e+02),
    (1,  1,  0.43211039183559e+02),
    (1,  2, -0.54010067170506e+02),
    (1,  3,  0.30535892203916e+02),
    (1,  4, -0.65964749423638e+01),
    (1, 10,  0.93965400878363e-02),
    (1, 32,  0.11573647505340e-06),
    (2, 10, -0.25858641282073e-04),
    (2, 32, -0.40644363084799e-08),
    (3, 10,  0.66456186191635e-07),
    (3, 32,  0.80670734103027e-10),
    (4, 32, -0.93477771213947e-12),
    (5, 32,  0.58265442020601e-14),
    (6, 32, -0.15020185953503e-16),
])

_R2A_PH = ijn_table([
    (0,  0,  0.10898952318288e+04),
    (0,  1,  0.84951654495535e+03),
    (0,  2, -0.10781748091826e+03),
    (0,  3,  0.33153654801263e+02),
    (0,  7, -0.74232016790248e+01),
    (0, 20,  0.11765048724356e+02),
    (1,  0,  0.18445749355790e+01),
    (1,  1, -0.41792700549624e+01),
    (1,  2,  0.62478196935812e+01),
    (1,  3, -0.17344563108114e+02),
    (1,  7, -0.20058176862096e+03),
    (1,  9,  0.27196065473796e+03),
    (1, 11, -0.45511318285818e+03),
    (1, 18,  0.30919688604755e+04),
    (1, 44,  0.25226640357872e+06),
    (2,  0, -0.61707422868339e-02),
    (2,  2, -0.31078046629583e+00),
    (2,  7,  0.11670873077107e+02),
    (2, 36,  0.12812798404046e+09),
    (2, 38, -0.98554909623276e+09),
    (2, 40,  0.28224546973002e+10),
    (2, 42, -0.35948971410703e+10),
    (2, 44,  0.17227349913197e+10),
    (3, 24, -0.13551334240775e+05),
    (3, 44,  0.12848734664650e+08),
    (4, 12,  0.13865724283226e+01),
    (4, 32,  0.23598832556514e+06),
    (4, 44, -0.13105236545054e+08),
    (5, 32,  0.73999835474766e+04),
    (5, 36, -0.55196697030060e+06),
    (5, 42,  0.37154085996233e+07),
    (6, 34,  0.19127729239660e+05),
    (6, 44, -0.41535164835634e+06),
    (7, 28, -0.62459855192507e+02),
])

_R2B_PH = ijn_table([
    (0,  0,  0.14895041079516e+04),
    (0,  1,  0.74307798314034e+03),
    (0,  2, -0.97708318797837e+02),
    (0, 12,  0.24742464705674e+01),
    (0, 18, -0.63281320016026e+00),
    (0, 24,  0.11385952129658e+01),
    (0, 28, -0.47811863648625e+00),
    (0, 40,  0.85208123431544e-02),
    (1,  0,  0.93747147377932e+00),
    (1,  2,  0.33593118604916e+01),
    (1,  6,  0.33809355601454e+01),
    (1, 12,  0.16844539671904e+00),
    (1, 18,  0.73875745236695e+00),
    (1, 24, -0.47128737436186e+00),
    (1, 28,  0.15020273139707e+00),
    (1, 40, -0.21764114219750e-02),
    (2,  2, -0.21810755324761e-01),
    (2,  8, -0.10829784403677e+00),
    (2, 18, -0.46333324635812e-01),
    (2, 40,  0.71280351959551e-04),
    (3,  1,  0.11032831789999e-03),
    (3,  2,  0.18955248387902e-03),
    (3, 12,  0.30891541160537e-02),
    (3, 24,  0.13555504554949e-02),
    (4,  2,  0.28640237477456e-06),
    (4, 12, -0.10779857357512e-04),
    (4, 18, -0.76462712454814e-04),
    (4, 24,  0.14052392818316e-04),
    (4, 28, -0.31083814331434e-04),
    (4, 40, -0.10302738212103e-05),
    (5, 18,  0.28217281635040e-06),
    (5, 24,  0.12704902271945e-05),
    (5, 40,  0.73803353468292e-07),
    (6, 28, -0.11030139238909e-07),
    (7,  2, -0.81456365207833e-13),
    (7, 28, -0.25180545682962e-10),
    (9,  1, -0.17565233969407e-17),
    (9, 40,  0.86934156344163e-14),
])

_R2C_PH = ijn_table([
    (-7,  0, -0.32368398555242e+13),
    (-7,  4,  0.73263350902181e+13),
    (-6,  0,  0.35825089945447e+12),
    (-6,  2, -0.58340131851590e+12),
    (-5,  0, -0.10783068217470e+11),
    (-5,  2,  0.20825544563171e+11),
    (-2,  0,  0.61074783564516e+06),
    (-2,  1,  0.85977722535580e+06),
    (-1,  0, -0.25745723604170e+05),
    (-1,  2,  0.31081088422714e+05),
    (0,   0,  0.12082315865936e+04),
    (0,   1,  0.48219755109255e+03),
    (1,   4,  0.37966001272486e+01),
    (1,   8, -0.10842984880077e+02),
    (2,   4, -0.45364172676660e-01),
    (6,   0,  0.14559115658698e-12),
    (6,   1,  0.11261597407230e-11),
    (6,   4, -0.17804982240686e-10),
    (6,  10,  0.12324579690832e-06),
    (6,  12, -0.11606921130984e-05),
    (6,  16,  0.27846367088554e-04),
    (6,  20, -0.59270038474176e-03),
    (6,  22,  0.12918582991878e-02),
])

# ============================================================================
# T(p, s) coefficients, Tables 8, 25, 26 and 27 of IAPWS-IF97
# ============================================================================

_R1_PS = ijn_table([
    (0,  0,  0.17478268058307e+03),
    (0,  1,  0.34806930892873e+02),
    (0,  2,  0.65292584978455e+01),
    (0,  3,  0.33039981775489e+00),
    (0, 11, -0.19281382923196e-06),
    (0, 31, -0.24909197244573e-22),
    (1,  0, -0.26107636489332e+00),
    (1,  1,  0.22592965981586e+00),
    (1,  2, -0.64256463395226e-01),
    (1,  3,  0.78876289270526e-02),
    (1, 12,  0.35672110607366e-09),
    (1, 31,  0.17332496994895e-23),
    (2,  0,  0.56608900654837e-03),
    (2,  1, -0.32635483139717e-03),
    (2,  2,  0.44778286690632e-04),
    (2,  9, -0.51322156908507e-09),
    (2, 31, -0.42522657042207e-25),
    (3, 10,  0.26400441360689e-12),
    (3, 32,  0.78124600459723e-28),
    (4, 32, -0.30732199903668e-30),
])

_R2A_PS = ijn_table([
    (-1.5,  -24, -0.39235983861984e+06),
    (-1.5,  -23,  0.51526573827270e+06),
    (-1.5,  -19,  0.40482443161048e+05),
    (-1.5,  -13, -0.32193790923902e+03),
    (-1.5,  -11,  0.96961424218694e+02),
    (-1.5,  -10, -0.22867846371773e+02),
    (-1.25, -19, -0.44942914124357e+06),
    (-1.25, -15, -0.50118336020166e+04),
    (-1.25,  -6,  0.35684463560015e+00),
    (-1.0,  -26,  0.44235335848190e+05),
    (-1.0,  -21, -0.13673388811708e+05),
    (-1.0,  -17,  0.42163260207864e+06),
    (-1.0,  -16,  0.22516925837475e+05),
    (-1.0,   -9,  0.47442144865646e+03),
    (-1.0,   -8, -0.14931130797647e+03),
    (-0.75, -15, -0.19781126320452e+06),
    (-0.75, -14, -0.23554399470760e+05),
    (-0.5,  -26, -0.19070616302076e+05),
    (-0.5,  -13,  0.55375669883164e+05),
    (-0.5,   -9,  0.38293691437363e+04),
    (-0.5,   -7, -0.60391860580567e+03),
    (-0.25, -27,  0.19363102620331e+04),
    (-0.25, -25,  0.42660643698610e+04),
    (-0.25, -11, -0.59780638872718e+04),
    (-0.25,  -6, -0.70401463926862e+03),
    (0.25,    1,  0.33836784107553e+03),
    (0.25,    4,  0.20862786635187e+02),
    (0.25,    8,  0.33834172656196e-01),
    (0.25,   11, -0.43124428414893e-04),
    (0.5,     0,  0.16653791356412e+03),
    (0.5,     1, -0.13986292055898e+03),
    (0.5,     5, -0.78849547999872e+00),
    (0.5,     6,  0.72132411753872e-01),
    (0.5,    10, -0.59754839398283e-02),
    (0.5,    14, -0.12141358953904e-04),
    (0.5,    16,  0.23227096733871e-06),
    (0.75,    0, -0.10538463566194e+02),
    (0.75,    4,  0.20718925496502e+01),
    (0.75,    9, -0.72193155260427e-01),
    (0.75,   17,  0.20749887081120e-06),
    (1.0,     7, -0.18340657911379e-01),
    (1.0,    18,  0.29036272348696e-06),
    (1.25,    3,  0.21037527893619e+00),
    (1.25,   15,  0.25681239729999e-03),
    (1.5,     5, -0.12799002933781e-01),
    (1.5,    18, -0.82198102652018e-05),
])

_R2B_PS = ijn_table([
    (-6,  0,  0.31687665083497e+06),
    (-6, 11,  0.20864175881858e+02),
    (-5,  0, -0.39859399803599e+06),
    (-5, 11, -0.21816058518877e+02),
    (-4,  0,  0.22369785194242e+06),
    (-4,  1, -0.27841703445817e+04),
    (-4, 11,  0.99207436071480e+01),
    (-3,  0, -0.75197512299157e+05),
    (-3,  1,  0.29708605951158e+04),
    (-3, 11, -0.34406878548526e+01),
    (-3, 12,  0.38815564249115e+00),
    (-2,  0,  0.17511295085750e+05),
    (-2,  1, -0.14237112854449e+04),
    (-2,  6,  0.10943803364167e+01),
    (-2, 10,  0.89971619308495e+00),
    (-1,  0, -0.33759740098958e+04),
    (-1,  1,  0.47162885818355e+03),
    (-1,  5, -0.19188241993679e+01),
    (-1,  8,  0.41078580492196e+00),
    (-1,  9, -0.33465378172097e+00),
    (0,   0,  0.13870034777505e+04),
    (0,   1, -0.40663326195838e+03),
    (0,   2,  0.41727347159610e+02),
    (0,   4,  0.21932549434532e+01),
    (0,   5, -0.10320050009077e+01),
    (0,   6,  0.35882943516703e+00),
    (0,   9,  0.52511453726066e-02),
    (1,   0,  0.12838916450705e+02),
    (1,   1, -0.28642437219381e+01),
    (1,   2,  0.56912683664855e+00),
    (1,   3, -0.99962954584931e-01),
    (1,   7, -0.32632037778459e-02),
    (1,   8,  0.23320922576723e-03),
    (2,   0, -0.15334809857450e+00),
    (2,   1,  0.29072288239902e-01),
    (2,   5,  0.37534702741167e-03),
    (3,   0,  0.17296691702411e-02),
    (3,   1, -0.38556050844504e-03),
    (3,   3, -0.35017712292608e-04),
    (4,   0, -0.14566393631492e-04),
    (4,   1,  0.56420857267269e-05),
    (5,   0,  0.41286150074605e-07),
    (5,   1, -0.20684671118824e-07),
    (5,   2,  0.16409393674725e-08),
])

_R2C_PS = ijn_table([
    (-2, 0,  0.90968501005365e+03),
    (-2, 1,  0.24045667088420e+04),
    (-1, 0, -0.59162326387130e+03),
    (0,  0,  0.54145404128074e+03),
    (0,  1, -0.27098308411192e+03),
    (0,  2,  0.97976525097926e+03),
    (0,  3, -0.46966772959435e+03),
    (1,  0,  0.14399274604723e+02),
    (1,  1, -0.19104204230429e+02),
    (1,  3,  0.53299167111971e+01),
    (1,  4, -0.21252975375934e+02),
    (2,  0, -0.31147334413760e+00),
    (2,  1,  0.60334840894623e+00),
    (2,  2, -0.42764839702509e-01),
    (3,  0,  0.58185597255259e-02),
    (3,  1, -0.14597008284753e-01),
    (3,  5,  0.56631175631027e-02),
    (4,  0, -0.76155864584577e-04),
    (4,  1,  0.22440342919332e-03),
    (4,  4, -0.12561095013413e-04),
    (5,  0,  0.63323132660934e-06),
    (5,  1, -0.20541989675375e-05),
    (5,  2,  0.36405370390082e-07),
    (6,  0, -0.29759897789215e-08),
    (6,  1,  0.10136618529763e-07),
    (7,  0,  0.59925719692351e-11),
    (7,  1, -0.20677870105164e-10),
    (7,  3, -0.20874278181886e-10),
    (7,  4,  0.10162166825089e-09),
    (7,  5, -0.16429828281347e-09),
])

# Each entry: (coefficient table, reduced (x, y) from the inputs) for theta = sum( n_i * x^I_i * y^J_i )
_T_PH = {
    backward_region.R1:  (_R1_PH,  lambda p, h: (p, h / 2500 + 1)),
    backward_region.R2A: (_R2A_PH, lambda p, h: (p, h / 2000 - 2.1)),
    backward_region.R2B: (_R2B_PH, lambda p, h: (p - 2, h / 2000 - 2.6)),
    backward_region.R2C: (_R2C_PH, lambda p, h: (p + 25, h / 2000 - 1.8)),
}

_T_PS = {
    backward_region.R1:  (_R1_PS,  lambda p, s: (p, s + 2)),
    backward_region.R2A: (_R2A_PS, lambda p, s: (p, s / 2 - 2)),
    backward_region.R2B: (_R2B_PS, lambda p, s: (p, 10 - s / 0.7853)),
    backward_region.R2C: (_R2C_PS, lambda p, s: (p, 2 - s / 2.9251)),
}

# Saturation pressure at 623.15 K, ~16.529 MPa
_P_SAT_R1_MAX = ps_T(T_R1_MAX)


def _solve(table, region, p, x):
    (I, J, n), reduce = table[region]
    a, b = reduce(p, x)
    T = poly_sum(n, a, I, b, J)
    if region != backward_region.R1 and P_SAT_MIN <= p <= _P_SAT_R1_MAX:
        # Region 2 fits can undershoot the dew line by a few mK
        T = max(T, Ts_p(p))
    return T


def T_ph(p: float, h: float) -> float:
    """ Temperature (K) from pressure p (MPa) and specific enthalpy h (kJ/kg) """
    region = region_ph(p, h)
    if region == backward_region.R4:
        return Ts_p(p)
    T = _solve(_T_PH, region, p, h)
    logger.debug(f'T_ph: p={p}, h={h}, region {region.name} => T={T}')
    return T


def T_ps(p: float, s: float) -> float:
    """ Temperature (K) from pressure p (MPa) and specific entropy s (kJ/(kg.K)) """
    region = region_ps(p, s)
    if region == backward_region.R4:
        return Ts_p(p)
    T = _solve(_T_PS, region, p, s)
    logger.debug(f'T_ps: p={p}, s={s}, region {region.name} => T={T}')
    return T
