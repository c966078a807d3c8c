#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pySteamToolbox - IAPWS-IF97 Water and Steam Property Utilities
              Copyright (C) 2024, pySteamToolbox contributors

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.
"""


# Constants
R = 0.461526  # Specific gas constant of water, kJ/(kg.K)
TC = 647.096  # Critical temperature (K)
PC = 22.064  # Critical pressure (MPa)
RHOC = 322.0  # Critical density (kg/m3)
T_TRIPLE = 273.15  # Lower temperature limit of the formulation (K)
P_SAT_MIN = 0.000611212677  # Saturation pressure at 273.15 K (MPa)

# Validity envelope
P_MAX = 100.0  # Upper pressure limit, regions 1-3 (MPa)
P_MAX_R5 = 50.0  # Upper pressure limit, region 5 (MPa)
T_MAX = 2273.15  # Upper temperature limit, region 5 (K)
T_R1_MAX = 623.15  # Region 1 / region 3 boundary isotherm (K)
T_R2_MAX = 1073.15  # Region 2 / region 5 boundary isotherm (K)
P_B23_MIN = 16.5292  # Pressure where the B23 line meets the saturation curve (MPa)

# Region 2 backward subregion limits
P_2AB = 4.0  # Subregion 2a / 2b boundary pressure (MPa)
P_2BC_MIN = 6.546699678  # Lowest pressure on the 2b / 2c boundary (MPa)
P_2BC_S_MIN = 6.5201  # Lowest pressure on the 2b / 2c entropy boundary (MPa)
S_2BC = 5.85  # Subregion 2b / 2c boundary entropy, kJ/(kg.K)

# Region 3 / 4 boundary extents
H_B34_MIN = 1670.858  # kJ/kg
H_B34_MAX = 2563.592  # kJ/kg
S_B34_MIN = 3.77828134  # kJ/(kg.K)
S_B34_MAX = 5.210887825  # kJ/(kg.K)

# Reduced state reference values, (p*, T*) in (MPa, K)
R1_STAR = (16.53, 1386.0)
R2_STAR = (1.0, 540.0)
R5_STAR = (1.0, 1000.0)

# Viscosity reference values
MU_STAR = 1.0e-6  # Pa.s
