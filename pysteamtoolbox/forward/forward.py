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

from pysteamtoolbox.classes import region_id
from pysteamtoolbox.validate import validate_region
from pysteamtoolbox.boundaries import Ts_p
from pysteamtoolbox.regions import region_pT
from pysteamtoolbox.gibbs import REGIONS, GibbsRegion

def _evaluator(p: float, T: float, region) -> GibbsRegion:
    # region=None classifies first; an explicit region is trusted as given
    if region is None:
        region = region_pT(p, T)
    return REGIONS[validate_region(region)]

def v_pT(p: float, T: float, region=None) -> float:
    """ Returns specific volume (m3/kg)
        p: Pressure (MPa)
        T: Temperature (K)
        region: IF97 region (1, 2 or 5). If None, region is found from region_pT(p, T)
    """
    return _evaluator(p, T, region).volume(p, T)

def s_pT(p: float, T: float, region=None) -> float:
    """ Returns specific entropy (kJ/(kg.K))
        p: Pressure (MPa)
        T: Temperature (K)
        region: IF97 region (1, 2 or 5). If None, region is found from region_pT(p, T)
    """
    return _evaluator(p, T, region).entropy(p, T)

def h_pT(p: float, T: float, region=None) -> float:
    """ Returns specific enthalpy (kJ/kg)
        p: Pressure (MPa)
        T: Temperature (K)
        region: IF97 region (1, 2 or 5). If None, region is found from region_pT(p, T)
    """
    return _evaluator(p, T, region).enthalpy(p, T)

def h_liquid_p(p: float) -> float:
    """ Specific enthalpy (kJ/kg) of saturated liquid at pressure p (MPa) """
    return h_pT(p, Ts_p(p), region_id.R1)

def h_vapor_p(p: float) -> float:
    """ Specific enthalpy (kJ/kg) of saturated vapour at pressure p (MPa) """
    return h_pT(p, Ts_p(p), region_id.R2)
