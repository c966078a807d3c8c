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

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt
import pandas as pd

from pysteamtoolbox.classes import region_id
from pysteamtoolbox.boundaries import Ts_p
from pysteamtoolbox.forward import v_pT, s_pT, h_pT
from pysteamtoolbox.backward import T_ph
from pysteamtoolbox.regions import region_pT
from pysteamtoolbox.viscosity import eta_vT
from pysteamtoolbox.constants import P_SAT_MIN, P_B23_MIN
from pysteamtoolbox.shared_fns import convert_to_numpy, process_input, check_2_inputs
from pysteamtoolbox.validate import check_range

@dataclass(frozen=True)
class WaterSteam:
    """ A water/steam stream
        temperature: Temperature (K)
        pressure: Pressure (MPa)
        enthalpy: Specific enthalpy (kJ/kg)
        mass_flow: Mass flow rate (kg/s)
    """
    temperature: float
    pressure: float
    enthalpy: float
    mass_flow: float = 0.0

    @classmethod
    def from_pT(cls, p: float, T: float, mass_flow: float = 0.0) -> 'WaterSteam':
        """ Stream at pressure p (MPa) and temperature T (K), enthalpy from the forward equations """
        return cls(temperature=T, pressure=p, enthalpy=h_pT(p, T), mass_flow=mass_flow)

    @classmethod
    def from_ph(cls, p: float, h: float, mass_flow: float = 0.0) -> 'WaterSteam':
        """ Stream at pressure p (MPa) and specific enthalpy h (kJ/kg), temperature from the backward equations """
        return cls(temperature=T_ph(p, h), pressure=p, enthalpy=h, mass_flow=mass_flow)

    @property
    def region(self) -> region_id:
        return region_pT(self.pressure, self.temperature)

    @property
    def heat_flow(self) -> float:
        """ Enthalpy flow (kW) """
        return self.mass_flow * self.enthalpy

def steam_props(p: npt.ArrayLike, T: npt.ArrayLike) -> tuple:
    """ Returns tuple of (v (m3/kg), h (kJ/kg), s (kJ/(kg.K)), viscosity (Pa.s))
        p: Pressure (MPa), scalar or array
        T: Temperature (K), scalar or array
        Array inputs are broadcast against each other; scalar inputs return scalars
    """
    p, T = check_2_inputs(p, T)
    v, h, s, eta = (np.zeros(p.shape) for _ in range(4))
    for i in np.ndindex(p.shape):
        pi, Ti = float(p[i]), float(T[i])
        region = region_pT(pi, Ti)
        v[i] = v_pT(pi, Ti, region)
        h[i] = h_pT(pi, Ti, region)
        s[i] = s_pT(pi, Ti, region)
        eta[i] = eta_vT(v[i], Ti)
    return process_input(v), process_input(h), process_input(s), process_input(eta)

def sat_table(p: npt.ArrayLike) -> pd.DataFrame:
    """ Returns a DataFrame of saturated liquid (') and vapour ('') properties, one row per pressure
        p: Pressure (MPa), scalar or array, each within 611.2127 Pa - 16.5292 MPa where both
           saturated phases lie in regions 1 and 2
    """
    rows = []
    for pi in convert_to_numpy(p).ravel():
        pi = check_range('sat_table', 'p', float(pi), P_SAT_MIN, P_B23_MIN)
        Ts = Ts_p(pi)
        rows.append({
            'p (MPa)': pi,
            'Ts (K)': Ts,
            "v' (m3/kg)": v_pT(pi, Ts, region_id.R1),
            "v'' (m3/kg)": v_pT(pi, Ts, region_id.R2),
            "h' (kJ/kg)": h_pT(pi, Ts, region_id.R1),
            "h'' (kJ/kg)": h_pT(pi, Ts, region_id.R2),
            "s' (kJ/kg.K)": s_pT(pi, Ts, region_id.R1),
            "s'' (kJ/kg.K)": s_pT(pi, Ts, region_id.R2),
        })
    return pd.DataFrame(rows)
