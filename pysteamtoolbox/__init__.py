"""
pysteamtoolbox
===================================

-----------------------------------------------
IAPWS-IF97 Water and Steam Property Utilities
-----------------------------------------------

Industrial formulation of the thermodynamic properties of water and steam, organised
into modules that each need a separate import.

Includes functions to perform calculations including;

- Saturation pressure and temperature
- IF97 region selection from (p, T), (p, h) and (p, s)
- Specific volume, enthalpy and entropy in regions 1, 2 and 5
- Temperature from (p, h) and (p, s) via the non-iterative backward equations
- Dynamic viscosity (IAPWS 2008)
- Stream state points, array evaluation and saturation tables

Units: p in MPa, T in K, h in kJ/kg, s in kJ/(kg.K), v in m3/kg, viscosity in Pa.s
"""

submodules = [
    'backward',
    'boundaries',
    'classes',
    'constants',
    'forward',
    'gibbs',
    'regions',
    'shared_fns',
    'steam',
    'validate',
    'viscosity',
]

__all__ = submodules

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pysteamtoolbox.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pysteamtoolbox' has no attribute '{name}'"
            )
