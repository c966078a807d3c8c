"""
Dynamic viscosity of water and steam.
"""

from .viscosity import viscosity_ideal, viscosity_second, eta_vT, eta_pT
