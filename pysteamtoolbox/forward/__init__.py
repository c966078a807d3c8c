"""
Forward property evaluation: v, s, h from (p, T).
"""

from .forward import v_pT, s_pT, h_pT, h_liquid_p, h_vapor_p
