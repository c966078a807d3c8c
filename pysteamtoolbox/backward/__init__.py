"""
Backward equations: temperature from (p, h) and (p, s).
"""

from .backward import T_ph, T_ps
