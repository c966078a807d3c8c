"""
Region selection for forward (p, T) and backward (p, h), (p, s) evaluation.
"""

from .regions import region_pT, region_ph, region_ps
