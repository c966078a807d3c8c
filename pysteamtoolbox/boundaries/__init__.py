"""
Boundary curves: saturation line, region 2/3 line, backward subregion and region 3/4 boundaries.
"""

from .boundaries import ps_T, Ts_p, B23_T_p, B23_p_T, R2_Bbc_h_p, B34_ps_h_eq, B34_ps_s_eq
