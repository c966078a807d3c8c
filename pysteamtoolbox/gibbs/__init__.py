"""
Dimensionless Gibbs free energy kernels and region evaluators for IAPWS-IF97 regions 1, 2 and 5.
"""

from .gibbs import (gamma_R1, gamma_pi_R1, gamma_tau_R1,
                    gamma_ideal_R2, gamma_res_R2, gamma_pi_ideal_R2, gamma_pi_res_R2, gamma_tau_ideal_R2, gamma_tau_res_R2,
                    gamma_ideal_R5, gamma_res_R5, gamma_pi_ideal_R5, gamma_pi_res_R5, gamma_tau_ideal_R5, gamma_tau_res_R5,
                    GibbsRegion, Region1, Region2, Region5, REGION1, REGION2, REGION5, REGIONS)
