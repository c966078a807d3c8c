"""
IAPWS-IF97 formulation constants and validity limits.
"""

from .constants import *
