"""
Input validation helpers.
"""

from .validate import validate_region, check_range
