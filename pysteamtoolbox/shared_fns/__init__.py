"""
Shared numerical helpers.
"""

from .shared_fns import ijn_table, poly_sum, convert_to_numpy, process_input, check_2_inputs
