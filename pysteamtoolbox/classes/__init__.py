"""
Region identifiers and the error raised for out-of-range state points.
"""

from .classes import region_id, backward_region, DomainError, class_dic
