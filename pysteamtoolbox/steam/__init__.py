"""
Stream state points, array evaluation and saturation tables.
"""

from .steam import WaterSteam, steam_props, sat_table
