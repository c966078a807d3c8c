#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pySteamToolbox - IAPWS-IF97 Water and Steam Property Utilities
              Copyright (C) 2024, pySteamToolbox contributors

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.
"""

from enum import IntEnum

class region_id(IntEnum):  # IF97 region for forward (p, T) evaluation
    R1 = 1
    R2 = 2
    R3 = 3
    R4 = 4
    R5 = 5

class backward_region(IntEnum):  # Backward equation set for (p, h) and (p, s) inputs
    R1 = 1
    R2A = 21
    R2B = 22
    R2C = 23
    R4 = 4

class DomainError(ValueError):
    """ Raised when a state point lies outside the validity envelope of the formulation.
        func: Name of the function that rejected the input
        value: The offending input (scalar or tuple of inputs)
    """
    def __init__(self, message, func=None, value=None):
        super().__init__(message)
        self.func = func
        self.value = value

class_dic = {
    "region": region_id,
}
