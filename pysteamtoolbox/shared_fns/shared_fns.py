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

import numpy as np
import numpy.typing as npt
from typing import Union, List, Tuple

def ijn_table(rows: List[Tuple[float, float, float]]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """ Splits a list of (I, J, n) coefficient rows into three read-only float arrays """
    table = np.array(rows, dtype=float)
    cols = table[:, 0].copy(), table[:, 1].copy(), table[:, 2].copy()
    for col in cols:
        col.setflags(write=False)
    return cols

def poly_sum(n: npt.ArrayLike, x: float, I: npt.ArrayLike, y: float, J: npt.ArrayLike) -> float:
    """ Evaluates sum( n_i * x^I_i * y^J_i ) """
    return float(np.sum(n * np.power(x, I) * np.power(y, J)))

def convert_to_numpy(input_data):
    # Convert input data to a numpy array ensuring it is always sizeable
    if isinstance(input_data, np.ndarray):
        return input_data.astype(float)
    else:
        # Convert list, tuple, scalar, or other types to numpy array
        # Ensuring even scalars become arrays with one element
        return np.atleast_1d(np.asarray(input_data, dtype=float))

def process_input(input_data):
    # Check if input_data is a numpy array
    if isinstance(input_data, np.ndarray):
        if input_data.size == 1:
            # Return the single element if it's a single-element array
            return input_data.item()
        else:
            # Return the array itself if it's larger
            return input_data
    elif isinstance(input_data, list):
        if len(input_data) == 1:
            return input_data[0]
        else:
            return np.array(input_data)
    else:
        return input_data

def check_2_inputs(x: Union[float, npt.ArrayLike], y: Union[float, npt.ArrayLike]) -> Tuple[np.ndarray, np.ndarray]:
    """ Broadcasts two inputs against each other, raising ValueError if their shapes are incompatible """
    x, y = convert_to_numpy(x), convert_to_numpy(y)
    try:
        return tuple(np.broadcast_arrays(x, y))
    except ValueError:
        raise ValueError(f"Inputs of shape {x.shape} and {y.shape} cannot be broadcast together")
