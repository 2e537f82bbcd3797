#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pySolventSwap - Binary VLE and Solvent Swap Utilities
              Copyright (C) 2026, pySolventSwap contributors

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

from enum import Enum

class antoine_method(Enum):  # Antoine segment selection policy
    WIDEST = 0
    NARROWEST = 1
    STRICT = 2

class bp_method(Enum):  # Bubble point temperature root finder
    BISECT = 0
    BRENTQ = 1

class swap_status(Enum):  # Terminal state of a solvent swap simulation
    TARGET_REACHED = 0
    MAX_CYCLES = 1

class_dic = {
    "amethod": antoine_method,
    "bpmethod": bp_method,
}
