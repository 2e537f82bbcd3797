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

# Constants
DEGC2K = 273.15  # Offset to convert degrees C to Kelvin

# Bubble point root finding
BISECT_MAX_ITER = 80  # Iteration budget for bisection
BISECT_FTOL = 1e-9  # Residual tolerance on bubble pressure equation (bar)
BISECT_XTOL = 1e-6  # Bracket width tolerance (K)

# Batch evaporation
STEPS_DEFAULT = 100  # Default number of evaporation steps per batch
MOLES_EPS = 1e-12  # Holdup below which the batch is considered dry
REMOVAL_RTOL = 1e-12  # Relative slack when comparing removed amount against target

# Solvent swap defaults
REMOVAL_MASS_DEFAULT = 0.80  # Mass fraction of batch evaporated per cycle
TARGET_MASS_DEFAULT = 0.01  # Residual mass fraction of original solvent to reach
MAX_CYCLES_DEFAULT = 20

# Web lookups
HTTP_TIMEOUT = 7.0  # seconds
WEBBOOK_URL = 'https://webbook.nist.gov/cgi/cbook.cgi'
PUBCHEM_URL = 'https://pubchem.ncbi.nlm.nih.gov/rest/pug/compound/name/{}/property/MolecularWeight,Title/JSON'
USER_AGENT = 'Mozilla/5.0'
