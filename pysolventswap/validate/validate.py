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

from pysolventswap.classes import class_dic

def validate_methods(names, variables):
    """ Resolves method arguments supplied as strings to their Enum members.
        names: List of class_dic keys, eg ['amethod', 'bpmethod']
        variables: Matching list of Enum members or their (case insensitive) names
    """
    variables = list(variables)
    for m, method in enumerate(names):
        if type(variables[m]) == str:
            try:
                variables[m] = class_dic[method][variables[m].upper()]
            except KeyError:
                choices = ', '.join(member.name for member in class_dic[method])
                raise ValueError(f"An incorrect {method} was specified: '{variables[m]}'. Choose from {choices}") from None
        elif not isinstance(variables[m], class_dic[method]):
            raise ValueError(f"{method} must be a {class_dic[method].__name__} or its name, got {variables[m]!r}")
    if len(variables) == 1:
        return variables[0]
    else:
        return variables
