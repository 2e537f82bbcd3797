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

from importlib.resources import files

import pandas as pd
from tabulate import tabulate

from pysolventswap.antoine import AntoineSegment
from pysolventswap.component import Component, ComponentRepository


def _read_csv(name):
    with files('pysolventswap.library').joinpath(name).open('r', encoding='utf-8') as f:
        return pd.read_csv(f, dtype={'CAS': str})


class solvent_library:
    """ Bundled property and Antoine data (NIST Webbook) for common process solvents
        Components are looked up by library key (eg 'ACETONE'), name or CAS number
    """
    def __init__(self):
        self.df = _read_csv('solvents.csv')
        self.antoine_df = _read_csv('antoine.csv')
        self.property_list = ['Name', 'CAS', 'MW', 'Density', 'Tb_K']
        self.components = self.df['Component'].tolist()
        self.names = self.df['Name'].tolist()
        self.cas_numbers = self.df['CAS'].tolist()
        self._keys = {}
        for comp, name, cas in zip(self.components, self.names, self.cas_numbers):
            self._keys[comp.upper()] = comp
            self._keys[name.upper()] = comp
            self._keys[cas.strip()] = comp

    def key(self, comp: str) -> str:
        """ Returns the library key for a key, name or CAS number"""
        try:
            return self._keys[comp.strip().upper()]
        except KeyError:
            raise KeyError(f"'{comp}' not in library. Choose from {', '.join(self.components)}") from None

    def prop(self, comp: str, prop: str):
        """ Returns a single property, or a list of all of them if prop = 'ALL'
            Properties: Name, CAS, MW, Density, Tb_K
        """
        row = self.df[self.df['Component'] == self.key(comp)].iloc[0]
        if prop.upper() == 'ALL':
            return [row[p] for p in self.property_list]
        props = {p.upper(): p for p in self.property_list}
        if prop.upper() not in props:
            raise KeyError(f"Property '{prop}' not in library. Choose from {', '.join(self.property_list)}")
        return row[props[prop.upper()]]

    def segments(self, comp: str) -> tuple:
        rows = self.antoine_df[self.antoine_df['Component'] == self.key(comp)]
        return tuple(
            AntoineSegment(a=float(r.A), b=float(r.B), c=float(r.C), tmin=float(r.Tmin_K), tmax=float(r.Tmax_K))
            for r in rows.itertuples(index=False)
        )

    def component(self, comp: str) -> Component:
        """ Returns a Component built from library data"""
        name, cas, mw, density, _ = self.prop(comp, 'ALL')
        return Component(name=name, cas=cas, mw=float(mw), density=float(density), segments=self.segments(comp))

    def repository(self) -> ComponentRepository:
        """ Returns a ComponentRepository pre-loaded with every library component"""
        return ComponentRepository([self.component(c) for c in self.components])

    def table(self) -> str:
        return tabulate(self.df, headers='keys', showindex=False)


solvents = solvent_library()
