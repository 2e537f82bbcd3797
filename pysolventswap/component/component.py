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

import math
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from loguru import logger

from pysolventswap.antoine import AntoineSegment, segment_coverage


class ComponentNotAvailable(LookupError):
    """No cached, fetched or manually supplied record satisfies the component contract"""


@dataclass(frozen=True)
class Component:
    """ Pure component data consumed by the VLE and solvent swap calculations

        name: Component name
        cas: CAS registry number, used as the lookup key
        mw: Molecular weight (g/mol)
        density: Relative density (water = 1) or g/mL. None if unknown
        segments: Antoine correlation segments, in source order
    """
    name: str
    cas: str
    mw: float
    density: Optional[float] = None
    segments: Tuple[AntoineSegment, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence of segments but store them immutably
        object.__setattr__(self, 'segments', tuple(self.segments))
        object.__setattr__(self, 'cas', str(self.cas).strip())

    @property
    def tmin(self) -> float:
        return segment_coverage(self.segments)[0]

    @property
    def tmax(self) -> float:
        return segment_coverage(self.segments)[1]

    def with_updates(self, **changes) -> 'Component':
        return replace(self, **changes)


def check_component(component: Component, cas: Optional[str] = None) -> List[str]:
    """ Returns a list of reasons the component cannot be used. Empty list if complete
        cas: Expected CAS number. Not checked if None
    """
    problems = []
    if cas is not None and component.cas.strip() != cas.strip():
        problems.append(f"CAS mismatch: expected {cas.strip()}, got {component.cas}")
    if not component.name or not component.name.strip():
        problems.append("name is blank")
    if component.mw is None or not math.isfinite(component.mw) or component.mw <= 0:
        problems.append(f"molecular weight must be finite and > 0, got {component.mw}")
    if component.density is None or not math.isfinite(component.density) or component.density <= 0:
        problems.append(f"density must be finite and > 0, got {component.density}")
    if len(component.segments) == 0:
        problems.append("no Antoine segments")
    return problems


def is_complete(component: Component, cas: Optional[str] = None) -> bool:
    return len(check_component(component, cas)) == 0


def require_segments(component: Component) -> None:
    if len(component.segments) == 0:
        raise ValueError(f"Component '{component.name}' has no Antoine segments")


class ComponentRepository:
    """ In-memory component cache keyed by CAS number, with upsert semantics"""
    def __init__(self, components: Sequence[Component] = ()):
        self._store: Dict[str, Component] = {}
        for comp in components:
            self.save(comp)

    def find(self, cas: str) -> Optional[Component]:
        return self._store.get(cas.strip())

    def save(self, component: Component) -> None:
        self._store[component.cas] = component

    def __contains__(self, cas) -> bool:
        return cas.strip() in self._store

    def __len__(self) -> int:
        return len(self._store)


def resolve_component(
    cas: str,
    repository: Optional[ComponentRepository] = None,
    fetcher: Optional[Callable[[str], Optional[Component]]] = None,
    manual: Optional[Callable[[str, Optional[Component]], Optional[Component]]] = None,
) -> Component:
    """ Returns a complete Component for a CAS number
        Tries, in order, the repository cache, the fetcher (eg webbook.fetch_component) and
        finally the manual callback, which receives the CAS number and any partial fetched
        record as a seed. Complete fetched or manual records are saved back to the repository

        cas: CAS registry number
        repository: ComponentRepository cache. Optional
        fetcher: Callable(cas) -> Component or None. Exceptions are logged and treated as a miss
        manual: Callable(cas, seed) -> Component or None (None meaning cancelled)
    """
    key = cas.strip()
    if not key:
        raise ValueError("CAS number must not be blank")

    if repository is not None:
        cached = repository.find(key)
        if cached is not None:
            return cached

    fetched = None
    if fetcher is not None:
        try:
            fetched = fetcher(key)
        except Exception as e:
            logger.warning("Component fetch failed for CAS {}: {}", key, e)
            fetched = None
        if fetched is not None:
            problems = check_component(fetched, key)
            if not problems:
                if repository is not None:
                    repository.save(fetched)
                return fetched
            logger.info("Fetched record for CAS {} is incomplete: {}", key, '; '.join(problems))

    if manual is None:
        raise ComponentNotAvailable(f"Component not available for CAS {key}")
    entered = manual(key, fetched)
    if entered is None:
        raise ComponentNotAvailable(f"Component not available: manual input cancelled for CAS {key}")
    problems = check_component(entered, key)
    if problems:
        raise ComponentNotAvailable(f"Manual input for CAS {key} is incomplete: {'; '.join(problems)}")
    if repository is not None:
        repository.save(entered)
    return entered
