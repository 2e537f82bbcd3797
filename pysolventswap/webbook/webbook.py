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

import html
import math
import re
from typing import List, Optional

import requests
from loguru import logger

from pysolventswap.antoine import AntoineSegment
from pysolventswap.component import Component
from pysolventswap.constants import HTTP_TIMEOUT, WEBBOOK_URL, PUBCHEM_URL, USER_AGENT

_ROW_RE = re.compile(r'<tr class="exp">(.+?)</tr>', re.DOTALL)
_NUM_RE = re.compile(r'-?\d+(?:\.\d*)?')
_TITLE_RE = re.compile(r'<title>(.+?)</title>', re.DOTALL)


def webbook_antoine_html(cas: str, session: Optional[requests.Session] = None) -> str:
    """ Returns the NIST Chemistry Webbook phase change page holding Antoine parameters"""
    getter = session if session is not None else requests
    params = {'ID': cas.strip(), 'Units': 'SI', 'Mask': '4', 'Type': 'ANTOINE'}
    resp = getter.get(WEBBOOK_URL, params=params, headers={'User-Agent': USER_AGENT}, timeout=HTTP_TIMEOUT)
    resp.raise_for_status()
    return resp.text


def parse_title(page: str) -> Optional[str]:
    match = _TITLE_RE.search(page)
    if match is None:
        return None
    return html.unescape(match.group(1)).strip()


def parse_antoine_rows(page: str) -> List[AntoineSegment]:
    """ Returns Antoine segments from the experimental rows of a Webbook Antoine table
        Each row reads: T range (K), A, B, C, reference
    """
    segments = []
    for match in _ROW_RE.finditer(page):
        row = match.group(1)
        nums = [float(n) for n in _NUM_RE.findall(row)]
        if len(nums) < 5:
            raise ValueError(f"Not enough numeric values in Antoine row: {row}")
        tmin, tmax, a, b, c = nums[:5]
        segments.append(AntoineSegment(a=a, b=b, c=c, tmin=tmin, tmax=tmax))
    return segments


def pubchem_mw(cas: str, session: Optional[requests.Session] = None) -> Optional[float]:
    """ Returns molecular weight (g/mol) from PubChem PUG-REST, or None if not listed"""
    getter = session if session is not None else requests
    resp = getter.get(PUBCHEM_URL.format(cas.strip()), headers={'User-Agent': USER_AGENT}, timeout=HTTP_TIMEOUT)
    if resp.status_code == 404:
        return None
    resp.raise_for_status()
    props = resp.json().get('PropertyTable', {}).get('Properties', [])
    if not props or 'MolecularWeight' not in props[0]:
        return None
    return float(props[0]['MolecularWeight'])


def fetch_component(cas: str, session: Optional[requests.Session] = None) -> Optional[Component]:
    """ Returns a Component for a CAS number from the NIST Webbook (name, Antoine segments) and
        PubChem (molecular weight). Density is not published by either and is left as None,
        so the result normally needs completing (see component.resolve_component)
        Returns None if the Webbook has no record of the compound
    """
    key = cas.strip()
    page = webbook_antoine_html(key, session)
    name = parse_title(page)
    segments = parse_antoine_rows(page)
    if not segments and (name is None or 'not found' in name.lower()):
        logger.info("No Webbook record for CAS {}", key)
        return None

    try:
        mw = pubchem_mw(key, session)
    except (requests.RequestException, ValueError) as e:
        logger.warning("PubChem molecular weight lookup failed for CAS {}: {}", key, e)
        mw = None
    logger.debug("Fetched {} (CAS {}): {} Antoine segment(s), MW {}", name, key, len(segments), mw)
    return Component(
        name=name or '',
        cas=key,
        mw=mw if mw is not None else math.nan,
        density=None,
        segments=segments,
    )
