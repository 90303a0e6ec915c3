"""
Runway surface condition code tables.

Decodes the four trailing groups of a runway state report (R14L/290161):
deposit type, extent of contamination, depth of deposit and friction.
All tables are read-only and shared by every parse.
"""

from types import MappingProxyType
from typing import Mapping, Optional


def _depth_codes() -> Mapping[str, str]:
    codes = {'00': 'less than 1 mm'}
    for mm in range(1, 91):
        codes[f'{mm:02d}'] = f'{mm} mm'
    codes.update({
        '92': '10 cm',
        '93': '15 cm',
        '94': '20 cm',
        '95': '25 cm',
        '96': '30 cm',
        '97': '35 cm',
        '98': '40 cm or more',
        '99': 'runway not operational',
        '//': 'depth not significant or not measurable',
    })
    return MappingProxyType(codes)


def _friction_codes() -> Mapping[str, str]:
    codes = {}
    for coefficient in range(1, 91):
        codes[f'{coefficient:02d}'] = f'friction coefficient 0.{coefficient:02d}'
    codes.update({
        '91': 'braking action poor',
        '92': 'braking action medium to poor',
        '93': 'braking action medium',
        '94': 'braking action medium to good',
        '95': 'braking action good',
        '99': 'unreliable',
        '//': 'braking action not reported',
    })
    return MappingProxyType(codes)


DEPOSIT_TYPES: Mapping[str, str] = MappingProxyType({
    '0': 'clear and dry',
    '1': 'damp',
    '2': 'wet or water patches',
    '3': 'rime or frost covered',
    '4': 'dry snow',
    '5': 'wet snow',
    '6': 'slush',
    '7': 'ice',
    '8': 'compacted or rolled snow',
    '9': 'frozen ruts or ridges',
    '/': 'type of deposit not reported',
})

CONTAMINATION_EXTENT: Mapping[str, str] = MappingProxyType({
    '1': '10% or less',
    '2': '11% to 25%',
    '5': '26% to 50%',
    '9': '51% to 100%',
    '/': 'extent not reported',
})

DEPOSIT_DEPTH: Mapping[str, str] = _depth_codes()

FRICTION: Mapping[str, str] = _friction_codes()


def lookup(table: Mapping[str, str], code: Optional[str]) -> Optional[str]:
    """Return the description for code, or None when the table has no entry."""
    if code is None:
        return None
    return table.get(code)
