# -*- coding: utf-8 -*-
from __future__ import annotations

"""Single source of truth for managing deanery to parent organization codes."""

from types import MappingProxyType
from typing import Final, Mapping, Optional

from tis_ntn.domain.shared.errors import unmapped_region

LONG_FORM_PREFIX: Final[str] = "Health Education England "

MILITARY_MEMBERSHIP_TYPE: Final[str] = "MILITARY"
MILITARY_ORGANIZATION_CODE: Final[str] = "TSD"

SOUTH_WEST: Final[str] = "South West"
SOUTH_WEST_PENINSULA_PREFIX: Final[str] = "SWP"
SOUTH_WEST_PENINSULA_CODE: Final[str] = "PEN"

_SHORT_FORM_CODES: Final[Mapping[str, str]] = {
    "East Midlands": "EMD",
    "East of England": "EAN",
    "Kent, Surrey and Sussex": "KSS",
    "North Central and East London": "LDN",
    "South London": "LDN",
    "North West London": "LDN",
    "North East": "NTH",
    "North West": "NWE",
    "Thames Valley": "OXF",
    "Wessex": "WES",
    "West Midlands": "WMD",
    "Yorkshire and the Humber": "YHD",
    "Yorkshire and The Humber": "YHD",
}

_STANDALONE_CODES: Final[Mapping[str, str]] = {
    "Defence Postgraduate Medical Deanery": MILITARY_ORGANIZATION_CODE,
    "London LETBs": "LDN",
    "Severn Deanery": "SEV",
    "South West Peninsula Deanery": SOUTH_WEST_PENINSULA_CODE,
}


def _build_table() -> Mapping[str, str]:
    table: dict[str, str] = dict(_STANDALONE_CODES)
    for name, code in _SHORT_FORM_CODES.items():
        table[name] = code
        table[LONG_FORM_PREFIX + name] = code
    return MappingProxyType(table)


DEANERY_CODE_MAP: Final[Mapping[str, str]] = _build_table()
"""Exact, case-sensitive deanery name → parent organization code.

Every regional name is accepted in its short form (``"North East"``) and in
its long form (``"Health Education England North East"``).
"""

SOUTH_WEST_NAMES: Final[frozenset[str]] = frozenset({SOUTH_WEST, LONG_FORM_PREFIX + SOUTH_WEST})


def south_west_code(programme_number: str) -> str:
    """South West programmes are split by programme number prefix."""

    if programme_number.startswith(SOUTH_WEST_PENINSULA_PREFIX):
        return SOUTH_WEST_PENINSULA_CODE
    return programme_number[:3]


def resolve_parent_organization(
    managing_deanery: Optional[str],
    programme_number: Optional[str],
    membership_type: Optional[str] = None,
    *,
    military_override: bool = False,
) -> str:
    """Return the three letter parent organization code for a programme membership.

    Raises:
        UnmappedRegion: when the deanery has no code.
    """

    if military_override and membership_type == MILITARY_MEMBERSHIP_TYPE:
        return MILITARY_ORGANIZATION_CODE

    if managing_deanery in SOUTH_WEST_NAMES and programme_number:
        return south_west_code(programme_number)

    code = DEANERY_CODE_MAP.get(managing_deanery) if managing_deanery is not None else None
    if code is None:
        raise unmapped_region(managing_deanery)
    return code


__all__ = [
    "DEANERY_CODE_MAP",
    "LONG_FORM_PREFIX",
    "MILITARY_MEMBERSHIP_TYPE",
    "MILITARY_ORGANIZATION_CODE",
    "SOUTH_WEST_NAMES",
    "resolve_parent_organization",
    "south_west_code",
]
