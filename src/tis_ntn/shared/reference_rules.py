# -*- coding: utf-8 -*-
from __future__ import annotations

"""Single source of truth for GMC/GDC reference number rules."""

import re
from typing import Final, Optional, Pattern

GMC_NUMBER_REGEX: Final[Pattern[str]] = re.compile(r"[0-9]{7}")
"""A GMC number is exactly seven ASCII digits."""

GDC_NUMBER_REGEX: Final[Pattern[str]] = re.compile(r"[0-9]{5}.*")
"""A GDC number starts with five ASCII digits; anything but a line break may follow."""


def is_valid_gmc_number(value: Optional[str]) -> bool:
    return value is not None and GMC_NUMBER_REGEX.fullmatch(value) is not None


def is_valid_gdc_number(value: Optional[str]) -> bool:
    return value is not None and GDC_NUMBER_REGEX.fullmatch(value) is not None


def has_valid_reference_number(gmc_number: Optional[str], gdc_number: Optional[str]) -> bool:
    """Return True when either the GMC or the GDC number can be used."""

    return is_valid_gmc_number(gmc_number) or is_valid_gdc_number(gdc_number)


def resolve_reference_number(gmc_number: Optional[str], gdc_number: Optional[str]) -> Optional[str]:
    """Pick the GMC number when it is valid, otherwise fall back to the GDC number."""

    return gmc_number if is_valid_gmc_number(gmc_number) else gdc_number


__all__ = [
    "GDC_NUMBER_REGEX",
    "GMC_NUMBER_REGEX",
    "has_valid_reference_number",
    "is_valid_gdc_number",
    "is_valid_gmc_number",
    "resolve_reference_number",
]
