# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Optional


@dataclass(frozen=True, slots=True)
class Identity:
    """Professional reference numbers taken from a trainee's personal details."""

    gmc_number: Optional[str] = None
    gdc_number: Optional[str] = None


@dataclass(slots=True)
class CurriculumRecord:
    specialty_code: Optional[str] = None
    sub_type: Optional[str] = None  # 'MEDICAL_CURRICULUM' | 'SUB_SPECIALTY' | ...
    name: Optional[str] = None
    valid_from: Optional[date] = None
    valid_to: Optional[date] = None


@dataclass(slots=True)
class ProgrammeMembershipRecord:
    """A trainee's membership of a programme, owned by the profile store.

    Only ``training_number`` is written by the generator; ``signature`` may be
    replaced by the signing collaborator when the record is re-signed.
    """

    tis_id: Optional[str] = None
    programme_number: Optional[str] = None
    programme_name: Optional[str] = None
    managing_deanery: Optional[str] = None
    training_pathway: Optional[str] = None
    membership_type: Optional[str] = None
    start_date: Optional[date] = None
    curricula: List[CurriculumRecord] = field(default_factory=list)
    signature: Optional[Any] = None
    training_number: Optional[str] = None


__all__ = ["CurriculumRecord", "Identity", "ProgrammeMembershipRecord"]
