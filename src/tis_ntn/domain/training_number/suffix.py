# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Final, Mapping, Optional, Sequence

from tis_ntn.domain.trainee.entities import CurriculumRecord

PATHWAY_SUFFIXES: Final[Mapping[str, str]] = {"CCT": "C", "CESR": "CP"}
ACADEMIC_SPECIALTY_CODE: Final[str] = "ACA"


def resolve_suffix(training_pathway: Optional[str], sorted_curricula: Sequence[CurriculumRecord]) -> str:
    """Map the training pathway to a suffix, falling back to the first specialty."""

    suffix = PATHWAY_SUFFIXES.get(training_pathway) if training_pathway is not None else None
    if suffix is not None:
        return suffix
    # callers guarantee at least one current curriculum
    first_code = sorted_curricula[0].specialty_code
    return "C" if first_code == ACADEMIC_SPECIALTY_CODE else "D"


__all__ = ["PATHWAY_SUFFIXES", "resolve_suffix"]
