# -*- coding: utf-8 -*-
from __future__ import annotations

from datetime import date
from typing import Iterable, List

from tis_ntn.domain.trainee.entities import CurriculumRecord
from tis_ntn.domain.training_number.policy import CurriculumValidity


def has_specialty_code(curriculum: CurriculumRecord) -> bool:
    code = curriculum.specialty_code
    return code is not None and bool(code.strip())


def is_valid_on(curriculum: CurriculumRecord, anchor: date, validity: CurriculumValidity) -> bool:
    """Check the curriculum validity window against the anchor date.

    A curriculum without both bounds is never valid.
    """

    valid_from, valid_to = curriculum.valid_from, curriculum.valid_to
    if valid_from is None or valid_to is None:
        return False
    if validity is CurriculumValidity.INCLUSIVE_CLOSED:
        return valid_from <= anchor <= valid_to
    return valid_from < anchor < valid_to


def sort_curricula(curricula: Iterable[CurriculumRecord]) -> List[CurriculumRecord]:
    """Order curricula by sub type ascending, then specialty code descending.

    Two stable passes keep records with equal keys in input order. A missing
    sub type sorts before any named one.
    """

    ordered = sorted(curricula, key=lambda c: c.specialty_code or "", reverse=True)
    ordered.sort(key=lambda c: c.sub_type or "")
    return ordered


def dedupe_specialties(curricula: Iterable[CurriculumRecord]) -> List[CurriculumRecord]:
    """Keep the first curriculum seen for each specialty code."""

    seen: set[str | None] = set()
    unique: List[CurriculumRecord] = []
    for curriculum in curricula:
        if curriculum.specialty_code in seen:
            continue
        seen.add(curriculum.specialty_code)
        unique.append(curriculum)
    return unique


def filter_and_sort(
    curricula: Iterable[CurriculumRecord],
    anchor: date,
    *,
    validity: CurriculumValidity = CurriculumValidity.STRICT_OPEN,
    dedupe: bool = False,
) -> List[CurriculumRecord]:
    """Return the curricula valid at ``anchor`` in training number order."""

    current = [
        c for c in curricula if has_specialty_code(c) and is_valid_on(c, anchor, validity)
    ]
    ordered = sort_curricula(current)
    if dedupe:
        ordered = dedupe_specialties(ordered)
    return ordered


__all__ = [
    "dedupe_specialties",
    "filter_and_sort",
    "has_specialty_code",
    "is_valid_on",
    "sort_curricula",
]
