# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
from typing import Final, Sequence

from tis_ntn.domain.trainee.entities import CurriculumRecord

LOGGER: Final[logging.Logger] = logging.getLogger("tis_ntn.training_number")

SUB_SPECIALTY: Final[str] = "SUB_SPECIALTY"
ACADEMIC_FOUNDATION_NAME: Final[str] = "AFT"
FOUNDATION_SUFFIX: Final[str] = "-FND"


def build_specialty_concat(sorted_curricula: Sequence[CurriculumRecord]) -> str:
    """Join the specialty codes of already filtered and sorted curricula.

    Sub-specialties are dot separated, other specialties dash separated. When
    the first curriculum is the academic foundation programme the segment is
    fixed to ``<code>-FND`` and the remaining curricula are ignored.
    """

    parts: list[str] = []
    for index, curriculum in enumerate(sorted_curricula):
        code = curriculum.specialty_code or ""
        if index == 0:
            LOGGER.debug("Using '%s' as first specialty.", code)
            parts.append(code)
            if curriculum.name == ACADEMIC_FOUNDATION_NAME:
                parts.append(FOUNDATION_SUFFIX)
                break
            continue

        if curriculum.sub_type == SUB_SPECIALTY:
            LOGGER.debug("Appending sub-specialty '%s'.", code)
            parts.append(".")
        else:
            LOGGER.debug("Appending specialty '%s'.", code)
            parts.append("-")
        parts.append(code)

    return "".join(parts)


__all__ = ["SUB_SPECIALTY", "build_specialty_concat"]
