# -*- coding: utf-8 -*-
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Final, Pattern

TRAINING_NUMBER_REGEX: Final[Pattern[str]] = re.compile(r"^[^/]+/[^/]+/[^/]+/[^/]+$")
"""Validates training numbers of the form ``ORG/SPECIALTY/REFERENCE/SUFFIX``."""


@dataclass(frozen=True, slots=True)
class TrainingNumber:
    """Training number (NTN/DRN): ORG/SPECIALTY/REFERENCE/SUFFIX"""

    value: str
    separator: ClassVar[str] = "/"

    @staticmethod
    def assemble(parent_organization: str, specialty: str, reference_number: str, suffix: str) -> "TrainingNumber":
        return TrainingNumber(
            TrainingNumber.separator.join((parent_organization, specialty, reference_number, suffix))
        )

    @property
    def parts(self) -> tuple[str, ...]:
        return tuple(self.value.split(self.separator))

    def is_well_formed(self) -> bool:
        return TRAINING_NUMBER_REGEX.fullmatch(self.value) is not None

    def __str__(self) -> str:
        return self.value


__all__ = ["TRAINING_NUMBER_REGEX", "TrainingNumber"]
