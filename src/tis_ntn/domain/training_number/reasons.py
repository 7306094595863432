# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Dict


class ReasonCode(StrEnum):
    OK = "OK"
    PERSONAL_DETAILS_NOT_FOUND = "PERSONAL_DETAILS_NOT_FOUND"
    REFERENCE_NUMBER_INVALID = "REFERENCE_NUMBER_INVALID"
    PROGRAMME_NUMBER_BLANK = "PROGRAMME_NUMBER_BLANK"
    PROGRAMME_NAME_BLANK = "PROGRAMME_NAME_BLANK"
    FOUNDATION_PROGRAMME_EXCLUDED = "FOUNDATION_PROGRAMME_EXCLUDED"
    NO_VALID_CURRICULA = "NO_VALID_CURRICULA"
    TRAINING_PATHWAY_MISSING = "TRAINING_PATHWAY_MISSING"


_MESSAGES: Dict[ReasonCode, str] = {
    ReasonCode.OK: "Training number can be generated.",
    ReasonCode.PERSONAL_DETAILS_NOT_FOUND: "Skipping training number population as personal details not available.",
    ReasonCode.REFERENCE_NUMBER_INVALID: "Skipping training number population as reference number not valid.",
    ReasonCode.PROGRAMME_NUMBER_BLANK: "Skipping training number population as programme number is blank.",
    ReasonCode.PROGRAMME_NAME_BLANK: "Skipping training number population as programme name is blank.",
    ReasonCode.FOUNDATION_PROGRAMME_EXCLUDED: "Skipping training number population as programme name is excluded.",
    ReasonCode.NO_VALID_CURRICULA: "Skipping training number population as there are no valid curricula.",
    ReasonCode.TRAINING_PATHWAY_MISSING: "Unable to generate training number as training pathway was null.",
}


@dataclass(frozen=True, slots=True)
class LocalizedReason:
    code: ReasonCode
    message: str


@dataclass(frozen=True, slots=True)
class RuleResult:
    ok: bool
    reason: LocalizedReason | None = None

    @property
    def code(self) -> ReasonCode | None:
        return self.reason.code if self.reason else None

    @property
    def message(self) -> str | None:
        return self.reason.message if self.reason else None


EligibilityResult = RuleResult
"""Outcome of the whole eligibility gate: ``ok`` plus the first failing reason."""


def build_reason(code: ReasonCode) -> LocalizedReason:
    return LocalizedReason(code=code, message=_MESSAGES[code])


__all__ = [
    "EligibilityResult",
    "LocalizedReason",
    "ReasonCode",
    "RuleResult",
    "build_reason",
]
