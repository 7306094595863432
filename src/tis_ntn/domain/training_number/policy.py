# -*- coding: utf-8 -*-
"""Policy knobs distinguishing the stored-profile and profile-view generators."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import Optional


class AnchorPolicy(StrEnum):
    TODAY = "today"
    LATER_OF_TODAY_AND_START = "later_of_today_and_start"


class CurriculumValidity(StrEnum):
    STRICT_OPEN = "strict_open"
    INCLUSIVE_CLOSED = "inclusive_closed"


@dataclass(frozen=True, slots=True)
class GeneratorPolicy:
    """Configuration for a single training number generation run."""

    anchor: AnchorPolicy = AnchorPolicy.TODAY
    validity: CurriculumValidity = CurriculumValidity.STRICT_OPEN
    dedupe: bool = False
    military_override: bool = False
    resign: bool = False

    @classmethod
    def stored_profile(cls) -> "GeneratorPolicy":
        """Policy used when generating NTNs for persisted trainee profiles."""

        return cls()

    @classmethod
    def profile_view(cls) -> "GeneratorPolicy":
        """Policy used when populating training numbers on a presented profile."""

        return cls(
            anchor=AnchorPolicy.LATER_OF_TODAY_AND_START,
            validity=CurriculumValidity.INCLUSIVE_CLOSED,
            dedupe=True,
            military_override=True,
            resign=True,
        )

    def anchor_date(self, today: date, start_date: Optional[date]) -> date:
        """Date the curricula validity windows are evaluated against."""

        if self.anchor is AnchorPolicy.LATER_OF_TODAY_AND_START and start_date is not None:
            return max(today, start_date)
        return today


__all__ = ["AnchorPolicy", "CurriculumValidity", "GeneratorPolicy"]
