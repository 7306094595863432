# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol, Sequence

from tis_ntn.domain.trainee.entities import Identity, ProgrammeMembershipRecord
from tis_ntn.domain.training_number.curricula import filter_and_sort
from tis_ntn.domain.training_number.policy import GeneratorPolicy
from tis_ntn.domain.training_number.reasons import (
    EligibilityResult,
    ReasonCode,
    RuleResult,
    build_reason,
)
from tis_ntn.shared.reference_rules import has_valid_reference_number

EXCLUDED_PROGRAMME_KEYWORD = "foundation"


@dataclass(frozen=True, slots=True)
class EligibilityContext:
    identity: Optional[Identity]
    membership: ProgrammeMembershipRecord
    anchor: date
    policy: GeneratorPolicy


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class Rule(Protocol):
    def check(self, context: EligibilityContext) -> RuleResult:  # pragma: no cover - simple protocol
        ...


@dataclass(slots=True)
class PersonalDetailsPresentRule:
    def check(self, context: EligibilityContext) -> RuleResult:
        if context.identity is not None:
            return RuleResult(True)
        return RuleResult(False, build_reason(ReasonCode.PERSONAL_DETAILS_NOT_FOUND))


@dataclass(slots=True)
class ReferenceNumberRule:
    def check(self, context: EligibilityContext) -> RuleResult:
        identity = context.identity
        if identity is not None and has_valid_reference_number(identity.gmc_number, identity.gdc_number):
            return RuleResult(True)
        return RuleResult(False, build_reason(ReasonCode.REFERENCE_NUMBER_INVALID))


@dataclass(slots=True)
class ProgrammeNumberRule:
    def check(self, context: EligibilityContext) -> RuleResult:
        if not _is_blank(context.membership.programme_number):
            return RuleResult(True)
        return RuleResult(False, build_reason(ReasonCode.PROGRAMME_NUMBER_BLANK))


@dataclass(slots=True)
class ProgrammeNameRule:
    def check(self, context: EligibilityContext) -> RuleResult:
        if not _is_blank(context.membership.programme_name):
            return RuleResult(True)
        return RuleResult(False, build_reason(ReasonCode.PROGRAMME_NAME_BLANK))


@dataclass(slots=True)
class FoundationProgrammeRule:
    def check(self, context: EligibilityContext) -> RuleResult:
        # Foundation programmes never get a training number
        name = context.membership.programme_name or ""
        if EXCLUDED_PROGRAMME_KEYWORD in name.lower():
            return RuleResult(False, build_reason(ReasonCode.FOUNDATION_PROGRAMME_EXCLUDED))
        return RuleResult(True)


@dataclass(slots=True)
class CurrentCurriculaRule:
    def check(self, context: EligibilityContext) -> RuleResult:
        current = filter_and_sort(
            context.membership.curricula,
            context.anchor,
            validity=context.policy.validity,
            dedupe=context.policy.dedupe,
        )
        if current:
            return RuleResult(True)
        return RuleResult(False, build_reason(ReasonCode.NO_VALID_CURRICULA))


@dataclass(slots=True)
class TrainingPathwayRule:
    def check(self, context: EligibilityContext) -> RuleResult:
        if context.membership.training_pathway is not None:
            return RuleResult(True)
        return RuleResult(False, build_reason(ReasonCode.TRAINING_PATHWAY_MISSING))


DEFAULT_RULES: tuple[Rule, ...] = (
    PersonalDetailsPresentRule(),
    ReferenceNumberRule(),
    ProgrammeNumberRule(),
    ProgrammeNameRule(),
    FoundationProgrammeRule(),
    CurrentCurriculaRule(),
    TrainingPathwayRule(),
)


class EligibilityGate:
    """Ordered AND of preconditions; the first failing rule decides the reason."""

    def __init__(self, rules: Sequence[Rule] | None = None) -> None:
        self.rules: Sequence[Rule] = rules or DEFAULT_RULES

    def is_eligible(
        self,
        identity: Optional[Identity],
        membership: ProgrammeMembershipRecord,
        anchor: date,
        policy: GeneratorPolicy | None = None,
    ) -> EligibilityResult:
        context = EligibilityContext(identity, membership, anchor, policy or GeneratorPolicy())
        for rule in self.rules:
            result = rule.check(context)
            if not result.ok:
                return result
        return RuleResult(True)


__all__ = [
    "CurrentCurriculaRule",
    "DEFAULT_RULES",
    "EligibilityContext",
    "EligibilityGate",
    "FoundationProgrammeRule",
    "PersonalDetailsPresentRule",
    "ProgrammeNameRule",
    "ProgrammeNumberRule",
    "ReferenceNumberRule",
    "Rule",
    "TrainingPathwayRule",
]
