# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence

from tis_ntn.domain.shared.errors import TrainingNumberError
from tis_ntn.domain.trainee.entities import Identity, ProgrammeMembershipRecord
from tis_ntn.domain.training_number.curricula import filter_and_sort
from tis_ntn.domain.training_number.policy import GeneratorPolicy
from tis_ntn.domain.training_number.reasons import ReasonCode
from tis_ntn.domain.training_number.rules import EligibilityGate
from tis_ntn.domain.training_number.specialty import build_specialty_concat
from tis_ntn.domain.training_number.suffix import resolve_suffix
from tis_ntn.domain.training_number.value_objects import TrainingNumber
from tis_ntn.shared.deanery_rules import resolve_parent_organization
from tis_ntn.shared.reference_rules import resolve_reference_number


@dataclass(slots=True)
class PopulationOutcome:
    membership: ProgrammeMembershipRecord
    training_number: str | None
    reason: ReasonCode | None
    error: TrainingNumberError | None = None

    @property
    def populated(self) -> bool:
        return self.training_number is not None

    @property
    def failed(self) -> bool:
        return self.error is not None


def raise_for_failures(outcomes: Sequence[PopulationOutcome]) -> None:
    """Raise every fatal error collected while populating a list of memberships."""

    errors = [outcome.error for outcome in outcomes if outcome.error is not None]
    if errors:
        raise ExceptionGroup(f"training number population failed for {len(errors)} membership(s)", errors)


class TrainingNumberEngine:
    """Computes training numbers and writes them onto programme memberships in place."""

    def __init__(self, policy: GeneratorPolicy | None = None, gate: EligibilityGate | None = None) -> None:
        self.policy = policy or GeneratorPolicy()
        self.gate = gate or EligibilityGate()

    def populate(
        self,
        identity: Optional[Identity],
        memberships: Iterable[ProgrammeMembershipRecord],
        *,
        today: date,
    ) -> List[PopulationOutcome]:
        """Populate every membership, then raise the fatal errors as an ``ExceptionGroup``.

        A membership that fails keeps its previous ``training_number``; the
        remaining memberships are still processed.
        """

        outcomes: List[PopulationOutcome] = []
        for membership in memberships:
            try:
                outcomes.append(self.populate_one(identity, membership, today=today))
            except TrainingNumberError as err:
                outcomes.append(PopulationOutcome(membership, None, None, err))
        raise_for_failures(outcomes)
        return outcomes

    def populate_one(
        self,
        identity: Optional[Identity],
        membership: ProgrammeMembershipRecord,
        *,
        today: date,
    ) -> PopulationOutcome:
        anchor = self.policy.anchor_date(today, membership.start_date)
        verdict = self.gate.is_eligible(identity, membership, anchor, self.policy)
        if not verdict.ok or identity is None:
            return PopulationOutcome(membership, None, verdict.code)

        training_number = self.compute(identity, membership, anchor)
        membership.training_number = training_number.value
        return PopulationOutcome(membership, training_number.value, None)

    def compute(
        self,
        identity: Identity,
        membership: ProgrammeMembershipRecord,
        anchor: date,
    ) -> TrainingNumber:
        """Build the training number for a membership that passed the gate.

        Raises:
            UnmappedRegion: when the managing deanery has no parent organization.
        """

        policy = self.policy
        parent_organization = resolve_parent_organization(
            membership.managing_deanery,
            membership.programme_number,
            membership.membership_type,
            military_override=policy.military_override,
        )
        curricula = filter_and_sort(
            membership.curricula,
            anchor,
            validity=policy.validity,
            dedupe=policy.dedupe,
        )
        specialty = build_specialty_concat(curricula)
        reference_number = resolve_reference_number(identity.gmc_number, identity.gdc_number)
        suffix = resolve_suffix(membership.training_pathway, curricula)
        return TrainingNumber.assemble(parent_organization, specialty, reference_number or "", suffix)


__all__ = ["PopulationOutcome", "TrainingNumberEngine", "raise_for_failures"]
