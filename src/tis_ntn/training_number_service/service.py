# -*- coding: utf-8 -*-
"""Application service populating training numbers on a trainee's programme memberships."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Mapping, Optional

from tis_ntn.core.clock import Clock
from tis_ntn.domain.shared.errors import SigningFailed, TrainingNumberError, signing_failed
from tis_ntn.domain.trainee.entities import Identity, ProgrammeMembershipRecord
from tis_ntn.domain.training_number.engine import PopulationOutcome, TrainingNumberEngine, raise_for_failures
from tis_ntn.domain.training_number.policy import GeneratorPolicy
from tis_ntn.domain.training_number.reasons import ReasonCode, build_reason
from tis_ntn.shared.reference_rules import resolve_reference_number

from .types import HashFunc, LoggerLike, MeterLike, Signer

DEFAULT_SKIP_LEVELS: Mapping[ReasonCode, int] = {
    ReasonCode.TRAINING_PATHWAY_MISSING: logging.ERROR,
}


@dataclass(slots=True)
class TrainingNumberService:
    """Orchestrates the engine with observability and optional re-signing.

    Memberships are processed in order and independently: a gate rejection is
    logged and metered and leaves ``training_number`` untouched. A fatal error
    (unmapped deanery, signing failure) stops work on its own membership only;
    once the whole list has been processed the collected errors are raised as
    an ``ExceptionGroup``.
    """

    clock: Clock
    meters: MeterLike
    logger: LoggerLike
    hash_fn: HashFunc
    policy: GeneratorPolicy = field(default_factory=GeneratorPolicy.stored_profile)
    signer: Optional[Signer] = None
    skip_level: int = logging.INFO
    skip_levels: Mapping[ReasonCode, int] = field(default_factory=lambda: dict(DEFAULT_SKIP_LEVELS))
    engine: TrainingNumberEngine = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.policy.resign and self.signer is None:
            raise ValueError("policy re-signs memberships but no signer was provided")
        self.engine = TrainingNumberEngine(self.policy)

    def populate(
        self,
        identity: Optional[Identity],
        memberships: Iterable[ProgrammeMembershipRecord],
    ) -> List[PopulationOutcome]:
        today = self.clock.today()
        subject = self._subject(identity)
        outcomes: List[PopulationOutcome] = []
        for membership in memberships:
            outcomes.append(self._populate_one(identity, membership, today, subject))
        raise_for_failures(outcomes)
        return outcomes

    def _populate_one(
        self,
        identity: Optional[Identity],
        membership: ProgrammeMembershipRecord,
        today: date,
        subject: Optional[str],
    ) -> PopulationOutcome:
        self.logger.info(
            "training_number_populating",
            extra={"tis_id": membership.tis_id, "trainee": subject},
        )
        try:
            outcome = self.engine.populate_one(identity, membership, today=today)
        except TrainingNumberError as err:
            self.meters.record_failure(err.detail.code)
            self.logger.error(
                "training_number_failed",
                extra={
                    "code": err.detail.code,
                    "details": err.detail.details,
                    "tis_id": membership.tis_id,
                    "trainee": subject,
                },
            )
            return PopulationOutcome(membership, None, None, err)

        if outcome.reason is not None:
            self._record_skip(outcome.reason, membership, subject)
            return outcome

        self.meters.record_generated()
        self.logger.info(
            "training_number_populated",
            extra={"tis_id": membership.tis_id, "training_number": _mask_reference(outcome.training_number)},
        )
        if self.policy.resign:
            try:
                self._resign(membership, subject)
            except SigningFailed as err:
                return PopulationOutcome(membership, outcome.training_number, None, err)
        return outcome

    def _record_skip(
        self,
        reason: ReasonCode,
        membership: ProgrammeMembershipRecord,
        subject: Optional[str],
    ) -> None:
        self.meters.record_skipped(reason.value)
        level = self.skip_levels.get(reason, self.skip_level)
        self.logger.log(
            level,
            "training_number_skipped",
            extra={
                "reason": reason.value,
                "detail": build_reason(reason).message,
                "tis_id": membership.tis_id,
                "trainee": subject,
            },
        )

    def _resign(self, membership: ProgrammeMembershipRecord, subject: Optional[str]) -> None:
        """Replace the signature of a membership that was signed before population."""

        if membership.signature is None or self.signer is None:
            return
        try:
            self.signer.sign(membership)
        except Exception as exc:
            err = signing_failed(membership.tis_id, cause=exc)
            self.meters.record_failure(err.detail.code)
            self.logger.error(
                "training_number_resign_failed",
                extra={"code": err.detail.code, "tis_id": membership.tis_id, "trainee": subject},
            )
            raise err from exc
        self.meters.record_resigned()

    def _subject(self, identity: Optional[Identity]) -> Optional[str]:
        if identity is None:
            return None
        reference = resolve_reference_number(identity.gmc_number, identity.gdc_number)
        return self.hash_fn(reference) if reference else None


def _mask_reference(training_number: Optional[str]) -> Optional[str]:
    """Hide the GMC/GDC segment of a training number before it is logged."""

    if not training_number:
        return training_number
    parts = training_number.split("/")
    if len(parts) == 4:
        parts[2] = "***"
    return "/".join(parts)


__all__ = ["DEFAULT_SKIP_LEVELS", "TrainingNumberService"]
