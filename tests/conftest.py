# -*- coding: utf-8 -*-
from __future__ import annotations

from datetime import UTC, datetime

import pytest
from prometheus_client import CollectorRegistry

from tis_ntn.core.clock import FrozenClock
from tis_ntn.domain.trainee.entities import ProgrammeMembershipRecord
from tis_ntn.domain.training_number.policy import GeneratorPolicy
from tis_ntn.training_number_service.config import _cached_settings
from tis_ntn.training_number_service.logging_utils import build_logger, make_hash_fn
from tis_ntn.training_number_service.metrics import TrainingNumberMeters
from tis_ntn.training_number_service.service import TrainingNumberService


class RecordingSigner:
    """Signer double replacing the signature and remembering what it signed."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.signed: list[str | None] = []

    def sign(self, membership: ProgrammeMembershipRecord) -> None:
        if self.error is not None:
            raise self.error
        self.signed.append(membership.tis_id)
        membership.signature = f"signed:{membership.training_number}"


@pytest.fixture()
def frozen_clock() -> FrozenClock:
    return FrozenClock.at(datetime(2024, 6, 15, 12, 0, tzinfo=UTC))


@pytest.fixture()
def meters() -> TrainingNumberMeters:
    return TrainingNumberMeters(CollectorRegistry())


@pytest.fixture()
def signer() -> RecordingSigner:
    return RecordingSigner()


@pytest.fixture()
def service(frozen_clock, meters, signer) -> TrainingNumberService:
    logger = build_logger("test-training-number-service")
    hash_fn = make_hash_fn("test-salt")
    return TrainingNumberService(
        frozen_clock,
        meters,
        logger,
        hash_fn,
        policy=GeneratorPolicy.profile_view(),
        signer=signer,
    )


@pytest.fixture()
def stored_service(frozen_clock, meters) -> TrainingNumberService:
    logger = build_logger("test-training-number-service")
    return TrainingNumberService(frozen_clock, meters, logger, make_hash_fn("test-salt"))


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    _cached_settings.cache_clear()
    yield
    _cached_settings.cache_clear()
