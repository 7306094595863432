# -*- coding: utf-8 -*-
"""Public entry-points for the training number service."""
from __future__ import annotations

from functools import lru_cache
from typing import Iterable, List, Optional

from tis_ntn.core.clock import Clock, ensure_clock
from tis_ntn.core.logging_config import setup_logging
from tis_ntn.domain.trainee.entities import Identity, ProgrammeMembershipRecord
from tis_ntn.domain.training_number.engine import PopulationOutcome
from tis_ntn.domain.training_number.reasons import ReasonCode

from .config import GeneratorSettings, get_settings
from .logging_utils import build_logger, make_hash_fn
from .metrics import TrainingNumberMeters
from .service import TrainingNumberService
from .types import MeterLike, Signer


@lru_cache(maxsize=1)
def default_meters() -> TrainingNumberMeters:
    return TrainingNumberMeters()


def build_service(
    settings: GeneratorSettings | None = None,
    *,
    signer: Signer | None = None,
    clock: Clock | None = None,
    meters: MeterLike | None = None,
) -> TrainingNumberService:
    config = settings or get_settings()
    if config.root_log_level is not None:
        setup_logging(config.root_log_level)
    return TrainingNumberService(
        clock=ensure_clock(clock, timezone=config.timezone),
        meters=meters or default_meters(),
        logger=build_logger(),
        hash_fn=make_hash_fn(config.pii_hash_salt),
        policy=config.to_policy(),
        signer=signer,
        skip_level=config.skip_log_level,
        skip_levels={ReasonCode.TRAINING_PATHWAY_MISSING: config.pathway_missing_log_level},
    )


def populate_training_numbers(
    identity: Optional[Identity],
    memberships: Iterable[ProgrammeMembershipRecord],
    *,
    signer: Signer | None = None,
) -> List[PopulationOutcome]:
    return build_service(signer=signer).populate(identity, memberships)


__all__ = [
    "GeneratorSettings",
    "TrainingNumberMeters",
    "TrainingNumberService",
    "build_service",
    "default_meters",
    "get_settings",
    "populate_training_numbers",
]
