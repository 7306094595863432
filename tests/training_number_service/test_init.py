# -*- coding: utf-8 -*-
from __future__ import annotations

import logging

import pytest
from freezegun import freeze_time

import tis_ntn.training_number_service as training_number_service
from tis_ntn.training_number_service import (
    build_service,
    default_meters,
    get_settings,
    populate_training_numbers,
)

from ..builders import make_identity, make_membership
from ..conftest import RecordingSigner


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("NTN_VARIANT", raising=False)
    monkeypatch.delenv("NTN_TIMEZONE", raising=False)
    monkeypatch.delenv("NTN_LOG_LEVEL", raising=False)


def test_build_service_from_settings(frozen_clock, meters):
    service = build_service(get_settings(), clock=frozen_clock, meters=meters)
    membership = make_membership(signature="sig")
    [outcome] = service.populate(make_identity(), [membership])
    assert outcome.training_number == "LDN/ABC/1234567/D"
    assert service.signer is None
    assert not service.policy.resign


def test_build_profile_view_service_requires_signer(frozen_clock, meters):
    settings = get_settings(variant="profile_view")
    with pytest.raises(ValueError):
        build_service(settings, clock=frozen_clock, meters=meters)
    service = build_service(settings, signer=RecordingSigner(), clock=frozen_clock, meters=meters)
    assert service.policy.military_override


def test_default_meters_are_shared():
    assert default_meters() is default_meters()


@freeze_time("2024-06-15T12:00:00Z")
def test_populate_training_numbers_uses_system_clock():
    membership = make_membership(start_date=None)
    [outcome] = populate_training_numbers(make_identity(), [membership])
    assert outcome.training_number == "LDN/ABC/1234567/D"


@freeze_time("2031-01-01T00:00:00Z")
def test_populate_training_numbers_after_curricula_end():
    membership = make_membership()
    [outcome] = populate_training_numbers(make_identity(), [membership])
    assert not outcome.populated
    assert membership.training_number is None


def test_build_service_configures_logging_when_requested(monkeypatch, frozen_clock, meters):
    levels = []
    monkeypatch.setattr(training_number_service, "setup_logging", levels.append)
    build_service(get_settings(), clock=frozen_clock, meters=meters)
    build_service(get_settings(log_level="warning"), clock=frozen_clock, meters=meters)
    assert levels == [logging.WARNING]
