# -*- coding: utf-8 -*-
from __future__ import annotations

from datetime import date

import pytest

from tis_ntn.domain.training_number.policy import GeneratorPolicy
from tis_ntn.domain.training_number.reasons import ReasonCode, RuleResult, build_reason
from tis_ntn.domain.training_number.rules import (
    DEFAULT_RULES,
    EligibilityGate,
    FoundationProgrammeRule,
    ProgrammeNumberRule,
)

from ..builders import TODAY, make_curriculum, make_identity, make_membership


@pytest.fixture()
def gate() -> EligibilityGate:
    return EligibilityGate()


def test_accepts_complete_membership(gate):
    result = gate.is_eligible(make_identity(), make_membership(), TODAY)
    assert result.ok
    assert result.code is None
    assert result.message is None


def test_missing_identity(gate):
    result = gate.is_eligible(None, make_membership(), TODAY)
    assert not result.ok
    assert result.code is ReasonCode.PERSONAL_DETAILS_NOT_FOUND


def test_invalid_reference_number(gate):
    result = gate.is_eligible(make_identity("123", "1234"), make_membership(), TODAY)
    assert result.code is ReasonCode.REFERENCE_NUMBER_INVALID


@pytest.mark.parametrize("programme_number", [None, "", "  "])
def test_blank_programme_number(gate, programme_number):
    result = gate.is_eligible(make_identity(), make_membership(programme_number=programme_number), TODAY)
    assert result.code is ReasonCode.PROGRAMME_NUMBER_BLANK


@pytest.mark.parametrize("programme_name", [None, "", "\t"])
def test_blank_programme_name(gate, programme_name):
    result = gate.is_eligible(make_identity(), make_membership(programme_name=programme_name), TODAY)
    assert result.code is ReasonCode.PROGRAMME_NAME_BLANK


@pytest.mark.parametrize("programme_name", ["Foundation Year 1", "FOUNDATION", "Academic foundation programme"])
def test_foundation_programmes_are_excluded(gate, programme_name):
    result = gate.is_eligible(make_identity(), make_membership(programme_name=programme_name), TODAY)
    assert result.code is ReasonCode.FOUNDATION_PROGRAMME_EXCLUDED
    assert result.message == "Skipping training number population as programme name is excluded."


def test_no_current_curricula(gate):
    expired = make_curriculum(valid_from=date(2010, 1, 1), valid_to=date(2011, 1, 1))
    result = gate.is_eligible(make_identity(), make_membership(curricula=[expired]), TODAY)
    assert result.code is ReasonCode.NO_VALID_CURRICULA


def test_missing_training_pathway(gate):
    result = gate.is_eligible(make_identity(), make_membership(training_pathway=None), TODAY)
    assert result.code is ReasonCode.TRAINING_PATHWAY_MISSING
    assert result.message == "Unable to generate training number as training pathway was null."


def test_empty_training_pathway_is_present(gate):
    assert gate.is_eligible(make_identity(), make_membership(training_pathway=""), TODAY).ok


def test_first_failing_check_wins(gate):
    membership = make_membership(programme_number="", programme_name="", training_pathway=None, curricula=[])
    assert gate.is_eligible(None, membership, TODAY).code is ReasonCode.PERSONAL_DETAILS_NOT_FOUND
    assert gate.is_eligible(make_identity("x"), membership, TODAY).code is ReasonCode.REFERENCE_NUMBER_INVALID
    assert gate.is_eligible(make_identity(), membership, TODAY).code is ReasonCode.PROGRAMME_NUMBER_BLANK


def test_foundation_checked_before_curricula(gate):
    membership = make_membership(programme_name="Foundation", curricula=[])
    assert gate.is_eligible(make_identity(), membership, TODAY).code is ReasonCode.FOUNDATION_PROGRAMME_EXCLUDED


def test_curricula_checked_with_policy_validity(gate):
    ending_today = make_curriculum(valid_to=TODAY)
    membership = make_membership(curricula=[ending_today])
    strict = gate.is_eligible(make_identity(), membership, TODAY, GeneratorPolicy.stored_profile())
    inclusive = gate.is_eligible(make_identity(), membership, TODAY, GeneratorPolicy.profile_view())
    assert strict.code is ReasonCode.NO_VALID_CURRICULA
    assert inclusive.ok


def test_custom_rule_chain():
    gate = EligibilityGate([FoundationProgrammeRule(), ProgrammeNumberRule()])
    membership = make_membership(programme_number="")
    assert gate.is_eligible(None, membership, TODAY).code is ReasonCode.PROGRAMME_NUMBER_BLANK


def test_default_rule_order():
    names = [type(rule).__name__ for rule in DEFAULT_RULES]
    assert names == [
        "PersonalDetailsPresentRule",
        "ReferenceNumberRule",
        "ProgrammeNumberRule",
        "ProgrammeNameRule",
        "FoundationProgrammeRule",
        "CurrentCurriculaRule",
        "TrainingPathwayRule",
    ]


@pytest.mark.parametrize("code", list(ReasonCode))
def test_every_reason_has_a_message(code):
    reason = build_reason(code)
    assert reason.code is code
    assert reason.message


def test_rule_result_without_reason():
    result = RuleResult(True)
    assert result.code is None
    assert result.message is None
