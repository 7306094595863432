"""Training number (NTN) generation public API."""

from .curricula import filter_and_sort
from .engine import PopulationOutcome, TrainingNumberEngine, raise_for_failures
from .policy import AnchorPolicy, CurriculumValidity, GeneratorPolicy
from .reasons import EligibilityResult, ReasonCode
from .rules import EligibilityGate
from .specialty import build_specialty_concat
from .suffix import resolve_suffix
from .value_objects import TRAINING_NUMBER_REGEX, TrainingNumber

__all__ = [
    "AnchorPolicy",
    "CurriculumValidity",
    "EligibilityGate",
    "EligibilityResult",
    "GeneratorPolicy",
    "PopulationOutcome",
    "ReasonCode",
    "TRAINING_NUMBER_REGEX",
    "TrainingNumber",
    "TrainingNumberEngine",
    "build_specialty_concat",
    "filter_and_sort",
    "raise_for_failures",
    "resolve_suffix",
]
