# -*- coding: utf-8 -*-
"""Error hierarchy for training number generation with machine-readable codes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class ErrorDetail:
    """Structured error payload returned to callers.

    Attributes
    ----------
    code:
        Machine-readable error code.
    message:
        Human-facing message, safe to show to an end user.
    details:
        Additional diagnostic details for operators.
    """

    code: str
    message: str
    details: str


@dataclass(frozen=True, slots=True)
class TrainingNumberError(Exception):
    """Base class for fatal errors raised while computing a training number."""

    detail: ErrorDetail
    cause: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - human readable path
        return f"{self.detail.code}: {self.detail.message} ({self.detail.details})"


class UnmappedRegion(TrainingNumberError):
    """The managing deanery has no parent organization code."""


class SigningFailed(TrainingNumberError):
    """Re-signing a programme membership after populating its training number failed."""


def unmapped_region(managing_deanery: str | None) -> UnmappedRegion:
    return UnmappedRegion(
        ErrorDetail(
            "E_UNMAPPED_REGION",
            "Unable to calculate the parent organization.",
            f"managing deanery {managing_deanery!r} has no parent organization code",
        ),
    )


def signing_failed(tis_id: str | None, *, cause: Exception) -> SigningFailed:
    return SigningFailed(
        ErrorDetail(
            "E_SIGNING_FAILED",
            "Unable to re-sign the programme membership.",
            f"programme membership {tis_id!r}: {type(cause).__name__}: {cause}",
        ),
        cause,
    )


__all__ = [
    "ErrorDetail",
    "SigningFailed",
    "TrainingNumberError",
    "UnmappedRegion",
    "signing_failed",
    "unmapped_region",
]
