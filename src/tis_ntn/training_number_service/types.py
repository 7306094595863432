# -*- coding: utf-8 -*-
"""Type definitions for the training number service."""
from __future__ import annotations

from typing import Any, Protocol

from tis_ntn.domain.trainee.entities import ProgrammeMembershipRecord


class LoggerLike(Protocol):
    """Protocol representing the structured logger adapter used by the service."""

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None: ...


class MeterLike(Protocol):
    """Protocol capturing the observability hooks consumed by the service."""

    def record_generated(self) -> None: ...

    def record_skipped(self, reason: str) -> None: ...

    def record_failure(self, code: str) -> None: ...

    def record_resigned(self) -> None: ...


class HashFunc(Protocol):
    """PII hashing hook injected for structured logging."""

    def __call__(self, reference_number: str) -> str: ...


class Signer(Protocol):
    """Signing collaborator that replaces the signature of a membership."""

    def sign(self, membership: ProgrammeMembershipRecord) -> None: ...


__all__ = ["HashFunc", "LoggerLike", "MeterLike", "Signer"]
