# -*- coding: utf-8 -*-
"""Prometheus metrics for the training number service."""
from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, REGISTRY

from .types import MeterLike


class TrainingNumberMeters(MeterLike):
    """Wraps Prometheus primitives behind a friendly interface."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or REGISTRY
        self._generated = Counter(
            "training_number_generated_total",
            "Training numbers written onto programme memberships",
            registry=self._registry,
        )
        self._skipped = Counter(
            "training_number_skipped_total",
            "Programme memberships rejected by the eligibility gate",
            ("reason",),
            registry=self._registry,
        )
        self._failures = Counter(
            "training_number_failures_total",
            "Fatal errors while computing or re-signing a training number",
            ("reason",),
            registry=self._registry,
        )
        self._resigned = Counter(
            "training_number_resigned_total",
            "Programme memberships re-signed after population",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """Return the registry backing the meters."""

        return self._registry

    def record_generated(self) -> None:
        self._generated.inc()

    def record_skipped(self, reason: str) -> None:
        self._skipped.labels(reason=reason).inc()

    def record_failure(self, code: str) -> None:
        self._failures.labels(reason=code).inc()

    def record_resigned(self) -> None:
        self._resigned.inc()
