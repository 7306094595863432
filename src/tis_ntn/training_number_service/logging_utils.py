# -*- coding: utf-8 -*-
"""Structured logging helpers for the training number service."""
from __future__ import annotations

import hashlib
import json
import logging
from typing import Any, Dict, Mapping

from .types import HashFunc, LoggerLike


class StructuredLogger(LoggerLike):
    """Minimal JSON logger wrapper used by the service for deterministic logs."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @staticmethod
    def _render(msg: str, extra: Mapping[str, Any] | None) -> str:
        payload: Dict[str, Any] = {"message": msg}
        if extra:
            payload.update(extra)
        return json.dumps(payload, ensure_ascii=False, default=str)

    def log(self, level: int, msg: str, *args: Any, extra: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        self._logger.log(level, self._render(msg, extra), *args, **kwargs)

    def info(self, msg: str, *args: Any, extra: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        self.log(logging.INFO, msg, *args, extra=extra, **kwargs)

    def warning(self, msg: str, *args: Any, extra: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        self.log(logging.WARNING, msg, *args, extra=extra, **kwargs)

    def error(self, msg: str, *args: Any, extra: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        self.log(logging.ERROR, msg, *args, extra=extra, **kwargs)


def build_logger(name: str = "tis_ntn.training_number_service") -> StructuredLogger:
    """Return a JSON logger whose events are emitted exactly once.

    When the host has configured the root logger (see ``setup_logging``) the
    events propagate to it. Otherwise the logger gets its own console handler
    and stops propagating.
    """

    logger = logging.getLogger(name)
    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.setLevel(logging.INFO)
        logger.addHandler(handler)
        logger.propagate = False
    return StructuredLogger(logger)


def make_hash_fn(salt: str) -> HashFunc:
    def _hash(reference_number: str) -> str:
        digest = hashlib.sha256()
        digest.update(salt.encode("utf-8"))
        digest.update(reference_number.encode("utf-8"))
        return digest.hexdigest()[:16]

    return _hash
