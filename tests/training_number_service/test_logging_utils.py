# -*- coding: utf-8 -*-
from __future__ import annotations

import json
import logging

from tis_ntn.training_number_service.logging_utils import StructuredLogger, build_logger, make_hash_fn


def test_structured_logger_renders_json(caplog):
    caplog.set_level(logging.INFO)
    logger = StructuredLogger(logging.getLogger("test-structured"))
    logger.warning("training_number_skipped", extra={"deanery": "Yorkshire and the Humber", "note": "ü"})
    [record] = [r for r in caplog.records if r.name == "test-structured"]
    assert record.levelno == logging.WARNING
    assert json.loads(record.getMessage()) == {
        "message": "training_number_skipped",
        "deanery": "Yorkshire and the Humber",
        "note": "ü",
    }
    assert "ü" in record.getMessage()


def test_structured_logger_without_extra(caplog):
    caplog.set_level(logging.INFO)
    StructuredLogger(logging.getLogger("test-structured")).info("plain")
    assert json.loads(caplog.records[-1].getMessage()) == {"message": "plain"}


def test_build_logger_owns_output_without_root_handlers():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    for handler in saved_handlers:
        root.removeHandler(handler)
    try:
        first = build_logger("test-build-logger-standalone")
        build_logger("test-build-logger-standalone")
    finally:
        for handler in saved_handlers:
            root.addHandler(handler)
    logger = logging.getLogger("test-build-logger-standalone")
    assert isinstance(first, StructuredLogger)
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_build_logger_defers_to_configured_root(caplog):
    caplog.set_level(logging.INFO)
    build_logger("test-build-logger-hosted").info("training_number_populated")
    logger = logging.getLogger("test-build-logger-hosted")
    assert logger.handlers == []
    assert logger.propagate is True
    records = [r for r in caplog.records if r.name == "test-build-logger-hosted"]
    assert len(records) == 1


def test_hash_fn_is_salted_and_stable():
    hash_a = make_hash_fn("salt-a")
    hash_b = make_hash_fn("salt-b")
    assert hash_a("1234567") == hash_a("1234567")
    assert hash_a("1234567") != hash_b("1234567")
    assert len(hash_a("1234567")) == 16
    assert "1234567" not in hash_a("1234567")
