import io
import logging

import pytest

from app.discounts.logging import (
    add_trace_logging_level_if_not_exists,
    configure_logging,
    parse_level,
)
from app.discounts.parser import parse_transaction


def test_trace_level_is_registered():
    add_trace_logging_level_if_not_exists()

    assert logging.TRACE == logging.DEBUG - 5
    assert logging.getLevelName("TRACE") == logging.DEBUG - 5
    assert hasattr(logging.getLogger("app.discounts.test"), "trace")


@pytest.mark.parametrize(
    "level, expected",
    [
        (logging.INFO, logging.INFO),
        ("debug", logging.DEBUG),
        (" ERROR ", logging.ERROR),
        ("15", 15),
    ],
)
def test_parse_level(level, expected):
    assert parse_level(level) == expected


def test_parse_level_from_environment(monkeypatch):
    monkeypatch.setenv("SHIPMENT_DISCOUNTS_LOG_LEVEL", "INFO")

    assert parse_level(None) == logging.INFO


def test_parse_level_default(monkeypatch):
    monkeypatch.delenv("SHIPMENT_DISCOUNTS_LOG_LEVEL", raising=False)

    assert parse_level(None) == logging.WARNING


def test_parse_level_unknown():
    with pytest.raises(ValueError):
        parse_level("LOUD")


def test_configure_logging_emits_trace_records():
    stream = io.StringIO()

    configure_logging("TRACE", stream=stream)
    parse_transaction("bad line")

    assert "TRACE app.discounts.parser" in stream.getvalue()
    assert "'bad line'" in stream.getvalue()


def test_configure_logging_replaces_handler():
    configure_logging("INFO", stream=io.StringIO())
    configure_logging("INFO", stream=io.StringIO())

    assert len(logging.getLogger("app.discounts").handlers) == 1
