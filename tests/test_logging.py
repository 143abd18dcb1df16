"""Tests for logging configuration."""

import json
import logging
import sys

import pytest

from rsspod.errors import SerializationError
from rsspod.logging import LOGGER_NAME, JsonFormatter, configure_logging
from rsspod.models import Channel, Item, create_channel
from rsspod.publisher import publish


@pytest.fixture
def rsspod_logger():
    """Put the rsspod logger back the way it was."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = logger.handlers[:]
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def json_lines(output: str) -> list[dict]:
    return [json.loads(line) for line in output.splitlines() if line]


def test_json_formatter_basic_fields():
    record = logging.LogRecord(
        "rsspod.publisher", logging.INFO, __file__, 1, "Published %s", ("feed",), None
    )
    data = json.loads(JsonFormatter().format(record))

    assert data["level"] == "INFO"
    assert data["msg"] == "Published feed"
    assert data["logger"] == "rsspod.publisher"
    assert data["time"].endswith("+00:00")
    assert "channel" not in data
    assert "path" not in data


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "rsspod", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )

    data = json.loads(JsonFormatter().format(record))

    assert "ValueError: boom" in data["exc_info"]


def test_publish_summary_as_json(rsspod_logger, capsys):
    """Publisher records carry channel title, item count and byte size."""
    configure_logging(level="DEBUG", json_format=True)
    channel = create_channel("T", "http://x/", "D", "http://x/i.png")
    channel.add_item(Item(link="http://x/1", description="one"))

    output = publish(channel)

    records = json_lines(capsys.readouterr().out)
    assert len(records) == 1
    assert records[0]["logger"] == "rsspod.publisher"
    assert records[0]["channel"] == "T"
    assert records[0]["items"] == 1
    assert records[0]["bytes"] == len(output)


def test_publish_failure_as_json(rsspod_logger, capsys):
    """Failed publishes log the path of the field that could not be written."""
    configure_logging(level="ERROR", json_format=True)
    channel = Channel(title="T", link="http://x/", description="\x07")

    with pytest.raises(SerializationError):
        publish(channel)

    records = json_lines(capsys.readouterr().out)
    assert len(records) == 1
    assert records[0]["level"] == "ERROR"
    assert records[0]["path"] == "channel.description"
    assert "SerializationError" in records[0]["exc_info"]


def test_root_handlers_untouched(rsspod_logger):
    root = logging.getLogger()
    before = root.handlers[:]

    logger = configure_logging()

    assert root.handlers == before
    assert logger is rsspod_logger
    assert logger.propagate is False


def test_repeat_call_replaces_handler(rsspod_logger):
    configure_logging()
    configure_logging(json_format=True)

    installed = [h for h in rsspod_logger.handlers if getattr(h, "_rsspod", False)]
    assert len(installed) == 1
    assert isinstance(installed[0].formatter, JsonFormatter)


def test_defaults_from_settings(monkeypatch, rsspod_logger):
    monkeypatch.setenv("RSSPOD_ENV", "prod")
    monkeypatch.setenv("RSSPOD_LOG_LEVEL", "WARNING")

    logger = configure_logging()

    assert logger.level == logging.WARNING
    assert isinstance(logger.handlers[-1].formatter, JsonFormatter)


def test_dev_uses_plain_format(rsspod_logger):
    logger = configure_logging()

    assert logger.level == logging.INFO
    assert not isinstance(logger.handlers[-1].formatter, JsonFormatter)
