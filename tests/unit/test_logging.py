from __future__ import annotations

import json
import logging

from dumpling_bench.infrastructure.db_factory import truncate_sql
from dumpling_bench.utils.logging import JsonFormatter, _dict_config, configure_logging
from dumpling_bench.utils.profiler import profile_block

EXPECTED_ROWS = 10


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_extra_fields() -> None:
    record = _record()
    record.rows = EXPECTED_ROWS
    record.table = "t"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["rows"] == EXPECTED_ROWS
    assert payload["table"] == "t"
    assert "pathname" not in payload
    assert "lineno" not in payload


def test_json_formatter_stringifies_unserializable_values() -> None:
    record = _record()
    record.binary = b"\x00"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["binary"] == "b'\\x00'"


def test_dict_config_selects_formatter() -> None:
    assert _dict_config("debug", json_logs=True)["handlers"]["stream"]["formatter"] == "json"
    config = _dict_config("info", json_logs=False)
    assert config["handlers"]["stream"]["formatter"] == "console"
    assert config["root"]["level"] == "INFO"


def test_configure_logging_without_force_keeps_existing_handlers(monkeypatch) -> None:
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [sentinel])

    configure_logging(level="DEBUG", force=False)

    assert root.handlers == [sentinel]


def test_truncate_sql_keeps_short_statements() -> None:
    assert truncate_sql("use test") == "use test"
    assert truncate_sql("x" * 30) == "x" * 30


def test_truncate_sql_cuts_long_statements() -> None:
    assert truncate_sql("insert into t values (1, 1, 1, 'p');") == "insert into t values (1, 1, 1,..."


def test_profile_block_records_duration_on_error() -> None:
    try:
        with profile_block("failing") as stats:
            raise ValueError("boom")
    except ValueError:
        pass
    assert stats.label == "failing"
    assert stats.end_ts >= stats.start_ts
    assert stats.duration_seconds == stats.end_ts - stats.start_ts
