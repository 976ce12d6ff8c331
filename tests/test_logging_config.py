# Tests for structured JSON logging

import json
import logging

import pytest

from content_director.logging_config import _JsonFormatter, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJsonFormatter:
    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            "content_director.validators", logging.WARNING, __file__, 1,
            "%s failed validation with %d violation(s)", ("ContentPlan", 2), None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_single_line_json(self):
        line = _JsonFormatter().format(self._record())
        payload = json.loads(line)

        assert "\n" not in line
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "content_director.validators"
        assert payload["message"] == "ContentPlan failed validation with 2 violation(s)"
        assert "timestamp" in payload

    def test_extra_fields_included(self):
        payload = json.loads(_JsonFormatter().format(self._record(entity="ContentPlan", violation_count=2)))
        assert payload["entity"] == "ContentPlan"
        assert payload["violation_count"] == 2

    def test_standard_record_attributes_omitted(self):
        """只输出 extra= 字段, 不输出 LogRecord 自带属性"""
        payload = json.loads(_JsonFormatter().format(self._record(entity="ContentPlan")))
        assert set(payload) == {"timestamp", "level", "logger", "message", "entity"}

    def test_non_ascii_kept_readable(self):
        record = self._record()
        record.msg, record.args = "內容企劃格式驗證失敗", ()
        assert "內容企劃格式驗證失敗" in _JsonFormatter().format(record)


class TestConfigureLogging:
    def test_replaces_root_handlers(self, restore_root_logger):
        configure_logging("debug")

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, _JsonFormatter)

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        configure_logging("chatty")
        assert restore_root_logger.level == logging.INFO

    def test_non_level_attribute_falls_back_to_info(self, restore_root_logger):
        configure_logging("basic_format")
        assert restore_root_logger.level == logging.INFO
