"""Tests for the Logger and the process-wide outputs"""

import gc
import io
import json
import threading

import pytest

import tinylog
from tinylog import (
    ContractViolation,
    ExtrasLayout,
    LogLevel,
    Logger,
    LoggerBuilder,
    LoggerConfig,
)

from tinylog.core.state import LoggingState, get_state

from conftest import FIXED_TIMESTAMP


def json_record(severity, message, extras=None):
    """Expected JSON text of one record under the fixed clock."""
    record = {"severity": severity, "message": message, "timestamp": FIXED_TIMESTAMP}
    if extras:
        record["extras"] = extras
    return json.dumps(record, ensure_ascii=False)


class TestFiltering:
    """Test level filtering."""

    @pytest.mark.parametrize("threshold", [l for l in LogLevel if l.is_concrete])
    def test_below_threshold_is_dropped(self, threshold, stream):
        logger = Logger(threshold)
        tinylog.enable_text_output(stream)

        for level in LogLevel:
            if level.is_concrete:
                logger.log(level, "m", show_timestamp=False)

        emitted = [line[1:6].strip() for line in stream.getvalue().splitlines()]
        assert emitted == [l.name for l in LogLevel if l.is_concrete and l >= threshold]

    def test_filtered_call_has_no_side_effects(self, stream):
        logger = Logger(LogLevel.ERROR)
        tinylog.enable_json_output(stream)
        logger.log(LogLevel.INFO, "skipped")
        logger.log(LogLevel.ERROR, "kept")
        tinylog.disable_json_output()
        assert [r["message"] for r in json.loads(stream.getvalue())] == ["kept"]

    def test_inherit_severity_rejected(self):
        logger = Logger(LogLevel.DEBUG)
        with pytest.raises(ContractViolation):
            logger.log(LogLevel.INHERIT, "m")

    def test_level_from_string(self):
        assert Logger("warn").level == LogLevel.WARN


class TestHierarchy:
    """Test threshold resolution across logger instances."""

    def test_inherit_warn_inherit(self):
        loggers = [Logger(LogLevel.INHERIT), Logger(LogLevel.WARN), Logger(LogLevel.INHERIT)]
        for logger in loggers:
            assert logger.get_effective_level() == LogLevel.WARN

    def test_lone_inherit_uses_debug_default(self):
        logger = Logger()
        assert logger.get_effective_level() == LogLevel.INFO

    def test_lone_inherit_uses_release_default(self):
        tinylog.configure(LoggerConfig(debug_mode=False))
        logger = Logger()
        assert logger.get_effective_level() == LogLevel.WARN

    def test_newest_logger_decides_for_older_ones(self, stream):
        outer = Logger(LogLevel.WARN)
        tinylog.enable_text_output(stream)

        outer.log(LogLevel.DEBUG, "hidden", show_timestamp=False)
        inner = Logger(LogLevel.DEBUG)
        outer.log(LogLevel.DEBUG, "visible", show_timestamp=False)

        assert stream.getvalue() == "[DEBUG] visible\n"
        assert inner.get_effective_level() == LogLevel.DEBUG

    def test_collected_logger_stops_deciding(self):
        outer = Logger(LogLevel.WARN)

        def nested():
            inner = Logger(LogLevel.DEBUG)
            return inner.get_effective_level()

        assert nested() == LogLevel.DEBUG
        gc.collect()
        assert outer.get_effective_level() == LogLevel.WARN

    def test_level_setter(self):
        logger = Logger(LogLevel.ERROR)
        logger.level = LogLevel.DEBUG
        assert logger.is_enabled_for(LogLevel.DEBUG)

    def test_reserve_capacity(self):
        keep = [Logger(), Logger()]
        tinylog.reserve_hierarchy_capacity(16)
        with pytest.raises(ContractViolation):
            tinylog.reserve_hierarchy_capacity(len(keep))


class TestTextOutput:
    """Test text lines through the public API."""

    def test_literal_line(self, stream):
        logger = Logger(LogLevel.DEBUG)
        tinylog.enable_text_output(stream)
        logger.log(LogLevel.ERROR, "boom", extras=["x=1"], file_path="a.c",
                   line_number=10, show_timestamp=False)
        assert stream.getvalue() == "[ERROR] a.c (line 10) - boom - EXTRAS -  x=1 ;\n"

    def test_timestamp_included_by_default(self, stream):
        logger = Logger(LogLevel.DEBUG)
        tinylog.enable_text_output(stream)
        logger.info("hello")
        assert stream.getvalue() == f"[INFO ] {FIXED_TIMESTAMP} - hello\n"

    def test_separate_lines_layout(self, stream, fixed_clock):
        tinylog.configure(LoggerConfig(extras_layout=ExtrasLayout.SEPARATE_LINES), fixed_clock)
        logger = Logger(LogLevel.DEBUG)
        tinylog.enable_text_output(stream)
        logger.warn("w", extras=["a"], show_timestamp=False)
        assert stream.getvalue() == "[WARN ] w - EXTRAS :\n        - a ;\n"

    def test_every_destination_gets_the_line(self):
        first, second = io.StringIO(), io.StringIO()
        logger = Logger(LogLevel.DEBUG)
        tinylog.enable_text_output(first)
        tinylog.add_text_output(second)
        logger.debug("d", show_timestamp=False)
        assert first.getvalue() == second.getvalue() == "[DEBUG] d\n"

    def test_add_before_enable(self, stream):
        with pytest.raises(ContractViolation):
            tinylog.add_text_output(stream)

    def test_enabled_flag(self, stream):
        assert not tinylog.is_text_output_enabled()
        tinylog.enable_text_output(stream)
        assert tinylog.is_text_output_enabled()
        tinylog.disable_text_output()
        assert not tinylog.is_text_output_enabled()

    def test_single_string_extra(self, stream):
        logger = Logger(LogLevel.DEBUG)
        tinylog.enable_text_output(stream)
        logger.info("m", extras="x=1", show_timestamp=False)
        assert stream.getvalue() == "[INFO ] m - EXTRAS -  x=1 ;\n"

    def test_with_location(self, stream):
        logger = Logger(LogLevel.DEBUG)
        tinylog.enable_text_output(stream)
        logger.error("here", with_location=True, show_timestamp=False)
        line = stream.getvalue()
        assert line.startswith(f"[ERROR] {__file__} (line ")
        assert line.endswith(") - here\n")


class TestJsonOutput:
    """Test the streamed JSON array through the public API."""

    def test_two_records_parse_as_array(self, stream):
        logger = Logger(LogLevel.DEBUG)
        tinylog.enable_json_output(stream)
        logger.info("first")
        logger.error("second", extras=["k=v"])
        tinylog.disable_json_output()

        text = stream.getvalue()
        records = json.loads(text)
        assert len(records) == 2
        assert records[0] == {"severity": "INFO", "message": "first", "timestamp": FIXED_TIMESTAMP}
        assert records[1]["extras"] == ["k=v"]
        assert text.count("},{") == 1
        assert not text.endswith(",]")

    def test_quotes_replaced_in_json_only(self):
        text_out, json_out = io.StringIO(), io.StringIO()
        logger = Logger(LogLevel.DEBUG)
        tinylog.enable_text_output(text_out)
        tinylog.enable_json_output(json_out)
        logger.info('say "hi"', extras=['k="v"'], show_timestamp=False)
        tinylog.close_all_outputs()

        assert text_out.getvalue() == '[INFO ] say "hi" - EXTRAS -  k="v" ;\n'
        record = json.loads(json_out.getvalue())[0]
        assert record["message"] == "say 'hi'"
        assert record["extras"] == ["k='v'"]

    def test_reenable_resets_separator(self, stream):
        logger = Logger(LogLevel.DEBUG)
        tinylog.enable_json_output(io.StringIO())
        logger.info("old")
        tinylog.disable_json_output()

        tinylog.enable_json_output(stream)
        logger.info("new")
        assert stream.getvalue() == "[" + json_record("INFO", "new")

    def test_late_joining_destination(self):
        early, late = io.StringIO(), io.StringIO()
        logger = Logger(LogLevel.DEBUG)
        tinylog.enable_json_output(early)
        logger.info("one")
        tinylog.add_json_output(late)
        logger.info("two")
        tinylog.disable_json_output()

        assert early.getvalue() == (
            "[" + json_record("INFO", "one") + "," + json_record("INFO", "two") + "]"
        )
        assert late.getvalue() == "[," + json_record("INFO", "two") + "]"

    def test_disable_never_enabled(self):
        tinylog.disable_json_output()
        tinylog.disable_text_output()
        assert not tinylog.is_json_output_enabled()
        assert not tinylog.is_text_output_enabled()


class TestTeardown:
    """Test that closing a logger closes every output."""

    def test_close_tears_down_everything(self):
        text_out, json_out = io.StringIO(), io.StringIO()
        keep = Logger(LogLevel.DEBUG)
        other = Logger(LogLevel.DEBUG)
        tinylog.enable_text_output(text_out)
        tinylog.enable_json_output(json_out)

        other.close()

        assert not tinylog.is_text_output_enabled()
        assert not tinylog.is_json_output_enabled()
        assert json_out.getvalue() == "[]"
        keep.info("nowhere")
        assert text_out.getvalue() == ""

    def test_context_manager(self, stream):
        tinylog.enable_json_output(stream)
        with Logger(LogLevel.DEBUG) as logger:
            logger.info("inside")
        assert json.loads(stream.getvalue())[0]["message"] == "inside"
        assert not tinylog.is_json_output_enabled()

    def test_last_logger_collected_closes_outputs(self, stream):
        logger = Logger(LogLevel.DEBUG)
        tinylog.enable_json_output(stream)
        del logger
        gc.collect()
        assert stream.getvalue() == "[]"
        assert not tinylog.is_json_output_enabled()


class FailingStream:
    """Destination whose writes always fail."""

    def write(self, text):
        raise OSError("disk full")


class Member:
    """Stand-in registry member with a configured level."""

    def __init__(self, level):
        self.level = level


class TestSharedState:
    """Test locking, write failures and shutdown closing."""

    def test_concurrent_logging_keeps_arrays_valid(self):
        first, second = io.StringIO(), io.StringIO()
        logger = Logger(LogLevel.DEBUG)
        tinylog.enable_json_output(first)
        tinylog.add_json_output(second)

        def worker(n):
            for i in range(50):
                logger.info(f"worker {n} record {i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        tinylog.disable_json_output()

        first_records = json.loads(first.getvalue())
        second_records = json.loads(second.getvalue())
        assert len(first_records) == len(second_records) == 400
        assert first_records == second_records

    def test_write_error_reaches_caller(self):
        logger = Logger(LogLevel.DEBUG)
        tinylog.enable_text_output(FailingStream())
        with pytest.raises(OSError, match="disk full"):
            logger.error("boom")

    def test_shutdown_close_terminates_json_array(self, stream):
        logger = Logger(LogLevel.DEBUG)
        tinylog.enable_json_output(stream)
        logger.info("last words")

        # Same callable registered with atexit
        get_state().close_all_outputs()

        assert stream.getvalue().endswith("]")
        assert json.loads(stream.getvalue())[0]["message"] == "last words"

    def test_last_logger_hook_rechecks_live_count(self):
        state = LoggingState()
        member = Member(LogLevel.INFO)
        state.register(member)
        out = io.StringIO()
        state.enable_json_output(out)

        state._on_last_logger_collected()

        assert state.json_sinks.enabled
        assert out.getvalue() == "["


class TestLoggerBuilder:
    """Test builder pattern."""

    def test_builder_enables_outputs(self, fixed_clock):
        first, second, json_out = io.StringIO(), io.StringIO(), io.StringIO()
        logger = (LoggerBuilder()
            .with_level(LogLevel.WARN)
            .with_text_output(first)
            .with_text_output(second)
            .with_json_output(json_out)
            .build())

        assert logger.level == LogLevel.WARN
        logger.warn("w", show_timestamp=False)
        assert first.getvalue() == second.getvalue() == "[WARN ] w\n"
        assert json_out.getvalue().startswith("[{")

    def test_builder_applies_config(self):
        logger = (LoggerBuilder()
            .with_config(LoggerConfig.production_config())
            .build())
        assert tinylog.get_config().debug_mode is False
        assert logger.get_effective_level() == LogLevel.WARN


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.default_debug_level == LogLevel.INFO
        assert config.default_release_level == LogLevel.WARN
        assert config.extras_layout is ExtrasLayout.INLINE

    def test_debug_config(self):
        config = LoggerConfig.debug_config()
        assert config.default_level == LogLevel.DEBUG
        assert config.extras_layout is ExtrasLayout.SEPARATE_LINES

    def test_string_values(self):
        config = LoggerConfig(default_release_level="error", extras_layout="separate_lines",
                              debug_mode=False)
        assert config.default_level == LogLevel.ERROR
        assert config.extras_layout is ExtrasLayout.SEPARATE_LINES

    def test_inherit_default_rejected(self):
        with pytest.raises(ValueError):
            LoggerConfig(default_debug_level=LogLevel.INHERIT)
