"""
Tests for the severity gate.

Tests key functionality including:
- Verbosity gating
- Empty message suppression
- Termination decisions and the exit diagnostic line
"""

import sys

import pytest

from slogan import Level, LogConfig, Logger, ProcessExitPolicy, SystemExitPolicy
from slogan.gate import allows, should_emit, should_terminate

# =============================================================================
# Test gate functions
# =============================================================================


@pytest.mark.unit
class TestShouldEmit:
    """Test verbosity comparison."""

    @pytest.mark.parametrize("level", range(10))
    def test_level_at_threshold_is_emitted(self, level):
        assert should_emit(LogConfig(verbosity=level), level)

    def test_level_above_threshold_is_not_emitted(self):
        config = LogConfig(verbosity=Level.CRITICAL)
        assert should_emit(config, Level.CRITICAL)
        assert not should_emit(config, Level.ERROR)

    def test_silent_uses_same_comparison(self):
        """Silent passes any non-negative verbosity and is gated like others."""
        assert should_emit(LogConfig(verbosity=0), Level.SILENT)
        assert not should_emit(LogConfig(verbosity=-1), Level.SILENT)


@pytest.mark.unit
class TestAllows:
    """Test empty message suppression."""

    def test_empty_message_allowed_by_default(self):
        assert allows(LogConfig(verbosity=9), Level.INFO, "")

    def test_empty_message_suppressed_with_no_empty(self):
        config = LogConfig(verbosity=9, no_empty=True)
        assert not allows(config, Level.INFO, "")
        assert allows(config, Level.INFO, " ")

    def test_verbosity_still_applies(self):
        assert not allows(LogConfig(verbosity=3), Level.ERROR, "boom")


@pytest.mark.unit
class TestShouldTerminate:
    """Test termination policy."""

    def test_nothing_terminates_without_exit_on_error(self):
        config = LogConfig(exit_on_error=False, warning_as_error=True)
        assert not any(should_terminate(config, level) for level in range(10))

    def test_error_levels_terminate(self):
        config = LogConfig(exit_on_error=True)
        terminating = [level for level in range(10) if should_terminate(config, level)]
        assert terminating == [1, 2, 3, 4]

    def test_warning_as_error_adds_warning(self):
        config = LogConfig(exit_on_error=True, warning_as_error=True)
        terminating = [level for level in range(10) if should_terminate(config, level)]
        assert terminating == [1, 2, 3, 4, 5]

    def test_silent_never_terminates(self):
        config = LogConfig(exit_on_error=True, warning_as_error=True)
        assert not should_terminate(config, Level.SILENT)


# =============================================================================
# Test gate behavior through a logger
# =============================================================================


@pytest.mark.unit
class TestLoggerGating:
    """Test gating and termination as seen through Logger."""

    def test_error_hidden_critical_shown_at_verbosity_3(self, make_logger, out):
        log = make_logger(verbosity=3)
        log.error("an error")
        assert out.getvalue() == ""
        log.critical("a critical")
        assert "a critical" in out.getvalue()

    @pytest.mark.parametrize("level", [1, 2, 3, 4])
    def test_exit_code_equals_level(self, make_logger, exit_policy, level):
        log = make_logger(verbosity=9, exit_on_error=True)
        log.log(level, "fatal")
        assert exit_policy.codes == [level]

    def test_warning_does_not_terminate_by_default(self, make_logger, exit_policy):
        log = make_logger(verbosity=9, exit_on_error=True)
        log.warning("careful")
        log.notice("n")
        log.info("i")
        log.debug("d")
        log.trace("t")
        assert exit_policy.codes == []

    def test_warning_as_error_terminates_with_5(self, make_logger, exit_policy):
        log = make_logger(verbosity=9, exit_on_error=True, warning_as_error=True)
        log.warning("careful")
        assert exit_policy.codes == [5]

    def test_fatal_diagnostic_written_at_debug(self, make_logger, out):
        log = make_logger(verbosity="debug", exit_on_error=True, colorize=False)
        log.error("boom")
        lines = out.getvalue().splitlines()
        assert lines == [
            "   error     boom",
            "   debug     Immediate exit with code 4",
        ]

    def test_fatal_diagnostic_gated_by_verbosity(self, make_logger, out):
        log = make_logger(verbosity="warning", exit_on_error=True, colorize=False)
        log.error("boom")
        assert out.getvalue() == "   error     boom\n"

    def test_termination_evaluated_when_emission_skipped(
        self, make_logger, out, exit_policy
    ):
        log = make_logger(verbosity=0, exit_on_error=True)
        log.alert("hidden")
        assert out.getvalue() == ""
        assert exit_policy.codes == [2]

    def test_termination_evaluated_for_suppressed_empty_message(
        self, make_logger, exit_policy
    ):
        log = make_logger(verbosity=9, exit_on_error=True, no_empty=True)
        log.error("")
        assert exit_policy.codes == [4]

    def test_fatal_diagnostic_points_at_triggering_call(self, make_logger, out):
        log = make_logger(verbosity=9, exit_on_error=True, trace_caller=True)
        line = sys._getframe().f_lineno + 1
        log.error("boom")
        lines = out.getvalue().splitlines()
        assert len(lines) == 2
        assert all(f"test_gate.py:{line}" in entry for entry in lines)


@pytest.mark.unit
class TestExitPolicies:
    """Test bundled exit policies."""

    def test_system_exit_policy_raises(self, out):
        log = Logger(
            LogConfig(exit_on_error=True),
            stream=out,
            exit_policy=SystemExitPolicy(),
        )
        with pytest.raises(SystemExit) as exc_info:
            log.emergency("stop")
        assert exc_info.value.code == 1
        assert "stop" in out.getvalue()

    def test_process_exit_policy_calls_os_exit(self, monkeypatch):
        calls = []
        monkeypatch.setattr("slogan.gate.os._exit", lambda code: calls.append(code))
        ProcessExitPolicy().terminate(3)
        assert calls == [3]
