"""
Tests for joining a group of started processes.

Processes are stand-in mocks so that waiting and ordering can be observed.
"""

from unittest.mock import Mock

from scriptree.execution.results import RunResult, ScriptFailure
from scriptree.execution.task_group import JoinPolicy, ProcessGroup


def fake_process(code: int) -> Mock:
    process = Mock()
    process.wait.return_value = code
    return process


class TestJoinCodes:
    """Test aggregation of exit codes when every script started."""

    def test_first_non_zero_code_in_request_order(self):
        group = ProcessGroup()
        group.add_process(fake_process(0))
        group.add_process(fake_process(2))
        group.add_process(fake_process(3))

        assert group.join() == RunResult(code=2)

    def test_all_successful_gives_zero(self):
        group = ProcessGroup()
        group.add_process(fake_process(0))
        group.add_process(fake_process(0))

        result = group.join()
        assert result == RunResult(code=0)
        assert result.ok

    def test_every_process_is_waited_on(self):
        processes = [fake_process(1), fake_process(0)]
        group = ProcessGroup()
        for process in processes:
            group.add_process(process)

        group.join()

        for process in processes:
            process.wait.assert_called_once_with()

    def test_empty_group(self):
        assert ProcessGroup().join() == RunResult(code=0)


class TestJoinFailures:
    """Test the policies applied when a script could not be started."""

    def test_fail_fast_does_not_wait(self):
        process = fake_process(0)
        failure = ScriptFailure("missing")
        group = ProcessGroup(JoinPolicy.FAIL_FAST)
        group.add_process(process)
        group.add_failure(failure)

        assert group.join() == RunResult(error=failure)
        process.wait.assert_not_called()
        process.kill.assert_not_called()
        process.terminate.assert_not_called()

    def test_first_failure_is_reported(self):
        first = ScriptFailure("first")
        group = ProcessGroup()
        group.add_failure(first)
        group.add_failure(ScriptFailure("second"))

        assert group.join().error is first

    def test_collect_all_waits_then_reports_failure(self):
        process = fake_process(5)
        failure = ScriptFailure("missing")
        group = ProcessGroup(JoinPolicy.COLLECT_ALL)
        group.add_failure(failure)
        group.add_process(process)

        assert group.join() == RunResult(error=failure)
        process.wait.assert_called_once_with()

    def test_entries_are_split_by_kind(self):
        process = fake_process(0)
        failure = ScriptFailure("missing")
        group = ProcessGroup()
        group.add_process(process)
        group.add_failure(failure)

        assert len(group) == 2
        assert group.processes == [process]
        assert group.failures == [failure]


class TestRunResult:
    def test_exit_code(self):
        assert RunResult(code=3).exit_code == 3
        assert RunResult(code=0).exit_code == 0
        assert RunResult(error=ScriptFailure("x")).exit_code == 1
        assert not RunResult(error=ScriptFailure("x")).ok

    def test_signal_exit_code_maps_to_shell_status(self):
        # SIGTERM is 15
        assert RunResult(code=-15).exit_code == 143
        assert RunResult(code=-9).exit_code == 137
