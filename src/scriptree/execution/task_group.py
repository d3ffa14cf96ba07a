"""
Joining a batch of concurrently running child processes.

Every process is started before any is waited on. `ProcessGroup.join` then
folds the batch into a single `RunResult` according to its `JoinPolicy`.
Processes are never terminated by the group: under ``FAIL_FAST`` a failure
is reported without waiting for siblings that were already started, and
those siblings keep running on their own.
"""

import subprocess
from enum import Enum

from scriptree.execution.results import RunResult, ScriptFailure


class JoinPolicy(Enum):
    """How a `ProcessGroup` reacts to a script that could not be started."""

    FAIL_FAST = "fail-fast"  # Report the first failure immediately
    COLLECT_ALL = "collect-all"  # Wait for every started process first


class ProcessGroup:
    """
    A batch of started processes and start-up failures, in request order.

    Params:
        policy: Join policy applied when any entry is a failure
    """

    def __init__(self, policy: JoinPolicy = JoinPolicy.FAIL_FAST):
        self.policy = policy
        self._entries: list[subprocess.Popen | ScriptFailure] = []

    def __len__(self) -> int:
        return len(self._entries)

    def add_process(self, process: subprocess.Popen) -> None:
        self._entries.append(process)

    def add_failure(self, failure: ScriptFailure) -> None:
        self._entries.append(failure)

    @property
    def processes(self) -> list[subprocess.Popen]:
        return [entry for entry in self._entries if not isinstance(entry, ScriptFailure)]

    @property
    def failures(self) -> list[ScriptFailure]:
        return [entry for entry in self._entries if isinstance(entry, ScriptFailure)]

    def join(self) -> RunResult:
        """
        Wait for the group and aggregate its outcome.

        Returns:
            ``RunResult(error=...)`` with the first failure if any entry
            failed, otherwise ``RunResult(code=...)`` with the first non-zero
            exit code in request order, or 0 when all succeeded
        """
        failures = self.failures
        if failures and self.policy is JoinPolicy.FAIL_FAST:
            return RunResult(error=failures[0])

        codes = [process.wait() for process in self.processes]
        if failures:
            return RunResult(error=failures[0])
        return RunResult(code=next((code for code in codes if code != 0), 0))
