"""
Result types produced by running scripts.
"""

from attrs import frozen

MISSING_SCRIPT = "missing-script"
SPAWN_FAILURE = "spawn-failure"


@frozen
class ScriptFailure:
    """A script that could not be started, and why."""

    message: str
    ref: str = MISSING_SCRIPT


@frozen
class RunResult:
    """
    Aggregated outcome of running a batch of scripts.

    Exactly one of ``code`` and ``error`` is set. ``code`` is 0 when every
    script exited successfully, otherwise the first non-zero exit code in
    request order.
    """

    code: int | None = None
    error: ScriptFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.code == 0

    @property
    def exit_code(self) -> int:
        """
        Process exit status to report for this result.

        A child killed by signal N (``code == -N``) maps to ``128 + N``, as
        shells report it.
        """
        if self.error is not None:
            return 1
        if self.code is not None and self.code < 0:
            return 128 - self.code
        return self.code or 0
