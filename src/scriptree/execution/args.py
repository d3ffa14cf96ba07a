"""
Splitting a parsed command line into script names and passthrough arguments.
"""

from collections.abc import Sequence

from attrs import field, frozen


def _to_tuple(value: Sequence[str]) -> tuple[str, ...]:
    return tuple(value)


@frozen
class ExecutionRequest:
    """The scripts to run for one invocation and the arguments forwarded to them."""

    script_names: tuple[str, ...] = field(converter=_to_tuple)
    passthrough_args: str = ""


def split_names(value: str) -> list[str]:
    """Split a comma-joined list of script names, dropping blank entries."""
    return [name.strip() for name in value.split(",") if name.strip()]


def get_scripts_and_args(
    scripts: Sequence[str] | str | None = None,
    parallel: str | None = None,
    raw_args: Sequence[str] = (),
) -> ExecutionRequest:
    """
    Work out which scripts to run and which arguments to pass through.

    Rules, in order:
      1. ``parallel`` given: run its comma-separated names, pass no arguments.
      2. The script entry contains a comma: run those names, pass no arguments.
      3. One script entry: run it, passing every raw token after it verbatim.
      4. No script entry: run nothing.

    Only the first positional entry names scripts; anything after it in
    ``raw_args`` is passthrough.

    Params:
        scripts: Positional script entries from the command line
        parallel: Comma-joined names from the parallel flag
        raw_args: The original command line tokens

    Returns:
        An `ExecutionRequest`

    Examples:
        scripts=["boo"], raw_args=["boo", "--watch"] -> (("boo",), "--watch")
        parallel="boo,baz" -> (("boo", "baz"), "")
    """
    if isinstance(scripts, str):
        scripts = [scripts]
    scripts = list(scripts or [])

    if parallel:
        return ExecutionRequest(split_names(parallel))

    if not scripts:
        return ExecutionRequest(())

    entry = scripts[0]
    if "," in entry:
        return ExecutionRequest(split_names(entry))

    raw_args = list(raw_args)
    if entry not in raw_args:
        return ExecutionRequest([entry])
    passthrough = raw_args[raw_args.index(entry) + 1 :]
    return ExecutionRequest([entry], " ".join(passthrough))
