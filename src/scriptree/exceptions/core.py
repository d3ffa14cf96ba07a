"""
Exception classes for script resolution and configuration loading.

This module defines specific exception types for the error conditions that
can occur while loading a scripts configuration, validating its tree and
resolving script names to commands.
"""


class ScripTreeError(Exception):
    """Base exception for all scriptree errors."""

    pass


class MissingScriptError(ScripTreeError):
    """Raised when a script path cannot be resolved to a command string."""

    ref = "missing-script"

    def __init__(self, path: str, segment: str | None = None):
        """
        Initialize the exception.

        Params:
            path: The full dotted script path that was requested
            segment: The path segment where resolution stopped, if known
        """
        self.path = path
        self.segment = segment
        super().__init__(
            "Scripts must resolve to strings. "
            f'There is no script that can be resolved from "{path}"'
        )


class ConfigValidationError(ScripTreeError):
    """Raised when a scripts tree has an invalid shape."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: Dotted location of the offending entry in the tree
            reason: Why the entry is invalid
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid script entry '{path}': {reason}")


class ConfigLoadError(ScripTreeError):
    """Raised when a configuration file exists but cannot be parsed."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: The configuration file that failed to load
            reason: The underlying parse error
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to load config at \"{path}\": {reason}")
