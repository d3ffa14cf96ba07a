"""
Core type definitions for scriptree.

This module contains type aliases shared by the resolution, execution and
loading components.
"""

from typing import Any

# A literal shell command string
Command = str

# Mapping of environment variable name to value
EnvMap = dict[str, str]

# Script name (plus the optional "default" key) to environment overrides
EnvConfig = dict[str, EnvMap]

# Raw, unparsed configuration as read from a config source
RawConfig = dict[str, Any]
