"""Configuration utilities for jsonesc.

This module centralizes small helpers and constants related to application
configuration. Everything is read from the environment; there is no config file.
"""

import os
import shlex

CLIPBOARD_CMD_ENVVAR = "JSONESC_CLIPBOARD_CMD"  # pragma: no mutate
ENVVAR_PREFIX = "JSONESC"  # pragma: no mutate


def get_clipboard_command() -> list[str] | None:
    """Get an explicit clipboard command from the environment.

    The value of `JSONESC_CLIPBOARD_CMD` is split with shell rules, so
    ``xclip -selection clipboard`` becomes three arguments.

    Returns:
        The command as an argument list, or `None` if the variable is unset
        or blank (auto-detect).
    """
    if not (raw := os.environ.get(CLIPBOARD_CMD_ENVVAR, "").strip()):
        return None
    return shlex.split(raw)
