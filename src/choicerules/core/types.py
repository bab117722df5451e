"""Shared type aliases and host sentinels for the core and domain layers."""
from typing import Literal

Severity = Literal["ERROR", "WARNING"]

# Host convention for "no option highlighted when the prompt opens".
NO_DEFAULT_CHOICE = -1

# Host cancel types that are not an option position.
CANCEL_DISALLOWED = -1
CANCEL_BRANCH = -2
HOST_CANCEL_TYPES: tuple[int, ...] = (CANCEL_DISALLOWED, CANCEL_BRANCH)

__all__ = [
    "Severity",
    "NO_DEFAULT_CHOICE",
    "CANCEL_DISALLOWED",
    "CANCEL_BRANCH",
    "HOST_CANCEL_TYPES",
]
