"""Models shared by the synchronization logic."""

from enum import Enum


class SyncDecision(str, Enum):
    """Action to take on an issue's sync-hold label."""

    ADD_LABEL = "add_label"
    REMOVE_LABEL = "remove_label"
    NOOP = "noop"
