"""One-time project bootstrap wizard."""

from setup_wizard.constants import (
    SETUP_CANCELLED,
    SETUP_COMMAND_FAILED,
    SETUP_CONFIG_INVALID,
    SETUP_FAILED,
    SETUP_SUCCESS,
)

__all__ = [
    "SETUP_SUCCESS",
    "SETUP_CANCELLED",
    "SETUP_CONFIG_INVALID",
    "SETUP_COMMAND_FAILED",
    "SETUP_FAILED",
]
