"""Exceptions raised across the initializer."""

from __future__ import annotations


class AgentsInitError(Exception):
    """Base class for every agents-init failure."""


class InitCancelled(AgentsInitError):
    """The user declined a confirmation. Not a failure: the run exits 0."""

    def __init__(self, message: str = "Initialization cancelled.") -> None:
        super().__init__(message)


class PromptEnvironmentError(AgentsInitError):
    """The interactive prompts cannot be shown in the current environment."""

    def __init__(
        self, message: str = "Prompt couldn't be rendered in the current environment"
    ) -> None:
        super().__init__(message)


class ScaffoldError(AgentsInitError):
    """Raised when the bundled template tree cannot be materialised."""
