"""Rich-based prompt primitives used by the wizard.

Validation lives in ``process_response`` overrides: raising
``InvalidResponse`` makes Rich print the message and ask the same question
again, so an invalid answer never leaves this module.
"""

from __future__ import annotations

import sys
from typing import IO, Any

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, InvalidResponse, Prompt

from ..errors import PromptEnvironmentError
from ..utils import console as default_console


def validate_required(value: str) -> bool:
    """Return ``True`` when *value* has content once surrounding whitespace is removed."""
    return bool(value.strip())


def split_list(value: str) -> list[str]:
    """Split a comma-separated answer into trimmed, non-empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


# ---------------------------------------------------------------------------
# Prompt classes
# ---------------------------------------------------------------------------


class _StreamInputMixin:
    """Read scripted streams the way ``input()`` reads a terminal.

    ``readline`` keeps the line ending and returns ``""`` only at end of
    stream, which would otherwise re-ask forever.
    """

    @classmethod
    def get_input(cls, console: Console, prompt: Any, password: bool, stream: IO[str] | None = None) -> str:
        value = super().get_input(console, prompt, password, stream=stream)  # type: ignore[misc]
        if stream is None:
            return value
        if value == "":
            raise EOFError("input stream exhausted")
        return value.rstrip("\r\n")


class TextPrompt(_StreamInputMixin, Prompt):
    """Free-text prompt; an empty answer is accepted."""


class RequiredPrompt(TextPrompt):
    """Free-text prompt that re-asks until the trimmed answer is non-empty."""

    def __init__(self, prompt: str = "", *, message: str = "This field is required", **kwargs: Any) -> None:
        super().__init__(prompt, **kwargs)
        self.required_message = message

    def process_response(self, value: str) -> str:
        value = super().process_response(value)
        if not validate_required(value):
            raise InvalidResponse(f"[prompt.invalid]{self.required_message}")
        return value


class YesNoPrompt(_StreamInputMixin, Confirm):
    """``[y/n]`` question."""


# ---------------------------------------------------------------------------
# Prompter
# ---------------------------------------------------------------------------


class Prompter:
    """Thin facade over the prompt classes.

    Args:
        console: Console used to render questions. Defaults to the shared
            console.
        stream: Optional text stream to read answers from instead of stdin.
            Supplying a stream also skips the terminal check.
    """

    def __init__(self, console: Console | None = None, stream: IO[str] | None = None) -> None:
        self.console = console or default_console
        self.stream = stream

    def ensure_interactive(self) -> None:
        """Raise ``PromptEnvironmentError`` when there is no terminal to prompt on."""
        if self.stream is not None:
            return
        if not sys.stdin or not sys.stdin.isatty():
            raise PromptEnvironmentError()

    # -- Questions ---------------------------------------------------------

    def ask_required(self, message: str, *, error: str, default: str | None = None) -> str:
        """Ask until a non-empty answer is given; returns it trimmed."""
        prompt = RequiredPrompt(message, console=self.console, message=error)
        return self._run(prompt, default)

    def ask_text(self, message: str, *, default: str | None = None) -> str:
        """Ask a free-text question; returns the trimmed answer (possibly empty)."""
        prompt = TextPrompt(message, console=self.console, show_default=bool(default))
        return self._run(prompt, default)

    def ask_list(self, message: str, *, default: list[str] | None = None) -> list[str]:
        """Ask for a comma-separated list."""
        joined = ", ".join(default) if default else None
        return split_list(self.ask_text(message, default=joined))

    def ask_confirm(self, message: str, *, default: bool) -> bool:
        prompt = YesNoPrompt(message, console=self.console)
        return self._run(prompt, default)

    def ask_choice(self, message: str, choices: dict[str, str], *, default: str | None = None) -> str:
        """Show *choices* as a numbered list and return the key picked.

        Args:
            message: Question shown under the list.
            choices: Ordered ``{key: label}`` mapping.
            default: Key selected when the answer is empty. Defaults to the
                first entry.
        """
        keys = list(choices)
        for index, key in enumerate(keys, start=1):
            self.console.print(f"  {index}. {escape(choices[key])}")
        numbers = [str(index) for index in range(1, len(keys) + 1)]
        default_number = str(keys.index(default) + 1) if default in choices else numbers[0]
        prompt = TextPrompt(
            message,
            console=self.console,
            choices=numbers,
            show_choices=False,
        )
        answer = self._run(prompt, default_number)
        return keys[int(answer) - 1]

    # -- Internal ----------------------------------------------------------

    def _run(self, prompt: Prompt | Confirm, default: Any) -> Any:
        try:
            if default is None:
                return prompt(stream=self.stream)
            return prompt(default=default, stream=self.stream)
        except EOFError as exc:
            raise PromptEnvironmentError() from exc
