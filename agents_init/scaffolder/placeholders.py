"""Bracketed placeholder substitution over the copied markdown documents.

The template documents carry literal tokens such as ``[YOUR_PROJECT_NAME]``
or ``[test-command]``. :func:`build_rules` turns the wizard answers into an
ordered list of regex rules; a rule is only emitted when its value is known,
so tokens without an answer are left in place for the user to fill in.
"""

from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Callable

from ..models import PresetTechStack, ProjectAnswers, TechStackAnswers
from ..utils import read_text, write_text

NOT_DEPLOYED = "Not yet deployed"


@dataclass(frozen=True)
class PlaceholderRule:
    """Replace every match of ``pattern`` with ``value`` (inserted literally)."""

    pattern: re.Pattern[str]
    value: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(lambda _match: self.value, text)


def _token(name: str) -> re.Pattern[str]:
    """Pattern for the exact token ``[name]``."""
    return re.compile(re.escape(f"[{name}]"))


def _open_token(prefix: str) -> re.Pattern[str]:
    """Pattern for ``[prefix...]`` where anything up to the closing bracket may follow."""
    return re.compile(re.escape(f"[{prefix}") + r"[^\]]*\]")


# ---------------------------------------------------------------------------
# Rule construction
# ---------------------------------------------------------------------------


def build_rules(
    project: ProjectAnswers,
    stack: TechStackAnswers,
    today: date | None = None,
) -> list[PlaceholderRule]:
    """Return the substitution rules for one set of answers, in application order."""
    today = today or datetime.now(timezone.utc).date()
    rules: list[PlaceholderRule] = [
        PlaceholderRule(_token("YOUR_PROJECT_NAME"), project.project_name),
        PlaceholderRule(_token("BRIEF_DESCRIPTION"), project.description),
        PlaceholderRule(_token("TARGET_USERS"), project.target_users),
        PlaceholderRule(_open_token("YOUR_TECH_STACK"), stack.stack_line),
        PlaceholderRule(_token("FRAMEWORK/LANGUAGE"), stack.framework),
        PlaceholderRule(_token("DATABASE"), stack.database),
        PlaceholderRule(_token("TESTING_TOOLS"), stack.testing),
        PlaceholderRule(
            _token("OTHER_KEY_TOOLS"),
            ", ".join(stack.other_tools) if stack.other_tools else "N/A",
        ),
    ]

    if stack.test_command:
        rules += [
            PlaceholderRule(_token("test-command"), stack.test_command),
            PlaceholderRule(
                _token("test-coverage-command"),
                stack.test_coverage_command or f"{stack.test_command} --coverage",
            ),
            PlaceholderRule(
                _token("test-watch-command"),
                stack.test_watch_command or f"{stack.test_command} --watch",
            ),
        ]
    for token, command in (
        ("build-command", stack.build_command),
        ("dev-server-command", stack.dev_server_command),
        ("lint-command", stack.lint_command),
    ):
        if command:
            rules.append(PlaceholderRule(_token(token), command))

    if isinstance(stack, PresetTechStack):
        rules.append(PlaceholderRule(_token("your-project"), project.project_slug))
        rules += [
            PlaceholderRule(_token(token), directory)
            for token, directory in stack.directory_map().items()
        ]

    rules += [
        PlaceholderRule(_token("DATE"), today.isoformat()),
        PlaceholderRule(_open_token("YOUR_PRODUCTION_URL"), NOT_DEPLOYED),
    ]
    return rules


def apply_rules(text: str, rules: list[PlaceholderRule]) -> str:
    """Apply *rules* to *text* in order."""
    for rule in rules:
        text = rule.apply(text)
    return text


# ---------------------------------------------------------------------------
# File discovery
# ---------------------------------------------------------------------------


def find_markdown_files(root: Path, suffix: str = ".md") -> list[Path]:
    """Return every file under *root* whose name ends with *suffix*.

    The walk is depth-first with entries sorted by name inside each
    directory. Matching is case-sensitive, so ``NOTES.MD`` is skipped.
    """
    found: list[Path] = []
    for entry in sorted(root.iterdir()):
        if entry.is_dir():
            found.extend(find_markdown_files(entry, suffix))
        elif entry.name.endswith(suffix):
            found.append(entry)
    return found


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class PlaceholderEngine:
    """Rewrites markdown files in place with the answer values."""

    def __init__(
        self,
        project: ProjectAnswers,
        stack: TechStackAnswers,
        today: date | None = None,
        suffix: str = ".md",
    ) -> None:
        self.rules = build_rules(project, stack, today)
        self.suffix = suffix

    def substitute(self, text: str) -> str:
        return apply_rules(text, self.rules)

    async def process_file(self, path: Path) -> Path:
        content = await asyncio.to_thread(read_text, path)
        await asyncio.to_thread(write_text, path, self.substitute(content))
        return path

    async def process_tree(
        self, root: Path, on_file: Callable[[Path], None] | None = None
    ) -> list[Path]:
        """Substitute every markdown file under *root*.

        Args:
            root: Directory to walk.
            on_file: Called with each path once it has been rewritten.

        Returns:
            The files processed, in walk order.
        """
        files = await asyncio.to_thread(find_markdown_files, root, self.suffix)
        for path in files:
            await self.process_file(path)
            if on_file is not None:
                on_file(path)
        return files
