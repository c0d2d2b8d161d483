"""Shared pytest fixtures for the agents-init test suite.

Provides reusable fixtures for:
- Captured Rich consoles and scripted prompters
- Sample answer records (project, preset and custom stacks, features)
- A temporary working directory wired into ``Config``
"""

from __future__ import annotations

import io
from datetime import date
from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

from agents_init.config import Config
from agents_init.models import CustomTechStack, FeatureAnswers, PresetTechStack, ProjectAnswers
from agents_init.presets import PRESETS
from agents_init.wizard.prompts import Prompter

FIXED_DATE = date(2026, 1, 15)


# ---------------------------------------------------------------------------
# Consoles & prompts
# ---------------------------------------------------------------------------

def make_console() -> Console:
    """A plain-text console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


def console_text(console: Console) -> str:
    """Everything printed so far on a console built by :func:`make_console`."""
    return console.file.getvalue()  # type: ignore[attr-defined]


@pytest.fixture
def capture_console() -> Console:
    return make_console()


@pytest.fixture
def scripted_prompter() -> Callable[..., Prompter]:
    """Factory: ``scripted_prompter("Acme", "", "y")`` answers one line per prompt."""

    def _make(*answers: str, console: Console | None = None) -> Prompter:
        stream = io.StringIO("".join(f"{answer}\n" for answer in answers))
        return Prompter(console=console or make_console(), stream=stream)

    return _make


# ---------------------------------------------------------------------------
# Answer records
# ---------------------------------------------------------------------------

@pytest.fixture
def project_answers() -> ProjectAnswers:
    return ProjectAnswers(project_name="Acme", description="Todo app", target_users="teams")


@pytest.fixture
def custom_stack() -> CustomTechStack:
    return CustomTechStack(
        framework="Express",
        language="TypeScript",
        database="SQLite",
        testing="Jest",
        test_command="npm test",
    )


@pytest.fixture
def preset_stack() -> PresetTechStack:
    return PRESETS["express-api"].to_answers("express-api")


@pytest.fixture
def feature_answers() -> FeatureAnswers:
    return FeatureAnswers(
        problem_statement="Teams lose track of todos",
        capabilities=["Create todos", "Assign todos", "Track progress"],
        first_feature="User can log in",
    )


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Empty directory standing in for the user's current working directory."""
    directory = tmp_path / "workspace"
    directory.mkdir()
    return directory


@pytest.fixture
def config(work_dir: Path) -> Config:
    return Config(cwd=work_dir)
