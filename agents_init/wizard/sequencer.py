"""The four question phases of the initializer.

Phase order is fixed: Project Setup, Tech Stack, Feature Planning, Confirm.
Each phase returns a validated answer record; the confirm phase raises
``InitCancelled`` when the user says no.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rich.console import Console

from ..config import WizardConfig
from ..errors import InitCancelled
from ..models import (
    CustomTechStack,
    FeatureAnswers,
    Preset,
    ProjectAnswers,
    TechStackAnswers,
)
from ..presets import CUSTOM_CHOICE, PRESETS, get_preset, menu_choices
from ..reporter.summary import SummaryReporter
from .prompts import Prompter


@dataclass(frozen=True)
class WizardAnswers:
    """Everything the scaffolder needs, collected in one run of the wizard."""

    project: ProjectAnswers
    stack: TechStackAnswers
    features: FeatureAnswers


class PromptSequencer:
    """Runs the interactive question phases in order."""

    def __init__(
        self,
        prompter: Prompter,
        config: WizardConfig | None = None,
        reporter: SummaryReporter | None = None,
        presets: dict[str, Preset] | None = None,
    ) -> None:
        self.prompter = prompter
        self.config = config or WizardConfig()
        self.reporter = reporter or SummaryReporter(prompter.console)
        self.presets = PRESETS if presets is None else presets

    @property
    def console(self) -> Console:
        return self.prompter.console

    # -- Public API --------------------------------------------------------

    def run(self) -> WizardAnswers:
        """Ask every question and return the answers.

        Raises:
            PromptEnvironmentError: No terminal is available.
            InitCancelled: The user declined the final confirmation.
        """
        self.prompter.ensure_interactive()
        project = self.prompt_project_setup()
        stack = self.prompt_tech_stack()
        features = self.prompt_feature_planning()
        if not self.confirm(project, stack, features):
            raise InitCancelled()
        return WizardAnswers(project=project, stack=stack, features=features)

    # -- Phase 1: Project Setup --------------------------------------------

    def prompt_project_setup(self) -> ProjectAnswers:
        self.reporter.section("📦 Project Setup")
        ask = self.prompter.ask_required
        return ProjectAnswers(
            project_name=ask("Project name", error="Project name is required"),
            description=ask("Description (one line)", error="Description is required"),
            target_users=ask("Target users", error="Target users is required"),
        )

    # -- Phase 2: Tech Stack -----------------------------------------------

    def prompt_tech_stack(self) -> TechStackAnswers:
        self.reporter.section("🛠️  Tech Stack")
        choice = self.prompter.ask_choice(
            "Choose a preset or customize", menu_choices(self.presets)
        )

        if choice == CUSTOM_CHOICE:
            return self.prompt_custom_stack()

        preset = get_preset(choice, self.presets)
        self.reporter.preset_details(preset)
        if self.prompter.ask_confirm("Customize this preset?", default=False):
            return self.prompt_custom_stack(preset, based_on=choice)
        return preset.to_answers(choice)

    def prompt_custom_stack(
        self, defaults: Optional[Preset] = None, *, based_on: Optional[str] = None
    ) -> CustomTechStack:
        """Prompt for every stack field, seeded from *defaults* when given."""
        cfg = self.config

        def seed(name: str) -> Optional[str]:
            value = getattr(defaults, name, None) if defaults is not None else None
            return value or getattr(cfg, name)

        ask = self.prompter.ask_required
        ask_text = self.prompter.ask_text
        return CustomTechStack(
            based_on=based_on,
            framework=ask("Framework", error="Framework is required", default=seed("framework")),
            language=ask("Language", error="Language is required", default=seed("language")),
            database=ask("Database", error="Database is required", default=seed("database")),
            testing=ask(
                "Testing framework", error="Testing framework is required", default=seed("testing")
            ),
            other_tools=self.prompter.ask_list(
                "Other key tools (comma-separated)",
                default=defaults.other_tools if defaults is not None else None,
            ),
            test_command=ask_text("Test command", default=seed("test_command")) or None,
            build_command=ask_text("Build command", default=seed("build_command")) or None,
            dev_server_command=ask_text("Dev server command", default=seed("dev_server_command"))
            or None,
            lint_command=ask_text("Lint command", default=seed("lint_command")) or None,
        )

    # -- Phase 3: Feature Planning -----------------------------------------

    def prompt_feature_planning(self) -> FeatureAnswers:
        self.reporter.section("🎯 Feature Planning (PM Mode)")
        problem = self.prompter.ask_required(
            "What problem does your app solve?", error="Problem statement is required"
        )

        self.reporter.note(
            f"Describe your MVP in {self.config.min_capabilities}-{self.config.max_capabilities} "
            "core capabilities (press Enter with empty input when done):"
        )
        capabilities = self.collect_capabilities()

        first_feature: Optional[str] = None
        if self.prompter.ask_confirm("Want to define your first feature now?", default=True):
            first_feature = self.prompter.ask_required(
                'First feature (e.g., "User can create a new task")',
                error="Feature name is required",
            )

        return FeatureAnswers(
            problem_statement=problem,
            capabilities=capabilities,
            first_feature=first_feature,
        )

    def collect_capabilities(self) -> list[str]:
        """Collect between ``min_capabilities`` and ``max_capabilities`` entries.

        The first ``min_capabilities`` answers are required. After that an
        empty answer ends the list without asking the remaining questions.
        """
        minimum = self.config.min_capabilities
        capabilities: list[str] = []
        for index in range(1, self.config.max_capabilities + 1):
            if index <= minimum:
                answer = self.prompter.ask_required(
                    str(index), error=f"At least {minimum} capabilities required"
                )
            else:
                answer = self.prompter.ask_text(str(index))
            if not answer.strip():
                break
            capabilities.append(answer.strip())
        return capabilities

    # -- Phase 4: Confirm --------------------------------------------------

    def confirm(
        self, project: ProjectAnswers, stack: TechStackAnswers, features: FeatureAnswers
    ) -> bool:
        self.reporter.summary(project, stack, features)
        return self.prompter.ask_confirm("Generate?", default=True)
