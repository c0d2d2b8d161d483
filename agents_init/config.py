"""agents-init configuration.

Centralised, typed configuration for the initializer. All settings use
Pydantic v2 models so they are validated at construction time. Nothing is
read from the environment: every run starts from these defaults and the
answers collected interactively.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from .models import MAX_CAPABILITIES

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "template"


class WizardConfig(BaseModel):
    """Limits and defaults used by the interactive prompts."""

    min_capabilities: int = Field(
        default=3, ge=1, description="Capabilities that must be entered before an empty answer ends the list"
    )
    max_capabilities: int = Field(
        default=MAX_CAPABILITIES, ge=1, le=MAX_CAPABILITIES, description="Upper bound on capability prompts"
    )

    # Defaults offered by the custom tech-stack prompts.
    framework: str = Field(default="Next.js 15")
    language: str = Field(default="TypeScript")
    database: str = Field(default="PostgreSQL")
    testing: str = Field(default="Jest")
    test_command: str = Field(default="npm test")
    build_command: str = Field(default="npm run build")
    dev_server_command: str = Field(default="npm run dev")
    lint_command: str = Field(default="npm run lint")

    @model_validator(mode="after")
    def _check_capability_bounds(self) -> "WizardConfig":
        if self.min_capabilities > self.max_capabilities:
            raise ValueError(
                f"min_capabilities ({self.min_capabilities}) exceeds max_capabilities ({self.max_capabilities})"
            )
        return self


class GenerationConfig(BaseModel):
    """Naming rules for the files written after the prompts."""

    task_id: str = Field(default="TASK-001")
    roadmap_filename: str = Field(default="ROADMAP.md")
    markdown_suffix: str = Field(default=".md")
    roadmap_slug_length: int = Field(
        default=30, ge=1, description="Slug length used for the task reference in the roadmap"
    )
    task_slug_length: int = Field(
        default=50, ge=1, description="Slug length used for the task filename and branch"
    )


class Config(BaseModel):
    """Global agents-init configuration.

    Created once by the CLI entry point and passed to the pipeline, which
    hands it on to the wizard and the scaffolder.
    """

    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)
    cwd: Path = Field(default_factory=Path.cwd)
    agents_dir_name: str = Field(default="agents")
    tasks_dir_name: str = Field(default="tasks")
    wizard: WizardConfig = Field(default_factory=WizardConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def output_dir(self) -> Path:
        """Where the template tree is materialised (``<cwd>/agents``)."""
        return self.cwd / self.agents_dir_name

    @property
    def tasks_dir(self) -> Path:
        """Where task documents live (``<cwd>/tasks``)."""
        return self.cwd / self.tasks_dir_name

    @property
    def template_tasks_dir(self) -> Path:
        """The ``tasks`` subtree inside the bundled template."""
        return self.template_dir / self.tasks_dir_name

    @property
    def roadmap_path(self) -> Path:
        """Path to the materialised roadmap document."""
        return self.output_dir / self.generation.roadmap_filename
