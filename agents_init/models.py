"""Pydantic v2 models for the answers collected by the wizard.

Defines the three answer records handed from the prompts to the scaffolder,
and the preset record the catalog is built from. The tech-stack answer is a
discriminated union with one case per origin (preset or custom) so callers
branch on the type instead of a loose flag.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .utils import slugify

MAX_CAPABILITIES = 5


# ---------------------------------------------------------------------------
# Project identity
# ---------------------------------------------------------------------------

class ProjectAnswers(BaseModel):
    """Answers from the "Project Setup" phase."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    project_name: str = Field(..., min_length=1, description="Project name")
    description: str = Field(..., min_length=1, description="One-line description")
    target_users: str = Field(..., min_length=1, description="Who the project is for")

    @property
    def project_slug(self) -> str:
        """Lower-cased project name with whitespace runs replaced by hyphens."""
        return slugify(self.project_name)


# ---------------------------------------------------------------------------
# Tech stack
# ---------------------------------------------------------------------------

class _StackBase(BaseModel):
    """Fields shared by both tech-stack answer shapes."""

    model_config = ConfigDict(frozen=True)

    framework: str = Field(..., min_length=1)
    language: str = Field(..., min_length=1)
    database: str = Field(..., min_length=1)
    testing: str = Field(..., min_length=1, description="Testing framework")
    other_tools: list[str] = Field(default_factory=list)
    test_command: Optional[str] = None
    test_coverage_command: Optional[str] = None
    test_watch_command: Optional[str] = None
    build_command: Optional[str] = None
    dev_server_command: Optional[str] = None
    lint_command: Optional[str] = None

    @property
    def summary_line(self) -> str:
        return f"{self.framework} + {self.language} + {self.database}"

    @property
    def stack_line(self) -> str:
        return f"{self.framework}, {self.language}, {self.database}, {self.testing}"


class PresetTechStack(_StackBase):
    """Tech stack taken verbatim from a catalog preset.

    Every directory field is required, so directory placeholders can always
    be resolved for this case.
    """

    kind: Literal["preset"] = "preset"
    preset: str = Field(..., description="Catalog key of the chosen preset")
    orm: str
    source_directory: str
    api_directory: str
    services_directory: str
    models_directory: str
    components_directory: str
    utils_directory: str
    config_directory: str
    test_directory: str

    @property
    def is_preset(self) -> bool:
        return True

    def directory_map(self) -> dict[str, str]:
        """Map each directory placeholder name to this preset's value."""
        return {
            "source-directory": self.source_directory,
            "api-or-routes": self.api_directory,
            "services": self.services_directory,
            "models-or-entities": self.models_directory,
            "components-or-views": self.components_directory,
            "utils-or-lib": self.utils_directory,
            "config": self.config_directory,
            "test-directory": self.test_directory,
        }


class CustomTechStack(_StackBase):
    """Tech stack entered field by field, optionally seeded from a preset."""

    kind: Literal["custom"] = "custom"
    based_on: Optional[str] = Field(
        default=None, description="Preset key the defaults came from, if any"
    )

    @property
    def is_preset(self) -> bool:
        return False


TechStackAnswers = Annotated[
    Union[PresetTechStack, CustomTechStack], Field(discriminator="kind")
]


# ---------------------------------------------------------------------------
# Feature planning
# ---------------------------------------------------------------------------

class FeatureAnswers(BaseModel):
    """Answers from the "Feature Planning" phase."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    problem_statement: str = Field(..., min_length=1)
    capabilities: list[Annotated[str, Field(min_length=1)]] = Field(
        default_factory=list, max_length=MAX_CAPABILITIES, description="Core MVP capabilities in entry order"
    )
    first_feature: Optional[str] = Field(default=None, description="First task to create, if any")

    @property
    def has_first_task(self) -> bool:
        return bool(self.first_feature)


# ---------------------------------------------------------------------------
# Catalog record
# ---------------------------------------------------------------------------

class Preset(BaseModel):
    """A predefined tech-stack bundle offered as a shortcut."""

    model_config = ConfigDict(frozen=True)

    name: str
    framework: str
    language: str
    database: str
    testing: str
    orm: str
    source_directory: str
    api_directory: str
    services_directory: str
    models_directory: str
    components_directory: str
    utils_directory: str
    config_directory: str
    test_directory: str
    other_tools: list[str] = Field(default_factory=list)
    test_command: Optional[str] = None
    test_coverage_command: Optional[str] = None
    test_watch_command: Optional[str] = None
    build_command: Optional[str] = None
    dev_server_command: Optional[str] = None
    lint_command: Optional[str] = None

    def to_answers(self, preset_id: str) -> PresetTechStack:
        """Build the preset-derived tech-stack answer for this record."""
        fields = self.model_dump(exclude={"name"})
        return PresetTechStack(preset=preset_id, **fields)
