"""Writes the first task document from ``templates/task.md.j2``."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..config import GenerationConfig
from ..errors import ScaffoldError
from ..models import FeatureAnswers, ProjectAnswers
from ..utils import slugify
from .templates import TemplateRenderer

TASK_TEMPLATE = "task.md.j2"


class FirstTaskGenerator:
    """Renders ``<tasks_dir>/TASK-001-<slug>.md`` for the first feature."""

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        generation: GenerationConfig | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.generation = generation or GenerationConfig()

    def task_slug(self, feature: str) -> str:
        return slugify(feature, self.generation.task_slug_length)

    def task_path(self, tasks_dir: Path, feature: str) -> Path:
        return tasks_dir / f"{self.generation.task_id}-{self.task_slug(feature)}.md"

    def build_context(self, project: ProjectAnswers, feature: str) -> dict[str, Any]:
        return {
            "task_id": self.generation.task_id,
            "feature": feature,
            "project_name": project.project_name,
            "description": project.description,
            "slug": self.task_slug(feature),
        }

    async def generate(
        self, tasks_dir: Path, project: ProjectAnswers, features: FeatureAnswers
    ) -> Path | None:
        """Write the task file; returns its path, or ``None`` without a first feature.

        Raises:
            ScaffoldError: The feature name would place the file outside
                *tasks_dir* (it contains ``/`` or ``..``).
        """
        if not features.first_feature:
            return None
        path = self.task_path(tasks_dir, features.first_feature)
        if path.resolve().parent != tasks_dir.resolve():
            raise ScaffoldError(
                f"Task file for {features.first_feature!r} would be written outside {tasks_dir}"
            )
        return await self.renderer.render_to_file(
            TASK_TEMPLATE, path, self.build_context(project, features.first_feature)
        )
