"""agents-init scaffolder -- turns wizard answers into files on disk.

Copies the bundled agent template into ``<cwd>/agents`` (and ``<cwd>/tasks``
when missing), fills in the bracketed placeholders, updates the roadmap and
writes the first task.

Quick usage::

    from agents_init.scaffolder import PlaceholderEngine, find_markdown_files

    engine = PlaceholderEngine(project, stack)
    await engine.process_tree(Path("agents"))
"""

from agents_init.scaffolder.materializer import MaterializeResult, TemplateMaterializer
from agents_init.scaffolder.placeholders import (
    PlaceholderEngine,
    PlaceholderRule,
    apply_rules,
    build_rules,
    find_markdown_files,
)
from agents_init.scaffolder.roadmap import RoadmapUpdate, RoadmapUpdater, update_roadmap_text
from agents_init.scaffolder.tasks import FirstTaskGenerator
from agents_init.scaffolder.templates import TemplateRenderer

__all__ = [
    "FirstTaskGenerator",
    "MaterializeResult",
    "PlaceholderEngine",
    "PlaceholderRule",
    "RoadmapUpdate",
    "RoadmapUpdater",
    "TemplateMaterializer",
    "TemplateRenderer",
    "apply_rules",
    "build_rules",
    "find_markdown_files",
    "update_roadmap_text",
]
