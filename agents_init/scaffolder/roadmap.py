"""Injects the MVP capabilities and the first task into ``ROADMAP.md``.

Both insertions look for an exact anchor in the copied roadmap. When an
anchor is missing that section is left alone: the user may have edited the
template, and the rest of the generation still goes ahead.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from ..config import GenerationConfig
from ..models import FeatureAnswers
from ..utils import console as default_console
from ..utils import print_note, print_warning, read_text, slugify, write_text

HIGH_PRIORITY_ANCHOR = "### High Priority\n\n- [Placeholder]"
CURRENT_SPRINT_ANCHOR = "### Current Sprint"
BACKLOG_FOOTER = "- Additional features to be prioritized by Product Manager agent"


@dataclass
class RoadmapUpdate:
    """New roadmap text plus which anchors were found."""

    text: str
    capabilities_inserted: bool = False
    task_inserted: bool = False
    missing_anchors: list[str] = field(default_factory=list)


def capabilities_block(capabilities: list[str]) -> str:
    numbered = "\n".join(f"{i}. {cap}" for i, cap in enumerate(capabilities, start=1))
    return (
        "### High Priority\n\n**MVP Core Capabilities:**\n"
        f"{numbered}\n\n{BACKLOG_FOOTER}"
    )


def sprint_block(feature: str, task_id: str, slug_length: int) -> str:
    slug = slugify(feature, slug_length)
    return (
        f"{CURRENT_SPRINT_ANCHOR}\n\n**{task_id}**: {feature}\n"
        "- Status: Ready for implementation\n"
        "- Priority: High\n"
        f"- See: `tasks/{task_id}-{slug}.md`"
    )


def update_roadmap_text(
    text: str,
    features: FeatureAnswers,
    task_id: str = "TASK-001",
    slug_length: int = 30,
) -> RoadmapUpdate:
    """Return the roadmap with capabilities and the first task filled in.

    Only the first occurrence of each anchor is rewritten.
    """
    update = RoadmapUpdate(text=text)

    if features.capabilities:
        if HIGH_PRIORITY_ANCHOR in update.text:
            update.text = update.text.replace(
                HIGH_PRIORITY_ANCHOR, capabilities_block(features.capabilities), 1
            )
            update.capabilities_inserted = True
        else:
            update.missing_anchors.append(HIGH_PRIORITY_ANCHOR)

    if features.first_feature:
        if CURRENT_SPRINT_ANCHOR in update.text:
            update.text = update.text.replace(
                CURRENT_SPRINT_ANCHOR,
                sprint_block(features.first_feature, task_id, slug_length),
                1,
            )
            update.task_inserted = True
        else:
            update.missing_anchors.append(CURRENT_SPRINT_ANCHOR)

    return update


class RoadmapUpdater:
    """Reads, updates and rewrites the materialised roadmap."""

    def __init__(
        self,
        generation: GenerationConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self.generation = generation or GenerationConfig()
        self.console = console or default_console

    async def update(self, path: Path, features: FeatureAnswers) -> RoadmapUpdate | None:
        """Update *path* in place. Returns ``None`` when the file does not exist."""
        if not path.is_file():
            print_warning(f"  {path.name} not found -- skipping roadmap update.", out=self.console)
            return None

        text = await asyncio.to_thread(read_text, path)
        update = update_roadmap_text(
            text,
            features,
            task_id=self.generation.task_id,
            slug_length=self.generation.roadmap_slug_length,
        )
        for anchor in update.missing_anchors:
            heading = anchor.splitlines()[0]
            print_note(f"  {path.name}: '{heading}' section not found, left unchanged", out=self.console)

        await asyncio.to_thread(write_text, path, update.text)
        return update
