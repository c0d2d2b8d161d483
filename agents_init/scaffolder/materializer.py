"""Copies the bundled agent template tree into the working directory.

The ``agents/`` copy is only replaced after the user agrees to overwrite it.
The ``tasks/`` copy is only made when no ``tasks/`` directory exists yet, so
existing task files are never touched.
"""

from __future__ import annotations

import asyncio
import shutil
from dataclasses import dataclass
from pathlib import Path

from ..config import Config
from ..errors import InitCancelled, ScaffoldError
from ..wizard.prompts import Prompter

OVERWRITE_CANCELLED = "Cancelled to avoid overwriting existing files."


@dataclass(frozen=True)
class MaterializeResult:
    """Where the template landed and whether the tasks tree was copied."""

    output_dir: Path
    tasks_dir: Path
    tasks_copied: bool


class TemplateMaterializer:
    """Creates ``<cwd>/agents`` and, if absent, ``<cwd>/tasks`` from the template."""

    def __init__(self, config: Config, prompter: Prompter) -> None:
        self.config = config
        self.prompter = prompter

    async def materialize(self) -> MaterializeResult:
        """Copy the template tree.

        Raises:
            ScaffoldError: The template directory is missing.
            InitCancelled: ``agents/`` exists and the user declined to
                overwrite it. Nothing has been written at that point.
        """
        template_dir = self.config.template_dir
        output_dir = self.config.output_dir
        tasks_dir = self.config.tasks_dir

        if not template_dir.is_dir():
            raise ScaffoldError(f"Template directory not found: {template_dir}")

        if output_dir.exists():
            overwrite = self.prompter.ask_confirm(
                f"'{self.config.agents_dir_name}/' directory already exists. Overwrite?",
                default=False,
            )
            if not overwrite:
                raise InitCancelled(OVERWRITE_CANCELLED)
            await asyncio.to_thread(_remove_tree, output_dir)

        await asyncio.to_thread(shutil.copytree, template_dir, output_dir)

        tasks_copied = False
        if not tasks_dir.exists():
            await asyncio.to_thread(_copy_tasks, self.config.template_tasks_dir, tasks_dir)
            tasks_copied = True

        return MaterializeResult(
            output_dir=output_dir, tasks_dir=tasks_dir, tasks_copied=tasks_copied
        )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _remove_tree(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def _copy_tasks(source: Path, target: Path) -> None:
    """Copy the template's tasks subtree, or create an empty directory if it has none."""
    if source.is_dir():
        shutil.copytree(source, target)
    else:
        target.mkdir(parents=True, exist_ok=True)
