"""agents-init pipeline orchestrator.

Runs the initializer end to end:

1. ASK      -- project setup, tech stack, feature planning, confirmation.
2. COPY     -- materialise the agent template into ``agents/`` and ``tasks/``.
3. FILL     -- substitute placeholders in every copied markdown file.
4. DOCUMENT -- update ``ROADMAP.md`` and write the first task.
5. REPORT   -- print the next steps.

Usage::

    agents-init
    python -m agents_init
"""

from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass, field
from pathlib import Path

from rich.markup import escape

from agents_init.config import Config
from agents_init.errors import InitCancelled, PromptEnvironmentError
from agents_init.reporter.summary import SummaryReporter
from agents_init.scaffolder.materializer import TemplateMaterializer
from agents_init.scaffolder.placeholders import PlaceholderEngine
from agents_init.scaffolder.roadmap import RoadmapUpdate, RoadmapUpdater
from agents_init.scaffolder.tasks import FirstTaskGenerator
from agents_init.utils import err_console, print_error
from agents_init.wizard.prompts import Prompter
from agents_init.wizard.sequencer import PromptSequencer, WizardAnswers


@dataclass
class GenerationResult:
    """Files touched by one successful run."""

    output_dir: Path
    tasks_dir: Path
    processed_files: list[Path] = field(default_factory=list)
    roadmap: RoadmapUpdate | None = None
    task_file: Path | None = None


class InitPipeline:
    """Drives the wizard and the scaffolder in order.

    Attributes:
        config: Paths and naming rules for this run.
        prompter: Prompt surface shared by the wizard and the overwrite check.
        reporter: Console reporter for progress and summaries.
    """

    def __init__(self, config: Config, prompter: Prompter | None = None) -> None:
        self.config = config
        self.prompter = prompter or Prompter()
        self.reporter = SummaryReporter(self.prompter.console)

    async def run(self) -> GenerationResult:
        """Ask the questions, generate the files, print the next steps.

        Raises:
            InitCancelled: The user declined a confirmation.
            PromptEnvironmentError: Prompts cannot be shown here.
        """
        self.reporter.banner()
        sequencer = PromptSequencer(self.prompter, self.config.wizard, self.reporter)
        answers = sequencer.run()
        result = await self.generate(answers)
        self.reporter.next_steps(answers.project)
        return result

    async def generate(self, answers: WizardAnswers) -> GenerationResult:
        """Write every output file for *answers*."""
        self.reporter.generating()
        cwd = self.config.cwd

        materialized = await TemplateMaterializer(self.config, self.prompter).materialize()
        result = GenerationResult(
            output_dir=materialized.output_dir, tasks_dir=materialized.tasks_dir
        )

        engine = PlaceholderEngine(
            answers.project,
            answers.stack,
            suffix=self.config.generation.markdown_suffix,
        )
        result.processed_files = await engine.process_tree(
            materialized.output_dir,
            on_file=lambda path: self.reporter.file_written(path, cwd),
        )

        updater = RoadmapUpdater(self.config.generation, self.prompter.console)
        result.roadmap = await updater.update(self.config.roadmap_path, answers.features)

        task_generator = FirstTaskGenerator(generation=self.config.generation)
        result.task_file = await task_generator.generate(
            materialized.tasks_dir, answers.project, answers.features
        )
        if result.task_file is not None:
            self.reporter.file_written(result.task_file, cwd)

        self.reporter.generated()
        return result


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point for ``agents-init`` / ``python -m agents_init``."""
    pipeline = InitPipeline(Config(), Prompter())

    try:
        asyncio.run(pipeline.run())
    except InitCancelled as exc:
        pipeline.reporter.cancelled(str(exc))
        sys.exit(0)
    except PromptEnvironmentError as exc:
        print_error(escape(str(exc)))
        sys.exit(1)
    except KeyboardInterrupt:
        print_error("\nInterrupted.")
        sys.exit(1)
    except Exception as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
