"""Console reporting for the initializer.

Everything here only prints: the banner, section headings, the summary shown
before confirmation, per-file progress lines, and the closing next-steps
guide. User-supplied text is escaped so brackets in answers are printed
literally instead of being read as Rich markup.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..models import FeatureAnswers, Preset, ProjectAnswers, TechStackAnswers
from ..utils import console as default_console
from ..utils import print_note, print_section, print_success, print_summary_table, relative_display

NEXT_STEPS: list[str] = [
    "Review [yellow]agents/BUSINESS_REQUIREMENTS.md[/yellow]",
    "Review [yellow]agents/ARCHITECTURE.md[/yellow] and customize for your project structure",
    'Start with: [green]"Act as Software Engineer agent. Implement tasks/TASK-001-*.md"[/green]',
    "See [yellow]agents/QUICK_START.md[/yellow] for more guidance",
]


def build_summary_rows(
    project: ProjectAnswers,
    stack: TechStackAnswers,
    features: FeatureAnswers,
    task_id: str = "TASK-001",
) -> dict[str, str]:
    """Return the label/value rows shown before the final confirmation."""
    rows = {
        "Project": project.project_name,
        "Description": project.description,
        "Target Users": project.target_users,
        "Stack": stack.summary_line,
        "Testing": stack.testing,
        "Features": f"{len(features.capabilities)} core capabilities defined",
    }
    if features.first_feature:
        rows["Tasks"] = f"1 task created ({task_id}: {features.first_feature})"
    return rows


class SummaryReporter:
    """Prints progress and summaries on a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def banner(self) -> None:
        self.console.print(
            Panel(
                "Let's set up your AI-assisted development environment!",
                title="[bold blue]🤖 AI Agent Framework Initializer[/bold blue]",
                border_style="blue",
            )
        )

    def section(self, title: str) -> None:
        print_section(title, out=self.console)

    def note(self, message: str) -> None:
        print_note(escape(message), out=self.console)

    def preset_details(self, preset: Preset) -> None:
        self.console.print("\n[green]✓ Using preset:[/green]")
        for label, value in (
            ("Framework", preset.framework),
            ("Language", preset.language),
            ("Database", preset.database),
            ("Testing", preset.testing),
            ("ORM", preset.orm),
        ):
            self.console.print(f"  - {label}: {escape(value)}")

    def summary(
        self,
        project: ProjectAnswers,
        stack: TechStackAnswers,
        features: FeatureAnswers,
        task_id: str = "TASK-001",
    ) -> None:
        self.section("✅ Summary")
        rows = build_summary_rows(project, stack, features, task_id)
        print_summary_table(
            {label: escape(value) for label, value in rows.items()},
            title="",
            out=self.console,
        )

    def generating(self) -> None:
        self.console.print("\n[bold green]✨ Creating files...[/bold green]\n")

    def file_written(self, path: Path, base: Path) -> None:
        self.console.print(f"  [green]✓[/green] {escape(relative_display(path, base))}")

    def generated(self) -> None:
        print_success("\n✨ All files created successfully!\n", out=self.console)

    def cancelled(self, message: str) -> None:
        self.console.print(f"\n[yellow]❌ {escape(message)}[/yellow]")

    def next_steps(self, project: ProjectAnswers) -> None:
        self.console.print("[bold cyan]🚀 Next Steps:[/bold cyan]\n")
        for number, step in enumerate(NEXT_STEPS, start=1):
            self.console.print(f"  {number}. {step}")
        self.console.print()
        print_success(
            f"Done! Your AI agent framework is ready for {escape(project.project_name)}. 🎉\n",
            out=self.console,
        )
