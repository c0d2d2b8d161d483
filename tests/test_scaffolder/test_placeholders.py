"""Tests for placeholder substitution (agents_init.scaffolder.placeholders).

Covers:
- Every token with its governing answer supplied
- Tokens left verbatim when their answer is absent
- Preset-only directory tokens
- Idempotence on already-substituted content
- Markdown discovery and in-place rewriting
"""

from __future__ import annotations

from pathlib import Path

import pytest

from agents_init.models import CustomTechStack, PresetTechStack, ProjectAnswers
from agents_init.scaffolder.placeholders import (
    NOT_DEPLOYED,
    PlaceholderEngine,
    apply_rules,
    build_rules,
    find_markdown_files,
)
from conftest import FIXED_DATE

pytestmark = pytest.mark.unit

SAMPLE = "\n".join(
    [
        "name=[YOUR_PROJECT_NAME]",
        "desc=[BRIEF_DESCRIPTION]",
        "users=[TARGET_USERS]",
        "stack=[YOUR_TECH_STACK]",
        "stack2=[YOUR_TECH_STACK (framework, db)]",
        "fw=[FRAMEWORK/LANGUAGE]",
        "db=[DATABASE]",
        "testing=[TESTING_TOOLS]",
        "tools=[OTHER_KEY_TOOLS]",
        "test=[test-command]",
        "cov=[test-coverage-command]",
        "watch=[test-watch-command]",
        "build=[build-command]",
        "dev=[dev-server-command]",
        "lint=[lint-command]",
        "slug=[your-project]",
        "src=[source-directory]",
        "api=[api-or-routes]",
        "svc=[services]",
        "models=[models-or-entities]",
        "views=[components-or-views]",
        "utils=[utils-or-lib]",
        "cfg=[config]",
        "tests=[test-directory]",
        "date=[DATE]",
        "url=[YOUR_PRODUCTION_URL]",
        "url2=[YOUR_PRODUCTION_URL or \"Not yet deployed\"]",
        "",
    ]
)


def _lines(text: str) -> dict[str, str]:
    return dict(line.split("=", 1) for line in text.splitlines() if "=" in line)


@pytest.fixture
def full_custom_stack() -> CustomTechStack:
    return CustomTechStack(
        framework="Express",
        language="TypeScript",
        database="SQLite",
        testing="Jest",
        other_tools=["Zod", "Prisma"],
        test_command="npm test",
        build_command="npm run build",
        dev_server_command="npm run dev",
        lint_command="npm run lint",
    )


class TestScenarioA:
    def test_project_name_and_coverage(self, project_answers, custom_stack):
        text = "# [YOUR_PROJECT_NAME]\n\nRun `[test-coverage-command]`.\n"
        result = apply_rules(text, build_rules(project_answers, custom_stack, FIXED_DATE))
        assert result == "# Acme\n\nRun `npm test --coverage`.\n"


class TestCustomStack:
    def test_all_shared_tokens_replaced(self, project_answers, full_custom_stack):
        out = _lines(apply_rules(SAMPLE, build_rules(project_answers, full_custom_stack, FIXED_DATE)))
        assert out["name"] == "Acme"
        assert out["desc"] == "Todo app"
        assert out["users"] == "teams"
        assert out["stack"] == "Express, TypeScript, SQLite, Jest"
        assert out["stack2"] == "Express, TypeScript, SQLite, Jest"
        assert out["fw"] == "Express"
        assert out["db"] == "SQLite"
        assert out["testing"] == "Jest"
        assert out["tools"] == "Zod, Prisma"
        assert out["test"] == "npm test"
        assert out["cov"] == "npm test --coverage"
        assert out["watch"] == "npm test --watch"
        assert out["build"] == "npm run build"
        assert out["dev"] == "npm run dev"
        assert out["lint"] == "npm run lint"
        assert out["date"] == "2026-01-15"
        assert out["url"] == NOT_DEPLOYED
        assert out["url2"] == NOT_DEPLOYED

    def test_directory_tokens_left_for_custom(self, project_answers, full_custom_stack):
        out = _lines(apply_rules(SAMPLE, build_rules(project_answers, full_custom_stack, FIXED_DATE)))
        assert out["slug"] == "[your-project]"
        assert out["src"] == "[source-directory]"
        assert out["cfg"] == "[config]"
        assert out["tests"] == "[test-directory]"

    def test_no_tools_means_na(self, project_answers, custom_stack):
        out = _lines(apply_rules(SAMPLE, build_rules(project_answers, custom_stack, FIXED_DATE)))
        assert out["tools"] == "N/A"

    def test_missing_commands_left_verbatim(self, project_answers):
        stack = CustomTechStack(framework="F", language="L", database="D", testing="T")
        out = _lines(apply_rules(SAMPLE, build_rules(project_answers, stack, FIXED_DATE)))
        assert out["test"] == "[test-command]"
        assert out["cov"] == "[test-coverage-command]"
        assert out["watch"] == "[test-watch-command]"
        assert out["build"] == "[build-command]"
        assert out["dev"] == "[dev-server-command]"
        assert out["lint"] == "[lint-command]"

    def test_explicit_coverage_and_watch(self, project_answers, custom_stack):
        stack = custom_stack.model_copy(
            update={"test_coverage_command": "npx jest --coverage=true", "test_watch_command": "npx jest -w"}
        )
        out = _lines(apply_rules(SAMPLE, build_rules(project_answers, stack, FIXED_DATE)))
        assert out["cov"] == "npx jest --coverage=true"
        assert out["watch"] == "npx jest -w"


class TestPresetStack:
    def test_directory_tokens(self, preset_stack: PresetTechStack):
        project = ProjectAnswers(project_name="My Todo  App", description="d", target_users="u")
        out = _lines(apply_rules(SAMPLE, build_rules(project, preset_stack, FIXED_DATE)))
        assert out["slug"] == "my-todo-app"
        assert out["src"] == preset_stack.source_directory
        assert out["api"] == preset_stack.api_directory
        assert out["svc"] == preset_stack.services_directory
        assert out["models"] == preset_stack.models_directory
        assert out["views"] == preset_stack.components_directory
        assert out["utils"] == preset_stack.utils_directory
        assert out["cfg"] == preset_stack.config_directory
        assert out["tests"] == preset_stack.test_directory
        assert "[" not in "".join(out.values())


class TestSubstitutionProperties:
    def test_every_occurrence_replaced(self, project_answers, custom_stack):
        text = "[YOUR_PROJECT_NAME] and [YOUR_PROJECT_NAME] and [YOUR_PROJECT_NAME]"
        assert apply_rules(text, build_rules(project_answers, custom_stack)) == "Acme and Acme and Acme"

    def test_idempotent(self, project_answers, full_custom_stack):
        rules = build_rules(project_answers, full_custom_stack, FIXED_DATE)
        once = apply_rules(SAMPLE, rules)
        assert apply_rules(once, rules) == once

    def test_unknown_tokens_untouched(self, project_answers, custom_stack):
        text = "[SOMETHING_ELSE] [Placeholder] [your-project]"
        assert apply_rules(text, build_rules(project_answers, custom_stack)) == text

    def test_values_inserted_literally(self, custom_stack):
        project = ProjectAnswers(project_name=r"Back\1slash \g<0>", description="d", target_users="u")
        result = apply_rules("[YOUR_PROJECT_NAME]", build_rules(project, custom_stack))
        assert result == r"Back\1slash \g<0>"

    def test_default_date_is_iso(self, project_answers, custom_stack):
        result = apply_rules("[DATE]", build_rules(project_answers, custom_stack))
        assert len(result) == 10
        assert result[4] == "-" and result[7] == "-"


class TestFindMarkdownFiles:
    def test_recursive_case_sensitive(self, tmp_path: Path):
        (tmp_path / "b" / "deep").mkdir(parents=True)
        (tmp_path / "a.md").write_text("", encoding="utf-8")
        (tmp_path / "b" / "c.md").write_text("", encoding="utf-8")
        (tmp_path / "b" / "deep" / "d.md").write_text("", encoding="utf-8")
        (tmp_path / "UPPER.MD").write_text("", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("", encoding="utf-8")
        (tmp_path / "b" / "readme.markdown").write_text("", encoding="utf-8")

        found = [p.relative_to(tmp_path).as_posix() for p in find_markdown_files(tmp_path)]
        assert found == ["a.md", "b/c.md", "b/deep/d.md"]

    def test_empty_dir(self, tmp_path: Path):
        assert find_markdown_files(tmp_path) == []


class TestPlaceholderEngine:
    @pytest.mark.asyncio
    async def test_process_tree_rewrites_markdown_only(self, tmp_path: Path, project_answers, custom_stack):
        (tmp_path / "sub").mkdir()
        md = tmp_path / "sub" / "DOC.md"
        txt = tmp_path / "keep.txt"
        md.write_text("# [YOUR_PROJECT_NAME]\n", encoding="utf-8")
        txt.write_text("# [YOUR_PROJECT_NAME]\n", encoding="utf-8")

        seen: list[Path] = []
        engine = PlaceholderEngine(project_answers, custom_stack, today=FIXED_DATE)
        processed = await engine.process_tree(tmp_path, on_file=seen.append)

        assert processed == [md]
        assert seen == [md]
        assert md.read_text(encoding="utf-8") == "# Acme\n"
        assert txt.read_text(encoding="utf-8") == "# [YOUR_PROJECT_NAME]\n"

    @pytest.mark.asyncio
    async def test_second_pass_byte_identical(self, tmp_path: Path, project_answers, custom_stack):
        doc = tmp_path / "DOC.md"
        doc.write_bytes(b"# [YOUR_PROJECT_NAME]\r\nDate: [DATE]\r\n")
        engine = PlaceholderEngine(project_answers, custom_stack, today=FIXED_DATE)

        await engine.process_tree(tmp_path)
        first = doc.read_bytes()
        await engine.process_tree(tmp_path)

        assert first == b"# Acme\r\nDate: 2026-01-15\r\n"
        assert doc.read_bytes() == first
