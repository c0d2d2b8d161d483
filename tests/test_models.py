"""Unit tests for the answer models (agents_init.models).

Tests cover:
- ProjectAnswers stripping, required fields, slug, immutability
- PresetTechStack / CustomTechStack shapes and the discriminated union
- FeatureAnswers limits
- Preset.to_answers
"""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from agents_init.models import (
    CustomTechStack,
    FeatureAnswers,
    PresetTechStack,
    ProjectAnswers,
    TechStackAnswers,
)
from agents_init.presets import PRESETS


class TestProjectAnswers:
    @pytest.mark.unit
    def test_values_are_stripped(self):
        answers = ProjectAnswers(
            project_name="  Acme  ", description=" Todo app ", target_users="\tteams\n"
        )
        assert answers.project_name == "Acme"
        assert answers.description == "Todo app"
        assert answers.target_users == "teams"

    @pytest.mark.unit
    @pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
    def test_blank_values_rejected(self, blank: str):
        with pytest.raises(ValidationError):
            ProjectAnswers(project_name=blank, description="d", target_users="u")

    @pytest.mark.unit
    def test_project_slug(self):
        answers = ProjectAnswers(project_name="My Cool  App", description="d", target_users="u")
        assert answers.project_slug == "my-cool-app"

    @pytest.mark.unit
    def test_frozen(self, project_answers):
        with pytest.raises(ValidationError):
            project_answers.project_name = "Other"


class TestTechStackAnswers:
    @pytest.mark.unit
    def test_custom_defaults(self, custom_stack):
        assert custom_stack.kind == "custom"
        assert custom_stack.is_preset is False
        assert custom_stack.other_tools == []
        assert custom_stack.build_command is None
        assert custom_stack.based_on is None

    @pytest.mark.unit
    def test_lines(self, custom_stack):
        assert custom_stack.summary_line == "Express + TypeScript + SQLite"
        assert custom_stack.stack_line == "Express, TypeScript, SQLite, Jest"

    @pytest.mark.unit
    def test_preset_requires_directories(self):
        with pytest.raises(ValidationError):
            PresetTechStack(
                preset="x",
                framework="F",
                language="L",
                database="D",
                testing="T",
                orm="O",
            )

    @pytest.mark.unit
    def test_preset_directory_map(self, preset_stack):
        directories = preset_stack.directory_map()
        assert set(directories) == {
            "source-directory",
            "api-or-routes",
            "services",
            "models-or-entities",
            "components-or-views",
            "utils-or-lib",
            "config",
            "test-directory",
        }
        assert directories["api-or-routes"] == "routes"
        assert preset_stack.is_preset is True

    @pytest.mark.unit
    def test_discriminated_union(self, preset_stack, custom_stack):
        adapter = TypeAdapter(TechStackAnswers)
        assert isinstance(adapter.validate_python(preset_stack.model_dump()), PresetTechStack)
        assert isinstance(adapter.validate_python(custom_stack.model_dump()), CustomTechStack)

    @pytest.mark.unit
    def test_union_rejects_unknown_kind(self):
        adapter = TypeAdapter(TechStackAnswers)
        with pytest.raises(ValidationError):
            adapter.validate_python({"kind": "other", "framework": "F"})

    @pytest.mark.unit
    def test_custom_requires_framework(self):
        with pytest.raises(ValidationError):
            CustomTechStack(framework="", language="L", database="D", testing="T")


class TestFeatureAnswers:
    @pytest.mark.unit
    def test_has_first_task(self, feature_answers):
        assert feature_answers.has_first_task is True
        without = feature_answers.model_copy(update={"first_feature": None})
        assert without.has_first_task is False

    @pytest.mark.unit
    def test_at_most_five_capabilities(self):
        with pytest.raises(ValidationError):
            FeatureAnswers(problem_statement="p", capabilities=["a", "b", "c", "d", "e", "f"])

    @pytest.mark.unit
    def test_empty_capability_rejected(self):
        with pytest.raises(ValidationError):
            FeatureAnswers(problem_statement="p", capabilities=["a", ""])

    @pytest.mark.unit
    def test_problem_statement_required(self):
        with pytest.raises(ValidationError):
            FeatureAnswers(problem_statement="  ")


class TestPresetToAnswers:
    @pytest.mark.unit
    def test_all_fields_carried_over(self):
        preset = PRESETS["fastapi"]
        answers = preset.to_answers("fastapi")
        assert answers.preset == "fastapi"
        assert answers.framework == preset.framework
        assert answers.orm == preset.orm
        assert answers.source_directory == preset.source_directory
        assert answers.test_coverage_command == preset.test_coverage_command
        assert answers.other_tools == preset.other_tools
