"""Built-in tech-stack presets offered by the wizard.

Each preset fixes the framework, language, database, testing tool and ORM,
plus the directory names used to resolve the structure placeholders in the
architecture documents. Order matters: it is the order shown in the menu.
"""

from __future__ import annotations

from .models import Preset

PRESETS: dict[str, Preset] = {
    "nextjs-fullstack": Preset(
        name="Next.js Full-Stack (Next.js + TypeScript + PostgreSQL + Prisma)",
        framework="Next.js 15",
        language="TypeScript",
        database="PostgreSQL",
        testing="Jest + React Testing Library",
        orm="Prisma",
        source_directory="src",
        api_directory="app/api",
        services_directory="services",
        models_directory="prisma",
        components_directory="components",
        utils_directory="lib",
        config_directory="config",
        test_directory="__tests__",
        other_tools=["Tailwind CSS", "Zod"],
        test_command="npm test",
        build_command="npm run build",
        dev_server_command="npm run dev",
        lint_command="npm run lint",
    ),
    "express-api": Preset(
        name="Express API (Express + TypeScript + PostgreSQL + TypeORM)",
        framework="Express",
        language="TypeScript",
        database="PostgreSQL",
        testing="Jest + Supertest",
        orm="TypeORM",
        source_directory="src",
        api_directory="routes",
        services_directory="services",
        models_directory="entities",
        components_directory="controllers",
        utils_directory="utils",
        config_directory="config",
        test_directory="tests",
        test_command="npm test",
        build_command="npm run build",
        dev_server_command="npm run dev",
        lint_command="npm run lint",
    ),
    "fastapi": Preset(
        name="FastAPI (FastAPI + Python + PostgreSQL + SQLAlchemy)",
        framework="FastAPI",
        language="Python",
        database="PostgreSQL",
        testing="pytest",
        orm="SQLAlchemy",
        source_directory="app",
        api_directory="api",
        services_directory="services",
        models_directory="models",
        components_directory="schemas",
        utils_directory="core",
        config_directory="config",
        test_directory="tests",
        other_tools=["Pydantic", "Alembic"],
        test_command="pytest",
        test_coverage_command="pytest --cov=app",
        test_watch_command="ptw",
        build_command="docker build .",
        dev_server_command="uvicorn app.main:app --reload",
        lint_command="ruff check .",
    ),
    "django": Preset(
        name="Django (Django + Python + PostgreSQL + Django ORM)",
        framework="Django 5",
        language="Python",
        database="PostgreSQL",
        testing="pytest-django",
        orm="Django ORM",
        source_directory="project",
        api_directory="api",
        services_directory="services",
        models_directory="models",
        components_directory="templates",
        utils_directory="utils",
        config_directory="settings",
        test_directory="tests",
        test_command="pytest",
        test_coverage_command="pytest --cov",
        test_watch_command="ptw",
        build_command="python manage.py collectstatic --noinput",
        dev_server_command="python manage.py runserver",
        lint_command="ruff check .",
    ),
    "rails": Preset(
        name="Ruby on Rails (Rails + Ruby + PostgreSQL + Active Record)",
        framework="Ruby on Rails 7",
        language="Ruby",
        database="PostgreSQL",
        testing="RSpec",
        orm="Active Record",
        source_directory="app",
        api_directory="controllers",
        services_directory="services",
        models_directory="models",
        components_directory="views",
        utils_directory="lib",
        config_directory="config",
        test_directory="spec",
        test_command="bundle exec rspec",
        test_coverage_command="COVERAGE=true bundle exec rspec",
        test_watch_command="bundle exec guard",
        build_command="bin/rails assets:precompile",
        dev_server_command="bin/rails server",
        lint_command="bundle exec rubocop",
    ),
}

CUSTOM_CHOICE = "custom"
CUSTOM_LABEL = "Custom (I'll configure manually)"


def get_preset(preset_id: str, presets: dict[str, Preset] | None = None) -> Preset:
    """Return the preset registered under *preset_id*.

    Raises:
        KeyError: If no such preset exists.
    """
    presets = PRESETS if presets is None else presets
    try:
        return presets[preset_id]
    except KeyError:
        raise KeyError(f"Unknown tech-stack preset: {preset_id!r}") from None


def menu_choices(presets: dict[str, Preset] | None = None) -> dict[str, str]:
    """Return ``{key: label}`` for the tech-stack menu, presets first then custom."""
    presets = PRESETS if presets is None else presets
    choices = {key: preset.name for key, preset in presets.items()}
    choices[CUSTOM_CHOICE] = CUSTOM_LABEL
    return choices
