"""Shared fixtures for tests."""

import json

import pytest

from ai_dev_system.paths import SOURCE_ENV_VAR


@pytest.fixture
def corpus(tmp_path, monkeypatch):
    """Create a small source corpus and point AI_DEV_SOURCE at it."""
    source = tmp_path / "corpus"
    (source / "context").mkdir(parents=True)
    (source / "agents").mkdir()
    (source / "skills" / "clean-code").mkdir(parents=True)
    (source / "stacks" / "react-typescript" / "skills" / "react-component").mkdir(parents=True)
    (source / "stacks" / "php-laravel").mkdir(parents=True)
    (source / "stacks" / "node-express").mkdir(parents=True)

    (source / "context" / "index.md").write_text("# Context Index\n\n> Load me first.\n")
    (source / "agents" / "reviewer.md").write_text(
        "# Code Reviewer\n\n> Reviews pull requests.\n\nYou are a reviewer.\n"
    )
    (source / "skills" / "clean-code" / "SKILL.md").write_text(
        "# Clean Code\n\n> Best practices for clean code.\n\n## Rules\n\n1. Keep functions small\n"
    )
    (source / "stacks" / "react-typescript" / "README.md").write_text("# React + TypeScript\n")
    (source / "stacks" / "react-typescript" / "skills" / "react-component" / "SKILL.md").write_text(
        "# React Component\n\n> Scaffold a component.\n"
    )
    (source / "stacks" / "php-laravel" / "README.md").write_text("# PHP + Laravel\n")
    (source / "stacks" / "node-express" / "README.md").write_text("# Node + Express\n")

    monkeypatch.setenv(SOURCE_ENV_VAR, str(source))
    return source


@pytest.fixture
def project(tmp_path):
    """An empty target project directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def react_project(project):
    """A project whose package.json depends on react."""
    (project / "package.json").write_text(
        json.dumps({"name": "web", "dependencies": {"react": "^18.0.0"}})
    )
    return project


def _snapshot(root):
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def snapshot():
    """Map of relative path -> bytes for every file under a directory."""
    return _snapshot
