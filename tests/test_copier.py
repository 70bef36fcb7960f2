"""Tests for the directory synchronizer and single subtree copies."""

import pytest

from ai_dev_system.copier import add_skill, add_stack, copy_ai_directory, list_available_skills


def test_copy_everything_without_stack_filter(corpus, project):
    result = copy_ai_directory(corpus, project)

    assert result.success
    assert ".ai/context/index.md" in result.copied
    assert ".ai/stacks/php-laravel/README.md" in result.copied
    assert ".ai/stacks/react-typescript/README.md" in result.copied
    assert result.skipped == []
    assert (project / ".ai" / "skills" / "clean-code" / "SKILL.md").exists()


def test_stack_filter_keeps_only_selected_stack(corpus, project):
    result = copy_ai_directory(corpus, project, stack="react-typescript")

    assert (project / ".ai" / "stacks" / "react-typescript" / "README.md").exists()
    assert not (project / ".ai" / "stacks" / "php-laravel").exists()
    assert not (project / ".ai" / "stacks" / "node-express").exists()
    assert ".ai/context/index.md" in result.copied


def test_second_run_skips_everything(corpus, project, snapshot):
    first = copy_ai_directory(corpus, project)
    before = snapshot(project)

    second = copy_ai_directory(corpus, project)

    assert second.copied == []
    assert sorted(second.skipped) == sorted(first.copied)
    assert snapshot(project) == before


def test_existing_file_is_not_overwritten(corpus, project):
    target = project / ".ai" / "context" / "index.md"
    target.parent.mkdir(parents=True)
    target.write_text("my own index")

    result = copy_ai_directory(corpus, project)

    assert ".ai/context/index.md" in result.skipped
    assert target.read_text() == "my own index"


def test_overwrite_replaces_existing_file(corpus, project):
    target = project / ".ai" / "context" / "index.md"
    target.parent.mkdir(parents=True)
    target.write_text("my own index")

    result = copy_ai_directory(corpus, project, overwrite=True)

    assert ".ai/context/index.md" in result.copied
    assert target.read_text().startswith("# Context Index")


def test_source_tree_is_not_modified(corpus, project, snapshot):
    before = snapshot(corpus)

    copy_ai_directory(corpus, project, overwrite=True)

    assert snapshot(corpus) == before


def test_per_file_errors_do_not_abort(corpus, project):
    # A file where the agents/ directory should go makes that single copy fail.
    blocker = project / ".ai" / "agents"
    blocker.parent.mkdir(parents=True)
    blocker.write_text("not a directory")

    result = copy_ai_directory(corpus, project)

    assert not result.success
    assert any(e.startswith(".ai/agents/reviewer.md") for e in result.errors)
    assert (project / ".ai" / "context" / "index.md").exists()


def test_missing_source_is_reported(tmp_path, project):
    result = copy_ai_directory(tmp_path / "nope", project)

    assert result.copied == []
    assert len(result.errors) == 1


def test_list_available_skills(corpus):
    available = list_available_skills(corpus)

    assert available == {
        "core": ["clean-code"],
        "react-typescript": ["react-component"],
    }


def test_add_stack(corpus, project):
    target_ai = project / ".ai"
    target_ai.mkdir()

    result = add_stack(corpus, target_ai, "php-laravel")

    assert result.ok
    assert result.contents == ["README.md"]
    assert (target_ai / "stacks" / "php-laravel" / "README.md").exists()


def test_add_stack_invalid_name(corpus, project):
    result = add_stack(corpus, project / ".ai", "django")

    assert result.status == "invalid"
    assert "react-typescript" in result.available["stacks"]
    assert not (project / ".ai").exists()


def test_add_stack_already_present(corpus, project):
    existing = project / ".ai" / "stacks" / "node-express"
    existing.mkdir(parents=True)

    result = add_stack(corpus, project / ".ai", "node-express")

    assert result.status == "exists"
    assert list(existing.iterdir()) == []


def test_add_core_skill(corpus, project):
    result = add_skill(corpus, project / ".ai", "clean-code")

    assert result.ok
    assert (project / ".ai" / "skills" / "clean-code" / "SKILL.md").exists()


def test_add_stack_skill_mirrors_source_location(corpus, project):
    result = add_skill(corpus, project / ".ai", "react-component")

    assert result.ok
    assert result.destination == project / ".ai" / "stacks" / "react-typescript" / "skills" / "react-component"
    assert (result.destination / "SKILL.md").exists()


@pytest.mark.parametrize("name", ["nonexistent-skill", "react-typescript"])
def test_add_unknown_skill_lists_alternatives(corpus, project, name):
    result = add_skill(corpus, project / ".ai", name)

    assert result.status == "not_found"
    assert result.available["core"] == ["clean-code"]
    assert not (project / ".ai").exists()


def test_directory_at_destination_is_an_error(corpus, project):
    in_the_way = project / ".ai" / "context" / "index.md"
    in_the_way.mkdir(parents=True)

    result = copy_ai_directory(corpus, project, overwrite=True)

    assert ".ai/context/index.md" not in result.copied
    assert ".ai/context/index.md: destination is a directory" in result.errors
    assert list(in_the_way.iterdir()) == []
    assert ".ai/agents/reviewer.md" in result.copied


@pytest.mark.parametrize("name", ["../context", "../../corpus", "..", "skills/clean-code", "..\\context"])
def test_add_skill_rejects_path_like_names(corpus, project, name):
    result = add_skill(corpus, project / ".ai", name)

    assert result.status == "not_found"
    assert not (project / ".ai").exists()
