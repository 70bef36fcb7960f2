"""End-to-end tests through the ai-dev command line."""

import json

import pytest
import yaml

from ai_dev_system.cli import build_parser, main


def _run(*argv):
    return main(list(argv))


# =============================================================================
# INIT
# =============================================================================


def test_init_detects_react_and_copies_only_that_stack(corpus, react_project, capsys):
    assert _run("init", "--dir", str(react_project), "--no-interactive") == 0

    out = capsys.readouterr().out
    assert "react-typescript" in out
    assert "high confidence" in out
    assert (react_project / ".ai" / "stacks" / "react-typescript").is_dir()
    assert not (react_project / ".ai" / "stacks" / "php-laravel").exists()
    assert (react_project / ".claude" / "README.md").exists()

    manifest = yaml.safe_load((react_project / ".ai" / "ai-dev.yml").read_text())
    assert manifest["stack"] == "react-typescript"
    assert manifest["tools"] == ["claude", "cursor", "opencode", "agent"]


def test_init_undetected_copies_all_stacks(corpus, project, capsys):
    _run("init", "--dir", str(project), "--no-interactive", "--no-bridge")

    assert "Could not detect stack" in capsys.readouterr().out
    for stack in ("react-typescript", "php-laravel", "node-express"):
        assert (project / ".ai" / "stacks" / stack).is_dir()
    assert not (project / ".claude").exists()


def test_init_twice_changes_nothing(corpus, react_project, snapshot, capsys):
    _run("init", "--dir", str(react_project), "--no-interactive")
    before = snapshot(react_project)

    _run("init", "--dir", str(react_project), "--no-interactive")

    assert snapshot(react_project) == before
    assert "already present" in capsys.readouterr().out


def test_init_subset_of_tools(corpus, project):
    _run("init", "--dir", str(project), "--stack", "node-express", "--ai", "claude,cursor")

    assert (project / ".claude").is_dir()
    assert (project / ".cursor" / "rules").is_dir()
    assert not (project / ".opencode").exists()


@pytest.mark.parametrize(
    "args, message",
    [
        (["--stack", "django"], "Invalid stack: django"),
        (["--ai", "claude,vim"], "Invalid AI tool list"),
    ],
)
def test_init_rejects_bad_options_before_writing(corpus, project, capsys, args, message):
    assert _run("init", "--dir", str(project), "--no-interactive", *args) == 0

    assert message in capsys.readouterr().out
    assert list(project.iterdir()) == []


def test_init_missing_directory(corpus, tmp_path, capsys):
    _run("init", "--dir", str(tmp_path / "nope"), "--no-interactive")

    assert "Target directory not found" in capsys.readouterr().out
    assert not (tmp_path / "nope").exists()


# =============================================================================
# ADD
# =============================================================================


def test_add_unknown_skill_lists_alternatives_and_changes_nothing(corpus, project, snapshot, capsys):
    _run("init", "--dir", str(project), "--no-interactive", "--no-bridge")
    before = snapshot(project)
    capsys.readouterr()

    assert _run("add", "skill", "nonexistent-skill", "--dir", str(project)) == 0

    out = capsys.readouterr().out
    assert "Available skills" in out
    assert "clean-code" in out
    assert snapshot(project) == before


def test_add_stack_to_initialized_project(corpus, react_project, capsys):
    _run("init", "--dir", str(react_project), "--no-interactive", "--no-bridge")

    _run("add", "stack", "php-laravel", "--dir", str(react_project))

    assert "Added stack" in capsys.readouterr().out
    assert (react_project / ".ai" / "stacks" / "php-laravel" / "README.md").exists()


def test_add_requires_init(corpus, project, capsys):
    _run("add", "skill", "clean-code", "--dir", str(project))

    assert ".ai directory not found" in capsys.readouterr().out
    assert list(project.iterdir()) == []


def test_add_invalid_type(corpus, project, capsys):
    (project / ".ai").mkdir()

    _run("add", "widget", "x", "--dir", str(project))

    assert "Invalid type: widget" in capsys.readouterr().out


# =============================================================================
# SYNC
# =============================================================================


def test_sync_opencode_writes_one_skill(corpus, project):
    assert _run("sync", "opencode", "--dir", str(project)) == 0

    skills = [p for p in (project / ".opencode" / "skill").rglob("*") if p.is_file()]
    assert [p.relative_to(project).as_posix() for p in skills] == [".opencode/skill/clean-code/SKILL.md"]

    header = skills[0].read_text(encoding="utf-8").split("---\n")[1]
    assert yaml.safe_load(header)["name"] == "clean-code"
    assert json.loads((project / "opencode.json").read_text())["theme"] == "opencode"


def test_sync_prefers_project_corpus(corpus, project):
    skill = project / ".ai" / "skills" / "local-only" / "SKILL.md"
    skill.parent.mkdir(parents=True)
    skill.write_text("# Local\n")

    _run("sync", "claude", "--dir", str(project))

    assert (project / ".claude" / "skills" / "local-only" / "SKILL.md").exists()
    assert not (project / ".claude" / "skills" / "clean-code").exists()


def test_sync_all_keeps_existing_context_files(corpus, project):
    (project / "CLAUDE.md").write_text("my claude notes")
    (project / "AGENTS.md").write_text("my agents notes")

    _run("sync", "all", "--dir", str(project))

    assert (project / "CLAUDE.md").read_text() == "my claude notes"
    assert (project / "AGENTS.md").read_text() == "my agents notes"
    assert (project / ".opencode" / "command" / "clean-code.md").exists()
    assert (project / ".claude" / "commands" / "clean-code.md").exists()


def test_sync_unknown_tool(corpus, project, capsys):
    assert _run("sync", "cursor", "--dir", str(project)) == 0

    assert "Unknown sync target: cursor" in capsys.readouterr().out
    assert list(project.iterdir()) == []


# =============================================================================
# LIST / PARSER
# =============================================================================


def test_list_shows_corpus_and_manifest(corpus, project, capsys):
    _run("init", "--dir", str(project), "--stack", "php-laravel", "--ai", "claude")
    capsys.readouterr()

    _run("list", "--dir", str(project))

    out = capsys.readouterr().out
    assert "react-component" in out
    assert "Claude Code" in out
    assert "stack=php-laravel tools=claude" in out


def test_no_command_prints_help(capsys):
    assert _run() == 0
    assert "usage: ai-dev" in capsys.readouterr().out


def test_parser_defaults():
    args = build_parser().parse_args(["sync", "claude"])

    assert args.dir == "."
    assert args.tool == "claude"
