import io
from pathlib import Path

import pytest

import skillbook.cli as cli
import skillbook.config as config


@pytest.fixture
def use_skills_dir(monkeypatch):
    def _use(path: Path) -> None:
        monkeypatch.setattr(cli, "SKILLS_DIR", path)
        monkeypatch.setattr(config, "SKILLS_DIR", path)

    return _use


def test_no_arguments_prints_usage(capsys):
    assert cli.run_cli([]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_unknown_command(capsys):
    assert cli.run_cli(["serve"]) == 1
    assert "Unknown command" in capsys.readouterr().err


def test_list_prints_identifier_and_description(frontend_skills, use_skills_dir, capsys):
    use_skills_dir(frontend_skills)
    assert cli.run_cli(["list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "debug:vue\tReactivity pitfalls and hydration warnings" in lines
    assert len(lines) == 3


def test_list_filters_by_category(frontend_skills, use_skills_dir, capsys):
    use_skills_dir(frontend_skills)
    assert cli.run_cli(["list", "refactor"]) == 0
    assert capsys.readouterr().out.splitlines() == ["refactor:python\tExtract functions and introduce dataclasses"]


def test_show_prints_body(frontend_skills, use_skills_dir, capsys):
    use_skills_dir(frontend_skills)
    assert cli.run_cli(["show", "debug:react"]) == 0
    assert "Check server and client output." in capsys.readouterr().out


def test_show_unknown_identifier_fails(frontend_skills, use_skills_dir, capsys):
    use_skills_dir(frontend_skills)
    assert cli.run_cli(["show", "debug:svelte"]) == 1
    assert "debug:svelte" in capsys.readouterr().err


def test_match_prints_ranked_identifiers(frontend_skills, use_skills_dir, capsys):
    use_skills_dir(frontend_skills)
    assert cli.run_cli(["match", "hydration", "mismatch", "-k", "1"]) == 0
    assert capsys.readouterr().out.splitlines() == ["debug:react\t2"]


def test_match_rejects_bad_top_k(frontend_skills, use_skills_dir, capsys):
    use_skills_dir(frontend_skills)
    assert cli.run_cli(["match", "hydration", "-k", "many"]) == 1
    assert "-k" in capsys.readouterr().err


def test_prompt_prepends_matched_skill(frontend_skills, use_skills_dir, capsys):
    use_skills_dir(frontend_skills)
    assert cli.run_cli(["prompt", "hydration mismatch on the home page"]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("# React")
    assert captured.out.rstrip().endswith("hydration mismatch on the home page")
    assert "[Skill loaded: debug:react]" in captured.err


def test_duplicate_skills_abort_with_error(skills_dir, write_skill, use_skills_dir, capsys):
    write_skill("a.md", "debug:react", "one")
    write_skill("b.md", "debug:react", "two")
    use_skills_dir(skills_dir)
    assert cli.run_cli(["list"]) == 1
    assert "duplicate skill identifier" in capsys.readouterr().err


def test_missing_skills_dir_is_reported(tmp_path, use_skills_dir, capsys):
    use_skills_dir(tmp_path / "missing")
    assert cli.run_cli(["list"]) == 1
    assert "SKILLS_DIR" in capsys.readouterr().err


def test_prompt_reads_piped_stdin_without_hint_on_stdout(frontend_skills, use_skills_dir, monkeypatch, capsys):
    use_skills_dir(frontend_skills)
    monkeypatch.setattr("sys.stdin", io.StringIO("hydration mismatch on the home page\n"))
    assert cli.run_cli(["prompt"]) == 0
    captured = capsys.readouterr()
    assert captured.out == (
        "# React\n\nCheck server and client output.\n\nhydration mismatch on the home page\n"
    )
    assert "Enter your message" not in captured.err


def test_prompt_with_empty_stdin_fails(frontend_skills, use_skills_dir, monkeypatch, capsys):
    use_skills_dir(frontend_skills)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert cli.run_cli(["prompt"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Usage:" in captured.err
