from pathlib import Path

import pytest

from skillbook.logging_utils import configure_logging
from skillbook.skills import unload_registry

configure_logging("WARNING")


def skill_text(name: str, description: str, body: str = "Some guidance.", extra: str = "") -> str:
    return f"---\nname: {name}\ndescription: {description}\n{extra}---\n\n{body}\n"


@pytest.fixture
def skills_dir(tmp_path: Path) -> Path:
    root = tmp_path / "skills"
    root.mkdir()
    return root


@pytest.fixture
def write_skill(skills_dir: Path):
    """Write a skill document under skills_dir; returns its path."""

    def _write(rel_path: str, name: str, description: str, body: str = "Some guidance.", extra: str = "") -> Path:
        path = skills_dir / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(skill_text(name, description, body, extra), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def frontend_skills(skills_dir: Path, write_skill) -> Path:
    write_skill(
        "debug/react.md",
        "debug:react",
        "Fix hydration mismatch errors and unexpected re-render loops",
        body="# React\n\nCheck server and client output.",
    )
    write_skill(
        "debug/vue.md",
        "debug:vue",
        "Reactivity pitfalls and hydration warnings",
        body="# Vue\n\nUse toRefs when destructuring.",
    )
    write_skill(
        "refactor/python.md",
        "refactor:python",
        "Extract functions and introduce dataclasses",
        body="# Python\n\nPin behaviour with tests first.",
        extra="keywords: [typing, mypy]\n",
    )
    return skills_dir


@pytest.fixture(autouse=True)
def _reset_default_registry():
    yield
    unload_registry()
