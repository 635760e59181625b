"""Load skill files from a directory tree: YAML frontmatter + Markdown body."""
import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from skillbook.config import SKILL_GLOB, SKILLS_DIR
from skillbook.errors import MalformedSkillError
from skillbook.logging_utils import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = ("name", "description")
_FENCE_RE = re.compile(r"^---[ \t\r]*$", re.MULTILINE)


@dataclass(frozen=True)
class Skill:
    """A single skill: identifier and trigger description from frontmatter, body for the prompt."""

    identifier: str
    description: str
    body: str
    keywords: tuple[str, ...] = ()
    path: Path | None = field(default=None, compare=False)

    @property
    def category(self) -> str | None:
        """Identifier prefix before the first ':' (e.g. 'debug' for 'debug:react')."""
        prefix, sep, _ = self.identifier.partition(":")
        return prefix if sep and prefix else None


def _split_frontmatter(content: str) -> tuple[str, str] | None:
    """Split content into (yaml_block, body). Returns None if there is no frontmatter block."""
    content = content.strip()
    first, sep, rest = content.partition("\n")
    if not sep or first.rstrip() != "---":
        return None
    # Closing fence is a line holding only '---'
    fence = _FENCE_RE.search(rest)
    if fence is None:
        return None
    yaml_block = rest[: fence.start()].strip()
    body = rest[fence.end() :].strip()
    return yaml_block, body


def _as_keywords(value: object, path: Path) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list):
        return tuple(str(k) for k in value)
    raise MalformedSkillError(path, "'keywords' must be a string or a list of strings")


def parse_skill(content: str, path: Path | str) -> Skill:
    """Parse one skill document. Raises MalformedSkillError if frontmatter or body is unusable."""
    path = Path(path)
    split = _split_frontmatter(content)
    if split is None:
        raise MalformedSkillError(path, "missing YAML frontmatter")
    yaml_block, body = split
    try:
        meta = yaml.safe_load(yaml_block) if yaml_block else {}
    except yaml.YAMLError as e:
        logger.warning("skill_parse_error", path=str(path), error=str(e))
        raise MalformedSkillError(path, f"invalid YAML frontmatter: {e}") from e
    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        raise MalformedSkillError(path, "frontmatter must be a mapping")
    for key in REQUIRED_FIELDS:
        value = meta.get(key)
        if not isinstance(value, str) or not value.strip():
            raise MalformedSkillError(path, f"frontmatter field '{key}' is missing or empty")
    if not body:
        raise MalformedSkillError(path, "skill body is empty")
    return Skill(
        identifier=meta["name"].strip(),
        description=meta["description"].strip(),
        body=body,
        keywords=_as_keywords(meta.get("keywords"), path),
        path=path,
    )


def read_skill(path: Path) -> Skill:
    """Read a skill file as UTF-8 and parse it."""
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedSkillError(path, f"cannot read file: {e}") from e
    return parse_skill(text, path)


def discover_skill_files(root: Path, pattern: str = SKILL_GLOB) -> list[Path]:
    """Recursively find skill documents under root, skipping hidden directories. Sorted for stable load order."""
    files = []
    for path in root.rglob(pattern):
        rel_parts = path.relative_to(root).parts
        if any(part.startswith(".") for part in rel_parts[:-1]):
            continue
        if path.is_file():
            files.append(path)
    return sorted(files)


def load_skills(skills_dir: Path | None = None, pattern: str = SKILL_GLOB) -> list[Skill]:
    """Discover skill files under skills_dir, parse frontmatter + body, return list of Skill.
    If skills_dir does not exist or is not a directory, return [].
    Stops at the first malformed file (MalformedSkillError); a partial list is never returned.
    """
    directory = Path(skills_dir) if skills_dir is not None else SKILLS_DIR
    if not directory.exists() or not directory.is_dir():
        logger.warning("skills_dir_missing", path=str(directory))
        return []
    return [read_skill(path) for path in discover_skill_files(directory, pattern)]
