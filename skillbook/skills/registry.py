"""Skill registry: load a skills tree once, list it, look skills up by identifier."""
from __future__ import annotations

from pathlib import Path
from typing import Iterator

from skillbook.config import MATCH_TOP_K, SKILL_GLOB, SKILLS_DIR
from skillbook.errors import DuplicateSkillError, NotFoundError, SkillError, SkillsDirNotFoundError
from skillbook.logging_utils import get_logger, log_registry_loaded
from skillbook.skills import matcher
from skillbook.skills.loader import Skill, load_skills

logger = get_logger(__name__)


class SkillListing:
    """Restartable view over a registry's (identifier, description) pairs.
    Every iteration starts from the beginning and reflects the registry's current contents.
    """

    def __init__(self, registry: "SkillRegistry"):
        self._registry = registry

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for skill in self._registry.skills():
            yield skill.identifier, skill.description

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self) -> str:
        return f"SkillListing({len(self)} skills)"


class SkillRegistry:
    """Holds skills keyed by identifier. Unloaded until load() succeeds."""

    def __init__(self, pattern: str = SKILL_GLOB):
        self.pattern = pattern
        self.root: Path | None = None
        self._skills: dict[str, Skill] | None = None

    @property
    def is_loaded(self) -> bool:
        return self._skills is not None

    def load(self, root_path: Path | str) -> "SkillRegistry":
        """Load every skill under root_path, replacing current contents.
        Raises SkillsDirNotFoundError, MalformedSkillError or DuplicateSkillError;
        on failure the registry is left as it was.
        """
        root = Path(root_path)
        try:
            if not root.is_dir():
                raise SkillsDirNotFoundError(root)
            loaded: dict[str, Skill] = {}
            for skill in load_skills(root, self.pattern):
                existing = loaded.get(skill.identifier)
                if existing is not None:
                    raise DuplicateSkillError(skill.identifier, existing.path, skill.path)
                loaded[skill.identifier] = skill
        except SkillError as e:
            logger.error("registry_load_failed", root=str(root), error=str(e))
            raise
        self._skills = loaded
        self.root = root
        categories = sorted({s.category for s in loaded.values() if s.category})
        log_registry_loaded(logger, str(root), len(loaded), categories)
        return self

    def unload(self) -> None:
        self._skills = None
        self.root = None
        logger.info("registry_unloaded")

    def skills(self) -> Iterator[Skill]:
        """Iterate loaded skill records in load order."""
        return iter(list((self._skills or {}).values()))

    def get_skill(self, identifier: str) -> Skill:
        try:
            return (self._skills or {})[identifier]
        except KeyError:
            raise NotFoundError(identifier) from None

    def get(self, identifier: str) -> str:
        """Return the body of the skill with this identifier. Raises NotFoundError."""
        return self.get_skill(identifier).body

    def list(self) -> SkillListing:
        return SkillListing(self)

    def match(self, query: str, top_k: int = MATCH_TOP_K) -> list[str]:
        return matcher.match(query, self, top_k)

    def __len__(self) -> int:
        return len(self._skills or {})

    def __contains__(self, identifier: object) -> bool:
        return identifier in (self._skills or {})


# Process-wide registry with an explicit load/unload lifecycle
_default_registry = SkillRegistry()


def get_registry() -> SkillRegistry:
    """Return the process-wide registry instance (may still be unloaded)."""
    return _default_registry


def load_registry(root_path: Path | str | None = None) -> SkillRegistry:
    """Load the process-wide registry from root_path (defaults to SKILLS_DIR)."""
    return _default_registry.load(root_path if root_path is not None else SKILLS_DIR)


def unload_registry() -> None:
    _default_registry.unload()
