"""Skills: load from YAML-frontmatter Markdown files and match them to free text."""
from skillbook.skills.loader import Skill, load_skills, parse_skill, read_skill
from skillbook.skills.matcher import match, rank
from skillbook.skills.registry import (
    SkillListing,
    SkillRegistry,
    get_registry,
    load_registry,
    unload_registry,
)


def resolve_skill(message: str) -> Skill | None:
    """Return the best-matching skill for the message from the process-wide registry, or None.
    Loads the registry from SKILLS_DIR on first use.
    """
    registry = get_registry()
    if not registry.is_loaded:
        load_registry()
    best = registry.match(message, top_k=1)
    return registry.get_skill(best[0]) if best else None


__all__ = [
    "Skill",
    "SkillListing",
    "SkillRegistry",
    "get_registry",
    "load_registry",
    "load_skills",
    "match",
    "parse_skill",
    "rank",
    "read_skill",
    "resolve_skill",
    "unload_registry",
]
