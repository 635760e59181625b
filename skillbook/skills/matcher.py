"""Match free text to skills using frontmatter (description, keywords)."""
import re
from typing import TYPE_CHECKING, Iterable

from skillbook.config import MATCH_TOP_K
from skillbook.logging_utils import get_logger, log_skill_matched
from skillbook.skills.loader import Skill

if TYPE_CHECKING:
    from skillbook.skills.registry import SkillRegistry

logger = get_logger(__name__)


def tokenize(text: str) -> set[str]:
    """Normalize and tokenize into words (lowercase, alphanumeric)."""
    text = (text or "").lower()
    words = re.findall(r"[a-z0-9]+", text)
    return set(w for w in words if len(w) > 1)


def skill_tokens(skill: Skill) -> set[str]:
    tokens = tokenize(skill.description)
    for k in skill.keywords:
        tokens |= tokenize(k)
    return tokens


def score(query_tokens: set[str], skill: Skill) -> int:
    """Number of query terms that also appear in the skill's description or keywords."""
    return len(query_tokens & skill_tokens(skill))


def rank(query: str, skills: Iterable[Skill], top_k: int = MATCH_TOP_K) -> list[tuple[str, int]]:
    """Return up to top_k (identifier, score) pairs, best first.
    Skills sharing no term with the query are left out. Equal scores are ordered by identifier.
    """
    if top_k < 0:
        raise ValueError(f"top_k must be zero or positive, got {top_k}")
    if top_k == 0:
        return []
    query_tokens = tokenize(query)
    if not query_tokens:
        return []
    scored = []
    for skill in skills:
        s = score(query_tokens, skill)
        if s > 0:
            scored.append((skill.identifier, s))
    scored.sort(key=lambda pair: (-pair[1], pair[0]))
    results = scored[:top_k]
    log_skill_matched(logger, query, top_k, results)
    return results


def match(query: str, registry: "SkillRegistry", top_k: int = MATCH_TOP_K) -> list[str]:
    """Return identifiers of the top_k skills whose description best resembles the query.
    An empty (or unloaded) registry yields [].
    """
    return [identifier for identifier, _ in rank(query, registry.skills(), top_k)]
