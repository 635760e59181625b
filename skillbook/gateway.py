"""Gateway: resolve the skill for a message and build the prompt context handed to the host LLM."""
from skillbook.logging_utils import get_logger, log_skill_invoked
from skillbook.skills import resolve_skill

logger = get_logger(__name__)


def build_prompt(message: str, *, trigger: str = "unknown") -> tuple[str, str | None]:
    """Resolve a skill for the message and prepend its body.
    Returns (prompt_text, skill identifier or None). Without a match the prompt is the message itself.
    """
    skill = resolve_skill(message)
    if skill is None:
        return message, None

    log_skill_invoked(logger, skill.identifier, trigger, len(skill.body))
    prompt = skill.body.strip() + "\n\n" + message
    return prompt, skill.identifier
