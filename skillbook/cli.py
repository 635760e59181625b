"""CLI: list, show, match and prompt against the skills directory."""
import sys
import uuid

from skillbook.config import MATCH_TOP_K, SKILLS_DIR, validate_for_registry
from skillbook.errors import NotFoundError, SkillError
from skillbook.gateway import build_prompt
from skillbook.logging_utils import set_run_id
from skillbook.skills import load_registry, rank

USAGE = (
    "Usage: python main.py list [category]\n"
    "       python main.py show <identifier>\n"
    "       python main.py match \"query\" [-k N]\n"
    "       python main.py prompt \"message\""
)


def _parse_top_k(args: list[str]) -> tuple[list[str], int]:
    """Pull '-k N' out of args. Returns (remaining args, top_k)."""
    top_k = MATCH_TOP_K
    rest: list[str] = []
    it = iter(args)
    for arg in it:
        if arg in ("-k", "--top-k"):
            value = next(it, None)
            if value is None or not value.isdigit():
                raise ValueError("-k expects a non-negative integer")
            top_k = int(value)
        else:
            rest.append(arg)
    return rest, top_k


def run_cli(argv: list[str] | None = None) -> int:
    """Entry for CLI: argv is everything after the program name. Returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE, file=sys.stderr)
        return 1
    cmd, args = args[0].lower(), args[1:]
    if cmd not in ("list", "show", "match", "prompt"):
        print("Unknown command. Use: list | show | match | prompt", file=sys.stderr)
        return 1

    set_run_id(str(uuid.uuid4()))
    try:
        validate_for_registry()
        registry = load_registry(SKILLS_DIR)
    except (ValueError, SkillError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if cmd == "list":
        category = args[0] if args else None
        for identifier, description in registry.list():
            if category and registry.get_skill(identifier).category != category:
                continue
            print(f"{identifier}\t{description}")
        return 0

    if cmd == "show":
        if len(args) != 1:
            print("Usage: python main.py show <identifier>", file=sys.stderr)
            return 1
        try:
            print(registry.get(args[0]))
        except NotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    if cmd == "match":
        try:
            words, top_k = _parse_top_k(args)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        query = " ".join(words).strip()
        if not query:
            print("Usage: python main.py match \"query\" [-k N]", file=sys.stderr)
            return 1
        for identifier, score in rank(query, registry.skills(), top_k):
            print(f"{identifier}\t{score}")
        return 0

    message = " ".join(args).strip()
    if not message:
        if sys.stdin.isatty():
            print("Enter your message:", file=sys.stderr)
        message = (sys.stdin.readline() or "").strip()
    if not message:
        print("Usage: python main.py prompt \"message\" or echo \"message\" | python main.py prompt", file=sys.stderr)
        return 1
    prompt, identifier = build_prompt(message, trigger="cli")
    if identifier:
        print(f"[Skill loaded: {identifier}]", file=sys.stderr)
    print(prompt)
    return 0
