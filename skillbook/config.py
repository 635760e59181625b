"""Load and validate configuration from environment."""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SKILLS_DIR = Path(os.getenv("SKILLS_DIR", str(PROJECT_ROOT / "skills"))).expanduser()
# Glob applied recursively under SKILLS_DIR to find skill documents
SKILL_GLOB = os.getenv("SKILL_GLOB", "*.md")

# Matching
MATCH_TOP_K = int(os.getenv("MATCH_TOP_K", "3"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def validate_for_registry() -> None:
    """Validate that the skills directory and matcher settings are usable."""
    if not SKILLS_DIR.is_dir():
        raise ValueError(f"SKILLS_DIR must be a directory, got {SKILLS_DIR}. Set it in .env.")
    if MATCH_TOP_K < 0:
        raise ValueError("MATCH_TOP_K must be zero or positive. Set it in .env.")
