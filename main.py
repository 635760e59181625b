"""Entry: query the skills directory from the command line."""
import sys

from skillbook.cli import run_cli
from skillbook.config import LOG_LEVEL
from skillbook.logging_utils import configure_logging


def main() -> None:
    configure_logging(LOG_LEVEL)
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
