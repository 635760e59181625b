"""Structured logging with run_id and registry/matcher events."""
import logging
import sys
from contextvars import ContextVar
from typing import Any

import structlog

# Context variable for run_id so it is attached to every log in the current CLI run
run_id_ctx: ContextVar[str | None] = ContextVar("run_id", default=None)


def get_run_id() -> str | None:
    return run_id_ctx.get()


def set_run_id(run_id: str) -> None:
    run_id_ctx.set(run_id)


def add_run_id(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: add run_id to every event."""
    rid = get_run_id()
    if rid:
        event_dict["run_id"] = rid
    return event_dict


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structlog and stdlib logging. Call once at startup."""
    level = getattr(logging, log_level, logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_run_id,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=True)
            if log_level == "DEBUG"
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        # stdout carries command output, so log lines go to stderr
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# Convenience: log registry and matcher events with consistent event names
def log_registry_loaded(
    logger: structlog.stdlib.BoundLogger,
    root: str,
    skill_count: int,
    categories: list[str],
) -> None:
    logger.info(
        "registry_loaded",
        root=root,
        skill_count=skill_count,
        categories=categories,
    )


def log_skill_matched(
    logger: structlog.stdlib.BoundLogger,
    query: str,
    top_k: int,
    results: list[tuple[str, int]],
) -> None:
    q = query[:200] + "..." if len(query) > 200 else query
    logger.debug(
        "skill_matched",
        query=q,
        top_k=top_k,
        results=[{"identifier": i, "score": s} for i, s in results],
    )


def log_skill_invoked(
    logger: structlog.stdlib.BoundLogger,
    identifier: str,
    trigger: str,
    body_length: int,
) -> None:
    logger.info(
        "skill_invoked",
        identifier=identifier,
        trigger=trigger,
        body_length=body_length,
    )
