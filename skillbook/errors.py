"""Typed failures raised while loading and querying skills."""
from pathlib import Path


class SkillError(Exception):
    """Base class for all skillbook errors."""


class MalformedSkillError(SkillError):
    """A skill document is unreadable or its front-matter lacks a required field."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class DuplicateSkillError(SkillError):
    """Two skill documents declare the same identifier."""

    def __init__(self, identifier: str, first_path: Path | str, second_path: Path | str):
        self.identifier = identifier
        self.first_path = Path(first_path)
        self.second_path = Path(second_path)
        super().__init__(
            f"duplicate skill identifier {identifier!r} in {self.first_path} and {self.second_path}"
        )


class NotFoundError(SkillError, KeyError):
    """No skill with the given identifier is loaded."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(identifier)

    def __str__(self) -> str:
        return f"no skill with identifier {self.identifier!r}"


class SkillsDirNotFoundError(SkillError):
    """The root given to a registry load is missing or not a directory."""

    def __init__(self, root: Path | str):
        self.root = Path(root)
        super().__init__(f"skills directory not found: {self.root}")
