"""Skill-related exceptions."""

from pathlib import Path


class SkillError(Exception):
    """Base exception for all skill-related errors."""


class PromptCancelled(SkillError):
    """Raised when the user aborts an interactive prompt."""


class ScaffoldError(SkillError):
    """Base exception for errors that stop a skill from being scaffolded."""


class ValidationError(ScaffoldError):
    """Raised when skill input is invalid."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors if errors is not None else [message]


class MissingNameError(ValidationError):
    """Raised when no skill name was supplied."""

    def __init__(self):
        super().__init__("Please provide a skill name.")


class InvalidNameError(ValidationError):
    """Raised when a skill name breaks one or more naming rules."""

    def __init__(self, name: object, errors: list[str]):
        super().__init__(f'Invalid skill name "{name}"', errors)
        self.name = name


class MissingRequiredFieldError(ValidationError):
    """Raised when a required field has no value and cannot be prompted for."""

    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}")
        self.field = field


class PathExistsError(ScaffoldError):
    """Raised when the skill directory already exists."""

    def __init__(self, path: Path):
        super().__init__(f'Directory "{path.name}" already exists in {path.parent}')
        self.path = path


class WriteFailureError(ScaffoldError):
    """Raised when the filesystem refuses a write; the OSError is chained."""

    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"Failed to write {path}: {cause}")
        self.path = path
        self.cause = cause
