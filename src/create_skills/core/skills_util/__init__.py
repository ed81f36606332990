"""Skill models, validation and error types used by create-skills."""

from .errors import (
    InvalidNameError,
    MissingNameError,
    MissingRequiredFieldError,
    PathExistsError,
    PromptCancelled,
    ScaffoldError,
    SkillError,
    ValidationError,
    WriteFailureError,
)
from .models import ScaffoldRequest, SkillMetadata
from .validator import is_path_available, is_valid_name, name_errors

__all__ = [
    "SkillError",
    "ScaffoldError",
    "ValidationError",
    "MissingNameError",
    "InvalidNameError",
    "MissingRequiredFieldError",
    "PathExistsError",
    "WriteFailureError",
    "PromptCancelled",
    "SkillMetadata",
    "ScaffoldRequest",
    "name_errors",
    "is_valid_name",
    "is_path_available",
]
