"""Skill name and target path validation."""

import os
import re
from pathlib import Path

NAME_PATTERN = re.compile(r"[a-zA-Z0-9_-]+")


def name_errors(name: object) -> list[str]:
    """Return one message per naming rule that `name` violates."""
    if not name or not isinstance(name, str):
        return ["Skill name must be a non-empty string"]

    if not name.strip():
        return ["Skill name must not be empty or whitespace"]

    errors = []

    if not NAME_PATTERN.fullmatch(name):
        errors.append(
            f"Skill name '{name}' contains invalid characters. "
            "Only letters, digits, hyphens, and underscores are allowed."
        )

    if name.startswith(".") or name.startswith("-"):
        errors.append("Skill name cannot start with a dot or hyphen")

    return errors


def is_valid_name(name: object) -> bool:
    """Check whether `name` is safe to use as a skill directory name."""
    return not name_errors(name)


def is_path_available(path: str | Path) -> bool:
    """True if nothing exists at `path`.

    The answer is advisory: another process may create the path between this
    check and the caller's own mkdir.
    """
    # lexists 对悬空符号链接返回 True，遇到 OSError（如文件名过长）返回 False
    return not os.path.lexists(path)
