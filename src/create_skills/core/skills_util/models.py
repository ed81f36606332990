"""Data models for Agent Skills."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional


def _present(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


@dataclass(frozen=True)
class SkillMetadata:
    """Metadata rendered into the SKILL.md frontmatter."""

    name: str
    description: str = ""
    author: Optional[str] = None
    version: Optional[str] = None
    tags: Iterable[str] = field(default_factory=tuple)
    license: Optional[str] = None

    def __post_init__(self):
        tags = self.tags or ()
        if isinstance(tags, str):
            tags = (tags,)
        object.__setattr__(self, "tags", tuple(tags))

    def to_dict(self) -> dict:
        """Convert to dictionary, excluding empty values."""
        result = {"name": self.name}
        if _present(self.description):
            result["description"] = self.description
        if _present(self.author):
            result["author"] = self.author
        if _present(self.version):
            result["version"] = self.version
        if self.tags:
            result["tags"] = list(self.tags)
        if _present(self.license):
            result["license"] = self.license
        return result


@dataclass(frozen=True)
class ScaffoldRequest:
    """A single scaffold invocation: which skill goes where."""

    name: str
    metadata: SkillMetadata
    target_directory: Path

    def __post_init__(self):
        object.__setattr__(self, "target_directory", Path(self.target_directory))

    @property
    def target_path(self) -> Path:
        return self.target_directory / self.name
