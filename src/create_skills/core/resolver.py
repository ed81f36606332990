"""
FieldResolver - 字段解析

把命令行已提供的值与交互式输入合并成最终字段值。
终端 I/O 全部通过注入的 Prompter 完成，测试中可替换为脚本化实现。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping, Optional, Protocol

from loguru import logger

from .skills_util.errors import MissingRequiredFieldError
from .skills_util.validator import name_errors


class Prompter(Protocol):
    """交互式输入能力"""

    def ask(self, message: str) -> str:
        """向用户询问一行输入；用户中止时抛出 PromptCancelled"""
        ...

    def warn(self, message: str) -> None:
        """提示用户输入无效"""
        ...


@dataclass(frozen=True)
class FieldSpec:
    """单个字段的解析规则"""

    key: str
    message: str
    required: bool = False
    # 返回错误信息，None 表示通过
    validate: Optional[Callable[[str], Optional[str]]] = None
    skippable: bool = True

    @property
    def label(self) -> str:
        return self.key.replace("_", " ").capitalize()


class FieldAction(Enum):
    """字段的下一步动作"""

    USE_KNOWN = "use_known"
    PROMPT = "prompt"
    FAIL = "fail"
    ABSENT = "absent"


def _validate_name(value: str) -> Optional[str]:
    if name_errors(value):
        return (
            "Skill name must contain only alphanumeric characters, "
            "hyphens, and underscores, and not start with a dot or hyphen"
        )
    return None


NAME_FIELD = FieldSpec(
    key="name",
    message="What is the name of your skill?",
    required=True,
    validate=_validate_name,
    skippable=False,
)

DESCRIPTION_FIELD = FieldSpec(
    key="description",
    message="Provide a brief description for your skill:",
    required=True,
    skippable=False,
)

OPTIONAL_FIELDS = (
    FieldSpec("author", "Author name (optional, press Enter to skip):"),
    FieldSpec("version", "Version (optional, e.g., 1.0.0, press Enter to skip):"),
    FieldSpec("tags", "Tags (optional, comma-separated, press Enter to skip):"),
    FieldSpec("license", "License (optional, e.g., MIT, press Enter to skip):"),
)

# 解析顺序：name -> description -> author, version, tags, license
FIELDS = (NAME_FIELD, DESCRIPTION_FIELD, *OPTIONAL_FIELDS)


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def plan_field(spec: FieldSpec, known: Optional[str], interactive: bool) -> FieldAction:
    """
    决定字段的解析方式（纯函数）

    Args:
        spec: 字段规则
        known: 已知值（例如来自命令行参数）
        interactive: 是否连接了交互式终端
    """
    if not _blank(known):
        return FieldAction.USE_KNOWN
    if not interactive:
        return FieldAction.FAIL if spec.required else FieldAction.ABSENT
    return FieldAction.PROMPT


class FieldResolver:
    """按字段规则解析最终值"""

    def __init__(self, prompter: Optional[Prompter], interactive: bool):
        if interactive and prompter is None:
            raise ValueError("交互模式需要提供 prompter")
        self.prompter = prompter
        self.interactive = interactive

    def resolve(self, spec: FieldSpec, known: Optional[str] = None) -> Optional[str]:
        """
        解析单个字段

        Returns:
            字段值；可跳过字段留空时返回 None
        """
        action = plan_field(spec, known, self.interactive)
        logger.debug(f"字段 {spec.key}: {action.value}")

        if action is FieldAction.USE_KNOWN:
            return known
        if action is FieldAction.FAIL:
            raise MissingRequiredFieldError(spec.key)
        if action is FieldAction.ABSENT:
            return None
        return self._prompt(spec)

    def _prompt(self, spec: FieldSpec) -> Optional[str]:
        while True:
            answer = self.prompter.ask(spec.message)

            if _blank(answer):
                if spec.skippable:
                    return None
                self.prompter.warn(f"{spec.label} is required")
                continue

            if spec.validate is not None:
                error = spec.validate(answer)
                if error:
                    self.prompter.warn(error)
                    continue

            return answer

    def resolve_all(
        self, known: Mapping[str, Optional[str]], fields=FIELDS
    ) -> dict[str, Optional[str]]:
        """按顺序解析所有字段"""
        return {spec.key: self.resolve(spec, known.get(spec.key)) for spec in fields}
