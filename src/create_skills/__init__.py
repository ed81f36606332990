"""
create-skills - Agent Skills 脚手架

生成标准的技能目录结构与 SKILL.md 清单。

核心概念:
- SkillMetadata: SKILL.md frontmatter 数据
- SkillScaffolder: 校验技能名、检查目标路径并生成文件
- FieldResolver: 合并命令行参数与交互式输入

Example:
    >>> from create_skills import SkillMetadata, SkillScaffolder
    >>>
    >>> metadata = SkillMetadata(
    ...     name="pdf-processor",
    ...     description="Process PDF files",
    ...     tags=["pdf", "processing"],
    ... )
    >>> SkillScaffolder().create("pdf-processor", metadata, "./skills")
    PosixPath('skills/pdf-processor')
"""

from create_skills.core import (
    FieldResolver,
    ScaffoldRequest,
    SkillLayout,
    SkillMetadata,
    SkillScaffolder,
)

__version__ = "0.1.0"
__all__ = [
    "SkillMetadata",
    "ScaffoldRequest",
    "SkillLayout",
    "SkillScaffolder",
    "FieldResolver",
]
