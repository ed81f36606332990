"""
create-skills Core - 核心模块
"""

from create_skills.core.layout import SkillLayout
from create_skills.core.render import render_manifest, render_readme
from create_skills.core.resolver import FieldAction, FieldResolver, FieldSpec, plan_field
from create_skills.core.scaffolder import SkillScaffolder
from create_skills.core.skills_util import (
    ScaffoldRequest,
    SkillMetadata,
    is_path_available,
    is_valid_name,
)

__all__ = [
    # 配置
    "SkillLayout",
    # 数据模型
    "SkillMetadata",
    "ScaffoldRequest",
    # 校验
    "is_valid_name",
    "is_path_available",
    # 渲染
    "render_manifest",
    "render_readme",
    # 核心
    "SkillScaffolder",
    "FieldResolver",
    "FieldSpec",
    "FieldAction",
    "plan_field",
]
