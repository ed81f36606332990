"""
SkillScaffolder - 技能脚手架

负责校验技能名、检查目标路径，并生成目录结构与 SKILL.md / README.md。
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger

from .layout import SkillLayout
from .render import render_manifest, render_readme
from .skills_util.errors import (
    InvalidNameError,
    MissingNameError,
    PathExistsError,
    ValidationError,
    WriteFailureError,
)
from .skills_util.models import ScaffoldRequest, SkillMetadata
from .skills_util.validator import is_path_available, name_errors


class SkillScaffolder:
    """技能脚手架，唯一有文件系统副作用的组件"""

    def __init__(self, layout: Optional[SkillLayout] = None):
        self.layout = layout or SkillLayout()

    def check(
        self,
        name: Optional[str],
        target_directory: str | Path,
    ) -> Path:
        """
        校验技能名与目标路径（不写入任何内容）

        Args:
            name: 技能名称
            target_directory: 技能目录的父目录

        Returns:
            技能将被创建的路径
        """
        if not name:
            raise MissingNameError()

        errors = name_errors(name)
        if errors:
            raise InvalidNameError(name, errors)

        target_path = Path(target_directory) / name
        if not is_path_available(target_path):
            raise PathExistsError(target_path)

        return target_path

    def create(
        self,
        name: Optional[str],
        metadata: Optional[SkillMetadata] = None,
        target_directory: str | Path = ".",
    ) -> Path:
        """
        创建技能

        所有校验都在写入之前完成；写入开始后出错不回滚。

        Args:
            name: 技能名称，同时作为目录名
            metadata: SKILL.md frontmatter 数据，默认只包含 name
            target_directory: 技能目录的父目录

        Returns:
            新技能目录路径
        """
        target_path = self.check(name, target_directory)

        if metadata is None:
            metadata = SkillMetadata(name=name)
        elif metadata.name != name:
            raise ValidationError(
                f"metadata name 应与技能名一致: {metadata.name} != {name}"
            )

        request = ScaffoldRequest(
            name=name, metadata=metadata, target_directory=Path(target_directory)
        )
        self._materialize(request)

        logger.info(f"创建技能: {name} -> {request.target_path}")
        return request.target_path

    def _materialize(self, request: ScaffoldRequest) -> None:
        """按顺序写入目录与文件，OSError 统一包装为 WriteFailureError"""
        skill_dir = request.target_path
        current = skill_dir
        try:
            # 叶子目录必须不存在：检查与创建之间被占用时在这里报错
            skill_dir.mkdir(parents=True)

            for directory in self.layout.subdirectory_paths(skill_dir):
                current = directory
                directory.mkdir(exist_ok=True)
                current = self.layout.placeholder_path(directory)
                current.write_text("", encoding="utf-8")
                logger.debug(f"创建目录: {directory}")

            current = self.layout.manifest_path(skill_dir)
            current.write_text(render_manifest(request.metadata), encoding="utf-8")

            current = self.layout.readme_path(skill_dir)
            current.write_text(
                render_readme(request.name, self.layout.docs_url), encoding="utf-8"
            )
        except OSError as e:
            logger.error(f"写入失败: {current}: {e}")
            raise WriteFailureError(current, e) from e
