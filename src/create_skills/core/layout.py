"""
SkillLayout - 技能目录布局配置

只负责定义生成的目录结构和路径，不包含任何业务逻辑。
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DOCS_URL = "https://agentskills.io"


@dataclass(frozen=True)
class SkillLayout:
    """
    技能目录布局

    生成结构：
    <name>/
    ├── SKILL.md          # 清单文件（frontmatter + 说明模板）
    ├── scripts/          # 可执行脚本
    ├── references/       # 参考资料
    ├── assets/           # 模板与资源
    └── README.md         # 使用说明
    """

    manifest_name: str = "SKILL.md"
    readme_name: str = "README.md"
    subdirectories: tuple[str, ...] = ("scripts", "references", "assets")
    # 空目录占位文件，保证 git 能跟踪空目录
    placeholder_name: str = ".gitkeep"
    docs_url: str = DOCS_URL

    # === 路径辅助方法 ===

    def manifest_path(self, skill_dir: Path) -> Path:
        """获取 SKILL.md 路径"""
        return skill_dir / self.manifest_name

    def readme_path(self, skill_dir: Path) -> Path:
        """获取 README.md 路径"""
        return skill_dir / self.readme_name

    def subdirectory_paths(self, skill_dir: Path) -> list[Path]:
        """获取所有子目录路径，顺序与 subdirectories 一致"""
        return [skill_dir / name for name in self.subdirectories]

    def placeholder_path(self, directory: Path) -> Path:
        """获取子目录中的占位文件路径"""
        return directory / self.placeholder_name
