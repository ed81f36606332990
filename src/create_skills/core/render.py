"""
技能文件渲染

纯函数：SkillMetadata -> SKILL.md 文本，技能名 -> README.md 文本。
不做任何文件读写。
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from .layout import DOCS_URL
from .skills_util.models import SkillMetadata

MANIFEST_BODY = """
# {title} Skill

## When to use this skill
Use this skill when you need to...

## How it works
1. First step...
2. Second step...
3. Third step...

## Examples
Provide examples of how to use this skill...

## Notes
Add any additional notes or considerations here...
"""

README_TEMPLATE = """# {name} Skill

This is an Agent Skill created with `create-skills`.

## Structure

```
{name}/
├── SKILL.md          # Required: Main skill instructions and metadata
├── scripts/          # Optional: Executable scripts
├── references/       # Optional: Documentation and references
├── assets/           # Optional: Templates and resources
└── README.md         # This file
```

## Usage

1. Edit `SKILL.md` to add your skill's instructions
2. Add any scripts to the `scripts/` directory
3. Add reference materials to `references/`
4. Add templates or other assets to `assets/`

## Next Steps

- Customize the `description` in SKILL.md frontmatter
- Add detailed instructions in the SKILL.md body
- Include examples and use cases
- Add any necessary scripts or resources

For more information about Agent Skills, visit:
{docs_url}
"""


def default_description(name: str) -> str:
    """description 缺失时的兜底文案"""
    return f"A skill for {name} functionality."


def title_case(name: str) -> str:
    """只大写首字母，其余字符（包括连字符）原样保留"""
    return name[:1].upper() + name[1:]


def _scalar(key: str, value: str) -> list[str]:
    return [f"{key}: {value}"]


def _sequence(key: str, values: Sequence[str]) -> list[str]:
    return [f"{key}:"] + [f"  - {item}" for item in values]


def _has_value(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return len(value) > 0


def _optional_fields(
    metadata: SkillMetadata,
) -> list[tuple[str, Optional[object], Callable[[str, object], list[str]]]]:
    # 输出顺序固定：author, version, tags, license
    return [
        ("author", metadata.author, _scalar),
        ("version", metadata.version, _scalar),
        ("tags", metadata.tags, _sequence),
        ("license", metadata.license, _scalar),
    ]


def render_frontmatter(metadata: SkillMetadata) -> str:
    """
    渲染 frontmatter 块（含首尾 ---）

    只输出有值的可选字段，空字段不留任何痕迹。
    """
    description = metadata.description
    if not _has_value(description):
        description = default_description(metadata.name)

    lines = ["---", f"name: {metadata.name}", f"description: {description}"]
    for key, value, formatter in _optional_fields(metadata):
        if _has_value(value):
            lines.extend(formatter(key, value))
    lines.append("---")
    return "\n".join(lines) + "\n"


def render_manifest(metadata: SkillMetadata) -> str:
    """渲染完整的 SKILL.md 内容"""
    return render_frontmatter(metadata) + MANIFEST_BODY.format(
        title=title_case(metadata.name)
    )


def render_readme(name: str, docs_url: str = DOCS_URL) -> str:
    """渲染 README.md 内容，标题中的技能名保持原样（不大写）"""
    return README_TEMPLATE.format(name=name, docs_url=docs_url)
