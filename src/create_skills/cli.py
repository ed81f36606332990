"""
create-skills 命令行入口

运行:
    create-skills my-skill --description "My first skill"
    python -m create_skills            # 交互模式
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from create_skills import __version__
from create_skills.core.layout import DOCS_URL
from create_skills.core.resolver import (
    DESCRIPTION_FIELD,
    NAME_FIELD,
    OPTIONAL_FIELDS,
    FieldResolver,
    Prompter,
)
from create_skills.core.scaffolder import SkillScaffolder
from create_skills.core.skills_util.errors import (
    InvalidNameError,
    MissingRequiredFieldError,
    PathExistsError,
    PromptCancelled,
    ScaffoldError,
)
from create_skills.core.skills_util.models import SkillMetadata

DESCRIPTION = "create-skills - Scaffolding tool for Agent Skills"

EPILOG = f"""\
examples:
  # Interactive mode (prompts for all required fields)
  create-skills

  # Quick creation with name and description
  create-skills my-first-skill --description "My first skill"

  # Complete example with all metadata
  create-skills pdf-processor --description "Process PDF files" \\
      --author "Jane Doe" --version-flag "1.0.0" --tags "pdf,processing" --license "MIT"

Creates a new Agent Skill with the following structure:

  my-skill/
  ├── SKILL.md          # Required: Main skill instructions and metadata
  ├── scripts/          # Optional: Executable scripts
  ├── references/       # Optional: Documentation and references
  ├── assets/           # Optional: Templates and resources
  └── README.md         # Usage information

If you don't provide a skill name or description, you'll be prompted
to enter them interactively. Optional metadata fields (author, version,
tags, license) can also be provided via flags or will be prompted if omitted.

For more information about Agent Skills, visit: {DOCS_URL}
"""


class _ArgumentParser(argparse.ArgumentParser):
    """参数错误统一以退出码 1 结束"""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="create-skills",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "name",
        nargs="?",
        help="技能名称（交互模式下可省略，将提示输入）",
    )
    parser.add_argument("-d", "--description", help="技能描述")
    parser.add_argument("--author", help="作者")
    parser.add_argument("--version-flag", dest="skill_version", help="技能版本号")
    parser.add_argument("--tags", help="逗号分隔的标签")
    parser.add_argument("--license", help="许可证")
    parser.add_argument(
        "--target-dir",
        help="技能目录的父目录，默认当前工作目录",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="输出调试日志",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"create-skills v{__version__}",
    )
    return parser


def parse_tags(text: Optional[str]) -> list[str]:
    """拆分逗号分隔的标签，去掉空白项"""
    if not text:
        return []
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def build_metadata(name: str, values: dict[str, Optional[str]]) -> SkillMetadata:
    """把解析后的字段值组装成 SkillMetadata，空值一律视为缺失"""
    return SkillMetadata(
        name=name,
        description=values.get("description") or "",
        author=values.get("author") or None,
        version=values.get("version") or None,
        tags=parse_tags(values.get("tags")),
        license=values.get("license") or None,
    )


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG")


def _error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def _report_missing_field(error: MissingRequiredFieldError) -> None:
    if error.field == "name":
        _error(
            "Please provide a skill name. "
            "Usage: create-skills <skill-name> (see --help)"
        )
    elif error.field == "description":
        _error(
            "Please provide a description using --description flag, "
            "or run interactively."
        )
    else:
        _error(str(error))


def _report_success(name: str, path: Path) -> None:
    print(f'\n✓ Successfully created skill "{name}"')
    print(f"\nLocation: {path}")
    print("\nNext steps:")
    print(f"  1. cd {name}")
    print("  2. Edit SKILL.md to add your skill instructions")
    print("  3. Add scripts, references, and assets as needed")
    print(f"\nFor more information, visit: {DOCS_URL}")


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    cwd: Optional[str | Path] = None,
    interactive: Optional[bool] = None,
    prompter: Optional[Prompter] = None,
) -> int:
    """
    命令行主流程

    Args:
        argv: 命令行参数，默认读取 sys.argv
        cwd: 工作目录，默认 os.getcwd()
        interactive: 是否交互模式，默认检测 stdin 是否为 TTY
        prompter: 交互输入实现，默认使用 prompt_toolkit

    Returns:
        进程退出码
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    if interactive is None:
        interactive = sys.stdin.isatty()
    if interactive and prompter is None:
        from create_skills.core.prompter import TerminalPrompter

        prompter = TerminalPrompter()

    if args.target_dir:
        target_dir = Path(args.target_dir)
    else:
        target_dir = Path(cwd) if cwd is not None else Path(os.getcwd())

    resolver = FieldResolver(prompter, interactive)
    scaffolder = SkillScaffolder()

    try:
        if interactive and not args.name:
            print("Welcome to create-skills! Let's create a new Agent Skill.\n")
        name = resolver.resolve(NAME_FIELD, args.name)

        # 先校验名称和路径，避免用户填完所有字段后才失败
        scaffolder.check(name, target_dir)

        values = resolver.resolve_all(
            {
                "description": args.description,
                "author": args.author,
                "version": args.skill_version,
                # 按拆分后的结果判断是否已提供，",," 视为未提供
                "tags": ",".join(parse_tags(args.tags)),
                "license": args.license,
            },
            fields=(DESCRIPTION_FIELD, *OPTIONAL_FIELDS),
        )
        path = scaffolder.create(name, build_metadata(name, values), target_dir)
    except PromptCancelled:
        print("Cancelled.")
        return 0
    except MissingRequiredFieldError as e:
        _report_missing_field(e)
        return 1
    except InvalidNameError as e:
        _error(f"{e}: {'; '.join(e.errors)}")
        return 1
    except PathExistsError as e:
        _error(
            f"{e}. "
            "Please choose a different name or remove the existing directory."
        )
        return 1
    except (ScaffoldError, OSError) as e:
        _error(f"creating skill failed: {e}")
        return 1

    _report_success(name, path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
