"""
技能名与路径校验测试
"""

import pytest
from pathlib import Path

from create_skills.core.skills_util import is_path_available, is_valid_name, name_errors


class TestIsValidName:
    """测试 is_valid_name"""

    @pytest.mark.parametrize(
        "name",
        ["my-skill", "my_skill", "mySkill", "my-skill-123", "skill", "123skill", "_x"],
    )
    def test_accepts_valid_names(self, name):
        """字母、数字、连字符、下划线组成的名称有效"""
        assert is_valid_name(name)

    @pytest.mark.parametrize(
        "name",
        [
            "",
            "   ",
            "my skill",
            "my.skill",
            ".hidden",
            "-dashed",
            "my/skill",
            "my\\skill",
            " padded",
            "trailing\n",
            "ünicode",
        ],
    )
    def test_rejects_invalid_names(self, name):
        """空白、分隔符、点号、非 ASCII 字符以及 ./- 开头都无效"""
        assert not is_valid_name(name)

    @pytest.mark.parametrize("value", [None, 123, {}, [], ["a"]])
    def test_rejects_non_strings(self, value):
        """非字符串一律无效"""
        assert not is_valid_name(value)


class TestNameErrors:
    """测试 name_errors 的规则说明"""

    def test_valid_name_has_no_errors(self):
        assert name_errors("pdf-processor") == []

    def test_reports_invalid_characters(self):
        errors = name_errors("invalid name")
        assert len(errors) == 1
        assert "invalid characters" in errors[0]

    def test_reports_leading_hyphen(self):
        errors = name_errors("-dashed")
        assert errors == ["Skill name cannot start with a dot or hyphen"]

    def test_leading_dot_breaks_two_rules(self):
        """.hidden 同时违反字符集与开头规则"""
        assert len(name_errors(".hidden")) == 2

    def test_whitespace_only(self):
        assert name_errors("   ") == ["Skill name must not be empty or whitespace"]


class TestIsPathAvailable:
    """测试 is_path_available"""

    def test_missing_path_is_available(self, tmp_path: Path):
        assert is_path_available(tmp_path / "new-skill")

    def test_existing_directory_is_not_available(self, tmp_path: Path):
        (tmp_path / "existing").mkdir()
        assert not is_path_available(tmp_path / "existing")

    def test_existing_file_is_not_available(self, tmp_path: Path):
        (tmp_path / "existing").write_text("x")
        assert not is_path_available(str(tmp_path / "existing"))

    def test_dangling_symlink_is_not_available(self, tmp_path: Path):
        """悬空符号链接也占用该路径"""
        link = tmp_path / "link"
        link.symlink_to(tmp_path / "nowhere")
        assert not is_path_available(link)

    def test_name_too_long_does_not_raise(self, tmp_path: Path):
        """超长文件名不抛出 OSError，交给后续 mkdir 报错"""
        assert is_path_available(tmp_path / ("a" * 300))
