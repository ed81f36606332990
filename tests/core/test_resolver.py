"""
FieldResolver 测试
"""

import pytest

from create_skills.core.resolver import (
    DESCRIPTION_FIELD,
    FIELDS,
    NAME_FIELD,
    OPTIONAL_FIELDS,
    FieldAction,
    FieldResolver,
    FieldSpec,
    plan_field,
)
from create_skills.core.skills_util import MissingRequiredFieldError, PromptCancelled


class ScriptedPrompter:
    """按脚本返回答案的 Prompter，None 表示用户中止"""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked: list[str] = []
        self.warnings: list[str] = []

    def ask(self, message: str) -> str:
        self.asked.append(message)
        answer = self.answers.pop(0)
        if answer is None:
            raise PromptCancelled()
        return answer

    def warn(self, message: str) -> None:
        self.warnings.append(message)


class TestPlanField:
    """测试 plan_field 状态机"""

    def test_known_value_is_used(self):
        assert plan_field(NAME_FIELD, "x", interactive=True) is FieldAction.USE_KNOWN
        assert plan_field(NAME_FIELD, "x", interactive=False) is FieldAction.USE_KNOWN

    @pytest.mark.parametrize("known", [None, "", "   "])
    def test_required_missing_non_interactive_fails(self, known):
        assert plan_field(NAME_FIELD, known, interactive=False) is FieldAction.FAIL

    def test_optional_missing_non_interactive_is_absent(self):
        author = OPTIONAL_FIELDS[0]
        assert plan_field(author, None, interactive=False) is FieldAction.ABSENT

    def test_missing_interactive_prompts(self):
        assert plan_field(DESCRIPTION_FIELD, "", interactive=True) is FieldAction.PROMPT


class TestFieldResolver:
    """测试 FieldResolver.resolve"""

    def test_known_value_never_prompts(self):
        prompter = ScriptedPrompter()
        resolver = FieldResolver(prompter, interactive=True)

        assert resolver.resolve(NAME_FIELD, "flag-name") == "flag-name"
        assert prompter.asked == []

    def test_non_interactive_required_raises(self):
        resolver = FieldResolver(None, interactive=False)

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            resolver.resolve(DESCRIPTION_FIELD, None)
        assert exc_info.value.field == "description"

    def test_non_interactive_optional_is_none(self):
        resolver = FieldResolver(None, interactive=False)
        assert resolver.resolve(OPTIONAL_FIELDS[0], None) is None

    def test_interactive_requires_prompter(self):
        with pytest.raises(ValueError):
            FieldResolver(None, interactive=True)

    def test_prompts_for_missing_value(self):
        prompter = ScriptedPrompter("A description")
        resolver = FieldResolver(prompter, interactive=True)

        assert resolver.resolve(DESCRIPTION_FIELD) == "A description"
        assert prompter.asked == [DESCRIPTION_FIELD.message]

    def test_required_field_reprompts_on_blank(self):
        prompter = ScriptedPrompter("", "  ", "finally")
        resolver = FieldResolver(prompter, interactive=True)

        assert resolver.resolve(DESCRIPTION_FIELD) == "finally"
        assert prompter.warnings == ["Description is required"] * 2

    def test_validator_rejects_and_reprompts(self):
        """名称输入不合法时提示并重新询问"""
        prompter = ScriptedPrompter("bad name", ".hidden", "good-name")
        resolver = FieldResolver(prompter, interactive=True)

        assert resolver.resolve(NAME_FIELD) == "good-name"
        assert len(prompter.asked) == 3
        assert len(prompter.warnings) == 2

    def test_skippable_field_accepts_blank(self):
        prompter = ScriptedPrompter("")
        resolver = FieldResolver(prompter, interactive=True)

        assert resolver.resolve(OPTIONAL_FIELDS[0]) is None
        assert prompter.warnings == []

    def test_custom_validator(self):
        spec = FieldSpec(
            "version",
            "Version?",
            validate=lambda v: None if v[0].isdigit() else "must start with a digit",
        )
        prompter = ScriptedPrompter("v1", "1.0.0")
        resolver = FieldResolver(prompter, interactive=True)

        assert resolver.resolve(spec) == "1.0.0"
        assert prompter.warnings == ["must start with a digit"]

    def test_cancel_propagates(self):
        prompter = ScriptedPrompter(None)
        resolver = FieldResolver(prompter, interactive=True)

        with pytest.raises(PromptCancelled):
            resolver.resolve(NAME_FIELD)


class TestResolveAll:
    """测试 resolve_all 的顺序与合并"""

    def test_order_of_prompts(self):
        """依次询问 name, description, author, version, tags, license"""
        prompter = ScriptedPrompter("my-skill", "desc", "me", "1.0.0", "a, b", "MIT")
        resolver = FieldResolver(prompter, interactive=True)

        values = resolver.resolve_all({})

        assert prompter.asked == [spec.message for spec in FIELDS]
        assert values == {
            "name": "my-skill",
            "description": "desc",
            "author": "me",
            "version": "1.0.0",
            "tags": "a, b",
            "license": "MIT",
        }

    def test_only_missing_fields_are_prompted(self):
        prompter = ScriptedPrompter("", "")
        resolver = FieldResolver(prompter, interactive=True)

        values = resolver.resolve_all(
            {"name": "x", "description": "d", "author": "me", "tags": "t"}
        )

        assert prompter.asked == [OPTIONAL_FIELDS[1].message, OPTIONAL_FIELDS[3].message]
        assert values["version"] is None
        assert values["license"] is None
        assert values["author"] == "me"

    def test_non_interactive_fills_absent(self):
        resolver = FieldResolver(None, interactive=False)

        values = resolver.resolve_all({"name": "x", "description": "d"})

        assert values == {
            "name": "x",
            "description": "d",
            "author": None,
            "version": None,
            "tags": None,
            "license": None,
        }
