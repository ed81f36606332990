"""
TerminalPrompter - 基于 prompt_toolkit 的交互式输入
"""

from __future__ import annotations

from typing import Optional

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.formatted_text import HTML

from .skills_util.errors import PromptCancelled


class TerminalPrompter:
    """在终端中逐行询问字段值"""

    def __init__(self, session: Optional[PromptSession] = None):
        self.session = session or PromptSession()

    def ask(self, message: str) -> str:
        try:
            # HTML.format 会转义 message 中的尖括号
            return self.session.prompt(
                HTML("<ansicyan>?</ansicyan> <b>{}</b> ").format(message),
                multiline=False,
            )
        except (KeyboardInterrupt, EOFError):
            raise PromptCancelled()

    def warn(self, message: str) -> None:
        print_formatted_text(HTML("<ansired>✖ {}</ansired>").format(message))
