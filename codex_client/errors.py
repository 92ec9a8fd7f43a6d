"""Exceptions raised by the codex client."""

from __future__ import annotations

from typing import Optional


class CodexError(Exception):
    pass


class InvalidOptionError(CodexError, ValueError):
    """An invoke option carried a value outside its allowed set."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"invalid {field}: {value}")
        self.field = field
        self.value = value


class InvalidLogLevelError(CodexError, ValueError):
    def __init__(self, level: Optional[str] = None) -> None:
        super().__init__("invalid log level")
        self.level = level


class CommandFailedError(CodexError):
    """The codex process exited with a non-zero status."""

    def __init__(self, subcommand: str, returncode: Optional[int]) -> None:
        super().__init__(f"codex {subcommand} failed: exit status {returncode}")
        self.subcommand = subcommand
        self.returncode = returncode


class ToolCallError(CodexError):
    """The codex tool answered with ``isError`` set; the message is its text."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text


class MalformedResponseError(CodexError):
    pass
