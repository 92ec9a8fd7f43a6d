"""Protocol dataclasses, enums, and schemas."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Any, Dict, Mapping, Optional, Union

ConfigValue = Union[str, int, float, bool, Mapping[str, "ConfigValue"]]

CODEX_TOOL_NAME = "codex"


class ApprovalPolicy(str, Enum):
    UNTRUSTED = "untrusted"
    ON_FAILURE = "on-failure"
    NEVER = "never"


class SandboxMode(str, Enum):
    READ_ONLY = "read-only"
    WORKSPACE_WRITE = "workspace-write"
    DANGER_FULL_ACCESS = "danger-full-access"


class LogLevel(str, Enum):
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"
    OFF = "off"


@dataclass
class InvokeOptions:
    """Per-call settings for the codex tool. ``None`` means "not sent"."""

    approval_policy: Optional[ApprovalPolicy] = None
    base_instructions: Optional[str] = None
    config: Optional[Dict[str, ConfigValue]] = None
    cwd: Optional[Union[str, PathLike]] = None  # subprocess working dir, never sent
    include_plan_tool: Optional[bool] = None
    model: Optional[str] = None
    profile: Optional[str] = None
    sandbox: Optional[SandboxMode] = None

    def to_arguments(self, prompt: str) -> Dict[str, Any]:
        arguments: Dict[str, Any] = {"prompt": prompt}
        if self.approval_policy is not None:
            arguments["approval-policy"] = self.approval_policy.value
        if self.base_instructions is not None:
            arguments["base-instructions"] = self.base_instructions
        if self.config is not None:
            arguments["config"] = self.config
        if self.include_plan_tool is not None:
            arguments["include-plan-tool"] = self.include_plan_tool
        if self.model is not None:
            arguments["model"] = self.model
        if self.profile is not None:
            arguments["profile"] = self.profile
        if self.sandbox is not None:
            arguments["sandbox"] = self.sandbox.value
        return arguments


@dataclass
class ToolReply:
    text: str
    is_error: bool = False

