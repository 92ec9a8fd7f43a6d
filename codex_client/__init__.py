"""asyncio client for the codex CLI and its MCP server mode."""

from .client import CodexClient
from .config import ClientConfig
from .errors import (
    CodexError,
    CommandFailedError,
    InvalidLogLevelError,
    InvalidOptionError,
    MalformedResponseError,
    ToolCallError,
)
from .options import (
    InvokeOption,
    build_invoke_options,
    with_approval_policy,
    with_base_instructions,
    with_config,
    with_cwd,
    with_include_plan_tool,
    with_model,
    with_profile,
    with_sandbox,
)
from .protocol import ApprovalPolicy, InvokeOptions, LogLevel, SandboxMode, ToolReply

__all__ = [
    "CodexClient",
    "ClientConfig",
    "CodexError",
    "CommandFailedError",
    "InvalidLogLevelError",
    "InvalidOptionError",
    "MalformedResponseError",
    "ToolCallError",
    "InvokeOption",
    "build_invoke_options",
    "with_approval_policy",
    "with_base_instructions",
    "with_config",
    "with_cwd",
    "with_include_plan_tool",
    "with_model",
    "with_profile",
    "with_sandbox",
    "ApprovalPolicy",
    "InvokeOptions",
    "LogLevel",
    "SandboxMode",
    "ToolReply",
]
