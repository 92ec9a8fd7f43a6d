"""MCP session helpers for talking to ``codex mcp``."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

from mcp import ClientSession
from mcp.client.stdio import stdio_client
from mcp.types import CallToolResult, TextContent

from .command import CodexCommand
from .errors import MalformedResponseError, ToolCallError
from .protocol import CODEX_TOOL_NAME, ToolReply

logger = logging.getLogger(__name__)


@asynccontextmanager
async def open_session(command: CodexCommand) -> AsyncIterator[ClientSession]:
    """Spawn ``command`` and yield an initialized MCP session over its stdio.

    The session and the child process are torn down when the block exits,
    however it exits.
    """
    logger.debug("opening MCP session on %s %s", command.executable, command.subcommand)
    params = command.to_server_parameters()
    async with command.stderr_channel() as channel:
        async with stdio_client(params, errlog=channel.target) as (read, write):
            channel.spawned()
            async with ClientSession(read, write) as session:
                await session.initialize()
                yield session


async def call_codex(session: ClientSession, arguments: Dict[str, Any]) -> CallToolResult:
    logger.debug("calling tool %s with keys %s", CODEX_TOOL_NAME, sorted(arguments))
    return await session.call_tool(CODEX_TOOL_NAME, arguments)


def read_reply(result: CallToolResult) -> ToolReply:
    """Read the first content entry of a tool result. Later entries are ignored."""
    if not result.content:
        raise MalformedResponseError("malformed response: no content")
    first = result.content[0]
    if not isinstance(first, TextContent):
        raise MalformedResponseError(f"malformed response: unexpected {first.type} content")
    return ToolReply(text=first.text, is_error=bool(result.isError))


def reply_text(result: CallToolResult) -> str:
    """Return the reply text, or raise ToolCallError if the tool flagged an error."""
    reply = read_reply(result)
    if reply.is_error:
        raise ToolCallError(reply.text)
    return reply.text
