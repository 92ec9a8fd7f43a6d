"""Client for driving the codex CLI."""

from __future__ import annotations

from typing import IO, Any, Optional

from .auth import AuthGate
from .command import DEFAULT_EXECUTABLE, DEFAULT_LOG_LEVEL, CodexCommand, build_command
from .config import ClientConfig
from .options import InvokeOption, build_invoke_options
from .session import call_codex, open_session, reply_text


class CodexClient:
    """Wraps the ``codex`` executable.

    ``login`` runs ``codex login --api-key <key>``; ``invoke`` runs
    ``codex mcp`` and calls its ``codex`` tool once. Each call owns its own
    subprocess. Logins on one client are serialized; invocations are not
    synchronized with logins or with each other.

    Example:
        >>> client = CodexClient(log_writer=open("codex.log", "ab"), log_level="debug")
        >>> await client.login(api_key)
        >>> text = await client.invoke("explain main.py", with_sandbox("read-only"))
    """

    def __init__(
        self,
        executable_path: str = DEFAULT_EXECUTABLE,
        log_writer: Optional[IO[Any]] = None,
        log_level: str = DEFAULT_LOG_LEVEL,
    ) -> None:
        self.executable_path = executable_path
        self.log_writer = log_writer
        self.log_level = log_level
        self._auth = AuthGate()

    @classmethod
    def from_config(cls, config: ClientConfig, log_writer: Optional[IO[Any]] = None) -> "CodexClient":
        return cls(
            executable_path=config.executable_path,
            log_writer=log_writer,
            log_level=config.log_level,
        )

    @classmethod
    def from_env(cls, log_writer: Optional[IO[Any]] = None) -> "CodexClient":
        return cls.from_config(ClientConfig.from_env(), log_writer=log_writer)

    def set_executable_path(self, path: str) -> None:
        self.executable_path = path

    def set_logger(self, log_writer: Optional[IO[Any]], log_level: str) -> None:
        """Send codex's stderr to ``log_writer`` at ``log_level``.

        The level is checked when a command is built, not here.
        """
        self.log_writer = log_writer
        self.log_level = log_level

    def command(self, *args: str) -> CodexCommand:
        return build_command(
            self.executable_path,
            args,
            log_writer=self.log_writer,
            log_level=self.log_level,
        )

    async def login(self, api_key: str) -> None:
        """Authenticate codex with an OpenAI API key."""
        await self._auth.login(lambda: self.command("login", "--api-key", api_key))

    async def invoke(self, prompt: str, *options: InvokeOption) -> str:
        """Run ``prompt`` through the codex MCP tool and return its text reply.

        Raises InvalidOptionError / InvalidLogLevelError before anything is
        spawned, ToolCallError when codex reports a failure, and lets
        transport errors from the MCP SDK through unchanged.
        """
        opts = build_invoke_options(options)
        command = self.command("mcp")
        if opts.cwd is not None:
            command.cwd = opts.cwd

        async with open_session(command) as session:
            result = await call_codex(session, opts.to_arguments(prompt))
            return reply_text(result)
