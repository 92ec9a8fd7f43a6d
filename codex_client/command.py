"""Construction and execution of codex subprocess invocations."""

from __future__ import annotations

import asyncio
import codecs
import io
import logging
import os
import subprocess
from dataclasses import dataclass, field
from os import PathLike
from typing import IO, Any, Dict, List, Mapping, Optional, Sequence, Union

from mcp import StdioServerParameters

from .errors import CommandFailedError, InvalidLogLevelError
from .protocol import LogLevel

logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "codex"
DEFAULT_LOG_LEVEL = LogLevel.INFO.value

# Rust log targets inside the codex binary.
LOG_NAMESPACES = ("codex_core", "codex_tui")


def rust_log_value(level: str) -> str:
    return ",".join(f"{namespace}={level}" for namespace in LOG_NAMESPACES)


def has_fileno(stream: Any) -> bool:
    try:
        stream.fileno()
    except (AttributeError, OSError, ValueError):
        return False
    return True


class StderrChannel:
    """Where a child's stderr goes while it runs.

    No writer: the null device. A writer backed by a file descriptor: that
    file. Anything else (``io.StringIO``, ``io.BytesIO``, ...): the write end
    of a pipe whose output a worker thread copies into the writer. Call
    :meth:`spawned` once the child holds its copy of the pipe; leaving the
    ``async with`` block waits until everything the child wrote has been
    copied.
    """

    def __init__(self, writer: Optional[IO[Any]]) -> None:
        self._writer = writer
        self._write_fd: Optional[int] = None
        self._pump: Optional[asyncio.Future] = None
        self.target: Union[IO[Any], int] = subprocess.DEVNULL

    async def __aenter__(self) -> "StderrChannel":
        if self._writer is None:
            return self
        if has_fileno(self._writer):
            self.target = self._writer
            return self
        read_fd, self._write_fd = os.pipe()
        self.target = self._write_fd
        self._pump = asyncio.ensure_future(asyncio.to_thread(self._copy, read_fd))
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.spawned()
        if self._pump is not None:
            await self._pump

    def spawned(self) -> None:
        if self._write_fd is not None:
            os.close(self._write_fd)
            self._write_fd = None

    def _copy(self, read_fd: int) -> None:
        binary = isinstance(self._writer, (io.RawIOBase, io.BufferedIOBase))
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        try:
            while True:
                chunk = os.read(read_fd, 65536)
                if not chunk:
                    break
                if binary:
                    self._writer.write(chunk)
                else:
                    self._writer.write(decoder.decode(chunk))
            if not binary:
                tail = decoder.decode(b"", final=True)
                if tail:
                    self._writer.write(tail)
        finally:
            os.close(read_fd)


@dataclass
class CodexCommand:
    """A not-yet-started codex process: what to run, where, and with which env."""

    executable: str
    args: List[str] = field(default_factory=list, repr=False)
    env: Dict[str, str] = field(default_factory=dict, repr=False)
    errlog: Optional[IO[Any]] = None
    cwd: Optional[Union[str, PathLike]] = None

    @property
    def subcommand(self) -> str:
        return self.args[0] if self.args else ""

    def stderr_channel(self) -> StderrChannel:
        return StderrChannel(self.errlog)

    def to_server_parameters(self) -> StdioServerParameters:
        return StdioServerParameters(
            command=self.executable,
            args=list(self.args),
            env=dict(self.env),
            cwd=self.cwd,
        )

    async def run(self) -> None:
        """Run to completion; raise CommandFailedError on a non-zero exit.

        If the awaiting task is cancelled the child is killed and reaped
        before the cancellation propagates.
        """
        logger.debug("starting %s %s", self.executable, self.subcommand)
        async with self.stderr_channel() as channel:
            proc = await asyncio.create_subprocess_exec(
                self.executable,
                *self.args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=channel.target,
                cwd=self.cwd,
                env=self.env,
            )
            channel.spawned()
            try:
                returncode = await proc.wait()
            except asyncio.CancelledError:
                try:
                    proc.kill()
                except ProcessLookupError:
                    pass
                try:
                    await proc.wait()
                finally:
                    raise

        logger.debug("%s %s exited with %s", self.executable, self.subcommand, returncode)
        if returncode != 0:
            raise CommandFailedError(self.subcommand, returncode)


def build_command(
    executable_path: str,
    args: Sequence[str],
    log_writer: Optional[IO[Any]] = None,
    log_level: str = DEFAULT_LOG_LEVEL,
    environ: Optional[Mapping[str, str]] = None,
) -> CodexCommand:
    """Build the invocation for ``executable_path args...``.

    With a log writer, ``log_level`` must be a LogLevel value; the child's
    stderr goes to the writer and ``RUST_LOG`` is placed ahead of the
    inherited environment, so an inherited ``RUST_LOG`` still wins.
    """
    inherited = dict(os.environ if environ is None else environ)
    if log_writer is None:
        return CodexCommand(executable=executable_path, args=list(args), env=inherited)

    try:
        level = LogLevel(log_level)
    except ValueError:
        raise InvalidLogLevelError(log_level) from None

    env = {"RUST_LOG": rust_log_value(level.value)}
    env.update(inherited)
    return CodexCommand(
        executable=executable_path,
        args=list(args),
        env=env,
        errlog=log_writer,
    )
