"""Login serialization.

Phase 1 (now): logins on one client run one at a time.
- The lock covers building the login command and running it to exit.
- Invocations never take the lock; an invoke racing a login sees whatever
  credential state codex has at that moment.
"""

from __future__ import annotations

import asyncio
from typing import Callable

from .command import CodexCommand


class AuthGate:
    def __init__(self) -> None:
        self._lock = asyncio.Lock()

    def locked(self) -> bool:
        return self._lock.locked()

    async def login(self, build: Callable[[], CodexCommand]) -> None:
        """Build and run a login command while holding the lock."""
        async with self._lock:
            command = build()
            await command.run()
