"""Relaying a tail process's output and owning its lifecycle.

The controller reads the child's stdout and stderr in two tasks, forwards
every chunk as it arrives, and waits for the child to exit. A SIGINT
listener is registered for exactly the lifetime of one session: it stops
the child and ends the tail with UserInterrupt instead of a traceback.
"""

from __future__ import annotations

import asyncio
import codecs
import logging
import signal
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager, suppress
from typing import BinaryIO

from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

from ...core.errors import ChildProcessExitError, UserInterrupt
from .launcher import TailSession

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
KILL_TIMEOUT = 2.0  # seconds to wait after terminate before killing
STDERR_STYLE = Style(color="red")


@contextmanager
def interrupt_listener(loop: asyncio.AbstractEventLoop, callback: Callable[[], None]) -> Iterator[None]:
    """Route SIGINT to `callback` while the block runs, then restore the previous handling."""
    previous_handler = None
    try:
        loop.add_signal_handler(signal.SIGINT, callback)
        on_loop = True
    except NotImplementedError:
        # Windows event loops do not support add_signal_handler.
        previous_handler = signal.signal(signal.SIGINT, lambda _sig, _frame: loop.call_soon_threadsafe(callback))
        on_loop = False
    logger.debug("SIGINT listener installed")

    try:
        yield
    finally:
        if on_loop:
            loop.remove_signal_handler(signal.SIGINT)
        else:
            signal.signal(signal.SIGINT, previous_handler)
        logger.debug("SIGINT listener removed")


class TailController:
    """Forwards a TailSession's output and turns its ending into a result or an error."""

    def __init__(
        self,
        stdout: BinaryIO | None = None,
        stderr_console: Console | None = None,
        chunk_size: int = CHUNK_SIZE,
    ) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout.buffer
        self.stderr_console = stderr_console or Console(stderr=True)
        self.chunk_size = chunk_size
        self._session: TailSession | None = None
        self._interrupted: asyncio.Event | None = None

    @property
    def active(self) -> bool:
        return self._session is not None

    def interrupt(self) -> None:
        """Stop the active session. Safe to call repeatedly or after the child has exited."""
        if self._session is None or self._interrupted is None:
            return
        self._session.terminate()
        self._interrupted.set()

    async def run(self, session: TailSession) -> None:
        """Relay output until the child exits.

        Any other way out of this method (interrupt, a failing sink,
        cancellation) terminates the child and waits for it before returning.

        Raises:
            UserInterrupt: the session was interrupted (exit code 0)
            ChildProcessExitError: the child exited with a positive code
        """
        if self._session is not None:
            raise RuntimeError("A tail session is already running")

        self._session = session
        self._interrupted = asyncio.Event()
        loop = asyncio.get_running_loop()
        process = session.process

        relays = [
            asyncio.create_task(self._relay(process.stdout, self._write_stdout)),
            asyncio.create_task(self._relay_stderr(process.stderr)),
        ]
        exit_task = asyncio.create_task(self._wait_for_exit(session, relays))
        interrupt_task = asyncio.create_task(self._interrupted.wait())

        exited = False
        try:
            with interrupt_listener(loop, self.interrupt):
                await asyncio.wait({exit_task, interrupt_task}, return_when=asyncio.FIRST_COMPLETED)
            interrupted = self._interrupted.is_set()
            if not interrupted:
                returncode = exit_task.result()
                exited = True
        finally:
            pending = [task for task in (*relays, exit_task, interrupt_task) if not task.done()]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            if not exited:
                session.terminate()
                await self._reap(session)
            self._session = None
            self._interrupted = None

        if interrupted:
            raise UserInterrupt()

        logger.debug("Tail pid=%s exited with code %s", session.pid, returncode)
        # Negative codes mean the child was killed by a signal, which is not an error.
        if returncode > 0:
            raise ChildProcessExitError(returncode)

    async def _wait_for_exit(self, session: TailSession, relays: list[asyncio.Task[None]]) -> int:
        await asyncio.gather(*relays)
        return await session.process.wait()

    async def _relay(self, stream: asyncio.StreamReader | None, sink: Callable[[bytes], None]) -> None:
        if stream is None:
            return
        while True:
            chunk = await stream.read(self.chunk_size)
            if not chunk:
                break
            sink(chunk)

    def _write_stdout(self, chunk: bytes) -> None:
        self.stdout.write(chunk)
        self.stdout.flush()

    async def _relay_stderr(self, stream: asyncio.StreamReader | None) -> None:
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        await self._relay(stream, lambda chunk: self._write_stderr(decoder.decode(chunk)))
        self._write_stderr(decoder.decode(b"", final=True))

    def _write_stderr(self, text: str) -> None:
        """Write child stderr as-is, wrapped in red when the console has colors."""
        if not text:
            return
        console = self.stderr_console
        color_system = None
        if console.color_system and not console.no_color:
            color_system = COLOR_SYSTEMS.get(console.color_system)
        console.file.write(STDERR_STYLE.render(text, color_system=color_system))
        console.file.flush()

    async def _reap(self, session: TailSession) -> None:
        """Wait briefly for a terminated child, killing it if it ignores terminate.

        Leftover output is read and dropped so the pipes can reach EOF.
        """
        process = session.process
        discard = self._relay_nowhere
        reaper = asyncio.gather(discard(process.stdout), discard(process.stderr), process.wait())
        try:
            await asyncio.wait_for(asyncio.shield(reaper), timeout=KILL_TIMEOUT)
        except asyncio.TimeoutError:
            logger.debug("Tail pid=%s ignored terminate, killing", session.pid)
            with suppress(ProcessLookupError):
                process.kill()
            await reaper

    async def _relay_nowhere(self, stream: asyncio.StreamReader | None) -> None:
        await self._relay(stream, lambda _chunk: None)
