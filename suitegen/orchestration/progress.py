"""Rotating status messages shown while a generation is in flight."""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

STATUS_MESSAGES: tuple[str, ...] = (
    "Connecting to repository...",
    "Analyzing repository structure...",
    "Scanning source files...",
    "Identifying test targets...",
    "Generating unit tests...",
    "Generating integration tests...",
    "Generating E2E tests...",
    "Generating edge case tests...",
    "Generating performance tests...",
    "Compiling test suite...",
)

DEFAULT_INTERVAL = 3.0


@dataclass(eq=False)
class AnnouncerHandle:
    """One start() of an announcer."""

    task: "asyncio.Task[None] | None" = None
    emitted: list[str] = field(default_factory=list)
    stopped: bool = False


class ProgressAnnouncer:
    """Cycles through status messages on a fixed interval until stopped.

    This is not a progress estimate; the agent reports no progress.
    """

    def __init__(
        self,
        messages: Sequence[str] = STATUS_MESSAGES,
        interval: float = DEFAULT_INTERVAL,
        on_message: Callable[[str], None] | None = None,
    ):
        if not messages:
            raise ValueError("ProgressAnnouncer needs at least one message")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.messages = tuple(messages)
        self.interval = interval
        self.on_message = on_message
        self.current_message = ""
        self._active: AnnouncerHandle | None = None

    @property
    def is_running(self) -> bool:
        return self._active is not None

    def start(self) -> AnnouncerHandle:
        """Show the first message now and schedule the rest.

        Must be called from a running event loop. Starting again stops the
        previous handle.
        """
        if self._active is not None:
            self.stop(self._active)

        handle = AnnouncerHandle()
        self._active = handle
        self._emit(handle, 0)
        handle.task = asyncio.get_running_loop().create_task(self._rotate(handle))
        return handle

    def stop(self, handle: AnnouncerHandle | None = None) -> None:
        """Cancel the rotation and clear the message.

        Idempotent. Stopping a handle that is no longer the active one only
        cancels that handle's task.
        """
        handle = handle or self._active
        if handle is None or handle.stopped:
            return

        handle.stopped = True
        if handle.task is not None and not handle.task.done():
            handle.task.cancel()

        if handle is self._active:
            self._active = None
            self.current_message = ""
            logger.debug("Announcer stopped after %d message(s)", len(handle.emitted))

    @asynccontextmanager
    async def running(self) -> AsyncIterator[AnnouncerHandle]:
        """Run the announcer for the duration of the block."""
        handle = self.start()
        try:
            yield handle
        finally:
            self.stop(handle)

    async def _rotate(self, handle: AnnouncerHandle) -> None:
        loop = asyncio.get_running_loop()
        started = loop.time()
        tick = 0
        while not handle.stopped:
            tick += 1
            # Deadline from start, so sleep overshoot does not accumulate
            delay = started + tick * self.interval - loop.time()
            if delay > 0:
                await asyncio.sleep(delay)
            if handle.stopped:
                return
            self._emit(handle, tick % len(self.messages))

    def _emit(self, handle: AnnouncerHandle, index: int) -> None:
        message = self.messages[index]
        handle.emitted.append(message)
        self.current_message = message
        logger.debug("Status: %s", message)
        if self.on_message is not None:
            self.on_message(message)
