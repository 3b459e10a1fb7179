"""Timed reveal of parsed events on an asyncio event loop.

One advance is pending at a time. Its delay comes from the event about to be
revealed: max(min_delay_ms, (reveal_delay or default_delay_ms) / speed).
pause(), reset(), skip_to_end(), step() and set_speed() cancel the pending
advance before touching the cursor, so a stale timer can never reveal an
event twice or out of order. The event list itself is never re-parsed;
`visible` is always a prefix slice of it.
"""

import asyncio
import logging
from collections.abc import Callable, Sequence

from wolfreplay.models import Event

logger = logging.getLogger(__name__)

RevealCallback = Callable[[int, Event], None]


class Playback:
    def __init__(
        self,
        events: Sequence[Event],
        speed: float = 1.0,
        min_delay_ms: int = 200,
        default_delay_ms: int = 400,
        on_reveal: RevealCallback | None = None,
    ) -> None:
        if speed <= 0:
            raise ValueError(f"Playback speed must be positive, got {speed}")
        self.events = list(events)
        self.speed = speed
        self.min_delay_ms = min_delay_ms
        self.default_delay_ms = default_delay_ms
        self.on_reveal = on_reveal
        self.visible_count = 0
        self._task: asyncio.Task | None = None

    # ── State ────────────────────────────────────────────────

    @property
    def visible(self) -> list[Event]:
        return self.events[: self.visible_count]

    @property
    def finished(self) -> bool:
        return self.visible_count >= len(self.events)

    @property
    def playing(self) -> bool:
        return self._task is not None and not self._task.done()

    def next_delay(self) -> float:
        """Milliseconds to wait before revealing the next event."""
        if self.finished:
            return 0.0
        event = self.events[self.visible_count]
        return max(self.min_delay_ms, (event.reveal_delay or self.default_delay_ms) / self.speed)

    # ── Controls ─────────────────────────────────────────────

    def play(self) -> None:
        """Start or resume timed reveal. Must be called from a running loop."""
        if self.playing or self.finished:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    def pause(self) -> None:
        self._cancel_pending()

    def reset(self) -> None:
        self._cancel_pending()
        self.visible_count = 0

    def skip_to_end(self) -> None:
        self._cancel_pending()
        while not self.finished:
            self._reveal_next()

    def step(self) -> Event | None:
        """Reveal the next event immediately, keeping playback state."""
        was_playing = self.playing
        self._cancel_pending()
        event = None if self.finished else self._reveal_next()
        if was_playing:
            self.play()
        return event

    def set_speed(self, speed: float) -> None:
        if speed <= 0:
            raise ValueError(f"Playback speed must be positive, got {speed}")
        was_playing = self.playing
        self._cancel_pending()
        self.speed = speed
        if was_playing:
            self.play()

    async def wait(self) -> None:
        """Wait until the pending run finishes or is cancelled."""
        if self._task is not None:
            await asyncio.wait({self._task})

    # ── Internals ────────────────────────────────────────────

    def _cancel_pending(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def _reveal_next(self) -> Event:
        index = self.visible_count
        event = self.events[index]
        self.visible_count += 1
        if self.on_reveal is not None:
            self.on_reveal(index, event)
        return event

    async def _run(self) -> None:
        while not self.finished:
            await asyncio.sleep(self.next_delay() / 1000)
            self._reveal_next()
        logger.debug(f"Playback finished after {self.visible_count} events")
