import asyncio
import logging
from typing import Awaitable, Callable, Optional

from studious.core.config import (
    TIMER_DEFAULT_HOURS,
    TIMER_DEFAULT_MINUTES,
    TIMER_DEFAULT_SECONDS,
    TIMER_TICK_SECONDS,
)
from studious.models.timer import TimerState

logger = logging.getLogger(__name__)

ChangeListener = Callable[[TimerState], Awaitable[None]]


def format_clock(total: int) -> str:
    """Render a second count as HH:MM:SS"""
    total = max(0, int(total))
    return f"{total // 3600:02d}:{(total // 60) % 60:02d}:{total % 60:02d}"


class CountdownTimer:
    def __init__(
        self,
        hours: int = TIMER_DEFAULT_HOURS,
        minutes: int = TIMER_DEFAULT_MINUTES,
        seconds: int = TIMER_DEFAULT_SECONDS,
        tick_seconds: float = TIMER_TICK_SECONDS,
        on_change: Optional[ChangeListener] = None,
    ):
        self.tick_seconds = tick_seconds
        self.on_change = on_change
        self.running = False
        self._task: Optional[asyncio.Task] = None
        self.set_duration(hours, minutes, seconds)

    @property
    def duration(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def state(self) -> TimerState:
        return TimerState(
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
            remaining=self.remaining,
            running=self.running,
            display=format_clock(self.remaining),
        )

    def set_duration(self, hours: int, minutes: int, seconds: int):
        if min(hours, minutes, seconds) < 0:
            raise ValueError("Timer fields must be non-negative")
        self.hours = hours
        self.minutes = minutes
        self.seconds = seconds
        self.remaining = self.duration
        if self.remaining <= 0:
            self._stop()

    def start(self):
        if self.running or self.remaining <= 0:
            return
        self.running = True
        logger.info(f"Timer started at {format_clock(self.remaining)}")
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop (plain sync caller); ticks are driven by hand.
            return
        self._task = loop.create_task(self._run())

    def pause(self):
        if not self.running:
            return
        self._stop()
        logger.info(f"Timer paused at {format_clock(self.remaining)}")

    def toggle(self):
        if self.running:
            self.pause()
        else:
            self.start()

    def reset(self):
        self._stop()
        self.remaining = self.duration
        logger.info(f"Timer reset to {format_clock(self.remaining)}")

    def tick(self):
        """Advance one second; the timer stops itself at zero"""
        if not self.running:
            return
        if self.remaining > 0:
            self.remaining -= 1
        if self.remaining <= 0:
            self.running = False
            self._task = None
            logger.info("Timer finished")

    def _stop(self):
        self.running = False
        task, self._task = self._task, None
        if task is not None and not task.done() and task is not _current_task():
            task.cancel()

    async def _run(self):
        while self.running:
            await asyncio.sleep(self.tick_seconds)
            if not self.running:
                break
            self.tick()
            await self.notify()

    async def notify(self):
        if self.on_change is None:
            return
        try:
            await self.on_change(self.state())
        except Exception as e:
            logger.error(f"Error notifying timer listener: {e}")


def _current_task() -> Optional[asyncio.Task]:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None
