"""
Render Scheduling for MyReact

A state change asks the scheduler to run the render-requested callback.
SyncScheduler runs it immediately, inside the setter's call stack.
FrameScheduler defers it to the next animation-frame-equivalent tick of a
FrameClock: scheduling again before the tick fires cancels the pending frame
and requests a new one, so any number of changes collapse into one pass.

Everything here is single-threaded and cooperative; no locking is needed.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any, Callable, Dict, Optional

from ..errors import SchedulerError

logger = logging.getLogger(__name__)

# 60 frames per second
DEFAULT_FRAME_INTERVAL = 1 / 60


class SchedulingMode(Enum):
    """How a state change reaches the render-requested callback"""
    SYNC = auto()
    FRAME = auto()


class FrameClock(ABC):
    """Source of single-shot, cancellable frame callbacks"""

    @abstractmethod
    def request_frame(self, callback: Callable[[], Any]) -> Any:
        """Run callback on the next frame; returns a cancellation handle"""
        pass

    @abstractmethod
    def cancel_frame(self, handle: Any):
        """Cancel a frame callback that has not fired yet"""
        pass


class ManualFrameClock(FrameClock):
    """Frame clock advanced explicitly with tick()"""

    def __init__(self):
        self.callbacks: Dict[int, Callable[[], Any]] = {}
        self.frame = 0
        self._next_handle = 1

    def request_frame(self, callback: Callable[[], Any]) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self.callbacks[handle] = callback
        return handle

    def cancel_frame(self, handle: int):
        self.callbacks.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self.callbacks)

    def tick(self) -> int:
        """Advance one frame and fire the callbacks that were due.

        Callbacks requested while the frame runs wait for the next tick.
        Returns the number of callbacks fired.
        """
        self.frame += 1
        due = self.callbacks
        self.callbacks = {}

        for callback in due.values():
            callback()

        return len(due)


class AsyncioFrameClock(FrameClock):
    """Frame clock backed by an asyncio event loop timer"""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None,
                 interval: float = DEFAULT_FRAME_INTERVAL):
        self.loop = loop
        self.interval = interval

    def request_frame(self, callback: Callable[[], Any]) -> asyncio.TimerHandle:
        loop = self.loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as e:
                raise SchedulerError("AsyncioFrameClock needs a running event loop") from e

        if loop.is_closed():
            raise SchedulerError("Cannot request a frame on a closed event loop")

        return loop.call_later(self.interval, callback)

    def cancel_frame(self, handle: asyncio.TimerHandle):
        handle.cancel()


class Scheduler(ABC):
    """Delivers render requests"""

    @abstractmethod
    def schedule(self, callback: Callable[[], Any]):
        pass

    def cancel(self):
        """Drop a pending request, if any"""
        pass

    def flush(self) -> bool:
        """Run a pending request now; returns whether one ran"""
        return False

    @property
    def pending(self) -> bool:
        return False


class SyncScheduler(Scheduler):
    """Runs every request immediately"""

    def schedule(self, callback: Callable[[], Any]):
        callback()


class FrameScheduler(Scheduler):
    """Coalesces requests into one callback on the next frame"""

    def __init__(self, clock: Optional[FrameClock] = None):
        self.clock = clock or ManualFrameClock()
        self._handle: Any = None
        self._callback: Optional[Callable[[], Any]] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, callback: Callable[[], Any]):
        if self._handle is not None:
            self.clock.cancel_frame(self._handle)
            logger.debug("Cancelled pending frame in favour of a newer request")

        self._callback = callback
        self._handle = self.clock.request_frame(self._fire)
        logger.debug("Frame requested")

    def cancel(self):
        if self._handle is not None:
            self.clock.cancel_frame(self._handle)
        self._handle = None
        self._callback = None

    def flush(self) -> bool:
        if self._handle is None:
            return False

        self.clock.cancel_frame(self._handle)
        self._fire()
        return True

    def _fire(self):
        callback = self._callback
        self._handle = None
        self._callback = None

        if callback is not None:
            logger.debug("Frame fired")
            callback()


def create_scheduler(mode: SchedulingMode, clock: Optional[FrameClock] = None) -> Scheduler:
    """Create the scheduler for a scheduling mode"""
    if mode == SchedulingMode.SYNC:
        return SyncScheduler()
    elif mode == SchedulingMode.FRAME:
        return FrameScheduler(clock)
    else:
        raise ValueError(f"Unknown scheduling mode: {mode}")
