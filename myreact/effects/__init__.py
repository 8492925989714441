# DOM boundary and render scheduling for MyReact

from .dom_handler import DomDocument, MinidomDocument, DomEvent, DomMutation
from .scheduler import (
    SchedulingMode, Scheduler, SyncScheduler, FrameScheduler,
    FrameClock, ManualFrameClock, AsyncioFrameClock, create_scheduler
)

__all__ = [
    'DomDocument', 'MinidomDocument', 'DomEvent', 'DomMutation',
    'SchedulingMode', 'Scheduler', 'SyncScheduler', 'FrameScheduler',
    'FrameClock', 'ManualFrameClock', 'AsyncioFrameClock', 'create_scheduler'
]
