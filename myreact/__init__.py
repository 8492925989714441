"""
MyReact

A minimal retained-mode UI update cycle:
- Element model describing UI trees
- Hook runtime with call-order indexed state and memo cells
- Reconciler patching a DOM in place from element tree diffs
- Root driver with synchronous or frame-coalesced render scheduling
"""

from .core import (
    TEXT_NODE,
    Element,
    ElementProps,
    EqualityMode,
    MemoCache,
    ValueInterner,
    deep_equals,
    h,
    make_element,
    shallow_equals,
    text
)
from .effects import (
    AsyncioFrameClock,
    DomDocument,
    DomEvent,
    FrameScheduler,
    ManualFrameClock,
    MinidomDocument,
    SchedulingMode,
    SyncScheduler
)
from .errors import (
    MyReactError,
    ElementError,
    InvalidChildError,
    InvalidPropError,
    RenderError,
    RenderLoopError,
    SchedulerError
)
from .ui import (
    HookRuntime,
    PositionalDiffStrategy,
    Reconciler,
    RenderOptions,
    Root,
    RootState,
    create_dom,
    create_root,
    render
)

__version__ = "0.1.0"

__all__ = [
    # Element model
    'TEXT_NODE',
    'Element',
    'ElementProps',
    'make_element',
    'h',
    'text',

    # Equality and caches
    'EqualityMode',
    'shallow_equals',
    'deep_equals',
    'MemoCache',
    'ValueInterner',

    # DOM boundary and scheduling
    'DomDocument',
    'MinidomDocument',
    'DomEvent',
    'SchedulingMode',
    'SyncScheduler',
    'FrameScheduler',
    'ManualFrameClock',
    'AsyncioFrameClock',

    # Render cycle
    'HookRuntime',
    'Reconciler',
    'PositionalDiffStrategy',
    'RenderOptions',
    'Root',
    'RootState',
    'create_root',
    'create_dom',
    'render',

    # Errors
    'MyReactError',
    'ElementError',
    'InvalidChildError',
    'InvalidPropError',
    'RenderError',
    'RenderLoopError',
    'SchedulerError'
]
