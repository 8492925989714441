"""
MyReact Error Handling System
"""

from .diagnostics import (
    Diagnostic,
    ErrorSeverity,
    invalid_child_error,
    invalid_prop_error,
    render_loop_error
)
from .exceptions import (
    MyReactError,
    ElementError,
    InvalidChildError,
    InvalidPropError,
    RenderError,
    RenderLoopError,
    SchedulerError
)

__all__ = [
    'Diagnostic',
    'ErrorSeverity',
    'invalid_child_error',
    'invalid_prop_error',
    'render_loop_error',
    'MyReactError',
    'ElementError',
    'InvalidChildError',
    'InvalidPropError',
    'RenderError',
    'RenderLoopError',
    'SchedulerError'
]
