"""
MyReact Exception Classes

Custom exception classes with enhanced error information.
"""

from typing import Optional, Any
from .diagnostics import (
    Diagnostic,
    invalid_child_error,
    invalid_prop_error,
    render_loop_error
)


class MyReactError(Exception):
    """Base exception for MyReact errors"""

    def __init__(self, message: str, diagnostic: Optional[Diagnostic] = None):
        super().__init__(message)
        self.diagnostic = diagnostic


class ElementError(MyReactError):
    """Malformed element description"""
    pass


class InvalidChildError(ElementError):
    """Child that is neither an element nor text"""

    def __init__(self, child: Any):
        diagnostic = invalid_child_error(child)
        super().__init__(diagnostic.message, diagnostic)
        self.child = child


class InvalidPropError(ElementError):
    """Attribute value that cannot be written to the DOM"""

    def __init__(self, name: str, value: Any):
        diagnostic = invalid_prop_error(name, value)
        super().__init__(diagnostic.message, diagnostic)
        self.name = name
        self.value = value


class RenderError(MyReactError):
    """Render pass failure"""
    pass


class RenderLoopError(RenderError):
    """Render requested from inside render passes too many times"""

    def __init__(self, passes: int):
        diagnostic = render_loop_error(passes)
        super().__init__(diagnostic.message, diagnostic)
        self.passes = passes


class SchedulerError(MyReactError):
    """Frame scheduling error"""
    pass
