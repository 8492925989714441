"""
MyReact Error Diagnostics

Structured diagnostic records attached to MyReact exceptions. A diagnostic
carries a stable error code, a message and an optional suggestion so that
tooling can report misuse of the element model or the render loop without
parsing exception strings.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Any
from enum import Enum


class ErrorSeverity(Enum):
    """Severity levels for diagnostic messages"""
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Diagnostic:
    """A diagnostic message with context"""
    severity: ErrorSeverity
    code: str  # Error code like "E101"
    message: str
    suggestion: Optional[str] = None
    notes: List[str] = field(default_factory=list)

    def format(self) -> str:
        """Render the diagnostic as a single human readable block"""
        lines = [f"{self.severity.value}[{self.code}]: {self.message}"]
        for note in self.notes:
            lines.append(f"  = note: {note}")
        if self.suggestion:
            lines.append(f"  = help: {self.suggestion}")
        return "\n".join(lines)


# Helper functions for common errors

def invalid_child_error(child: Any) -> Diagnostic:
    """Create diagnostic for a child that is neither an element nor text"""
    notes = []
    suggestion = None
    if isinstance(child, (list, tuple)):
        notes.append("children are stored as given and are never flattened")
        suggestion = "pass each child as a separate argument, e.g. h('ul', None, *items)"
    elif child is None or isinstance(child, bool):
        suggestion = "filter out empty children before building the element"

    return Diagnostic(
        severity=ErrorSeverity.ERROR,
        code="E101",
        message=f"Invalid child of type {type(child).__name__}: {child!r}",
        suggestion=suggestion,
        notes=notes
    )


def invalid_prop_error(name: str, value: Any) -> Diagnostic:
    """Create diagnostic for an attribute value that is not a string"""
    return Diagnostic(
        severity=ErrorSeverity.ERROR,
        code="E102",
        message=f"Attribute '{name}' must be a string, found {type(value).__name__}",
        suggestion="convert the value with str() or move it to the dataset or events mapping"
    )


def render_loop_error(passes: int) -> Diagnostic:
    """Create diagnostic for a component that keeps requesting renders"""
    return Diagnostic(
        severity=ErrorSeverity.ERROR,
        code="E201",
        message=f"Render requested from inside a render pass {passes} times in a row",
        suggestion="only call state setters from event handlers, not while rendering",
        notes=["the root stops after RenderOptions.max_nested_renders follow-up passes"]
    )
