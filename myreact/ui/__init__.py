"""
MyReact UI Module

This module provides the render cycle:
- Hook runtime with call-order indexed state and memo cells
- Reconciler that mounts and patches element trees
- Root driver tying hooks, scheduling and reconciliation together
"""

from .hooks import HookRuntime, MemoCell
from .reconciler import (
    ChildDiffStrategy,
    PositionalDiffStrategy,
    Reconciler,
    create_dom,
    render
)
from .root import (
    Component,
    Root,
    RootState,
    RenderOptions,
    create_root
)

__all__ = [
    # Hooks
    'HookRuntime',
    'MemoCell',

    # Reconciliation
    'ChildDiffStrategy',
    'PositionalDiffStrategy',
    'Reconciler',
    'create_dom',
    'render',

    # Root driver
    'Component',
    'Root',
    'RootState',
    'RenderOptions',
    'create_root'
]
