"""
Root Driver for MyReact

A Root owns everything one mounted component tree needs: the container DOM
node, the hook storage, the scheduler and the snapshot of the previously
rendered element tree. Every render pass rewinds the hook cursors, calls
the component function with the root's HookRuntime, patches the container
against the previous tree and keeps the new tree as the snapshot.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Optional, Sequence, Tuple

from ..core.element import Node
from ..core.equality import EqualityMode
from ..effects.dom_handler import DomDocument, MinidomDocument
from ..effects.scheduler import FrameClock, SchedulingMode, create_scheduler
from ..errors import RenderLoopError
from .hooks import HookRuntime
from .reconciler import ChildDiffStrategy, Reconciler

logger = logging.getLogger(__name__)


Component = Callable[[HookRuntime], Optional[Node]]


class RootState(Enum):
    """Render state of a root"""
    IDLE = auto()
    RENDERING = auto()


@dataclass
class RenderOptions:
    """Options for a root"""
    scheduling: SchedulingMode = SchedulingMode.SYNC
    equality: EqualityMode = EqualityMode.SHALLOW
    diff_strategy: Optional[ChildDiffStrategy] = None  # positional when None
    frame_clock: Optional[FrameClock] = None  # ManualFrameClock when None
    max_nested_renders: int = 25


class Root:
    """Renders one component function into one container"""

    def __init__(self, container: Any = None, document: Optional[DomDocument] = None,
                 options: Optional[RenderOptions] = None):
        self.document = document or MinidomDocument()
        if container is None:
            if not isinstance(self.document, MinidomDocument):
                raise ValueError("A container is required for custom DOM documents")
            container = self.document.create_container()
        self.container = container
        self.options = options or RenderOptions()

        self.reconciler = Reconciler(self.document, self.options.diff_strategy)
        self.scheduler = create_scheduler(self.options.scheduling, self.options.frame_clock)
        self.hooks = HookRuntime(self.request_render, self.options.equality, self.scheduler)

        # Rendered tree snapshot
        self.component: Optional[Component] = None
        self.old_tree: Optional[Node] = None

        self.state = RootState.IDLE
        self.render_count = 0
        self._rerender_requested = False

    def render(self, component: Component):
        """Mount component, or patch the current tree with its output"""
        self.component = component
        self.scheduler.cancel()
        self.request_render()

    def request_render(self):
        """Run a render pass now, or right after the pass in progress"""
        if self.component is None:
            return

        if self.state is RootState.RENDERING:
            logger.debug("Render requested during pass %d, deferring", self.render_count)
            self._rerender_requested = True
            return

        follow_ups = 0
        while True:
            self._rerender_requested = False
            self._run_pass()

            if not self._rerender_requested:
                break

            follow_ups += 1
            if follow_ups > self.options.max_nested_renders:
                logger.error("Aborting after %d nested render requests", follow_ups)
                raise RenderLoopError(follow_ups)

    def _run_pass(self):
        self.state = RootState.RENDERING
        self.render_count += 1
        logger.debug("Render pass %d started", self.render_count)

        try:
            self.hooks.reset_call_indexes()
            new_tree = self.component(self.hooks)
            self.reconciler.render(self.container, new_tree, self.old_tree, 0)
            self.old_tree = new_tree
        finally:
            self.state = RootState.IDLE

        logger.debug("Render pass %d finished", self.render_count)

    def flush(self) -> bool:
        """Run a pending coalesced render now; returns whether one ran"""
        return self.scheduler.flush()

    def unmount(self):
        """Remove the rendered tree, its hook state and any pending render"""
        self.scheduler.cancel()
        if self.old_tree is not None:
            self.reconciler.render(self.container, None, self.old_tree, 0)
        self.old_tree = None
        self.component = None
        self.hooks.clear()

    # Hook shortcuts for components that close over the root

    def use_state(self, initial: Any) -> Tuple[Any, Callable[[Any], None]]:
        return self.hooks.use_state(initial)

    def use_memo(self, factory: Callable[[], Any], deps: Sequence[Any]) -> Any:
        return self.hooks.use_memo(factory, deps)


def create_root(container: Any = None, document: Optional[DomDocument] = None,
                **options) -> Root:
    """Create a root; keyword arguments become RenderOptions fields"""
    return Root(container, document, RenderOptions(**options))
