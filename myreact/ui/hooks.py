"""
Hook Runtime for MyReact

Per-root storage for state and memo cells, addressed by call order. The
n-th use_state/use_memo call of a render pass reads the same slot as the
n-th call of the previous pass, so component functions must call hooks the
same number of times and in the same order on every pass. Extra calls on a
later pass silently append new slots; nothing here defends against a
changing hook order.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..core.equality import EqualityMode, get_comparator
from ..effects.scheduler import Scheduler, SyncScheduler

logger = logging.getLogger(__name__)


@dataclass
class MemoCell:
    """Cached memo value and the deps it was computed with"""
    value: Any
    deps: Any


class HookRuntime:
    """Call-order indexed state and memo cells of one root"""

    def __init__(self,
                 on_render_requested: Callable[[], Any],
                 equality: EqualityMode = EqualityMode.SHALLOW,
                 scheduler: Optional[Scheduler] = None):
        self.on_render_requested = on_render_requested
        self.equality = equality
        self.equals = get_comparator(equality)
        self.scheduler = scheduler or SyncScheduler()

        self.states: List[Any] = []
        self.state_index = 0

        self.memos: List[Optional[MemoCell]] = []
        self.memo_index = 0

        # Bumped by clear(); setters from an older generation do nothing
        self.generation = 0

    def use_state(self, initial: Any) -> Tuple[Any, Callable[[Any], None]]:
        """Return the state of the current slot and its setter.

        The slot is initialised with ``initial`` only the first time it is
        reached. The setter accepts a value or an updater called with the
        current value; it requests a render only when the new value differs
        under the configured equality.
        """
        index = self.state_index
        generation = self.generation
        if index >= len(self.states):
            self.states.append(initial)

        def set_value(next_value: Any):
            if generation != self.generation:
                logger.debug("Ignoring setter of cleared state slot %d", index)
                return

            current = self.states[index]
            if callable(next_value):
                next_value = next_value(current)

            if self.equals(current, next_value):
                logger.debug("State slot %d unchanged, skipping render", index)
                return

            self.states[index] = next_value
            self.request_render()

        self.state_index += 1
        return self.states[index], set_value

    def use_memo(self, factory: Callable[[], Any], deps: Sequence[Any]) -> Any:
        """Return the cached value of the current slot, recomputing on deps change"""
        index = self.memo_index
        cell = self.memos[index] if index < len(self.memos) else None

        if cell is None or not self.equals(cell.deps, deps):
            cell = MemoCell(value=factory(), deps=deps)
            if index >= len(self.memos):
                self.memos.extend([None] * (index + 1 - len(self.memos)))
            self.memos[index] = cell

        self.memo_index += 1
        return cell.value

    def reset_call_indexes(self):
        """Rewind both cursors; called before every render pass"""
        self.state_index = 0
        self.memo_index = 0

    def clear(self):
        """Drop every state and memo slot"""
        self.states.clear()
        self.memos.clear()
        self.generation += 1
        self.reset_call_indexes()

    def request_render(self):
        self.scheduler.schedule(self.on_render_requested)

    def stats(self) -> Dict[str, int]:
        """Slot counts and cursor positions, for debugging"""
        return {
            'states': len(self.states),
            'memos': len(self.memos),
            'state_index': self.state_index,
            'memo_index': self.memo_index
        }
