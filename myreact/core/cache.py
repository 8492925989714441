"""
MyReact Memo Caches

Explicit cache objects owned by whichever component or request scope needs
them. Nothing here keeps module-level state: create a cache, hand it to the
code that memoizes, and drop it with its owner.
"""

from typing import Any, Callable, Dict, Hashable, Optional, Sequence, Tuple

from .equality import EqualityMode, get_comparator


_EMPTY = object()


class MemoCache:
    """Dependency-checked memoization slots"""

    def __init__(self, equality: EqualityMode = EqualityMode.SHALLOW):
        self.equals = get_comparator(equality)
        self.slots: Dict[Hashable, Tuple[Any, Any]] = {}
        self.stats = {
            'hits': 0,
            'misses': 0
        }

    def memo(self, factory: Callable[[], Any], deps: Optional[Sequence[Any]] = None,
             key: Hashable = None) -> Any:
        """Return the cached value for ``key``, recomputing when deps change.

        Without deps the factory runs once and its result is kept until
        ``clear``. With deps the factory reruns whenever the new deps differ
        from the ones stored with the cached value.
        """
        value, old_deps = self.slots.get(key, (_EMPTY, None))

        if value is not _EMPTY and (deps is None or self.equals(old_deps, deps)):
            self.stats['hits'] += 1
            return value

        self.stats['misses'] += 1
        value = factory()
        self.slots[key] = (value, deps)
        return value

    def clear(self):
        """Clear the cache"""
        self.slots.clear()
        self.stats = {
            'hits': 0,
            'misses': 0
        }

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics"""
        total = self.stats['hits'] + self.stats['misses']
        hit_rate = self.stats['hits'] / total if total > 0 else 0

        return {
            **self.stats,
            'size': len(self.slots),
            'hit_rate': hit_rate
        }


class ValueInterner:
    """Identity map keyed by value: equal values share one instance"""

    def __init__(self):
        self.instances: Dict[Tuple[type, Hashable], Any] = {}

    def intern(self, value: Hashable, factory: Optional[Callable[[Any], Any]] = None) -> Any:
        """Get the instance for ``value``, creating it on first use.

        Values of different types never share a slot, so 1, 1.0 and True
        intern separately.
        """
        key = _slot_key(value)
        if key in self.instances:
            return self.instances[key]

        instance = factory(value) if factory else value
        self.instances[key] = instance
        return instance

    def __contains__(self, value: Hashable) -> bool:
        return _slot_key(value) in self.instances

    def __len__(self) -> int:
        return len(self.instances)

    def clear(self):
        self.instances.clear()


def _slot_key(value: Hashable) -> Tuple[type, Hashable]:
    return (type(value), value)
