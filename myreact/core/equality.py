"""
Structural Equality for MyReact

Shallow and deep comparison used to decide whether a state slot or a memo
dependency list has changed. Scalars compare by value with same-value
semantics (NaN equals NaN, 0.0 differs from -0.0), containers compare by
structure, and every other object compares by identity.
"""

import math
from enum import Enum
from typing import Any, Callable, Dict


_SCALAR_TYPES = (type(None), bool, int, float, complex, str, bytes)
_SEQUENCE_TYPES = (list, tuple)


class EqualityMode(Enum):
    """Comparison used by hooks and caches"""
    SHALLOW = "shallow"
    DEEP = "deep"


def same_value(a: Any, b: Any) -> bool:
    """Identity comparison that treats equal scalars as the same value"""
    if a is b:
        return True

    if type(a) is not type(b) or not isinstance(a, _SCALAR_TYPES):
        return False

    if isinstance(a, float):
        if math.isnan(a) and math.isnan(b):
            return True
        if a == 0.0 and b == 0.0:
            return math.copysign(1.0, a) == math.copysign(1.0, b)

    return a == b


def shallow_equals(a: Any, b: Any) -> bool:
    """Compare one level deep: container members must be the same values"""
    return _compare(a, b, same_value)


def deep_equals(a: Any, b: Any) -> bool:
    """Compare recursively through nested lists, tuples and dicts"""
    return _compare(a, b, deep_equals)


def _compare(a: Any, b: Any, compare_member: Callable[[Any, Any], bool]) -> bool:
    if same_value(a, b):
        return True

    # Instances of different classes are never equal
    if type(a) is not type(b):
        return False

    if isinstance(a, _SEQUENCE_TYPES):
        if len(a) != len(b):
            return False
        for left, right in zip(a, b):
            if not compare_member(left, right):
                return False
        return True

    if isinstance(a, dict):
        # 1 and True hash alike but are different keys
        if _typed_keys(a) != _typed_keys(b):
            return False
        for key, value in a.items():
            if not compare_member(value, b[key]):
                return False
        return True

    return False


def _typed_keys(mapping: dict) -> set:
    return {(type(key), key) for key in mapping}


_COMPARATORS: Dict[EqualityMode, Callable[[Any, Any], bool]] = {
    EqualityMode.SHALLOW: shallow_equals,
    EqualityMode.DEEP: deep_equals,
}


def get_comparator(mode: EqualityMode) -> Callable[[Any, Any], bool]:
    """Get the comparison function for an equality mode"""
    return _COMPARATORS[mode]
