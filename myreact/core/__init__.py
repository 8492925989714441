"""
MyReact core: equality, element model and explicit caches
"""

from .equality import (
    EqualityMode,
    same_value,
    shallow_equals,
    deep_equals,
    get_comparator
)
from .element import (
    TEXT_NODE,
    Element,
    ElementProps,
    EMPTY_PROPS,
    Node,
    make_element,
    h,
    text,
    is_text,
    node_type,
    dataset_attribute
)
from .cache import MemoCache, ValueInterner

__all__ = [
    'EqualityMode',
    'same_value',
    'shallow_equals',
    'deep_equals',
    'get_comparator',
    'TEXT_NODE',
    'Element',
    'ElementProps',
    'EMPTY_PROPS',
    'Node',
    'make_element',
    'h',
    'text',
    'is_text',
    'node_type',
    'dataset_attribute',
    'MemoCache',
    'ValueInterner'
]
