"""
Element Model for MyReact

An element is an immutable, serializable description of one UI tree node.
Text nodes are plain strings. Element props are split into three typed
mappings: flat string attributes, a dataset rendered as ``data-*``
attributes, and event handlers that never reach the attribute list.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from ..errors import ElementError, InvalidChildError, InvalidPropError


# nodeName reported by the DOM for text nodes
TEXT_NODE = "#text"

_EVENT_KEY = re.compile(r"^on[A-Z]")
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _frozen(mapping: Optional[Mapping]) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class ElementProps:
    """Typed props of an element"""
    attributes: Mapping[str, str] = field(default_factory=dict)
    dataset: Mapping[str, str] = field(default_factory=dict)
    events: Mapping[str, Callable] = field(default_factory=dict)

    # Mappings are read-only views, not hashable values
    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, 'attributes', _frozen(self.attributes))
        object.__setattr__(self, 'dataset', _frozen(self.dataset))
        object.__setattr__(self, 'events', _frozen(self.events))

    @classmethod
    def from_mapping(cls, props: Mapping[str, Any]) -> 'ElementProps':
        """Split a flat JSX-style props mapping into typed groups.

        ``dataset`` must map to a mapping, ``onClick``-style keys must map to
        callables and every other key becomes a string attribute.
        """
        attributes: Dict[str, str] = {}
        dataset: Dict[str, str] = {}
        events: Dict[str, Callable] = {}

        for key, value in props.items():
            if key == 'dataset':
                if not isinstance(value, Mapping):
                    raise InvalidPropError(key, value)
                for data_key, data_value in value.items():
                    dataset[data_key] = _attribute_value(data_key, data_value)
            elif _EVENT_KEY.match(key):
                if not callable(value):
                    raise InvalidPropError(key, value)
                events[key[2:].lower()] = value
            else:
                attributes[key] = _attribute_value(key, value)

        return cls(attributes=attributes, dataset=dataset, events=events)

    def dom_attributes(self) -> Dict[str, str]:
        """Attributes as written to the DOM, dataset entries included"""
        merged = dict(self.attributes)
        for key, value in self.dataset.items():
            merged[dataset_attribute(key)] = value
        return merged

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'attributes': dict(self.attributes),
            'dataset': dict(self.dataset),
            'events': sorted(self.events)
        }


EMPTY_PROPS = ElementProps()


@dataclass(frozen=True)
class Element:
    """Virtual DOM element"""
    type: str
    props: ElementProps = field(default_factory=lambda: EMPTY_PROPS)
    children: Tuple['Node', ...] = ()

    __hash__ = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'type': self.type,
            'props': self.props.to_dict(),
            'children': [
                child.to_dict() if isinstance(child, Element) else child
                for child in self.children
            ]
        }


Node = Union[Element, str]


def make_element(type: str, props: Optional[Union[ElementProps, Mapping[str, Any]]] = None,
                 *children: Any) -> Element:
    """Create an element (similar to React.createElement)"""
    if not isinstance(type, str) or not type or type == TEXT_NODE:
        raise ElementError(f"Invalid element type: {type!r}")

    if props is None:
        element_props = EMPTY_PROPS
    elif isinstance(props, ElementProps):
        element_props = props
    elif isinstance(props, Mapping):
        element_props = ElementProps.from_mapping(props)
    else:
        raise ElementError(f"Props must be a mapping, found {props.__class__.__name__}")

    return Element(
        type=type,
        props=element_props,
        children=tuple(_child(c) for c in children)
    )


h = make_element


def text(content: Any) -> str:
    """Create a text node"""
    return str(content)


def is_text(node: Any) -> bool:
    return isinstance(node, str)


def node_type(node: Node) -> str:
    """Element type, or TEXT_NODE for text"""
    return TEXT_NODE if isinstance(node, str) else node.type


def dataset_attribute(key: str) -> str:
    """Map a dataset key to its attribute name (userId -> data-user-id)"""
    return "data-" + _CAMEL_BOUNDARY.sub("-", key).lower()


def _attribute_value(name: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    # bool is an int subclass but has no attribute spelling
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise InvalidPropError(name, value)


def _child(child: Any) -> Node:
    if isinstance(child, (Element, str)):
        return child
    if isinstance(child, (int, float)) and not isinstance(child, bool):
        return str(child)
    raise InvalidChildError(child)
