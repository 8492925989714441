"""
DOM Boundary for MyReact

The reconciler never touches a concrete DOM directly. It talks to a
DomDocument adapter that exposes the handful of operations it needs
(create nodes, set/remove attributes, append/replace/remove children, read
child nodes) plus an event-listener registry for element event handlers.

MinidomDocument implements the adapter over xml.dom.minidom so that trees
can be mounted, patched and inspected without a browser.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence
from xml.dom import minidom

logger = logging.getLogger(__name__)


@dataclass
class DomMutation:
    """Record of one DOM update operation"""
    type: str  # 'create', 'set-attribute', 'remove-attribute', 'append', 'replace', 'remove', 'text'
    target: Optional[str] = None  # nodeName of the affected node
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class DomEvent:
    """Event passed to element event handlers"""
    type: str
    target: Any
    detail: Any = None


class DomDocument(ABC):
    """Adapter between the reconciler and a DOM implementation"""

    def __init__(self, record_mutations: bool = False):
        self.record_mutations = record_mutations
        self.mutations: List[DomMutation] = []

        # Event listeners, keyed "<node id>:<event type>"
        self.event_listeners: Dict[str, Callable] = {}
        self.listener_nodes: Dict[int, Any] = {}

    # Node operations

    @abstractmethod
    def create_element(self, tag: str) -> Any:
        """Create a detached element node"""
        pass

    @abstractmethod
    def create_text_node(self, data: str) -> Any:
        """Create a detached text node"""
        pass

    @abstractmethod
    def set_attribute(self, node: Any, name: str, value: str):
        pass

    @abstractmethod
    def remove_attribute(self, node: Any, name: str):
        pass

    @abstractmethod
    def append_child(self, parent: Any, child: Any):
        pass

    @abstractmethod
    def replace_child(self, parent: Any, new_child: Any, old_child: Any):
        pass

    @abstractmethod
    def remove_child(self, parent: Any, child: Any):
        pass

    @abstractmethod
    def child_nodes(self, node: Any) -> Sequence[Any]:
        """Live, indexable list of a node's children"""
        pass

    @abstractmethod
    def set_text(self, node: Any, data: str):
        """Overwrite the data of a text node in place"""
        pass

    @abstractmethod
    def node_name(self, node: Any) -> str:
        pass

    # Event listeners

    def add_listener(self, node: Any, event_type: str, handler: Callable):
        """Bind the handler for an event type, replacing any previous one"""
        key = f"{id(node)}:{event_type}"
        self.event_listeners[key] = handler
        self.listener_nodes[id(node)] = node

    def remove_listener(self, node: Any, event_type: str):
        """Unbind the handler for an event type"""
        self.event_listeners.pop(f"{id(node)}:{event_type}", None)

    def get_listener(self, node: Any, event_type: str) -> Optional[Callable]:
        return self.event_listeners.get(f"{id(node)}:{event_type}")

    def dispatch_event(self, node: Any, event_type: str, detail: Any = None) -> bool:
        """Invoke the handler bound to node for event_type.

        Returns False when no handler is bound. Events do not bubble.
        """
        handler = self.get_listener(node, event_type)
        if handler is None:
            return False

        logger.debug("Dispatching %s to <%s>", event_type, self.node_name(node))
        handler(DomEvent(type=event_type, target=node, detail=detail))
        return True

    def release(self, node: Any):
        """Drop the listeners of a detached subtree"""
        for descendant in self._walk(node):
            if self.listener_nodes.pop(id(descendant), None) is None:
                continue
            prefix = f"{id(descendant)}:"
            for key in [k for k in self.event_listeners if k.startswith(prefix)]:
                del self.event_listeners[key]

    def _walk(self, node: Any):
        yield node
        for child in self.child_nodes(node):
            yield from self._walk(child)

    def _record(self, type: str, node: Any, **data):
        if self.record_mutations:
            self.mutations.append(DomMutation(type=type, target=self.node_name(node), data=data))

    def clear_mutations(self):
        self.mutations.clear()


class MinidomDocument(DomDocument):
    """DomDocument backed by xml.dom.minidom"""

    def __init__(self, record_mutations: bool = False):
        super().__init__(record_mutations)
        self.document = minidom.Document()

    def create_container(self, tag: str = 'div') -> Any:
        """Create a detached root container to render into"""
        return self.document.createElement(tag)

    def create_element(self, tag: str) -> Any:
        node = self.document.createElement(tag)
        self._record('create', node)
        return node

    def create_text_node(self, data: str) -> Any:
        node = self.document.createTextNode(data)
        self._record('create', node, text=data)
        return node

    def set_attribute(self, node: Any, name: str, value: str):
        node.setAttribute(name, value)
        self._record('set-attribute', node, name=name, value=value)

    def remove_attribute(self, node: Any, name: str):
        node.removeAttribute(name)
        self._record('remove-attribute', node, name=name)

    def append_child(self, parent: Any, child: Any):
        parent.appendChild(child)
        self._record('append', parent, child=self.node_name(child))

    def replace_child(self, parent: Any, new_child: Any, old_child: Any):
        parent.replaceChild(new_child, old_child)
        self.release(old_child)
        self._record('replace', parent, old=self.node_name(old_child), new=self.node_name(new_child))

    def remove_child(self, parent: Any, child: Any):
        parent.removeChild(child)
        self.release(child)
        self._record('remove', parent, child=self.node_name(child))

    def child_nodes(self, node: Any) -> Sequence[Any]:
        return node.childNodes

    def set_text(self, node: Any, data: str):
        node.data = data
        self._record('text', node, text=data)

    def node_name(self, node: Any) -> str:
        return node.nodeName

    def to_markup(self, node: Any) -> str:
        """Serialize a node and its subtree"""
        return node.toxml()
