"""
Reconciler for MyReact

Mount turns an element tree into DOM nodes. Patch compares a new element
tree against the previous one and updates the existing DOM in place,
touching only what changed. Children are matched through a pluggable
ChildDiffStrategy; the default matches them by position (no keys), which
is linear per level but loses node identity when children are inserted or
removed in the middle of a list.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence

from ..core.element import ElementProps, Node, node_type
from ..effects.dom_handler import DomDocument


PatchFn = Callable[[Any, Optional[Node], Optional[Node], int], None]


class ChildDiffStrategy(ABC):
    """Decides which old child each new child is patched against"""

    @abstractmethod
    def reconcile_children(self, parent: Any, new_children: Sequence[Node],
                           old_children: Sequence[Node], patch: PatchFn):
        """Call patch(parent, new, old, index) for every child position"""
        pass


class PositionalDiffStrategy(ChildDiffStrategy):
    """Match children by index"""

    def reconcile_children(self, parent: Any, new_children: Sequence[Node],
                           old_children: Sequence[Node], patch: PatchFn):
        common = min(len(new_children), len(old_children))

        for i in range(common):
            patch(parent, new_children[i], old_children[i], i)

        # Appended children
        for i in range(common, len(new_children)):
            patch(parent, new_children[i], None, i)

        # Removed children, last first so pending indexes stay valid
        for i in reversed(range(len(new_children), len(old_children))):
            patch(parent, None, old_children[i], i)


class Reconciler:
    """Mounts and patches element trees through a DomDocument"""

    def __init__(self, document: DomDocument, strategy: Optional[ChildDiffStrategy] = None):
        self.document = document
        self.strategy = strategy or PositionalDiffStrategy()

    def create_dom(self, node: Node) -> Any:
        """Build real DOM nodes for an element tree"""
        if isinstance(node, str):
            return self.document.create_text_node(node)

        dom = self.document.create_element(node.type)

        for name, value in node.props.dom_attributes().items():
            self.document.set_attribute(dom, name, value)

        for event_type, handler in node.props.events.items():
            self.document.add_listener(dom, event_type, handler)

        for child in node.children:
            self.document.append_child(dom, self.create_dom(child))

        return dom

    def render(self, parent: Any, new_node: Optional[Node], old_node: Optional[Node],
               index: int = 0):
        """Patch parent's child at index from old_node to new_node"""
        # 1. Node removed
        if new_node is None:
            if old_node is not None:
                current = self.document.child_nodes(parent)[index]
                self.document.remove_child(parent, current)
            return

        # 2. Node added
        if old_node is None:
            self.document.append_child(parent, self.create_dom(new_node))
            return

        # 3. Text changed: overwrite in place
        if isinstance(new_node, str) and isinstance(old_node, str):
            if new_node != old_node:
                self.document.set_text(self.document.child_nodes(parent)[index], new_node)
            return

        # 4. Type changed: replace the node
        if node_type(new_node) != node_type(old_node):
            current = self.document.child_nodes(parent)[index]
            self.document.replace_child(parent, self.create_dom(new_node), current)
            return

        # 5. Same type: update props, then children
        current = self.document.child_nodes(parent)[index]
        self.update_props(current, new_node.props, old_node.props)
        self.strategy.reconcile_children(current, new_node.children, old_node.children, self.render)

    def update_props(self, target: Any, new_props: ElementProps, old_props: ElementProps):
        """Set changed attributes, remove stale ones and rebind event handlers"""
        new_attributes = new_props.dom_attributes()
        old_attributes = old_props.dom_attributes()

        for name, value in new_attributes.items():
            if old_attributes.get(name) != value:
                self.document.set_attribute(target, name, value)

        for name in old_attributes:
            if name not in new_attributes:
                self.document.remove_attribute(target, name)

        for event_type, handler in new_props.events.items():
            if old_props.events.get(event_type) is not handler:
                self.document.add_listener(target, event_type, handler)

        for event_type in old_props.events:
            if event_type not in new_props.events:
                self.document.remove_listener(target, event_type)


def create_dom(document: DomDocument, node: Node) -> Any:
    """Mount an element tree with the default reconciler"""
    return Reconciler(document).create_dom(node)


def render(document: DomDocument, parent: Any, new_node: Optional[Node],
           old_node: Optional[Node], index: int = 0):
    """Patch with the default (positional) reconciler"""
    Reconciler(document).render(parent, new_node, old_node, index)
