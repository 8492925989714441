"""
Tests for mounting and patching element trees
"""

import unittest
from xml.dom import Node as DomNode

from myreact.core.element import h
from myreact.effects.dom_handler import DomMutation, MinidomDocument
from myreact.ui.reconciler import (
    ChildDiffStrategy, PositionalDiffStrategy, Reconciler, create_dom, render
)


def texts(parent):
    """Text content of each child element of a DOM node"""
    return [child.firstChild.data if child.firstChild else "" for child in parent.childNodes]


def items(*labels):
    return h("ul", None, *[h("li", None, label) for label in labels])


class ReconcilerTestCase(unittest.TestCase):

    def setUp(self):
        self.document = MinidomDocument(record_mutations=True)
        self.container = self.document.create_container()
        self.reconciler = Reconciler(self.document)

    def mount(self, element):
        self.reconciler.render(self.container, element, None)
        self.document.clear_mutations()
        return self.container.childNodes[0]


class TestMount(ReconcilerTestCase):
    """Test first-time DOM construction"""

    def test_mount_element_with_text(self):
        """div with id and text mounts as one element with one text child"""
        self.reconciler.render(self.container, h("div", {"id": "x"}, "hello"), None)

        self.assertEqual(len(self.container.childNodes), 1)
        div = self.container.childNodes[0]
        self.assertEqual(div.tagName, "div")
        self.assertEqual(div.getAttribute("id"), "x")
        self.assertEqual(len(div.childNodes), 1)
        self.assertEqual(div.childNodes[0].nodeType, DomNode.TEXT_NODE)
        self.assertEqual(div.childNodes[0].data, "hello")

    def test_create_dom_text(self):
        """Text mounts as a bare text node"""
        node = self.reconciler.create_dom("plain")
        self.assertEqual(node.nodeType, DomNode.TEXT_NODE)
        self.assertEqual(node.data, "plain")

    def test_create_dom_nested(self):
        """Children mount recursively and in order"""
        node = self.reconciler.create_dom(
            h("section", {"dataset": {"pageId": "3"}},
              h("h1", None, "Title"),
              h("p", None, "Body"))
        )
        self.assertEqual(
            self.document.to_markup(node),
            '<section data-page-id="3"><h1>Title</h1><p>Body</p></section>'
        )

    def test_events_are_not_attributes(self):
        """Event handlers are registered, never written as attributes"""
        clicks = []
        node = self.reconciler.create_dom(h("button", {"onClick": clicks.append}, "go"))

        self.assertFalse(node.hasAttribute("onClick"))
        self.assertTrue(self.document.dispatch_event(node, "click", "payload"))
        self.assertEqual(clicks[0].detail, "payload")

    def test_module_functions(self):
        """create_dom and render work without an explicit reconciler"""
        node = create_dom(self.document, h("i", None, "x"))
        self.assertEqual(self.document.to_markup(node), "<i>x</i>")

        render(self.document, self.container, h("b", None, "y"), None)
        self.assertEqual(self.document.to_markup(self.container), "<div><b>y</b></div>")


class TestPatchAttributes(ReconcilerTestCase):
    """Test attribute diffing"""

    def test_add_attribute(self):
        """Only the new attribute is written"""
        old = h("div", {"a": "1"})
        div = self.mount(old)
        self.reconciler.render(self.container, h("div", {"a": "1", "b": "2"}), old)

        self.assertIs(self.container.childNodes[0], div)
        self.assertEqual(div.getAttribute("a"), "1")
        self.assertEqual(div.getAttribute("b"), "2")
        self.assertEqual(self.document.mutations, [
            DomMutation(type="set-attribute", target="div", data={"name": "b", "value": "2"})
        ])

    def test_remove_attribute(self):
        """Attributes missing from the new props are removed"""
        old = h("div", {"a": "1", "b": "2"})
        div = self.mount(old)
        self.reconciler.render(self.container, h("div", {"a": "1"}), old)

        self.assertEqual(div.getAttribute("a"), "1")
        self.assertFalse(div.hasAttribute("b"))

    def test_change_attribute(self):
        """Changed values are overwritten"""
        old = h("div", {"class": "off"})
        div = self.mount(old)
        self.reconciler.render(self.container, h("div", {"class": "on"}), old)
        self.assertEqual(div.getAttribute("class"), "on")

    def test_dataset_changes(self):
        """Dataset entries are diffed as data-* attributes"""
        old = h("div", {"dataset": {"userId": "1", "role": "admin"}})
        div = self.mount(old)
        self.reconciler.render(self.container, h("div", {"dataset": {"userId": "2"}}), old)

        self.assertEqual(div.getAttribute("data-user-id"), "2")
        self.assertFalse(div.hasAttribute("data-role"))

    def test_event_rebinding(self):
        """New handlers replace old ones and dropped handlers are unbound"""
        calls = []
        old = h("button", {"onClick": lambda e: calls.append("old")})
        button = self.mount(old)

        new = h("button", {"onClick": lambda e: calls.append("new")})
        self.reconciler.render(self.container, new, old)
        self.document.dispatch_event(button, "click")
        self.assertEqual(calls, ["new"])

        self.reconciler.render(self.container, h("button"), new)
        self.assertFalse(self.document.dispatch_event(button, "click"))

    def test_unchanged_tree_does_nothing(self):
        """Patching an identical tree touches no DOM node"""
        old = h("div", {"id": "x"}, "same", h("span", None, "child"))
        self.mount(old)
        self.reconciler.render(self.container, h("div", {"id": "x"}, "same", h("span", None, "child")), old)
        self.assertEqual(self.document.mutations, [])


class TestPatchNodes(ReconcilerTestCase):
    """Test node level patch rules"""

    def test_type_change_replaces(self):
        """A new type replaces the node instead of mutating it"""
        old = h("div", {"id": "a"}, "text")
        div = self.mount(old)
        self.reconciler.render(self.container, h("span", {"id": "a"}, "text"), old)

        span = self.container.childNodes[0]
        self.assertIsNot(span, div)
        self.assertEqual(span.tagName, "span")
        self.assertEqual(len(self.container.childNodes), 1)
        self.assertEqual(self.document.mutations[-1].type, "replace")

    def test_text_updated_in_place(self):
        """Changed text overwrites the existing text node"""
        old = h("p", None, "before")
        p = self.mount(old)
        text_node = p.childNodes[0]
        self.reconciler.render(self.container, h("p", None, "after"), old)

        self.assertIs(p.childNodes[0], text_node)
        self.assertEqual(text_node.data, "after")

    def test_text_to_element(self):
        """Text replaced by an element is a type change"""
        old = h("p", None, "plain")
        p = self.mount(old)
        self.reconciler.render(self.container, h("p", None, h("em", None, "plain")), old)
        self.assertEqual(self.document.to_markup(p), "<p><em>plain</em></p>")

    def test_remove_child_at_index(self):
        """Removing index i removes exactly that child"""
        old = items("a", "b", "c")
        ul = self.mount(old)
        self.reconciler.render(ul, None, old.children[1], 1)
        self.assertEqual(texts(ul), ["a", "c"])

    def test_append_children(self):
        """Longer child lists append the new children"""
        old = items("a")
        ul = self.mount(old)
        self.reconciler.render(self.container, items("a", "b", "c"), old)
        self.assertEqual(texts(ul), ["a", "b", "c"])

    def test_shrink_children(self):
        """Several trailing children can be removed in one pass"""
        old = items("a", "b", "c", "d")
        ul = self.mount(old)
        self.reconciler.render(self.container, items("a"), old)
        self.assertEqual(texts(ul), ["a"])

    def test_positional_matching(self):
        """Children are matched by position, not identity"""
        old = items("a", "b", "c")
        ul = self.mount(old)
        first = ul.childNodes[0]
        self.reconciler.render(self.container, items("b", "c"), old)

        # "a" is rewritten to "b" rather than removed
        self.assertIs(ul.childNodes[0], first)
        self.assertEqual(texts(ul), ["b", "c"])

    def test_remove_root(self):
        """A missing new tree removes the mounted node"""
        old = h("div")
        self.mount(old)
        self.reconciler.render(self.container, None, old)
        self.assertEqual(len(self.container.childNodes), 0)

    def test_both_absent(self):
        """Nothing to do when both trees are absent"""
        self.reconciler.render(self.container, None, None)
        self.assertEqual(len(self.container.childNodes), 0)

    def test_out_of_range_index(self):
        """Bad indexes fail at the DOM boundary"""
        with self.assertRaises(IndexError):
            self.reconciler.render(self.container, None, h("div"), 3)


class RecordingStrategy(ChildDiffStrategy):
    """Positional strategy that records each child position it visits"""

    def __init__(self):
        self.visits = []
        self.positional = PositionalDiffStrategy()

    def reconcile_children(self, parent, new_children, old_children, patch):
        def recording_patch(parent, new, old, index):
            self.visits.append(index)
            patch(parent, new, old, index)

        self.positional.reconcile_children(parent, new_children, old_children, recording_patch)


class TestChildStrategy(unittest.TestCase):
    """Test substituting the child diff strategy"""

    def test_custom_strategy(self):
        """The reconciler routes child diffs through its strategy"""
        document = MinidomDocument()
        container = document.create_container()
        strategy = RecordingStrategy()
        reconciler = Reconciler(document, strategy)

        old = items("a", "b", "c")
        reconciler.render(container, old, None)
        reconciler.render(container, items("x"), old)

        # ul position 0, its text child, then removals from the end
        self.assertEqual(strategy.visits, [0, 0, 2, 1])
        self.assertEqual(texts(container.childNodes[0]), ["x"])


if __name__ == '__main__':
    unittest.main()
