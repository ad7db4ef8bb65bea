"""OID prefix tree (trie) built from dotted walk keys.

Each key is split on "." and inserted below a sentinel root, sharing nodes
with every previously inserted key that has the same prefix:

    ROOT
      └─ ifTable
           └─ ifEntry
                ├─ ifDescr ─┬─ 1
                │           └─ 2
                └─ ifSpeed ─┬─ 1
                            └─ 2

Children are kept in insertion order so that downstream table, column and row
ordering follows the order of the walk file.
"""

import logging
from collections.abc import Iterator, Mapping

from snmp_walk_tables.patterns import KEY_SEPARATOR, ROOT_LABEL

logger = logging.getLogger(__name__)


class Node:
    """A trie node.  Two nodes are equal when they share a label and a parent node."""

    __slots__ = ("label", "children", "parent")

    def __init__(self, label: str, parent: "Node | None" = None):
        self.label = label
        self.children: dict[str, Node] = {}
        self.parent = parent

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Node):
            return NotImplemented
        # Labels are unique within a parent, so parent identity stands in for the full chain
        return self.label == other.label and self.parent is other.parent

    def __hash__(self) -> int:
        return hash((self.label, id(self.parent)))

    def __repr__(self) -> str:
        return f"Node(label={self.label!r}, path={self.path()!r}, children={len(self.children)})"

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def child(self, label: str) -> "Node | None":
        """Return the child with this label, or None."""
        return self.children.get(label)

    def add_child(self, label: str) -> "Node":
        """Return the child with this label, creating it if it does not exist yet."""
        node = self.children.get(label)
        if node is None:
            node = Node(label, parent=self)
            self.children[label] = node
        return node

    def path(self) -> str:
        """Dot-joined labels from just below the root down to this node ('' for the root)."""
        labels: list[str] = []
        node = self
        while node.parent is not None:
            labels.append(node.label)
            node = node.parent
        return KEY_SEPARATOR.join(reversed(labels))


def insert_key(root: Node, key: str) -> Node:
    """Insert one dotted key below root and return its final node."""
    current = root
    for label in key.split(KEY_SEPARATOR):
        current = current.add_child(label)
    return current


def build_tree(key_values: Mapping[str, str]) -> Node:
    """Build the trie for every key in key_values and return its sentinel root."""
    root = Node(ROOT_LABEL)
    for key in key_values:
        insert_key(root, key)
    logger.info("Built trie with %d nodes from %d keys", count_nodes(root), len(key_values))
    return root


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield every descendant of root depth-first, in child insertion order."""
    stack = list(reversed(root.children.values()))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children.values()))


def iter_leaves(root: Node) -> Iterator[Node]:
    """Yield every childless descendant of root depth-first, in child insertion order."""
    return (node for node in iter_nodes(root) if node.is_leaf)


def count_nodes(root: Node) -> int:
    """Number of nodes below root (the root itself is not counted)."""
    return sum(1 for _ in iter_nodes(root))
