"""Table extraction from the OID trie.

Every leaf is read as a table cell:

    leaf                 -> row key       (e.g. "1")
    leaf.parent          -> column        (e.g. "ifDescr")
    leaf.parent.parent   -> table         (e.g. "ifTable.ifEntry", its full path)

Leaves too close to the root to have a table node (keys with fewer than three
segments) are skipped rather than treated as errors.
"""

import logging
from collections.abc import Mapping

from snmp_walk_tables.schema import Table
from snmp_walk_tables.tree import Node, build_tree, iter_leaves

logger = logging.getLogger(__name__)


def is_tabular(leaf: Node) -> bool:
    """Return True if the leaf has a parent and a grandparent below the root sentinel."""
    parent = leaf.parent
    if parent is None or parent.is_root:
        return False
    grandparent = parent.parent
    return grandparent is not None and not grandparent.is_root


def find_table_nodes(root: Node) -> list[Node]:
    """Return the distinct grandparents of tabular leaves, in first-seen leaf order."""
    table_nodes: dict[Node, None] = {}
    skipped = 0
    for leaf in iter_leaves(root):
        if not is_tabular(leaf):
            logger.debug("Skipping non-tabular leaf %r", leaf.path())
            skipped += 1
            continue
        table_nodes.setdefault(leaf.parent.parent, None)
    if skipped:
        logger.info("Skipped %d leaves with fewer than three path segments", skipped)
    return list(table_nodes)


def build_table(table_node: Node, key_values: Mapping[str, str]) -> Table:
    """Build one Table from a table node's columns (children) and rows (grandchildren)."""
    table = Table(name=table_node.path())
    for column in table_node.children.values():
        table.add_column(column.label)
        for row in column.children.values():
            # Re-lookup by full path; a miss becomes an empty cell
            value = key_values.get(row.path())
            if value is None:
                logger.debug("No value for %r in table %r", row.path(), table.name)
            table.set_cell(row.label, column.label, value)
    return table


def extract_tables(key_values: Mapping[str, str], root: Node | None = None) -> dict[str, Table]:
    """Extract every table from the walk, keyed by table name in first-seen order.

    If root is omitted the trie is built from key_values.  The function does not
    mutate its inputs, so repeated calls give equal results.
    """
    if root is None:
        root = build_tree(key_values)

    tables: dict[str, Table] = {}
    for table_node in find_table_nodes(root):
        table = build_table(table_node, key_values)
        tables[table.name] = table

    logger.info("Extracted %d tables", len(tables))
    return tables
