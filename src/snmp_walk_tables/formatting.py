"""Plain-text and HTML rendering of extracted walk tables.

Both renderers write to an explicit text sink (sys.stdout, io.StringIO, an open
file), skip tables with an empty name, and use Table.columns for column order
and row insertion order for row order.
"""

import logging
from collections.abc import Callable, Mapping
from html import escape
from typing import TextIO

from snmp_walk_tables.patterns import BANNER, COLUMN_GAP, DASH_CELL, HTML_STYLE, HTML_TITLE
from snmp_walk_tables.schema import Table

logger = logging.getLogger(__name__)


def _renderable(tables: Mapping[str, Table]) -> list[Table]:
    """Tables that have a non-empty name."""
    return [table for table in tables.values() if table.name]


# ─── Text Rendering ──────────────────────────────────────────────────────────


def column_widths(rows: list[list[str | None]]) -> list[int]:
    """Maximum cell length per column across all rows (None counts as empty)."""
    n_cols = max((len(row) for row in rows), default=0)
    widths = [0] * n_cols
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell or ""))
    return widths


def format_grid(rows: list[list[str | None]]) -> str:
    """Lay out rows as a fixed-width grid, one line per row.

    Each cell is left-justified to its column's width and cells are separated
    by a single space.
    """
    widths = column_widths(rows)
    lines = []
    for row in rows:
        cells = [(cell or "").ljust(widths[i]) for i, cell in enumerate(row)]
        lines.append(COLUMN_GAP.join(cells))
    return "\n".join(lines)


def format_text_table(table: Table) -> str:
    """Render one table as a name banner followed by its fixed-width grid."""
    rows: list[list[str | None]] = [list(table.columns), [DASH_CELL] * len(table.columns)]
    rows.extend(table.row_values(row_key) for row_key in table.rows)
    return "\n".join([BANNER, table.name, BANNER, format_grid(rows)])


def render_text(tables: Mapping[str, Table], sink: TextIO) -> None:
    """Write every named table as fixed-width text, each followed by a blank line."""
    for table in _renderable(tables):
        sink.write(format_text_table(table))
        sink.write("\n\n")


# ─── HTML Rendering ──────────────────────────────────────────────────────────


def _html_row(cells: list[str], tag: str) -> str:
    return "<tr>" + "".join(f"<{tag}>{escape(cell, quote=False)}</{tag}>" for cell in cells) + "</tr>"


def format_html_table(table: Table) -> str:
    """Render one table as a heading, a rule, and an HTML <table>."""
    lines = [f"<h2>{escape(table.name, quote=False)}</h2>", "<hr>", "<table>"]
    lines.append(_html_row(table.columns, "th"))
    lines.extend(_html_row(table.row_values(row_key), "td") for row_key in table.rows)
    lines.append("</table>")
    return "\n".join(lines)


def render_html(tables: Mapping[str, Table], sink: TextIO) -> None:
    """Write a complete HTML document containing every named table."""
    sink.write(f"<html><head><title>{HTML_TITLE}</title>\n{HTML_STYLE}\n</head><body>\n")
    for table in _renderable(tables):
        sink.write(format_html_table(table))
        sink.write("\n")
    sink.write("</body></html>\n")


# ─── Dispatch ────────────────────────────────────────────────────────────────

RENDERERS: dict[str, Callable[[Mapping[str, Table], TextIO], None]] = {
    "text": render_text,
    "html": render_html,
}


def render(tables: Mapping[str, Table], output_format: str, sink: TextIO) -> None:
    """Render tables in the given output format ('text' or 'html') to sink."""
    renderer = RENDERERS.get(output_format)
    if renderer is None:
        raise ValueError(f"Unknown output format: {output_format!r} (expected one of {', '.join(RENDERERS)})")
    logger.info("Rendering %d tables as %s", len(_renderable(tables)), output_format)
    renderer(tables, sink)
