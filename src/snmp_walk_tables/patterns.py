"""Constants shared by the walk parser, trie and renderers.

Everything here is plain string data; the modules that use it are parser.py
(separators), tree.py (sentinel label) and formatting.py (banner, dash cell,
HTML title and stylesheet).
"""

# ─── Walk Line Syntax ─────────────────────────────────────────────────────────

# MIB-qualified names such as "IF-MIB::ifDescr.1" become "IF-MIB.ifDescr.1"
OID_SEPARATOR = "::"

# Separator between path segments once "::" has been normalised
KEY_SEPARATOR = "."

# A new entry has exactly one of these; anything else is a continuation
ASSIGNMENT = "="

# Joins a continuation line onto the value it extends
CONTINUATION_JOINER = " "


# ─── Trie ─────────────────────────────────────────────────────────────────────

# Label of the sentinel root node (never part of a reconstructed path)
ROOT_LABEL = "ROOT"


# ─── Text Rendering ───────────────────────────────────────────────────────────

# Delimiter printed above and below each table name
BANNER = "=" * 81

# Separator-row cell placed under every column header
DASH_CELL = "-" * 17

# Space between adjacent columns
COLUMN_GAP = " "


# ─── HTML Rendering ───────────────────────────────────────────────────────────

HTML_TITLE = "SNMP Walk to Tables"

# Decorative only; nothing downstream depends on its content
HTML_STYLE = """\
<style>
body { background: #fafafa; color: #444; font: 100%/30px 'Helvetica Neue', helvetica, arial, sans-serif; text-shadow: 0 1px 0 #fff; }
table { background: #f5f5f5; border-collapse: separate; box-shadow: inset 0 1px 0 #fff; font-size: 12px; line-height: 24px; text-align: left; width: 800px; }
th { background: linear-gradient(#777, #444); border-left: 1px solid #555; border-right: 1px solid #777; border-top: 1px solid #555; border-bottom: 1px solid #333; box-shadow: inset 0 1px 0 #999; color: #fff; font-weight: bold; padding: 10px 15px; position: relative; text-shadow: 0 1px 0 #000; }
th:first-child { border-left: 1px solid #777; box-shadow: inset 1px 1px 0 #999; }
th:last-child { box-shadow: inset -1px 1px 0 #999; }
td { border-right: 1px solid #fff; border-left: 1px solid #e8e8e8; border-top: 1px solid #fff; border-bottom: 1px solid #e8e8e8; padding: 10px 15px; position: relative; }
td:last-child { border-right: 1px solid #e8e8e8; box-shadow: inset -1px 0 0 #fff; }
tr:nth-child(odd) td { background: #f1f1f1; }
tr:last-of-type td { box-shadow: inset 0 -1px 0 #fff; }
</style>"""
