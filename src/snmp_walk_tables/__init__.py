"""Convert a flat SNMP walk dump into tables.

Submodules:
  patterns    -- separators, sentinel label, banner and stylesheet constants
  errors      -- InputError and ParseError
  config      -- .env-driven defaults for output format and log level
  parser      -- walk file reading and continuation-line merging
  tree        -- OID prefix tree (trie) construction and traversal
  schema      -- Table Pydantic model
  extraction  -- leaf -> (table, column, row) extraction
  formatting  -- fixed-width text and HTML rendering
  pipeline    -- run()/convert() entry points and the command-line interface
"""
