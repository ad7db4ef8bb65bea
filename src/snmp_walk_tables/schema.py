"""Pydantic model for a table reconstructed from an SNMP walk.

A table is named by the OID path of the trie node two levels above its leaves.
Its columns are that node's children and its rows are keyed by the leaf labels
(the table index, e.g. the ifIndex "1" in "ifTable.ifEntry.ifDescr.1").
"""

from pydantic import BaseModel, Field, model_validator


class Table(BaseModel):
    """Structured representation of one walk table.

    rows maps row key -> {column name -> value}.  A value of None means the
    trie held a row node whose full path was never an input key; it renders as
    an empty cell.  Both columns and rows keep first-seen order.
    """

    name: str
    columns: list[str] = Field(default_factory=list)
    rows: dict[str, dict[str, str | None]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_structure(self) -> "Table":
        """Ensure columns are unique and every row cell names a known column."""
        if len(set(self.columns)) != len(self.columns):
            raise ValueError(f"Table {self.name!r} has duplicate columns: {self.columns}")
        known = set(self.columns)
        for row_key, cells in self.rows.items():
            unknown = [column for column in cells if column not in known]
            if unknown:
                raise ValueError(f"Row {row_key!r} of table {self.name!r} references unknown columns {unknown}")
        return self

    def add_column(self, column: str) -> None:
        """Append column unless it is already present."""
        if column not in self.columns:
            self.columns.append(column)

    def set_cell(self, row_key: str, column: str, value: str | None) -> None:
        """Store value at (row_key, column), overwriting any earlier value."""
        self.add_column(column)
        self.rows.setdefault(row_key, {})[column] = value

    def cell(self, row_key: str, column: str) -> str:
        """Return the printable value at (row_key, column); missing values are ''."""
        value = self.rows.get(row_key, {}).get(column)
        return "" if value is None else value

    def row_values(self, row_key: str) -> list[str]:
        """Printable values of one row, in column order."""
        return [self.cell(row_key, column) for column in self.columns]
