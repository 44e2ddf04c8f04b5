"""Deterministic text rendering of tables and databases.

Tables render as a header block followed by a pipe-delimited grid:

    Tabellenbezeichner: Tee
    Primärschlüssel: ID

    | ID  | Name       |
    |-----|------------|
    | 1   | Sencha     |
    | 16  | Darjeeling |

Column width is the longest of the header and every cell in that column.
Line breaks inside cells are collapsed to a single space before measuring.
Output always uses "\\n" line endings and ends with a newline.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Iterable, Sequence

if TYPE_CHECKING:
    from relstore.ports.inbound import Relation


TABLE_LABEL = "Tabellenbezeichner"
PRIMARY_KEY_LABEL = "Primärschlüssel"
DATABASE_LABEL = "Datenbankbezeichner"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def flatten_cell(text: str) -> str:
    """Collapse every line break (\\r\\n, \\r or \\n) to one space."""
    return _LINE_BREAK.sub(" ", text)


def _format_row(cells: Sequence[str], widths: Sequence[int]) -> str:
    parts = [f"| {cell.ljust(width)} " for cell, width in zip(cells, widths)]
    parts.append("|")
    return "".join(parts)


def _format_separator(widths: Sequence[int]) -> str:
    parts = ["|" + "-" * (width + 2) for width in widths]
    parts.append("|")
    return "".join(parts)


def render_grid(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> list[str]:
    """Lay out headers and rows as grid lines (without line terminators).

    Args:
        headers: Column headers.
        rows: Cell texts per row, one entry per header.

    Returns:
        Header line, separator line, then one line per row.
    """
    header_cells = [flatten_cell(h) for h in headers]
    body = [[flatten_cell(cell) for cell in row] for row in rows]

    widths = [len(h) for h in header_cells]
    for row in body:
        for i, cell in enumerate(row):
            if len(cell) > widths[i]:
                widths[i] = len(cell)

    lines = [_format_row(header_cells, widths), _format_separator(widths)]
    lines.extend(_format_row(row, widths) for row in body)
    return lines


def render_relation(relation: Relation) -> str:
    """Render a table with its id, primary key and grid."""
    lines = [
        f"{TABLE_LABEL}: {relation.table_id}",
        f"{PRIMARY_KEY_LABEL}: {relation.primary_key_column_id}",
        "",
    ]
    lines.extend(
        render_grid(
            relation.column_ids,
            ([str(value) for value in row] for row in relation.rows()),
        )
    )
    return "\n".join(lines) + "\n"


def render_catalog(database_id: str, relations: Iterable[Relation]) -> str:
    """Render a database header followed by each table and a blank line."""
    parts = [f"{DATABASE_LABEL}: {database_id}\n", "\n"]
    for relation in relations:
        parts.append(relation.render())
        parts.append("\n")
    return "".join(parts)
