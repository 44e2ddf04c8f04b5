"""Domain services for business logic.

Services implement logic that doesn't naturally fit within a single
entity. The text renderer lays out tables and databases for display.
"""

from relstore.domain.services.text_renderer import (
    DATABASE_LABEL,
    PRIMARY_KEY_LABEL,
    TABLE_LABEL,
    flatten_cell,
    render_catalog,
    render_grid,
    render_relation,
)

__all__ = [
    "DATABASE_LABEL",
    "PRIMARY_KEY_LABEL",
    "TABLE_LABEL",
    "flatten_cell",
    "render_catalog",
    "render_grid",
    "render_relation",
]
