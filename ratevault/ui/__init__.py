from .components import render_sidebar, render_pinned_units, render_catalog_table
from .state import initialize_session_state

__all__ = [
    "render_sidebar",
    "render_pinned_units",
    "render_catalog_table",
    "initialize_session_state",
]
