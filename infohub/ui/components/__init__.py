"""Reusable UI components for InfoHub."""
from infohub.ui.components.feedback import (
    render_card_header,
    render_loader,
    render_error,
)
from infohub.ui.components.sidebar import (
    render_sidebar,
    NAV_ITEMS,
)

__all__ = [
    "render_card_header",
    "render_loader",
    "render_error",
    "render_sidebar",
    "NAV_ITEMS",
]
