"""Session state management for InfoHub.

This module provides centralized session state management for Streamlit,
with features like:
- Default value initialization
- View (tab) management
- Per-view widget ownership: leaving a view discards its widgets
"""

import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)


# View constants
VIEW_WEATHER = "weather"
VIEW_CONVERTER = "converter"
VIEW_QUOTES = "quotes"

VIEWS = (VIEW_WEATHER, VIEW_CONVERTER, VIEW_QUOTES)

# Widget keys
WEATHER_WIDGET_KEY = "weather_widget"
CONVERTER_WIDGET_KEY = "converter_widget"
QUOTE_WIDGET_KEY = "quote_widget"


class SessionState:
    """Centralized session state management for InfoHub.

    Wraps st.session_state so pages never touch raw keys.

    Example:
        >>> from infohub.utils import SessionState
        >>> SessionState.init_defaults()
        >>> SessionState.navigate_to(VIEW_QUOTES)
        >>> SessionState.get_current_view()
        'quotes'
    """

    _DEFAULT_FACTORIES: Dict[str, Callable[[], Any]] = {
        # Navigation state
        'current_view': lambda: VIEW_WEATHER,
    }

    # Keys owned by each view; cleared when the user navigates elsewhere
    MODE_KEYS: Dict[str, List[str]] = {
        VIEW_WEATHER: [WEATHER_WIDGET_KEY],
        VIEW_CONVERTER: [CONVERTER_WIDGET_KEY],
        VIEW_QUOTES: [QUOTE_WIDGET_KEY],
    }

    @classmethod
    def _get_session_state(cls):
        """Get Streamlit session state (lazy import for testing)."""
        import streamlit as st
        return st.session_state

    @classmethod
    def init_defaults(cls) -> None:
        """Initialize default session state values.

        Call this at the start of the Streamlit app to ensure
        all expected keys exist.
        """
        session_state = cls._get_session_state()

        for key, factory in cls._DEFAULT_FACTORIES.items():
            if key not in session_state:
                session_state[key] = factory()
                logger.debug(f"Initialized session state key: {key}")

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Get a value from session state."""
        session_state = cls._get_session_state()
        return session_state.get(key, default)

    @classmethod
    def set(cls, key: str, value: Any) -> None:
        """Set a value in session state."""
        session_state = cls._get_session_state()
        session_state[key] = value
        logger.debug(f"Set session state: {key} = {type(value).__name__}")

    @classmethod
    def clear(cls, key: str) -> None:
        """Clear a session state key."""
        session_state = cls._get_session_state()
        if key in session_state:
            del session_state[key]
            logger.debug(f"Cleared session state key: {key}")

    @classmethod
    def clear_mode(cls, mode: str) -> None:
        """Clear all state associated with a specific view."""
        for key in cls.MODE_KEYS.get(mode, []):
            cls.clear(key)
        logger.debug(f"Cleared session state for view: {mode}")

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if a key exists in session state."""
        session_state = cls._get_session_state()
        return key in session_state

    @classmethod
    def get_or_create(cls, key: str, factory: Callable[[], Any]) -> Any:
        """Get value if it exists, otherwise build it with factory and store it."""
        if not cls.has(key):
            cls.set(key, factory())
        return cls.get(key)

    # View management helpers
    @classmethod
    def get_current_view(cls) -> str:
        """Get the current view."""
        return cls.get('current_view', VIEW_WEATHER)

    @classmethod
    def navigate_to(cls, view: str) -> None:
        """Switch the active view.

        Widgets of every other view are discarded, so they mount
        again (and re-fetch) the next time their view is shown.
        """
        if view not in VIEWS:
            raise ValueError(f"Unknown view: {view}")

        for other in VIEWS:
            if other != view:
                cls.clear_mode(other)
        cls.set('current_view', view)
