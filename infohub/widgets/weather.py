"""Weather widget: looks up the city typed into the search box."""

import logging
from typing import Callable

from infohub.config.settings import config
from infohub.services.weather import WeatherResult, fetch_weather
from infohub.utils.request_state import RequestState
from infohub.widgets.base import Widget

logger = logging.getLogger(__name__)


class WeatherWidget(Widget[WeatherResult]):
    """Fetches weather on mount and on every search submission."""

    auto_load = True

    def __init__(
        self,
        provider: Callable[[str], WeatherResult] = fetch_weather,
        city: str = None,
    ):
        super().__init__()
        self.provider = provider
        self.city = config.DEFAULT_CITY if city is None else city

    def set_city(self, city: str) -> None:
        """Update the search text without fetching."""
        self.city = city

    def search(self, city: str = None) -> RequestState[WeatherResult]:
        """Fetch weather for city (default: the current search text)."""
        if city is not None:
            self.city = city
        requested = self.city
        logger.debug(f"Weather search for {requested!r}")
        return self.run(lambda: self.provider(requested))

    def load(self) -> RequestState[WeatherResult]:
        return self.search()
