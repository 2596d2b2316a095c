"""Quote widget: generates a quote on button press only."""

from typing import Callable

from infohub.services.quotes import fetch_motivational_quote
from infohub.utils.request_state import RequestState
from infohub.widgets.base import Widget

PLACEHOLDER_QUOTE = "Click 'Generate' to get your daily dose of motivation."


class QuoteWidget(Widget[str]):
    """Shows the last generated quote; never loads on mount.

    The provider does not raise, so the error phase is only reachable
    with a custom provider.
    """

    auto_load = False
    keep_result_on_error = True

    def __init__(self, provider: Callable[[], str] = fetch_motivational_quote):
        super().__init__()
        self.provider = provider

    @property
    def quote(self) -> str:
        """Quote to display: the last generated one, or the placeholder."""
        return self.last_result or PLACEHOLDER_QUOTE

    def generate(self) -> RequestState[str]:
        return self.run(self.provider)

    def load(self) -> RequestState[str]:
        return self.generate()
