"""Currency widget: converts the INR amount field on every change."""

import logging
from typing import Callable

from infohub.config.settings import config
from infohub.services.currency import ConversionResult, convert_inr
from infohub.utils.request_state import RequestState
from infohub.utils.validators import AmountValidator
from infohub.widgets.base import Widget

logger = logging.getLogger(__name__)


class ConverterWidget(Widget[ConversionResult]):
    """Converts INR to USD/EUR.

    Input handling:
    - empty text clears the result, no error, no provider call
    - text that is not a positive number sets an error, no provider call
    - anything else is converted
    """

    auto_load = True

    def __init__(
        self,
        provider: Callable[[float], ConversionResult] = convert_inr,
        amount_text: str = None,
    ):
        super().__init__()
        self.provider = provider
        self.amount_text = config.DEFAULT_AMOUNT_INR if amount_text is None else amount_text

    def on_input(self, text: str) -> RequestState[ConversionResult]:
        """Handle a change of the amount field."""
        self.amount_text = text

        if AmountValidator.is_blank(text):
            self.reset()
            return self.state

        result = AmountValidator.parse(text)
        if not result:
            self.reset(error=result.errors[0])
            return self.state

        amount = result.value
        return self.run(lambda: self.provider(amount))

    def load(self) -> RequestState[ConversionResult]:
        return self.on_input(self.amount_text)
