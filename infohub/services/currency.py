"""
Simulated INR currency converter.

Uses fixed mock rates (1 USD = 88.3 INR, 1 EUR = 98.0 INR) and a
simulated network latency. Deterministic apart from the timestamp.
"""
import logging
import time
from dataclasses import dataclass
from datetime import datetime

from infohub.config.settings import config
from infohub.utils.exceptions import InvalidAmountError
from infohub.utils.validators import is_positive_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Converted amounts, each formatted to exactly two decimals."""
    usd_amount: str
    eur_amount: str
    computed_at: str


def convert_inr(amount) -> ConversionResult:
    """Convert an INR amount to USD and EUR.

    Args:
        amount: Amount in Indian Rupees; must be a finite number > 0

    Returns:
        ConversionResult with formatted amounts and computation time

    Raises:
        InvalidAmountError: If amount is not a positive number
    """
    if not is_positive_number(amount):
        raise InvalidAmountError(amount)

    amount = float(amount)
    time.sleep(config.CONVERSION_LATENCY_SECONDS)

    result = ConversionResult(
        usd_amount=f"{amount / config.INR_PER_USD:.2f}",
        eur_amount=f"{amount / config.INR_PER_EUR:.2f}",
        computed_at=datetime.now().strftime("%I:%M:%S %p"),
    )
    logger.debug(f"Converted {amount} INR -> {result.usd_amount} USD, {result.eur_amount} EUR")
    return result
