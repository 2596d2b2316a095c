"""Input validation utilities.

Validates free-text user input before it reaches a provider.
All validators return ValidationResult objects for consistent error handling.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, List, Optional

logger = logging.getLogger(__name__)

INVALID_AMOUNT_MESSAGE = "Please enter a valid amount."


@dataclass
class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        value: Parsed value (only set when valid)
        errors: List of error messages (empty if valid)

    Example:
        >>> result = AmountValidator.parse("250")
        >>> if result:
        ...     convert_inr(result.value)
    """
    is_valid: bool
    value: Optional[Any] = None
    errors: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        """Allow using result in boolean context."""
        return self.is_valid

    def add_error(self, error: str) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False
        self.value = None


def is_positive_number(value: Any) -> bool:
    """Check that value is a finite real number greater than zero.

    Booleans are rejected even though bool subclasses int.
    """
    if isinstance(value, bool):
        return False
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return False
    return math.isfinite(number) and number > 0


class AmountValidator:
    """Validates the INR amount typed into the currency widget."""

    @classmethod
    def is_blank(cls, text: Optional[str]) -> bool:
        """Empty input is neither valid nor an error; it clears the widget."""
        return text is None or not str(text).strip()

    @classmethod
    def parse(cls, text: Optional[str]) -> ValidationResult:
        """Parse amount text into a positive float.

        Args:
            text: Raw text from the amount field

        Returns:
            ValidationResult with the float in .value on success

        Example:
            >>> AmountValidator.parse("100").value
            100.0
            >>> AmountValidator.parse("-5").is_valid
            False
        """
        result = ValidationResult(is_valid=True)

        if cls.is_blank(text):
            result.add_error(INVALID_AMOUNT_MESSAGE)
            return result

        try:
            number = float(str(text).strip().replace(",", ""))
        except ValueError:
            logger.debug(f"Rejected non-numeric amount: {text!r}")
            result.add_error(INVALID_AMOUNT_MESSAGE)
            return result

        if not is_positive_number(number):
            result.add_error(INVALID_AMOUNT_MESSAGE)
            return result

        result.value = number
        return result
