"""
Unit tests for the simulated currency converter.
"""
import math
import re
import pytest
from decimal import Decimal
from unittest.mock import patch


class TestConvertInr:
    """Tests for convert_inr."""

    def test_scenario_100_inr(self, no_sleep):
        """Test 100 INR converts to 1.13 USD and 1.02 EUR."""
        from infohub.services.currency import convert_inr

        result = convert_inr(100)

        assert result.usd_amount == "1.13"
        assert result.eur_amount == "1.02"

    @pytest.mark.parametrize("amount", [0.01, 1, 88.3, 98, 250.5, 12345.67, 1e7])
    def test_matches_fixed_rates(self, no_sleep, amount):
        """Test amounts equal amount / rate rounded to 2 places."""
        from infohub.services.currency import convert_inr

        result = convert_inr(amount)

        assert result.usd_amount == f"{round(amount / 88.3, 2):.2f}"
        assert result.eur_amount == f"{round(amount / 98.0, 2):.2f}"

    def test_exactly_two_decimals(self, no_sleep):
        """Test formatting keeps trailing zeros."""
        from infohub.services.currency import convert_inr

        result = convert_inr(98)

        assert result.eur_amount == "1.00"

    def test_accepts_decimal_and_numeric_strings(self, no_sleep):
        """Test any real-number input is accepted."""
        from infohub.services.currency import convert_inr

        assert convert_inr(Decimal("100")).usd_amount == "1.13"
        assert convert_inr("100").usd_amount == "1.13"

    def test_has_timestamp(self, no_sleep):
        """Test a human-readable computation time is included."""
        from infohub.services.currency import convert_inr

        result = convert_inr(10)

        assert re.match(r"\d{2}:\d{2}:\d{2}", result.computed_at)

    @pytest.mark.parametrize("amount", [0, -5, -0.01, "abc", None, math.nan, math.inf, True, [100], 10 ** 400])
    def test_rejects_invalid_amounts(self, amount):
        """Test non-numeric and non-positive input raises InvalidAmountError."""
        from infohub.services.currency import convert_inr
        from infohub.utils.exceptions import InvalidAmountError

        with patch('infohub.services.currency.time.sleep') as mock_sleep:
            with pytest.raises(InvalidAmountError) as exc_info:
                convert_inr(amount)

        assert "Invalid amount" in exc_info.value.message
        mock_sleep.assert_not_called()

    def test_simulates_latency(self):
        """Test conversion waits the configured latency."""
        from infohub.services.currency import convert_inr
        from infohub.config.settings import config

        with patch('infohub.services.currency.time.sleep') as mock_sleep:
            convert_inr(100)

        mock_sleep.assert_called_once_with(config.CONVERSION_LATENCY_SECONDS)
