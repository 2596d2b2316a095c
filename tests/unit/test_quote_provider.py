"""
Unit tests for the motivational quote provider.

Tests cover:
- Local-only mode when no API key is configured
- Request shape sent to the Gemini endpoint
- Retry with backoff on network, HTTP and parse errors
- Silent fallback to local quotes (the provider never raises)
- Cleanup of generated text
"""
import json
import pytest
import requests
from unittest.mock import MagicMock


class TestLocalMode:
    """Tests for the no-API-key path."""

    def test_returns_local_quote_without_network(self, local_settings):
        """Test no API key means no HTTP call."""
        from infohub.services.quotes import fetch_motivational_quote, LOCAL_QUOTES

        session = MagicMock()
        quote = fetch_motivational_quote(settings=local_settings, session=session)

        assert quote in LOCAL_QUOTES
        session.post.assert_not_called()

    def test_blank_api_key_is_local(self):
        """Test whitespace-only key counts as absent."""
        from infohub.config.settings import Settings
        from infohub.services.quotes import fetch_motivational_quote, LOCAL_QUOTES

        settings = Settings(_env_file=None, GEMINI_API_KEY="   ")
        session = MagicMock()

        assert fetch_motivational_quote(settings=settings, session=session) in LOCAL_QUOTES
        session.post.assert_not_called()

    def test_default_settings_are_local_in_tests(self):
        """Test the global settings have no key under the test environment."""
        from infohub.services.quotes import fetch_motivational_quote, LOCAL_QUOTES

        assert fetch_motivational_quote() in LOCAL_QUOTES

    def test_five_local_quotes(self):
        """Test the fixed local list has five non-empty entries."""
        from infohub.services.quotes import LOCAL_QUOTES

        assert len(LOCAL_QUOTES) == 5
        assert all(q.strip() for q in LOCAL_QUOTES)


class TestQuoteRequest:
    """Tests for the generateContent request."""

    def test_request_shape(self, api_settings, make_response, gemini_body):
        """Test URL, key, payload and timeout of the POST."""
        from infohub.services.quotes import (
            fetch_motivational_quote, USER_PROMPT, SYSTEM_INSTRUCTION,
        )

        session = MagicMock()
        session.post.return_value = make_response(200, gemini_body("Keep moving."))

        fetch_motivational_quote(settings=api_settings, session=session, sleep=MagicMock())

        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        assert args[0] == (
            "https://generativelanguage.googleapis.com/v1beta/models/"
            "gemini-2.5-flash-preview-09-2025:generateContent"
        )
        assert kwargs["params"] == {"key": "test-key"}
        assert kwargs["timeout"] == 5
        assert kwargs["json"] == {
            "contents": [{"parts": [{"text": USER_PROMPT}]}],
            "systemInstruction": {"parts": [{"text": SYSTEM_INSTRUCTION}]},
        }

    def test_success_returns_generated_text(self, api_settings, make_response, gemini_body):
        """Test the generated text is returned."""
        from infohub.services.quotes import fetch_motivational_quote

        session = MagicMock()
        session.post.return_value = make_response(200, gemini_body("Dream big, start small."))

        quote = fetch_motivational_quote(settings=api_settings, session=session, sleep=MagicMock())

        assert quote == "Dream big, start small."

    def test_strips_quote_marks(self, api_settings, make_response, gemini_body):
        """Test surrounding quotes and whitespace are trimmed."""
        from infohub.services.quotes import fetch_motivational_quote

        session = MagicMock()
        session.post.return_value = make_response(200, gemini_body('  "Rise and grind."\n'))

        quote = fetch_motivational_quote(settings=api_settings, session=session, sleep=MagicMock())

        assert quote == "Rise and grind."


class TestQuoteRetry:
    """Tests for retry with backoff and fallback."""

    def test_retries_server_error_then_succeeds(self, api_settings, make_response, gemini_body):
        """Test a 503 is retried after a 1s wait."""
        from infohub.services.quotes import fetch_motivational_quote

        session = MagicMock()
        session.post.side_effect = [
            make_response(503),
            make_response(200, gemini_body("Never settle.")),
        ]
        sleep = MagicMock()

        quote = fetch_motivational_quote(settings=api_settings, session=session, sleep=sleep)

        assert quote == "Never settle."
        assert session.post.call_count == 2
        sleep.assert_called_once_with(1.0)

    def test_retries_network_error(self, api_settings, make_response, gemini_body):
        """Test connection errors are retried."""
        from infohub.services.quotes import fetch_motivational_quote

        session = MagicMock()
        session.post.side_effect = [
            requests.exceptions.ConnectionError("down"),
            requests.exceptions.Timeout("slow"),
            make_response(200, gemini_body("Third time lucky.")),
        ]
        sleep = MagicMock()

        quote = fetch_motivational_quote(settings=api_settings, session=session, sleep=sleep)

        assert quote == "Third time lucky."
        assert [c.args[0] for c in sleep.call_args_list] == [1.0, 2.0]

    def test_falls_back_after_exhaustion(self, api_settings, make_response):
        """Test three failures fall back to a local quote without raising."""
        from infohub.services.quotes import fetch_motivational_quote, LOCAL_QUOTES

        session = MagicMock()
        session.post.return_value = make_response(500)

        quote = fetch_motivational_quote(settings=api_settings, session=session, sleep=MagicMock())

        assert quote in LOCAL_QUOTES
        assert session.post.call_count == 3

    @pytest.mark.parametrize("body", [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"text": 7}]}}]},
        ["not", "a", "dict"],
        None,
    ])
    def test_malformed_body_falls_back(self, api_settings, make_response, body):
        """Test malformed response bodies are retried then replaced."""
        from infohub.services.quotes import fetch_motivational_quote, LOCAL_QUOTES

        session = MagicMock()
        session.post.return_value = make_response(200, body)

        quote = fetch_motivational_quote(settings=api_settings, session=session, sleep=MagicMock())

        assert quote in LOCAL_QUOTES
        assert session.post.call_count == 3

    def test_invalid_json_falls_back(self, api_settings, make_response):
        """Test undecodable JSON falls back to a local quote."""
        from infohub.services.quotes import fetch_motivational_quote, LOCAL_QUOTES

        session = MagicMock()
        session.post.return_value = make_response(
            200, json_error=json.JSONDecodeError("Expecting value", "", 0)
        )

        quote = fetch_motivational_quote(settings=api_settings, session=session, sleep=MagicMock())

        assert quote in LOCAL_QUOTES

    @pytest.mark.parametrize("text", ["", "   ", '""', "' '"])
    def test_empty_text_falls_back_without_retry(self, api_settings, make_response, gemini_body, text):
        """Test blank generated text is replaced by a local quote immediately."""
        from infohub.services.quotes import fetch_motivational_quote, LOCAL_QUOTES

        session = MagicMock()
        session.post.return_value = make_response(200, gemini_body(text))

        quote = fetch_motivational_quote(settings=api_settings, session=session, sleep=MagicMock())

        assert quote in LOCAL_QUOTES
        assert session.post.call_count == 1

    def test_unexpected_error_never_escapes(self, api_settings):
        """Test even unexpected exceptions fall back."""
        from infohub.services.quotes import fetch_motivational_quote, LOCAL_QUOTES

        session = MagicMock()
        session.post.side_effect = RuntimeError("boom")

        quote = fetch_motivational_quote(settings=api_settings, session=session, sleep=MagicMock())

        assert quote in LOCAL_QUOTES


class TestQuoteClient:
    """Tests for QuoteClient.generate error mapping."""

    def test_http_error_carries_status(self, make_response):
        """Test non-2xx raises QuoteAPIError with the status code."""
        from infohub.services.quotes import QuoteClient
        from infohub.utils.exceptions import QuoteAPIError

        session = MagicMock()
        session.post.return_value = make_response(429)
        client = QuoteClient(api_key="k", api_url="https://example.test/gen", session=session)

        with pytest.raises(QuoteAPIError) as exc_info:
            client.generate()

        assert exc_info.value.status_code == 429

    def test_from_settings(self, api_settings):
        """Test client is configured from settings."""
        from infohub.services.quotes import QuoteClient

        client = QuoteClient.from_settings(api_settings, session=MagicMock())

        assert client.api_key == "test-key"
        assert client.timeout == 5
        assert client.api_url.endswith(":generateContent")


class TestCleanQuoteText:
    """Tests for clean_quote_text."""

    @pytest.mark.parametrize("raw,expected", [
        ("Go on.", "Go on."),
        ('"Go on."', "Go on."),
        ("'Go on.'", "Go on."),
        ("\n  “Go on.”  ", "Go on."),
        ("Don't stop.", "Don't stop."),
        ("", ""),
        (None, ""),
    ])
    def test_clean(self, raw, expected):
        """Test trimming of whitespace and quote marks at both ends only."""
        from infohub.services.quotes import clean_quote_text

        assert clean_quote_text(raw) == expected
