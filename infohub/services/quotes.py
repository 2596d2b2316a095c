"""
Motivational quote provider.

Generates a quote with the Gemini generateContent API when an API key
is configured, and falls back to a fixed local list otherwise.

fetch_motivational_quote() never raises: network errors, HTTP errors
and malformed responses are retried with backoff, then replaced by a
local quote.
"""
import json
import logging
import random
import string
from typing import Any, Callable, Dict, Optional

import requests

from infohub.config.settings import Settings, get_settings
from infohub.services.backoff import with_backoff
from infohub.utils.exceptions import QuoteAPIError

logger = logging.getLogger(__name__)

LOCAL_QUOTES = (
    "Don't watch the clock; do what it does. Keep going.",
    "Success is not final, failure is not fatal: it is the courage to continue that counts.",
    "The only way to achieve the impossible is to believe it is possible.",
    "Act as if what you do makes a difference. It does.",
    "Start where you are. Use what you have. Do what you can.",
)

USER_PROMPT = "Generate a short, powerful, and unique motivational quote. Return only the quote text."
SYSTEM_INSTRUCTION = "You are a creative quote generator. Provide concise inspiring quotes."

# Characters trimmed from both ends of generated text
_TRIM_CHARS = string.whitespace + "'\"“”‘’"


def random_local_quote(rng=None) -> str:
    """Pick a quote uniformly from the local list."""
    return (rng or random).choice(LOCAL_QUOTES)


def clean_quote_text(text: Optional[str]) -> str:
    """Strip whitespace and surrounding quote marks from generated text."""
    if not text:
        return ""
    return text.strip(_TRIM_CHARS)


def build_payload() -> Dict[str, Any]:
    """Single-turn generateContent request body."""
    return {
        "contents": [{"parts": [{"text": USER_PROMPT}]}],
        "systemInstruction": {"parts": [{"text": SYSTEM_INSTRUCTION}]},
    }


def extract_text(data: Any) -> str:
    """Pull candidates[0].content.parts[0].text out of a response body.

    Raises:
        QuoteAPIError: If the body does not have that shape
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise QuoteAPIError(f"Malformed quote API response: {e!r}")
    if not isinstance(text, str):
        raise QuoteAPIError("Malformed quote API response: text is not a string")
    return text


class QuoteClient:
    """Client for the Gemini generateContent endpoint."""

    def __init__(
        self,
        api_key: str,
        api_url: str,
        timeout: int = 30,
        session: requests.Session = None,
    ):
        """Initialize quote client.

        Args:
            api_key: Gemini API key (sent as the `key` query parameter)
            api_url: Full generateContent URL
            timeout: Request timeout in seconds
            session: Optional requests session to reuse
        """
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings = None, session: requests.Session = None) -> "QuoteClient":
        """Build a client from application settings."""
        settings = settings or get_settings()
        return cls(
            api_key=settings.GEMINI_API_KEY.strip(),
            api_url=settings.quote_api_url,
            timeout=settings.API_TIMEOUT,
            session=session,
        )

    def generate(self) -> str:
        """Make one generation request and return the raw generated text.

        Raises:
            requests.exceptions.RequestException: On network failure
            QuoteAPIError: On non-2xx status or malformed body
        """
        response = self.session.post(
            self.api_url,
            params={"key": self.api_key},
            json=build_payload(),
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )

        if not response.ok:
            raise QuoteAPIError(
                f"Quote API returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise QuoteAPIError(f"Invalid JSON from quote API: {e}")

        return extract_text(data)


def fetch_motivational_quote(
    settings: Settings = None,
    session: requests.Session = None,
    sleep: Callable[[float], None] = None,
    rng=None,
) -> str:
    """Get a motivational quote. Never raises.

    Args:
        settings: Application settings (default: cached global settings)
        session: Optional requests session for the API call
        sleep: Delay function for backoff waits (default time.sleep)
        rng: Random source for the local fallback

    Returns:
        A non-empty quote string
    """
    settings = settings or get_settings()

    if not settings.has_api_key:
        return random_local_quote(rng)

    client = QuoteClient.from_settings(settings, session=session)

    try:
        text = with_backoff(
            client.generate,
            max_retries=settings.API_RETRY_COUNT,
            sleep=sleep,
        )
    except Exception as e:
        logger.warning(f"Quote API failed, using local fallback: {e}")
        return random_local_quote(rng)

    quote = clean_quote_text(text)
    if not quote:
        logger.warning("Quote API returned empty text, using local fallback")
        return random_local_quote(rng)
    return quote
