"""Text-generation client for the Gemini ``generateContent`` endpoint.

The client never raises for service problems: like the rest of the drafting
flow it returns an error string that is shown to the user in place of the
generated text.
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.5-flash-preview-09-2025"

MISSING_KEY_ERROR = "Error: missing Gemini API key"
EMPTY_RESPONSE_ERROR = "Error: empty AI response"
CONNECTION_ERROR = "Error: could not reach AI service"


class GeminiClient:
    """Synchronous prompt-in, text-out client."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = 30.0,
        http_client: Optional[httpx.Client] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, prompt: str) -> str:
        """Send one prompt and return the generated text or an error string."""
        if not self.api_key:
            return MISSING_KEY_ERROR

        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            if self._http_client is not None:
                response = self._post(self._http_client, payload)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = self._post(client, payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            logger.warning("Text generation request failed: %s", e)
            return CONNECTION_ERROR
        except ValueError as e:
            logger.warning("Text generation returned invalid JSON: %s", e)
            return EMPTY_RESPONSE_ERROR

        return extract_text(data) or EMPTY_RESPONSE_ERROR

    def _post(self, client: httpx.Client, payload: dict) -> httpx.Response:
        return client.post(
            self.endpoint,
            params={"key": self.api_key},
            headers={"Content-Type": "application/json"},
            json=payload,
        )


def extract_text(data: object) -> Optional[str]:
    """Pull ``candidates[0].content.parts[0].text`` out of a response body."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]  # type: ignore[index]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) and text else None
