"""Client for the Gemini chat relay API.

Every call is a single ``POST /chat``. Any failure on the way (transport error,
non-2xx status, unparseable body) is logged and surfaced to the caller as
``RequestFailed`` with a fixed, user-presentable message.
"""

import logging
import threading

import httpx

from gemini_chat.config import Settings

logger = logging.getLogger(__name__)

CHAT_PATH = "/chat"
FAILURE_MESSAGE = "Failed to process your request"


class RequestFailed(Exception):
    def __init__(self, message: str = FAILURE_MESSAGE) -> None:
        super().__init__(message)


def _headers(api_key: str) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


def _parse(response: httpx.Response) -> dict:
    response.raise_for_status()
    return response.json()


class GeminiClient:
    def __init__(
        self,
        base_url: str,
        api_key: str,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = httpx.Client(
            base_url=base_url,
            headers=_headers(api_key),
            transport=transport,
            follow_redirects=True,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "GeminiClient":
        return cls(settings.api_url, settings.api_key, **kwargs)

    def send_message(self, message: str) -> dict:
        """Send ``message`` and return the decoded reply body as-is.

        The body is expected to look like ``Reply`` but is not validated; use
        ``Reply.model_validate`` on the result when a checked object is needed.
        """
        try:
            response = self._http.post(CHAT_PATH, json={"message": message})
            return _parse(response)
        except Exception as e:
            logger.error("Gemini API Error: %s", e)
            raise RequestFailed() from e

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "GeminiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncGeminiClient:
    def __init__(
        self,
        base_url: str,
        api_key: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers=_headers(api_key),
            transport=transport,
            follow_redirects=True,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "AsyncGeminiClient":
        return cls(settings.api_url, settings.api_key, **kwargs)

    async def send_message(self, message: str) -> dict:
        try:
            response = await self._http.post(CHAT_PATH, json={"message": message})
            return _parse(response)
        except Exception as e:
            logger.error("Gemini API Error: %s", e)
            raise RequestFailed() from e

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "AsyncGeminiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


_default_client: GeminiClient | None = None
_default_client_lock = threading.Lock()


def get_default_client() -> GeminiClient:
    """Return the process-wide client, built from the environment on first use."""
    global _default_client
    with _default_client_lock:
        if _default_client is None:
            _default_client = GeminiClient.from_settings(Settings.from_env())
        return _default_client


def send_message(message: str) -> dict:
    return get_default_client().send_message(message)
