import logging
import time
from typing import Any, Dict, List

import httpx

from dynamic_draft.config.manager import settings

logger = logging.getLogger(__name__)


class LanguageToolClient:
    """Thin async client for the public LanguageTool ``/v2/check`` endpoint.

    Any transport, HTTP or decoding failure is logged and reported as "no
    matches"; callers never see an exception from here.
    """

    def __init__(
        self,
        *,
        url: str | None = None,
        language: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url or settings.LANGUAGE_TOOL_URL
        self.language = language or settings.LANGUAGE_TOOL_LANGUAGE
        self.timeout = timeout if timeout is not None else settings.LANGUAGE_TOOL_TIMEOUT_SECONDS
        self._http_client = http_client

    async def check(self, text: str) -> List[Dict[str, Any]]:
        if not text.strip():
            return []
        data = {"text": text, "language": self.language}
        start = time.perf_counter()
        try:
            if self._http_client is not None:
                response = await self._http_client.post(self.url, data=data, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.url, data=data)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("LanguageTool check failed: %s", e)
            return []

        matches = payload.get("matches") if isinstance(payload, dict) else None
        latency_ms = int((time.perf_counter() - start) * 1000)
        logger.info(f"LanguageTool returned {len(matches or [])} matches, latency={latency_ms}ms")
        return [m for m in matches or [] if isinstance(m, dict)]
