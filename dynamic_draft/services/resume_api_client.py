import dataclasses
import logging
import time
import typing

import httpx

from dynamic_draft.config.manager import settings
from dynamic_draft.models.schemas.resume import ResumeDocument

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class RemoteSaveResult:
    ok: bool
    resume_id: int | None = None
    error: str | None = None
    payload: dict[str, typing.Any] | None = None


class ResumeApiClient:
    """Async client for the account-backed ``/resumes`` endpoints.

    Failures are returned as ``RemoteSaveResult(ok=False, ...)`` so an
    unreachable server never costs the user the document in memory.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = (base_url or settings.RESUME_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.RESUME_API_TIMEOUT_SECONDS
        self._token = token
        self._http_client = http_client

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._token}"}

    async def _request(self, method: str, path: str, **kwargs: typing.Any) -> httpx.Response:
        url = f"{self.base_url}{path}"
        if self._http_client is not None:
            return await self._http_client.request(method, url, headers=self.headers, timeout=self.timeout, **kwargs)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.request(method, url, headers=self.headers, **kwargs)

    async def _call(self, method: str, path: str, **kwargs: typing.Any) -> RemoteSaveResult:
        start = time.perf_counter()
        try:
            response = await self._request(method, path, **kwargs)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("%s %s rejected with status %s", method, path, e.response.status_code)
            return RemoteSaveResult(ok=False, error=f"Server responded with {e.response.status_code}")
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("%s %s failed: %s", method, path, e)
            return RemoteSaveResult(ok=False, error=str(e) or e.__class__.__name__)

        latency_ms = int((time.perf_counter() - start) * 1000)
        logger.info(f"{method} {path} ok, latency={latency_ms}ms")
        payload = body if isinstance(body, dict) else {"items": body}
        resume_id = payload.get("id")
        return RemoteSaveResult(ok=True, resume_id=resume_id if isinstance(resume_id, int) else None, payload=payload)

    async def list_resumes(self) -> RemoteSaveResult:
        return await self._call("GET", "/resumes")

    async def create(self, document: ResumeDocument, template: str | None = None) -> RemoteSaveResult:
        body = {"content": document.model_dump(by_alias=True, mode="json"), "template": template}
        return await self._call("POST", "/resumes", json=body)

    async def update(self, resume_id: int, document: ResumeDocument) -> RemoteSaveResult:
        body = {"content": document.model_dump(by_alias=True, mode="json")}
        return await self._call("PATCH", f"/resumes/{resume_id}", json=body)

    async def delete(self, resume_id: int) -> RemoteSaveResult:
        result = await self._call("DELETE", f"/resumes/{resume_id}")
        return dataclasses.replace(result, resume_id=resume_id) if result.ok else result
