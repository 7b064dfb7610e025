"""GitLab API client using httpx."""

from __future__ import annotations

import functools
import time
from collections.abc import Iterable
from typing import Any

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from .config import GitLabConfig
from .exceptions import (
    GitLabApiError,
    GitLabAuthError,
    GitLabDecodeError,
    GitLabNotFoundError,
    GitLabRequestError,
    GitLabTransportError,
)
from .options import RequestOption
from .releases import ReleasesService
from .response import ApiResponse

logger = structlog.get_logger("gitlab_releases.client")

USER_AGENT = "gitlab-releases"


@functools.cache
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


class GitLabClient:
    """Async HTTP client for the GitLab REST API v4.

    Resource operations live on service attributes (``client.releases``);
    this class builds requests, sends them and decodes the responses.
    """

    def __init__(
        self,
        config: GitLabConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config or GitLabConfig.from_env()
        self.config.validate()
        self._client = http_client or httpx.AsyncClient(
            base_url=self.config.api_url,
            headers={
                "PRIVATE-TOKEN": self.config.token,
                "Content-Type": "application/json",
                "User-Agent": USER_AGENT,
            },
            timeout=self.config.timeout,
            verify=self.config.ssl_verify,
        )
        self.releases = ReleasesService(self)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> GitLabClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ── Request building ──────────────────────────────────────────

    def build_request(
        self,
        method: str,
        path: str,
        *,
        json_data: Any = None,
        params: dict[str, Any] | None = None,
        options: Iterable[RequestOption] = (),
    ) -> httpx.Request:
        """Build a request and apply per-call options in order.

        Nothing is sent; any failure here surfaces as GitLabRequestError.
        """
        query = {k: v for k, v in (params or {}).items() if v is not None}
        kwargs: dict[str, Any] = {"params": query or None}
        if json_data is not None:
            kwargs["json"] = json_data

        try:
            request = self._client.build_request(method, path, **kwargs)
            for option in options:
                option(request)
        except Exception as e:
            raise GitLabRequestError(f"Cannot build {method} {path}: {e}") from e
        return request

    # ── Execution ─────────────────────────────────────────────────

    async def execute(self, request: httpx.Request, model: Any = None) -> tuple[Any, ApiResponse]:
        """Send *request* and return the decoded body with its response metadata.

        *model* is anything pydantic can validate against (a model class,
        ``list[Model]``); ``None`` returns the parsed JSON as is.
        """
        log = logger.bind(method=request.method, path=request.url.path)
        started = time.perf_counter()
        try:
            resp = await self._client.send(request)
        except httpx.TransportError as e:
            log.warning("GitLab API transport failure", error=str(e))
            raise GitLabTransportError(f"{request.method} {request.url}: {e}") from e

        meta = ApiResponse.from_httpx(resp)
        log.debug(
            "GitLab API request",
            status=resp.status_code,
            elapsed=f"{time.perf_counter() - started:.3f}s",
        )

        if not resp.is_success:
            log.warning("GitLab API error response", status=resp.status_code)
        if resp.status_code in (401, 403):
            raise GitLabAuthError(resp.status_code, resp.text, meta)
        if resp.status_code == 404:
            raise GitLabNotFoundError(resp.text, meta)
        if not resp.is_success:
            raise GitLabApiError(resp.status_code, resp.reason_phrase or "", resp.text, meta)

        if resp.status_code == 204 or not resp.content:
            return None, meta

        content_type = resp.headers.get("content-type", "")
        if "text/html" in content_type:
            msg = "Unexpected HTML response, check URL and authentication"
            raise GitLabDecodeError(msg, resp.text[:500], meta)

        try:
            data = resp.json()
        except ValueError as e:
            raise GitLabDecodeError(f"JSON parse error: {e}", resp.text[:500], meta) from e

        if model is None:
            return data, meta
        try:
            return _adapter(model).validate_python(data), meta
        except ValidationError as e:
            log.warning("GitLab API response did not match model", errors=e.error_count())
            raise GitLabDecodeError(
                f"Unexpected response shape: {e}", resp.text[:500], meta
            ) from e

    async def request(
        self,
        method: str,
        path: str,
        *,
        json_data: Any = None,
        params: dict[str, Any] | None = None,
        model: Any = None,
        options: Iterable[RequestOption] = (),
    ) -> tuple[Any, ApiResponse]:
        req = self.build_request(
            method, path, json_data=json_data, params=params, options=options
        )
        return await self.execute(req, model)

    async def get(self, path: str, params: dict[str, Any] | None = None, **kwargs: Any) -> Any:
        return await self.request("GET", path, params=params, **kwargs)

    async def post(self, path: str, json_data: Any = None, **kwargs: Any) -> Any:
        return await self.request("POST", path, json_data=json_data, **kwargs)

    async def put(self, path: str, json_data: Any = None, **kwargs: Any) -> Any:
        return await self.request("PUT", path, json_data=json_data, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", path, **kwargs)
