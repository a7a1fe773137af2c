"""OpenFIGI REST client.

Docs: https://www.openfigi.com/api
One call = one POST of a whole batch. Nothing is retried, cached or throttled.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from figi.config import API_KEY_HEADER, config
from figi.exceptions import (
    BadStatusError,
    DecodeError,
    FigiError,
    MappingAPIError,
    MappingWarningError,
    RequestBuildError,
    RequestTimeoutError,
    SerializationError,
    TransportError,
)
from figi.models import BatchSlot, MappingRequest, MappingResponse
from figi.validation import validate_all

MAPPING_PATH = "v3/mapping"
_JSON = "application/json"
_batch = TypeAdapter(list[BatchSlot])


def decode_batch(slots: list[BatchSlot]) -> list[MappingResponse]:
    """Flatten a batch response, or raise if any job came back with an error or warning.

    Errors win over warnings. A warning is as fatal as an error: sibling
    results are discarded either way.
    """
    for index, slot in enumerate(slots):
        if slot.error:
            raise MappingAPIError(slot.error, index)
    for index, slot in enumerate(slots):
        if slot.warning:
            raise MappingWarningError(slot.warning, index)

    results: list[MappingResponse] = []
    for slot in slots:
        results.extend(slot.data or [])
    return results


class FigiClient:
    """Client for the OpenFIGI mapping endpoint.

    Everything is fixed at construction, so one instance can serve
    concurrent calls.

    Args:
        http: AsyncClient to send through. When omitted a short-lived client
            is opened for each call.
        logger: Receives one diagnostic record per call (ERROR on failure,
            DEBUG on success). Defaults to this module's logger, which is
            silent unless the application configures logging.
        base_url: API origin, default from ``config.openfigi.base_url``.
        extra_headers: Headers added to every request, after the JSON ones.
        api_key: Sent as ``X-OPENFIGI-APIKEY``. Defaults to ``config.openfigi.api_key``.
        timeout: HTTP timeout in seconds for clients opened by this instance.
    """

    def __init__(
        self,
        *,
        http: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
        base_url: str | None = None,
        extra_headers: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
    ):
        self.base_url = (base_url or config.openfigi.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.openfigi.timeout
        self._http = http
        self._log = logger or logging.getLogger(__name__)

        headers = [("Content-Type", _JSON), ("Accept", _JSON)]
        if extra_headers:
            items = extra_headers.items() if isinstance(extra_headers, Mapping) else extra_headers
            headers.extend((str(k), str(v)) for k, v in items)
        api_key = config.openfigi.api_key if api_key is None else api_key
        if api_key:
            headers.append((API_KEY_HEADER, api_key))
        self._headers = tuple(headers)

    async def mapping(
        self,
        requests: MappingRequest | Iterable[MappingRequest | None],
        *,
        timeout: float | None = None,
    ) -> list[MappingResponse]:
        """Map a batch of identifiers to FIGI records.

        Results of every job are concatenated in request order. ``timeout`` is
        a deadline in seconds for the whole HTTP exchange.
        """
        if isinstance(requests, MappingRequest):
            requests = [requests]
        batch = list(requests)
        if not batch:
            return []

        url = f"{self.base_url}/{MAPPING_PATH}"
        diag: dict[str, Any] = {"path": url, "method": "POST"}

        try:
            validate_all(batch)
        except FigiError as e:
            self._fail("invalid mapping request", diag, e)
            raise

        try:
            body = json.dumps([r.to_payload() for r in batch])
        except (TypeError, ValueError, PydanticSerializationError) as e:
            self._fail("failed marshaling request", diag, e)
            raise SerializationError(f"could not encode mapping request: {e}") from e
        diag["body"] = body

        if self._http is not None:
            resp = await self._send(self._http, url, body, diag, timeout)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as http:
                resp = await self._send(http, url, body, diag, timeout)

        try:
            slots = _batch.validate_json(resp.content)
        except ValidationError as e:
            self._fail("failed response unmarshal", diag, e)
            raise DecodeError(f"unexpected mapping response: {e}") from e

        try:
            results = decode_batch(slots)
        except MappingAPIError as e:
            self._fail("mapping job rejected", diag, e)
            raise

        self._log.debug("OpenFIGI POST %s: %d results", url, len(results), extra=diag)
        return results

    async def _send(
        self,
        http: httpx.AsyncClient,
        url: str,
        body: str,
        diag: dict[str, Any],
        timeout: float | None,
    ) -> httpx.Response:
        """One HTTP exchange. Returns only 2xx responses."""
        try:
            request = http.build_request(
                "POST", url, content=body.encode(), headers=list(self._headers),
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            self._fail("failed creating request", diag, e)
            raise RequestBuildError(str(e)) from e

        try:
            if timeout is None:
                resp = await http.send(request)
            else:
                resp = await asyncio.wait_for(http.send(request), timeout)
        except asyncio.CancelledError as e:
            self._fail("request cancelled", diag, e)
            raise
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            self._fail("request timed out", diag, e)
            raise RequestTimeoutError(f"OpenFIGI request timed out: {url}") from e
        except httpx.UnsupportedProtocol as e:
            self._fail("failed creating request", diag, e)
            raise RequestBuildError(str(e)) from e
        except httpx.HTTPError as e:
            self._fail("failed making request", diag, e)
            raise TransportError(f"OpenFIGI request failed: {e}") from e

        diag["status_code"] = resp.status_code
        diag["response"] = resp.text

        if not resp.is_success:
            self._fail("bad status code received", diag)
            raise BadStatusError(resp.status_code, resp.text)
        return resp

    def _fail(self, message: str, diag: dict[str, Any], exc: BaseException | None = None) -> None:
        extra = dict(diag)
        if exc is not None:
            extra["err"] = repr(exc)
        self._log.error("OpenFIGI %s %s: %s", diag["method"], diag["path"], message, extra=extra)
