from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager

import httpx

from . import constants as const
from .errors import FetchError
from .hashing import digest, to_hex
from .models import ContentRecord
from .validation import Bytes32Like, normalize_bytes32, validate_uri

logger = logging.getLogger(__name__)


class ContentVerifier:
    """
    Fetches content over HTTPS and checks it against a declared SHA-256 hash.

    A hash mismatch is a normal `False` result; failing to obtain the content at all
    (transport error, non-2xx status, timeout) raises `FetchError`.

    An injected `httpx.AsyncClient` is used as-is and never closed here. Without one,
    a client is opened per call and shared by every fetch of that call.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = const.DEFAULT_VERIFY_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be > 0")
        self._client = client
        self.timeout = float(timeout)
        self.headers = dict(headers or {})

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(
            headers=self.headers, timeout=self.timeout, follow_redirects=True
        ) as client:
            yield client

    def _timeout(self, timeout: float | None) -> float:
        if timeout is None:
            return self.timeout
        if timeout <= 0:
            raise ValueError("timeout must be > 0")
        return float(timeout)

    # ------------------------------------------------------------------
    # Internals (client already open)
    # ------------------------------------------------------------------

    async def _fetch_with(
        self, client: httpx.AsyncClient, uri: str, timeout: float
    ) -> bytes:
        validate_uri(uri)
        logger.debug("Fetching %s (timeout=%ss)", uri, timeout)
        try:
            response = await asyncio.wait_for(client.get(uri), timeout=timeout)
        except asyncio.TimeoutError as e:
            raise FetchError(uri, f"timed out after {timeout}s") from e
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise FetchError(uri, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise FetchError(
                uri,
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response.content

    async def _verify_with(
        self,
        client: httpx.AsyncClient,
        uri: str,
        expected_hash: Bytes32Like,
        timeout: float,
    ) -> bool:
        expected = to_hex(normalize_bytes32(expected_hash))
        body = await self._fetch_with(client, uri, timeout)
        actual = digest(body)
        logger.debug("Digest of %s (%d bytes) is %s", uri, len(body), actual)
        if actual != expected:
            logger.info("Hash mismatch for %s: expected %s, got %s", uri, expected, actual)
            return False
        return True

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def fetch(self, uri: str, timeout: float | None = None) -> bytes:
        """GET `uri` once and return the body. Non-2xx and timeouts raise `FetchError`."""
        limit = self._timeout(timeout)
        async with self._client_scope() as client:
            return await self._fetch_with(client, uri, limit)

    async def fetch_and_verify(
        self, uri: str, expected_hash: Bytes32Like, timeout: float | None = None
    ) -> bool:
        """
        Fetch `uri` and compare the SHA-256 of its body with `expected_hash`.

        `expected_hash` may be `0x` hex text or 32 raw bytes; hex case is irrelevant.
        """
        limit = self._timeout(timeout)
        async with self._client_scope() as client:
            return await self._verify_with(client, uri, expected_hash, limit)

    async def verify_content_record(
        self, record: ContentRecord, timeout: float | None = None
    ) -> bool:
        """
        Verify every `(uri, hash)` pair of `record` concurrently.

        Returns True only when all pairs match. The first fetch failure cancels the
        remaining fetches and is re-raised.
        """
        limit = self._timeout(timeout)
        async with self._client_scope() as client:
            tasks = [
                asyncio.ensure_future(self._verify_with(client, uri, expected, limit))
                for uri, expected in record.verification_pairs()
            ]
            try:
                results = await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise
        return all(results)


async def fetch_and_verify(
    uri: str,
    expected_hash: Bytes32Like,
    timeout: float = const.DEFAULT_VERIFY_TIMEOUT,
) -> bool:
    return await ContentVerifier(timeout=timeout).fetch_and_verify(uri, expected_hash)


async def verify_content_record(
    record: ContentRecord, timeout: float = const.DEFAULT_VERIFY_TIMEOUT
) -> bool:
    return await ContentVerifier(timeout=timeout).verify_content_record(record)
