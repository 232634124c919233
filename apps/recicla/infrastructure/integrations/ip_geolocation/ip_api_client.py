"""IP 기반 위치 추정 클라이언트 (ip-api.com).

브라우저 위치 권한을 쓸 수 없는 클라이언트를 위한 근사 위치.
- GET /json/{ip}?fields=status,message,lat,lon
- 403: 접근 거부, status=fail: 위치 불가 (사설 IP 등)
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable

import httpx

from recicla.application.disposal.ports import GeolocatorPort, LocateOptions
from recicla.domain.exceptions import LocationUnavailableError, LocationUnavailableReason
from recicla.domain.value_objects import GeoPoint

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://ip-api.com/json"
RESPONSE_FIELDS = "status,message,lat,lon"
DEFAULT_CACHE_TTL = 600.0
DEFAULT_CACHE_MAX_ENTRIES = 1024


class IpApiGeolocator(GeolocatorPort):
    """ip-api.com 위치 추정.

    maximum_age 이내의 이전 결과는 캐시에서 반환합니다.
    캐시는 cache_ttl이 지난 항목을 쓰기 시점에 제거하고, max_entries를 넘으면
    가장 오래된 항목부터 버립니다.
    """

    def __init__(
        self,
        url: str = DEFAULT_URL,
        cache_ttl: float = DEFAULT_CACHE_TTL,
        max_entries: int = DEFAULT_CACHE_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be positive")
        self._url = url.rstrip("/")
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()
        self._cache_ttl = cache_ttl
        self._max_entries = max_entries
        self._clock = clock
        self._cache: dict[str, tuple[float, GeoPoint]] = {}

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient()
        return self._client

    async def locate(self, client_ip: str | None, options: LocateOptions) -> GeoPoint:
        key = client_ip or ""
        cached = self._cache.get(key)
        if cached and options.maximum_age > 0:
            fetched_at, point = cached
            max_age = min(options.maximum_age, self._cache_ttl)
            if self._clock() - fetched_at <= max_age:
                return point

        client = await self._get_client()
        url = f"{self._url}/{client_ip}" if client_ip else self._url
        try:
            response = await client.get(
                url, params={"fields": RESPONSE_FIELDS}, timeout=options.timeout
            )
        except httpx.TimeoutException:
            raise LocationUnavailableError(LocationUnavailableReason.TIMEOUT) from None
        except httpx.HTTPError as e:
            logger.warning("IP geolocation request failed", extra={"error": str(e)})
            raise LocationUnavailableError(LocationUnavailableReason.POSITION_UNAVAILABLE) from e

        if response.status_code == 403:
            raise LocationUnavailableError(LocationUnavailableReason.PERMISSION_DENIED)
        if response.status_code >= 400:
            raise LocationUnavailableError(LocationUnavailableReason.POSITION_UNAVAILABLE)

        data = response.json()
        if data.get("status") != "success" or data.get("lat") is None or data.get("lon") is None:
            logger.info("IP geolocation returned no position", extra={"message": data.get("message")})
            raise LocationUnavailableError(LocationUnavailableReason.POSITION_UNAVAILABLE)

        point = GeoPoint(lat=float(data["lat"]), lng=float(data["lon"]))
        self._remember(key, point)
        return point

    def _remember(self, key: str, point: GeoPoint) -> None:
        now = self._clock()
        expired = [
            k for k, (fetched_at, _) in self._cache.items() if now - fetched_at > self._cache_ttl
        ]
        for k in expired:
            del self._cache[k]
        # 삽입 순서 = 최신성 순서
        self._cache.pop(key, None)
        while len(self._cache) >= self._max_entries:
            del self._cache[next(iter(self._cache))]
        self._cache[key] = (now, point)

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
