"""Nominatim 역지오코딩 HTTP 클라이언트.

사용 정책: 식별 가능한 User-Agent 헤더가 없으면 요청이 거부됩니다.
- 역지오코딩: GET /reverse?format=json&lat=..&lon=..&addressdetails=1
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from recicla.application.disposal.ports import ReverseGeocodeDTO, ReverseGeocoderPort
from recicla.domain.value_objects import GeoPoint

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://nominatim.openstreetmap.org"
DEFAULT_USER_AGENT = "ReciclaApp/1.0"
DEFAULT_TIMEOUT = 10.0


class NominatimHttpClient(ReverseGeocoderPort):
    """Nominatim 클라이언트."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not user_agent.strip():
            raise ValueError("Nominatim requires an identifying User-Agent")
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self._base_url,
                        headers={"User-Agent": self._user_agent},
                        timeout=self._timeout,
                    )
        return self._client

    async def reverse(
        self, point: GeoPoint, address_details: bool = True
    ) -> ReverseGeocodeDTO | None:
        """좌표 → 주소 구성요소."""
        client = await self._get_client()
        params: dict[str, str | float | int] = {
            "format": "json",
            "lat": point.lat,
            "lon": point.lng,
        }
        if address_details:
            params["addressdetails"] = 1

        try:
            response = await client.get("/reverse", params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Nominatim HTTP error",
                extra={"status_code": e.response.status_code, "lat": point.lat, "lng": point.lng},
            )
            raise

        if not isinstance(data, dict) or "error" in data:
            logger.info("Nominatim found no address", extra={"lat": point.lat, "lng": point.lng})
            return None

        address = {k: str(v) for k, v in (data.get("address") or {}).items()}
        return ReverseGeocodeDTO(address=address, display_name=data.get("display_name"))

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
