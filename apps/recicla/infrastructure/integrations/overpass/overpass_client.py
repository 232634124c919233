"""Overpass API HTTP 클라이언트.

OpenStreetMap 오픈 데이터 조회 (Overpass QL 인터프리터).
- amenity=recycling 노드/웨이
- recycling:plastic|glass|paper=yes 노드
- way는 `out center`로 중심 좌표를 받습니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from recicla.application.disposal.ports import OpenDataPort, OsmElementDTO
from recicla.domain.value_objects import GeoPoint

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://overpass-api.de/api/interpreter"
DEFAULT_TIMEOUT = 30.0
QUERY_TIMEOUT_SECONDS = 25

RECYCLING_QUERY_TEMPLATE = """
[out:json][timeout:{timeout}];
(
  node["amenity"="recycling"](around:{radius},{lat},{lng});
  node["recycling:plastic"="yes"](around:{radius},{lat},{lng});
  node["recycling:glass"="yes"](around:{radius},{lat},{lng});
  node["recycling:paper"="yes"](around:{radius},{lat},{lng});
  way["amenity"="recycling"](around:{radius},{lat},{lng});
);
out center;
"""


class OverpassHttpClient(OpenDataPort):
    """Overpass API 클라이언트."""

    def __init__(self, url: str = DEFAULT_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._url = url
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    @staticmethod
    def build_query(center: GeoPoint, radius_m: int) -> str:
        return RECYCLING_QUERY_TEMPLATE.format(
            timeout=QUERY_TIMEOUT_SECONDS, radius=radius_m, lat=center.lat, lng=center.lng
        )

    async def find_recycling_amenities(
        self, center: GeoPoint, radius_m: int
    ) -> list[OsmElementDTO]:
        """반경 내 재활용 시설 조회."""
        client = await self._get_client()
        query = self.build_query(center, radius_m)

        try:
            response = await client.post(self._url, data={"data": query})
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Overpass API HTTP error",
                extra={"status_code": e.response.status_code},
            )
            raise
        except httpx.TimeoutException:
            logger.error("Overpass API timeout", extra={"radius_m": radius_m})
            raise

        elements = [self._parse_element(item) for item in data.get("elements", [])]
        logger.info("Overpass query completed", extra={"count": len(elements)})
        return elements

    @staticmethod
    def _parse_element(item: dict[str, Any]) -> OsmElementDTO:
        center = item.get("center") or {}
        lat = item.get("lat", center.get("lat"))
        lng = item.get("lon", center.get("lon"))
        return OsmElementDTO(
            id=item.get("id", ""),
            type=item.get("type", "node"),
            lat=float(lat) if lat is not None else None,
            lng=float(lng) if lng is not None else None,
            tags=dict(item.get("tags") or {}),
        )

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
