"""Google Places HTTP 클라이언트.

Google Places Web Service의 HTTP 구현체.
- 텍스트 검색: GET /textsearch/json
- 상세 조회: GET /details/json (formatted_phone_number, website, opening_hours)
- 인증: key 쿼리 파라미터
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from recicla.application.disposal.ports import PlaceDetailsDTO, PlaceDTO, PlacesSearchPort
from recicla.domain.value_objects import GeoPoint

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api/place"
DEFAULT_TIMEOUT = 10.0
DETAILS_FIELDS = "formatted_phone_number,website,opening_hours"

# 결과 없음은 정상 응답으로 취급
OK_STATUSES = frozenset({"OK", "ZERO_RESULTS"})


class GooglePlacesHttpClient(PlacesSearchPort):
    """Google Places HTTP 클라이언트."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout)
        return self._client

    async def text_search(self, query: str, center: GeoPoint, radius_m: int) -> list[PlaceDTO]:
        """텍스트로 장소 검색."""
        client = await self._get_client()
        params: dict[str, Any] = {
            "query": query,
            "location": f"{center.lat},{center.lng}",
            "radius": radius_m,
            "key": self._api_key,
        }

        try:
            response = await client.get("/textsearch/json", params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Places API HTTP error",
                extra={"status_code": e.response.status_code, "query": query},
            )
            raise
        except httpx.TimeoutException:
            logger.error("Places API timeout", extra={"query": query})
            raise

        status = data.get("status", "OK")
        if status not in OK_STATUSES:
            logger.error(
                "Places API returned error status",
                extra={"status": status, "error_message": data.get("error_message")},
            )
            raise ValueError(f"Places API status {status}")

        places = self._parse_results(data.get("results", []))
        logger.info("Places text search completed", extra={"query": query, "count": len(places)})
        return places

    async def place_details(self, place_id: str) -> PlaceDetailsDTO | None:
        """장소 상세 조회."""
        client = await self._get_client()
        response = await client.get(
            "/details/json",
            params={"place_id": place_id, "fields": DETAILS_FIELDS, "key": self._api_key},
        )
        response.raise_for_status()
        result = response.json().get("result")
        if not result:
            return None

        opening_hours = result.get("opening_hours") or {}
        return PlaceDetailsDTO(
            phone=result.get("formatted_phone_number") or None,
            website=result.get("website") or None,
            weekday_text=tuple(opening_hours.get("weekday_text") or ()),
        )

    @staticmethod
    def _parse_results(results: list[dict[str, Any]]) -> list[PlaceDTO]:
        places: list[PlaceDTO] = []
        for item in results:
            location = (item.get("geometry") or {}).get("location") or {}
            lat = location.get("lat")
            lng = location.get("lng")
            place_id = item.get("place_id")
            if lat is None or lng is None or not place_id:
                continue
            places.append(
                PlaceDTO(
                    place_id=place_id,
                    name=item.get("name", ""),
                    lat=float(lat),
                    lng=float(lng),
                    formatted_address=item.get("formatted_address") or None,
                    vicinity=item.get("vicinity") or None,
                    rating=item.get("rating"),
                    types=tuple(item.get("types") or ()),
                )
            )
        return places

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
