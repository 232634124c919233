"""Locate User Query.

사용자 위치 획득 Query. 권한 거부는 즉시 실패하고,
위치 불가/타임아웃은 정확도를 낮춘 옵션으로 한 번 재시도합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from recicla.application.disposal.ports import LocateOptions
from recicla.domain.exceptions import LocationUnavailableError

if TYPE_CHECKING:
    from recicla.application.disposal.ports import GeolocatorPort
    from recicla.domain.value_objects import GeoPoint

logger = logging.getLogger(__name__)

PRECISE_OPTIONS = LocateOptions(high_accuracy=True, timeout=10.0, maximum_age=0.0)
RELAXED_OPTIONS = LocateOptions(high_accuracy=False, timeout=20.0, maximum_age=300.0)


class LocateUserQuery:
    """사용자 위치 조회 Query."""

    def __init__(
        self,
        geolocator: "GeolocatorPort",
        precise: LocateOptions = PRECISE_OPTIONS,
        relaxed: LocateOptions = RELAXED_OPTIONS,
    ) -> None:
        self._geolocator = geolocator
        self._precise = precise
        self._relaxed = relaxed

    async def execute(self, client_ip: str | None = None) -> "GeoPoint":
        """위치를 반환합니다.

        Raises:
            LocationUnavailableError: 재시도 후에도 실패, 또는 권한 거부
        """
        try:
            return await self._geolocator.locate(client_ip, self._precise)
        except LocationUnavailableError as e:
            if not e.retryable:
                raise
            logger.info(
                "Precise location failed, retrying with relaxed options",
                extra={"reason": e.reason.value},
            )
        return await self._geolocator.locate(client_ip, self._relaxed)
