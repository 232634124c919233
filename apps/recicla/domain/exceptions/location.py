"""위치 관련 도메인 예외."""

from __future__ import annotations

from enum import Enum

from recicla.domain.exceptions.base import DomainError


class LocationUnavailableReason(str, Enum):
    """위치 획득 실패 사유."""

    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"


class LocationUnavailableError(DomainError):
    """사용자 위치를 얻을 수 없음.

    권한 거부는 사용자 조치가 필요하고, 나머지는 정확도를 낮춰 재시도할 수 있습니다.
    """

    def __init__(
        self,
        reason: LocationUnavailableReason = LocationUnavailableReason.POSITION_UNAVAILABLE,
    ) -> None:
        self.reason = reason
        super().__init__(f"Location unavailable: {reason.value}")

    @property
    def retryable(self) -> bool:
        return self.reason is not LocationUnavailableReason.PERMISSION_DENIED
