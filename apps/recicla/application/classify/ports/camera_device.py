"""Camera Device Port.

카메라 하드웨어 추상화. 권한 요청/프레임 전달 같은 콜백 기반 장치 API를
명시적인 async 연산으로 노출합니다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recicla.domain.enums import FacingMode
    from recicla.domain.value_objects import Frame


class CameraStreamPort(ABC):
    """열린 카메라 스트림 (하드웨어 핸들 1개)."""

    @property
    @abstractmethod
    def supports_torch(self) -> bool:
        """토치(플래시) 제어 가능 여부."""
        ...

    @abstractmethod
    async def read_frame(self) -> Frame:
        """현재 프레임. 준비되지 않았으면 크기 0 프레임."""
        ...

    @abstractmethod
    async def set_torch(self, on: bool) -> None:
        """토치 점등/소등."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """모든 트랙을 중지하고 장치를 해제합니다."""
        ...


class CameraDevicePort(ABC):
    """카메라 장치 포트."""

    @abstractmethod
    async def open(self, facing: FacingMode, width: int, height: int) -> CameraStreamPort:
        """주어진 방향/해상도로 스트림을 엽니다.

        Raises:
            CameraUnavailableError: 권한 거부 또는 일치하는 장치 없음
        """
        ...
