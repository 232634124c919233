"""Camera Session Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from recicla.domain.enums import FacingMode


@dataclass
class CameraSession:
    """활성 카메라 세션.

    Camera Lifecycle Manager만 소유하며, 동시에 하나만 존재합니다.
    토치 토글은 같은 세션을 in-place로 변경합니다.

    Attributes:
        facing: 카메라 방향
        stream: 열린 하드웨어 스트림 핸들 (CameraStreamPort 구현체)
        torch_on: 토치 점등 여부
        session_id: 세션 식별 번호 (start/switch마다 증가)
    """

    facing: FacingMode
    stream: Any
    torch_on: bool = False
    session_id: int = 0
    published_results: int = field(default=0, compare=False)

    @property
    def supports_torch(self) -> bool:
        """후면 카메라이고 스트림이 토치를 지원하는지."""
        return self.facing.is_back and bool(getattr(self.stream, "supports_torch", False))
