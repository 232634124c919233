"""Classifier Port.

외부 이미지 분류 모델 추상화. 모델 자체는 불투명한 원격 기능으로 취급합니다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recicla.domain.value_objects import Frame, Prediction


class ClassifierPort(ABC):
    """이미지 분류기 포트."""

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """모델 로드 완료 여부."""
        ...

    @abstractmethod
    async def load(self) -> None:
        """모델을 비동기로 로드합니다. 실패 시 예외를 그대로 전파합니다."""
        ...

    @abstractmethod
    async def predict(self, frame: Frame) -> list[Prediction]:
        """프레임을 분류합니다.

        Returns:
            클래스별 예측 목록 (확률 합이 1일 필요는 없음)
        """
        ...

    async def close(self) -> None:
        """리소스 정리 (optional)."""
        pass
