"""Prediction Value Object."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class Prediction:
    """분류 모델의 클래스별 예측값."""

    label: str
    probability: float

    @property
    def confidence_percent(self) -> int:
        """확률을 0~100 정수 퍼센트로 변환 (0.5는 올림)."""
        percent = math.floor(self.probability * 100 + 0.5)
        return max(0, min(100, int(percent)))

    @staticmethod
    def best_of(predictions: Iterable[Prediction]) -> Prediction | None:
        """확률이 가장 높은 예측을 반환합니다.

        동률이면 먼저 나온 항목이 이깁니다. 비어 있으면 None.
        """
        best: Prediction | None = None
        for prediction in predictions:
            if best is None or prediction.probability > best.probability:
                best = prediction
        return best
