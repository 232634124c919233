"""Confidence Gate Service."""

from __future__ import annotations

import logging
from typing import Iterable

from recicla.application.classify.services.knowledge_base import RecyclingKnowledgeBase
from recicla.domain.value_objects import ClassificationResult, Prediction

logger = logging.getLogger(__name__)


class ConfidenceGate:
    """신뢰도 게이트.

    정책:
    1. 확률 최댓값 클래스 선택 (동률이면 먼저 나온 클래스)
    2. 확률 → 정수 퍼센트 (반올림)
    3. 신뢰도 < threshold 또는 라벨 == 기본 라벨이면 기본 라벨로 강제
    4. 지식 베이스 조회 (없는 라벨은 미확인 항목)
    """

    def __init__(self, knowledge_base: RecyclingKnowledgeBase, threshold: int = 50) -> None:
        if not 0 <= threshold <= 100:
            raise ValueError(f"Invalid confidence threshold: {threshold}")
        self._kb = knowledge_base
        self._threshold = threshold

    @property
    def threshold(self) -> int:
        return self._threshold

    def gate_label(self, label: str, confidence: int) -> str:
        """게이트를 통과한 최종 라벨."""
        if confidence < self._threshold or label == self._kb.default_label:
            return self._kb.default_label
        return label

    def evaluate(self, predictions: Iterable[Prediction]) -> ClassificationResult | None:
        """예측 목록을 ClassificationResult로 변환합니다.

        Returns:
            결과, 예측이 비어 있으면 None
        """
        best = Prediction.best_of(predictions)
        if best is None:
            return None

        confidence = best.confidence_percent
        final_label = self.gate_label(best.label, confidence)
        if final_label != best.label:
            logger.debug(
                "Prediction gated to default label",
                extra={"raw_label": best.label, "confidence": confidence},
            )
        return self._kb.build_result(final_label, confidence)
