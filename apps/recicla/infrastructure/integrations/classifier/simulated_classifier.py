"""시뮬레이션 분류기.

원격 모델이 설정되지 않았을 때 레거시 analyze 흐름에 사용합니다.
1~3개의 라벨을 무작위로 골라 첫 라벨에 0.80~0.99 확률을 부여합니다.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from recicla.application.classify.ports import ClassifierPort
from recicla.domain.value_objects import Frame, Prediction

logger = logging.getLogger(__name__)


class SimulatedClassifier(ClassifierPort):
    """무작위 예측을 반환하는 분류기."""

    def __init__(self, labels: Sequence[str], rng: random.Random | None = None) -> None:
        if not labels:
            raise ValueError("SimulatedClassifier requires at least one label")
        self._labels = list(labels)
        self._rng = rng or random.Random()
        self._ready = False

    @property
    def is_ready(self) -> bool:
        return self._ready

    async def load(self) -> None:
        self._ready = True
        logger.info("Simulated classifier ready", extra={"labels_count": len(self._labels)})

    async def predict(self, frame: Frame) -> list[Prediction]:
        count = min(self._rng.randint(1, 3), len(self._labels))
        detected = self._rng.sample(self._labels, count)

        top = self._rng.uniform(0.80, 0.99)
        rest = (1.0 - top) / max(count - 1, 1)
        return [
            Prediction(label=label, probability=top if i == 0 else rest)
            for i, label in enumerate(detected)
        ]
