"""Analyze Image Command.

단일 이미지 분석 (레거시 analyze 엔드포인트).
실시간 루프와 같은 게이트/지식 베이스 정책을 사용합니다.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from typing import TYPE_CHECKING

from recicla.application.common.exceptions import ImageMissingError, InvalidImageError
from recicla.domain.exceptions import ModelNotReadyError

if TYPE_CHECKING:
    from recicla.application.classify.ports import ClassifierPort, FrameDecoderPort
    from recicla.application.classify.services import ConfidenceGate, RecyclingKnowledgeBase
    from recicla.domain.value_objects import ClassificationResult

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = re.compile(r"^data:image/[a-zA-Z0-9.+-]+;base64,")


class AnalyzeImageCommand:
    """이미지 분석 Command.

    Workflow:
        1. base64 / data URL 디코딩
        2. 프레임 디코딩 (Port)
        3. 분류기 호출 (Port)
        4. 신뢰도 게이트 + 지식 베이스 조회 (Service)
    """

    def __init__(
        self,
        classifier: "ClassifierPort",
        decoder: "FrameDecoderPort",
        gate: "ConfidenceGate",
        knowledge_base: "RecyclingKnowledgeBase",
    ) -> None:
        self._classifier = classifier
        self._decoder = decoder
        self._gate = gate
        self._kb = knowledge_base

    async def execute(self, image_data: str | None) -> "ClassificationResult":
        """이미지를 분석합니다.

        Raises:
            ImageMissingError: 이미지 미전달
            InvalidImageError: 디코딩 실패
            ModelNotReadyError: 분류 모델 미로드
        """
        if not image_data or not image_data.strip():
            raise ImageMissingError()
        if not self._classifier.is_ready:
            raise ModelNotReadyError()

        payload = self._decode_base64(image_data)
        frame = self._decoder.decode(payload)

        predictions = await self._classifier.predict(frame)
        result = self._gate.evaluate(predictions)
        if result is None:
            logger.warning("Analyze returned no predictions")
            result = self._kb.build_result(self._kb.default_label, 0)

        logger.info(
            "Image analyzed",
            extra={"label": result.label, "confidence": result.confidence},
        )
        return result

    @staticmethod
    def _decode_base64(image_data: str) -> bytes:
        raw = DATA_URL_PREFIX.sub("", image_data.strip())
        try:
            payload = base64.b64decode(raw, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidImageError("not valid base64") from e
        if not payload:
            raise InvalidImageError("empty image")
        return payload
