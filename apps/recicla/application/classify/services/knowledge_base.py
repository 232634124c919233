"""Recycling Knowledge Base Service."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from recicla.domain.constants import (
    DEFAULT_LABEL,
    LEGACY_DETECTOR_GUIDANCE,
    LIVE_MODEL_GUIDANCE,
    UNIDENTIFIED_GUIDANCE,
)
from recicla.domain.value_objects import ClassificationResult, RecyclingGuidance


class RecyclingKnowledgeBase:
    """라벨 → 배출 안내 조회.

    정확히 일치하는 라벨만 찾고, 없으면 미확인(Unidentified) 항목을 돌려줍니다.
    미확인 항목은 설정된 기본 라벨 키로도 등록됩니다.
    """

    def __init__(
        self,
        entries: Mapping[str, RecyclingGuidance] | None = None,
        default_label: str = DEFAULT_LABEL,
    ) -> None:
        if entries is None:
            entries = {**LIVE_MODEL_GUIDANCE, **LEGACY_DETECTOR_GUIDANCE}
        table = dict(entries)
        table[default_label] = UNIDENTIFIED_GUIDANCE
        self._entries: Mapping[str, RecyclingGuidance] = MappingProxyType(table)
        self._default_label = default_label

    @property
    def default_label(self) -> str:
        return self._default_label

    @property
    def labels(self) -> list[str]:
        """미확인 라벨을 제외한 등록 라벨 목록."""
        return [label for label in self._entries if label != self._default_label]

    def lookup(self, label: str) -> RecyclingGuidance:
        return self._entries.get(label, UNIDENTIFIED_GUIDANCE)

    def contains(self, label: str) -> bool:
        return label in self._entries

    def build_result(self, label: str, confidence: int) -> ClassificationResult:
        """라벨과 신뢰도로 ClassificationResult를 만듭니다."""
        return ClassificationResult.from_guidance(label, self.lookup(label), confidence)
