"""Classification Services 단위 테스트."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from fakes import FakeClassifier
from recicla.application.classify import (
    AnalyzeImageCommand,
    ConfidenceGate,
    RecyclingKnowledgeBase,
)
from recicla.application.common.exceptions import ImageMissingError, InvalidImageError
from recicla.domain.constants import LIVE_MODEL_GUIDANCE, UNIDENTIFIED_GUIDANCE
from recicla.domain.enums import MaterialCategory
from recicla.domain.value_objects import Frame, Prediction


class TestRecyclingKnowledgeBase:
    """RecyclingKnowledgeBase 테스트."""

    def test_lookup_live_label(self, knowledge_base: RecyclingKnowledgeBase) -> None:
        guidance = knowledge_base.lookup("Garrafa pet")
        assert guidance.is_recyclable is True
        assert guidance.category is MaterialCategory.RECYCLABLE

    def test_lookup_requires_exact_match(self, knowledge_base: RecyclingKnowledgeBase) -> None:
        """'Vidro '의 후행 공백까지 일치해야 함."""
        assert knowledge_base.contains("Vidro ")
        assert not knowledge_base.contains("Vidro")
        assert knowledge_base.lookup("Vidro") == UNIDENTIFIED_GUIDANCE

    def test_lookup_legacy_label_with_code(self, knowledge_base: RecyclingKnowledgeBase) -> None:
        guidance = knowledge_base.lookup("plastic bottle")
        assert guidance.recycling_code == "PET"

    def test_hazardous_entries(self, knowledge_base: RecyclingKnowledgeBase) -> None:
        assert knowledge_base.lookup("Pilha/bateria").category is MaterialCategory.HAZARDOUS_WASTE
        assert knowledge_base.lookup("battery").category is MaterialCategory.HAZARDOUS_WASTE

    def test_unknown_label_is_unidentified(self, knowledge_base: RecyclingKnowledgeBase) -> None:
        assert knowledge_base.lookup("spaceship").category is MaterialCategory.UNIDENTIFIED

    def test_default_label_registered(self, knowledge_base: RecyclingKnowledgeBase) -> None:
        assert knowledge_base.default_label == "Defaut"
        assert knowledge_base.contains("Defaut")
        assert "Defaut" not in knowledge_base.labels

    def test_custom_default_label(self) -> None:
        kb = RecyclingKnowledgeBase(entries=LIVE_MODEL_GUIDANCE, default_label="Unknown")
        assert kb.lookup("Unknown") == UNIDENTIFIED_GUIDANCE
        assert set(kb.labels) == set(LIVE_MODEL_GUIDANCE)

    def test_build_result(self, knowledge_base: RecyclingKnowledgeBase) -> None:
        result = knowledge_base.build_result("cardboard", 77)
        assert result.label == "cardboard"
        assert result.confidence == 77
        assert result.is_recyclable is True


class TestConfidenceGate:
    """ConfidenceGate 테스트."""

    def test_confident_prediction_passes(self, gate: ConfidenceGate) -> None:
        result = gate.evaluate([Prediction("Garrafa pet", 0.9), Prediction("Esponja", 0.1)])
        assert result is not None
        assert result.label == "Garrafa pet"
        assert result.confidence == 90
        assert result.is_recyclable is True

    def test_threshold_is_inclusive(self, gate: ConfidenceGate) -> None:
        result = gate.evaluate([Prediction("Papelão", 0.5)])
        assert result is not None
        assert result.label == "Papelão"

    def test_low_confidence_forced_to_default(self, gate: ConfidenceGate) -> None:
        result = gate.evaluate([Prediction("Papelão", 0.49), Prediction("Esponja", 0.3)])
        assert result is not None
        assert result.label == "Defaut"
        assert result.category is MaterialCategory.UNIDENTIFIED
        assert result.is_recyclable is False
        # 신뢰도는 원래 최고 확률을 유지
        assert result.confidence == 49

    def test_default_label_always_unidentified(self, gate: ConfidenceGate) -> None:
        result = gate.evaluate([Prediction("Defaut", 0.99)])
        assert result is not None
        assert result.is_unidentified

    def test_tie_first_wins(self, gate: ConfidenceGate) -> None:
        result = gate.evaluate([Prediction("Esponja", 0.6), Prediction("Papelão", 0.6)])
        assert result is not None
        assert result.label == "Esponja"

    def test_unknown_confident_label_is_unidentified(self, gate: ConfidenceGate) -> None:
        result = gate.evaluate([Prediction("mystery", 0.95)])
        assert result is not None
        assert result.label == "mystery"
        assert result.is_unidentified

    def test_empty_predictions(self, gate: ConfidenceGate) -> None:
        assert gate.evaluate([]) is None

    def test_custom_threshold(self, knowledge_base: RecyclingKnowledgeBase) -> None:
        strict = ConfidenceGate(knowledge_base, threshold=70)
        assert strict.gate_label("Papelão", 69) == "Defaut"
        assert strict.gate_label("Papelão", 70) == "Papelão"

    @pytest.mark.parametrize("threshold", [-1, 101])
    def test_invalid_threshold(self, knowledge_base: RecyclingKnowledgeBase, threshold: int) -> None:
        with pytest.raises(ValueError):
            ConfidenceGate(knowledge_base, threshold=threshold)


class TestAnalyzeImageCommand:
    """AnalyzeImageCommand 테스트."""

    @pytest.fixture
    def decoder(self) -> MagicMock:
        decoder = MagicMock()
        decoder.decode.return_value = Frame(data=None, width=8, height=8)
        return decoder

    @pytest.mark.asyncio
    async def test_strips_data_url_prefix(
        self,
        decoder: MagicMock,
        gate: ConfidenceGate,
        knowledge_base: RecyclingKnowledgeBase,
    ) -> None:
        command = AnalyzeImageCommand(FakeClassifier(), decoder, gate, knowledge_base)

        result = await command.execute("data:image/png;base64,aGVsbG8=")

        decoder.decode.assert_called_once_with(b"hello")
        assert result.label == "Garrafa pet"

    @pytest.mark.asyncio
    async def test_no_predictions_returns_unidentified(
        self,
        decoder: MagicMock,
        gate: ConfidenceGate,
        knowledge_base: RecyclingKnowledgeBase,
    ) -> None:
        classifier = FakeClassifier()
        classifier.predictions = []
        command = AnalyzeImageCommand(classifier, decoder, gate, knowledge_base)

        result = await command.execute("aGVsbG8=")

        assert result.label == "Defaut"
        assert result.confidence == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("image_data", [None, "", "   "])
    async def test_missing_image(
        self,
        image_data: str | None,
        decoder: MagicMock,
        gate: ConfidenceGate,
        knowledge_base: RecyclingKnowledgeBase,
    ) -> None:
        command = AnalyzeImageCommand(FakeClassifier(), decoder, gate, knowledge_base)

        with pytest.raises(ImageMissingError):
            await command.execute(image_data)

    @pytest.mark.asyncio
    async def test_invalid_base64(
        self,
        decoder: MagicMock,
        gate: ConfidenceGate,
        knowledge_base: RecyclingKnowledgeBase,
    ) -> None:
        command = AnalyzeImageCommand(FakeClassifier(), decoder, gate, knowledge_base)

        with pytest.raises(InvalidImageError):
            await command.execute("not base64 !!")

        decoder.decode.assert_not_called()
