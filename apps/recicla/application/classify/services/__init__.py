"""Classification Services (순수 로직)."""

from recicla.application.classify.services.confidence_gate import ConfidenceGate
from recicla.application.classify.services.knowledge_base import RecyclingKnowledgeBase

__all__ = ["ConfidenceGate", "RecyclingKnowledgeBase"]
