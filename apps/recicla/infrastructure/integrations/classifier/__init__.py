from recicla.infrastructure.integrations.classifier.http_classifier import HttpClassifier
from recicla.infrastructure.integrations.classifier.simulated_classifier import (
    SimulatedClassifier,
)

__all__ = ["HttpClassifier", "SimulatedClassifier"]
