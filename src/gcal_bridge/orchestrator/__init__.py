"""Chat intent classification and dispatch."""

from __future__ import annotations

from .classifier import IntentClassifier, OpenAIIntentClassifier, build_classifier
from .dispatcher import ChatDispatcher, ChatReply

__all__ = [
    "ChatDispatcher",
    "ChatReply",
    "IntentClassifier",
    "OpenAIIntentClassifier",
    "build_classifier",
]
