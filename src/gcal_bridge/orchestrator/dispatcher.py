from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from ..domain import CalendarEvent, Intent
from ..errors import BadRequestError, ConfigurationError
from ..services import CalendarService
from .classifier import IntentClassifier
from .prompts import CREATE_INSTRUCTION, DELETE_INSTRUCTION, UPDATE_INSTRUCTION

logger = logging.getLogger(__name__)

ChatReply = Union[str, List[CalendarEvent]]


@dataclass
class ChatDispatcher:
    """Route one chat message to a calendar operation or the conversational fallback."""

    calendar: CalendarService
    classifier: Optional[IntentClassifier] = None

    def handle(self, message: str) -> ChatReply:
        text = (message or "").strip()
        if not text:
            raise BadRequestError("message is required")
        if self.classifier is None:
            raise ConfigurationError("Language model is not configured. Set OPENAI_API_KEY.")

        intent = self.classifier.classify(text)
        logger.info("Chat intent: %s", intent.value)

        if intent is Intent.LIST:
            return self.calendar.list_events()
        if intent is Intent.CREATE:
            return self._create(text)
        if intent is Intent.UPDATE:
            return UPDATE_INSTRUCTION
        if intent is Intent.DELETE:
            return DELETE_INSTRUCTION
        return self.classifier.converse(text)

    def _create(self, text: str) -> str:
        draft = self.classifier.extract_event(text)
        if draft is None:
            return CREATE_INSTRUCTION
        try:
            event = self.calendar.create_event(draft.summary, draft.start, draft.end)
        except BadRequestError as exc:
            logger.info("Extracted event was rejected: %s", exc)
            return CREATE_INSTRUCTION
        return f"Created: {event.summary} ({event.start})"
