from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol

from openai import OpenAI, OpenAIError

from ..config import AppSettings, get_settings
from ..domain import EventDraft, Intent
from ..errors import ExternalServiceError
from .prompts import CLASSIFIER_PROMPT, CONVERSATION_PROMPT, EXTRACTION_PROMPT_TEMPLATE

logger = logging.getLogger(__name__)


class IntentClassifier(Protocol):
    def classify(self, message: str) -> Intent: ...

    def extract_event(self, message: str) -> Optional[EventDraft]: ...

    def converse(self, message: str) -> str: ...


class OpenAIIntentClassifier:
    """Single-turn chat-completion calls; no history is sent or kept."""

    def __init__(self, settings: Optional[AppSettings] = None, *, client: Optional[OpenAI] = None) -> None:
        self.settings = settings or get_settings()
        self._client = client or self._build_client()

    # ------------------------------------------------------------------ public API

    def classify(self, message: str) -> Intent:
        label = self._complete(
            [{"role": "system", "content": CLASSIFIER_PROMPT}, {"role": "user", "content": message}],
            temperature=0,
        ).strip()
        intent = Intent.from_label(label)
        logger.debug("Classified message as %r -> %s", label, intent.value)
        return intent

    def extract_event(self, message: str) -> Optional[EventDraft]:
        prompt = EXTRACTION_PROMPT_TEMPLATE.format(
            now=datetime.now(timezone.utc).isoformat(timespec="minutes"),
            timezone=self.settings.google.timezone,
        )
        content = self._complete(
            [{"role": "system", "content": prompt}, {"role": "user", "content": message}],
            temperature=0,
            response_format={"type": "json_object"},
        )
        return EventDraft.from_payload(self._safe_json(content))

    def converse(self, message: str) -> str:
        content = self._complete(
            [{"role": "system", "content": CONVERSATION_PROMPT}, {"role": "user", "content": message}],
            temperature=0.7,
        )
        return content.strip()

    # ------------------------------------------------------------------ helpers

    def _build_client(self) -> OpenAI:
        return OpenAI(api_key=self.settings.llm.api_key, base_url=self.settings.llm.base_url)

    def _complete(self, messages: List[Dict[str, str]], **options: Any) -> str:
        try:
            completion = self._client.chat.completions.create(
                model=self.settings.llm.model,
                messages=messages,
                **options,
            )
        except OpenAIError as exc:
            logger.warning("Language model request failed: %s", exc)
            raise ExternalServiceError(f"Language model request failed: {exc}") from exc
        return completion.choices[0].message.content or ""

    def _safe_json(self, raw: str) -> Dict[str, Any]:
        if not raw:
            return {}
        try:
            parsed = json.loads(raw)
            return parsed if isinstance(parsed, dict) else {}
        except json.JSONDecodeError:
            return {}


def build_classifier(settings: Optional[AppSettings] = None) -> Optional[OpenAIIntentClassifier]:
    settings = settings or get_settings()
    if not settings.llm.is_configured:
        logger.warning(
            "Language model is not configured; chat is disabled. Missing: %s",
            ", ".join(settings.llm.missing_env_vars),
        )
        return None
    return OpenAIIntentClassifier(settings)
