from __future__ import annotations

from enum import Enum


class Intent(str, Enum):
    LIST = "list_events"
    CREATE = "create_event"
    UPDATE = "update_event"
    DELETE = "delete_event"
    CHAT = "chat"

    @classmethod
    def from_label(cls, label: str) -> "Intent":
        """Map a classifier label by exact match; anything else is small talk."""

        normalized = (label or "").strip()
        for intent in cls:
            if intent is not cls.CHAT and intent.value == normalized:
                return intent
        return cls.CHAT
