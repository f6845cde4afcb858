from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

from ..orchestrator import ChatDispatcher, IntentClassifier, build_classifier
from ..services import CalendarService, OAuthService, ServiceContext


@dataclass(slots=True)
class ApiState:
    """Services shared by the HTTP app and the MCP server."""

    context: ServiceContext = field(default_factory=ServiceContext)
    classifier: Optional[IntentClassifier] = None
    auth: OAuthService = field(init=False)
    calendar: CalendarService = field(init=False)
    chat: ChatDispatcher = field(init=False)

    def __post_init__(self) -> None:
        self.auth = OAuthService(self.context)
        self.calendar = CalendarService(self.context)
        self.chat = ChatDispatcher(calendar=self.calendar, classifier=self.classifier)


@lru_cache(maxsize=1)
def get_api_state() -> ApiState:
    context = ServiceContext()
    return ApiState(context=context, classifier=build_classifier(context.settings))
