"""Application services orchestrating data access and domain logic."""

from __future__ import annotations

from .auth import OAuthService
from .calendar import DELETE_CONFIRMATION, CalendarService
from .context import ServiceContext

__all__ = ["CalendarService", "DELETE_CONFIRMATION", "OAuthService", "ServiceContext"]
