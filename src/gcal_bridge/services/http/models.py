from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain import CalendarEvent


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    summary: str
    start: str
    end: str = Field(default="")
    status: Optional[str] = Field(default=None)
    html_link: Optional[str] = Field(default=None, alias="htmlLink")
    description: Optional[str] = Field(default=None)
    location: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(cls, event: CalendarEvent) -> "EventPayload":
        return cls(
            id=event.id,
            summary=event.summary,
            start=event.start,
            end=event.end,
            status=event.status,
            html_link=event.html_link,
            description=event.description,
            location=event.location,
        )


def serialize_event(event: CalendarEvent) -> dict:
    return EventPayload.from_domain(event).model_dump(by_alias=True, exclude_none=True)


class ListEventsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    max_results: Optional[int] = Field(default=None, alias="maxResults", ge=1, le=2500)


class CreateEventRequest(BaseModel):
    summary: str = Field(min_length=1)
    start: str = Field(min_length=1)
    end: str = Field(min_length=1)


class UpdateEventRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event_id: str = Field(alias="eventId", min_length=1)
    summary: Optional[str] = Field(default=None)
    start: Optional[str] = Field(default=None)
    end: Optional[str] = Field(default=None)


class DeleteEventRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event_id: str = Field(alias="eventId", min_length=1)


class ChatRequest(BaseModel):
    message: str

