from __future__ import annotations

CLASSIFIER_PROMPT = """You classify messages sent to a Google Calendar assistant.
Reply with exactly one label and nothing else:
- list_events: the user wants to see upcoming events
- create_event: the user wants to add an event
- update_event: the user wants to change an existing event
- delete_event: the user wants to remove an event
- none: anything else"""

EXTRACTION_PROMPT_TEMPLATE = """Extract a calendar event from the user's message.
The current time is {now} and the user's timezone is {timezone}.
Respond with a JSON object: {{"summary": "...", "start": "YYYY-MM-DDTHH:MM:SS", "end": "YYYY-MM-DDTHH:MM:SS"}}.
Resolve relative dates against the current time. If no end is given, assume a 60 minute duration.
Use an empty string for any field the message does not let you determine."""

CONVERSATION_PROMPT = """You are a friendly calendar assistant.
Keep replies short and clear. No code fences.
You can list, create, update, and delete Google Calendar events when asked."""

UPDATE_INSTRUCTION = "To update an event, list your events and press the Update button next to it."
DELETE_INSTRUCTION = "To delete an event, list your events and use the buttons next to it."
CREATE_INSTRUCTION = (
    "I couldn't work out the title and times for that event. "
    "Try something like \"lunch with Sam tomorrow at 12:30\", or use the Create Event button."
)
