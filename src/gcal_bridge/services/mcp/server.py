from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from ...api import ApiState, get_api_state
from ...errors import CalendarBridgeError, NotAuthenticatedError

INSTRUCTIONS = (
    "Google Calendar MCP server. Use listEvents to read the user's upcoming events. "
    "If the tool reports that it is not authenticated, ask the user to open the /auth page."
)
NO_EVENTS = "No upcoming events found."

logger = logging.getLogger(__name__)


def build_mcp_server(state_factory: Callable[[], ApiState] = get_api_state) -> FastMCP:
    server = FastMCP(name="Google Calendar MCP", instructions=INSTRUCTIONS)

    @server.tool(name="listEvents", description="List upcoming Google Calendar events")
    async def list_events(maxResults: Optional[int] = None) -> str:  # noqa: N803
        state = state_factory()
        try:
            events = await asyncio.to_thread(state.calendar.list_events, maxResults)
        except NotAuthenticatedError as exc:
            raise ToolError(str(exc)) from exc
        except CalendarBridgeError as exc:
            logger.warning("MCP listEvents failed: %s", exc)
            raise ToolError(f"Error fetching events: {exc}") from exc
        if not events:
            return NO_EVENTS
        return "\n".join(event.to_text() for event in events)

    return server


server = build_mcp_server()


async def serve_mcp_stdio() -> None:
    logger.info("MCP server connected via stdio transport")
    await server.run_stdio_async()


def run_mcp_server() -> None:
    asyncio.run(serve_mcp_stdio())
