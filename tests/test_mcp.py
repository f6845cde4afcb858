"""Tests for the MCP listEvents tool over the in-memory transport."""

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from gcal_bridge.services.mcp import build_mcp_server
from gcal_bridge.services.mcp.server import NO_EVENTS


def _text(result) -> str:
    return result.content[0].text


async def test_list_events_tool_is_registered(state):
    server = build_mcp_server(lambda: state)
    async with Client(server) as client:
        tools = await client.list_tools()
    assert [tool.name for tool in tools] == ["listEvents"]
    assert "maxResults" in tools[0].inputSchema["properties"]


async def test_list_events_tool_formats_lines(signed_in, gateway):
    gateway.add("Standup", "2026-03-03T09:00:00+00:00")
    gateway.add("Review", "2026-03-04T14:00:00+00:00")
    gateway.add("Retro", "2026-03-05T16:00:00+00:00")
    server = build_mcp_server(lambda: signed_in)

    async with Client(server) as client:
        result = await client.call_tool("listEvents", {"maxResults": 2})

    assert _text(result) == "Standup - 2026-03-03T09:00:00+00:00\nReview - 2026-03-04T14:00:00+00:00"


async def test_list_events_tool_with_empty_calendar(signed_in):
    server = build_mcp_server(lambda: signed_in)
    async with Client(server) as client:
        result = await client.call_tool("listEvents", {})
    assert _text(result) == NO_EVENTS


async def test_list_events_tool_before_auth_is_error(state):
    """The tool shares the HTTP server's credential slot, which is still empty."""
    server = build_mcp_server(lambda: state)
    async with Client(server) as client:
        with pytest.raises(ToolError) as excinfo:
            await client.call_tool("listEvents", {})
    assert "Not authenticated" in str(excinfo.value)


async def test_tool_sees_credential_set_through_http_state(state, credential_store):
    from google.oauth2.credentials import Credentials

    server = build_mcp_server(lambda: state)
    credential_store.set(Credentials(token="shared"))

    async with Client(server) as client:
        result = await client.call_tool("listEvents", {})
    assert _text(result) == NO_EVENTS
