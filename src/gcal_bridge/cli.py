from __future__ import annotations

import argparse
import asyncio
import logging

from .config import get_settings
from .errors import ConfigurationError
from .logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Google Calendar bridge: chat UI, HTTP API and MCP tools.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API and the MCP stdio server together.")
    serve_parser.add_argument("--host", default=settings.server.host)
    serve_parser.add_argument("--port", type=int, default=settings.server.port)

    api_parser = subparsers.add_parser("api", help="Run only the HTTP API and chat page.")
    api_parser.add_argument("--host", default=settings.server.host)
    api_parser.add_argument("--port", type=int, default=settings.server.port)

    subparsers.add_parser("mcp", help="Run only the MCP server over stdio.")

    return parser


async def _serve_all(host: str, port: int) -> None:
    from .services.http import serve_http
    from .services.mcp import serve_mcp_stdio

    await asyncio.gather(serve_http(host=host, port=port), serve_mcp_stdio())


def main() -> None:
    try:
        get_settings()
    except ConfigurationError as exc:
        raise SystemExit(f"gcal-bridge: {exc}") from exc
    configure_logging()
    logging.getLogger(__name__).info("gcal-bridge starting")
    parser = build_parser()
    args = parser.parse_args()

    if args.command == "serve":
        asyncio.run(_serve_all(args.host, args.port))
    elif args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command == "mcp":
        from .services.mcp import run_mcp_server

        run_mcp_server()
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
