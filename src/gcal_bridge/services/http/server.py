from __future__ import annotations

import html
import logging
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from ...api import ApiState, get_api_state
from ...errors import (
    BadRequestError,
    CalendarBridgeError,
    NotAuthenticatedError,
)
from ...static import static_dir
from .models import (
    ChatRequest,
    CreateEventRequest,
    DeleteEventRequest,
    ListEventsRequest,
    UpdateEventRequest,
    serialize_event,
)

logger = logging.getLogger(__name__)

BAD_REQUEST_BODY = {"error": "Bad request."}
SERVER_ERROR_BODY = {"error": "Something went wrong. Please try again."}


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotAuthenticatedError)
    async def _not_authenticated(_request: Request, exc: NotAuthenticatedError) -> JSONResponse:
        logger.warning("Rejected unauthenticated calendar call")
        return JSONResponse(status_code=401, content={"error": str(exc)})

    @app.exception_handler(BadRequestError)
    async def _bad_request(_request: Request, exc: BadRequestError) -> JSONResponse:
        logger.info("Bad request: %s", exc)
        return JSONResponse(status_code=400, content=BAD_REQUEST_BODY)

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(_request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Request validation failed: %s", exc.errors())
        return JSONResponse(status_code=400, content=BAD_REQUEST_BODY)

    @app.exception_handler(CalendarBridgeError)
    async def _service_failure(request: Request, exc: CalendarBridgeError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content=SERVER_ERROR_BODY)

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content=SERVER_ERROR_BODY)


def _list_events(state: ApiState, max_results: Optional[int]) -> JSONResponse:
    events = state.calendar.list_events(max_results)
    return JSONResponse({"events": [serialize_event(event) for event in events]})


def create_app() -> FastAPI:
    app = FastAPI(title="Google Calendar Bridge", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _install_error_handlers(app)

    @app.get("/auth", response_class=HTMLResponse)
    def start_auth(state: ApiState = Depends(get_api_state)) -> HTMLResponse:
        url = html.escape(state.auth.start(), quote=True)
        return HTMLResponse(
            "<h2>OAuth Flow Started</h2>"
            "<p>Your browser should have opened automatically.</p>"
            f'<p>If not, click here: <a href="{url}" target="_blank">Authorize with Google</a></p>'
        )

    @app.get("/oauth2callback", response_class=HTMLResponse)
    def oauth_callback(code: Optional[str] = None, state: ApiState = Depends(get_api_state)) -> HTMLResponse:
        state.auth.exchange_code(code)
        return HTMLResponse("Authentication successful! You can close this tab.")

    @app.post("/auth/logout")
    def logout(state: ApiState = Depends(get_api_state)) -> JSONResponse:
        state.auth.sign_out()
        return JSONResponse({"authenticated": False})

    @app.get("/api/status")
    def status(state: ApiState = Depends(get_api_state)) -> JSONResponse:
        return JSONResponse(
            {
                "authenticated": state.auth.is_authenticated(),
                "llm_configured": state.chat.classifier is not None,
            }
        )

    @app.get("/api/listEvents")
    def list_events_query(maxResults: Optional[int] = None, state: ApiState = Depends(get_api_state)) -> JSONResponse:  # noqa: N803
        return _list_events(state, maxResults)

    @app.post("/api/listEvents")
    def list_events(
        request: Optional[ListEventsRequest] = None,
        state: ApiState = Depends(get_api_state),
    ) -> JSONResponse:
        return _list_events(state, request.max_results if request else None)

    @app.post("/api/createEvent")
    def create_event(request: CreateEventRequest, state: ApiState = Depends(get_api_state)) -> JSONResponse:
        event = state.calendar.create_event(request.summary, request.start, request.end)
        return JSONResponse(serialize_event(event))

    @app.post("/api/updateEvent")
    def update_event(request: UpdateEventRequest, state: ApiState = Depends(get_api_state)) -> JSONResponse:
        event = state.calendar.update_event(
            request.event_id,
            summary=request.summary,
            start=request.start,
            end=request.end,
        )
        return JSONResponse(serialize_event(event))

    @app.post("/api/deleteEvent")
    def delete_event(request: DeleteEventRequest, state: ApiState = Depends(get_api_state)) -> JSONResponse:
        message = state.calendar.delete_event(request.event_id)
        return JSONResponse({"message": message})

    @app.post("/api/chat")
    def chat(request: ChatRequest, state: ApiState = Depends(get_api_state)) -> JSONResponse:
        reply = state.chat.handle(request.message)
        if isinstance(reply, list):
            return JSONResponse({"reply": [serialize_event(event) for event in reply]})
        return JSONResponse({"reply": reply})

    # Registered last so the API routes take precedence over the catch-all mount.
    app.mount("/", StaticFiles(directory=static_dir(), html=True), name="static")
    return app


app = create_app()


async def serve_http(host: str = "127.0.0.1", port: int = 4153) -> None:
    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("OAuth + API server running at http://%s:%s", host, port)
    await serve(app, config)


def run_local_server(host: str = "127.0.0.1", port: int = 4153) -> None:
    import asyncio

    asyncio.run(serve_http(host=host, port=port))
