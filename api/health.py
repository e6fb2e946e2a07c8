"""Vercel entrypoint that serves GET /health whatever path it is mounted on."""

from starlette.types import Receive, Scope, Send

from bfhl.main import app as bfhl_app


HEALTH_PATH = "/health"


async def app(scope: Scope, receive: Receive, send: Send) -> None:
    if scope["type"] == "http":
        scope = dict(scope, path=HEALTH_PATH, raw_path=HEALTH_PATH.encode())
    await bfhl_app(scope, receive, send)
