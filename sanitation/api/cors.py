from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send

# Routes that answer their own preflight with permissive headers.
SELF_CORS_PATHS = frozenset({"/ai-assistant"})


class PortalCORSMiddleware(CORSMiddleware):
    """App-wide CORS that leaves ``exempt_paths`` to their own handlers."""

    def __init__(self, app: ASGIApp, exempt_paths=frozenset(), **kwargs):
        super().__init__(app, **kwargs)
        self.exempt_paths = frozenset(exempt_paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"] in self.exempt_paths:
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)


def install_cors(app: FastAPI, allow_origins: list[str]) -> None:
    app.add_middleware(
        PortalCORSMiddleware,
        exempt_paths=SELF_CORS_PATHS,
        allow_origins=allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
