import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

import sanitation.config.config as configs
from sanitation.api.assistant import router as AssistantRouter
from sanitation.api.cors import install_cors
from sanitation.api.v1.route import api_router as MainRouter
from sanitation.client.auth.gotrue import auth_client
from sanitation.db import models  # noqa: F401
from sanitation.db.seed import seed_categories
from sanitation.db.session import Base, engine
from sanitation.errors import PortalError, ValidationError

logging.basicConfig(level=configs.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="sanitation_portal", version="0.1.0")
install_cors(app, configs.CORS_ALLOW_ORIGINS)
app.include_router(router=MainRouter, prefix="/api/v1")
app.include_router(router=AssistantRouter)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ValidationError.default_message
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    return f"{field}: {first['msg']}" if field else first["msg"]


@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed code=%s: %s", request.method, request.url.path, exc.error_code, exc.message)
    return JSONResponse({"error": exc.message, "code": exc.error_code}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        {"error": _validation_message(exc), "code": ValidationError.error_code},
        status_code=ValidationError.status_code,
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s failed unexpectedly", request.method, request.url.path)
    return JSONResponse(
        {"error": PortalError.default_message, "code": PortalError.error_code},
        status_code=500,
    )


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


@app.on_event("startup")
def create_tables() -> None:
    Base.metadata.create_all(bind=engine)
    seed_categories()


@app.on_event("shutdown")
def shutdown_event() -> None:
    auth_client.close()
