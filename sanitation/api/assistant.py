import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from sanitation.errors import PortalError
from sanitation.model.assistant.assistant_request import AssistantRequest
from sanitation.service.assistant.assistant import ai_assistant_service

logger = logging.getLogger(__name__)

router = APIRouter()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


@router.options("/ai-assistant")
async def ai_assistant_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post("/ai-assistant")
async def ai_assistant(request: Request):
    try:
        payload = await request.json()
        req = AssistantRequest.model_validate(payload)
        result = await ai_assistant_service(req)
        return JSONResponse(result.model_dump(), headers=CORS_HEADERS)
    except PortalError as exc:
        if exc.status_code == 429:
            return JSONResponse({"error": exc.message}, status_code=429, headers=CORS_HEADERS)
        logger.error("AI Assistant error: %s", exc.message)
        return JSONResponse({"error": exc.message}, status_code=500, headers=CORS_HEADERS)
    except Exception as exc:
        logger.exception("AI Assistant error")
        return JSONResponse({"error": str(exc) or "An error occurred"}, status_code=500, headers=CORS_HEADERS)
