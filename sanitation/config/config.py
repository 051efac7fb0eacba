import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[2] / ".env")


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]

# Events created by citizens stay out of public listings until staff approve them.
EVENTS_REQUIRE_APPROVAL = _flag("EVENTS_REQUIRE_APPROVAL", "1")

CITY_NAME = os.getenv("CITY_NAME", "Nagpur")
INITIATIVE_NAME = os.getenv("INITIATIVE_NAME", "Mission Clean Nagpur (Swachhata Sewa)")

AI_GATEWAY_URL = os.getenv("AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1")
AI_MODEL = os.getenv("AI_MODEL", "google/gemini-3-flash-preview")
AI_FALLBACK_ANSWER = "I'm unable to provide an answer right now."
AI_BUSY_MESSAGE = "Service is busy. Please try again in a moment."

AUTH_URL = os.getenv("AUTH_URL", "http://localhost:9999")
AUTH_API_KEY = os.getenv("AUTH_API_KEY", "")
AUTH_TIMEOUT = float(os.getenv("AUTH_TIMEOUT", "10"))

STORAGE_ENDPOINT_URL = os.getenv("STORAGE_ENDPOINT_URL") or None
STORAGE_ACCESS_KEY = os.getenv("STORAGE_ACCESS_KEY", "")
STORAGE_SECRET_KEY = os.getenv("STORAGE_SECRET_KEY", "")
STORAGE_REGION = os.getenv("STORAGE_REGION") or None
STORAGE_PUBLIC_URL = os.getenv("STORAGE_PUBLIC_URL", "")
COMPLAINT_IMAGES_BUCKET = os.getenv("COMPLAINT_IMAGES_BUCKET", "complaint-images")
EMPLOYEE_PHOTOS_BUCKET = os.getenv("EMPLOYEE_PHOTOS_BUCKET", "employee-photos")
MAX_UPLOAD_BYTES = 5 * 1024 * 1024

COMPLAINT_STATUSES = ("pending", "in_progress", "resolved", "rejected")
ROLES = ("citizen", "employee", "admin")
REGISTRATION_STATUS = "registered"


def ai_gateway_api_key() -> str | None:
    # Read per call so a missing credential is reported on the request that needs it.
    return os.getenv("AI_GATEWAY_API_KEY") or None
