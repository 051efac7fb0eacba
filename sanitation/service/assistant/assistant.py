import asyncio
import logging

import openai

import sanitation.config.config as configs
from sanitation.client.llm.gateway import call_llm
from sanitation.errors import ConfigurationError, RateLimitedError, UpstreamError
from sanitation.model.assistant.assistant_request import AssistantRequest
from sanitation.model.assistant.assistant_response import AssistantResponse

logger = logging.getLogger(__name__)

DEFAULT_TOPIC = "general environmental awareness"


def build_system_prompt(topic: str | None) -> str:
    return (
        f"You are an AI assistant for {configs.INITIATIVE_NAME}, a municipal cleanliness "
        "and environmental awareness initiative.\n\n"
        "Your role is to:\n"
        "- Provide accurate information about waste management, pollution prevention, and cleanliness\n"
        f"- Give practical tips for citizens of {configs.CITY_NAME}\n"
        "- Explain environmental issues in simple terms\n"
        "- Suggest actions citizens can take to improve their environment\n"
        f"- Provide information relevant to the local context, especially {configs.CITY_NAME} city\n\n"
        "Guidelines:\n"
        "- Keep responses concise (2-3 paragraphs max)\n"
        "- Use simple language\n"
        "- Include actionable tips when relevant\n"
        "- Be encouraging and positive\n"
        "- If asked about non-environmental topics, politely redirect to your expertise area\n\n"
        f"Topic context: {topic or DEFAULT_TOPIC}"
    )


async def ai_assistant_service(req: AssistantRequest) -> AssistantResponse:
    api_key = configs.ai_gateway_api_key()
    if not api_key:
        logger.error("AI_GATEWAY_API_KEY is not configured")
        raise ConfigurationError("AI_GATEWAY_API_KEY is not configured")

    system_prompt = build_system_prompt(req.topic)
    try:
        answer = await asyncio.to_thread(call_llm, api_key, system_prompt, req.question)
    except openai.RateLimitError as exc:
        logger.warning("AI gateway rate limited: %s", exc)
        raise RateLimitedError(configs.AI_BUSY_MESSAGE) from exc
    except openai.APIStatusError as exc:
        logger.error("AI gateway error status=%s", exc.status_code)
        raise UpstreamError(f"AI gateway error: {exc.status_code}") from exc

    return AssistantResponse(answer=answer or configs.AI_FALLBACK_ANSWER)
