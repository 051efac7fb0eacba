from openai import OpenAI

import sanitation.config.config as configs


def call_llm(api_key: str, system_prompt: str, message: str) -> str:
    # One request, one answer: no retries and no conversation memory.
    client = OpenAI(api_key=api_key, base_url=configs.AI_GATEWAY_URL, max_retries=0)
    response = client.chat.completions.create(
        model=configs.AI_MODEL,
        messages=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": message},
        ],
    )
    if not response.choices:
        return ""
    return response.choices[0].message.content or ""
