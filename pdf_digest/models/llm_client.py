from dataclasses import dataclass
from typing import Any, Dict
import json
import logging

from openai import OpenAI, OpenAIError

from pdf_digest.errors import LLMTransportError, SummaryDecodeError

logger = logging.getLogger(__name__)


@dataclass
class LLMConfig:
    model: str
    temperature: float | None = None
    api_key: str | None = None



def call_llm(
    system_prompt: str,
    user_prompt: str,
    cfg: LLMConfig,
    json_mode: bool = False,
    client: OpenAI | None = None,
) -> str:

    # Build request payload
    request: Dict[str, Any] = {
        "model": cfg.model,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt}
        ],
    }

    if cfg.temperature is not None:
        request["temperature"] = cfg.temperature

    # JSON mode enabled if requested
    if json_mode:
        request["response_format"] = {"type": "json_object"}

    # Send request; the client enforces its own retries and timeouts
    try:
        if client is None:
            client = OpenAI(api_key=cfg.api_key)
        response = client.chat.completions.create(**request)
    except OpenAIError as exc:
        raise LLMTransportError(f"API error: {exc}") from exc

    if not response.choices:
        raise LLMTransportError("API returned no choices")

    content = response.choices[0].message.content
    if content is None:
        raise LLMTransportError("API returned an empty message")

    return content


# Strict JSON parse; the reply must be a single JSON object
def parse_json_or_throw(text: str) -> Dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SummaryDecodeError(f"LLM did not return valid JSON: {exc}\nOutput:\n{text}") from exc

    if not isinstance(data, dict):
        raise SummaryDecodeError(
            f"LLM returned JSON {type(data).__name__}, expected an object.\nOutput:\n{text}"
        )
    return data
