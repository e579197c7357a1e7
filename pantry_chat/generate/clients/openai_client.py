# Client for OpenAI Chat Completions API.
# Follows the same interface as GeminiClient.

import json
from typing import Any, Dict, Optional, Tuple

from openai import OpenAI

from ..errors import GenerationError
from ..types import ModelParams, OutputSchema


class OpenAIClient:
    engine = "openai"

    def __init__(self, api_key: Optional[str] = None, model: str = "gpt-4o-mini"):
        self.model = model
        self.client = OpenAI(api_key=api_key)

    def generate(
        self,
        prompt: str,
        params: ModelParams,
        output_schema: Optional[OutputSchema] = None,
    ) -> Tuple[str, Dict[str, Any]]:
        model = params.model or self.model
        kwargs: Dict[str, Any] = {}
        if output_schema is not None:
            # response_format needs an object at the root
            kwargs["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": output_schema.name,
                    "schema": {
                        "type": "object",
                        "properties": {"items": output_schema.json_schema},
                        "required": ["items"],
                    },
                },
            }
        resp = self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=0.3 if params.temperature is None else params.temperature,
            max_tokens=params.max_tokens or 1000,
            **kwargs,
        )
        if not resp.choices:
            raise GenerationError("openai")
        text = (resp.choices[0].message.content or "").strip()
        if output_schema is not None:
            try:
                text = json.dumps(json.loads(text)["items"])
            except (ValueError, KeyError, TypeError):
                # leave the raw text for the caller to report
                pass
        return text, {"engine": "openai", "model": model}
