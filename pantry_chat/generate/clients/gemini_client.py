# Client for the Google Gemini API (google-genai).
# Same interface as the other clients: generate(prompt, params, output_schema).

from typing import Any, Dict, Optional, Tuple

from google import genai
from google.genai import types

from ..errors import GenerationError
from ..types import ModelParams, OutputSchema


class GeminiClient:
    engine = "gemini"

    def __init__(self, api_key: str, model: str = "gemini-1.5-pro"):
        self.model = model
        self.client = genai.Client(api_key=api_key)

    def generate(
        self,
        prompt: str,
        params: ModelParams,
        output_schema: Optional[OutputSchema] = None,
    ) -> Tuple[str, Dict[str, Any]]:
        model = params.model or self.model
        extra: Dict[str, Any] = {}
        if output_schema is not None:
            # the SDK derives its own Schema from the pydantic type
            extra = {"response_mime_type": "application/json", "response_schema": output_schema.type_}
        config = types.GenerateContentConfig(
            temperature=params.temperature,
            max_output_tokens=params.max_tokens,
            **extra,
        )

        resp = self.client.models.generate_content(model=model, contents=prompt, config=config)
        text = resp.text if hasattr(resp, "text") else None
        if not text:
            raise GenerationError("gemini")
        return text, {"engine": "gemini", "model": model}
