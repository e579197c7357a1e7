# Client for Ollama local inference.
# Accepts a model name and exposes generate(prompt, params, output_schema).

import os
from typing import Any, Dict, Optional, Tuple

import requests

from ..types import ModelParams, OutputSchema

OLLAMA_HOST = os.getenv("OLLAMA_HOST", "http://localhost:11434")


class OllamaClient:
    engine = "ollama"

    def __init__(self, model: str = "mistral:7b-instruct", host: str = OLLAMA_HOST):
        self.model = model
        self.host = host

    def generate(
        self,
        prompt: str,
        params: ModelParams,
        output_schema: Optional[OutputSchema] = None,
    ) -> Tuple[str, Dict[str, Any]]:
        model = params.model or self.model
        payload: Dict[str, Any] = {
            "model": model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": float(0.3 if params.temperature is None else params.temperature),
                "num_predict": int(params.max_tokens or 1000),
            },
        }
        if output_schema is not None:
            payload["format"] = output_schema.json_schema
        resp = requests.post(f"{self.host}/api/generate", json=payload)
        resp.raise_for_status()
        data = resp.json()
        return data.get("response", "").strip(), {"engine": "ollama", "model": model}
