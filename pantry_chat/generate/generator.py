# GenerationClient: stateless bridge between a chat session and a model client.
# - accepts any model client (Gemini, OpenAI, Ollama, Echo)
# - validates structured output against the request's schema
# - never raises; backend failures come back as failure results

from __future__ import annotations
import asyncio
import logging
from typing import Optional

from pydantic import ValidationError

from .types import GenerationRequest, GenerationResult, ModelParams, OutputSchema

logger = logging.getLogger(__name__)


class GenerationClient:
    def __init__(self, model_client, params: Optional[ModelParams] = None):
        self.model_client = model_client
        self.params = params or ModelParams()

    @property
    def engine(self) -> str:
        return getattr(self.model_client, "engine", type(self.model_client).__name__)

    def generate(
        self,
        prompt_text: str,
        output_schema: Optional[OutputSchema] = None,
        params: Optional[ModelParams] = None,
    ) -> GenerationResult:
        """Send one prompt to the backend and return a GenerationResult."""
        params = params or self.params
        try:
            raw, meta = self.model_client.generate(prompt_text, params, output_schema)
        except Exception as e:
            logger.exception("Generation failed: engine=%s", type(self.model_client).__name__)
            return GenerationResult.failure(str(e) or type(e).__name__)

        if output_schema is None:
            return GenerationResult.text(raw, meta)

        try:
            items = output_schema.validate_json(raw)
        except ValidationError as e:
            # soft-fail: the diagnostic is shown in place of the answer
            logger.warning("Malformed %s payload: %d error(s)", output_schema.name, e.error_count())
            return GenerationResult.text(f"Could not parse {output_schema.name} data: {e}", meta)
        return GenerationResult.structured(items, meta)

    async def agenerate(
        self,
        request: GenerationRequest,
        params: Optional[ModelParams] = None,
    ) -> GenerationResult:
        """Run generate() in a worker thread so the event loop stays free."""
        return await asyncio.to_thread(self.generate, request.prompt_text, request.output_schema, params)
