# Dummy model client for local dev and testing without API calls.

import json
from typing import Any, Dict, Optional, Tuple

from ..types import ModelParams, OutputSchema


class EchoDevClient:
    engine = "echo"

    def __init__(self):
        self.model = "echo-dev"

    def generate(
        self,
        prompt: str,
        params: ModelParams,
        output_schema: Optional[OutputSchema] = None,
    ) -> Tuple[str, Dict[str, Any]]:
        meta = {"engine": "echo", "model": "echo-dev", "temp": params.temperature, "max_tokens": params.max_tokens}
        if output_schema is not None:
            # one item that satisfies the recipe-shaped schema
            item = {"recipeName": "[ECHO RECIPE]", "ingredients": [prompt], "instructions": "Echoed prompt."}
            return json.dumps([item]), meta
        return f"[ECHO RESPONSE]\n{prompt or '(no user input)'}", meta
