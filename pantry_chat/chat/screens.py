# Screen profiles: one YAML file per chat screen under settings.SCREENS_DIR.

from __future__ import annotations
import os
from functools import lru_cache
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field

from ..generate import SCHEMAS, ModelParams, OutputSchema


class ScreenNotFound(LookupError):
    pass


class GenerateConfig(BaseModel):
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    # engine name -> model id, e.g. {"gemini": "gemini-1.5-flash"}
    models: Dict[str, str] = Field(default_factory=dict)


class ScreenConfig(BaseModel):
    key: str
    title: str
    description: str = ""
    prompt_template: str = "{input}"
    output_schema: Optional[str] = None
    fallback_text: str = "Sorry, I couldn't generate a response."
    loading_text: str = "AI is typing..."
    placeholder: str = ""
    submit_label: str = "Send"
    generate: GenerateConfig = Field(default_factory=GenerateConfig)

    @property
    def schema_def(self) -> Optional[OutputSchema]:
        if self.output_schema is None:
            return None
        return SCHEMAS[self.output_schema]

    def build_prompt(self, text: str) -> str:
        return self.prompt_template.replace("{input}", text)

    def model_params(self, engine: str) -> ModelParams:
        return ModelParams(
            model=self.generate.models.get(engine),
            temperature=self.generate.temperature,
            max_tokens=self.generate.max_tokens,
        )


@lru_cache(maxsize=16)
def load_screen(screens_dir: str, key: str) -> ScreenConfig:
    path = os.path.join(screens_dir, f"{key}.yaml")
    if not os.path.exists(path):
        raise ScreenNotFound(f"Screen config not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        cfg = ScreenConfig(key=key, **(yaml.safe_load(f) or {}))
    if cfg.output_schema is not None and cfg.output_schema not in SCHEMAS:
        raise ValueError(f"Screen {key!r} names unknown output schema {cfg.output_schema!r}")
    return cfg


def list_screens(screens_dir: str) -> List[ScreenConfig]:
    names = sorted(n[:-5] for n in os.listdir(screens_dir) if n.endswith(".yaml"))
    return [load_screen(screens_dir, n) for n in names]
