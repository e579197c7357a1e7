# Typed data structures shared across the chat and generator modules.

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from pydantic import TypeAdapter


@dataclass(frozen=True)
class Message:
    """Single chat bubble: sent by the user or by the ai."""
    sender: str
    text: str


@dataclass
class ModelParams:
    """LLM parameters per request."""
    model: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


@dataclass(frozen=True)
class OutputSchema:
    """Named structured-output descriptor.

    `json_schema` is what the backend is asked to follow, `type_` is what the
    returned payload is validated against, and `render` turns validated items
    into the text stored on the AI message.
    """
    name: str
    description: str
    json_schema: Dict[str, Any]
    type_: Any
    render: Callable[[Any], str]

    @property
    def adapter(self) -> TypeAdapter:
        return TypeAdapter(self.type_)

    def validate_json(self, raw: str) -> Any:
        return self.adapter.dump_python(self.adapter.validate_json(raw))


@dataclass(frozen=True)
class GenerationRequest:
    prompt_text: str
    output_schema: Optional[OutputSchema] = None


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation call: text, structured JSON or a failure."""
    kind: str
    value: Any = None
    error: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None

    @classmethod
    def text(cls, value: str, meta: Optional[Dict[str, Any]] = None) -> "GenerationResult":
        return cls(kind="text", value=value, meta=meta)

    @classmethod
    def structured(cls, value: List[Any], meta: Optional[Dict[str, Any]] = None) -> "GenerationResult":
        return cls(kind="structured", value=value, meta=meta)

    @classmethod
    def failure(cls, error: str) -> "GenerationResult":
        return cls(kind="failure", error=error)

    @property
    def ok(self) -> bool:
        return self.kind != "failure"
