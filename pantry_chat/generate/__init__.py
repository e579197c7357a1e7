# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import GenerationClient
from .types import Message, ModelParams, OutputSchema, GenerationRequest, GenerationResult
from .schemas import SCHEMAS, RECIPES, format_recipes, parse_recipes
from .errors import GenerationError
from .clients import EchoDevClient, build_model_client

__all__ = [
    "GenerationClient",
    "Message",
    "ModelParams",
    "OutputSchema",
    "GenerationRequest",
    "GenerationResult",
    "SCHEMAS",
    "RECIPES",
    "format_recipes",
    "parse_recipes",
    "GenerationError",
    "EchoDevClient",
    "build_model_client",
]
