# Shared fakes for the test suite: a scripted model client and screen loaders.

import json

import pytest

from pantry_chat.chat import load_screen
from pantry_chat.generate import GenerationClient
from pantry_chat.settings import settings

FRENCH_TOAST = {
    "recipeName": "French Toast",
    "ingredients": ["eggs", "bread"],
    "instructions": "Dip bread in egg, fry.",
}


class FakeModelClient:
    """Returns a fixed payload (or raises) and records every call."""
    engine = "fake"

    def __init__(self, text="ok", exc=None):
        self.model = "fake-model"
        self.text = text
        self.exc = exc
        self.calls = []

    def generate(self, prompt, params, output_schema=None):
        self.calls.append((prompt, params, output_schema))
        if self.exc is not None:
            raise self.exc
        return self.text, {"engine": "fake", "model": self.model}


@pytest.fixture
def recipes_screen():
    return load_screen(settings.SCREENS_DIR, "recipes")


@pytest.fixture
def story_screen():
    return load_screen(settings.SCREENS_DIR, "story")


@pytest.fixture
def recipe_client():
    return FakeModelClient(text=json.dumps([FRENCH_TOAST]))


@pytest.fixture
def recipe_gen(recipe_client):
    return GenerationClient(model_client=recipe_client)
