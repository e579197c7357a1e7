# pantry_chat/settings.py
import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Pantry Chat")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # model backend: gemini | openai | ollama | echo (empty = pick by key)
    MODEL_PROVIDER: str | None = None

    # secrets, read once at startup
    GEMINI_API_KEY: str | None = None
    OPENAI_API_KEY: str | None = None

    GEMINI_MODEL: str = Field(default="gemini-1.5-pro")
    OPENAI_MODEL: str = Field(default="gpt-4o-mini")
    OLLAMA_HOST: str = Field(default="http://localhost:11434")
    OLLAMA_MODEL: str = Field(default="mistral:7b-instruct")

    # one <name>.yaml per screen
    SCREENS_DIR: str = Field(default=str(Path(__file__).resolve().parent / "screens"))

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
