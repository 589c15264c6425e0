"""
Configuration settings for the ResuMatch application.

Settings come from the environment (optionally via a .env file). You can
switch between LLM providers by changing LLM_PROVIDER.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import logging
import os
from dataclasses import dataclass

# Set to "ollama" or "openai"
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai")

# For Ollama: use local models like "llama3.1:8b", "qwen2.5:7b", etc.
# For OpenAI: any model with structured output support, e.g. "gpt-4o-mini", "gpt-4o"
DEFAULT_MODEL = {
    "ollama": "llama3.1:8b",
    "openai": "gpt-4o-mini"  # Good balance of performance and cost
}

OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")


def get_model_for_provider(provider: str = None) -> str:
    """Get the default model for the specified provider."""
    provider = provider or LLM_PROVIDER
    return DEFAULT_MODEL.get(provider, "gpt-4o-mini")


@dataclass(frozen=True)
class Settings:
    provider: str = "openai"
    model: str = "gpt-4o-mini"
    api_key: str | None = None
    ollama_base_url: str = "http://localhost:11434"
    temperature: float = 0.7
    max_tokens: int = 4096
    log_level: str = "INFO"

    @property
    def has_credential(self) -> bool:
        """Local Ollama needs no key; every hosted provider does."""
        if self.provider == "ollama":
            return True
        return bool(self.api_key)


def load_settings() -> Settings:
    provider = os.getenv("LLM_PROVIDER", LLM_PROVIDER).lower()
    return Settings(
        provider=provider,
        model=os.getenv("LLM_MODEL") or get_model_for_provider(provider),
        api_key=os.getenv("OPENAI_API_KEY") or None,
        ollama_base_url=os.getenv("OLLAMA_BASE_URL", OLLAMA_BASE_URL),
        temperature=float(os.getenv("LLM_TEMPERATURE", "0.7")),
        max_tokens=int(os.getenv("LLM_MAX_TOKENS", "4096")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # openai/httpx log every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
