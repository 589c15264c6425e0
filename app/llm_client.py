"""
LLM client abstraction layer to support multiple providers.

This module provides a unified interface for different LLM providers,
so the AI gateway can talk to OpenAI or a local Ollama server (or a stub
in tests) through the same `chat` call.
"""

from __future__ import annotations
from typing import List, Dict, Any
from abc import ABC, abstractmethod

import ollama
from openai import OpenAI

from config import Settings


class LLMResponse:
    """Unified response object for LLM responses."""

    def __init__(self, content: str | None):
        self.message = MessageContent(content)


class MessageContent:
    """Message content wrapper."""

    def __init__(self, content: str | None):
        self.content = content


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    def chat(
        self,
        model: str,
        messages: List[Dict[str, str]],
        response_schema: Dict[str, Any] | None = None,
    ) -> LLMResponse:
        """Send a chat request; constrain the reply to `response_schema` if given."""
        pass


class OllamaClient(LLMClient):
    """Ollama client implementation."""

    def __init__(self, host: str):
        self.client = ollama.Client(host=host)

    def chat(self, model, messages, response_schema=None) -> LLMResponse:
        """Send a chat request to Ollama."""
        response = self.client.chat(model=model, messages=messages, format=response_schema)
        return LLMResponse(response.message.content)


class OpenAIClient(LLMClient):
    """OpenAI client implementation."""

    def __init__(self, api_key: str, temperature: float = 0.7, max_tokens: int = 4096):
        if not api_key:
            raise ValueError("OpenAI API key is required. Set OPENAI_API_KEY environment variable.")
        self.client = OpenAI(api_key=api_key)
        self.temperature = temperature
        self.max_tokens = max_tokens

    def chat(self, model, messages, response_schema=None) -> LLMResponse:
        """Send a chat request to OpenAI."""
        params: Dict[str, Any] = {
            "model": model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
        if response_schema is not None:
            params["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": response_schema.get("title", "response"),
                    "schema": response_schema,
                    "strict": True,
                },
            }

        response = self.client.chat.completions.create(**params)
        return LLMResponse(response.choices[0].message.content)


def get_llm_client(settings: Settings) -> LLMClient:
    """Factory function to get the appropriate LLM client based on configuration."""
    if settings.provider == "openai":
        return OpenAIClient(
            settings.api_key,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
        )
    elif settings.provider == "ollama":
        return OllamaClient(settings.ollama_base_url)
    else:
        raise ValueError(f"Unsupported LLM provider: {settings.provider}")
