"""Text generation clients for the external LLM collaborator."""

import logging
import time
import uuid
from typing import Optional, Protocol

import google.generativeai as genai
import httpx

from ..config import Settings, get_settings
from ..errors import CollaboratorFailure

logger = logging.getLogger("text_generation")

SYSTEM_PROMPT = """
You are an AI assistant that helps HR representatives and managers match employees to work.
Your task is to understand the task requirements and employee skills to make the best matches.

Context: The user is an HR representative or manager looking to staff work with internal talent.
They will describe the requirements, and you should help them find suitable internal candidates.

User Request: {prompt}

Please provide a helpful response that addresses their needs for internal talent matching.
"""


def truncate(text: str, max_length: int = 150) -> str:
    """Shorten text for log output."""
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class TextGenerator(Protocol):
    """Anything that turns a prompt into generated text."""

    async def generate(self, prompt: str) -> str: ...


class OllamaClient:
    """Generate text with a local Ollama server."""

    def __init__(self, base_url: str, model: str, timeout: float = 60.0):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        logger.info(f"Ollama client initialized with model {self.model} at {self.base_url}")

    async def generate(self, prompt: str) -> str:
        """Send a non-streaming generate request and return the response text."""
        request_id = uuid.uuid4().hex[:6]
        full_prompt = SYSTEM_PROMPT.format(prompt=prompt)
        logger.info(f"[{request_id}] Sending {len(full_prompt)} chars to {self.model}: {truncate(prompt)}")

        started = time.monotonic()
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/generate",
                    json={"model": self.model, "prompt": full_prompt, "stream": False},
                )
                response.raise_for_status()
                text = response.json()["response"]
        except (httpx.HTTPError, KeyError, ValueError) as e:
            logger.error(f"[{request_id}] Ollama request failed: {e}")
            raise CollaboratorFailure("Failed to generate response from LLM") from e

        logger.info(
            f"[{request_id}] Received {len(text)} chars after {time.monotonic() - started:.2f}s: "
            f"{truncate(text)}"
        )
        return text


class GeminiClient:
    """Generate text with Google Gemini."""

    def __init__(self, api_key: str, model: str):
        genai.configure(api_key=api_key)
        self.model = genai.GenerativeModel(model)

    async def generate(self, prompt: str) -> str:
        try:
            response = await self.model.generate_content_async(
                SYSTEM_PROMPT.format(prompt=prompt),
                generation_config=genai.GenerationConfig(temperature=0.3),
            )
            return response.text.strip()
        except Exception as e:
            logger.error(f"Gemini request failed: {e}")
            raise CollaboratorFailure("Failed to generate response from LLM") from e


def get_text_generator(settings: Optional[Settings] = None) -> TextGenerator:
    """Build the configured text generator."""
    settings = settings or get_settings()
    provider = settings.llm_provider.lower()

    if provider == "gemini":
        if not settings.gemini_api_key:
            raise ValueError("Gemini API key not configured")
        return GeminiClient(settings.gemini_api_key, settings.gemini_model)
    if provider == "ollama":
        return OllamaClient(
            settings.ollama_api_url,
            settings.ollama_model,
            timeout=settings.llm_timeout_seconds,
        )
    raise ValueError(f"Unknown LLM provider: {settings.llm_provider}")
