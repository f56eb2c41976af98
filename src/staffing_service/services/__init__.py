"""Services wrapping the external text generator."""

from .llm import GeminiClient, OllamaClient, TextGenerator, get_text_generator
from .recommendation import RecommendationService

__all__ = [
    "GeminiClient",
    "OllamaClient",
    "TextGenerator",
    "get_text_generator",
    "RecommendationService",
]
